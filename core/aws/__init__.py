"""
core/aws - AWS SDK 공용 헬퍼

boto3 client 생성, 페이지네이션, 태그/ARN 파싱, 서브프로세스 환경 구성을 제공합니다.
"""

from .arn import ParsedArn, arn_suffix, parse_arn
from .client import create_session, get_client
from .env import build_subprocess_env
from .paginate import collect_paginator, paginate
from .tags import name_from_tags, tag_value, tags_to_dict

__all__: list[str] = [
    "ParsedArn",
    "arn_suffix",
    "parse_arn",
    "create_session",
    "get_client",
    "build_subprocess_env",
    "collect_paginator",
    "paginate",
    "name_from_tags",
    "tag_value",
    "tags_to_dict",
]
