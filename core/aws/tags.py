"""
core/aws/tags.py - AWS 태그 변환 헬퍼

서비스마다 태그 형식이 조금씩 다릅니다.
    - EC2/IAM/CloudFormation: [{"Key": ..., "Value": ...}]
    - Compute Optimizer:      [{"key": ..., "value": ...}]
    - SQS/Lambda:             {"key": "value"}
모두 dict[str, str]로 통일합니다.
"""

from __future__ import annotations

from typing import Any


def tags_to_dict(tags: Any, exclude_aws: bool = False) -> dict[str, str]:
    """AWS 태그 목록을 dict로 변환

    Args:
        tags: 태그 리스트 또는 dict (None 허용)
        exclude_aws: True면 aws: 접두어 태그 제외

    Returns:
        {"Name": "my-resource", ...}
    """
    if not tags:
        return {}

    if isinstance(tags, dict):
        items = [(str(k), "" if v is None else str(v)) for k, v in tags.items()]
    else:
        items = []
        for tag in tags:
            key = tag.get("Key", tag.get("key"))
            if key is None:
                continue
            value = tag.get("Value", tag.get("value"))
            items.append((str(key), "" if value is None else str(value)))

    return {k: v for k, v in items if not (exclude_aws and k.startswith("aws:"))}


def tag_value(tags: dict[str, str], key: str, default: str = "") -> str:
    """태그 dict에서 특정 키 값 추출"""
    return tags.get(key, default) if tags else default


def name_from_tags(tags: dict[str, str], fallback: str = "") -> str:
    """Name 태그 값 (없으면 fallback)"""
    return tag_value(tags, "Name") or fallback
