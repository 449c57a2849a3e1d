"""
core/aws/env.py - exec 액션용 서브프로세스 환경 구성

프로파일을 전환한 뒤에도 자식 프로세스(aws cli 등)가 같은 자격 증명/리전을 쓰도록
AWS_PROFILE, AWS_REGION, AWS_DEFAULT_REGION을 상속이 아닌 명시적 값으로 설정합니다.
"""

from __future__ import annotations

import os
from collections.abc import Mapping

AWS_ENV_KEYS = ("AWS_PROFILE", "AWS_REGION", "AWS_DEFAULT_REGION")


def build_subprocess_env(
    profile: str | None,
    region: str | None,
    base: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """현재 프로파일/리전이 반영된 환경변수 dict 생성

    Args:
        profile: AWS 프로파일 (None이면 AWS_PROFILE 제거)
        region: AWS 리전 (None이면 리전 변수 제거)
        base: 기반 환경 (기본: os.environ)

    Returns:
        subprocess에 전달할 env
    """
    env = dict(os.environ if base is None else base)

    for key in AWS_ENV_KEYS:
        env.pop(key, None)

    if profile:
        env["AWS_PROFILE"] = profile
    if region:
        env["AWS_REGION"] = region
        env["AWS_DEFAULT_REGION"] = region

    return env
