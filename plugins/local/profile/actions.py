"""
plugins/local/profile/actions.py - 프로파일 로그인 액션

두 액션 모두 자격 증명 파일을 직접 갱신하므로 AWS 환경변수를 주입하지 않으며,
읽기 전용 모드에서도 실행할 수 있습니다.
"""

from __future__ import annotations

from core.action import ACTION_NAME_LOGIN, ACTION_NAME_SSO_LOGIN, Action, ActionType
from core.dao import unwrap_resource


def _is_sso(resource) -> bool:
    return unwrap_resource(resource).is_sso


def _is_named(resource) -> bool:
    return not unwrap_resource(resource).is_special


ACTIONS = [
    Action(
        name=ACTION_NAME_SSO_LOGIN,
        shortcut="l",
        type=ActionType.EXEC,
        command="aws sso login --profile ${NAME}",
        skip_aws_env=True,
        filter=_is_sso,
    ),
    Action(
        name=ACTION_NAME_LOGIN,
        shortcut="L",
        type=ActionType.EXEC,
        command="aws login --remote --profile ${NAME}",
        skip_aws_env=True,
        filter=_is_named,
    ),
]
