"""
core/action/readonly.py - 읽기 전용 모드 허용 목록

읽기 전용 모드에서는 여기 적힌 액션만 실행됩니다. 나머지는 모두 차단됩니다.
새로 허용할 액션은 이 파일의 목록에만 추가합니다.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any

from .types import ACTION_NAME_LOGIN, ACTION_NAME_SSO_LOGIN, ActionType

# API operation 이름 기준
READ_ONLY_ALLOWLIST = MappingProxyType(
    {
        "DetectStackDrift": True,
        "InvokeFunctionDryRun": True,
    }
)

# exec 액션 표시 이름 기준
READ_ONLY_EXEC_ALLOWLIST = MappingProxyType(
    {
        ACTION_NAME_SSO_LOGIN: True,
        ACTION_NAME_LOGIN: True,
    }
)


def is_allowed_in_read_only(action: Any) -> bool:
    """읽기 전용 모드에서 실행 가능한 액션인지"""
    if action.type == ActionType.EXEC:
        return READ_ONLY_EXEC_ALLOWLIST.get(action.name, False)
    if action.type == ActionType.API:
        return READ_ONLY_ALLOWLIST.get(action.operation, False)
    return False


def is_exec_allowed_in_read_only(action_name: str) -> bool:
    return READ_ONLY_EXEC_ALLOWLIST.get(action_name, False)
