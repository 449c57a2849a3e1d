"""
tests/core/action/test_action_readonly.py - 읽기 전용 허용 목록 테스트
"""

import pytest

from core.action import (
    ACTION_NAME_LOGIN,
    ACTION_NAME_SSO_LOGIN,
    READ_ONLY_ALLOWLIST,
    Action,
    ActionType,
    is_allowed_in_read_only,
    is_exec_allowed_in_read_only,
)


class TestReadOnlyAllowlist:
    """허용 목록 판정 테스트"""

    @pytest.mark.parametrize("operation", ["DetectStackDrift", "InvokeFunctionDryRun"])
    def test_allowed_api(self, operation):
        action = Action(name="x", shortcut="x", type=ActionType.API, operation=operation)
        assert is_allowed_in_read_only(action)

    @pytest.mark.parametrize("operation", ["StopInstances", "DeleteStack", "PurgeQueue", ""])
    def test_blocked_api(self, operation):
        action = Action(name="x", shortcut="x", type=ActionType.API, operation=operation)
        assert not is_allowed_in_read_only(action)

    def test_exec_by_name(self):
        """exec 액션은 표시 이름으로 판정"""
        sso = Action(name=ACTION_NAME_SSO_LOGIN, shortcut="l", type=ActionType.EXEC, command="aws sso login")
        ssm = Action(name="SSM Session", shortcut="x", type=ActionType.EXEC, command="aws ssm start-session")

        assert is_allowed_in_read_only(sso)
        assert not is_allowed_in_read_only(ssm)
        assert is_exec_allowed_in_read_only(ACTION_NAME_LOGIN)
        assert not is_exec_allowed_in_read_only("Tail Logs")

    def test_exec_name_not_matched_as_operation(self):
        """API 목록의 이름을 exec 이름으로 써도 허용되지 않음"""
        action = Action(name="DetectStackDrift", shortcut="d", type=ActionType.EXEC, command="true")
        assert not is_allowed_in_read_only(action)

    def test_allowlist_immutable(self):
        with pytest.raises(TypeError):
            READ_ONLY_ALLOWLIST["StopInstances"] = True
