"""
tests/core/action/test_action_registry.py - 액션 레지스트리 테스트
"""

import pytest

from core.action import (
    Action,
    ActionRegistry,
    ActionType,
    find_action,
    get_action_registry,
    reset_action_registry,
    success_result,
)
from core.exceptions import RegistryClosedError

STOP = Action(name="Stop", shortcut="S", type=ActionType.API, operation="StopInstances", filter=lambda r: r == "running")
START = Action(name="Start", shortcut="R", type=ActionType.API, operation="StartInstances", filter=lambda r: r == "stopped")
SHELL = Action(name="Shell", shortcut="s", type=ActionType.EXEC, command="echo ${ID}")


def _executor(ctx, action, resource):
    return success_result("ok")


class TestActionRegistry:
    """ActionRegistry 테스트"""

    def test_register_and_get(self):
        registry = ActionRegistry()
        registry.register("ec2", "instances", [STOP, START])

        assert registry.get("ec2", "instances") == [STOP, START]
        assert registry.get("ec2", "volumes") is None

    def test_get_returns_copy(self):
        """반환된 목록을 수정해도 레지스트리는 그대로"""
        registry = ActionRegistry()
        registry.register("ec2", "instances", [STOP])
        registry.get("ec2", "instances").append(START)
        assert registry.get("ec2", "instances") == [STOP]

    def test_executor(self):
        registry = ActionRegistry()
        registry.register_executor("ec2", "instances", _executor)
        assert registry.get_executor("ec2", "instances") is _executor
        assert registry.get_executor("sqs", "queues") is None

    def test_actions_for_applies_filter(self):
        registry = ActionRegistry()
        registry.register("ec2", "instances", [STOP, START, SHELL])

        assert registry.actions_for("ec2", "instances", "running") == [STOP, SHELL]
        assert registry.actions_for("ec2", "instances", "stopped") == [START, SHELL]
        assert registry.actions_for("sqs", "queues", "x") == []

    def test_closed(self):
        """close 이후 등록 불가, 조회는 가능"""
        registry = ActionRegistry()
        registry.register("ec2", "instances", [STOP])
        registry.close()

        assert registry.closed
        with pytest.raises(RegistryClosedError):
            registry.register("sqs", "queues", [SHELL])
        with pytest.raises(RegistryClosedError):
            registry.register_executor("sqs", "queues", _executor)
        assert registry.get("ec2", "instances") == [STOP]


class TestFindAction:
    """find_action 테스트"""

    def test_shortcut_case_sensitive(self):
        """'S'와 's'는 다른 액션"""
        actions = [STOP, SHELL]
        assert find_action(actions, "S") is STOP
        assert find_action(actions, "s") is SHELL

    def test_by_name(self):
        assert find_action([STOP, START], "start") is START

    def test_missing(self):
        assert find_action([STOP], "z") is None


class TestGlobalActionRegistry:
    """전역 액션 레지스트리 테스트"""

    def test_singleton_and_reset(self):
        first = get_action_registry()
        assert get_action_registry() is first
        reset_action_registry()
        assert get_action_registry() is not first
