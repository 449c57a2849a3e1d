"""
core/action - 액션 레지스트리와 디스패치

Example:
    from core.action import Action, ActionType, ConfirmLevel, execute_with_dao

    stop = Action(name="Stop", shortcut="S", type=ActionType.API,
                  operation="StopInstances", confirm=ConfirmLevel.SIMPLE)
    result = execute_with_dao(ctx, stop, instance, "ec2", "instances")
"""

from .confirm import EMPTY_TOKEN_CONFIRMATION, MIN_CONFIRM_CHARS, confirm_matches, confirm_suffix
from .executor import CommandFailedError, execute_exec, execute_with_dao, precheck_action, run_shell
from .expand import (
    SHELL_METACHARACTERS,
    HasClusterArn,
    HasContainers,
    HasLogGroup,
    HasPrivateIP,
    build_variables,
    contains_shell_metachar,
    expand_variables,
)
from .readonly import (
    READ_ONLY_ALLOWLIST,
    READ_ONLY_EXEC_ALLOWLIST,
    is_allowed_in_read_only,
    is_exec_allowed_in_read_only,
)
from .registry import ActionRegistry, find_action, get_action_registry, reset_action_registry
from .types import (
    ACTION_NAME_LOGIN,
    ACTION_NAME_SSO_LOGIN,
    Action,
    ActionResult,
    ActionType,
    ConfirmLevel,
    ExecutorFunc,
    confirm_token_id,
    confirm_token_name,
    fail_result,
    fail_resultf,
    invalid_resource_result,
    success_result,
    success_result_with_follow_up,
    unknown_operation_result,
)

__all__: list[str] = [
    "EMPTY_TOKEN_CONFIRMATION",
    "MIN_CONFIRM_CHARS",
    "confirm_matches",
    "confirm_suffix",
    "CommandFailedError",
    "execute_exec",
    "execute_with_dao",
    "precheck_action",
    "run_shell",
    "SHELL_METACHARACTERS",
    "HasClusterArn",
    "HasContainers",
    "HasLogGroup",
    "HasPrivateIP",
    "build_variables",
    "contains_shell_metachar",
    "expand_variables",
    "READ_ONLY_ALLOWLIST",
    "READ_ONLY_EXEC_ALLOWLIST",
    "is_allowed_in_read_only",
    "is_exec_allowed_in_read_only",
    "ActionRegistry",
    "find_action",
    "get_action_registry",
    "reset_action_registry",
    "ACTION_NAME_LOGIN",
    "ACTION_NAME_SSO_LOGIN",
    "Action",
    "ActionResult",
    "ActionType",
    "ConfirmLevel",
    "ExecutorFunc",
    "confirm_token_id",
    "confirm_token_name",
    "fail_result",
    "fail_resultf",
    "invalid_resource_result",
    "success_result",
    "success_result_with_follow_up",
    "unknown_operation_result",
]
