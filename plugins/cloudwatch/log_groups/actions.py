"""
plugins/cloudwatch/log_groups/actions.py - 로그 그룹 액션
"""

from __future__ import annotations

from core.action import (
    Action,
    ActionResult,
    ActionType,
    ConfirmLevel,
    fail_resultf,
    success_result,
    unknown_operation_result,
)
from core.dao import unwrap_resource
from core.exceptions import BrowserError

from .dao import LogGroupDAO

ACTIONS = [
    Action(
        name="Tail Logs",
        shortcut="t",
        type=ActionType.EXEC,
        command='aws logs tail "${ID}" --since 1h --follow',
    ),
    Action(
        name="View Recent (1h)",
        shortcut="1",
        type=ActionType.EXEC,
        command='aws logs tail "${ID}" --since 1h | less -R',
    ),
    Action(
        name="View Recent (24h)",
        shortcut="2",
        type=ActionType.EXEC,
        command='aws logs tail "${ID}" --since 24h | less -R',
    ),
    Action(
        name="Delete",
        shortcut="D",
        type=ActionType.API,
        operation="DeleteLogGroup",
        confirm=ConfirmLevel.DANGEROUS,
    ),
]


def execute_log_group_action(ctx, action: Action, resource) -> ActionResult:
    """로그 그룹 API 액션 executor"""
    if action.operation != "DeleteLogGroup":
        return unknown_operation_result(action.operation)

    log_group_name = unwrap_resource(resource).id
    try:
        LogGroupDAO(ctx).delete(ctx, log_group_name)
    except BrowserError as e:
        return fail_resultf(e, "delete log group %s", log_group_name)
    return success_result(f"Deleted log group {log_group_name}")
