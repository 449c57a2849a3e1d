"""
plugins/cloudwatch/log_streams/actions.py - 로그 스트림 액션
"""

from __future__ import annotations

from core.action import (
    Action,
    ActionResult,
    ActionType,
    ConfirmLevel,
    fail_resultf,
    invalid_resource_result,
    success_result,
    unknown_operation_result,
)
from core.dao import unwrap_resource
from core.exceptions import BrowserError

from .dao import LOG_GROUP_FILTER, LogStreamDAO, LogStreamResource

ACTIONS = [
    Action(
        name="Tail",
        shortcut="t",
        type=ActionType.EXEC,
        command="aws logs tail ${LOG_GROUP} --log-stream-names ${NAME} --follow",
    ),
    Action(
        name="Delete",
        shortcut="D",
        type=ActionType.API,
        operation="DeleteLogStream",
        confirm=ConfirmLevel.DANGEROUS,
    ),
]


def execute_log_stream_action(ctx, action: Action, resource) -> ActionResult:
    """로그 스트림 API 액션 executor"""
    stream = unwrap_resource(resource)
    if not isinstance(stream, LogStreamResource):
        return invalid_resource_result("LogStreamResource", stream)

    if action.operation != "DeleteLogStream":
        return unknown_operation_result(action.operation)

    stream_ctx = ctx.with_filter(LOG_GROUP_FILTER, stream.log_group_name)
    try:
        LogStreamDAO(stream_ctx).delete(stream_ctx, stream.name)
    except BrowserError as e:
        return fail_resultf(e, "delete log stream %s", stream.name)
    return success_result(f"Deleted log stream {stream.name}")
