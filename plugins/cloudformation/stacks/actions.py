"""
plugins/cloudformation/stacks/actions.py - CloudFormation 스택 액션

Detect Drift는 스택을 변경하지 않으므로 읽기 전용 모드에서도 허용됩니다.
"""

from __future__ import annotations

from botocore.exceptions import ClientError

from core.action import (
    Action,
    ActionResult,
    ActionType,
    ConfirmLevel,
    confirm_token_name,
    fail_resultf,
    success_result,
    unknown_operation_result,
)
from core.dao import unwrap_resource
from core.exceptions import BrowserError

from .dao import StackDAO

ACTIONS = [
    Action(
        name="Delete",
        shortcut="D",
        type=ActionType.API,
        operation="DeleteStack",
        confirm=ConfirmLevel.DANGEROUS,
        confirm_token=confirm_token_name,
    ),
    Action(
        name="Detect Drift",
        shortcut="d",
        type=ActionType.API,
        operation="DetectStackDrift",
    ),
    Action(
        name="Cancel Update",
        shortcut="C",
        type=ActionType.API,
        operation="CancelUpdateStack",
        confirm=ConfirmLevel.SIMPLE,
        filter=lambda r: r.status == "UPDATE_IN_PROGRESS",
    ),
]


def execute_stack_action(ctx, action: Action, resource) -> ActionResult:
    """CloudFormation 스택 API 액션 executor

    삭제 대상은 StackId 대신 StackName으로 지정합니다. 이미 없는 스택의 삭제는 성공입니다.
    """
    stack_name = unwrap_resource(resource).name
    client = ctx.client("cloudformation")

    if action.operation == "DeleteStack":
        try:
            StackDAO(ctx).delete(ctx, stack_name)
        except BrowserError as e:
            return fail_resultf(e, "delete stack %s", stack_name)
        return success_result(f"Delete initiated for stack {stack_name}")

    if action.operation == "DetectStackDrift":
        try:
            response = client.detect_stack_drift(StackName=stack_name)
        except ClientError as e:
            return fail_resultf(e, "detect stack drift %s", stack_name)
        detection_id = response.get("StackDriftDetectionId", "")
        return success_result(f"Drift detection started for {stack_name} (ID: {detection_id})")

    if action.operation == "CancelUpdateStack":
        try:
            client.cancel_update_stack(StackName=stack_name)
        except ClientError as e:
            return fail_resultf(e, "cancel update stack %s", stack_name)
        return success_result(f"Update cancelled for stack {stack_name}")

    return unknown_operation_result(action.operation)
