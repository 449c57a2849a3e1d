"""
plugins/ec2/instances/actions.py - EC2 인스턴스 액션

    R  Start       StartInstances      (확인)
    S  Stop        StopInstances       (확인)
    B  Reboot      RebootInstances     (확인)
    D  Terminate   TerminateInstances  (ID 입력 확인)
    x  SSM Session aws ssm start-session
"""

from __future__ import annotations

from botocore.exceptions import ClientError

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

from .dao import InstanceDAO

ACTIONS = [
    Action(
        name="Start",
        shortcut="R",
        type=ActionType.API,
        operation="StartInstances",
        confirm=ConfirmLevel.SIMPLE,
        filter=lambda r: r.state == "stopped",
    ),
    Action(
        name="Stop",
        shortcut="S",
        type=ActionType.API,
        operation="StopInstances",
        confirm=ConfirmLevel.SIMPLE,
        filter=lambda r: r.state == "running",
    ),
    Action(
        name="Reboot",
        shortcut="B",
        type=ActionType.API,
        operation="RebootInstances",
        confirm=ConfirmLevel.SIMPLE,
        filter=lambda r: r.state == "running",
    ),
    Action(
        name="Terminate",
        shortcut="D",
        type=ActionType.API,
        operation="TerminateInstances",
        confirm=ConfirmLevel.DANGEROUS,
    ),
    Action(
        name="SSM Session",
        shortcut="x",
        type=ActionType.EXEC,
        command="aws ssm start-session --target ${ID}",
        filter=lambda r: r.state == "running",
    ),
]

# operation → (boto3 메서드, 실패 문맥, 완료 메시지)
_OPERATIONS = {
    "StartInstances": ("start_instances", "start instance", "Started"),
    "StopInstances": ("stop_instances", "stop instance", "Stopped"),
    "RebootInstances": ("reboot_instances", "reboot instance", "Rebooted"),
}


def execute_instance_action(ctx, action: Action, resource) -> ActionResult:
    """EC2 인스턴스 API 액션 executor

    Terminate는 InstanceDAO.delete를 거치므로 이미 종료된 인스턴스도 성공입니다.
    """
    instance_id = unwrap_resource(resource).id

    if action.operation == "TerminateInstances":
        try:
            InstanceDAO(ctx).delete(ctx, instance_id)
        except BrowserError as e:
            return fail_resultf(e, "terminate instance %s", instance_id)
        return success_result(f"Terminated instance {instance_id}")

    if action.operation not in _OPERATIONS:
        return unknown_operation_result(action.operation)

    method, context, verb = _OPERATIONS[action.operation]
    client = ctx.client("ec2")

    try:
        getattr(client, method)(InstanceIds=[instance_id])
    except ClientError as e:
        return fail_resultf(e, "%s %s", context, instance_id)

    return success_result(f"{verb} instance {instance_id}")
