"""
plugins/sqs/queues/actions.py - SQS 큐 액션
"""

from __future__ import annotations

import time

from botocore.exceptions import ClientError

from core.action import (
    Action,
    ActionResult,
    ActionType,
    ConfirmLevel,
    confirm_token_name,
    fail_resultf,
    invalid_resource_result,
    success_result,
    unknown_operation_result,
)
from core.dao import unwrap_resource
from core.exceptions import BrowserError

from .dao import QueueDAO, QueueResource

TEST_MESSAGE_BODY = '{"test": true, "source": "awsb"}'
TEST_MESSAGE_GROUP_ID = "awsb-test"

ACTIONS = [
    Action(
        name="Purge Queue",
        shortcut="p",
        type=ActionType.API,
        operation="PurgeQueue",
        confirm=ConfirmLevel.SIMPLE,
    ),
    Action(
        name="Send Test Message",
        shortcut="s",
        type=ActionType.API,
        operation="SendTestMessage",
        confirm=ConfirmLevel.SIMPLE,
    ),
    Action(
        name="Delete",
        shortcut="D",
        type=ActionType.API,
        operation="DeleteQueue",
        confirm=ConfirmLevel.DANGEROUS,
        confirm_token=confirm_token_name,
    ),
]


def execute_queue_action(ctx, action: Action, resource) -> ActionResult:
    """SQS 큐 API 액션 executor"""
    queue = unwrap_resource(resource)
    if not isinstance(queue, QueueResource):
        return invalid_resource_result("QueueResource", queue)

    if action.operation == "PurgeQueue":
        return _purge_queue(ctx, queue)
    if action.operation == "SendTestMessage":
        return _send_test_message(ctx, queue)
    if action.operation == "DeleteQueue":
        return _delete_queue(ctx, queue)
    return unknown_operation_result(action.operation)


def _purge_queue(ctx, queue: QueueResource) -> ActionResult:
    try:
        ctx.client("sqs").purge_queue(QueueUrl=queue.url)
    except ClientError as e:
        return fail_resultf(e, "purge queue %s", queue.name)
    return success_result(f"Purged all messages from {queue.name}")


def _send_test_message(ctx, queue: QueueResource) -> ActionResult:
    params = {"QueueUrl": queue.url, "MessageBody": TEST_MESSAGE_BODY}
    if queue.is_fifo:
        params["MessageGroupId"] = TEST_MESSAGE_GROUP_ID
        params["MessageDeduplicationId"] = f"{TEST_MESSAGE_GROUP_ID}-{time.time_ns()}"

    try:
        response = ctx.client("sqs").send_message(**params)
    except ClientError as e:
        return fail_resultf(e, "send message to %s", queue.name)
    return success_result(f"Sent test message to {queue.name} (ID: {response.get('MessageId', '')})")


def _delete_queue(ctx, queue: QueueResource) -> ActionResult:
    """이미 삭제된 큐는 성공으로 처리 (QueueDAO.delete)"""
    try:
        QueueDAO(ctx).delete(ctx, queue.url)
    except BrowserError as e:
        return fail_resultf(e, "delete queue %s", queue.name)
    return success_result(f"Deleted queue {queue.name}")
