"""
plugins/sqs/queues/dao.py - SQS 큐 DAO

리소스 ID는 큐 이름입니다. get/delete는 큐 이름과 URL을 모두 받습니다.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass

from botocore.exceptions import ClientError

from core.aws import arn_suffix, paginate
from core.dao import BaseDAO, BaseResource
from core.exceptions import APICallError, NotFoundError, ResourceInUseError, is_not_found, is_resource_in_use

logger = logging.getLogger(__name__)

SERVICE = "sqs"
RESOURCE = "queues"


@dataclass(frozen=True)
class QueueResource(BaseResource):
    """SQS 큐 (data는 GetQueueAttributes의 Attributes)"""

    url: str = ""

    @classmethod
    def from_api(cls, queue_url: str, attributes: dict[str, str]) -> QueueResource:
        name = arn_suffix(queue_url)
        return cls(id=name, name=name, arn=attributes.get("QueueArn", ""), data=attributes, url=queue_url)

    @property
    def is_fifo(self) -> bool:
        return self.name.endswith(".fifo")

    @property
    def messages(self) -> str:
        return self.get_field("ApproximateNumberOfMessages", "0")

    @property
    def messages_in_flight(self) -> str:
        return self.get_field("ApproximateNumberOfMessagesNotVisible", "0")

    @property
    def messages_delayed(self) -> str:
        return self.get_field("ApproximateNumberOfMessagesDelayed", "0")

    @property
    def visibility_timeout(self) -> str:
        return self.get_field("VisibilityTimeout")

    @property
    def retention_period(self) -> str:
        return self.get_field("MessageRetentionPeriod")

    @property
    def delay_seconds(self) -> str:
        return self.get_field("DelaySeconds")

    @property
    def receive_wait_time(self) -> str:
        return self.get_field("ReceiveMessageWaitTimeSeconds")

    @property
    def created_timestamp(self) -> str:
        return self.get_field("CreatedTimestamp")

    @property
    def dead_letter_target_arn(self) -> str:
        """RedrivePolicy의 DLQ ARN (없거나 파싱 실패 시 빈 문자열)"""
        policy = self.get_field("RedrivePolicy")
        if not policy:
            return ""
        try:
            return json.loads(policy).get("deadLetterTargetArn", "")
        except (ValueError, AttributeError):
            return ""


class QueueDAO(BaseDAO):
    """SQS 큐 DAO"""

    def __init__(self, ctx):
        super().__init__(SERVICE, RESOURCE)
        self._client = ctx.client("sqs")

    def list(self, ctx) -> list[QueueResource]:
        def fetch(token):
            kwargs = {"NextToken": token} if token else {}
            try:
                response = self._client.list_queues(**kwargs)
            except ClientError as e:
                raise APICallError.from_client_error("sqs", "ListQueues", e) from e
            return response.get("QueueUrls", []), response.get("NextToken")

        queues = []
        for queue_url in paginate(ctx, fetch, "sqs.ListQueues"):
            try:
                attributes = self._attributes(queue_url)
            except ClientError as e:
                # 목록 조회 중 삭제된 큐 등은 건너뜀
                logger.warning(f"큐 속성 조회 실패 ({queue_url}): {e}")
                continue
            queues.append(QueueResource.from_api(queue_url, attributes))
        return queues

    def get(self, ctx, resource_id: str) -> QueueResource:
        try:
            queue_url = self._queue_url(resource_id)
            attributes = self._attributes(queue_url)
        except ClientError as e:
            if is_not_found(e):
                raise NotFoundError("queue", resource_id, e) from e
            raise APICallError.from_client_error("sqs", "GetQueueAttributes", e, resource_id) from e
        return QueueResource.from_api(queue_url, attributes)

    def delete(self, ctx, resource_id: str) -> None:
        """큐 삭제 (이미 없으면 성공)

        Raises:
            ResourceInUseError: 큐를 사용 중이라 삭제할 수 없음
        """
        try:
            queue_url = self._queue_url(resource_id)
            self._client.delete_queue(QueueUrl=queue_url)
        except ClientError as e:
            if is_not_found(e):
                logger.debug(f"이미 삭제된 큐: {resource_id}")
                return
            if is_resource_in_use(e):
                raise ResourceInUseError(f"queue {resource_id} is in use", resource_id, e) from e
            raise APICallError.from_client_error("sqs", "DeleteQueue", e, resource_id) from e

    def _queue_url(self, resource_id: str) -> str:
        if resource_id.startswith("https://"):
            return resource_id
        return self._client.get_queue_url(QueueName=resource_id)["QueueUrl"]

    def _attributes(self, queue_url: str) -> dict[str, str]:
        response = self._client.get_queue_attributes(QueueUrl=queue_url, AttributeNames=["All"])
        return response.get("Attributes", {})
