"""
plugins/cloudformation/resources/dao.py - 스택 리소스 DAO

스택 화면에서 "r"로 이동할 때만 쓰는 하위 리소스입니다.
StackName 필터가 필수이며 목록 조회만 지원합니다.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from botocore.exceptions import ClientError

from core.dao import BaseDAO, BaseResource, Operation
from core.exceptions import APICallError, FilterRequiredError

SERVICE = "cloudformation"
RESOURCE = "resources"

STACK_NAME_FILTER = "StackName"


@dataclass(frozen=True)
class StackResourceResource(BaseResource):
    """스택에 속한 리소스 (ID는 Physical ID, 이름은 Logical ID)"""

    @classmethod
    def from_api(cls, item: dict[str, Any]) -> StackResourceResource:
        return cls(
            id=item.get("PhysicalResourceId", ""),
            name=item.get("LogicalResourceId", ""),
            data=item,
        )

    @property
    def resource_type(self) -> str:
        return self.get_field("ResourceType")

    @property
    def status(self) -> str:
        return self.get_field("ResourceStatus")

    @property
    def status_reason(self) -> str:
        return self.get_field("ResourceStatusReason")

    @property
    def drift_status(self) -> str:
        return self.get_field("DriftInformation", {}).get("StackResourceDriftStatus", "")

    @property
    def stack_name(self) -> str:
        return self.get_field("StackName")

    @property
    def timestamp(self) -> Any:
        return self.get_field("Timestamp", None)


class StackResourceDAO(BaseDAO):
    """스택 리소스 DAO"""

    SUPPORTED_OPERATIONS = frozenset({Operation.LIST})

    def __init__(self, ctx):
        super().__init__(SERVICE, RESOURCE)
        self._client = ctx.client("cloudformation")

    def list(self, ctx) -> list[StackResourceResource]:
        """
        Raises:
            FilterRequiredError: StackName 필터 없음
        """
        stack_name = ctx.get_filter(STACK_NAME_FILTER)
        if not stack_name:
            raise FilterRequiredError(self.key, STACK_NAME_FILTER)

        ctx.raise_if_cancelled("cloudformation.DescribeStackResources")
        try:
            response = self._client.describe_stack_resources(StackName=stack_name)
        except ClientError as e:
            raise APICallError.from_client_error("cloudformation", "DescribeStackResources", e, stack_name) from e

        return [StackResourceResource.from_api(item) for item in response.get("StackResources", [])]
