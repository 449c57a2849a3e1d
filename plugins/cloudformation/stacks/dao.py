"""
plugins/cloudformation/stacks/dao.py - CloudFormation 스택 DAO

리소스 ID는 StackId(ARN), 이름은 StackName입니다.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from botocore.exceptions import ClientError

from core.aws import collect_paginator, tags_to_dict
from core.dao import BaseDAO, BaseResource
from core.exceptions import APICallError, NotFoundError, get_error_code, is_not_found

logger = logging.getLogger(__name__)

SERVICE = "cloudformation"
RESOURCE = "stacks"


def is_stack_missing(error: ClientError) -> bool:
    """스택 없음 오류인지 확인

    CloudFormation은 없는 스택을 ValidationError("... does not exist")로 알립니다.
    """
    if is_not_found(error):
        return True
    message = error.response.get("Error", {}).get("Message", "")
    return get_error_code(error) == "ValidationError" and "does not exist" in message


@dataclass(frozen=True)
class StackResource(BaseResource):
    """CloudFormation 스택"""

    @classmethod
    def from_api(cls, stack: dict[str, Any]) -> StackResource:
        stack_id = stack.get("StackId", "")
        return cls(
            id=stack_id,
            name=stack.get("StackName", ""),
            arn=stack_id,
            tags=tags_to_dict(stack.get("Tags")),
            data=stack,
        )

    @property
    def status(self) -> str:
        return self.get_field("StackStatus")

    @property
    def status_reason(self) -> str:
        return self.get_field("StackStatusReason")

    @property
    def drift_status(self) -> str:
        return self.get_field("DriftInformation", {}).get("StackDriftStatus", "")

    @property
    def description(self) -> str:
        return self.get_field("Description")

    @property
    def termination_protection(self) -> bool:
        return bool(self.get_field("EnableTerminationProtection", False))

    @property
    def created(self) -> Any:
        return self.get_field("CreationTime", None)

    @property
    def updated(self) -> Any:
        return self.get_field("LastUpdatedTime", None)

    @property
    def role_arn(self) -> str:
        return self.get_field("RoleARN")

    @property
    def parameters(self) -> dict[str, str]:
        return {p.get("ParameterKey", ""): p.get("ParameterValue", "") for p in self.get_field("Parameters", [])}

    @property
    def outputs(self) -> dict[str, str]:
        return {o.get("OutputKey", ""): o.get("OutputValue", "") for o in self.get_field("Outputs", [])}


class StackDAO(BaseDAO):
    """CloudFormation 스택 DAO"""

    def __init__(self, ctx):
        super().__init__(SERVICE, RESOURCE)
        self._client = ctx.client("cloudformation")

    def list(self, ctx) -> list[StackResource]:
        try:
            stacks = collect_paginator(ctx, self._client, "describe_stacks", "Stacks")
        except ClientError as e:
            raise APICallError.from_client_error("cloudformation", "DescribeStacks", e) from e
        return [StackResource.from_api(stack) for stack in stacks]

    def get(self, ctx, resource_id: str) -> StackResource:
        try:
            response = self._client.describe_stacks(StackName=resource_id)
        except ClientError as e:
            if is_stack_missing(e):
                raise NotFoundError("stack", resource_id, e) from e
            raise APICallError.from_client_error("cloudformation", "DescribeStacks", e, resource_id) from e

        stacks = response.get("Stacks", [])
        if not stacks:
            raise NotFoundError("stack", resource_id)
        return StackResource.from_api(stacks[0])

    def delete(self, ctx, resource_id: str) -> None:
        try:
            self._client.delete_stack(StackName=resource_id)
        except ClientError as e:
            if is_stack_missing(e):
                logger.debug(f"이미 삭제된 스택: {resource_id}")
                return
            raise APICallError.from_client_error("cloudformation", "DeleteStack", e, resource_id) from e
