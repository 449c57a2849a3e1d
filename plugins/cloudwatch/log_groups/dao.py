"""
plugins/cloudwatch/log_groups/dao.py - CloudWatch 로그 그룹 DAO

리소스 ID는 전체 로그 그룹 이름, 표시 이름은 마지막 "/" 뒤 구간입니다.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from botocore.exceptions import ClientError

from core.aws import collect_paginator
from core.dao import BaseDAO, BaseResource
from core.exceptions import APICallError, NotFoundError, is_not_found

logger = logging.getLogger(__name__)

SERVICE = "cloudwatch"
RESOURCE = "log-groups"


@dataclass(frozen=True)
class LogGroupResource(BaseResource):
    """CloudWatch 로그 그룹"""

    @classmethod
    def from_api(cls, item: dict[str, Any]) -> LogGroupResource:
        name = item.get("logGroupName", "")
        return cls(
            id=name,
            name=name.rsplit("/", 1)[-1] or name,
            arn=item.get("arn", ""),
            data=item,
        )

    @property
    def log_group_name(self) -> str:
        return self.id

    @property
    def stored_bytes(self) -> int:
        return int(self.get_field("storedBytes", 0))

    @property
    def retention_days(self) -> int:
        """보존 기간 (0이면 무기한)"""
        return int(self.get_field("retentionInDays", 0))

    @property
    def creation_time(self) -> int:
        """생성 시각 (epoch 밀리초)"""
        return int(self.get_field("creationTime", 0))

    @property
    def log_group_class(self) -> str:
        return self.get_field("logGroupClass")

    @property
    def kms_key_id(self) -> str:
        return self.get_field("kmsKeyId")

    @property
    def metric_filter_count(self) -> int:
        return int(self.get_field("metricFilterCount", 0))

    @property
    def data_protection_status(self) -> str:
        return self.get_field("dataProtectionStatus")


class LogGroupDAO(BaseDAO):
    """CloudWatch 로그 그룹 DAO"""

    def __init__(self, ctx):
        super().__init__(SERVICE, RESOURCE)
        self._client = ctx.client("logs")

    def list(self, ctx) -> list[LogGroupResource]:
        try:
            groups = collect_paginator(ctx, self._client, "describe_log_groups", "logGroups")
        except ClientError as e:
            raise APICallError.from_client_error("logs", "DescribeLogGroups", e) from e
        return [LogGroupResource.from_api(item) for item in groups]

    def get(self, ctx, resource_id: str) -> LogGroupResource:
        try:
            response = self._client.describe_log_groups(logGroupNamePrefix=resource_id)
        except ClientError as e:
            raise APICallError.from_client_error("logs", "DescribeLogGroups", e, resource_id) from e

        # prefix 검색이므로 정확히 일치하는 항목만
        for item in response.get("logGroups", []):
            if item.get("logGroupName") == resource_id:
                return LogGroupResource.from_api(item)
        raise NotFoundError("log group", resource_id)

    def delete(self, ctx, resource_id: str) -> None:
        try:
            self._client.delete_log_group(logGroupName=resource_id)
        except ClientError as e:
            if is_not_found(e):
                logger.debug(f"이미 삭제된 로그 그룹: {resource_id}")
                return
            raise APICallError.from_client_error("logs", "DeleteLogGroup", e, resource_id) from e
