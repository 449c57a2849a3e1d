"""
plugins/cloudwatch/log_streams/dao.py - CloudWatch 로그 스트림 DAO

로그 그룹 화면에서 "s"로 이동할 때 쓰는 하위 리소스입니다.
모든 작업에 LogGroupName 필터가 필요합니다.

스트림은 수가 많아서 list_page()로 페이지 단위 조회를 지원하며
(최근 이벤트 순, 페이지 크기 최대 50), list()는 모든 페이지를 이어 붙입니다.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from botocore.exceptions import ClientError

from core.aws import paginate
from core.dao import BaseResource, PaginatedDAO
from core.exceptions import APICallError, FilterRequiredError, NotFoundError, is_not_found

logger = logging.getLogger(__name__)

SERVICE = "cloudwatch"
RESOURCE = "log-streams"

LOG_GROUP_FILTER = "LogGroupName"


@dataclass(frozen=True)
class LogStreamResource(BaseResource):
    """CloudWatch 로그 스트림"""

    group_name: str = ""

    @classmethod
    def from_api(cls, item: dict[str, Any], log_group_name: str) -> LogStreamResource:
        name = item.get("logStreamName", "")
        return cls(id=name, name=name, arn=item.get("arn", ""), data=item, group_name=log_group_name)

    @property
    def log_group_name(self) -> str:
        return self.group_name

    @property
    def first_event_timestamp(self) -> int:
        return int(self.get_field("firstEventTimestamp", 0))

    @property
    def last_event_timestamp(self) -> int:
        return int(self.get_field("lastEventTimestamp", 0))

    @property
    def last_ingestion_time(self) -> int:
        return int(self.get_field("lastIngestionTime", 0))

    @property
    def creation_time(self) -> int:
        return int(self.get_field("creationTime", 0))

    @property
    def stored_bytes(self) -> int:
        return int(self.get_field("storedBytes", 0))


class LogStreamDAO(PaginatedDAO):
    """CloudWatch 로그 스트림 DAO"""

    MAX_PAGE_SIZE = 50

    def __init__(self, ctx):
        super().__init__(SERVICE, RESOURCE)
        self._client = ctx.client("logs")

    def _log_group(self, ctx) -> str:
        log_group_name = ctx.get_filter(LOG_GROUP_FILTER)
        if not log_group_name:
            raise FilterRequiredError(self.key, LOG_GROUP_FILTER)
        return log_group_name

    def list(self, ctx) -> list[LogStreamResource]:
        log_group_name = self._log_group(ctx)
        return paginate(
            ctx,
            lambda token: self.list_page(ctx, self.MAX_PAGE_SIZE, token or ""),
            f"logs.DescribeLogStreams[{log_group_name}]",
        )

    def list_page(self, ctx, page_size: int, page_token: str = "") -> tuple[list[LogStreamResource], str]:
        """최근 이벤트 순 한 페이지

        Returns:
            (스트림 목록, 다음 토큰). 마지막 페이지면 토큰은 빈 문자열
        """
        log_group_name = self._log_group(ctx)
        params: dict[str, Any] = {
            "logGroupName": log_group_name,
            "orderBy": "LastEventTime",
            "descending": True,
            "limit": self.clamp_page_size(page_size),
        }
        if page_token:
            params["nextToken"] = page_token

        try:
            response = self._client.describe_log_streams(**params)
        except ClientError as e:
            raise APICallError.from_client_error("logs", "DescribeLogStreams", e, log_group_name) from e

        streams = [LogStreamResource.from_api(item, log_group_name) for item in response.get("logStreams", [])]
        return streams, response.get("nextToken") or ""

    def get(self, ctx, resource_id: str) -> LogStreamResource:
        log_group_name = self._log_group(ctx)
        try:
            response = self._client.describe_log_streams(
                logGroupName=log_group_name,
                logStreamNamePrefix=resource_id,
            )
        except ClientError as e:
            if is_not_found(e):
                raise NotFoundError("log stream", resource_id, e) from e
            raise APICallError.from_client_error("logs", "DescribeLogStreams", e, resource_id) from e

        for item in response.get("logStreams", []):
            if item.get("logStreamName") == resource_id:
                return LogStreamResource.from_api(item, log_group_name)
        raise NotFoundError("log stream", resource_id)

    def delete(self, ctx, resource_id: str) -> None:
        log_group_name = self._log_group(ctx)
        try:
            self._client.delete_log_stream(logGroupName=log_group_name, logStreamName=resource_id)
        except ClientError as e:
            if is_not_found(e):
                logger.debug(f"이미 삭제된 로그 스트림: {log_group_name}/{resource_id}")
                return
            raise APICallError.from_client_error("logs", "DeleteLogStream", e, resource_id) from e
