"""
plugins/cloudwatch/log_groups/render.py - 로그 그룹 렌더러
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from core.render import (
    NOT_CONFIGURED,
    BaseRenderer,
    Column,
    DetailBuilder,
    Navigation,
    SummaryField,
    format_age,
    format_size,
    format_time,
)

from .dao import RESOURCE, SERVICE


def from_epoch_millis(value: int) -> datetime | None:
    if not value:
        return None
    return datetime.fromtimestamp(value / 1000, tz=timezone.utc)


def format_retention(days: int) -> str:
    if days == 0:
        return "Never"
    if days == 1:
        return "1 day"
    return f"{days} days"


def format_class(value: str) -> str:
    if not value or value == "STANDARD":
        return "Standard"
    return value


class LogGroupRenderer(BaseRenderer):
    """로그 그룹 렌더러 ("s"로 스트림 목록 이동)"""

    def __init__(self) -> None:
        super().__init__(
            SERVICE,
            RESOURCE,
            [
                Column("LOG GROUP", 50, lambda r: r.id),
                Column("SIZE", 12, lambda r: format_size(r.stored_bytes), priority=1),
                Column("RETENTION", 12, lambda r: format_retention(r.retention_days), priority=2),
                Column("CLASS", 12, lambda r: format_class(r.log_group_class), priority=4),
                Column("AGE", 10, lambda r: format_age(from_epoch_millis(r.creation_time)) or "-", priority=3),
            ],
        )

    def render_detail(self, resource: Any) -> str:
        d = DetailBuilder()
        d.title("Log Group", resource.id)

        d.section("Basic Information")
        d.field("Name", resource.id)
        d.field("ARN", resource.arn or NOT_CONFIGURED)
        d.field("Class", format_class(resource.log_group_class))
        d.field("Created", format_time(from_epoch_millis(resource.creation_time)) or NOT_CONFIGURED)

        d.section("Storage")
        d.field("Stored Bytes", format_size(resource.stored_bytes))
        d.field("Retention", format_retention(resource.retention_days))
        d.field("KMS Key", resource.kms_key_id or NOT_CONFIGURED)

        d.section("Configuration")
        d.field("Metric Filters", str(resource.metric_filter_count))
        d.field("Data Protection", resource.data_protection_status or NOT_CONFIGURED)

        return d.build()

    def render_summary(self, resource: Any) -> list[SummaryField]:
        return [
            SummaryField("Log Group", resource.id),
            SummaryField("Size", format_size(resource.stored_bytes)),
            SummaryField("Retention", format_retention(resource.retention_days)),
        ]

    def navigations(self, resource: Any) -> list[Navigation]:
        return [
            Navigation(
                key="s",
                label="Streams",
                service=SERVICE,
                resource="log-streams",
                filter_field="LogGroupName",
                filter_value=resource.log_group_name,
            ),
        ]
