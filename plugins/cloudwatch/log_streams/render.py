"""
plugins/cloudwatch/log_streams/render.py - 로그 스트림 렌더러
"""

from __future__ import annotations

from typing import Any

from core.render import (
    NO_VALUE,
    BaseRenderer,
    Column,
    DetailBuilder,
    SummaryField,
    format_age,
    format_size,
    format_time,
)

from ..log_groups.render import from_epoch_millis
from .dao import RESOURCE, SERVICE


class LogStreamRenderer(BaseRenderer):
    """로그 스트림 렌더러"""

    def __init__(self) -> None:
        super().__init__(
            SERVICE,
            RESOURCE,
            [
                Column("STREAM NAME", 60, lambda r: r.name),
                Column("LAST EVENT", 12, lambda r: format_age(from_epoch_millis(r.last_event_timestamp)) or "-", priority=1),
                Column("CREATED", 10, lambda r: format_age(from_epoch_millis(r.creation_time)) or "-", priority=2),
            ],
        )

    def render_detail(self, resource: Any) -> str:
        d = DetailBuilder()
        d.title("Log Stream", resource.name)

        d.section("Basic Information")
        d.field("Stream Name", resource.name)
        d.field("Log Group", resource.log_group_name)
        d.field_if("ARN", resource.arn)
        d.field_if("Stored Bytes", format_size(resource.stored_bytes) if resource.stored_bytes else "")

        d.section("Timestamps")
        d.field("Created", format_time(from_epoch_millis(resource.creation_time)) or NO_VALUE)
        d.field("First Event", format_time(from_epoch_millis(resource.first_event_timestamp)) or NO_VALUE)
        d.field("Last Event", format_time(from_epoch_millis(resource.last_event_timestamp)) or NO_VALUE)
        d.field("Last Ingestion", format_time(from_epoch_millis(resource.last_ingestion_time)) or NO_VALUE)

        return d.build()

    def render_summary(self, resource: Any) -> list[SummaryField]:
        return [
            SummaryField("Stream", resource.name),
            SummaryField("Log Group", resource.log_group_name),
            SummaryField("Last Event", format_time(from_epoch_millis(resource.last_event_timestamp))),
        ]
