"""
plugins/sqs/queues/render.py - SQS 큐 렌더러
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from core.render import (
    NOT_CONFIGURED,
    BaseRenderer,
    Column,
    DetailBuilder,
    MetricSpec,
    SummaryField,
    format_age,
    format_bool,
    format_duration,
    format_time,
    styles,
    tags_column,
)

from .dao import RESOURCE, SERVICE


def _epoch(value: str) -> datetime | None:
    """SQS 타임스탬프(epoch 초 문자열) → datetime"""
    if not value:
        return None
    try:
        return datetime.fromtimestamp(int(value), tz=timezone.utc)
    except ValueError:
        return None


def _seconds(value: str) -> str:
    if not value:
        return NOT_CONFIGURED
    try:
        return format_duration(int(value))
    except ValueError:
        return value


class QueueRenderer(BaseRenderer):
    """SQS 큐 렌더러"""

    def __init__(self) -> None:
        super().__init__(
            SERVICE,
            RESOURCE,
            [
                Column("NAME", 40, lambda r: r.name),
                Column("TYPE", 8, lambda r: "FIFO" if r.is_fifo else "Standard", priority=2),
                Column("MESSAGES", 10, lambda r: r.messages, priority=1),
                Column("IN FLIGHT", 10, lambda r: r.messages_in_flight, priority=1),
                Column("DLQ", 5, lambda r: format_bool(r.dead_letter_target_arn), priority=4),
                Column("AGE", 8, lambda r: format_age(_epoch(r.created_timestamp)), priority=3),
                tags_column(),
            ],
        )

    def render_detail(self, resource: Any) -> str:
        d = DetailBuilder()
        d.title("SQS Queue", resource.name)

        d.section("Basic Information")
        d.field("Name", resource.name)
        d.field("URL", resource.url)
        d.field("ARN", resource.arn)
        d.field("Type", "FIFO" if resource.is_fifo else "Standard")
        d.field("Created", format_time(_epoch(resource.created_timestamp)) or NOT_CONFIGURED)

        d.section("Messages")
        d.field("Available", resource.messages)
        d.field("In Flight", resource.messages_in_flight)
        d.field("Delayed", resource.messages_delayed)

        d.section("Configuration")
        d.field("Visibility Timeout", _seconds(resource.visibility_timeout))
        d.field("Retention Period", _seconds(resource.retention_period))
        d.field("Delivery Delay", _seconds(resource.delay_seconds))
        d.field("Receive Wait Time", _seconds(resource.receive_wait_time))

        d.section("Dead Letter Queue")
        if resource.dead_letter_target_arn:
            d.field("Target ARN", resource.dead_letter_target_arn)
        else:
            d.field_styled("Target ARN", NOT_CONFIGURED, styles.DIM)

        d.tags(resource.tags)
        return d.build()

    def render_summary(self, resource: Any) -> list[SummaryField]:
        return [
            SummaryField("Name", resource.name),
            SummaryField("Messages", resource.messages),
            SummaryField("In Flight", resource.messages_in_flight),
        ]

    def metric_spec(self) -> MetricSpec:
        return MetricSpec(
            namespace="AWS/SQS",
            metric_name="ApproximateNumberOfMessagesVisible",
            dimension_name="QueueName",
            stat="Maximum",
            column_header="MSGS",
        )
