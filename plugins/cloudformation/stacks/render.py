"""
plugins/cloudformation/stacks/render.py - CloudFormation 스택 렌더러
"""

from __future__ import annotations

from typing import Any

from core.render import (
    NOT_CONFIGURED,
    BaseRenderer,
    Column,
    DetailBuilder,
    Navigation,
    SummaryField,
    format_age,
    format_bool,
    format_time,
    state_style,
    styles,
    truncate,
)

from .dao import RESOURCE, SERVICE

_DRIFT_STYLES = {
    "IN_SYNC": styles.SUCCESS,
    "DRIFTED": styles.DANGER,
    "MODIFIED": styles.DANGER,
    "DELETED": styles.DANGER,
    "NOT_CHECKED": styles.DIM,
}


def drift_style(status: str) -> str:
    return _DRIFT_STYLES.get(status, "")


class StackRenderer(BaseRenderer):
    """CloudFormation 스택 렌더러"""

    def __init__(self) -> None:
        super().__init__(
            SERVICE,
            RESOURCE,
            [
                Column("NAME", 35, lambda r: r.name),
                Column("STATUS", 28, lambda r: r.status, colorer=state_style, priority=1),
                Column("DRIFT", 12, lambda r: r.drift_status, colorer=drift_style, priority=2),
                Column("CREATED", 10, lambda r: format_age(r.created), priority=3),
                Column("UPDATED", 10, lambda r: format_age(r.updated), priority=4),
            ],
        )

    def render_detail(self, resource: Any) -> str:
        d = DetailBuilder()
        d.title("CloudFormation Stack", resource.name)

        d.section("Basic Information")
        d.field("Stack Name", resource.name)
        d.field("Stack ID", resource.id)
        d.field_styled("Status", resource.status, state_style(resource.status))
        d.field_if("Status Reason", resource.status_reason)
        d.field_if("Description", resource.description)
        d.field("Created", format_time(resource.created) or NOT_CONFIGURED)
        d.field_if("Last Updated", format_time(resource.updated))
        d.field("Termination Protection", format_bool(resource.termination_protection, "Enabled", "Disabled"))
        d.field_if("Service Role", resource.role_arn)

        if resource.drift_status:
            d.section("Drift")
            d.field_styled("Drift Status", resource.drift_status, drift_style(resource.drift_status))

        if resource.parameters:
            d.section("Parameters")
            for key in sorted(resource.parameters):
                d.tag(key, resource.parameters[key])

        if resource.outputs:
            d.section("Outputs")
            for key in sorted(resource.outputs):
                d.tag(key, resource.outputs[key])

        d.tags(resource.tags)
        return d.build()

    def render_summary(self, resource: Any) -> list[SummaryField]:
        fields = [
            SummaryField("Name", resource.name),
            SummaryField("Status", resource.status, state_style(resource.status)),
        ]
        if resource.drift_status:
            fields.append(SummaryField("Drift", resource.drift_status, drift_style(resource.drift_status)))
        if resource.description:
            fields.append(SummaryField("Description", truncate(resource.description, 50)))
        if resource.termination_protection:
            fields.append(SummaryField("Protection", "Enabled"))
        return fields

    def navigations(self, resource: Any) -> list[Navigation]:
        return [
            Navigation(
                key="r",
                label="Resources",
                service=SERVICE,
                resource="resources",
                filter_field="StackName",
                filter_value=resource.name,
            ),
        ]
