"""
plugins/ec2/instances/render.py - EC2 인스턴스 렌더러
"""

from __future__ import annotations

from typing import Any

from core.render import (
    NOT_CONFIGURED,
    BaseRenderer,
    Column,
    DetailBuilder,
    MetricSpec,
    Navigation,
    SummaryField,
    format_age,
    format_bool,
    format_time,
    state_style,
    tags_column,
)

from .dao import RESOURCE, SERVICE


class InstanceRenderer(BaseRenderer):
    """EC2 인스턴스 렌더러 (CPU 지표, VPC/Subnet 이동)"""

    def __init__(self) -> None:
        super().__init__(
            SERVICE,
            RESOURCE,
            [
                Column("INSTANCE ID", 20, lambda r: r.id),
                Column("NAME", 28, lambda r: r.name),
                Column("STATE", 12, lambda r: r.state, colorer=state_style),
                Column("TYPE", 12, lambda r: r.instance_type, priority=1),
                Column("PRIVATE IP", 16, lambda r: r.private_ip, priority=2),
                Column("PUBLIC IP", 16, lambda r: r.public_ip, priority=4),
                Column("AZ", 16, lambda r: r.az, priority=5),
                Column("AGE", 8, lambda r: format_age(r.launch_time), priority=3),
                tags_column(),
            ],
        )

    def render_detail(self, resource: Any) -> str:
        d = DetailBuilder()
        d.title("EC2 Instance", resource.name)

        d.section("Basic Information")
        d.field("Instance ID", resource.id)
        d.field_styled("State", resource.state, state_style(resource.state))
        d.field_if("State Reason", resource.state_reason)
        d.field("Instance Type", resource.instance_type)
        d.field("Lifecycle", resource.lifecycle or "on-demand")
        d.field("Platform", resource.platform or NOT_CONFIGURED)
        d.field("AMI", resource.image_id)
        d.field("Launch Time", format_time(resource.launch_time) or NOT_CONFIGURED)

        d.section("Network")
        d.field("VPC", resource.vpc_id or NOT_CONFIGURED)
        d.field("Subnet", resource.subnet_id or NOT_CONFIGURED)
        d.field("Availability Zone", resource.az)
        d.field("Private IP", resource.private_ip or NOT_CONFIGURED)
        d.field("Public IP", resource.public_ip or NOT_CONFIGURED)
        d.field("Security Groups", ", ".join(resource.security_groups) or NOT_CONFIGURED)
        d.field("Source/Dest Check", format_bool(resource.source_dest_check, "Enabled", "Disabled"))

        d.section("Security")
        d.field("IAM Role", resource.role_name or NOT_CONFIGURED)
        d.field("Key Pair", resource.key_name or NOT_CONFIGURED)
        d.field("IMDS Tokens", resource.metadata_http_tokens or NOT_CONFIGURED)

        d.section("Storage / Monitoring")
        d.field("Root Device", resource.root_device or NOT_CONFIGURED)
        d.field("EBS Optimized", format_bool(resource.ebs_optimized))
        d.field("Monitoring", resource.monitoring_state or NOT_CONFIGURED)

        d.tags(resource.tags)
        return d.build()

    def render_summary(self, resource: Any) -> list[SummaryField]:
        return [
            SummaryField("ID", resource.id),
            SummaryField("Name", resource.name),
            SummaryField("State", resource.state, state_style(resource.state)),
            SummaryField("Type", resource.instance_type),
            SummaryField("Private IP", resource.private_ip),
        ]

    def navigations(self, resource: Any) -> list[Navigation]:
        navs = []
        if resource.vpc_id:
            navs.append(Navigation("v", "VPC", "vpc", "vpcs", "VpcId", resource.vpc_id))
        if resource.subnet_id:
            navs.append(Navigation("s", "Subnet", "vpc", "subnets", "SubnetId", resource.subnet_id))
        return navs

    def metric_spec(self) -> MetricSpec:
        return MetricSpec(
            namespace="AWS/EC2",
            metric_name="CPUUtilization",
            dimension_name="InstanceId",
            stat="Average",
            column_header="CPU",
            unit="%",
        )
