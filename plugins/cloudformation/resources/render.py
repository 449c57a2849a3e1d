"""
plugins/cloudformation/resources/render.py - 스택 리소스 렌더러

스택 리소스의 CloudFormation 타입(AWS::EC2::Instance)을 이 브라우저의
service/resource 키(ec2/instances)로 바꿔, 등록된 뷰가 있으면 "g"로 이동합니다.
"""

from __future__ import annotations

import re
from typing import Any

from core.aws import arn_suffix, parse_arn
from core.registry import Registry, get_registry
from core.render import (
    BaseRenderer,
    Column,
    DetailBuilder,
    Navigation,
    SummaryField,
    format_time,
    styles,
    truncate,
)

from .dao import RESOURCE, SERVICE

# EC2 네임스페이스지만 vpc 서비스에 속하는 타입
_VPC_RESOURCES = frozenset({"VPC", "Subnet", "RouteTable", "InternetGateway", "NatGateway"})

# CloudFormation 서비스 이름 → 브라우저 서비스 이름
_SERVICE_ALIASES = {
    "logs": "cloudwatch",
}

_IRREGULAR_PLURALS = {
    "policy": "policies",
}

# 리소스 타입 → 대상 DAO 필터 키
_FILTER_FIELDS = {
    "Instance": "InstanceId",
    "VPC": "VpcId",
    "Subnet": "SubnetId",
    "SecurityGroup": "GroupId",
    "Volume": "VolumeId",
    "RouteTable": "RouteTableId",
    "InternetGateway": "InternetGatewayId",
    "NatGateway": "NatGatewayId",
    "Role": "RoleName",
    "User": "UserName",
    "Policy": "PolicyName",
    "InstanceProfile": "InstanceProfileName",
    "Bucket": "Name",
}

_KEBAB_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def _split_cfn_type(cfn_type: str) -> tuple[str, str] | None:
    parts = cfn_type.split("::")
    if len(parts) != 3 or parts[0] != "AWS":
        return None
    return parts[1], parts[2]


def camel_to_kebab(value: str) -> str:
    """CamelCase → kebab-case (연속 대문자는 한 단어: VPCEndpoint → vpc-endpoint)"""
    return _KEBAB_BOUNDARY.sub("-", value).lower()


def pluralize(value: str) -> str:
    if value in _IRREGULAR_PLURALS:
        return _IRREGULAR_PLURALS[value]
    for singular, plural in _IRREGULAR_PLURALS.items():
        if value.endswith(f"-{singular}"):
            return value[: -len(singular)] + plural
    return value if value.endswith("s") else value + "s"


def parse_cfn_resource_type(cfn_type: str) -> tuple[str, str]:
    """CloudFormation 타입을 (service, resource)로 변환

    Example:
        >>> parse_cfn_resource_type("AWS::EC2::Instance")
        ('ec2', 'instances')
        >>> parse_cfn_resource_type("AWS::Logs::LogGroup")
        ('cloudwatch', 'log-groups')

    Returns:
        변환할 수 없는 타입이면 ("", "")
    """
    split = _split_cfn_type(cfn_type)
    if split is None:
        return "", ""

    aws_service, aws_resource = split
    service = aws_service.lower()
    if service == "ec2" and aws_resource in _VPC_RESOURCES:
        service = "vpc"
    service = _SERVICE_ALIASES.get(service, service)

    return service, pluralize(camel_to_kebab(aws_resource))


def get_filter_field(cfn_type: str) -> str:
    """대상 뷰에 넘길 필터 키 (알 수 없으면 빈 문자열)"""
    split = _split_cfn_type(cfn_type)
    if split is None:
        return ""
    return _FILTER_FIELDS.get(split[1], "")


def extract_filter_value(physical_id: str, cfn_type: str = "") -> str:
    """Physical ID에서 필터 값 추출 (ARN이면 마지막 이름 부분)"""
    parsed = parse_arn(physical_id)
    if parsed is None:
        return physical_id
    return arn_suffix(parsed.resource)


def resource_status_style(status: str) -> str:
    if "IN_PROGRESS" in status:
        return styles.WARNING
    if "FAILED" in status or "ROLLBACK" in status:
        return styles.DANGER
    if "DELETE_COMPLETE" in status or "SKIPPED" in status:
        return styles.DIM
    if status.endswith("_COMPLETE"):
        return styles.SUCCESS
    return ""


class StackResourceRenderer(BaseRenderer):
    """스택 리소스 렌더러

    Args:
        registry: 이동 대상 확인용 레지스트리 (기본: 전역)
    """

    def __init__(self, registry: Registry | None = None) -> None:
        super().__init__(
            SERVICE,
            RESOURCE,
            [
                Column("LOGICAL ID", 30, lambda r: r.name),
                Column("TYPE", 35, lambda r: r.resource_type, priority=1),
                Column("STATUS", 20, lambda r: r.status, colorer=resource_status_style, priority=2),
                Column("PHYSICAL ID", 40, lambda r: r.id, priority=3),
            ],
        )
        self._registry = registry

    def render_detail(self, resource: Any) -> str:
        d = DetailBuilder()
        d.title("Stack Resource", resource.name)

        d.section("Resource Information")
        d.field("Logical Resource ID", resource.name)
        d.field("Physical Resource ID", resource.id)
        d.field("Resource Type", resource.resource_type)
        d.field_styled("Status", resource.status, resource_status_style(resource.status))
        d.field_if("Last Updated", format_time(resource.timestamp))
        d.field_if("Stack Name", resource.stack_name)

        if resource.status_reason:
            d.section("Status Reason")
            d.line("  " + resource.status_reason)

        if resource.drift_status:
            d.section("Drift Information")
            d.field("Drift Status", resource.drift_status)

        return d.build()

    def render_summary(self, resource: Any) -> list[SummaryField]:
        fields = [
            SummaryField("Logical ID", resource.name),
            SummaryField("Type", resource.resource_type),
            SummaryField("Status", resource.status, resource_status_style(resource.status)),
        ]
        if resource.id:
            fields.append(SummaryField("Physical ID", truncate(resource.id, 50)))
        return fields

    def navigations(self, resource: Any) -> list[Navigation]:
        """등록된 대상 뷰가 있을 때만 "Go to Resource" 제공"""
        if not resource.id:
            return []

        service, resource_type = parse_cfn_resource_type(resource.resource_type)
        if not service or not resource_type:
            return []

        registry = self._registry or get_registry()
        if not registry.has_resource(service, resource_type):
            return []

        return [
            Navigation(
                key="g",
                label="Go to Resource",
                service=service,
                resource=resource_type,
                filter_field=get_filter_field(resource.resource_type),
                filter_value=extract_filter_value(resource.id, resource.resource_type),
            ),
        ]
