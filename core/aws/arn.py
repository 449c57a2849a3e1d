"""
core/aws/arn.py - ARN 파싱

arn:partition:service:region:account-id:resource
arn:partition:service:region:account-id:resource-type/resource-id
arn:partition:service:region:account-id:resource-type:resource-id
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ParsedArn:
    """파싱된 ARN"""

    partition: str
    service: str
    region: str
    account_id: str
    resource: str

    @property
    def resource_name(self) -> str:
        """resource 부분의 마지막 구간 (role/MyRole → MyRole)"""
        return arn_suffix(self.resource)


def is_arn(value: str) -> bool:
    """ARN 형식인지 확인"""
    return bool(value) and value.startswith("arn:") and len(value.split(":", 5)) == 6


def parse_arn(arn: str) -> ParsedArn | None:
    """ARN 문자열 파싱

    Args:
        arn: ARN 문자열

    Returns:
        ParsedArn 또는 None (ARN 형식이 아닌 경우)

    Example:
        >>> parse_arn("arn:aws:iam::123456789012:role/MyRole").resource
        'role/MyRole'
    """
    if not is_arn(arn):
        return None

    _, partition, service, region, account_id, resource = arn.split(":", 5)
    return ParsedArn(
        partition=partition,
        service=service,
        region=region,
        account_id=account_id,
        resource=resource,
    )


def arn_suffix(value: str) -> str:
    """ARN이나 경로에서 마지막 "/" 또는 ":" 뒤 이름 추출

    Example:
        >>> arn_suffix("arn:aws:ecs:us-east-1:123456789012:cluster/my-cluster")
        'my-cluster'
        >>> arn_suffix("arn:aws:s3:::my-bucket")
        'my-bucket'
    """
    if not value:
        return ""

    idx = max(value.rfind("/"), value.rfind(":"))
    if idx == -1:
        return value
    return value[idx + 1 :]
