"""
plugins/ec2/instances/dao.py - EC2 인스턴스 DAO

describe_instances paginator로 전체 인스턴스를 읽고,
인스턴스 프로파일 → IAM Role 이름을 한 번의 list 호출 동안만 캐시합니다.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from botocore.exceptions import ClientError

from core.aws import arn_suffix, collect_paginator, name_from_tags, tags_to_dict
from core.dao import BaseDAO, BaseResource
from core.exceptions import APICallError, NotFoundError, is_not_found

logger = logging.getLogger(__name__)

SERVICE = "ec2"
RESOURCE = "instances"


@dataclass(frozen=True)
class InstanceResource(BaseResource):
    """EC2 인스턴스"""

    role_name: str = ""

    @classmethod
    def from_api(cls, instance: dict[str, Any], role_name: str = "") -> InstanceResource:
        tags = tags_to_dict(instance.get("Tags"))
        instance_id = instance.get("InstanceId", "")
        return cls(
            id=instance_id,
            name=name_from_tags(tags, instance_id),
            tags=tags,
            data=instance,
            role_name=role_name,
        )

    @property
    def state(self) -> str:
        return self.get_field("State", {}).get("Name") or "unknown"

    @property
    def instance_type(self) -> str:
        return self.get_field("InstanceType")

    @property
    def private_ip(self) -> str:
        return self.get_field("PrivateIpAddress")

    @property
    def public_ip(self) -> str:
        return self.get_field("PublicIpAddress")

    @property
    def az(self) -> str:
        return self.get_field("Placement", {}).get("AvailabilityZone", "")

    @property
    def vpc_id(self) -> str:
        return self.get_field("VpcId")

    @property
    def subnet_id(self) -> str:
        return self.get_field("SubnetId")

    @property
    def launch_time(self) -> Any:
        return self.get_field("LaunchTime", None)

    @property
    def platform(self) -> str:
        return self.get_field("PlatformDetails") or self.get_field("Platform")

    @property
    def key_name(self) -> str:
        return self.get_field("KeyName")

    @property
    def image_id(self) -> str:
        return self.get_field("ImageId")

    @property
    def lifecycle(self) -> str:
        """spot/scheduled (온디맨드면 빈 문자열)"""
        return self.get_field("InstanceLifecycle")

    @property
    def state_reason(self) -> str:
        return self.get_field("StateReason", {}).get("Message", "")

    @property
    def security_groups(self) -> list[str]:
        return [g.get("GroupId", "") for g in self.get_field("SecurityGroups", [])]

    @property
    def ebs_optimized(self) -> bool:
        return bool(self.get_field("EbsOptimized", False))

    @property
    def source_dest_check(self) -> bool:
        # 값이 없으면 기본값(활성)
        return bool(self.get_field("SourceDestCheck", True))

    @property
    def monitoring_state(self) -> str:
        return self.get_field("Monitoring", {}).get("State", "")

    @property
    def metadata_http_tokens(self) -> str:
        return self.get_field("MetadataOptions", {}).get("HttpTokens", "")

    @property
    def root_device(self) -> str:
        return self.get_field("RootDeviceName")


class InstanceDAO(BaseDAO):
    """EC2 인스턴스 DAO"""

    def __init__(self, ctx):
        super().__init__(SERVICE, RESOURCE)
        self._client = ctx.client("ec2")
        self._iam = ctx.client("iam")

    def list(self, ctx) -> list[InstanceResource]:
        try:
            reservations = collect_paginator(ctx, self._client, "describe_instances", "Reservations")
        except ClientError as e:
            raise APICallError.from_client_error("ec2", "DescribeInstances", e) from e

        # list 한 번 동안만 유효한 캐시 (인스턴스 프로파일 ARN → Role 이름)
        role_cache: dict[str, str] = {}
        return [
            InstanceResource.from_api(instance, self._role_name(instance, role_cache))
            for reservation in reservations
            for instance in reservation.get("Instances", [])
        ]

    def get(self, ctx, resource_id: str) -> InstanceResource:
        try:
            response = self._client.describe_instances(InstanceIds=[resource_id])
        except ClientError as e:
            if is_not_found(e):
                raise NotFoundError("instance", resource_id, e) from e
            raise APICallError.from_client_error("ec2", "DescribeInstances", e, resource_id) from e

        reservations = response.get("Reservations", [])
        if not reservations or not reservations[0].get("Instances"):
            raise NotFoundError("instance", resource_id)

        instance = reservations[0]["Instances"][0]
        return InstanceResource.from_api(instance, self._role_name(instance, None))

    def delete(self, ctx, resource_id: str) -> None:
        """인스턴스 종료 (이미 없으면 성공)"""
        try:
            self._client.terminate_instances(InstanceIds=[resource_id])
        except ClientError as e:
            if is_not_found(e):
                logger.debug(f"이미 종료된 인스턴스: {resource_id}")
                return
            raise APICallError.from_client_error("ec2", "TerminateInstances", e, resource_id) from e

    def _role_name(self, instance: dict[str, Any], cache: dict[str, str] | None) -> str:
        """인스턴스 프로파일에 연결된 첫 번째 Role 이름 (조회 실패 시 빈 문자열)"""
        profile_arn = instance.get("IamInstanceProfile", {}).get("Arn")
        if not profile_arn:
            return ""

        if cache is not None and profile_arn in cache:
            return cache[profile_arn]

        profile_name = arn_suffix(profile_arn)
        if not profile_name:
            return ""

        try:
            response = self._iam.get_instance_profile(InstanceProfileName=profile_name)
        except ClientError as e:
            # 권한이 없어도 목록은 보여줌
            logger.debug(f"인스턴스 프로파일 조회 실패 ({profile_name}): {e}")
            return ""

        roles = response.get("InstanceProfile", {}).get("Roles", [])
        role_name = roles[0].get("RoleName", "") if roles else ""

        if cache is not None:
            cache[profile_arn] = role_name
        return role_name
