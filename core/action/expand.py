"""
core/action/expand.py - exec 명령 변수 치환

지원 변수:
    ${ID} ${NAME} ${ARN} ${INSTANCE_ID}(=ID) ${BUCKET}(=ID)
    ${PRIVATE_IP}  HasPrivateIP 리소스
    ${CLUSTER}     HasClusterArn 리소스
    ${CONTAINER}   HasContainers 리소스 (첫 컨테이너 이름)
    ${LOG_GROUP}   HasLogGroup 리소스

명령에서 실제로 참조하는 변수 값만 셸 메타문자를 검사합니다.
하나라도 걸리면 UnsafeValueError를 내고 아무 것도 치환하지 않습니다.
알 수 없는 ${X}는 그대로 둡니다.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from core.dao import unwrap_resource
from core.exceptions import UnsafeValueError

SHELL_METACHARACTERS = frozenset(";|&$`(){}<>\n\r")


@runtime_checkable
class HasPrivateIP(Protocol):
    @property
    def private_ip(self) -> str: ...


@runtime_checkable
class HasClusterArn(Protocol):
    @property
    def cluster_arn(self) -> str: ...


@runtime_checkable
class HasContainers(Protocol):
    @property
    def first_container_name(self) -> str: ...


@runtime_checkable
class HasLogGroup(Protocol):
    @property
    def log_group_name(self) -> str: ...


def contains_shell_metachar(value: str) -> bool:
    return any(c in SHELL_METACHARACTERS for c in value)


def build_variables(resource: Any) -> dict[str, str]:
    """리소스에서 치환 변수 dict 생성 (래퍼는 벗겨서 원래 ID 사용)"""
    resource = unwrap_resource(resource)
    variables = {
        "ID": resource.id,
        "NAME": resource.name,
        "ARN": resource.arn,
        "INSTANCE_ID": resource.id,
        "BUCKET": resource.id,
    }

    if isinstance(resource, HasPrivateIP):
        variables["PRIVATE_IP"] = resource.private_ip
    if isinstance(resource, HasClusterArn):
        variables["CLUSTER"] = resource.cluster_arn
    if isinstance(resource, HasContainers):
        variables["CONTAINER"] = resource.first_container_name
    if isinstance(resource, HasLogGroup):
        variables["LOG_GROUP"] = resource.log_group_name

    return {k: v or "" for k, v in variables.items()}


def expand_variables(command: str, resource: Any) -> str:
    """명령 템플릿의 ${VAR}를 리소스 값으로 치환

    Raises:
        UnsafeValueError: 참조된 변수 값에 셸 메타문자가 있음
    """
    variables = build_variables(resource)
    referenced = {name: value for name, value in variables.items() if f"${{{name}}}" in command}

    for name, value in referenced.items():
        if contains_shell_metachar(value):
            raise UnsafeValueError(name, value)

    result = command
    for name, value in referenced.items():
        result = result.replace(f"${{{name}}}", value)
    return result
