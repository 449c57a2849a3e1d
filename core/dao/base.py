"""
core/dao/base.py - Resource / DAO 계약

모든 서비스별 래퍼가 구현해야 하는 최소 인터페이스를 정의합니다.
UI와 액션 레이어는 이 계약만 보고 서로 다른 AWS 응답 타입을 동일하게 다룹니다.

구성 요소:
    - Operation: DAO 지원 작업 (list/get/create/delete/update/list_page)
    - Resource: id/name/arn/tags/raw 접근자를 가진 읽기 전용 뷰 (Protocol)
    - BaseResource: Resource 기본 구현 (dataclass)
    - RegionalResource / ProfiledResource: 리전/프로파일 정보를 덧붙인 래퍼
    - DAO / BaseDAO / PaginatedDAO: 목록/단건/삭제 조회 계약과 기본 구현

BaseDAO를 상속하면 다른 부분만 재정의하고 나머지는 기본 동작을 따릅니다.
    - supports(): LIST, GET, DELETE
    - get()/delete(): UnsupportedOperationError

Example:
    class QueueDAO(BaseDAO):
        def __init__(self, ctx):
            super().__init__("sqs", "queues")
            self._client = ctx.client("sqs")

        def list(self, ctx):
            ...
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from core.exceptions import UnsupportedOperationError

if TYPE_CHECKING:
    from core.context import RequestContext

logger = logging.getLogger(__name__)


# =============================================================================
# 작업 종류
# =============================================================================


class Operation(str, Enum):
    """DAO가 지원할 수 있는 작업"""

    LIST = "list"
    GET = "get"
    CREATE = "create"
    DELETE = "delete"
    UPDATE = "update"
    LIST_PAGE = "list_page"


# =============================================================================
# Resource
# =============================================================================


@runtime_checkable
class Resource(Protocol):
    """AWS 리소스 읽기 전용 뷰

    접근자는 실패하지 않습니다. 값이 없으면 빈 문자열/빈 dict를 반환합니다.
    """

    @property
    def id(self) -> str: ...

    @property
    def name(self) -> str: ...

    @property
    def arn(self) -> str: ...

    @property
    def tags(self) -> dict[str, str]: ...

    @property
    def raw(self) -> Any: ...


@dataclass(frozen=True)
class BaseResource:
    """Resource 기본 구현

    서비스별 리소스는 이 클래스를 상속하고 data(원본 응답 dict)를 읽는 프로퍼티를 추가합니다.
    name이 비어 있으면 id를 사용합니다.

    Attributes:
        id: 리소스 ID (List/Get 성공 시 항상 비어있지 않음)
        name: 표시 이름
        arn: ARN (없는 리소스도 있음)
        tags: 태그 dict
        data: 원본 API 응답
    """

    id: str
    name: str = ""
    arn: str = ""
    tags: dict[str, str] = field(default_factory=dict)
    data: Any = None

    def __post_init__(self) -> None:
        if not self.name:
            object.__setattr__(self, "name", self.id)
        if self.tags is None:
            object.__setattr__(self, "tags", {})

    @property
    def raw(self) -> Any:
        return self.data

    def get_field(self, key: str, default: Any = "") -> Any:
        """data에서 키 값 조회 (dict가 아니거나 값이 없으면 default)"""
        if isinstance(self.data, dict):
            value = self.data.get(key)
            return default if value is None else value
        return default


class _WrappedResource:
    """다른 Resource를 감싸 식별 정보를 위임하는 래퍼 베이스"""

    def __init__(self, resource: Any):
        self.resource = resource

    @property
    def name(self) -> str:
        return self.resource.name

    @property
    def arn(self) -> str:
        return self.resource.arn

    @property
    def tags(self) -> dict[str, str]:
        return self.resource.tags

    @property
    def raw(self) -> Any:
        return self.resource.raw

    def __getattr__(self, item: str) -> Any:
        # 서비스별 프로퍼티(state, private_ip 등)는 내부 리소스로 위임
        if item == "resource":
            raise AttributeError(item)
        return getattr(self.resource, item)


class RegionalResource(_WrappedResource):
    """리전 정보가 붙은 리소스 (멀티 리전 목록용)

    id는 "region:id" 형식이라 여러 리전의 같은 ID가 구분됩니다.
    """

    def __init__(self, resource: Any, region: str):
        super().__init__(resource)
        self.region = region

    @property
    def id(self) -> str:
        return f"{self.region}:{self.resource.id}"


class ProfiledResource(_WrappedResource):
    """프로파일/계정/리전 정보가 붙은 리소스 (멀티 프로파일 목록용)

    id는 "profile:region:id" 형식입니다.
    """

    def __init__(self, resource: Any, profile: str, account_id: str, region: str):
        # RegionalResource를 다시 감싸지 않고 내부 리소스를 직접 보관
        if isinstance(resource, RegionalResource):
            resource = resource.resource
        super().__init__(resource)
        self.profile = profile
        self.account_id = account_id
        self.region = region

    @property
    def id(self) -> str:
        return f"{self.profile}:{self.region}:{self.resource.id}"


def wrap_with_region(resource: Any, region: str) -> RegionalResource:
    return RegionalResource(resource, region)


def wrap_with_profile(resource: Any, profile: str, account_id: str, region: str) -> ProfiledResource:
    return ProfiledResource(resource, profile, account_id, region)


def unwrap_resource(resource: Any) -> Any:
    """래퍼를 모두 벗긴 원래 리소스 반환"""
    while isinstance(resource, _WrappedResource):
        resource = resource.resource
    return resource


def get_resource_region(resource: Any) -> str:
    """래퍼에 기록된 리전 (없으면 빈 문자열)"""
    return getattr(resource, "region", "") if isinstance(resource, _WrappedResource) else ""


def get_resource_profile(resource: Any) -> str:
    """ProfiledResource의 프로파일 (없으면 빈 문자열)"""
    return resource.profile if isinstance(resource, ProfiledResource) else ""


def get_resource_account_id(resource: Any) -> str:
    """ProfiledResource의 계정 ID (없으면 빈 문자열)"""
    return resource.account_id if isinstance(resource, ProfiledResource) else ""


# =============================================================================
# DAO
# =============================================================================


class DAO(ABC):
    """리소스 조회/삭제 계약

    상태를 갖지 않습니다(API client 제외). 매 호출이 독립적인 네트워크 요청입니다.
    호출자는 작업 전에 supports()로 지원 여부를 확인해야 합니다.
    """

    @property
    @abstractmethod
    def service_name(self) -> str:
        """서비스 이름 (예: "ec2")"""

    @property
    @abstractmethod
    def resource_type(self) -> str:
        """리소스 타입 (예: "instances")"""

    @abstractmethod
    def list(self, ctx: RequestContext) -> list[Any]:
        """전체 목록 조회

        Raises:
            APICallError: AWS API 실패
        """

    @abstractmethod
    def get(self, ctx: RequestContext, resource_id: str) -> Any:
        """단건 조회

        Raises:
            NotFoundError: ID에 해당하는 리소스가 없음
            UnsupportedOperationError: 단건 조회를 지원하지 않는 리소스
        """

    @abstractmethod
    def delete(self, ctx: RequestContext, resource_id: str) -> None:
        """삭제 (이미 없는 리소스면 성공으로 간주)

        Raises:
            ResourceInUseError: 의존 리소스 때문에 삭제할 수 없음
            UnsupportedOperationError: 삭제를 지원하지 않는 리소스
        """

    @abstractmethod
    def supports(self, op: Operation) -> bool:
        """작업 지원 여부"""


class BaseDAO(DAO):
    """DAO 기본 구현

    Args:
        service: 서비스 이름
        resource: 리소스 타입
    """

    SUPPORTED_OPERATIONS: frozenset[Operation] = frozenset({Operation.LIST, Operation.GET, Operation.DELETE})

    def __init__(self, service: str, resource: str):
        self._service = service
        self._resource = resource

    @property
    def service_name(self) -> str:
        return self._service

    @property
    def resource_type(self) -> str:
        return self._resource

    @property
    def key(self) -> str:
        return f"{self._service}/{self._resource}"

    def get(self, ctx: RequestContext, resource_id: str) -> Any:
        raise UnsupportedOperationError(self.key, Operation.GET.value)

    def delete(self, ctx: RequestContext, resource_id: str) -> None:
        raise UnsupportedOperationError(self.key, Operation.DELETE.value)

    def supports(self, op: Operation) -> bool:
        return op in self.SUPPORTED_OPERATIONS


class PaginatedDAO(BaseDAO):
    """페이지 단위 조회를 지원하는 DAO

    list_page()는 한 페이지와 다음 토큰을 반환합니다. 토큰이 빈 문자열이면 마지막 페이지입니다.
    page_size는 MAX_PAGE_SIZE(백엔드 API 최대값)로 잘립니다.
    """

    SUPPORTED_OPERATIONS = frozenset({Operation.LIST, Operation.GET, Operation.DELETE, Operation.LIST_PAGE})
    MAX_PAGE_SIZE: int = 50

    @abstractmethod
    def list_page(self, ctx: RequestContext, page_size: int, page_token: str = "") -> tuple[list[Any], str]:
        """한 페이지 조회

        Returns:
            (리소스 목록, 다음 페이지 토큰)
        """

    def clamp_page_size(self, page_size: int) -> int:
        """페이지 크기를 1..MAX_PAGE_SIZE 범위로 보정"""
        if page_size <= 0 or page_size > self.MAX_PAGE_SIZE:
            return self.MAX_PAGE_SIZE
        return page_size


def is_paginated(dao: DAO) -> bool:
    """list_page를 사용할 수 있는 DAO인지 확인"""
    return isinstance(dao, PaginatedDAO) and dao.supports(Operation.LIST_PAGE)


def ensure_supported(dao: DAO, op: Operation) -> None:
    """지원하지 않는 작업이면 UnsupportedOperationError 발생"""
    if not dao.supports(op):
        raise UnsupportedOperationError(f"{dao.service_name}/{dao.resource_type}", op.value)


DAOFactory = Callable[["RequestContext"], DAO]
