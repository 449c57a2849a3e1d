"""
core/render/base.py - Renderer 계약

Resource를 표시용 데이터로 바꾸는 순수 매핑입니다. 렌더러는 I/O를 하지 않으며
값이 없거나 리소스 타입이 다르면 예외 대신 빈 값을 반환합니다.

구성 요소:
    - Column: 테이블 컬럼 (이름, 폭, getter, 스타일, 우선순위)
    - SummaryField: 헤더 패널 라벨/값
    - Navigation: 다른 리소스 뷰로 이동하는 단축키
    - MetricSpec: 목록에 붙일 CloudWatch 지표 정의
    - Renderer / BaseRenderer: 렌더러 계약과 기본 구현
    - Navigator / MetricSpecProvider: 선택 기능 (Protocol)
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from .format import format_tags

logger = logging.getLogger(__name__)

Getter = Callable[[Any], str]
Colorer = Callable[[str], str]


# =============================================================================
# 표시 데이터 타입
# =============================================================================


@dataclass(frozen=True)
class Column:
    """테이블 컬럼

    Attributes:
        name: 헤더 이름
        width: 표시 폭
        getter: Resource → 셀 문자열
        style: 고정 Rich 스타일
        colorer: 셀 값에 따라 스타일을 고르는 함수 (style보다 우선)
        priority: 작을수록 중요. 폭이 좁으면 큰 값부터 숨김
    """

    name: str
    width: int
    getter: Getter | None = None
    style: str = ""
    colorer: Colorer | None = None
    priority: int = 0

    def style_for(self, value: str) -> str:
        if self.colorer is not None:
            return self.colorer(value)
        return self.style


@dataclass(frozen=True)
class SummaryField:
    """헤더 요약 라벨/값"""

    label: str
    value: str
    style: str = ""


@dataclass(frozen=True)
class Navigation:
    """다른 리소스 뷰로 이동하는 단축키

    Attributes:
        key: 단축키 (예: "s")
        label: 표시 이름 (예: "Subnets")
        service: 대상 서비스
        resource: 대상 리소스 타입
        filter_field: 대상 DAO에 넘길 필터 키 (예: "VpcId")
        filter_value: 현재 리소스에서 뽑은 필터 값
        auto_reload: 대상 뷰 자동 새로고침
        reload_interval: 새로고침 주기 (초)
    """

    key: str
    label: str
    service: str
    resource: str
    filter_field: str = ""
    filter_value: str = ""
    auto_reload: bool = False
    reload_interval: float = 3.0


@dataclass(frozen=True)
class MetricSpec:
    """목록에 표시할 CloudWatch 지표"""

    namespace: str
    metric_name: str
    dimension_name: str
    stat: str = "Average"
    column_header: str = ""
    unit: str = ""


# =============================================================================
# Renderer
# =============================================================================


class Renderer(ABC):
    """렌더러 계약"""

    @property
    @abstractmethod
    def service_name(self) -> str: ...

    @property
    @abstractmethod
    def resource_type(self) -> str: ...

    @abstractmethod
    def columns(self) -> list[Column]: ...

    @abstractmethod
    def render_row(self, resource: Any, columns: list[Column] | None = None) -> list[str]: ...

    @abstractmethod
    def render_detail(self, resource: Any) -> str: ...

    @abstractmethod
    def render_summary(self, resource: Any) -> list[SummaryField]: ...


@runtime_checkable
class Navigator(Protocol):
    """교차 리소스 이동을 제공하는 렌더러"""

    def navigations(self, resource: Any) -> list[Navigation]: ...


@runtime_checkable
class MetricSpecProvider(Protocol):
    """인라인 지표를 제공하는 렌더러"""

    def metric_spec(self) -> MetricSpec | None: ...


class BaseRenderer(Renderer):
    """Renderer 기본 구현

    서비스별 렌더러는 COLUMNS만 정의하거나 render_detail/render_summary를 재정의합니다.
    """

    def __init__(self, service: str, resource: str, columns: list[Column] | None = None):
        self._service = service
        self._resource = resource
        self._columns = list(columns or [])

    @property
    def service_name(self) -> str:
        return self._service

    @property
    def resource_type(self) -> str:
        return self._resource

    def columns(self) -> list[Column]:
        return list(self._columns)

    def render_row(self, resource: Any, columns: list[Column] | None = None) -> list[str]:
        """컬럼 getter를 적용한 행 (getter 예외는 빈 셀)"""
        row = []
        for col in self._columns if columns is None else columns:
            if col.getter is None:
                row.append("")
                continue
            try:
                value = col.getter(resource)
            except (AttributeError, KeyError, TypeError, ValueError, IndexError) as e:
                logger.debug(f"{self._service}/{self._resource} 컬럼 {col.name} 렌더링 실패: {e}")
                value = ""
            row.append("" if value is None else str(value))
        return row

    def render_detail(self, resource: Any) -> str:
        return ""

    def render_summary(self, resource: Any) -> list[SummaryField]:
        fields = [SummaryField("ID", resource.id)]
        if resource.name and resource.name != resource.id:
            fields.append(SummaryField("Name", resource.name))
        return fields


# =============================================================================
# 헬퍼
# =============================================================================


def tags_column(width: int = 30, priority: int = 9) -> Column:
    """태그 요약 컬럼"""
    return Column(
        name="TAGS",
        width=width,
        getter=lambda r: format_tags(r.tags, width),
        priority=priority,
    )


def navigations_for(renderer: Renderer, resource: Any) -> list[Navigation]:
    """Navigator 기능이 있으면 이동 목록, 없으면 빈 목록"""
    if isinstance(renderer, Navigator):
        return list(renderer.navigations(resource))
    return []


def metric_spec_for(renderer: Renderer) -> MetricSpec | None:
    """MetricSpecProvider 기능이 있으면 지표 정의, 없으면 None"""
    if isinstance(renderer, MetricSpecProvider):
        return renderer.metric_spec()
    return None


RendererFactory = Callable[[], Renderer]
