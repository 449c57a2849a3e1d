"""
core/registry/registry.py - (service, resource) → DAO/Renderer 레지스트리

두 계층으로 엔트리를 보관합니다.
    - custom: 직접 작성한 구현 (우선)
    - generated: 코드 생성 등으로 만든 기본 구현

시작 단계에서 플러그인이 모두 등록한 뒤 close()를 호출하면 이후 등록은
RegistryClosedError로 거부됩니다. 조회는 close 전후 모두 가능합니다.

Usage:
    registry = Registry(load_catalog())
    registry.register_custom("ec2", "instances", Entry(InstanceDAO, InstanceRenderer))
    registry.close()

    dao = registry.get_dao(ctx, "ec2", "instances")
    renderer = registry.get_renderer("ec2", "instances")
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import TYPE_CHECKING

from rapidfuzz import fuzz

from core.exceptions import NotRegisteredError, RegistryClosedError

from .catalog import Catalog, ServiceCategory

if TYPE_CHECKING:
    from core.context import RequestContext
    from core.dao import DAO, DAOFactory
    from core.render import Renderer, RendererFactory

logger = logging.getLogger(__name__)

# Fuzzy 매칭 최소 유사도 (0-100)
FUZZY_MIN_SCORE = 70


@dataclass(frozen=True)
class ServiceResource:
    """레지스트리 키"""

    service: str
    resource: str

    @property
    def key(self) -> str:
        return f"{self.service}/{self.resource}"

    def __str__(self) -> str:
        return self.key


@dataclass(frozen=True)
class Entry:
    """DAO/Renderer 팩토리 쌍"""

    dao_factory: DAOFactory | None
    renderer_factory: RendererFactory | None


@dataclass(frozen=True)
class SearchHit:
    """서비스/리소스 검색 결과"""

    service: str
    resource: str
    score: float
    match_type: str


class Registry:
    """DAO/Renderer 레지스트리"""

    name = "resource registry"

    def __init__(self, catalog: Catalog | None = None):
        catalog = catalog or Catalog()
        self._lock = threading.RLock()
        self._custom: dict[ServiceResource, Entry] = {}
        self._generated: dict[ServiceResource, Entry] = {}
        self._services: dict[str, list[str]] = {}
        self._aliases: dict[str, str] = dict(catalog.aliases)
        self._display_names: dict[str, str] = dict(catalog.display_names)
        self._categories: list[ServiceCategory] = list(catalog.categories)
        self._default_resources: dict[str, str] = dict(catalog.default_resources)
        self._sub_resources: set[str] = set(catalog.sub_resources)
        self._user_defaults: dict[str, str] = {}
        self._closed = False

    # -------------------------------------------------------------------------
    # 등록
    # -------------------------------------------------------------------------

    def _check_open(self, key: str = "") -> None:
        if self._closed:
            raise RegistryClosedError(self.name, key)

    def register_custom(self, service: str, resource: str, entry: Entry) -> None:
        """직접 작성한 구현 등록 (generated보다 우선)"""
        sr = ServiceResource(service, resource)
        with self._lock:
            self._check_open(sr.key)
            self._custom[sr] = entry
            self._add_service(service, resource)
        logger.debug(f"custom 등록: {sr}")

    def register_generated(self, service: str, resource: str, entry: Entry) -> None:
        """기본 구현 등록"""
        sr = ServiceResource(service, resource)
        with self._lock:
            self._check_open(sr.key)
            self._generated[sr] = entry
            self._add_service(service, resource)
        logger.debug(f"generated 등록: {sr}")

    def register_alias(self, alias: str, target: str) -> None:
        """별칭 등록 (target은 "service" 또는 "service/resource")"""
        with self._lock:
            self._check_open(alias)
            self._aliases[alias] = target

    def register_sub_resource(self, service: str, resource: str) -> None:
        """네비게이션으로만 접근하는 하위 리소스 지정"""
        with self._lock:
            self._check_open(f"{service}/{resource}")
            self._sub_resources.add(f"{service}/{resource}")

    def set_display_name(self, service: str, display_name: str) -> None:
        with self._lock:
            self._check_open(service)
            self._display_names[service] = display_name

    def _add_service(self, service: str, resource: str) -> None:
        resources = self._services.setdefault(service, [])
        if resource not in resources:
            resources.append(resource)

    def close(self) -> None:
        """등록 단계 종료 (이후 register_* 호출은 RegistryClosedError)"""
        with self._lock:
            self._closed = True
        logger.debug(f"{self.name} closed: 서비스 {len(self._services)}개")

    @property
    def closed(self) -> bool:
        return self._closed

    # -------------------------------------------------------------------------
    # 조회
    # -------------------------------------------------------------------------

    def get(self, service: str, resource: str) -> Entry | None:
        """엔트리 조회 (custom > generated)"""
        sr = ServiceResource(service, resource)
        with self._lock:
            entry = self._custom.get(sr)
            if entry is None:
                entry = self._generated.get(sr)
            return entry

    def has_resource(self, service: str, resource: str) -> bool:
        return self.get(service, resource) is not None

    def get_dao(self, ctx: RequestContext, service: str, resource: str) -> DAO:
        """DAO 인스턴스 생성

        Raises:
            NotRegisteredError: 등록되지 않았거나 DAO 팩토리가 없음
        """
        entry = self.get(service, resource)
        if entry is None or entry.dao_factory is None:
            raise NotRegisteredError("DAO", service, resource)
        return entry.dao_factory(ctx)

    def get_renderer(self, service: str, resource: str) -> Renderer:
        """Renderer 인스턴스 생성

        Raises:
            NotRegisteredError: 등록되지 않았거나 Renderer 팩토리가 없음
        """
        entry = self.get(service, resource)
        if entry is None or entry.renderer_factory is None:
            raise NotRegisteredError("renderer", service, resource)
        return entry.renderer_factory()

    def list_services(self) -> list[str]:
        """등록된 서비스 이름 (알파벳순)"""
        with self._lock:
            return sorted(self._services)

    def list_services_by_category(self) -> list[ServiceCategory]:
        """카테고리별 서비스 (등록된 서비스만, 카테고리 순서 유지)

        어느 카테고리에도 속하지 않은 서비스는 "Other"로 묶습니다.
        """
        with self._lock:
            result: list[ServiceCategory] = []
            categorized: set[str] = set()
            for cat in self._categories:
                services = tuple(s for s in cat.services if s in self._services)
                categorized.update(cat.services)
                if services:
                    result.append(ServiceCategory(name=cat.name, services=services))

            others = tuple(sorted(s for s in self._services if s not in categorized))
            if others:
                result.append(ServiceCategory(name="Other", services=others))
            return result

    def list_resources(self, service: str) -> list[str]:
        """서비스의 리소스 타입 (알파벳순, 하위 리소스 제외)"""
        with self._lock:
            return sorted(r for r in self._services.get(service, []) if f"{service}/{r}" not in self._sub_resources)

    def is_sub_resource(self, service: str, resource: str) -> bool:
        with self._lock:
            return f"{service}/{resource}" in self._sub_resources

    def default_resource(self, service: str) -> str:
        """기본 리소스 타입

        사용자 지정 → 카탈로그 기본값 → 알파벳순 첫 리소스 순서로 결정합니다.
        등록되지 않은 값은 건너뜁니다.
        """
        with self._lock:
            candidates = [self._user_defaults.get(service), self._default_resources.get(service)]

        for candidate in candidates:
            if candidate and self.has_resource(service, candidate):
                return candidate

        resources = self.list_resources(service)
        return resources[0] if resources else ""

    def set_default_resource(self, service: str, resource: str) -> None:
        """사용자 기본 리소스 지정 (close 이후에도 허용되는 사용자 설정)"""
        with self._lock:
            self._user_defaults[service] = resource

    def display_name(self, service: str) -> str:
        with self._lock:
            return self._display_names.get(service, service)

    # -------------------------------------------------------------------------
    # 별칭 / 검색
    # -------------------------------------------------------------------------

    def resolve_alias(self, value: str) -> tuple[str, str, bool]:
        """별칭 해석

        Returns:
            (service, resource, found). resource는 별칭에 포함된 경우에만 채워집니다.
        """
        with self._lock:
            resolved = self._aliases.get(value)

        if resolved is None:
            return value, "", False

        service, _, resource = resolved.partition("/")
        return service, resource, True

    def aliases_for_service(self, service: str) -> list[str]:
        with self._lock:
            return sorted(a for a, target in self._aliases.items() if target.partition("/")[0] == service)

    def resolve(self, service: str, resource: str | None = None) -> ServiceResource:
        """별칭/기본 리소스를 반영한 최종 키

        Raises:
            NotRegisteredError: 최종 키가 등록되지 않음
        """
        alias_service, alias_resource, _ = self.resolve_alias(service)
        resolved_resource = resource or alias_resource or self.default_resource(alias_service)

        if not self.has_resource(alias_service, resolved_resource):
            raise NotRegisteredError("resource", alias_service, resolved_resource or "-")
        return ServiceResource(alias_service, resolved_resource)

    def search(self, query: str, limit: int = 10) -> list[SearchHit]:
        """서비스/리소스/별칭 검색

        우선순위:
        1. 정확히 일치 (1.0)
        2. 시작 (0.95)
        3. 포함 (0.85)
        4. 별칭 일치 (0.8)
        5. Fuzzy 매칭 (0.4~0.7)
        """
        q = query.strip().lower()
        if not q:
            return []

        with self._lock:
            pairs = [(s, r) for s, resources in self._services.items() for r in resources]
            aliases = dict(self._aliases)
            display = dict(self._display_names)

        hits: dict[tuple[str, str], SearchHit] = {}

        def add(service: str, resource: str, score: float, match_type: str) -> None:
            current = hits.get((service, resource))
            if current is None or current.score < score:
                hits[(service, resource)] = SearchHit(service, resource, score, match_type)

        for service, resource in pairs:
            targets = [f"{service}/{resource}", service, resource, display.get(service, "").lower()]
            score, match_type = _score(q, [t for t in targets if t])
            if score > 0:
                add(service, resource, score, match_type)

        for alias, target in aliases.items():
            if q != alias.lower():
                continue
            service, _, resource = target.partition("/")
            for s, r in pairs:
                if s == service and (not resource or r == resource):
                    add(s, r, 0.8, "alias")

        return sorted(hits.values(), key=lambda h: (-h.score, h.service, h.resource))[:limit]


def _score(query: str, targets: list[str]) -> tuple[float, str]:
    best = (0.0, "")
    for target in targets:
        if query == target:
            return 1.0, "exact"
        if target.startswith(query):
            best = max(best, (0.95, "prefix"))
        elif query in target:
            best = max(best, (0.85, "contains"))
        elif len(query) >= 3:
            ratio = fuzz.ratio(query, target)
            if ratio >= FUZZY_MIN_SCORE:
                normalized = (ratio - FUZZY_MIN_SCORE) / (100 - FUZZY_MIN_SCORE)
                best = max(best, (0.4 + 0.3 * normalized, "fuzzy"))
    return best
