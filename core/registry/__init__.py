"""
core/registry - DAO/Renderer 레지스트리

Example:
    from core.registry import Entry, get_registry

    registry = get_registry()
    dao = registry.get_dao(ctx, "ec2", "instances")
"""

from __future__ import annotations

import threading

from .catalog import Catalog, ServiceCategory, load_catalog, parse_catalog
from .registry import Entry, Registry, SearchHit, ServiceResource

_registry: Registry | None = None
_registry_lock = threading.Lock()


def get_registry() -> Registry:
    """프로세스 전역 레지스트리 (최초 호출 시 카탈로그로 생성)"""
    global _registry
    with _registry_lock:
        if _registry is None:
            _registry = Registry(load_catalog())
        return _registry


def reset_registry() -> None:
    """전역 레지스트리 초기화 (테스트용)"""
    global _registry
    with _registry_lock:
        _registry = None


__all__: list[str] = [
    "Catalog",
    "Entry",
    "Registry",
    "SearchHit",
    "ServiceCategory",
    "ServiceResource",
    "get_registry",
    "load_catalog",
    "parse_catalog",
    "reset_registry",
]
