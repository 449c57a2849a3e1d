"""
core/bootstrap.py - 플러그인 발견 및 레지스트리 초기화

plugins/ 아래 각 서비스 패키지는 다음 메타데이터를 가집니다.

    CATEGORY = {"name": "ec2", "display_name": "EC2", "aliases": [...]}
    RESOURCES = [{"name": "instances", "module": "instances", "sub_resource": False}]

RESOURCES의 각 모듈은 register(registry, actions)를 노출하며,
bootstrap()이 모두 호출한 뒤 두 레지스트리를 close합니다.

Usage:
    from core.bootstrap import bootstrap

    registry, actions = bootstrap()
"""

from __future__ import annotations

import importlib
import logging
import threading
from pathlib import Path
from types import ModuleType

from core.action import ActionRegistry, get_action_registry
from core.config import get_plugins_path
from core.exceptions import RegistryClosedError
from core.registry import Registry, get_registry

logger = logging.getLogger(__name__)

PLUGINS_PACKAGE = "plugins"

_bootstrap_lock = threading.Lock()


def discover_plugins(plugins_path: Path | None = None) -> list[ModuleType]:
    """RESOURCES 메타데이터가 있는 서비스 패키지 목록 (디렉토리 이름순)"""
    plugins_path = plugins_path or get_plugins_path()
    if not plugins_path.is_dir():
        logger.warning(f"플러그인 디렉토리 없음: {plugins_path}")
        return []

    packages: list[ModuleType] = []
    for child in sorted(plugins_path.iterdir()):
        if not child.is_dir() or child.name.startswith(("_", ".")):
            continue
        if not (child / "__init__.py").exists():
            continue

        module = importlib.import_module(f"{PLUGINS_PACKAGE}.{child.name}")
        if not getattr(module, "RESOURCES", None):
            continue
        packages.append(module)

    return packages


def load_plugin(package: ModuleType, registry: Registry, actions: ActionRegistry) -> list[str]:
    """서비스 패키지 하나를 등록하고 등록된 "service/resource" 키 목록 반환"""
    category = getattr(package, "CATEGORY", {})
    service = category.get("name", package.__name__.rsplit(".", 1)[-1])

    if category.get("display_name"):
        registry.set_display_name(service, category["display_name"])
    for alias in category.get("aliases", []):
        registry.register_alias(alias, service)

    loaded = []
    for resource in package.RESOURCES:
        module = importlib.import_module(f"{package.__name__}.{resource['module']}")
        module.register(registry, actions)
        if resource.get("sub_resource"):
            registry.register_sub_resource(service, resource["name"])
        loaded.append(f"{service}/{resource['name']}")

    return loaded


def bootstrap(
    registry: Registry | None = None,
    actions: ActionRegistry | None = None,
    plugins_path: Path | None = None,
) -> tuple[Registry, ActionRegistry]:
    """모든 플러그인을 등록하고 레지스트리를 닫음

    둘 다 이미 닫혔으면 아무 것도 하지 않고 그대로 반환합니다.

    Args:
        registry: 리소스 레지스트리 (기본: 전역)
        actions: 액션 레지스트리 (기본: 전역)
        plugins_path: 플러그인 디렉토리 (기본: 프로젝트의 plugins/)

    Raises:
        RegistryClosedError: 한쪽 레지스트리만 닫혀 있음
    """
    registry = registry or get_registry()
    actions = actions or get_action_registry()

    with _bootstrap_lock:
        if registry.closed and actions.closed:
            return registry, actions
        for target in (registry, actions):
            if target.closed:
                raise RegistryClosedError(target.name, "bootstrap")

        loaded: list[str] = []
        for package in discover_plugins(plugins_path):
            loaded.extend(load_plugin(package, registry, actions))

        registry.close()
        actions.close()

    logger.debug(f"플러그인 등록 완료: {len(loaded)}개 리소스 ({', '.join(loaded)})")
    return registry, actions
