"""
core/registry/catalog.py - 서비스 카탈로그 로드

catalog.yaml에서 별칭, 표시 이름, 카테고리, 기본 리소스, 하위 리소스 목록을 읽습니다.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path

import yaml

from core.exceptions import ConfigError

logger = logging.getLogger(__name__)

CATALOG_PATH = Path(__file__).parent / "catalog.yaml"


@dataclass(frozen=True)
class ServiceCategory:
    """서비스 카테고리 (표시 순서 유지)"""

    name: str
    services: tuple[str, ...]


@dataclass(frozen=True)
class Catalog:
    """서비스 카탈로그"""

    aliases: dict[str, str] = field(default_factory=dict)
    display_names: dict[str, str] = field(default_factory=dict)
    categories: tuple[ServiceCategory, ...] = ()
    default_resources: dict[str, str] = field(default_factory=dict)
    sub_resources: frozenset[str] = frozenset()


def parse_catalog(data: dict) -> Catalog:
    """YAML 딕셔너리를 Catalog로 변환

    Raises:
        ConfigError: 형식이 잘못된 경우
    """
    if not isinstance(data, dict):
        raise ConfigError("catalog", "최상위 값은 매핑이어야 합니다")

    try:
        categories = tuple(
            ServiceCategory(name=str(c["name"]), services=tuple(str(s) for s in c.get("services", [])))
            for c in data.get("categories") or []
        )
        return Catalog(
            aliases={str(k): str(v) for k, v in (data.get("aliases") or {}).items()},
            display_names={str(k): str(v) for k, v in (data.get("display_names") or {}).items()},
            categories=categories,
            default_resources={str(k): str(v) for k, v in (data.get("default_resources") or {}).items()},
            sub_resources=frozenset(str(s) for s in data.get("sub_resources") or []),
        )
    except (KeyError, TypeError, AttributeError) as e:
        raise ConfigError("catalog", f"잘못된 카탈로그 형식: {e}", cause=e) from e


@lru_cache(maxsize=1)
def load_catalog(path: Path = CATALOG_PATH) -> Catalog:
    """카탈로그 파일 로드 (캐시)"""
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(str(path), "카탈로그 로드 실패", cause=e) from e

    catalog = parse_catalog(data)
    logger.debug(f"카탈로그 로드: 별칭 {len(catalog.aliases)}개, 카테고리 {len(catalog.categories)}개")
    return catalog
