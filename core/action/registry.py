"""
core/action/registry.py - 액션 레지스트리

"service/resource" 키로 액션 목록과 API executor를 보관합니다.
플러그인 등록이 끝나면 close()로 쓰기를 막고, 이후에는 읽기만 합니다.
"""

from __future__ import annotations

import logging
import threading

from core.exceptions import RegistryClosedError

from .types import Action, ExecutorFunc

logger = logging.getLogger(__name__)


def _key(service: str, resource: str) -> str:
    return f"{service}/{resource}"


class ActionRegistry:
    """액션/executor 레지스트리"""

    name = "action registry"

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._actions: dict[str, tuple[Action, ...]] = {}
        self._executors: dict[str, ExecutorFunc] = {}
        self._closed = False

    def register(self, service: str, resource: str, actions: list[Action]) -> None:
        """액션 목록 등록 (같은 키는 덮어씀)"""
        key = _key(service, resource)
        with self._lock:
            if self._closed:
                raise RegistryClosedError(self.name, key)
            self._actions[key] = tuple(actions)
        logger.debug(f"액션 등록 [{key}]: {[a.name for a in actions]}")

    def register_executor(self, service: str, resource: str, executor: ExecutorFunc) -> None:
        """API 액션 executor 등록"""
        key = _key(service, resource)
        with self._lock:
            if self._closed:
                raise RegistryClosedError(self.name, key)
            self._executors[key] = executor

    def get(self, service: str, resource: str) -> list[Action] | None:
        """등록된 액션 목록 (없으면 None)"""
        with self._lock:
            actions = self._actions.get(_key(service, resource))
        return list(actions) if actions is not None else None

    def get_executor(self, service: str, resource: str) -> ExecutorFunc | None:
        with self._lock:
            return self._executors.get(_key(service, resource))

    def actions_for(self, service: str, resource: str, target: object) -> list[Action]:
        """리소스에 적용 가능한 액션만 (filter 반영)"""
        return [a for a in self.get(service, resource) or [] if a.applies_to(target)]

    def close(self) -> None:
        with self._lock:
            self._closed = True

    @property
    def closed(self) -> bool:
        return self._closed


def find_action(actions: list[Action], shortcut: str) -> Action | None:
    """단축키 또는 이름으로 액션 찾기"""
    for action in actions:
        if action.shortcut == shortcut:
            return action
    lowered = shortcut.lower()
    for action in actions:
        if action.name.lower() == lowered:
            return action
    return None


_registry: ActionRegistry | None = None
_registry_lock = threading.Lock()


def get_action_registry() -> ActionRegistry:
    """프로세스 전역 액션 레지스트리"""
    global _registry
    with _registry_lock:
        if _registry is None:
            _registry = ActionRegistry()
        return _registry


def reset_action_registry() -> None:
    """전역 액션 레지스트리 초기화 (테스트용)"""
    global _registry
    with _registry_lock:
        _registry = None
