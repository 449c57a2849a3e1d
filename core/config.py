"""
core/config.py - 중앙 설정 관리

두 종류의 설정을 다룹니다.

    1. settings (불변 상수): 기본 리전, 타임아웃, 페이지 크기 등
    2. RuntimeConfig (가변 상태): 읽기 전용 모드, 데모 모드, 현재 프로파일/리전

RuntimeConfig는 YAML 설정 파일 → 환경변수 → CLI 플래그 순서로 덮어씁니다.
읽기 전용 플래그는 모든 액션 디스패치 직전에 읽히므로 Lock으로 보호합니다.

Usage:
    from core.config import get_runtime_config, is_read_only, set_read_only

    config = get_runtime_config()
    config.region           # "ap-northeast-2"

    set_read_only(True)
    if is_read_only():
        ...
"""

from __future__ import annotations

import logging
import os
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from core.exceptions import ConfigError

logger = logging.getLogger(__name__)


# =============================================================================
# 불변 설정
# =============================================================================


@dataclass(frozen=True)
class Settings:
    """애플리케이션 기본값 (불변)"""

    DEFAULT_REGION: str = "ap-northeast-2"
    API_TIMEOUT: int = 30
    API_CONNECT_TIMEOUT: int = 10
    API_MAX_ATTEMPTS: int = 5
    DEFAULT_PAGE_SIZE: int = 50
    MAX_FETCH_WORKERS: int = 5
    CONFIG_ENV_VAR: str = "AWSB_CONFIG"
    CONFIG_RELATIVE_PATH: str = ".config/awsb/config.yaml"


settings = Settings()

_TRUE_VALUES = {"true", "1", "yes", "on"}
_FALSE_VALUES = {"false", "0", "no", "off"}


# =============================================================================
# 경로 / 버전
# =============================================================================


def get_project_root() -> Path:
    """프로젝트 루트 경로 반환"""
    return Path(__file__).resolve().parent.parent


def get_plugins_path() -> Path:
    """plugins 디렉토리 경로 반환"""
    return get_project_root() / "plugins"


def get_version() -> str:
    """버전 문자열 반환

    설치된 배포판 메타데이터를 우선 사용하고, 소스 체크아웃이면 "0.0.0-dev"를 반환합니다.
    """
    from importlib.metadata import PackageNotFoundError, version

    try:
        return version("aws-browser")
    except PackageNotFoundError:
        return "0.0.0-dev"


# =============================================================================
# 환경변수 헬퍼
# =============================================================================


def get_env_bool(name: str, default: bool = False) -> bool:
    """환경변수를 bool로 읽기 (알 수 없는 값이면 default)"""
    value = os.environ.get(name)
    if value is None:
        return default

    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    return default


def get_env_int(name: str, default: int = 0) -> int:
    """환경변수를 int로 읽기 (변환 실패 시 default)"""
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def get_default_profile() -> str | None:
    """AWS_PROFILE → AWS_DEFAULT_PROFILE 순서로 기본 프로파일 반환"""
    return os.environ.get("AWS_PROFILE") or os.environ.get("AWS_DEFAULT_PROFILE") or None


def get_default_region() -> str:
    """AWS_REGION → AWS_DEFAULT_REGION → settings.DEFAULT_REGION 순서로 기본 리전 반환"""
    return os.environ.get("AWS_REGION") or os.environ.get("AWS_DEFAULT_REGION") or settings.DEFAULT_REGION


def get_config_path() -> Path:
    """설정 파일 경로 ($AWSB_CONFIG 우선)"""
    override = os.environ.get(settings.CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / settings.CONFIG_RELATIVE_PATH


# =============================================================================
# 로깅 설정
# =============================================================================


@dataclass
class LogConfig:
    """로깅 설정"""

    level: str = "WARNING"
    format: str = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"

    @classmethod
    def from_env(cls) -> LogConfig:
        """LOG_LEVEL / LOG_FORMAT 환경변수에서 로드"""
        default = cls()
        return cls(
            level=os.environ.get("LOG_LEVEL", default.level).upper(),
            format=os.environ.get("LOG_FORMAT", default.format),
        )


# =============================================================================
# 런타임 설정
# =============================================================================


@dataclass
class RuntimeConfig:
    """프로세스 런타임 설정

    Attributes:
        read_only: 허용 목록 외의 액션 차단
        demo_mode: 상세 화면의 태그 등 민감 정보 숨김
        profile: 현재 AWS 프로파일 (None이면 기본 자격 증명 체인)
        region: 현재 AWS 리전
        page_size: 페이지 조회 기본 크기
    """

    read_only: bool = False
    demo_mode: bool = False
    profile: str | None = None
    region: str = settings.DEFAULT_REGION
    page_size: int = settings.DEFAULT_PAGE_SIZE
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    # -------------------------------------------------------------------------
    # 로드
    # -------------------------------------------------------------------------

    @classmethod
    def load(cls, path: Path | None = None) -> RuntimeConfig:
        """설정 파일과 환경변수로부터 RuntimeConfig 생성

        Args:
            path: 설정 파일 경로 (None이면 get_config_path())

        Returns:
            RuntimeConfig

        Raises:
            ConfigError: YAML 파싱 실패 또는 값 타입 오류
        """
        config = cls(profile=get_default_profile(), region=get_default_region())

        config_path = path or get_config_path()
        if config_path.is_file():
            config.apply(_read_yaml(config_path))
            logger.debug(f"설정 파일 로드: {config_path}")

        if os.environ.get("AWSB_READ_ONLY") is not None:
            config.read_only = get_env_bool("AWSB_READ_ONLY", config.read_only)
        if os.environ.get("AWSB_DEMO_MODE") is not None:
            config.demo_mode = get_env_bool("AWSB_DEMO_MODE", config.demo_mode)
        if os.environ.get("AWS_PROFILE"):
            config.profile = os.environ["AWS_PROFILE"]
        if os.environ.get("AWS_REGION") or os.environ.get("AWS_DEFAULT_REGION"):
            config.region = get_default_region()

        return config

    def apply(self, values: dict[str, Any]) -> None:
        """딕셔너리 값으로 설정 덮어쓰기 (None 값은 무시)

        Raises:
            ConfigError: 알 수 없는 키 또는 타입 불일치
        """
        expected_types: dict[str, tuple[type, ...]] = {
            "read_only": (bool,),
            "demo_mode": (bool,),
            "profile": (str,),
            "region": (str,),
            "page_size": (int,),
        }

        with self._lock:
            for key, value in values.items():
                if value is None:
                    continue
                if key not in expected_types:
                    raise ConfigError(key, "알 수 없는 설정 키")
                if not isinstance(value, expected_types[key]) or (key == "page_size" and isinstance(value, bool)):
                    raise ConfigError(key, f"잘못된 타입: {type(value).__name__}")
                if key == "page_size" and value <= 0:
                    raise ConfigError(key, "0보다 커야 합니다")
                setattr(self, key, value)

    # -------------------------------------------------------------------------
    # 스레드 안전 접근자
    # -------------------------------------------------------------------------

    def get_read_only(self) -> bool:
        with self._lock:
            return self.read_only

    def set_read_only(self, enabled: bool) -> None:
        with self._lock:
            self.read_only = enabled
        logger.info(f"읽기 전용 모드: {'ON' if enabled else 'OFF'}")

    def get_demo_mode(self) -> bool:
        with self._lock:
            return self.demo_mode


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(str(path), "YAML 파싱 실패", cause=e) from e
    except OSError as e:
        raise ConfigError(str(path), "파일 읽기 실패", cause=e) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(str(path), "최상위 값은 매핑이어야 합니다")
    return data


# =============================================================================
# 전역 인스턴스
# =============================================================================

_runtime_config: RuntimeConfig | None = None
_runtime_lock = threading.Lock()


def get_runtime_config() -> RuntimeConfig:
    """전역 RuntimeConfig 반환 (최초 호출 시 로드)"""
    global _runtime_config
    with _runtime_lock:
        if _runtime_config is None:
            _runtime_config = RuntimeConfig.load()
        return _runtime_config


def set_runtime_config(config: RuntimeConfig) -> None:
    """전역 RuntimeConfig 교체 (CLI 초기화 / 테스트용)"""
    global _runtime_config
    with _runtime_lock:
        _runtime_config = config


def reset_runtime_config() -> None:
    """전역 RuntimeConfig 초기화 (테스트용)"""
    global _runtime_config
    with _runtime_lock:
        _runtime_config = None


def is_read_only() -> bool:
    """읽기 전용 모드 여부"""
    return get_runtime_config().get_read_only()


def set_read_only(enabled: bool) -> None:
    """읽기 전용 모드 설정"""
    get_runtime_config().set_read_only(enabled)


def is_demo_mode() -> bool:
    """데모 모드 여부"""
    return get_runtime_config().get_demo_mode()
