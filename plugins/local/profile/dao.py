"""
plugins/local/profile/dao.py - 로컬 AWS 프로파일 DAO

~/.aws/config 와 ~/.aws/credentials 를 읽어 프로파일 목록을 만듭니다.
파일 경로는 botocore 설정 변수(AWS_CONFIG_FILE, AWS_SHARED_CREDENTIALS_FILE)를 따릅니다.

목록 순서:
    1. SDK Default  - 표준 자격 증명 체인 (AWS_PROFILE 포함)
    2. Env/IMDS Only - 설정 파일을 무시하고 환경변수/IMDS만 사용
    3. 이름 있는 프로파일 (이름순, default는 항상 포함)

AWS API를 호출하지 않으므로 조회 전용입니다 (LIST, GET).
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any

import botocore.session
from botocore.configloader import raw_config_parse
from botocore.exceptions import ConfigNotFound, ConfigParseError

from core.dao import BaseDAO, BaseResource, Operation
from core.exceptions import NotFoundError

logger = logging.getLogger(__name__)

SERVICE = "local"
RESOURCE = "profile"

PROFILE_ID_SDK_DEFAULT = "__sdk_default__"
PROFILE_ID_ENV_ONLY = "__env_only__"

ENV_ONLY_DISPLAY_NAME = "Env/IMDS Only"

# config 파일에서 그대로 옮겨 담는 키
_CONFIG_KEYS = (
    "region",
    "output",
    "role_arn",
    "source_profile",
    "external_id",
    "mfa_serial",
    "role_session_name",
    "duration_seconds",
    "sso_start_url",
    "sso_region",
    "sso_account_id",
    "sso_role_name",
    "sso_session",
)


def sdk_default_display_name() -> str:
    """SDK Default 표시 이름 (AWS_PROFILE이 있으면 함께 표시)"""
    env_profile = os.environ.get("AWS_PROFILE")
    if env_profile:
        return f"SDK Default (AWS_PROFILE={env_profile})"
    return "SDK Default"


def parse_config_section_name(section: str) -> str | None:
    """config 파일 섹션 이름에서 프로파일 이름 추출

    "profile dev" → "dev", "default" → "default", 그 외(sso-session 등) → None
    """
    if section == "default":
        return "default"
    if section.startswith("profile "):
        return section[len("profile ") :].strip() or None
    return None


def _load_file(path: str) -> dict[str, dict[str, Any]]:
    """INI 파일 파싱. 파일이 없거나 깨져 있으면 빈 dict"""
    try:
        return raw_config_parse(path, parse_subsections=False)
    except ConfigNotFound:
        return {}
    except ConfigParseError as e:
        logger.debug(f"AWS 설정 파일 파싱 실패: {path} ({e})")
        return {}


def load_profiles(config_file: str | None = None, credentials_file: str | None = None) -> dict[str, dict[str, Any]]:
    """config/credentials 파일을 합쳐 프로파일별 속성 dict 생성

    Args:
        config_file: config 파일 경로 (기본: botocore 설정)
        credentials_file: credentials 파일 경로 (기본: botocore 설정)

    Returns:
        {프로파일 이름: 속성 dict}. 속성에는 in_config/in_credentials/
        has_credentials/access_key_id 가 추가됩니다.
    """
    session = botocore.session.get_session()
    config_file = config_file or session.get_config_variable("config_file")
    credentials_file = credentials_file or session.get_config_variable("credentials_file")

    profiles: dict[str, dict[str, Any]] = {"default": {}}

    for section, values in _load_file(config_file).items():
        name = parse_config_section_name(section)
        if name is None:
            continue
        data = profiles.setdefault(name, {})
        data["in_config"] = True
        for key in _CONFIG_KEYS:
            if values.get(key):
                data[key] = values[key]

    for section, values in _load_file(credentials_file).items():
        data = profiles.setdefault(section, {})
        data["in_credentials"] = True
        access_key = values.get("aws_access_key_id", "")
        if access_key:
            data["has_credentials"] = True
            data["access_key_id"] = access_key

    return profiles


@dataclass(frozen=True)
class ProfileResource(BaseResource):
    """로컬 AWS 프로파일"""

    is_current: bool = False

    @property
    def is_special(self) -> bool:
        return self.id in (PROFILE_ID_SDK_DEFAULT, PROFILE_ID_ENV_ONLY)

    @property
    def is_sso(self) -> bool:
        return bool(self.get_field("sso_start_url") or self.get_field("sso_session"))

    @property
    def region(self) -> str:
        return self.get_field("region")

    @property
    def output(self) -> str:
        return self.get_field("output")

    @property
    def role_arn(self) -> str:
        return self.get_field("role_arn")

    @property
    def source_profile(self) -> str:
        return self.get_field("source_profile")

    @property
    def mfa_serial(self) -> str:
        return self.get_field("mfa_serial")

    @property
    def sso_start_url(self) -> str:
        return self.get_field("sso_start_url")

    @property
    def sso_region(self) -> str:
        return self.get_field("sso_region")

    @property
    def sso_account_id(self) -> str:
        return self.get_field("sso_account_id")

    @property
    def sso_role_name(self) -> str:
        return self.get_field("sso_role_name")

    @property
    def sso_session(self) -> str:
        return self.get_field("sso_session")

    @property
    def has_credentials(self) -> bool:
        return bool(self.get_field("has_credentials", False))

    @property
    def access_key_id(self) -> str:
        return self.get_field("access_key_id")

    @property
    def in_config(self) -> bool:
        return bool(self.get_field("in_config", False))

    @property
    def in_credentials(self) -> bool:
        return bool(self.get_field("in_credentials", False))

    @property
    def profile_type(self) -> str:
        """표시용 자격 증명 종류"""
        if self.is_special:
            return "builtin"
        if self.is_sso:
            return "sso"
        if self.role_arn:
            return "assume-role"
        if self.has_credentials:
            return "static"
        return "config"


class ProfileDAO(BaseDAO):
    """로컬 프로파일 DAO (조회 전용)"""

    SUPPORTED_OPERATIONS = frozenset({Operation.LIST, Operation.GET})

    def __init__(self, ctx):
        super().__init__(SERVICE, RESOURCE)
        self._current = ctx.profile or ""

    def _special(self, profile_id: str) -> ProfileResource:
        if profile_id == PROFILE_ID_SDK_DEFAULT:
            return ProfileResource(
                id=PROFILE_ID_SDK_DEFAULT,
                name=sdk_default_display_name(),
                data={},
                is_current=not self._current,
            )
        return ProfileResource(id=PROFILE_ID_ENV_ONLY, name=ENV_ONLY_DISPLAY_NAME, data={})

    def _named(self, name: str, data: dict[str, Any]) -> ProfileResource:
        return ProfileResource(id=name, name=name, data=data, is_current=self._current == name)

    def list(self, ctx) -> list[ProfileResource]:
        profiles = load_profiles()
        resources = [self._special(PROFILE_ID_SDK_DEFAULT), self._special(PROFILE_ID_ENV_ONLY)]
        resources.extend(self._named(name, profiles[name]) for name in sorted(profiles))
        logger.debug(f"로컬 프로파일 {len(profiles)}개")
        return resources

    def get(self, ctx, resource_id: str) -> ProfileResource:
        if resource_id in (PROFILE_ID_SDK_DEFAULT, sdk_default_display_name()):
            return self._special(PROFILE_ID_SDK_DEFAULT)
        if resource_id in (PROFILE_ID_ENV_ONLY, ENV_ONLY_DISPLAY_NAME):
            return self._special(PROFILE_ID_ENV_ONLY)

        profiles = load_profiles()
        if resource_id not in profiles:
            raise NotFoundError("profile", resource_id)
        return self._named(resource_id, profiles[resource_id])
