"""
cli/i18n - CLI 메시지 다국어 (ko 기본, en)

--lang 옵션이 set_lang()으로 언어를 정하고, 출력 문구는 모두 t("네임스페이스.키")로 찾습니다.

    t("cli.list_count", count=3)             # "3개 리소스"
    t("cli.list_count", lang="en", count=3)  # "3 resources"
"""

from __future__ import annotations

from contextvars import ContextVar
from typing import Any

from .messages import MESSAGES

SUPPORTED_LANGS = ("ko", "en")
DEFAULT_LANG = "ko"

_lang: ContextVar[str] = ContextVar("awsb_lang", default=DEFAULT_LANG)


def _normalize(lang: str | None) -> str:
    return lang if lang in SUPPORTED_LANGS else DEFAULT_LANG


def get_lang() -> str:
    return _lang.get()


def set_lang(lang: str) -> None:
    """지원하지 않는 언어는 ko로 설정"""
    _lang.set(_normalize(lang))


def t(key: str, lang: str | None = None, **kwargs: Any) -> str:
    """메시지 키를 현재 언어 문구로 변환

    없는 키는 키 그대로, en 문구가 없으면 ko 문구를 돌려줍니다.
    치환 인자가 맞지 않으면 템플릿을 그대로 둡니다.
    """
    messages = MESSAGES.get(key)
    if messages is None:
        return key

    text = messages.get(_normalize(lang or get_lang())) or messages.get(DEFAULT_LANG, key)
    if not kwargs:
        return text
    try:
        return text.format(**kwargs)
    except (KeyError, IndexError, ValueError):
        return text


__all__ = ["DEFAULT_LANG", "SUPPORTED_LANGS", "get_lang", "set_lang", "t"]
