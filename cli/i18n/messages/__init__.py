"""
cli/i18n/messages - 메시지 카탈로그

키는 "네임스페이스.키", 값은 {"ko": ..., "en": ...} 입니다.
"""

from __future__ import annotations

from .cli_commands import CLI_MESSAGES
from .common import COMMON_MESSAGES

MESSAGES: dict[str, dict[str, str]] = {}


def register_messages(namespace: str, messages: dict[str, dict[str, str]]) -> None:
    for key, value in messages.items():
        MESSAGES[f"{namespace}.{key}"] = value


register_messages("common", COMMON_MESSAGES)
register_messages("cli", CLI_MESSAGES)
