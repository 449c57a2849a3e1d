"""
core/action/confirm.py - 위험 액션 확인 토큰

DANGEROUS 액션은 토큰을 직접 입력해야 실행됩니다.
    - 빈 토큰       → "CONFIRM"
    - 6자 이하 토큰 → 전체
    - 6자 초과 토큰 → 마지막 6자 (긴 ARN/UUID 입력 부담 완화)

Example:
    >>> confirm_suffix("i-1234567890abcdef0")
    'bcdef0'
    >>> confirm_matches("i-1234567890abcdef0", "bcdef0")
    True
"""

from __future__ import annotations

MIN_CONFIRM_CHARS = 6
EMPTY_TOKEN_CONFIRMATION = "CONFIRM"


def confirm_suffix(token: str) -> str:
    """사용자가 입력해야 하는 확인 문자열"""
    if not token:
        return EMPTY_TOKEN_CONFIRMATION
    if len(token) <= MIN_CONFIRM_CHARS:
        return token
    return token[-MIN_CONFIRM_CHARS:]


def confirm_matches(token: str, user_input: str) -> bool:
    """입력이 확인 문자열과 정확히 일치하는지 (전체 토큰 입력은 불일치)"""
    return user_input == confirm_suffix(token)
