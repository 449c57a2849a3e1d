"""
cli/ui/confirm.py - 액션 실행 확인 프롬프트

    - NONE      : 확인 없음
    - SIMPLE    : 예/아니오 (--yes면 생략)
    - DANGEROUS : 확인 토큰의 마지막 6자 직접 입력 (--yes로 생략 불가)
"""

from __future__ import annotations

from typing import Any

import questionary

from cli.i18n import t
from core.action import Action, ConfirmLevel, confirm_matches, confirm_suffix

from .console import console


def confirm_action(
    action: Action,
    resource: Any,
    assume_yes: bool = False,
    typed_token: str | None = None,
) -> bool:
    """액션 실행 여부 확인

    Args:
        action: 실행할 액션
        resource: 대상 리소스
        assume_yes: SIMPLE 확인 생략
        typed_token: DANGEROUS 확인 문자열 (None이면 프롬프트로 입력받음)

    Returns:
        실행해도 되면 True
    """
    if action.confirm == ConfirmLevel.NONE:
        return True

    if action.confirm == ConfirmLevel.SIMPLE:
        if assume_yes:
            return True
        answer = questionary.confirm(
            t("cli.confirm_simple", action=action.name, id=resource.id),
            default=False,
        ).ask()
        return bool(answer)

    token = action.token_for(resource)
    suffix = confirm_suffix(token)
    console.print(f"[bold red]{t('cli.confirm_dangerous_warning', action=action.name, id=resource.id)}[/bold red]")

    if typed_token is None:
        typed_token = questionary.text(t("cli.confirm_dangerous_prompt", suffix=suffix)).ask()
    return confirm_matches(token, (typed_token or "").strip())
