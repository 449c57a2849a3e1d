"""
core/render/styles.py - 렌더링 스타일 (Rich 스타일 문자열)

렌더러는 I/O 없이 문자열과 Rich 스타일 이름만 만듭니다.
실제 색상 출력은 cli/ui 레이어의 Console이 담당합니다.
"""

from __future__ import annotations

from rich.markup import escape

SUCCESS = "green"
INFO = "cyan"
WARNING = "yellow"
DANGER = "red"
PENDING = "blue"
DIM = "dim"
TITLE = "bold magenta"
SECTION = "bold cyan"
VALUE = ""

_STATE_STYLES: dict[str, str] = {
    **dict.fromkeys(("running", "available", "active", "healthy"), SUCCESS),
    **dict.fromkeys(("in-use", "attached"), INFO),
    **dict.fromkeys(("stopped", "stopping", "deleting"), WARNING),
    **dict.fromkeys(("terminated", "failed", "error", "unhealthy", "deleted"), DANGER),
    **dict.fromkeys(("pending", "starting", "creating"), PENDING),
}


def state_style(value: str) -> str:
    """리소스 상태 값에 대응하는 스타일 (알 수 없는 상태는 빈 스타일)

    대소문자와 CloudFormation식 접미사(CREATE_COMPLETE 등)도 처리합니다.
    """
    lowered = (value or "").lower()
    if lowered in _STATE_STYLES:
        return _STATE_STYLES[lowered]

    if lowered.endswith("_failed") or lowered.endswith("rollback_complete"):
        return DANGER
    if lowered.endswith("_in_progress"):
        return PENDING
    if lowered.endswith("_complete"):
        return SUCCESS
    return ""


def stylize(value: str, style: str) -> str:
    """값을 이스케이프한 뒤 Rich 마크업으로 감싸기"""
    text = escape(value)
    if not style or not value:
        return text
    return f"[{style}]{text}[/{style}]"
