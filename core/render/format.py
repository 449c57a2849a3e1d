"""
core/render/format.py - 표시용 포맷 헬퍼

모든 함수는 순수 함수이며 값이 없으면 빈 문자열을 반환합니다.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any

PRIORITY_TAG_KEYS = ("Environment", "Env", "Project", "Team", "Owner", "Application", "App")

_KIB = 1024
_MIB = _KIB * 1024
_GIB = _MIB * 1024
_TIB = _GIB * 1024


def to_datetime(value: Any) -> datetime | None:
    """datetime 또는 ISO 8601 문자열을 timezone-aware datetime으로 변환"""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, str):
        try:
            dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return None
    else:
        return None

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def format_age(value: Any, now: datetime | None = None) -> str:
    """경과 시간을 짧은 단위로 표시 (30s, 5m, 3h, 12d, 4mo, 2y)

    Args:
        value: 기준 시각 (datetime 또는 ISO 문자열)
        now: 현재 시각 (테스트용)
    """
    dt = to_datetime(value)
    if dt is None:
        return ""

    seconds = int(((now or datetime.now(timezone.utc)) - dt).total_seconds())
    seconds = max(seconds, 0)

    if seconds < 60:
        return f"{seconds}s"
    if seconds < 3600:
        return f"{seconds // 60}m"
    if seconds < 86400:
        return f"{seconds // 3600}h"

    days = seconds // 86400
    if days < 30:
        return f"{days}d"
    if days < 365:
        return f"{days // 30}mo"
    return f"{days // 365}y"


def format_duration(value: timedelta | float | int) -> str:
    """소요 시간 표시 (250ms, 45s, 3m20s, 2h5m)

    Args:
        value: timedelta 또는 초 단위 숫자
    """
    seconds = value.total_seconds() if isinstance(value, timedelta) else float(value)

    if seconds < 1:
        return f"{int(seconds * 1000)}ms"
    if seconds < 60:
        return f"{int(seconds)}s"

    total = int(seconds)
    if total < 3600:
        mins, secs = divmod(total, 60)
        return f"{mins}m{secs}s" if secs else f"{mins}m"

    hours = total // 3600
    mins = (total % 3600) // 60
    return f"{hours}h{mins}m" if mins else f"{hours}h"


def format_size(num_bytes: int | None) -> str:
    """바이트 크기를 이진 단위로 표시 (B, KiB, MiB, GiB, TiB)"""
    if num_bytes is None:
        return ""

    if num_bytes >= _TIB:
        return f"{num_bytes / _TIB:.1f} TiB"
    if num_bytes >= _GIB:
        return f"{num_bytes / _GIB:.1f} GiB"
    if num_bytes >= _MIB:
        return f"{num_bytes / _MIB:.1f} MiB"
    if num_bytes >= _KIB:
        return f"{num_bytes / _KIB:.1f} KiB"
    return f"{num_bytes} B"


def format_tags(tags: dict[str, str] | None, max_len: int) -> str:
    """태그를 "k=v, k=v" 형태로 요약

    Environment/Env/Project/Team/Owner/Application/App 태그를 먼저,
    나머지는 키 순서로 표시하며 Name 태그는 제외합니다.
    max_len을 넘으면 "..."로 자릅니다.
    """
    if not tags:
        return ""

    parts = [f"{key}={tags[key]}" for key in PRIORITY_TAG_KEYS if key in tags]
    parts.extend(
        f"{key}={tags[key]}" for key in sorted(tags) if key != "Name" and key not in PRIORITY_TAG_KEYS
    )

    result = ""
    for i, part in enumerate(parts):
        if i > 0:
            result += ", "
        if len(result) + len(part) > max_len - 3:
            result += "..."
            break
        result += part
    return result


def format_time(value: Any, fmt: str = "%Y-%m-%d %H:%M:%S") -> str:
    """시각을 UTC 문자열로 표시"""
    dt = to_datetime(value)
    if dt is None:
        return ""
    return dt.astimezone(timezone.utc).strftime(fmt)


def format_money(value: float, currency: str = "USD") -> str:
    """금액 표시 (USD는 $ 접두어, 그 외는 통화 코드 접미어)"""
    if not currency or currency == "USD":
        if value < 0:
            return f"-${-value:.2f}"
        return f"${value:.2f}"
    return f"{value:.2f} {currency}"


def format_bool(value: Any, true_text: str = "Yes", false_text: str = "No") -> str:
    return true_text if value else false_text


def truncate(text: str, max_len: int) -> str:
    """max_len을 넘으면 "..."로 자르기"""
    if not text or len(text) <= max_len:
        return text or ""
    if max_len <= 3:
        return text[:max_len]
    return text[: max_len - 3] + "..."
