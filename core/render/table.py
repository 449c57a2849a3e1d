"""
core/render/table.py - 목록 테이블 구성

터미널 폭이 좁으면 priority 값이 큰(덜 중요한) 컬럼부터 숨깁니다.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from rich.table import Table

from .base import Column, Renderer
from .styles import stylize

# 컬럼 사이 구분선/패딩 폭
COLUMN_GAP = 3


def _total_width(columns: list[Column]) -> int:
    return sum(c.width for c in columns) + COLUMN_GAP * max(len(columns) - 1, 0)


def visible_columns(columns: list[Column], width: int | None) -> list[Column]:
    """주어진 폭에 들어가는 컬럼 목록 (원래 순서 유지)

    priority가 큰 컬럼부터 하나씩 제거하며, 같은 priority면 뒤쪽 컬럼부터 제거합니다.
    최소 한 컬럼은 남깁니다.

    Args:
        columns: 렌더러 컬럼 목록
        width: 사용 가능한 폭 (None이면 제한 없음)
    """
    if width is None:
        return list(columns)

    kept = list(range(len(columns)))
    drop_order = sorted(kept, key=lambda i: (columns[i].priority, i), reverse=True)
    for idx in drop_order:
        if len(kept) <= 1 or _total_width([columns[i] for i in kept]) <= width:
            break
        kept.remove(idx)
    return [columns[i] for i in kept]


def build_table(
    renderer: Renderer,
    resources: Iterable[Any],
    width: int | None = None,
    title: str | None = None,
) -> Table:
    """렌더러와 리소스 목록으로 Rich Table 생성"""
    columns = visible_columns(renderer.columns(), width)

    table = Table(title=title, show_header=True, header_style="bold", expand=False)
    for col in columns:
        table.add_column(col.name, min_width=min(col.width, len(col.name)), max_width=col.width, no_wrap=True)

    for resource in resources:
        row = renderer.render_row(resource, columns)
        table.add_row(*(stylize(value, col.style_for(value)) for col, value in zip(columns, row)))

    return table
