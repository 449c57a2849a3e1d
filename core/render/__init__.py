"""
core/render - Renderer 계약과 표시 헬퍼

Example:
    from core.render import BaseRenderer, Column, DetailBuilder, format_age
"""

from .base import (
    BaseRenderer,
    Column,
    MetricSpec,
    MetricSpecProvider,
    Navigation,
    Navigator,
    Renderer,
    RendererFactory,
    SummaryField,
    metric_spec_for,
    navigations_for,
    tags_column,
)
from .detail import EMPTY, NO_VALUE, NOT_CONFIGURED, DetailBuilder
from .format import (
    format_age,
    format_bool,
    format_duration,
    format_money,
    format_size,
    format_tags,
    format_time,
    truncate,
)
from .styles import state_style, stylize
from .table import build_table, visible_columns

__all__: list[str] = [
    "BaseRenderer",
    "Column",
    "MetricSpec",
    "MetricSpecProvider",
    "Navigation",
    "Navigator",
    "Renderer",
    "RendererFactory",
    "SummaryField",
    "metric_spec_for",
    "navigations_for",
    "tags_column",
    "EMPTY",
    "NO_VALUE",
    "NOT_CONFIGURED",
    "DetailBuilder",
    "format_age",
    "format_bool",
    "format_duration",
    "format_money",
    "format_size",
    "format_tags",
    "format_time",
    "truncate",
    "state_style",
    "stylize",
    "build_table",
    "visible_columns",
]
