"""
plugins/computeoptimizer/recommendations/render.py - Compute Optimizer 추천 렌더러
"""

from __future__ import annotations

from typing import Any

from core.render import (
    BaseRenderer,
    Column,
    DetailBuilder,
    SummaryField,
    format_money,
    styles,
)

from .dao import RESOURCE, SERVICE

_FINDING_STYLES = {
    "OVER_PROVISIONED": styles.WARNING,
    "OVERPROVISIONED": styles.WARNING,
    "UNDER_PROVISIONED": styles.DANGER,
    "UNDERPROVISIONED": styles.DANGER,
    "NOT_OPTIMIZED": styles.WARNING,
    "OPTIMIZED": styles.SUCCESS,
}

_RISK_STYLES = {
    "VeryLow": styles.SUCCESS,
    "Low": styles.SUCCESS,
    "Medium": styles.WARNING,
    "High": styles.DANGER,
}


def finding_style(finding: str) -> str:
    return _FINDING_STYLES.get(finding.upper().replace(" ", "_"), "")


def format_savings_percent(value: float) -> str:
    return f"{value:.1f}%" if value > 0 else "-"


def format_savings_value(value: float, currency: str) -> str:
    return format_money(value, currency) if value > 0 else "-"


class RecommendationRenderer(BaseRenderer):
    """Compute Optimizer 추천 렌더러"""

    def __init__(self) -> None:
        super().__init__(
            SERVICE,
            RESOURCE,
            [
                Column("TYPE", 8, lambda r: r.resource_type),
                Column("NAME", 30, lambda r: r.name),
                Column("FINDING", 18, lambda r: r.finding, colorer=finding_style, priority=1),
                Column("CURRENT", 16, lambda r: r.current_config, priority=3),
                Column("SAVINGS %", 10, lambda r: format_savings_percent(r.savings_percent), priority=2),
                Column(
                    "EST. SAVINGS",
                    12,
                    lambda r: format_savings_value(r.savings_value, r.savings_currency),
                    style=styles.SUCCESS,
                    priority=2,
                ),
            ],
        )

    def render_detail(self, resource: Any) -> str:
        d = DetailBuilder()
        d.title("Compute Optimizer Recommendation", resource.name)

        d.section("Resource")
        d.field("Type", resource.resource_type)
        d.field("Name", resource.name)
        d.field("ARN", resource.arn)
        d.field_if("Account", resource.account_id)
        d.field("Current Configuration", resource.current_config)

        d.section("Finding")
        d.field_styled("Classification", resource.finding, finding_style(resource.finding))
        if resource.performance_risk:
            d.field_styled(
                "Performance Risk",
                resource.performance_risk,
                _RISK_STYLES.get(resource.performance_risk, ""),
            )

        d.section("Savings Opportunity")
        d.field("Savings", format_savings_percent(resource.savings_percent))
        d.field("Est. Monthly Savings", format_savings_value(resource.savings_value, resource.savings_currency))

        if resource.finding_reasons:
            d.section("Finding Reasons")
            for code in resource.finding_reasons:
                d.dim_indent(code)

        d.tags(resource.tags)
        return d.build()

    def render_summary(self, resource: Any) -> list[SummaryField]:
        return [
            SummaryField("Type", resource.resource_type),
            SummaryField("Name", resource.name),
            SummaryField("Finding", resource.finding, finding_style(resource.finding)),
            SummaryField("Savings", format_savings_value(resource.savings_value, resource.savings_currency)),
        ]
