"""
plugins/local/profile/render.py - 로컬 프로파일 렌더러
"""

from __future__ import annotations

from typing import Any

from core.render import NOT_CONFIGURED, BaseRenderer, Column, DetailBuilder, SummaryField
from core.render import styles

from .dao import RESOURCE, SERVICE

_TYPE_STYLES = {
    "sso": styles.INFO,
    "assume-role": styles.WARNING,
    "static": styles.DIM,
}


def mask_access_key(access_key: str) -> str:
    """액세스 키는 마지막 4자리만 표시"""
    if not access_key:
        return ""
    if len(access_key) <= 4:
        return "****"
    return "*" * (len(access_key) - 4) + access_key[-4:]


def _current_marker(resource: Any) -> str:
    return "*" if resource.is_current else ""


class ProfileRenderer(BaseRenderer):
    """로컬 프로파일 렌더러"""

    def __init__(self) -> None:
        super().__init__(
            SERVICE,
            RESOURCE,
            [
                Column("", 2, _current_marker, style=styles.SUCCESS),
                Column("PROFILE", 36, lambda r: r.name),
                Column("TYPE", 12, lambda r: r.profile_type, colorer=lambda v: _TYPE_STYLES.get(v, "")),
                Column("REGION", 16, lambda r: r.region or "-", priority=1),
                Column("ACCOUNT", 14, lambda r: r.sso_account_id or "-", priority=2),
            ],
        )

    def render_detail(self, resource: Any) -> str:
        d = DetailBuilder()
        d.title("Profile", resource.name)

        d.section("Basic Information")
        d.field("Profile", resource.name)
        d.field("Type", resource.profile_type)
        d.field("Current", "Yes" if resource.is_current else "No")
        if resource.is_special:
            return d.build()

        d.field("Region", resource.region or NOT_CONFIGURED)
        d.field_if("Output", resource.output)

        if resource.is_sso:
            d.section("SSO")
            d.field_if("Start URL", resource.sso_start_url)
            d.field_if("SSO Region", resource.sso_region)
            d.field_if("SSO Session", resource.sso_session)
            d.field_if("Account ID", resource.sso_account_id)
            d.field_if("Role Name", resource.sso_role_name)

        if resource.role_arn:
            d.section("Assume Role")
            d.field("Role ARN", resource.role_arn)
            d.field_if("Source Profile", resource.source_profile)
            d.field_if("MFA Serial", resource.mfa_serial)

        d.section("Sources")
        d.field("Config File", "Yes" if resource.in_config else "No")
        d.field("Credentials File", "Yes" if resource.in_credentials else "No")
        d.field_if("Access Key", mask_access_key(resource.access_key_id))

        return d.build()

    def render_summary(self, resource: Any) -> list[SummaryField]:
        fields = [
            SummaryField("Profile", resource.name),
            SummaryField("Type", resource.profile_type),
        ]
        if resource.region:
            fields.append(SummaryField("Region", resource.region))
        if resource.is_current:
            fields.append(SummaryField("Current", "Yes", styles.SUCCESS))
        return fields
