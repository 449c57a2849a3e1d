"""
cli/i18n/messages/cli_commands.py - CLI Command Messages

Contains translations for Click CLI commands, table headers, prompts and errors.
"""

from __future__ import annotations

CLI_MESSAGES = {
    # =========================================================================
    # Help / Global
    # =========================================================================
    "help_intro": {
        "ko": "AWS 리소스를 서비스/리소스 단위로 조회하고\n등록된 액션을 안전하게 실행하는 CLI 도구입니다.",
        "en": "A CLI tool for browsing AWS resources by service/resource\nand safely running registered actions.",
    },
    "config_error": {
        "ko": "설정 오류: {error}",
        "en": "Configuration error: {error}",
    },
    "read_only_banner": {
        "ko": "읽기 전용 모드",
        "en": "Read-only mode",
    },
    # =========================================================================
    # services / resources
    # =========================================================================
    "services_title": {
        "ko": "서비스 목록",
        "en": "Services",
    },
    "resources_title": {
        "ko": "{service} 리소스",
        "en": "{service} resources",
    },
    "col_category": {
        "ko": "카테고리",
        "en": "Category",
    },
    "col_service": {
        "ko": "서비스",
        "en": "Service",
    },
    "col_display": {
        "ko": "표시 이름",
        "en": "Display Name",
    },
    "col_resources": {
        "ko": "리소스",
        "en": "Resources",
    },
    "col_resource": {
        "ko": "리소스",
        "en": "Resource",
    },
    "col_default": {
        "ko": "기본",
        "en": "Default",
    },
    "col_aliases": {
        "ko": "별칭",
        "en": "Aliases",
    },
    "unknown_service": {
        "ko": "등록되지 않은 서비스: {service}",
        "en": "Unknown service: {service}",
    },
    # =========================================================================
    # list / show
    # =========================================================================
    "list_count": {
        "ko": "{count}개 리소스",
        "en": "{count} resources",
    },
    "list_empty": {
        "ko": "리소스가 없습니다",
        "en": "No resources found",
    },
    "next_page_token": {
        "ko": "다음 페이지: --page-token {token}",
        "en": "Next page: --page-token {token}",
    },
    "page_not_supported": {
        "ko": "{key}는 페이지 조회를 지원하지 않아 전체 목록을 표시합니다",
        "en": "{key} does not support paging; showing the full list",
    },
    "invalid_filter": {
        "ko": "잘못된 필터 형식: {value} (KEY=VALUE)",
        "en": "Invalid filter: {value} (expected KEY=VALUE)",
    },
    "navigations_title": {
        "ko": "이동",
        "en": "Navigate",
    },
    "metric_hint": {
        "ko": "지표: {namespace} {metric} ({stat})",
        "en": "Metric: {namespace} {metric} ({stat})",
    },
    # =========================================================================
    # actions / run
    # =========================================================================
    "actions_title": {
        "ko": "{key} 액션",
        "en": "{key} actions",
    },
    "no_actions": {
        "ko": "{key}에 등록된 액션이 없습니다",
        "en": "No actions registered for {key}",
    },
    "col_shortcut": {
        "ko": "키",
        "en": "Key",
    },
    "col_name": {
        "ko": "이름",
        "en": "Name",
    },
    "col_type": {
        "ko": "종류",
        "en": "Type",
    },
    "col_confirm": {
        "ko": "확인",
        "en": "Confirm",
    },
    "col_read_only": {
        "ko": "읽기 전용 허용",
        "en": "Read-only",
    },
    "action_not_found": {
        "ko": "단축키 '{shortcut}'에 해당하는 액션이 없습니다",
        "en": "No action bound to '{shortcut}'",
    },
    "action_not_applicable": {
        "ko": "{action} 액션은 이 리소스에 사용할 수 없습니다",
        "en": "{action} is not available for this resource",
    },
    "confirm_simple": {
        "ko": "{id}에 {action}을(를) 실행하시겠습니까?",
        "en": "Run {action} on {id}?",
    },
    "confirm_dangerous_warning": {
        "ko": "위험한 작업입니다: {action} → {id}",
        "en": "Dangerous operation: {action} → {id}",
    },
    "confirm_dangerous_prompt": {
        "ko": "계속하려면 '{suffix}'을(를) 입력하세요:",
        "en": "Type '{suffix}' to continue:",
    },
    "confirm_mismatch": {
        "ko": "확인 문자열이 일치하지 않아 취소했습니다",
        "en": "Confirmation did not match; cancelled",
    },
    "action_failed": {
        "ko": "{action} 실패: {error}",
        "en": "{action} failed: {error}",
    },
    # =========================================================================
    # search
    # =========================================================================
    "search_title": {
        "ko": "'{query}' 검색 결과",
        "en": "Results for '{query}'",
    },
    "search_empty": {
        "ko": "'{query}'와 일치하는 리소스가 없습니다",
        "en": "Nothing matches '{query}'",
    },
    "col_score": {
        "ko": "점수",
        "en": "Score",
    },
    "col_match": {
        "ko": "일치",
        "en": "Match",
    },
}
