"""
cli/i18n/messages/common.py - Common Messages

Error kinds and generic status strings shared across commands.
"""

from __future__ import annotations

COMMON_MESSAGES = {
    "cancelled": {
        "ko": "취소되었습니다",
        "en": "Cancelled",
    },
    "yes": {
        "ko": "예",
        "en": "Yes",
    },
    "no": {
        "ko": "아니오",
        "en": "No",
    },
    # =========================================================================
    # ErrorKind 안내
    # =========================================================================
    "error_auth": {
        "ko": "권한이 없거나 자격 증명이 만료되었습니다. 프로파일과 IAM 권한을 확인하세요.",
        "en": "Access denied or credentials expired. Check your profile and IAM permissions.",
    },
    "error_throttling": {
        "ko": "요청이 제한되었습니다. 잠시 후 다시 시도하세요.",
        "en": "Request throttled. Please retry shortly.",
    },
    "error_not_found": {
        "ko": "리소스를 찾을 수 없습니다.",
        "en": "Resource not found.",
    },
    "error_resource_in_use": {
        "ko": "리소스가 사용 중입니다. 의존 리소스를 먼저 정리하세요.",
        "en": "Resource is in use. Clean up dependent resources first.",
    },
    "error_read_only": {
        "ko": "읽기 전용 모드에서는 실행할 수 없습니다. --read-only 없이 다시 실행하세요.",
        "en": "Not allowed in read-only mode. Run again without --read-only.",
    },
    "error_cancelled": {
        "ko": "작업이 취소되었습니다.",
        "en": "Operation cancelled.",
    },
}
