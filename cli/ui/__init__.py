# cli/ui - 콘솔 출력과 확인 프롬프트 (rich, questionary)
"""
CLI 전용 UI 컴포넌트
"""

from .confirm import confirm_action
from .console import (
    SYMBOL_ERROR,
    SYMBOL_INFO,
    SYMBOL_SUCCESS,
    SYMBOL_WARNING,
    configure_logging,
    console,
    get_console,
    print_error,
    print_info,
    print_success,
    print_warning,
)

__all__ = [
    "SYMBOL_ERROR",
    "SYMBOL_INFO",
    "SYMBOL_SUCCESS",
    "SYMBOL_WARNING",
    "configure_logging",
    "confirm_action",
    "console",
    "get_console",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
]
