"""
core/action/types.py - 액션 정의와 실행 결과

Action은 시작 시 한 번 등록되는 선언적 기술자이고,
ActionResult는 실행마다 새로 만들어지는 결과 값입니다.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

from core.exceptions import (
    ErrorKind,
    InvalidResourceTypeError,
    UnknownOperationError,
    classify_error,
)

if TYPE_CHECKING:
    from core.context import RequestContext


class ActionType(str, Enum):
    """액션 종류"""

    EXEC = "exec"  # 셸 명령 실행
    API = "api"  # 등록된 executor로 AWS API 호출


class ConfirmLevel(Enum):
    """실행 전 확인 수준"""

    NONE = 0  # 확인 없음
    SIMPLE = 1  # "계속하시겠습니까?"
    DANGEROUS = 2  # 확인 토큰 직접 입력


ACTION_NAME_SSO_LOGIN = "SSO Login"
ACTION_NAME_LOGIN = "Login"


def confirm_token_id(resource: Any) -> str:
    """기본 확인 토큰: 리소스 ID"""
    return resource.id


def confirm_token_name(resource: Any) -> str:
    """이름을 확인 토큰으로 사용 (ID가 URL/ARN처럼 긴 리소스용)"""
    return resource.name


@dataclass(frozen=True)
class Action:
    """액션 기술자

    Attributes:
        name: 표시 이름
        shortcut: 단축키
        type: EXEC 또는 API
        command: EXEC 명령 템플릿 (${ID} 등 치환)
        operation: API operation 이름 (예: "StopInstances")
        confirm: 확인 수준
        skip_aws_env: True면 AWS 환경변수를 주입하지 않음 (SSO 로그인 등)
        filter: 리소스별 표시 여부 판정 (None이면 항상 표시)
        post_exec_follow_up: 성공 후 UI에 전달할 후속 신호 생성
        confirm_token: DANGEROUS 확인 토큰 생성 (None이면 리소스 ID)
    """

    name: str
    shortcut: str
    type: ActionType
    command: str = ""
    operation: str = ""
    confirm: ConfirmLevel = ConfirmLevel.NONE
    skip_aws_env: bool = False
    filter: Callable[[Any], bool] | None = None
    post_exec_follow_up: Callable[[Any], Any] | None = None
    confirm_token: Callable[[Any], str] | None = None

    def token_for(self, resource: Any) -> str:
        """DANGEROUS 확인에 사용할 토큰"""
        fn = self.confirm_token or confirm_token_id
        return fn(resource) or ""

    def applies_to(self, resource: Any) -> bool:
        """filter 기준으로 이 리소스에 표시할 액션인지"""
        return self.filter is None or bool(self.filter(resource))


@dataclass
class ActionResult:
    """액션 실행 결과

    Attributes:
        success: 성공 여부
        message: 사용자 메시지
        error: 실패 원인
        error_kind: 실패 분류 (UI 안내 문구 선택용)
        follow_up: UI 후속 신호
    """

    success: bool
    message: str = ""
    error: BaseException | None = None
    error_kind: ErrorKind | None = None
    follow_up: Any = None


def success_result(message: str) -> ActionResult:
    return ActionResult(success=True, message=message)


def success_result_with_follow_up(message: str, follow_up: Any) -> ActionResult:
    return ActionResult(success=True, message=message, follow_up=follow_up)


def fail_result(error: BaseException) -> ActionResult:
    """실패 결과 (에러 분류 포함)"""
    return ActionResult(success=False, error=error, error_kind=classify_error(error))


def fail_resultf(error: BaseException, fmt: str, *args: Any) -> ActionResult:
    """문맥 메시지를 덧붙인 실패 결과

    분류는 원래 에러 기준이며 message에 "문맥: 원인" 형태로 기록됩니다.
    """
    context = fmt % args if args else fmt
    return ActionResult(
        success=False,
        message=f"{context}: {error}",
        error=error,
        error_kind=classify_error(error),
    )


def unknown_operation_result(operation: str) -> ActionResult:
    return fail_result(UnknownOperationError(operation))


def invalid_resource_result(expected: str = "", actual: Any = None) -> ActionResult:
    return fail_result(InvalidResourceTypeError(expected, type(actual).__name__ if actual is not None else ""))


ExecutorFunc = Callable[["RequestContext", Action, Any], ActionResult]
