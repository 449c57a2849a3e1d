"""
core/exceptions.py - 통합 예외 계층 구조

리소스 브라우저 전체에서 사용되는 예외 클래스와 에러 분류 유틸리티를 정의합니다.
DAO, 액션 디스패치, 설정, 레지스트리가 모두 같은 베이스 예외를 공유합니다.

예외 계층 구조:
    BrowserError (베이스)
    ├── DAOError (리소스 조회/삭제)
    │   ├── NotFoundError
    │   ├── ResourceInUseError
    │   ├── UnsupportedOperationError
    │   ├── FilterRequiredError
    │   └── APICallError
    ├── ActionError (액션 실행)
    │   ├── EmptyCommandError
    │   ├── EmptyOperationError
    │   ├── UnsafeValueError
    │   ├── ReadOnlyDeniedError
    │   ├── UnknownOperationError
    │   ├── UnknownActionTypeError
    │   ├── InvalidResourceTypeError
    │   └── ExecutorNotRegisteredError
    ├── OperationCancelledError (취소)
    ├── AggregateFetchError (병렬 조회 전체 실패)
    ├── RegistryClosedError (레지스트리 쓰기 차단)
    ├── NotRegisteredError (등록되지 않은 service/resource)
    └── ConfigError (설정 관련)

Usage:
    from core.exceptions import APICallError, is_not_found

    try:
        client.terminate_instances(InstanceIds=[instance_id])
    except ClientError as e:
        if is_not_found(e):
            return
        raise APICallError.from_client_error("ec2", "terminate_instances", e)
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional

# =============================================================================
# 베이스 예외
# =============================================================================


class BrowserError(Exception):
    """리소스 브라우저 기본 예외 클래스

    모든 커스텀 예외의 베이스 클래스입니다.

    Attributes:
        message: 에러 메시지
        cause: 원인 예외 (체이닝용)
        details: 추가 상세 정보
    """

    def __init__(
        self,
        message: str,
        cause: Optional[Exception] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.details = details or {}

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """예외 정보를 딕셔너리로 반환"""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "cause": str(self.cause) if self.cause else None,
            "details": self.details,
        }


# =============================================================================
# DAO 관련 예외
# =============================================================================


class DAOError(BrowserError):
    """DAO 호출 관련 예외"""

    pass


class NotFoundError(DAOError):
    """리소스를 찾을 수 없음"""

    def __init__(
        self,
        resource_type: str,
        resource_id: str,
        cause: Optional[Exception] = None,
    ):
        super().__init__(f"{resource_type} not found: {resource_id}", cause)
        self.resource_type = resource_type
        self.resource_id = resource_id
        self.details.update({"resource_type": resource_type, "resource_id": resource_id})


class ResourceInUseError(DAOError):
    """의존 리소스 때문에 변경할 수 없음

    삭제 실패 원인을 일반 에러와 구분해서 보여주기 위해 별도 타입으로 둡니다.
    """

    def __init__(
        self,
        message: str,
        resource_id: str = "",
        cause: Optional[Exception] = None,
    ):
        super().__init__(message, cause)
        self.resource_id = resource_id
        if resource_id:
            self.details["resource_id"] = resource_id


class UnsupportedOperationError(DAOError):
    """리소스 타입이 지원하지 않는 작업"""

    def __init__(self, resource_type: str, operation: str):
        super().__init__(f"{operation} not supported for {resource_type}")
        self.resource_type = resource_type
        self.operation = operation
        self.details.update({"resource_type": resource_type, "operation": operation})


class FilterRequiredError(DAOError):
    """네비게이션 필터가 있어야만 조회할 수 있는 하위 리소스"""

    def __init__(self, resource_type: str, filter_key: str):
        super().__init__(f"{filter_key} filter required for {resource_type}")
        self.resource_type = resource_type
        self.filter_key = filter_key
        self.details.update({"resource_type": resource_type, "filter_key": filter_key})


class APICallError(DAOError):
    """AWS API 호출 관련 예외

    boto3/botocore의 ClientError를 래핑하여 호출 위치(서비스, 작업, 리소스 ID)를 남깁니다.
    """

    def __init__(
        self,
        service: str,
        operation: str,
        error_code: Optional[str] = None,
        error_message: Optional[str] = None,
        resource_id: Optional[str] = None,
        cause: Optional[Exception] = None,
    ):
        message = f"{service}.{operation}"
        if resource_id:
            message = f"{message} [{resource_id}]"
        if error_code:
            message = f"{message} failed ({error_code})"
        if error_message:
            message = f"{message}: {error_message}"

        super().__init__(message)
        # 메시지에 원인 내용이 이미 들어있으므로 __str__ 중복을 피하기 위해 cause만 별도 보관
        self.cause = cause
        self.service = service
        self.operation = operation
        self.error_code = error_code
        self.error_message = error_message
        self.resource_id = resource_id
        self.details.update(
            {
                "service": service,
                "operation": operation,
                "error_code": error_code,
                "resource_id": resource_id,
            }
        )

    def __str__(self) -> str:
        return self.message

    @classmethod
    def from_client_error(
        cls,
        service: str,
        operation: str,
        client_error: Exception,
        resource_id: Optional[str] = None,
    ) -> "APICallError":
        """botocore.exceptions.ClientError로부터 생성

        Args:
            service: AWS 서비스 이름
            operation: API 작업 이름
            client_error: ClientError 예외
            resource_id: 대상 리소스 ID (선택)

        Returns:
            APICallError 인스턴스
        """
        error_code = None
        error_message = None

        if hasattr(client_error, "response"):
            error_info = client_error.response.get("Error", {})
            error_code = error_info.get("Code")
            error_message = error_info.get("Message")
        else:
            error_message = str(client_error)

        return cls(
            service=service,
            operation=operation,
            error_code=error_code,
            error_message=error_message,
            resource_id=resource_id,
            cause=client_error,
        )


# =============================================================================
# 액션 관련 예외
# =============================================================================


class ActionError(BrowserError):
    """액션 정의/실행 관련 예외"""

    pass


class EmptyCommandError(ActionError):
    """exec 액션의 명령이 비어 있음"""

    def __init__(self, action_name: str = ""):
        super().__init__("empty command")
        self.action_name = action_name


class EmptyOperationError(ActionError):
    """API 액션에 operation이 지정되지 않음 (액션 정의 오류)"""

    def __init__(self, action_name: str = ""):
        message = "empty operation"
        if action_name:
            message = f"{message} for action {action_name!r}"
        super().__init__(message)
        self.action_name = action_name


class UnsafeValueError(ActionError):
    """명령 치환 값에 셸 메타문자가 포함됨"""

    def __init__(self, variable: str, value: str):
        super().__init__(f"unsafe value in ${{{variable}}}: contains shell metacharacters")
        self.variable = variable
        self.value = value
        self.details["variable"] = variable


class ReadOnlyDeniedError(ActionError):
    """읽기 전용 모드에서 차단된 액션"""

    def __init__(self, action_name: str = ""):
        message = "action denied in read-only mode"
        if action_name:
            message = f"{message}: {action_name}"
        super().__init__(message)
        self.action_name = action_name


class UnknownOperationError(ActionError):
    """executor가 처리하지 않는 operation"""

    def __init__(self, operation: str):
        super().__init__(f"unknown operation: {operation}")
        self.operation = operation


class UnknownActionTypeError(ActionError):
    """EXEC/API 이외의 액션 타입"""

    def __init__(self, action_type: Any):
        super().__init__(f"unknown action type: {action_type}")
        self.action_type = action_type


class InvalidResourceTypeError(ActionError):
    """executor가 기대한 리소스 타입이 아님"""

    def __init__(self, expected: str = "", actual: str = ""):
        message = "invalid resource type"
        if expected:
            message = f"{message}: expected {expected}, got {actual or 'unknown'}"
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class ExecutorNotRegisteredError(ActionError):
    """API 액션을 처리할 executor가 등록되지 않음"""

    def __init__(self, service: str, resource_type: str):
        super().__init__(f"no executor registered for {service}/{resource_type}")
        self.service = service
        self.resource_type = resource_type


# =============================================================================
# 인프라 관련 예외
# =============================================================================


class OperationCancelledError(BrowserError):
    """호출자가 요청을 취소함"""

    def __init__(self, operation: str = ""):
        message = "operation cancelled"
        if operation:
            message = f"{message}: {operation}"
        super().__init__(message)
        self.operation = operation


class AggregateFetchError(BrowserError):
    """병렬 하위 조회가 모두 실패한 경우

    Attributes:
        errors: (작업 이름, 예외) 목록. 작업 등록 순서를 유지합니다.
    """

    def __init__(self, errors: List[tuple]):
        joined = "; ".join(f"{name}: {err}" for name, err in errors)
        super().__init__(f"all {len(errors)} fetches failed: {joined}")
        self.errors = list(errors)
        self.details["failed"] = [name for name, _ in errors]


class RegistryClosedError(BrowserError):
    """시작 단계가 끝난 레지스트리에 쓰기 시도"""

    def __init__(self, registry_name: str, key: str = ""):
        message = f"{registry_name} is closed for registration"
        if key:
            message = f"{message} ({key})"
        super().__init__(message)
        self.registry_name = registry_name


class NotRegisteredError(BrowserError):
    """레지스트리에 없는 service/resource 조회"""

    def __init__(self, kind: str, service: str, resource_type: str):
        super().__init__(f"no {kind} registered for {service}/{resource_type}")
        self.kind = kind
        self.service = service
        self.resource_type = resource_type


class ConfigError(BrowserError):
    """설정 관련 예외"""

    def __init__(
        self,
        key: str,
        message: str,
        cause: Optional[Exception] = None,
    ):
        full_message = f"설정 오류 [{key}]: {message}"
        super().__init__(full_message, cause)
        self.config_key = key
        self.details["config_key"] = key


# =============================================================================
# 에러 분류
# =============================================================================


class ErrorKind(str, Enum):
    """사용자 메시지용 에러 분류"""

    AUTH = "auth"
    THROTTLING = "throttling"
    NOT_FOUND = "not_found"
    RESOURCE_IN_USE = "resource_in_use"
    READ_ONLY = "read_only"
    CANCELLED = "cancelled"
    OTHER = "other"


ACCESS_DENIED_CODES = frozenset(
    {
        "AccessDenied",
        "AccessDeniedException",
        "Forbidden",
        "Unauthorized",
        "UnauthorizedOperation",
        "UnauthorizedAccess",
    }
)

THROTTLING_CODES = frozenset(
    {
        "Throttling",
        "ThrottlingException",
        "RequestLimitExceeded",
        "TooManyRequestsException",
        "RateExceeded",
    }
)

NOT_FOUND_CODES = frozenset(
    {
        "ResourceNotFoundException",
        "NotFound",
        "NotFoundException",
        "NoSuchEntity",
        "NoSuchBucket",
    }
)

# 서비스마다 코드 이름이 달라서 키워드로도 판정 (예: InvalidInstanceID.NotFound, NoSuchKey)
NOT_FOUND_KEYWORDS = ("notfound", "nosuch", "doesnotexist", "nonexistent")

RESOURCE_IN_USE_CODES = frozenset(
    {
        "ResourceInUseException",
        "ResourceInUse",
        "DependencyViolation",
        "DeleteConflict",
    }
)


def get_error_code(error: BaseException) -> str:
    """예외에서 AWS 에러 코드 추출

    Args:
        error: ClientError 또는 APICallError

    Returns:
        에러 코드 (없으면 빈 문자열)
    """
    if isinstance(error, APICallError):
        return error.error_code or ""

    response = getattr(error, "response", None)
    if isinstance(response, dict):
        return response.get("Error", {}).get("Code", "") or ""

    return ""


def is_access_denied(error: BaseException) -> bool:
    """액세스 거부 오류인지 확인"""
    return get_error_code(error) in ACCESS_DENIED_CODES


def is_throttling(error: BaseException) -> bool:
    """스로틀링 오류인지 확인"""
    return get_error_code(error) in THROTTLING_CODES


def is_not_found(error: BaseException) -> bool:
    """리소스를 찾을 수 없는 오류인지 확인

    Args:
        error: 확인할 예외

    Returns:
        리소스 없음 오류이면 True
    """
    if isinstance(error, NotFoundError):
        return True

    code = get_error_code(error)
    if not code:
        return False
    if code in NOT_FOUND_CODES:
        return True

    lowered = code.lower()
    return any(keyword in lowered for keyword in NOT_FOUND_KEYWORDS)


def is_resource_in_use(error: BaseException) -> bool:
    """의존 리소스 때문에 거부된 오류인지 확인"""
    if isinstance(error, ResourceInUseError):
        return True
    return get_error_code(error) in RESOURCE_IN_USE_CODES


def classify_error(error: Optional[BaseException]) -> ErrorKind:
    """예외를 ErrorKind로 분류

    래핑된 예외는 cause 체인을 따라가며 AWS 에러 코드를 찾습니다.

    Args:
        error: 분류할 예외 (None이면 OTHER)

    Returns:
        ErrorKind
    """
    seen = set()
    current = error
    while current is not None and id(current) not in seen:
        seen.add(id(current))

        if isinstance(current, ReadOnlyDeniedError):
            return ErrorKind.READ_ONLY
        if isinstance(current, OperationCancelledError):
            return ErrorKind.CANCELLED
        if is_access_denied(current):
            return ErrorKind.AUTH
        if is_throttling(current):
            return ErrorKind.THROTTLING
        if is_not_found(current):
            return ErrorKind.NOT_FOUND
        if is_resource_in_use(current):
            return ErrorKind.RESOURCE_IN_USE

        current = getattr(current, "cause", None) or current.__cause__

    return ErrorKind.OTHER


def format_error_for_user(error: Exception) -> str:
    """사용자에게 표시할 에러 메시지 포맷팅

    Args:
        error: 예외

    Returns:
        사용자 친화적인 에러 메시지
    """
    if isinstance(error, BrowserError):
        return str(error)

    if hasattr(error, "response"):
        error_info = error.response.get("Error", {})
        code = error_info.get("Code", "UnknownError")
        message = error_info.get("Message", str(error))
        return f"{code}: {message}"

    return str(error)
