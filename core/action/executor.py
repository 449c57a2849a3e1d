"""
core/action/executor.py - 액션 디스패치

execute_with_dao() 순서:
    1. API 액션인데 operation이 비어 있으면 EmptyOperationError (정의 오류를 먼저 알림)
    2. 읽기 전용 모드에서 허용 목록 밖이면 ReadOnlyDeniedError
    3. 디스패치
       - EXEC: 변수 치환 → /bin/sh -c (skip_aws_env가 아니면 AWS 환경변수 주입)
       - API : service/resource에 등록된 executor (없으면 ExecutorNotRegisteredError)
               executor가 던진 예외는 모두 실패 결과로 변환
       - 그 외: UnknownActionTypeError
    4. 결과 로깅

재시도는 하지 않습니다. 사용자가 확인 후 한 번 실행하는 작업입니다.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from botocore.exceptions import BotoCoreError, ClientError

from core.aws.env import build_subprocess_env
from core.config import get_runtime_config
from core.exceptions import (
    BrowserError,
    EmptyCommandError,
    EmptyOperationError,
    ExecutorNotRegisteredError,
    ReadOnlyDeniedError,
    UnknownActionTypeError,
)

from .expand import expand_variables
from .readonly import is_allowed_in_read_only
from .registry import ActionRegistry, get_action_registry
from .types import Action, ActionResult, ActionType, fail_result, success_result, success_result_with_follow_up

if TYPE_CHECKING:
    from core.context import RequestContext

logger = logging.getLogger(__name__)

SHELL = "/bin/sh"

# (명령, env) → 종료 코드. env가 None이면 현재 환경 그대로 상속
CommandRunner = Callable[[str, "dict[str, str] | None"], int]


class CommandFailedError(BrowserError):
    """exec 명령이 0이 아닌 코드로 종료"""

    def __init__(self, command: str, returncode: int):
        super().__init__(f"command exited with status {returncode}")
        self.command = command
        self.returncode = returncode
        self.details["returncode"] = returncode


def run_shell(command: str, env: dict[str, str] | None) -> int:
    """/bin/sh -c로 명령 실행 (표준 입출력 상속)"""
    completed = subprocess.run([SHELL, "-c", command], env=env, check=False)  # noqa: S603
    return completed.returncode


def execute_exec(
    ctx: RequestContext,
    action: Action,
    resource: Any,
    runner: CommandRunner | None = None,
) -> ActionResult:
    """EXEC 액션 실행"""
    try:
        command = expand_variables(action.command, resource)
    except BrowserError as e:
        return fail_result(e)

    if not command.strip():
        return fail_result(EmptyCommandError(action.name))

    env = None
    if not action.skip_aws_env:
        config = get_runtime_config()
        env = build_subprocess_env(ctx.profile or config.profile, ctx.region or config.region)

    logger.debug(f"exec: {command}")
    returncode = (runner or run_shell)(command, env)
    if returncode != 0:
        return fail_result(CommandFailedError(command, returncode))

    if action.post_exec_follow_up is not None:
        return success_result_with_follow_up("Command executed successfully", action.post_exec_follow_up(resource))
    return success_result("Command executed successfully")


def precheck_action(action: Action, key: str = "") -> ActionResult | None:
    """디스패치 전 검사 (1, 2단계)

    CLI는 확인 프롬프트 전에 호출합니다.

    Returns:
        거부 사유가 담긴 실패 결과. 실행 가능하면 None
    """
    if action.type == ActionType.API and not action.operation:
        logger.error(f"API 액션에 operation 없음 [{key}] {action.name}")
        return fail_result(EmptyOperationError(action.name))

    if get_runtime_config().get_read_only() and not is_allowed_in_read_only(action):
        logger.info(f"읽기 전용 모드 차단 [{key}] {action.name}")
        return fail_result(ReadOnlyDeniedError(action.name))

    return None


def execute_with_dao(
    ctx: RequestContext,
    action: Action,
    resource: Any,
    service: str,
    resource_type: str,
    registry: ActionRegistry | None = None,
    runner: CommandRunner | None = None,
) -> ActionResult:
    """액션 실행 진입점

    Args:
        ctx: 요청 컨텍스트
        action: 실행할 액션
        resource: 대상 리소스
        service: 서비스 이름
        resource_type: 리소스 타입
        registry: 액션 레지스트리 (기본: 전역)
        runner: EXEC 명령 실행 함수 (기본: run_shell)

    Returns:
        ActionResult
    """
    registry = registry or get_action_registry()
    key = f"{service}/{resource_type}"
    logger.info(f"액션 실행 [{key}] {action.name} ({getattr(action.type, 'value', action.type)}) → {resource.id}")

    refused = precheck_action(action, key)
    if refused is not None:
        return refused

    if action.type == ActionType.EXEC:
        result = execute_exec(ctx, action, resource, runner=runner)
    elif action.type == ActionType.API:
        executor = registry.get_executor(service, resource_type)
        if executor is None:
            result = fail_result(ExecutorNotRegisteredError(service, resource_type))
        else:
            try:
                result = executor(ctx, action, resource)
            except (BrowserError, ClientError, BotoCoreError) as e:
                result = fail_result(e)
            except Exception as e:
                logger.exception(f"executor 예외 [{key}] {action.name}: {e}")
                result = fail_result(e)
    else:
        result = fail_result(UnknownActionTypeError(action.type))

    if result.success:
        logger.info(f"액션 완료 [{key}] {action.name}")
    else:
        kind = result.error_kind.value if result.error_kind else "-"
        logger.warning(f"액션 실패 [{key}] {action.name} ({kind}): {result.error}")

    return result
