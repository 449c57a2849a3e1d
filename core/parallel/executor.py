"""
core/parallel/executor.py - 독립 조회 작업 fan-out

서로 독립적인 목록 조회(예: Compute Optimizer의 리소스 종류별 추천)를
ThreadPoolExecutor로 동시에 실행하고 모두 끝날 때까지 기다립니다.

규칙:
    - 한 작업의 실패가 다른 작업을 취소하지 않습니다. 에러는 수집만 합니다.
    - 전체 실패 여부는 all_failed() 정책 함수 하나로 판정합니다.
      (모든 작업이 실패했을 때만 전체 실패)
    - 결과는 작업 등록 순서로 정렬됩니다. 완료 순서에 따른 재정렬은 호출자 몫입니다.

Example:
    result = fan_out(
        {
            "ec2": lambda: fetch_ec2(ctx),
            "lambda": lambda: fetch_lambda(ctx),
        },
        ctx=ctx,
    )
    raise_if_all_failed(result)
    items = result.items()
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Mapping
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import TYPE_CHECKING, TypeVar

from core.exceptions import AggregateFetchError

from .types import FanOutResult, TaskResult

if TYPE_CHECKING:
    from core.context import RequestContext

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_MAX_WORKERS = 5


def _clear_exception_chain(e: BaseException) -> None:
    """traceback + chained exception 메모리 누수 방지"""
    e.__traceback__ = None
    if e.__context__ is not None:
        e.__context__.__traceback__ = None
    if e.__cause__ is not None:
        e.__cause__.__traceback__ = None


def _run_task(name: str, func: Callable[[], list[T]], ctx: RequestContext | None) -> TaskResult[T]:
    start_time = time.monotonic()
    try:
        if ctx is not None:
            ctx.raise_if_cancelled(name)
        data = func()
        return TaskResult(name=name, data=list(data or []), duration_ms=(time.monotonic() - start_time) * 1000)
    except Exception as e:
        _clear_exception_chain(e)
        return TaskResult(name=name, error=e, duration_ms=(time.monotonic() - start_time) * 1000)


def fan_out(
    tasks: Mapping[str, Callable[[], list[T]]],
    ctx: RequestContext | None = None,
    max_workers: int = DEFAULT_MAX_WORKERS,
) -> FanOutResult[T]:
    """독립 작업들을 병렬 실행하고 모든 결과를 수집

    Args:
        tasks: 작업 이름 → 인자 없는 조회 함수
        ctx: 요청 컨텍스트 (시작 전 취소 확인용)
        max_workers: 최대 동시 스레드 수

    Returns:
        FanOutResult (작업 등록 순서 유지)
    """
    if not tasks:
        return FanOutResult()

    order = list(tasks)
    by_name: dict[str, TaskResult[T]] = {}

    with ThreadPoolExecutor(max_workers=max(1, min(max_workers, len(order)))) as executor:
        futures = {executor.submit(_run_task, name, tasks[name], ctx): name for name in order}

        for future in as_completed(futures):
            name = futures[future]
            result = future.result()
            by_name[name] = result

            if result.success:
                logger.debug(f"fan-out 작업 완료 [{name}]: {len(result.data)}건, {result.duration_ms:.0f}ms")
            else:
                logger.warning(f"fan-out 작업 실패 [{name}]: {result.error}")

    fan_result = FanOutResult(results=[by_name[name] for name in order])
    logger.debug(f"fan-out 완료: 성공 {fan_result.success_count}, 실패 {fan_result.error_count}")
    return fan_result


def all_failed(result: FanOutResult) -> bool:
    """전체 실패 판정 정책: 작업이 하나 이상 있고 모두 실패한 경우에만 True"""
    return bool(result.results) and result.success_count == 0


def raise_if_all_failed(result: FanOutResult) -> None:
    """all_failed()이면 모든 실패를 합친 AggregateFetchError 발생"""
    if all_failed(result):
        raise AggregateFetchError(result.errors())
