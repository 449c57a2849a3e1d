"""
core/aws/paginate.py - 페이지네이션 헬퍼

두 가지 방식을 제공합니다.

    paginate()          : fetch(token) -> (items, next_token) 콜백 기반 범용 루프
    collect_paginator() : boto3 paginator를 끝까지 소비

두 방식 모두 매 페이지 요청 전에 취소 여부를 확인하여,
취소되면 남은 페이지를 더 읽지 않고 OperationCancelledError를 전파합니다.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar

if TYPE_CHECKING:
    from core.context import RequestContext

logger = logging.getLogger(__name__)

T = TypeVar("T")

PageFetcher = Callable[[str | None], tuple[list[T], str | None]]


def paginate(ctx: RequestContext, fetch: PageFetcher, operation: str = "paginate") -> list[T]:
    """토큰이 비거나 None이 될 때까지 페이지 수집

    Args:
        ctx: 요청 컨텍스트 (취소 확인용)
        fetch: token을 받아 (items, next_token)을 반환하는 함수
        operation: 취소 에러 메시지에 쓸 작업 이름

    Returns:
        모든 페이지의 항목

    Raises:
        OperationCancelledError: 페이지 사이에 취소된 경우
    """
    items: list[T] = []
    token: str | None = None
    pages = 0

    while True:
        ctx.raise_if_cancelled(operation)
        page_items, token = fetch(token)
        items.extend(page_items)
        pages += 1
        if not token:
            break

    logger.debug(f"{operation}: {pages} pages, {len(items)} items")
    return items


def collect_paginator(
    ctx: RequestContext,
    client: Any,
    operation: str,
    result_key: str,
    **kwargs: Any,
) -> list[dict[str, Any]]:
    """boto3 paginator로 전체 결과 수집

    Args:
        ctx: 요청 컨텍스트
        client: boto3 client
        operation: paginator 이름 (예: "describe_instances")
        result_key: 응답에서 꺼낼 키 (예: "Reservations")
        **kwargs: paginate()에 전달할 요청 파라미터

    Returns:
        result_key 항목 전체
    """
    items: list[dict[str, Any]] = []
    paginator = client.get_paginator(operation)

    for page in paginator.paginate(**kwargs):
        ctx.raise_if_cancelled(operation)
        items.extend(page.get(result_key, []))

    return items
