"""
core/context.py - 요청 컨텍스트

DAO/액션 호출 하나에 필요한 정보를 묶습니다.
    - boto3 Session, 프로파일, 리전
    - 네비게이션 필터 (예: {"StackName": "my-stack"}, {"LogGroupName": "/aws/lambda/x"})
    - 취소 신호 (threading.Event)

필터는 with_filter()로 복사본을 만들어 추가하므로 컨텍스트 자체는 불변처럼 다룹니다.
취소 이벤트는 복사본끼리 공유되어, 부모를 취소하면 파생 컨텍스트도 함께 취소됩니다.

Usage:
    ctx = RequestContext.create(profile="dev", region="ap-northeast-2")
    streams_ctx = ctx.with_filter("LogGroupName", "/aws/lambda/api")
    logs = streams_ctx.client("logs")
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field, replace
from typing import Any

from core.aws.client import create_session, get_client
from core.exceptions import OperationCancelledError


@dataclass(frozen=True)
class RequestContext:
    """DAO/액션 호출 컨텍스트

    Attributes:
        session: boto3 Session
        region: 대상 리전
        profile: 프로파일 이름 (None이면 기본 자격 증명 체인)
        filters: 네비게이션 필터
        cancel_event: 취소 신호
    """

    session: Any
    region: str | None = None
    profile: str | None = None
    filters: dict[str, str] = field(default_factory=dict)
    cancel_event: threading.Event = field(default_factory=threading.Event, compare=False)

    @classmethod
    def create(cls, profile: str | None = None, region: str | None = None) -> RequestContext:
        """프로파일/리전으로 세션을 만들어 컨텍스트 생성"""
        session = create_session(profile=profile, region=region)
        return cls(session=session, region=region or session.region_name, profile=profile)

    # -------------------------------------------------------------------------
    # 필터
    # -------------------------------------------------------------------------

    def with_filter(self, key: str, value: str) -> RequestContext:
        """필터를 추가한 새 컨텍스트 반환 (취소 이벤트는 공유)"""
        filters = dict(self.filters)
        filters[key] = value
        return replace(self, filters=filters)

    def with_region(self, region: str) -> RequestContext:
        """리전을 바꾼 새 컨텍스트 반환"""
        return replace(self, region=region)

    def get_filter(self, key: str, default: str = "") -> str:
        """필터 값 조회 (없으면 default)"""
        return self.filters.get(key, default)

    # -------------------------------------------------------------------------
    # 취소
    # -------------------------------------------------------------------------

    def cancel(self) -> None:
        self.cancel_event.set()

    @property
    def cancelled(self) -> bool:
        return self.cancel_event.is_set()

    def raise_if_cancelled(self, operation: str = "") -> None:
        """취소되었으면 OperationCancelledError 발생"""
        if self.cancel_event.is_set():
            raise OperationCancelledError(operation)

    # -------------------------------------------------------------------------
    # 클라이언트
    # -------------------------------------------------------------------------

    def client(self, service_name: str, **kwargs: Any) -> Any:
        """컨텍스트 리전으로 retry 설정된 boto3 client 생성"""
        return get_client(self.session, service_name, region_name=self.region, **kwargs)
