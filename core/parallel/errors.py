"""
core/parallel/errors.py - 에러 수집 및 관리

부분 실패를 허용하는 조회(fan-out, 리전별 조회 등)에서 발생한 에러를
스레드 세이프하게 수집하고 ErrorKind별로 요약합니다.

Example:
    collector = ErrorCollector("computeoptimizer")

    for name, err in result.errors():
        collector.collect(err, operation=name)

    if collector.has_errors:
        logger.warning(collector.get_summary())
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from datetime import datetime

from core.exceptions import ErrorKind, classify_error, get_error_code

logger = logging.getLogger(__name__)


@dataclass
class CollectedError:
    """수집된 에러 상세 정보

    Attributes:
        timestamp: 에러 발생 시각
        service: AWS 서비스 이름
        operation: 작업 이름
        error_code: AWS 에러 코드 (없으면 예외 클래스 이름)
        error_message: 에러 메시지
        kind: 에러 분류
        region: 리전 (선택)
        resource_id: 관련 리소스 ID (선택)
    """

    timestamp: datetime
    service: str
    operation: str
    error_code: str
    error_message: str
    kind: ErrorKind
    region: str | None = None
    resource_id: str | None = None

    def __str__(self) -> str:
        loc = f" {self.region}" if self.region else ""
        return f"[{self.kind.value}]{loc} {self.service}.{self.operation}: {self.error_code}"

    def to_dict(self) -> dict[str, str | None]:
        """딕셔너리로 변환 (로깅/직렬화용)"""
        return {
            "timestamp": self.timestamp.isoformat(),
            "service": self.service,
            "operation": self.operation,
            "error_code": self.error_code,
            "error_message": self.error_message,
            "kind": self.kind.value,
            "region": self.region,
            "resource_id": self.resource_id,
        }


class ErrorCollector:
    """스레드 세이프 에러 수집기"""

    def __init__(self, service: str):
        self.service = service
        self._errors: list[CollectedError] = []
        self._lock = threading.Lock()

    def collect(
        self,
        error: BaseException,
        operation: str,
        region: str | None = None,
        resource_id: str | None = None,
    ) -> CollectedError:
        """예외를 분류해 수집하고 로깅

        권한 없음(AUTH)은 사용자가 조치할 일이 아닌 경우가 많아 INFO로 남깁니다.
        """
        collected = CollectedError(
            timestamp=datetime.now(),
            service=self.service,
            operation=operation,
            error_code=get_error_code(error) or type(error).__name__,
            error_message=str(error),
            kind=classify_error(error),
            region=region,
            resource_id=resource_id,
        )

        with self._lock:
            self._errors.append(collected)

        if collected.kind == ErrorKind.AUTH:
            logger.info(f"{collected}")
        else:
            logger.warning(f"{collected}")

        return collected

    @property
    def errors(self) -> list[CollectedError]:
        """수집된 모든 에러의 복사본 반환"""
        with self._lock:
            return list(self._errors)

    @property
    def has_errors(self) -> bool:
        with self._lock:
            return len(self._errors) > 0

    def by_kind(self, kind: ErrorKind) -> list[CollectedError]:
        with self._lock:
            return [e for e in self._errors if e.kind == kind]

    def get_summary(self) -> str:
        """분류별 에러 건수 요약 (예: "에러 3건 (auth: 1건, other: 2건)")"""
        with self._lock:
            if not self._errors:
                return "에러 없음"

            counts: dict[str, int] = {}
            for e in self._errors:
                counts[e.kind.value] = counts.get(e.kind.value, 0) + 1

            parts = [f"{k}: {v}건" for k, v in sorted(counts.items())]
            return f"에러 {len(self._errors)}건 ({', '.join(parts)})"
