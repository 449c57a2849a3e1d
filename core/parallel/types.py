"""
core/parallel/types.py - 병렬 실행 결과 타입

fan_out()의 작업별 결과(성공 데이터 또는 예외)와 전체 결과를 표현합니다.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar

from core.exceptions import ErrorKind, classify_error

T = TypeVar("T")


@dataclass
class TaskResult(Generic[T]):
    """단일 작업 결과

    Attributes:
        name: 작업 이름 (예: "ec2", "lambda")
        data: 성공 시 결과 목록
        error: 실패 시 예외
        duration_ms: 실행 시간 (밀리초)
    """

    name: str
    data: list[T] = field(default_factory=list)
    error: BaseException | None = None
    duration_ms: float = 0.0

    @property
    def success(self) -> bool:
        return self.error is None

    @property
    def error_kind(self) -> ErrorKind | None:
        return classify_error(self.error) if self.error is not None else None


@dataclass
class FanOutResult(Generic[T]):
    """fan_out 전체 결과

    results는 완료 순서와 무관하게 작업 등록 순서를 유지합니다.
    """

    results: list[TaskResult[T]] = field(default_factory=list)

    @property
    def successful(self) -> list[TaskResult[T]]:
        return [r for r in self.results if r.success]

    @property
    def failed(self) -> list[TaskResult[T]]:
        return [r for r in self.results if not r.success]

    @property
    def success_count(self) -> int:
        return len(self.successful)

    @property
    def error_count(self) -> int:
        return len(self.failed)

    def items(self) -> list[T]:
        """성공한 작업 데이터를 하나의 리스트로 합침"""
        merged: list[T] = []
        for r in self.successful:
            merged.extend(r.data)
        return merged

    def errors(self) -> list[tuple[str, BaseException]]:
        """(작업 이름, 예외) 목록"""
        return [(r.name, r.error) for r in self.failed if r.error is not None]
