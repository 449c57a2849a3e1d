"""
tests/core/parallel/test_parallel_executor.py - fan_out 테스트
"""

import threading
import time

import pytest

from conftest import create_mock_client_error
from core.exceptions import AggregateFetchError, ErrorKind, OperationCancelledError
from core.parallel import all_failed, fan_out, raise_if_all_failed
from core.parallel.types import FanOutResult, TaskResult


class TestFanOut:
    """fan_out 테스트"""

    def test_empty_tasks(self):
        """작업이 없으면 빈 결과 (전체 실패 아님)"""
        result = fan_out({})
        assert result.results == []
        assert all_failed(result) is False

    def test_results_keep_registration_order(self):
        """완료 순서와 무관하게 등록 순서 유지"""

        def slow():
            time.sleep(0.05)
            return ["slow"]

        result = fan_out({"slow": slow, "fast": lambda: ["fast"]})

        assert [r.name for r in result.results] == ["slow", "fast"]
        assert result.items() == ["slow", "fast"]

    def test_partial_failure_collected(self):
        """한 작업의 실패가 다른 작업을 막지 않음"""

        def fail():
            raise create_mock_client_error("AccessDeniedException")

        result = fan_out({"ec2": lambda: [1, 2], "lambda": fail, "ebs": lambda: [3]})

        assert result.success_count == 2
        assert result.error_count == 1
        assert result.items() == [1, 2, 3]
        name, error = result.errors()[0]
        assert name == "lambda"
        assert result.failed[0].error_kind == ErrorKind.AUTH
        raise_if_all_failed(result)

    def test_all_failed_raises_aggregate(self):
        """모든 작업이 실패하면 AggregateFetchError"""

        def fail_a():
            raise ValueError("a broke")

        def fail_b():
            raise ValueError("b broke")

        result = fan_out({"a": fail_a, "b": fail_b})

        assert all_failed(result) is True
        with pytest.raises(AggregateFetchError) as exc_info:
            raise_if_all_failed(result)
        assert str(exc_info.value) == "all 2 fetches failed: a: a broke; b: b broke"
        assert [name for name, _ in exc_info.value.errors] == ["a", "b"]

    def test_runs_concurrently(self):
        """작업이 동시에 실행됨"""
        barrier = threading.Barrier(3, timeout=5)

        def task():
            barrier.wait()
            return ["ok"]

        result = fan_out({"a": task, "b": task, "c": task}, max_workers=3)
        assert result.success_count == 3

    def test_cancelled_context(self, make_ctx):
        """취소된 컨텍스트면 작업을 시작하지 않음"""
        ctx = make_ctx()
        ctx.cancel()
        called = []

        result = fan_out({"a": lambda: called.append(1) or []}, ctx=ctx)

        assert called == []
        assert isinstance(result.results[0].error, OperationCancelledError)
        assert result.results[0].error_kind == ErrorKind.CANCELLED

    def test_none_data_becomes_empty(self):
        result = fan_out({"a": lambda: None})
        assert result.results[0].success
        assert result.results[0].data == []


class TestAllFailedPolicy:
    """all_failed 정책 테스트"""

    def test_mixed(self):
        result = FanOutResult(results=[TaskResult("a", data=[1]), TaskResult("b", error=ValueError())])
        assert all_failed(result) is False

    def test_all_errors(self):
        result = FanOutResult(results=[TaskResult("a", error=ValueError())])
        assert all_failed(result) is True

    def test_all_success_with_no_data(self):
        """성공했지만 데이터가 없어도 실패가 아님"""
        result = FanOutResult(results=[TaskResult("a")])
        assert all_failed(result) is False
