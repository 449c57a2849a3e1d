"""
core/parallel - 독립 작업 병렬 실행

fan_out으로 독립 조회를 동시에 실행하고, 부분 실패는 수집만 하며,
전체 실패 여부는 all_failed() 정책으로 판정합니다.

Example:
    from core.parallel import fan_out, raise_if_all_failed

    result = fan_out({"ec2": fetch_ec2, "ebs": fetch_ebs}, ctx=ctx)
    raise_if_all_failed(result)
    recommendations = result.items()
"""

from .errors import CollectedError, ErrorCollector
from .executor import all_failed, fan_out, raise_if_all_failed
from .types import FanOutResult, TaskResult

__all__: list[str] = [
    "CollectedError",
    "ErrorCollector",
    "FanOutResult",
    "TaskResult",
    "all_failed",
    "fan_out",
    "raise_if_all_failed",
]
