"""
plugins/computeoptimizer/recommendations/dao.py - Compute Optimizer 추천 DAO

EC2, ASG, EBS, Lambda, ECS 다섯 종류의 추천을 fan_out으로 동시에 조회합니다.

    - 일부 실패: 경고 로그만 남기고 성공한 결과를 반환
    - 전체 실패: AggregateFetchError
    - 정렬: 종류(알파벳) → 월 절감액 내림차순

Compute Optimizer API는 lowerCamelCase 필드를 사용합니다 (instanceArn, nextToken 등).
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from botocore.exceptions import ClientError

from core.aws import arn_suffix, paginate, parse_arn, tags_to_dict
from core.config import settings
from core.dao import BaseDAO, BaseResource, Operation
from core.exceptions import APICallError, NotFoundError
from core.parallel import ErrorCollector, fan_out, raise_if_all_failed

logger = logging.getLogger(__name__)

SERVICE = "compute-optimizer"
RESOURCE = "recommendations"

TYPE_EC2 = "EC2"
TYPE_ASG = "ASG"
TYPE_EBS = "EBS"
TYPE_LAMBDA = "LAMBDA"
TYPE_ECS = "ECS"


@dataclass(frozen=True)
class Savings:
    """추천 옵션의 절감 기회"""

    percent: float = 0.0
    value: float = 0.0
    currency: str = ""

    @classmethod
    def from_options(cls, options: list[dict[str, Any]] | None) -> Savings:
        """첫 번째(최우선) 추천 옵션의 savingsOpportunity"""
        if not options:
            return cls()
        opportunity = options[0].get("savingsOpportunity") or {}
        monthly = opportunity.get("estimatedMonthlySavings") or {}
        return cls(
            percent=float(opportunity.get("savingsOpportunityPercentage", 0.0) or 0.0),
            value=float(monthly.get("value", 0.0) or 0.0),
            currency=monthly.get("currency", "") or "",
        )


@dataclass(frozen=True)
class RecommendationResource(BaseResource):
    """리소스 종류와 무관한 통합 추천 리소스 (ID는 대상 리소스 ARN)"""

    resource_type: str = ""
    finding: str = ""
    current_config: str = ""
    savings: Savings = Savings()
    performance_risk: str = ""

    @property
    def savings_percent(self) -> float:
        return self.savings.percent

    @property
    def savings_value(self) -> float:
        return self.savings.value

    @property
    def savings_currency(self) -> str:
        return self.savings.currency

    @property
    def finding_reasons(self) -> list[str]:
        return list(self.get_field("findingReasonCodes", []))

    @property
    def account_id(self) -> str:
        return self.get_field("accountId")


def _lambda_name(arn: str) -> str:
    """function:name[:version] 에서 함수 이름"""
    parsed = parse_arn(arn)
    if parsed is None:
        return arn_suffix(arn)
    parts = parsed.resource.split(":")
    return parts[1] if len(parts) > 1 else parsed.resource


def ec2_recommendation(rec: dict[str, Any]) -> RecommendationResource:
    arn = rec.get("instanceArn", "")
    return RecommendationResource(
        id=arn,
        name=rec.get("instanceName") or arn_suffix(arn),
        arn=arn,
        tags=tags_to_dict(rec.get("tags")),
        data=rec,
        resource_type=TYPE_EC2,
        finding=rec.get("finding", ""),
        current_config=rec.get("currentInstanceType", ""),
        savings=Savings.from_options(rec.get("recommendationOptions")),
        performance_risk=rec.get("currentPerformanceRisk", ""),
    )


def asg_recommendation(rec: dict[str, Any]) -> RecommendationResource:
    arn = rec.get("autoScalingGroupArn", "")
    return RecommendationResource(
        id=arn,
        name=rec.get("autoScalingGroupName", ""),
        arn=arn,
        data=rec,
        resource_type=TYPE_ASG,
        finding=rec.get("finding", ""),
        current_config=(rec.get("currentConfiguration") or {}).get("instanceType", ""),
        savings=Savings.from_options(rec.get("recommendationOptions")),
        performance_risk=rec.get("currentPerformanceRisk", ""),
    )


def ebs_recommendation(rec: dict[str, Any]) -> RecommendationResource:
    arn = rec.get("volumeArn", "")
    config = rec.get("currentConfiguration") or {}
    current = f"{config.get('volumeType', '')}/{config.get('volumeSize', 0)}GB" if config else ""
    return RecommendationResource(
        id=arn,
        name=arn_suffix(arn),
        arn=arn,
        tags=tags_to_dict(rec.get("tags")),
        data=rec,
        resource_type=TYPE_EBS,
        finding=rec.get("finding", ""),
        current_config=current,
        savings=Savings.from_options(rec.get("volumeRecommendationOptions")),
        performance_risk=rec.get("currentPerformanceRisk", ""),
    )


def lambda_recommendation(rec: dict[str, Any]) -> RecommendationResource:
    arn = rec.get("functionArn", "")
    return RecommendationResource(
        id=arn,
        name=_lambda_name(arn),
        arn=arn,
        tags=tags_to_dict(rec.get("tags")),
        data=rec,
        resource_type=TYPE_LAMBDA,
        finding=rec.get("finding", ""),
        current_config=f"{rec.get('currentMemorySize', 0)}MB",
        savings=Savings.from_options(rec.get("memorySizeRecommendationOptions")),
        performance_risk=rec.get("currentPerformanceRisk", ""),
    )


def ecs_recommendation(rec: dict[str, Any]) -> RecommendationResource:
    arn = rec.get("serviceArn", "")
    config = rec.get("currentServiceConfiguration") or {}
    current = f"CPU:{config.get('cpu', 0)}/Mem:{config.get('memory', 0)}" if config else ""
    return RecommendationResource(
        id=arn,
        name=arn_suffix(arn),
        arn=arn,
        tags=tags_to_dict(rec.get("tags")),
        data=rec,
        resource_type=TYPE_ECS,
        finding=rec.get("finding", ""),
        current_config=current,
        savings=Savings.from_options(rec.get("serviceRecommendationOptions")),
        performance_risk=rec.get("currentPerformanceRisk", ""),
    )


def sort_recommendations(recs: list[RecommendationResource]) -> list[RecommendationResource]:
    """종류 오름차순, 같은 종류 안에서는 월 절감액 내림차순"""
    return sorted(recs, key=lambda r: (r.resource_type, -r.savings_value))


@dataclass(frozen=True)
class _Fetcher:
    """추천 종류 하나의 조회 정의"""

    name: str
    method: str  # boto3 메서드
    operation: str  # API 이름 (에러 메시지용)
    result_key: str
    factory: Callable[[dict[str, Any]], RecommendationResource]


FETCHERS = (
    _Fetcher(TYPE_EC2, "get_ec2_instance_recommendations", "GetEC2InstanceRecommendations",
             "instanceRecommendations", ec2_recommendation),
    _Fetcher(TYPE_ASG, "get_auto_scaling_group_recommendations", "GetAutoScalingGroupRecommendations",
             "autoScalingGroupRecommendations", asg_recommendation),
    _Fetcher(TYPE_EBS, "get_ebs_volume_recommendations", "GetEBSVolumeRecommendations",
             "volumeRecommendations", ebs_recommendation),
    _Fetcher(TYPE_LAMBDA, "get_lambda_function_recommendations", "GetLambdaFunctionRecommendations",
             "lambdaFunctionRecommendations", lambda_recommendation),
    _Fetcher(TYPE_ECS, "get_ecs_service_recommendations", "GetECSServiceRecommendations",
             "ecsServiceRecommendations", ecs_recommendation),
)


class RecommendationDAO(BaseDAO):
    """Compute Optimizer 추천 DAO

    get()은 list() 결과에서 찾으므로 상세 화면 자동 새로고침 대상에서 제외됩니다(LIST만 지원).
    """

    SUPPORTED_OPERATIONS = frozenset({Operation.LIST})

    def __init__(self, ctx):
        super().__init__(SERVICE, RESOURCE)
        self._client = ctx.client("compute-optimizer")

    def list(self, ctx) -> list[RecommendationResource]:
        """
        Raises:
            AggregateFetchError: 다섯 종류 모두 조회 실패
        """
        result = fan_out(
            {f.name: (lambda f=f: self._fetch(ctx, f)) for f in FETCHERS},
            ctx=ctx,
            max_workers=settings.MAX_FETCH_WORKERS,
        )
        raise_if_all_failed(result)

        collector = ErrorCollector(SERVICE)
        for name, error in result.errors():
            collector.collect(error, operation=name, region=ctx.region)
        if collector.has_errors:
            logger.warning(f"일부 추천 조회 실패, 나머지 결과만 표시: {collector.get_summary()}")

        return sort_recommendations(result.items())

    def get(self, ctx, resource_id: str) -> RecommendationResource:
        for rec in self.list(ctx):
            if rec.id == resource_id:
                return rec
        raise NotFoundError("recommendation", resource_id)

    def _fetch(self, ctx, fetcher: _Fetcher) -> list[RecommendationResource]:
        method = getattr(self._client, fetcher.method)

        def fetch_page(token):
            kwargs = {"nextToken": token} if token else {}
            try:
                response = method(**kwargs)
            except ClientError as e:
                raise APICallError.from_client_error("compute-optimizer", fetcher.operation, e) from e
            return response.get(fetcher.result_key, []), response.get("nextToken")

        records = paginate(ctx, fetch_page, f"compute-optimizer.{fetcher.operation}")
        return [fetcher.factory(rec) for rec in records]
