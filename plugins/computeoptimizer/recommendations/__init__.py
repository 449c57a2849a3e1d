"""
plugins/computeoptimizer/recommendations - Compute Optimizer 추천 통합 목록
"""

from core.registry import Entry

from .dao import RESOURCE, SERVICE, RecommendationDAO, RecommendationResource, sort_recommendations
from .render import RecommendationRenderer

__all__ = [
    "RecommendationDAO",
    "RecommendationRenderer",
    "RecommendationResource",
    "register",
    "sort_recommendations",
]


def register(registry, actions) -> None:
    registry.register_custom(SERVICE, RESOURCE, Entry(RecommendationDAO, RecommendationRenderer))
