"""
plugins/computeoptimizer - Compute Optimizer 추천
"""

CATEGORY = {
    "name": "compute-optimizer",
    "display_name": "Compute Optimizer",
    "description": "EC2/ASG/EBS/Lambda/ECS 적정 크기 추천",
    "description_en": "Rightsizing recommendations for EC2/ASG/EBS/Lambda/ECS",
    "aliases": ["rightsizing", "optimizer"],
}

RESOURCES = [
    {
        "name": "recommendations",
        "module": "recommendations",
        "description": "리소스 종류별 추천 통합 목록",
        "description_en": "Unified recommendations across resource types",
    },
]
