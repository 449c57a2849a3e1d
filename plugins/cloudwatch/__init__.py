"""
plugins/cloudwatch - CloudWatch Logs 리소스
"""

CATEGORY = {
    "name": "cloudwatch",
    "display_name": "CloudWatch",
    "description": "CloudWatch Logs 로그 그룹/스트림 조회",
    "description_en": "CloudWatch Logs log group and stream browsing",
    "aliases": ["log", "loggroups"],
}

RESOURCES = [
    {
        "name": "log-groups",
        "module": "log_groups",
        "description": "로그 그룹 (tail, 삭제, 스트림으로 이동)",
        "description_en": "Log groups (tail, delete, navigate to streams)",
    },
    {
        "name": "log-streams",
        "module": "log_streams",
        "description": "로그 스트림 (로그 그룹에서 이동)",
        "description_en": "Log streams (navigated from a log group)",
        "sub_resource": True,
    },
]
