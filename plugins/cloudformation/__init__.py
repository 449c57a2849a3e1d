"""
plugins/cloudformation - CloudFormation 리소스

스택 목록/상세/삭제/드리프트 감지와 스택 리소스 탐색
"""

CATEGORY = {
    "name": "cloudformation",
    "display_name": "CloudFormation",
    "description": "CloudFormation Stack 조회 및 관리",
    "description_en": "CloudFormation Stack Browsing and Management",
    "aliases": ["stack", "stacks"],
}

RESOURCES = [
    {
        "name": "stacks",
        "module": "stacks",
        "description": "CloudFormation 스택 (드리프트 감지, 삭제)",
        "description_en": "CloudFormation stacks (detect drift, delete)",
    },
    {
        "name": "resources",
        "module": "resources",
        "description": "스택 리소스 (스택에서 이동)",
        "description_en": "Stack resources (navigated from a stack)",
        "sub_resource": True,
    },
]
