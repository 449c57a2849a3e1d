"""
plugins/sqs - SQS 리소스
"""

CATEGORY = {
    "name": "sqs",
    "display_name": "SQS",
    "description": "SQS 큐 조회 및 관리",
    "description_en": "SQS Queue Browsing and Management",
    "aliases": ["queue", "queues"],
}

RESOURCES = [
    {
        "name": "queues",
        "module": "queues",
        "description": "SQS 큐 (Purge, 테스트 메시지 전송, 삭제)",
        "description_en": "SQS queues (purge, send test message, delete)",
    },
]
