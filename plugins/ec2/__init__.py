"""
plugins/ec2 - EC2 리소스

Browse and control EC2 instances
"""

CATEGORY = {
    "name": "ec2",
    "display_name": "EC2",
    "description": "EC2 인스턴스 조회 및 관리",
    "description_en": "EC2 Instance Browsing and Management",
    "aliases": ["compute", "instance", "instances"],
}

RESOURCES = [
    {
        "name": "instances",
        "module": "instances",
        "description": "EC2 인스턴스 (시작/중지/재부팅/종료, SSM 세션)",
        "description_en": "EC2 instances (start/stop/reboot/terminate, SSM session)",
    },
]
