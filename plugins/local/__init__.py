"""
plugins/local - 로컬 환경 리소스

AWS API 대신 로컬 설정 파일을 조회합니다.
"""

CATEGORY = {
    "name": "local",
    "display_name": "Local",
    "description": "로컬 AWS 프로파일 조회 및 로그인",
    "description_en": "Local AWS profiles and login",
    "aliases": [],
}

RESOURCES = [
    {
        "name": "profile",
        "module": "profile",
        "description": "~/.aws 프로파일 (SSO 로그인)",
        "description_en": "Profiles from ~/.aws (SSO login)",
    },
]
