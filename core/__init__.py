# core/__init__.py
"""
core - AWS 리소스 브라우저 프레임워크

서비스별 플러그인이 끼워지는 공통 뼈대입니다.

아키텍처:
    core/
    ├── aws/            # boto3 client, 페이지네이션, 태그/ARN, 서브프로세스 환경
    ├── dao/            # Resource / DAO 계약
    ├── render/         # Renderer 계약, 테이블/상세 화면 헬퍼
    ├── registry/       # (service, resource) → DAO/Renderer 레지스트리
    ├── action/         # 액션 레지스트리, 확인 토큰, 읽기 전용 게이트, 디스패치
    ├── parallel/       # 독립 조회 fan-out
    ├── bootstrap.py    # 플러그인 등록 후 레지스트리 close
    ├── context.py      # 요청 컨텍스트 (세션, 리전, 필터, 취소)
    ├── config.py       # 중앙 설정 관리
    └── exceptions.py   # 통합 예외 계층

Usage:
    from core.bootstrap import bootstrap
    from core.context import RequestContext

    registry, actions = bootstrap()
    ctx = RequestContext.create(profile="dev", region="ap-northeast-2")
    dao = registry.get_dao(ctx, "ec2", "instances")
    instances = dao.list(ctx)
"""

from core import action, aws, config, context, dao, exceptions, parallel, registry, render

__all__: list[str] = [
    # 서브패키지
    "action",
    "aws",
    "dao",
    "parallel",
    "registry",
    "render",
    # 모듈
    "config",
    "context",
    "exceptions",
]
