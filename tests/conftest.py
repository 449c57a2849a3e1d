"""
tests/conftest.py - pytest 공통 픽스처

AWS API 모킹과 테스트 헬퍼를 제공합니다.

Usage:
    def test_something(make_ctx, mock_ec2_client):
        ctx = make_ctx(ec2=mock_ec2_client)
        dao = InstanceDAO(ctx)
"""

import os
from typing import Any, Dict, Optional
from unittest.mock import MagicMock

import pytest

# =============================================================================
# 환경 설정
# =============================================================================


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch, tmp_path):
    """테스트 환경 설정

    사용자 설정 파일(~/.config/awsb)과 ~/.aws 파일을 읽지 않도록 경로를 임시 디렉토리로 돌립니다.
    """
    os.environ.setdefault("AWS_DEFAULT_REGION", "ap-northeast-2")
    os.environ.setdefault("AWS_ACCESS_KEY_ID", "testing")
    os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "testing")

    monkeypatch.setenv("AWSB_CONFIG", str(tmp_path / "awsb-config.yaml"))
    monkeypatch.setenv("AWS_CONFIG_FILE", str(tmp_path / "aws-config"))
    monkeypatch.setenv("AWS_SHARED_CREDENTIALS_FILE", str(tmp_path / "aws-credentials"))
    for key in ("AWSB_READ_ONLY", "AWSB_DEMO_MODE", "AWS_PROFILE", "AWS_DEFAULT_PROFILE", "LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)

    yield


@pytest.fixture(autouse=True)
def reset_globals():
    """전역 레지스트리/런타임 설정 초기화"""
    from core.action import reset_action_registry
    from core.config import RuntimeConfig, reset_runtime_config, set_runtime_config
    from core.registry import reset_registry

    reset_registry()
    reset_action_registry()
    set_runtime_config(RuntimeConfig())

    yield

    reset_registry()
    reset_action_registry()
    reset_runtime_config()


# =============================================================================
# AWS 모킹 픽스처
# =============================================================================


@pytest.fixture
def mock_session():
    """boto3.Session 모킹 (서비스 이름별 클라이언트 등록)

    mock_session.clients["ec2"] = client 형태로 등록하면 session.client("ec2", ...)가 반환합니다.
    등록되지 않은 서비스는 새 MagicMock을 만들어 등록합니다.
    """
    session = MagicMock()
    session.region_name = "ap-northeast-2"
    session.clients = {}

    def _client(service_name, **kwargs):
        return session.clients.setdefault(service_name, MagicMock(name=f"{service_name}-client"))

    session.client.side_effect = _client
    return session


@pytest.fixture
def make_ctx(mock_session):
    """테스트용 RequestContext 팩토리

    Example:
        ctx = make_ctx(logs=mock_logs, filters={"LogGroupName": "/app"})
    """
    from core.context import RequestContext

    def _make(filters: Optional[Dict[str, str]] = None, profile: Optional[str] = None, **clients: Any):
        mock_session.clients.update(clients)
        return RequestContext(
            session=mock_session,
            region="ap-northeast-2",
            profile=profile,
            filters=dict(filters or {}),
        )

    return _make


@pytest.fixture
def mock_ec2_client():
    """EC2 클라이언트 모킹"""
    mock_client = MagicMock()

    mock_client.describe_instances.return_value = {
        "Reservations": [
            {
                "Instances": [
                    {
                        "InstanceId": "i-1234567890abcdef0",
                        "InstanceType": "t3.micro",
                        "State": {"Name": "running"},
                        "Tags": [{"Key": "Name", "Value": "test-instance"}],
                        "LaunchTime": "2024-01-01T00:00:00Z",
                        "PrivateIpAddress": "10.0.0.1",
                        "VpcId": "vpc-12345678",
                        "SubnetId": "subnet-12345678",
                        "Placement": {"AvailabilityZone": "ap-northeast-2a"},
                    }
                ]
            }
        ]
    }

    mock_paginator = MagicMock()
    mock_paginator.paginate.return_value = [mock_client.describe_instances.return_value]
    mock_client.get_paginator.return_value = mock_paginator

    yield mock_client


@pytest.fixture
def mock_sqs_client():
    """SQS 클라이언트 모킹"""
    mock_client = MagicMock()

    mock_client.list_queues.return_value = {
        "QueueUrls": ["https://sqs.ap-northeast-2.amazonaws.com/123456789012/orders"],
    }
    mock_client.get_queue_url.return_value = {
        "QueueUrl": "https://sqs.ap-northeast-2.amazonaws.com/123456789012/orders",
    }
    mock_client.get_queue_attributes.return_value = {
        "Attributes": {
            "QueueArn": "arn:aws:sqs:ap-northeast-2:123456789012:orders",
            "ApproximateNumberOfMessages": "5",
            "ApproximateNumberOfMessagesNotVisible": "1",
            "VisibilityTimeout": "30",
            "CreatedTimestamp": "1704067200",
        }
    }

    yield mock_client


@pytest.fixture
def mock_logs_client():
    """CloudWatch Logs 클라이언트 모킹"""
    mock_client = MagicMock()

    log_groups = {
        "logGroups": [
            {
                "logGroupName": "/aws/lambda/api",
                "arn": "arn:aws:logs:ap-northeast-2:123456789012:log-group:/aws/lambda/api:*",
                "storedBytes": 2048,
                "retentionInDays": 14,
                "creationTime": 1704067200000,
            }
        ]
    }
    mock_client.describe_log_groups.return_value = log_groups

    mock_paginator = MagicMock()
    mock_paginator.paginate.return_value = [log_groups]
    mock_client.get_paginator.return_value = mock_paginator

    yield mock_client


# =============================================================================
# 유틸리티 함수
# =============================================================================


def create_mock_response(
    data: Dict[str, Any],
    next_token: Optional[str] = None,
) -> Dict[str, Any]:
    """페이지네이션 응답 생성 헬퍼"""
    response = data.copy()
    if next_token:
        response["NextToken"] = next_token
    return response


def create_mock_client_error(
    error_code: str,
    error_message: str = "Test error",
) -> Exception:
    """ClientError 생성 헬퍼"""
    from botocore.exceptions import ClientError

    return ClientError(
        {
            "Error": {
                "Code": error_code,
                "Message": error_message,
            }
        },
        "TestOperation",
    )


# =============================================================================
# moto 통합 (선택적)
# =============================================================================

try:
    import moto

    @pytest.fixture
    def aws_credentials(monkeypatch):
        """moto 사용 시 AWS 자격 증명 설정"""
        monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
        monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
        monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
        monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
        monkeypatch.setenv("AWS_DEFAULT_REGION", "ap-northeast-2")

    @pytest.fixture
    def moto_ctx(aws_credentials):
        """moto를 사용한 실제 boto3 Session 기반 RequestContext"""
        with moto.mock_aws():
            import boto3

            from core.context import RequestContext

            session = boto3.Session(region_name="ap-northeast-2")
            yield RequestContext(session=session, region="ap-northeast-2")

except ImportError:
    # moto가 설치되지 않은 경우 더미 픽스처
    @pytest.fixture
    def moto_ctx():
        pytest.skip("moto not installed")
