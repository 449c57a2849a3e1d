"""
tests/core/action/test_action_expand.py - exec 명령 변수 치환 테스트
"""

from dataclasses import dataclass

import pytest

from core.action import build_variables, contains_shell_metachar, expand_variables
from core.dao import BaseResource, wrap_with_region
from core.exceptions import UnsafeValueError


@dataclass(frozen=True)
class InstanceLike(BaseResource):
    """PRIVATE_IP를 제공하는 리소스"""

    ip: str = ""

    @property
    def private_ip(self) -> str:
        return self.ip


@dataclass(frozen=True)
class TaskLike(BaseResource):
    """CLUSTER/CONTAINER를 제공하는 리소스"""

    @property
    def cluster_arn(self) -> str:
        return "arn:aws:ecs:ap-northeast-2:123456789012:cluster/main"

    @property
    def first_container_name(self) -> str:
        return "app"


@dataclass(frozen=True)
class StreamLike(BaseResource):
    @property
    def log_group_name(self) -> str:
        return "/aws/lambda/api"


class TestBuildVariables:
    """build_variables 테스트"""

    def test_base_variables(self):
        resource = BaseResource(id="my-bucket", name="bucket", arn="arn:aws:s3:::my-bucket")
        variables = build_variables(resource)

        assert variables == {
            "ID": "my-bucket",
            "NAME": "bucket",
            "ARN": "arn:aws:s3:::my-bucket",
            "INSTANCE_ID": "my-bucket",
            "BUCKET": "my-bucket",
        }

    def test_optional_variables(self):
        assert build_variables(InstanceLike(id="i-1", ip="10.0.0.1"))["PRIVATE_IP"] == "10.0.0.1"
        task_vars = build_variables(TaskLike(id="t-1"))
        assert task_vars["CLUSTER"].endswith("cluster/main")
        assert task_vars["CONTAINER"] == "app"
        assert build_variables(StreamLike(id="s"))["LOG_GROUP"] == "/aws/lambda/api"

    def test_unwraps_regional_resource(self):
        """래퍼의 합성 ID가 아닌 원래 ID 사용"""
        wrapped = wrap_with_region(BaseResource(id="i-1"), "us-east-1")
        assert build_variables(wrapped)["ID"] == "i-1"


class TestExpandVariables:
    """expand_variables 테스트"""

    def test_substitutes(self):
        resource = BaseResource(id="i-1", name="web")
        assert expand_variables("ssh ${ID} # ${NAME}", resource) == "ssh i-1 # web"

    def test_repeated_variable(self):
        assert expand_variables("${ID} ${ID}", BaseResource(id="x")) == "x x"

    def test_unknown_variable_left_as_is(self):
        assert expand_variables("echo ${FOO} ${ID}", BaseResource(id="x")) == "echo ${FOO} x"

    def test_log_group_variable(self):
        command = "aws logs tail ${LOG_GROUP} --log-stream-names ${NAME}"
        assert expand_variables(command, StreamLike(id="s-1")) == (
            "aws logs tail /aws/lambda/api --log-stream-names s-1"
        )

    @pytest.mark.parametrize(
        "bad",
        ["a;rm -rf /", "a|b", "a&b", "$(x)", "`x`", "a>b", "a<b", "a\nb", "a\rb", "{x}", "a(b", "a)b", "cost$5"],
    )
    def test_unsafe_referenced_value(self, bad):
        """참조된 값에 셸 메타문자가 있으면 거부"""
        with pytest.raises(UnsafeValueError) as exc_info:
            expand_variables("echo ${NAME}", BaseResource(id="x", name=bad))
        assert exc_info.value.variable == "NAME"

    def test_unsafe_id_with_safe_name(self):
        """ID에 명령 주입이 있으면 NAME이 안전해도 실행 명령을 만들지 않음"""
        resource = BaseResource(id="test; rm -rf /", name="safe-name")

        with pytest.raises(UnsafeValueError) as exc_info:
            expand_variables("echo ${ID} ${NAME}", resource)
        assert exc_info.value.variable == "ID"

    def test_unreferenced_unsafe_value_ignored(self):
        """참조되지 않은 값은 검사하지 않음"""
        resource = BaseResource(id="x", name="bad;name")
        assert expand_variables("echo ${ID}", resource) == "echo x"

    def test_contains_shell_metachar(self):
        assert contains_shell_metachar("a;b")
        assert not contains_shell_metachar("/aws/lambda/api-v2_test.log")
