"""
tests/plugins/ec2/test_ec2_instances.py - EC2 인스턴스 플러그인 테스트
"""

from unittest.mock import MagicMock

import pytest

from core.action import Action, ActionType, ConfirmLevel, find_action
from core.dao import wrap_with_region
from core.exceptions import APICallError, ErrorKind, NotFoundError
from plugins.ec2.instances import (
    ACTIONS,
    InstanceDAO,
    InstanceRenderer,
    InstanceResource,
    execute_instance_action,
)

from conftest import create_mock_client_error

INSTANCE = {
    "InstanceId": "i-1234567890abcdef0",
    "InstanceType": "t3.micro",
    "State": {"Name": "running"},
    "Tags": [{"Key": "Name", "Value": "web"}, {"Key": "Env", "Value": "prod"}],
    "PrivateIpAddress": "10.0.0.1",
    "VpcId": "vpc-12345678",
    "SubnetId": "subnet-12345678",
    "Placement": {"AvailabilityZone": "ap-northeast-2a"},
    "SecurityGroups": [{"GroupId": "sg-1"}, {"GroupId": "sg-2"}],
    "IamInstanceProfile": {"Arn": "arn:aws:iam::123456789012:instance-profile/web-profile"},
}


def _iam_client(role_name="web-role"):
    iam = MagicMock()
    iam.get_instance_profile.return_value = {"InstanceProfile": {"Roles": [{"RoleName": role_name}]}}
    return iam


class TestInstanceResource:
    """InstanceResource 테스트"""

    def test_from_api(self):
        resource = InstanceResource.from_api(INSTANCE, "web-role")

        assert resource.id == "i-1234567890abcdef0"
        assert resource.name == "web"
        assert resource.tags == {"Name": "web", "Env": "prod"}
        assert resource.state == "running"
        assert resource.instance_type == "t3.micro"
        assert resource.az == "ap-northeast-2a"
        assert resource.security_groups == ["sg-1", "sg-2"]
        assert resource.role_name == "web-role"

    def test_defaults(self):
        """필드가 없으면 기본값"""
        resource = InstanceResource.from_api({"InstanceId": "i-1"})

        assert resource.name == "i-1"
        assert resource.state == "unknown"
        assert resource.public_ip == ""
        assert resource.source_dest_check is True
        assert resource.ebs_optimized is False
        assert resource.security_groups == []


class TestInstanceDAO:
    """InstanceDAO 테스트"""

    def test_list(self, make_ctx, mock_ec2_client):
        ctx = make_ctx(ec2=mock_ec2_client)
        resources = InstanceDAO(ctx).list(ctx)

        assert len(resources) == 1
        assert resources[0].id == "i-1234567890abcdef0"
        assert resources[0].name == "test-instance"
        mock_ec2_client.get_paginator.assert_called_once_with("describe_instances")

    def test_list_caches_role_lookup(self, make_ctx):
        """같은 인스턴스 프로파일은 한 번만 조회"""
        ec2 = MagicMock()
        second = dict(INSTANCE, InstanceId="i-2")
        ec2.get_paginator.return_value.paginate.return_value = [
            {"Reservations": [{"Instances": [INSTANCE, second]}]}
        ]
        iam = _iam_client()
        ctx = make_ctx(ec2=ec2, iam=iam)

        resources = InstanceDAO(ctx).list(ctx)

        assert [r.role_name for r in resources] == ["web-role", "web-role"]
        iam.get_instance_profile.assert_called_once_with(InstanceProfileName="web-profile")

    def test_role_lookup_failure_ignored(self, make_ctx):
        ec2 = MagicMock()
        ec2.get_paginator.return_value.paginate.return_value = [{"Reservations": [{"Instances": [INSTANCE]}]}]
        iam = MagicMock()
        iam.get_instance_profile.side_effect = create_mock_client_error("AccessDenied")
        ctx = make_ctx(ec2=ec2, iam=iam)

        assert InstanceDAO(ctx).list(ctx)[0].role_name == ""

    def test_list_error(self, make_ctx):
        ec2 = MagicMock()
        ec2.get_paginator.return_value.paginate.side_effect = create_mock_client_error("UnauthorizedOperation")
        ctx = make_ctx(ec2=ec2)

        with pytest.raises(APICallError) as exc_info:
            InstanceDAO(ctx).list(ctx)
        assert exc_info.value.error_code == "UnauthorizedOperation"

    def test_get(self, make_ctx):
        ec2 = MagicMock()
        ec2.describe_instances.return_value = {"Reservations": [{"Instances": [INSTANCE]}]}
        ctx = make_ctx(ec2=ec2, iam=_iam_client())

        resource = InstanceDAO(ctx).get(ctx, "i-1234567890abcdef0")

        assert resource.role_name == "web-role"
        ec2.describe_instances.assert_called_once_with(InstanceIds=["i-1234567890abcdef0"])

    def test_get_not_found_error_code(self, make_ctx):
        ec2 = MagicMock()
        ec2.describe_instances.side_effect = create_mock_client_error("InvalidInstanceID.NotFound")
        ctx = make_ctx(ec2=ec2)

        with pytest.raises(NotFoundError):
            InstanceDAO(ctx).get(ctx, "i-missing")

    def test_get_empty_result(self, make_ctx):
        ec2 = MagicMock()
        ec2.describe_instances.return_value = {"Reservations": []}
        ctx = make_ctx(ec2=ec2)

        with pytest.raises(NotFoundError):
            InstanceDAO(ctx).get(ctx, "i-missing")

    def test_delete(self, make_ctx):
        ec2 = MagicMock()
        ctx = make_ctx(ec2=ec2)
        InstanceDAO(ctx).delete(ctx, "i-1")
        ec2.terminate_instances.assert_called_once_with(InstanceIds=["i-1"])

    def test_delete_missing_is_success(self, make_ctx):
        ec2 = MagicMock()
        ec2.terminate_instances.side_effect = create_mock_client_error("InvalidInstanceID.NotFound")
        ctx = make_ctx(ec2=ec2)
        InstanceDAO(ctx).delete(ctx, "i-1")

    def test_delete_error(self, make_ctx):
        ec2 = MagicMock()
        ec2.terminate_instances.side_effect = create_mock_client_error("OperationNotPermitted")
        ctx = make_ctx(ec2=ec2)

        with pytest.raises(APICallError):
            InstanceDAO(ctx).delete(ctx, "i-1")


class TestInstanceActions:
    """EC2 액션 테스트"""

    def test_definitions(self):
        assert find_action(ACTIONS, "D").confirm == ConfirmLevel.DANGEROUS
        assert find_action(ACTIONS, "S").operation == "StopInstances"
        ssm = find_action(ACTIONS, "x")
        assert ssm.type == ActionType.EXEC
        assert ssm.command == "aws ssm start-session --target ${ID}"

    def test_filters_by_state(self):
        running = InstanceResource.from_api(INSTANCE)
        stopped = InstanceResource.from_api(dict(INSTANCE, State={"Name": "stopped"}))

        assert [a.shortcut for a in ACTIONS if a.applies_to(running)] == ["S", "B", "D", "x"]
        assert [a.shortcut for a in ACTIONS if a.applies_to(stopped)] == ["R", "D"]

    @pytest.mark.parametrize(
        "shortcut,method,verb",
        [
            ("R", "start_instances", "Started"),
            ("S", "stop_instances", "Stopped"),
            ("B", "reboot_instances", "Rebooted"),
            ("D", "terminate_instances", "Terminated"),
        ],
    )
    def test_executor(self, make_ctx, shortcut, method, verb):
        ec2 = MagicMock()
        ctx = make_ctx(ec2=ec2)
        resource = InstanceResource.from_api(INSTANCE)

        result = execute_instance_action(ctx, find_action(ACTIONS, shortcut), resource)

        assert result.success
        assert result.message == f"{verb} instance i-1234567890abcdef0"
        getattr(ec2, method).assert_called_once_with(InstanceIds=["i-1234567890abcdef0"])

    def test_executor_unwraps_regional(self, make_ctx):
        ec2 = MagicMock()
        ctx = make_ctx(ec2=ec2)
        wrapped = wrap_with_region(InstanceResource.from_api(INSTANCE), "us-east-1")

        execute_instance_action(ctx, find_action(ACTIONS, "S"), wrapped)
        ec2.stop_instances.assert_called_once_with(InstanceIds=["i-1234567890abcdef0"])

    def test_terminate_already_gone(self, make_ctx):
        """이미 종료된 인스턴스의 Terminate는 성공"""
        ec2 = MagicMock()
        ec2.terminate_instances.side_effect = create_mock_client_error("InvalidInstanceID.NotFound")
        ctx = make_ctx(ec2=ec2)

        result = execute_instance_action(ctx, find_action(ACTIONS, "D"), InstanceResource.from_api(INSTANCE))

        assert result.success, result.message
        assert result.message == "Terminated instance i-1234567890abcdef0"

    def test_terminate_error_wrapped(self, make_ctx):
        ec2 = MagicMock()
        ec2.terminate_instances.side_effect = create_mock_client_error("OperationNotPermitted")
        ctx = make_ctx(ec2=ec2)

        result = execute_instance_action(ctx, find_action(ACTIONS, "D"), InstanceResource.from_api(INSTANCE))

        assert not result.success
        assert isinstance(result.error, APICallError)
        assert result.message.startswith("terminate instance i-1234567890abcdef0: ")

    def test_executor_client_error(self, make_ctx):
        ec2 = MagicMock()
        ec2.stop_instances.side_effect = create_mock_client_error("UnauthorizedOperation")
        ctx = make_ctx(ec2=ec2)

        result = execute_instance_action(ctx, find_action(ACTIONS, "S"), InstanceResource.from_api(INSTANCE))

        assert not result.success
        assert result.error_kind == ErrorKind.AUTH
        assert result.message.startswith("stop instance i-1234567890abcdef0: ")

    def test_executor_unknown_operation(self, make_ctx):
        action = Action(name="Hibernate", shortcut="h", type=ActionType.API, operation="HibernateInstances")
        result = execute_instance_action(make_ctx(), action, InstanceResource.from_api(INSTANCE))
        assert not result.success
        assert "HibernateInstances" in str(result.error)


class TestInstanceRenderer:
    """InstanceRenderer 테스트"""

    def test_columns(self):
        names = [c.name for c in InstanceRenderer().columns()]
        assert names == ["INSTANCE ID", "NAME", "STATE", "TYPE", "PRIVATE IP", "PUBLIC IP", "AZ", "AGE", "TAGS"]

    def test_render_row(self):
        row = InstanceRenderer().render_row(InstanceResource.from_api(INSTANCE))
        assert row[:5] == ["i-1234567890abcdef0", "web", "running", "t3.micro", "10.0.0.1"]
        assert row[-1] == "Env=prod"

    def test_render_detail(self):
        detail = InstanceRenderer().render_detail(InstanceResource.from_api(INSTANCE, "web-role"))

        assert "EC2 Instance: web" in detail
        assert "sg-1, sg-2" in detail
        assert "web-role" in detail
        assert "[dim]Not configured[/dim]" in detail

    def test_summary(self):
        fields = InstanceRenderer().render_summary(InstanceResource.from_api(INSTANCE))
        assert [f.label for f in fields] == ["ID", "Name", "State", "Type", "Private IP"]
        assert fields[2].style == "green"

    def test_navigations(self):
        navs = InstanceRenderer().navigations(InstanceResource.from_api(INSTANCE))
        assert [(n.key, n.service, n.resource, n.filter_field, n.filter_value) for n in navs] == [
            ("v", "vpc", "vpcs", "VpcId", "vpc-12345678"),
            ("s", "vpc", "subnets", "SubnetId", "subnet-12345678"),
        ]

    def test_no_navigations_without_network(self):
        assert InstanceRenderer().navigations(InstanceResource.from_api({"InstanceId": "i-1"})) == []

    def test_metric_spec(self):
        spec = InstanceRenderer().metric_spec()
        assert (spec.namespace, spec.metric_name, spec.dimension_name) == ("AWS/EC2", "CPUUtilization", "InstanceId")
