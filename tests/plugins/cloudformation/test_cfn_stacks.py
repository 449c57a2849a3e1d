"""
tests/plugins/cloudformation/test_cfn_stacks.py - CloudFormation 스택 플러그인 테스트
"""

import json
from unittest.mock import MagicMock

import pytest

from core.action import find_action, is_allowed_in_read_only
from core.exceptions import APICallError, NotFoundError
from plugins.cloudformation.stacks import ACTIONS, StackDAO, StackRenderer, StackResource, execute_stack_action
from plugins.cloudformation.stacks.dao import is_stack_missing
from plugins.cloudformation.stacks.render import drift_style

from conftest import create_mock_client_error

STACK_ID = "arn:aws:cloudformation:ap-northeast-2:123456789012:stack/web/0a1b2c3d-0000-0000-0000-000000000000"

STACK = {
    "StackId": STACK_ID,
    "StackName": "web",
    "StackStatus": "UPDATE_IN_PROGRESS",
    "Description": "web tier",
    "EnableTerminationProtection": True,
    "DriftInformation": {"StackDriftStatus": "DRIFTED"},
    "Parameters": [{"ParameterKey": "Env", "ParameterValue": "prod"}],
    "Outputs": [{"OutputKey": "Url", "OutputValue": "https://example.com"}],
    "Tags": [{"Key": "Team", "Value": "core"}],
}

TEMPLATE = json.dumps(
    {
        "Resources": {
            "Queue": {"Type": "AWS::SQS::Queue", "Properties": {"QueueName": "stack-queue"}},
        }
    }
)


def _missing_stack_error():
    return create_mock_client_error("ValidationError", "Stack with id web does not exist")


class TestIsStackMissing:
    """is_stack_missing 테스트"""

    def test_validation_does_not_exist(self):
        assert is_stack_missing(_missing_stack_error())

    def test_other_validation_error(self):
        assert not is_stack_missing(create_mock_client_error("ValidationError", "Template format error"))

    def test_not_found_code(self):
        assert is_stack_missing(create_mock_client_error("ResourceNotFoundException"))


class TestStackResource:
    """StackResource 테스트"""

    def test_from_api(self):
        stack = StackResource.from_api(STACK)

        assert stack.id == stack.arn == STACK_ID
        assert stack.name == "web"
        assert stack.status == "UPDATE_IN_PROGRESS"
        assert stack.drift_status == "DRIFTED"
        assert stack.termination_protection
        assert stack.parameters == {"Env": "prod"}
        assert stack.outputs == {"Url": "https://example.com"}
        assert stack.tags == {"Team": "core"}


class TestStackDAO:
    """StackDAO 테스트"""

    def test_list(self, make_ctx):
        cfn = MagicMock()
        cfn.get_paginator.return_value.paginate.return_value = [{"Stacks": [STACK]}, {"Stacks": []}]
        ctx = make_ctx(cloudformation=cfn)

        stacks = StackDAO(ctx).list(ctx)

        assert [s.name for s in stacks] == ["web"]
        cfn.get_paginator.assert_called_once_with("describe_stacks")

    def test_get_missing(self, make_ctx):
        cfn = MagicMock()
        cfn.describe_stacks.side_effect = _missing_stack_error()
        ctx = make_ctx(cloudformation=cfn)

        with pytest.raises(NotFoundError):
            StackDAO(ctx).get(ctx, "web")

    def test_get_other_error(self, make_ctx):
        cfn = MagicMock()
        cfn.describe_stacks.side_effect = create_mock_client_error("Throttling")
        ctx = make_ctx(cloudformation=cfn)

        with pytest.raises(APICallError):
            StackDAO(ctx).get(ctx, "web")

    def test_delete_missing_is_success(self, make_ctx):
        cfn = MagicMock()
        cfn.delete_stack.side_effect = _missing_stack_error()
        ctx = make_ctx(cloudformation=cfn)
        StackDAO(ctx).delete(ctx, "web")

    def test_moto_list_and_get(self, moto_ctx):
        moto_ctx.client("cloudformation").create_stack(StackName="web", TemplateBody=TEMPLATE)
        dao = StackDAO(moto_ctx)

        stacks = dao.list(moto_ctx)
        assert [s.name for s in stacks] == ["web"]
        assert dao.get(moto_ctx, "web").id == stacks[0].id


class TestStackActions:
    """스택 액션 테스트"""

    def test_definitions(self):
        delete = find_action(ACTIONS, "D")
        assert delete.token_for(StackResource.from_api(STACK)) == "web"
        assert is_allowed_in_read_only(find_action(ACTIONS, "d"))
        assert not is_allowed_in_read_only(delete)

    def test_cancel_update_filter(self):
        cancel = find_action(ACTIONS, "C")
        assert cancel.applies_to(StackResource.from_api(STACK))
        assert not cancel.applies_to(StackResource.from_api(dict(STACK, StackStatus="CREATE_COMPLETE")))

    def test_delete_uses_stack_name(self, make_ctx):
        cfn = MagicMock()
        ctx = make_ctx(cloudformation=cfn)

        result = execute_stack_action(ctx, find_action(ACTIONS, "D"), StackResource.from_api(STACK))

        assert result.message == "Delete initiated for stack web"
        cfn.delete_stack.assert_called_once_with(StackName="web")

    def test_delete_already_gone(self, make_ctx):
        """없는 스택 삭제(ValidationError "does not exist")는 성공"""
        cfn = MagicMock()
        cfn.delete_stack.side_effect = _missing_stack_error()
        ctx = make_ctx(cloudformation=cfn)

        result = execute_stack_action(ctx, find_action(ACTIONS, "D"), StackResource.from_api(STACK))

        assert result.success, result.message

    def test_detect_drift(self, make_ctx):
        cfn = MagicMock()
        cfn.detect_stack_drift.return_value = {"StackDriftDetectionId": "det-1"}
        ctx = make_ctx(cloudformation=cfn)

        result = execute_stack_action(ctx, find_action(ACTIONS, "d"), StackResource.from_api(STACK))
        assert result.message == "Drift detection started for web (ID: det-1)"

    def test_cancel_update(self, make_ctx):
        cfn = MagicMock()
        ctx = make_ctx(cloudformation=cfn)

        result = execute_stack_action(ctx, find_action(ACTIONS, "C"), StackResource.from_api(STACK))
        assert result.message == "Update cancelled for stack web"

    def test_error(self, make_ctx):
        cfn = MagicMock()
        cfn.cancel_update_stack.side_effect = create_mock_client_error("ValidationError", "not updating")
        ctx = make_ctx(cloudformation=cfn)

        result = execute_stack_action(ctx, find_action(ACTIONS, "C"), StackResource.from_api(STACK))

        assert not result.success
        assert result.message.startswith("cancel update stack web: ")


class TestStackRenderer:
    """StackRenderer 테스트"""

    def test_render_row(self):
        row = StackRenderer().render_row(StackResource.from_api(STACK))
        assert row[:3] == ["web", "UPDATE_IN_PROGRESS", "DRIFTED"]

    def test_render_detail(self):
        detail = StackRenderer().render_detail(StackResource.from_api(STACK))

        assert "CloudFormation Stack: web" in detail
        assert "Parameters" in detail
        assert "https://example.com" in detail
        assert "[red]DRIFTED[/red]" in detail

    def test_summary(self):
        labels = [f.label for f in StackRenderer().render_summary(StackResource.from_api(STACK))]
        assert labels == ["Name", "Status", "Drift", "Description", "Protection"]

    def test_navigation_to_resources(self):
        navs = StackRenderer().navigations(StackResource.from_api(STACK))
        assert [(n.key, n.service, n.resource, n.filter_field, n.filter_value) for n in navs] == [
            ("r", "cloudformation", "resources", "StackName", "web"),
        ]

    def test_drift_style(self):
        assert drift_style("IN_SYNC") == "green"
        assert drift_style("UNKNOWN") == ""
