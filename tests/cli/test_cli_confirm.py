"""
tests/cli/test_cli_confirm.py - 액션 확인 프롬프트 테스트
"""

from unittest.mock import patch

from cli.ui.confirm import confirm_action
from core.action import Action, ActionType, ConfirmLevel
from core.dao import BaseResource

RESOURCE = BaseResource(id="i-1234567890abcdef0")


def _action(level):
    return Action(name="Terminate", shortcut="D", type=ActionType.API, operation="TerminateInstances", confirm=level)


class TestConfirmAction:
    """confirm_action 테스트"""

    def test_none_level(self):
        with patch("cli.ui.confirm.questionary") as mock_q:
            assert confirm_action(_action(ConfirmLevel.NONE), RESOURCE)
        mock_q.confirm.assert_not_called()

    def test_simple_assume_yes(self):
        with patch("cli.ui.confirm.questionary") as mock_q:
            assert confirm_action(_action(ConfirmLevel.SIMPLE), RESOURCE, assume_yes=True)
        mock_q.confirm.assert_not_called()

    def test_simple_prompt(self):
        with patch("cli.ui.confirm.questionary") as mock_q:
            mock_q.confirm.return_value.ask.return_value = False
            assert not confirm_action(_action(ConfirmLevel.SIMPLE), RESOURCE)

            mock_q.confirm.return_value.ask.return_value = True
            assert confirm_action(_action(ConfirmLevel.SIMPLE), RESOURCE)

    def test_simple_prompt_aborted(self):
        """Ctrl+C 시 questionary는 None 반환"""
        with patch("cli.ui.confirm.questionary") as mock_q:
            mock_q.confirm.return_value.ask.return_value = None
            assert not confirm_action(_action(ConfirmLevel.SIMPLE), RESOURCE)

    def test_dangerous_typed_token(self):
        with patch("cli.ui.confirm.questionary") as mock_q:
            assert confirm_action(_action(ConfirmLevel.DANGEROUS), RESOURCE, typed_token=" bcdef0 ")
            assert not confirm_action(_action(ConfirmLevel.DANGEROUS), RESOURCE, typed_token="BCDEF0")
        mock_q.text.assert_not_called()

    def test_dangerous_ignores_assume_yes(self):
        with patch("cli.ui.confirm.questionary") as mock_q:
            mock_q.text.return_value.ask.return_value = ""
            assert not confirm_action(_action(ConfirmLevel.DANGEROUS), RESOURCE, assume_yes=True)
        mock_q.text.assert_called_once()

    def test_dangerous_prompt_shows_suffix(self):
        with patch("cli.ui.confirm.questionary") as mock_q:
            mock_q.text.return_value.ask.return_value = "bcdef0"
            assert confirm_action(_action(ConfirmLevel.DANGEROUS), RESOURCE)

        prompt = mock_q.text.call_args.args[0]
        assert "bcdef0" in prompt

    def test_dangerous_custom_token(self):
        action = Action(
            name="Delete",
            shortcut="D",
            type=ActionType.API,
            operation="DeleteStack",
            confirm=ConfirmLevel.DANGEROUS,
            confirm_token=lambda r: r.name,
        )
        stack = BaseResource(id="arn:aws:cloudformation:ap-northeast-2:1:stack/web/abc", name="web")

        with patch("cli.ui.confirm.questionary"):
            assert confirm_action(action, stack, typed_token="web")
