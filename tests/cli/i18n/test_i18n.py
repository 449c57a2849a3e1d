# tests/cli/i18n/test_i18n.py
"""
cli/i18n 다국어 메시지 테스트
"""

import string

import pytest

from cli.i18n import DEFAULT_LANG, get_lang, set_lang, t
from cli.i18n.messages import MESSAGES, register_messages
from core.exceptions import ErrorKind


@pytest.fixture(autouse=True)
def reset_lang():
    set_lang(DEFAULT_LANG)
    yield
    set_lang(DEFAULT_LANG)


class TestLanguage:
    """언어 설정 테스트"""

    def test_default(self):
        assert get_lang() == "ko"

    def test_set_english(self):
        set_lang("en")
        assert get_lang() == "en"

    def test_unsupported_falls_back(self):
        set_lang("ja")
        assert get_lang() == "ko"


class TestTranslate:
    """t() 테스트"""

    def test_current_language(self):
        assert t("common.cancelled") == "취소되었습니다"
        set_lang("en")
        assert t("common.cancelled") == "Cancelled"

    def test_override(self):
        assert t("common.yes", lang="en") == "Yes"

    def test_unsupported_override_uses_default(self):
        assert t("common.cancelled", lang="ja") == "취소되었습니다"

    def test_interpolation(self):
        assert t("cli.list_count", lang="en", count=3) == "3 resources"

    def test_missing_key(self):
        assert t("cli.does_not_exist") == "cli.does_not_exist"

    def test_missing_argument_keeps_template(self):
        assert t("cli.list_count", lang="en", other=1) == "{count} resources"

    def test_english_fallback(self):
        register_messages("test", {"only_ko": {"ko": "한국어만"}})
        try:
            assert t("test.only_ko", lang="en") == "한국어만"
        finally:
            MESSAGES.pop("test.only_ko", None)


class TestCatalog:
    """메시지 카탈로그 일관성 테스트"""

    @pytest.mark.parametrize("key", sorted(MESSAGES))
    def test_both_languages_share_placeholders(self, key):
        messages = MESSAGES[key]

        def fields(text):
            return {name for _, name, _, _ in string.Formatter().parse(text) if name}

        assert set(messages) == {"ko", "en"}
        assert fields(messages["ko"]) == fields(messages["en"])

    @pytest.mark.parametrize("kind", [k for k in ErrorKind if k != ErrorKind.OTHER])
    def test_error_kind_hints(self, kind):
        assert f"common.error_{kind.value}" in MESSAGES
