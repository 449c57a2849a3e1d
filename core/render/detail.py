"""
core/render/detail.py - 상세 화면 빌더

Rich 마크업 문자열을 체이닝 방식으로 조립합니다.

Example:
    d = DetailBuilder()
    d.title("EC2 Instance", resource.name)
    d.section("Network")
    d.field("Private IP", resource.private_ip or NOT_CONFIGURED)
    d.tags(resource.tags)
    console.print(d.build())
"""

from __future__ import annotations

from rich.markup import escape

from core.config import is_demo_mode

from . import styles

NOT_CONFIGURED = "Not configured"
EMPTY = "None"
NO_VALUE = "-"

LABEL_WIDTH = 20

_PLACEHOLDERS = frozenset({NOT_CONFIGURED, EMPTY, NO_VALUE, ""})


class DetailBuilder:
    """상세 화면 문자열 빌더"""

    def __init__(self) -> None:
        self._lines: list[str] = []

    def _label(self, label: str) -> str:
        return styles.stylize(f"{label}:".ljust(LABEL_WIDTH), styles.DIM)

    def title(self, resource_type: str, name: str) -> DetailBuilder:
        self._lines.append(styles.stylize(f"{resource_type}: {name}", styles.TITLE))
        self._lines.append("")
        return self

    def section(self, name: str) -> DetailBuilder:
        self._lines.append("")
        self._lines.append(styles.stylize(name, styles.SECTION))
        return self

    def field(self, label: str, value: str) -> DetailBuilder:
        """라벨/값 한 줄. 자리표시 값(Not configured/None/-)은 흐리게 표시"""
        value = "" if value is None else str(value)
        if value in _PLACEHOLDERS:
            rendered = styles.stylize(value, styles.DIM)
        else:
            rendered = styles.stylize(value, styles.VALUE)
        self._lines.append(self._label(label) + rendered)
        return self

    def field_styled(self, label: str, value: str, style: str) -> DetailBuilder:
        self._lines.append(self._label(label) + styles.stylize(value, style))
        return self

    def field_if(self, label: str, value: str | None) -> DetailBuilder:
        """값이 있을 때만 field 추가"""
        if value:
            self.field(label, value)
        return self

    def line(self, text: str) -> DetailBuilder:
        self._lines.append(escape(text))
        return self

    def dim(self, text: str) -> DetailBuilder:
        self._lines.append(styles.stylize(text, styles.DIM))
        return self

    def dim_indent(self, text: str) -> DetailBuilder:
        self._lines.append("  " + styles.stylize(text, styles.DIM))
        return self

    def tag(self, key: str, value: str) -> DetailBuilder:
        self._lines.append("  " + styles.stylize(f"{key}:", styles.DIM) + " " + escape(value))
        return self

    def tags(self, tags: dict[str, str] | None) -> DetailBuilder:
        """Tags 섹션 (키 정렬). 태그가 없거나 데모 모드면 생략"""
        if not tags or is_demo_mode():
            return self

        self.section("Tags")
        for key in sorted(tags):
            self.tag(key, tags[key])
        return self

    def build(self) -> str:
        return "\n".join(self._lines) + "\n" if self._lines else ""

    def __str__(self) -> str:
        return self.build()
