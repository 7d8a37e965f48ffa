"""Tests for locale labels and hover rendering."""

from __future__ import annotations

import pytest

from larakeys.locale_utils import get_babel_locale, normalize_locale, territory_flag
from larakeys.preview import GLOBE, format_hover, locale_label


class TestLocaleUtils:
    """Test locale normalisation and flag helpers."""

    @pytest.mark.parametrize(
        ("code", "expected"),
        [("pt-BR", "pt_BR"), ("pt_BR", "pt_BR"), ("en", "en")],
    )
    def test_normalize_locale(self, code: str, expected: str) -> None:
        """Hyphens become underscores."""
        assert normalize_locale(code) == expected

    def test_babel_locale(self) -> None:
        """Known codes parse in either separator style."""
        locale = get_babel_locale("pt-BR")

        assert locale is not None
        assert locale.language == "pt"
        assert locale.territory == "BR"

    @pytest.mark.parametrize("code", ["xx", "vendor", "not a locale", ""])
    def test_unknown_babel_locale(self, code: str) -> None:
        """Unknown codes return None instead of raising."""
        assert get_babel_locale(code) is None

    def test_territory_flag(self) -> None:
        """Two ASCII letters become regional indicator symbols."""
        assert territory_flag("ES") == "\U0001f1ea\U0001f1f8"
        assert territory_flag("br") == "\U0001f1e7\U0001f1f7"

    @pytest.mark.parametrize("territory", ["", "E", "ESP", "1A", "ÉS"])
    def test_territory_flag_invalid(self, territory: str) -> None:
        """Anything but two ASCII letters has no flag."""
        assert territory_flag(territory) == ""


class TestLocaleLabel:
    """Test locale_label()."""

    def test_language_only(self) -> None:
        """Language-only codes borrow a flag from the language table."""
        label = locale_label("es")

        assert label.display_name == "Spanish"
        assert label.flag == territory_flag("ES")
        assert label.code == "es"

    @pytest.mark.parametrize("code", ["pt_BR", "pt-BR"])
    def test_language_and_territory(self, code: str) -> None:
        """Territory codes drive the flag and display name."""
        label = locale_label(code)

        assert label.display_name == "Portuguese (Brazil)"
        assert label.flag == territory_flag("BR")

    def test_unknown(self) -> None:
        """Unknown codes fall back to the upper-cased code and a globe."""
        label = locale_label("xx")

        assert label.display_name == "XX"
        assert label.flag == GLOBE

    def test_language_without_flag(self) -> None:
        """Known languages without a territory mapping get a globe."""
        label = locale_label("sw")

        assert label.display_name == "Swahili"
        assert label.flag == GLOBE


class TestFormatHover:
    """Test format_hover() Markdown output."""

    def test_not_found(self) -> None:
        """An empty mapping renders the not-found line."""
        assert format_hover("auth.failed", {}) == "**Translation not found:** `auth.failed`"

    def test_translations(self) -> None:
        """Each locale is rendered with flag and upper-cased code."""
        rendered = format_hover(
            "auth.failed",
            {"en": "Invalid credentials.", "xx": "Ungültig."},
        )

        assert rendered.splitlines() == [
            "**Translation Key:** `auth.failed`",
            "",
            f"{territory_flag('US')} **EN:** Invalid credentials.",
            "",
            f"{GLOBE} **XX:** Ungültig.",
        ]
