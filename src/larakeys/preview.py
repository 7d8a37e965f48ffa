"""Hover preview rendering for resolved translations.

Turns the per-locale mapping from TranslationStore.resolve_all_locales()
into the Markdown hosts show on hover. Labels and flags are cosmetic and
never affect resolution.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from larakeys.locale_utils import get_babel_locale, territory_flag
from larakeys.localization.types import LocaleCode, TranslationKey

__all__ = ["LocaleLabel", "format_hover", "locale_label"]

GLOBE = "\U0001f310"

# Flags for language-only directory names, where Babel has no territory.
_LANGUAGE_TERRITORIES: dict[str, str] = {
    "en": "US",
    "es": "ES",
    "fr": "FR",
    "de": "DE",
    "it": "IT",
    "pt": "PT",
    "nl": "NL",
    "ru": "RU",
    "ja": "JP",
    "ko": "KR",
    "zh": "CN",
}


@dataclass(frozen=True, slots=True)
class LocaleLabel:
    """Display label for a locale directory.

    Attributes:
        code: Locale directory name as found on disk
        display_name: Human-readable name (English), or the code upper-cased
        flag: Flag emoji, or a globe when no territory is known
    """

    code: LocaleCode
    display_name: str
    flag: str


def locale_label(code: LocaleCode, *, display_locale: str = "en") -> LocaleLabel:
    """Build a display label for a locale directory name.

    Args:
        code: Locale directory name (e.g., 'es', 'pt_BR')
        display_locale: Locale the display name is written in

    Returns:
        LocaleLabel for the code

    Example:
        >>> locale_label("pt_BR").display_name
        'Portuguese (Brazil)'
        >>> locale_label("xx").flag == GLOBE
        True
    """
    locale = get_babel_locale(code)
    if locale is None:
        return LocaleLabel(code=code, display_name=code.upper(), flag=GLOBE)

    territory = locale.territory or _LANGUAGE_TERRITORIES.get(locale.language, "")
    display_name = locale.get_display_name(display_locale) or code.upper()
    return LocaleLabel(
        code=code,
        display_name=display_name,
        flag=territory_flag(territory) or GLOBE,
    )


def format_hover(key: TranslationKey, translations: Mapping[LocaleCode, str]) -> str:
    """Render per-locale translations as hover Markdown.

    Args:
        key: Dotted translation key
        translations: Locale to value mapping, in display order

    Returns:
        Markdown text; a single "not found" line when translations is empty

    Example:
        >>> print(format_hover("auth.failed", {}))
        **Translation not found:** `auth.failed`
    """
    if not translations:
        return f"**Translation not found:** `{key}`"

    lines = [f"**Translation Key:** `{key}`", ""]
    for locale, value in translations.items():
        label = locale_label(locale)
        lines.append(f"{label.flag} **{locale.upper()}:** {value}")
        lines.append("")
    return "\n".join(lines)
