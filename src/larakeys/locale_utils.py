"""Locale utilities for locale directory names.

Laravel locale directories are named freely (``en``, ``pt_BR``, ``pt-BR``,
``zh_Hans``). These helpers normalise them for Babel and derive the
cosmetic labels hosts show next to translations.

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "normalize_locale",
    "territory_flag",
]


def normalize_locale(locale_code: str) -> str:
    """Convert a BCP-47 style locale code to POSIX format for Babel.

    Example:
        >>> normalize_locale("pt-BR")
        'pt_BR'
        >>> normalize_locale("en")
        'en'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale | None:
    """Get a Babel Locale object with caching.

    Args:
        locale_code: Locale directory name (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale, or None when Babel does not recognise the code

    Example:
        >>> get_babel_locale("pt-BR").territory
        'BR'
        >>> get_babel_locale("not a locale") is None
        True
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale, UnknownLocaleError  # noqa: PLC0415

    try:
        return Locale.parse(normalize_locale(locale_code))
    except (UnknownLocaleError, ValueError, TypeError):
        return None


def territory_flag(territory: str) -> str:
    """Build the flag emoji for a two-letter territory code.

    Example:
        >>> territory_flag("ES") == "\\U0001F1EA\\U0001F1F8"
        True
    """
    if len(territory) != 2 or not territory.isascii() or not territory.isalpha():
        return ""
    return "".join(chr(0x1F1E6 + ord(char) - ord("A")) for char in territory.upper())
