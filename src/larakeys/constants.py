"""Shared constants for larakeys.

This module provides centralized configuration constants used across the
syntax, localization and runtime packages. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Depth limits: Recursion protection for the array literal parser
- Input limits: Size constraints on translation files
- Directory layout: Laravel language directory conventions

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_DEPTH",
    # Input limits
    "MAX_SOURCE_SIZE",
    # Directory layout
    "DEFAULT_LOCALE",
    "DEFAULT_LANG_PATHS",
    "FALLBACK_LANG_PATH",
    "IGNORED_LOCALE_DIRS",
    "LOCALE_PLACEHOLDER",
    "TRANSLATION_FILE_SUFFIX",
    # Quoting
    "QUOTE_CHARS",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Maximum nesting depth followed by the array literal parser.
# Laravel translation files rarely nest beyond three levels; anything deeper
# than this is treated as malformed and parses to an empty mapping.
MAX_DEPTH: int = 100

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum translation file size in characters (10 MB).
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024

# ============================================================================
# DIRECTORY LAYOUT
# ============================================================================

LOCALE_PLACEHOLDER: str = "{locale}"

DEFAULT_LOCALE: str = "en"

# Probe order for language directories, relative to the workspace root:
# modern Laravel default, legacy default, then alternative spellings.
DEFAULT_LANG_PATHS: tuple[str, ...] = (
    "lang/{locale}",
    "resources/lang/{locale}",
    "resources/languages/{locale}",
    "app/lang/{locale}",
)

# Used when no probed directory exists on disk.
FALLBACK_LANG_PATH: str = "lang/{locale}"

# lang/vendor holds package translation overrides, not a locale.
IGNORED_LOCALE_DIRS: frozenset[str] = frozenset({"vendor"})

TRANSLATION_FILE_SUFFIX: str = ".php"

# ============================================================================
# QUOTING
# ============================================================================

# PHP string delimiters recognised around keys and values.
QUOTE_CHARS: tuple[str, ...] = ("'", '"', "`")
