"""Type aliases for the localization domain.

Provides semantic type aliases used throughout larakeys and by host code
when annotating translation store call sites.

Python 3.13+. Zero external dependencies.
"""

from typing import TypeAlias

__all__ = [
    "LocaleCode",
    "PhpSource",
    "TranslationKey",
    "TranslationMapping",
    "TranslationNode",
]

LocaleCode: TypeAlias = str
"""Language directory name (e.g., 'en', 'es', 'pt_BR')."""

TranslationKey: TypeAlias = str
"""Dotted translation key as written in source (e.g., 'auth.failed')."""

PhpSource: TypeAlias = str
"""Raw PHP source text of a translation file."""

TranslationNode: TypeAlias = "str | dict[str, TranslationNode]"
"""Parsed translation tree: a leaf string or a nested mapping."""

TranslationMapping: TypeAlias = dict[str, TranslationNode]
"""Root mapping of one parsed translation file."""
