"""Localization package: key paths, type aliases and directory probing.

Submodules:
    types   - PEP 695 type aliases (LocaleCode, TranslationKey, TranslationNode, ...)
    keys    - TranslationKeyPath
    loading - LangDirectoryLocator

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from larakeys.localization.keys import TranslationKeyPath
from larakeys.localization.loading import LangDirectoryLocator
from larakeys.localization.types import (
    LocaleCode,
    PhpSource,
    TranslationKey,
    TranslationMapping,
    TranslationNode,
)

__all__ = [
    # Key paths
    "TranslationKeyPath",
    # Directory probing
    "LangDirectoryLocator",
    # Type aliases for host code type annotations
    "LocaleCode",
    "PhpSource",
    "TranslationKey",
    "TranslationMapping",
    "TranslationNode",
]
