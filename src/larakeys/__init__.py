"""larakeys - Laravel translation key resolution from PHP language files.

Parses ``<?php return [...];`` translation files with a pattern-based array
literal parser, resolves dotted keys such as ``auth.failed`` across locale
directories, and caches parsed files until they change.

Public API:
    TranslationStore - Key resolution with per-(locale, file) caching
    LookupConfig - Language directory layout and limits
    ResolvedTranslation - Resolved value with file path and position
    parse_php_array - Parse translation file source to a nested mapping
    extract_translation_key - Pull the key out of __('...') style calls
    format_hover - Render per-locale values as hover Markdown

Submodules:
    larakeys.syntax - Parser, declaration lookup, call-site extraction
    larakeys.runtime - Resolver, cache and store
    larakeys.localization - Key paths and language directory probing
    larakeys.watcher - watchfiles-based cache invalidation
    larakeys.cli - Typer command line host
"""

from .config import LookupConfig
from .diagnostics import (
    ConfigError,
    InvalidKeyPathError,
    TranslationLookupError,
    UnsafeLocaleError,
)
from .localization import TranslationKeyPath
from .preview import format_hover
from .runtime import ResolvedTranslation, TranslationStore
from .syntax import SourcePosition, extract_translation_key, parse_php_array

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("larakeys")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ConfigError",
    "InvalidKeyPathError",
    "LookupConfig",
    "ResolvedTranslation",
    "SourcePosition",
    "TranslationKeyPath",
    "TranslationLookupError",
    "TranslationStore",
    "UnsafeLocaleError",
    "__version__",
    "extract_translation_key",
    "format_hover",
    "parse_php_array",
]
