"""Lookup configuration for TranslationStore.

Provides a single frozen dataclass that encapsulates the directory layout
and limits used when resolving translation keys. Hosts construct one
instance at startup and hand it to the store.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from larakeys.constants import (
    DEFAULT_LANG_PATHS,
    DEFAULT_LOCALE,
    FALLBACK_LANG_PATH,
    IGNORED_LOCALE_DIRS,
    LOCALE_PLACEHOLDER,
    MAX_SOURCE_SIZE,
)
from larakeys.diagnostics import ConfigError

__all__ = ["LookupConfig"]


@dataclass(frozen=True, slots=True)
class LookupConfig:
    """Immutable configuration for translation lookups.

    All fields have sensible defaults for a stock Laravel application;
    constructing ``LookupConfig()`` with no arguments produces a usable
    configuration.

    Attributes:
        lang_paths: Language directory templates relative to the workspace
            root, in probe order. Each must contain ``{locale}``.
        fallback_lang_path: Template used when no probed directory exists.
        default_locale: Locale used for single-locale lookups and for
            discovering the language root (default: "en").
        ignored_locale_dirs: Directory names under the language root that
            are never reported as locales (default: {"vendor"}).
        max_source_size: Translation files longer than this many characters
            parse to an empty mapping (default: 10 MB).

    Example:
        >>> config = LookupConfig(lang_paths=("translations/{locale}",))
        >>> config.lang_paths
        ('translations/{locale}',)
    """

    lang_paths: tuple[str, ...] = DEFAULT_LANG_PATHS
    fallback_lang_path: str = FALLBACK_LANG_PATH
    default_locale: str = DEFAULT_LOCALE
    ignored_locale_dirs: frozenset[str] = IGNORED_LOCALE_DIRS
    max_source_size: int = MAX_SOURCE_SIZE

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ConfigError: If a template lacks the ``{locale}`` placeholder,
                no templates are given, the default locale is empty, or
                max_source_size is not positive.
        """
        if not self.lang_paths:
            msg = "lang_paths must contain at least one template"
            raise ConfigError(msg)
        # Without the placeholder every locale would map to the same directory.
        for template in (*self.lang_paths, self.fallback_lang_path):
            if LOCALE_PLACEHOLDER not in template:
                msg = (
                    f"Language path must contain '{LOCALE_PLACEHOLDER}' placeholder, "
                    f"got: '{template}'"
                )
                raise ConfigError(msg)
        if not self.default_locale:
            msg = "default_locale cannot be empty"
            raise ConfigError(msg)
        if self.max_source_size <= 0:
            msg = "max_source_size must be positive"
            raise ConfigError(msg)

    @property
    def lang_roots(self) -> tuple[str, ...]:
        """Static directory prefixes of every template, in probe order.

        Example:
            >>> LookupConfig(lang_paths=("resources/lang/{locale}",)).lang_roots
            ('resources/lang', 'lang')
        """
        roots: dict[str, None] = {}
        for template in (*self.lang_paths, self.fallback_lang_path):
            prefix = template.split(LOCALE_PLACEHOLDER)[0].rstrip("/\\")
            roots.setdefault(prefix, None)
        return tuple(roots)
