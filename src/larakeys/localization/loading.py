"""Language directory probing and locale discovery.

Laravel applications keep translations under one of several conventional
roots (``lang/`` since Laravel 9, ``resources/lang/`` before that). The
locator probes configured path templates in order and lists the locale
directories found under the winning root.

Components:
    LangDirectoryLocator - Template-based directory probing with locale validation

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from larakeys.config import LookupConfig
from larakeys.constants import LOCALE_PLACEHOLDER, TRANSLATION_FILE_SUFFIX
from larakeys.diagnostics import UnsafeLocaleError
from larakeys.localization.types import LocaleCode

__all__ = ["LangDirectoryLocator"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LangDirectoryLocator:
    """Locate per-locale translation directories under a workspace root.

    Directory existence is checked on every call; nothing is cached, so
    creating or removing a language root takes effect immediately.

    Security:
        Locale codes containing path separators or ".." are rejected so a
        locale can never address a directory outside the language root.

    Example:
        >>> locator = LangDirectoryLocator("/srv/app")
        >>> locator.lang_directory("es")  # doctest: +SKIP
        PosixPath('/srv/app/resources/lang/es')

    Attributes:
        workspace_root: Absolute workspace directory
        config: Directory layout configuration
    """

    workspace_root: Path
    config: LookupConfig = field(default_factory=LookupConfig)

    def __post_init__(self) -> None:
        object.__setattr__(self, "workspace_root", Path(self.workspace_root))

    @staticmethod
    def validate_locale(locale: LocaleCode) -> None:
        """Validate locale code for path traversal.

        Args:
            locale: Locale code to validate

        Raises:
            UnsafeLocaleError: If locale is empty or contains unsafe path components
        """
        if not locale:
            msg = "Locale code cannot be empty"
            raise UnsafeLocaleError(msg, locale=locale)
        if ".." in locale:
            msg = f"Path traversal sequences not allowed in locale: '{locale}'"
            raise UnsafeLocaleError(msg, locale=locale)
        if "/" in locale or "\\" in locale:
            msg = f"Path separators not allowed in locale: '{locale}'"
            raise UnsafeLocaleError(msg, locale=locale)

    def _expand(self, template: str, locale: LocaleCode) -> Path:
        # replace() rather than format() so stray braces in a template are kept
        return self.workspace_root / template.replace(LOCALE_PLACEHOLDER, locale)

    @staticmethod
    def _is_dir(candidate: Path) -> bool:
        # stat errors other than "missing" (e.g. ENAMETOOLONG) count as absent
        try:
            return candidate.is_dir()
        except OSError as e:
            logger.debug("Cannot probe language directory %s: %s", candidate, e)
            return False

    def lang_directory(self, locale: LocaleCode) -> Path:
        """Return the language directory for a locale.

        The first configured template whose expansion exists on disk wins.
        When none exists, the fallback template is returned unconditionally.
        A probe that cannot be stat'ed counts as a missing directory.

        Args:
            locale: Locale code

        Returns:
            Absolute directory path (may not exist)

        Raises:
            UnsafeLocaleError: If locale contains unsafe path components
        """
        self.validate_locale(locale)
        for template in self.config.lang_paths:
            candidate = self._expand(template, locale)
            if self._is_dir(candidate):
                return candidate
        return self._expand(self.config.fallback_lang_path, locale)

    def translation_file(self, locale: LocaleCode, file: str) -> Path:
        """Return ``<lang dir>/<file>.php`` for a locale."""
        return self.lang_directory(locale) / f"{file}{TRANSLATION_FILE_SUFFIX}"

    def available_locales(self) -> tuple[LocaleCode, ...]:
        """List locale directories under the default locale's language root.

        Hidden directories and configured ignored names (``vendor``) are
        skipped. Recomputed on every call.

        Returns:
            Sorted locale codes; ``(default_locale,)`` if the root cannot be listed
        """
        root = self.lang_directory(self.config.default_locale).parent
        try:
            with os.scandir(root) as entries:
                locales = [
                    entry.name
                    for entry in entries
                    if entry.is_dir()
                    and not entry.name.startswith(".")
                    and entry.name not in self.config.ignored_locale_dirs
                ]
        except OSError as e:
            logger.debug("Cannot list language root %s: %s", root, e)
            return (self.config.default_locale,)
        return tuple(sorted(locales))
