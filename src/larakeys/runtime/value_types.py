"""Value types produced by the translation store.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from larakeys.localization.types import LocaleCode, PhpSource, TranslationKey, TranslationMapping
from larakeys.syntax.position import SourcePosition

__all__ = ["CacheEntry", "ResolvedTranslation"]


@dataclass(frozen=True, slots=True)
class CacheEntry:
    """Parsed translation file together with the text it came from.

    The source is retained so declaration lookup runs against exactly the
    text that produced the mapping.

    Attributes:
        root: Parsed root mapping
        source: Raw PHP source text
    """

    root: TranslationMapping
    source: PhpSource


@dataclass(frozen=True, slots=True)
class ResolvedTranslation:
    """A translation key resolved to its value and declaration site.

    Attributes:
        key: Dotted key that was resolved
        locale: Locale directory the value came from
        value: Resolved string
        file_path: Absolute path of the translation file
        position: Best-effort declaration position; (0, 0) when unknown

    Example:
        >>> result = store.resolve("auth.failed")  # doctest: +SKIP
        >>> result.value, result.line  # doctest: +SKIP
        ('Invalid credentials.', 0)
    """

    key: TranslationKey
    locale: LocaleCode
    value: str
    file_path: Path
    position: SourcePosition = field(default_factory=SourcePosition)

    @property
    def line(self) -> int:
        """0-based declaration line."""
        return self.position.line

    @property
    def column(self) -> int:
        """0-based declaration column."""
        return self.position.column
