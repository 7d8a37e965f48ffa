"""Translation key paths.

A key such as ``shopify.exceptions.graphql`` names the translation file
(``shopify.php``) by its first segment; the remaining segments address a
value inside that file's parsed tree.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from larakeys.diagnostics import InvalidKeyPathError
from larakeys.localization.types import TranslationKey

__all__ = ["TranslationKeyPath"]


@dataclass(frozen=True, slots=True)
class TranslationKeyPath:
    """Dotted translation key split into file segment and inner path.

    Attributes:
        file: Translation file name without extension (e.g., 'auth')
        path: Dotted lookup path inside the file (e.g., 'failed'), may be empty

    Example:
        >>> key = TranslationKeyPath.parse("shopify.exceptions.graphql")
        >>> key.file
        'shopify'
        >>> key.path
        'exceptions.graphql'
        >>> key.segments
        ('exceptions', 'graphql')
    """

    file: str
    path: str

    @classmethod
    def parse(cls, key: TranslationKey) -> TranslationKeyPath:
        """Split dotted key text at its first dot.

        Args:
            key: Dotted translation key

        Returns:
            Parsed key path

        Raises:
            InvalidKeyPathError: If key is empty, or its file segment is empty
                or contains a path separator
        """
        if not key or not key.strip():
            msg = "Translation key cannot be empty"
            raise InvalidKeyPathError(msg, key=key)
        file, _, path = key.partition(".")
        if not file:
            msg = f"Translation key has no file segment: '{key}'"
            raise InvalidKeyPathError(msg, key=key)
        if "/" in file or "\\" in file:
            msg = f"Path separators not allowed in translation file segment: '{file}'"
            raise InvalidKeyPathError(msg, key=key)
        return cls(file=file, path=path)

    @property
    def segments(self) -> tuple[str, ...]:
        """Lookup segments inside the file; empty when path is empty."""
        return tuple(self.path.split(".")) if self.path else ()

    def __str__(self) -> str:
        return f"{self.file}.{self.path}" if self.path else self.file
