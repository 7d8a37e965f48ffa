"""larakeys exception hierarchy.

Lookup errors are internal: the translation store catches them at its
boundary and reports a miss instead. Only configuration errors reach
callers, at construction time.

Python 3.13+. Zero external dependencies.
"""


class TranslationLookupError(Exception):
    """Base exception for failures while resolving a translation key."""


class InvalidKeyPathError(TranslationLookupError, ValueError):
    """Translation key text cannot be split into a file and a path."""

    def __init__(self, message: str, *, key: str = "") -> None:
        """Initialize InvalidKeyPathError.

        Args:
            message: Error message
            key: The offending key text
        """
        super().__init__(message)
        self.key = key


class UnsafeLocaleError(TranslationLookupError, ValueError):
    """Locale code would escape the language root directory."""

    def __init__(self, message: str, *, locale: str = "") -> None:
        super().__init__(message)
        self.locale = locale


class ConfigError(ValueError):
    """Invalid LookupConfig value."""
