"""Error types for larakeys.

Python 3.13+. Zero external dependencies.
"""

from .errors import (
    ConfigError,
    InvalidKeyPathError,
    TranslationLookupError,
    UnsafeLocaleError,
)

__all__ = [
    "ConfigError",
    "InvalidKeyPathError",
    "TranslationLookupError",
    "UnsafeLocaleError",
]
