"""Translation runtime package.

Provides key resolution, the parsed-file cache and the TranslationStore
API. Depends on the syntax package for parsing.

Python 3.13+.
"""

from .cache import TranslationCache
from .resolver import resolve_key
from .store import TranslationStore
from .value_types import CacheEntry, ResolvedTranslation

__all__ = [
    "CacheEntry",
    "ResolvedTranslation",
    "TranslationCache",
    "TranslationStore",
    "resolve_key",
]
