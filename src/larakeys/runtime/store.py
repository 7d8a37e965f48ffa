"""Translation store: end-to-end key resolution with caching.

Orchestrates a lookup:
    key text -> TranslationKeyPath -> language directory probe ->
    ``<lang dir>/<file>.php`` -> cached or freshly parsed tree ->
    leaf value -> declaration position.

Every public operation reports a miss as None (or an empty result) and
never raises: missing directories and files, unreadable files, unsafe
locales, malformed keys and unparseable sources all collapse into a miss.
Only LookupConfig validation raises, at construction time.

Hosts construct one store per workspace and share it between every
component that resolves keys, so they all benefit from the same cache.

Python 3.13+.
"""

from __future__ import annotations

import logging
from pathlib import Path

from larakeys.config import LookupConfig
from larakeys.diagnostics import TranslationLookupError
from larakeys.localization.keys import TranslationKeyPath
from larakeys.localization.loading import LangDirectoryLocator
from larakeys.localization.types import LocaleCode, TranslationKey
from larakeys.runtime.cache import TranslationCache
from larakeys.runtime.resolver import resolve_key
from larakeys.runtime.value_types import CacheEntry, ResolvedTranslation
from larakeys.syntax.locator import find_key_position
from larakeys.syntax.parser import PhpArrayParser
from larakeys.syntax.position import SourcePosition

__all__ = ["TranslationStore"]

logger = logging.getLogger(__name__)


class TranslationStore:
    """Resolve Laravel translation keys against a workspace's language files.

    Example:
        >>> store = TranslationStore("/srv/app")
        >>> result = store.resolve("auth.failed")  # doctest: +SKIP
        >>> result.value  # doctest: +SKIP
        'These credentials do not match our records.'
        >>> store.resolve_all_locales("auth.failed")  # doctest: +SKIP
        {'en': 'These credentials do not match our records.', 'es': '...'}

    Attributes:
        workspace_root: Directory all language paths are relative to
        config: Directory layout and limits
    """

    __slots__ = ("_cache", "_config", "_locator", "_parser", "_workspace_root")

    def __init__(
        self,
        workspace_root: str | Path,
        config: LookupConfig | None = None,
        *,
        cache: TranslationCache | None = None,
    ) -> None:
        """Initialize the store.

        Args:
            workspace_root: Absolute workspace directory
            config: Lookup configuration (default: ``LookupConfig()``)
            cache: Cache instance to use; a fresh one is created if omitted
        """
        self._workspace_root = Path(workspace_root).absolute()
        self._config = config if config is not None else LookupConfig()
        self._cache = cache if cache is not None else TranslationCache()
        self._locator = LangDirectoryLocator(self._workspace_root, self._config)
        self._parser = PhpArrayParser(max_source_size=self._config.max_source_size)

    @property
    def workspace_root(self) -> Path:
        """Directory all language paths are relative to."""
        return self._workspace_root

    @property
    def config(self) -> LookupConfig:
        """Lookup configuration."""
        return self._config

    @property
    def locator(self) -> LangDirectoryLocator:
        """Language directory locator bound to this workspace."""
        return self._locator

    def resolve(self, key: TranslationKey) -> ResolvedTranslation | None:
        """Resolve a key in the default locale."""
        return self.resolve_in_locale(key, self._config.default_locale)

    def resolve_in_locale(
        self, key: TranslationKey, locale: LocaleCode
    ) -> ResolvedTranslation | None:
        """Resolve a key in one locale.

        Args:
            key: Dotted translation key (e.g., 'auth.failed')
            locale: Locale directory name (e.g., 'en')

        Returns:
            Resolved translation, or None if the file, key or leaf is missing
        """
        try:
            key_path = TranslationKeyPath.parse(key)
            file_path = self._locator.translation_file(locale, key_path.file)
        except TranslationLookupError as e:
            logger.debug("Rejected lookup of '%s' in %s: %s", key, locale, e)
            return None

        try:
            found = file_path.is_file()
        except OSError as e:
            logger.debug("Cannot stat translation file %s: %s", file_path, e)
            return None
        if not found:
            logger.debug("Translation file not found: %s", file_path)
            return None

        entry = self._load(locale, file_path)
        if entry is None:
            return None

        value = resolve_key(entry.root, key_path.path)
        if value is None:
            logger.debug("Key '%s' not found in %s", key_path.path, file_path)
            return None

        position = find_key_position(entry.source, key_path.path)
        return ResolvedTranslation(
            key=key,
            locale=locale,
            value=value,
            file_path=file_path,
            position=position if position is not None else SourcePosition(),
        )

    def resolve_all_locales(self, key: TranslationKey) -> dict[LocaleCode, str]:
        """Resolve a key in every available locale.

        Locales whose file or key is missing are omitted.

        Args:
            key: Dotted translation key

        Returns:
            Mapping of locale to resolved value
        """
        return {
            result.locale: result.value
            for result in self.resolve_each_locale(key)
        }

    def resolve_each_locale(self, key: TranslationKey) -> list[ResolvedTranslation]:
        """Resolve a key in every available locale, keeping full results."""
        results = []
        for locale in self.available_locales():
            result = self.resolve_in_locale(key, locale)
            if result is not None:
                results.append(result)
        return results

    def available_locales(self) -> tuple[LocaleCode, ...]:
        """List locale directories under the language root (not cached)."""
        try:
            return self._locator.available_locales()
        except TranslationLookupError as e:
            logger.debug("Cannot discover locales: %s", e)
            return (self._config.default_locale,)

    def invalidate(self, file_path: str | Path | None = None) -> None:
        """Drop cached translation files.

        Args:
            file_path: Drop only entries for this file; drop everything when None
        """
        if file_path is None:
            self._cache.clear()
            logger.info("Translation cache cleared")
            return
        removed = self._cache.discard(Path(file_path))
        logger.info("Dropped %d cached entr(ies) for %s", removed, file_path)

    def get_cache_stats(self) -> dict[str, int | float]:
        """Get cache statistics (see TranslationCache.get_stats)."""
        return self._cache.get_stats()

    def _load(self, locale: LocaleCode, file_path: Path) -> CacheEntry | None:
        entry = self._cache.get(locale, file_path)
        if entry is not None:
            return entry

        generation = self._cache.generation
        try:
            source = file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.debug("Cannot read translation file %s: %s", file_path, e)
            return None

        entry = CacheEntry(root=self._parser.parse(source), source=source)
        self._cache.put(locale, file_path, entry, generation)
        logger.debug("Parsed %s for locale %s", file_path, locale)
        return entry
