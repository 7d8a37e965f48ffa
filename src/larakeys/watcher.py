"""File watching that keeps the translation cache fresh.

Watches the workspace with ``watchfiles`` and invalidates the store when a
PHP file under any configured language root is added, modified or deleted.
The store itself never watches the file system.

Invalidation is coarse: any relevant change clears the whole cache.

Python 3.13+.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterable
from pathlib import Path, PurePath

from watchfiles import Change, DefaultFilter, watch

from larakeys.constants import TRANSLATION_FILE_SUFFIX
from larakeys.enums import ChangeKind
from larakeys.runtime.store import TranslationStore

__all__ = ["TranslationFileFilter", "TranslationWatcher"]

logger = logging.getLogger(__name__)

_CHANGE_KINDS: dict[Change, ChangeKind] = {
    Change.added: ChangeKind.ADDED,
    Change.modified: ChangeKind.MODIFIED,
    Change.deleted: ChangeKind.DELETED,
}


def _contains_run(parts: tuple[str, ...], run: tuple[str, ...]) -> bool:
    width = len(run)
    return any(parts[i : i + width] == run for i in range(len(parts) - width + 1))


class TranslationFileFilter(DefaultFilter):
    """watchfiles filter accepting ``**/<lang root>/**/*.php`` only.

    Keeps DefaultFilter's exclusions (``.git``, ``node_modules``, editor
    swap files) and additionally requires a ``.php`` file below one of the
    language roots.
    """

    def __init__(self, workspace_root: Path, lang_roots: Iterable[str]) -> None:
        super().__init__()
        # watchfiles may report resolved paths for a symlinked workspace
        self._workspace_roots = tuple(dict.fromkeys((workspace_root, workspace_root.resolve())))
        self._root_parts = tuple(
            PurePath(root).parts for root in lang_roots if root
        )

    def is_translation_file(self, path: str | Path) -> bool:
        """Check whether a path sits below a language root and ends in .php."""
        candidate = Path(path)
        if candidate.suffix != TRANSLATION_FILE_SUFFIX:
            return False
        for root in self._workspace_roots:
            if candidate.is_relative_to(root):
                candidate = candidate.relative_to(root)
                break
        directories = candidate.parts[:-1]
        return any(_contains_run(directories, run) for run in self._root_parts)

    def __call__(self, change: Change, path: str) -> bool:
        return super().__call__(change, path) and self.is_translation_file(path)


class TranslationWatcher:
    """Invalidate a TranslationStore when translation files change.

    ``on_change`` is called with each relevant change after the store has
    been invalidated, for hosts that report or react to edits.

    Example:
        >>> store = TranslationStore("/srv/app")
        >>> watcher = TranslationWatcher(store)
        >>> watcher.start()  # doctest: +SKIP
        >>> ...
        >>> watcher.stop()  # doctest: +SKIP
    """

    def __init__(
        self,
        store: TranslationStore,
        *,
        debounce: int = 1600,
        force_polling: bool | None = None,
        on_change: Callable[[ChangeKind, str], None] | None = None,
    ) -> None:
        self._store = store
        self._on_change = on_change
        self._debounce = debounce
        self._force_polling = force_polling
        self._filter = TranslationFileFilter(
            store.workspace_root, store.config.lang_roots
        )
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def running(self) -> bool:
        """Whether the background thread is alive."""
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        """Start watching on a daemon thread. No-op while a watch loop is alive."""
        if self.running:
            return
        self._stop_event.clear()
        self._thread = threading.Thread(
            target=self.run, name="larakeys-watcher", daemon=True
        )
        self._thread.start()
        logger.info("Watcher started for %s", self._store.workspace_root)

    def stop(self, timeout: float | None = 5.0) -> None:
        """Stop the background thread. No-op when not started.

        If the thread outlives ``timeout`` it is kept, so start() cannot run a
        second loop beside it.
        """
        if self._thread is None:
            return
        self._stop_event.set()
        self._thread.join(timeout)
        if self._thread.is_alive():
            logger.warning(
                "Watcher thread for %s did not stop within %ss",
                self._store.workspace_root,
                timeout,
            )
            return
        self._thread = None
        logger.info("Watcher stopped for %s", self._store.workspace_root)

    def run(self) -> None:
        """Watch until stopped. Blocks the calling thread."""
        for changes in watch(
            self._store.workspace_root,
            watch_filter=self._filter,
            debounce=self._debounce,
            stop_event=self._stop_event,
            force_polling=self._force_polling,
        ):
            self.handle_changes(changes)

    def handle_changes(self, changes: Iterable[tuple[Change, str]]) -> int:
        """Invalidate the store for a batch of watchfiles changes.

        Args:
            changes: (change, path) pairs as yielded by watchfiles

        Returns:
            Number of relevant translation file changes in the batch
        """
        relevant = [
            (_CHANGE_KINDS[change], path)
            for change, path in changes
            if self._filter.is_translation_file(path)
        ]
        if not relevant:
            return 0
        for kind, path in relevant:
            logger.debug("Translation file %s: %s", kind, path)
        logger.info("Detected changes in %d translation file(s)", len(relevant))
        self._store.invalidate()
        if self._on_change is not None:
            for kind, path in relevant:
                self._on_change(kind, path)
        return len(relevant)
