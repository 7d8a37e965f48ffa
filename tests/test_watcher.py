"""Tests for watchfiles-driven cache invalidation."""

from __future__ import annotations

from typing import TypeAlias

import threading
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any
from unittest.mock import patch

import pytest
from watchfiles import Change

from larakeys import TranslationStore
from larakeys.enums import ChangeKind
from larakeys.watcher import TranslationFileFilter, TranslationWatcher

WriteFile: TypeAlias = Callable[[str, str], Path]

WORKSPACE = Path("/srv/app")
ROOTS = ("lang", "resources/lang", "resources/languages", "app/lang")


class TestTranslationFileFilter:
    """Test which paths count as translation files."""

    @pytest.mark.parametrize(
        "path",
        [
            "/srv/app/lang/en/auth.php",
            "/srv/app/resources/lang/es/validation.php",
            "/srv/app/resources/languages/fr/nav.php",
            "/srv/app/app/lang/de/auth.php",
            "/srv/app/lang/vendor/package/en/messages.php",
            "/srv/app/packages/blog/resources/lang/en/posts.php",
        ],
    )
    def test_translation_files(self, path: str) -> None:
        """PHP files anywhere below a language root are accepted."""
        watch_filter = TranslationFileFilter(WORKSPACE, ROOTS)

        assert watch_filter.is_translation_file(path)
        assert watch_filter(Change.modified, path)

    @pytest.mark.parametrize(
        "path",
        [
            "/srv/app/lang/en/auth.json",
            "/srv/app/lang.php",
            "/srv/app/app/Http/Kernel.php",
            "/srv/app/resources/views/lang/en.blade.php.txt",
            "/srv/app/config/app.php",
        ],
    )
    def test_other_files(self, path: str) -> None:
        """Files outside language roots or without .php are ignored."""
        watch_filter = TranslationFileFilter(WORKSPACE, ROOTS)

        assert not watch_filter.is_translation_file(path)

    def test_default_exclusions_apply(self) -> None:
        """DefaultFilter's ignored directories stay ignored."""
        watch_filter = TranslationFileFilter(WORKSPACE, ROOTS)

        assert not watch_filter(Change.added, "/srv/app/node_modules/pkg/lang/en/a.php")
        assert not watch_filter(Change.added, "/srv/app/.git/lang/en/a.php")

    def test_workspace_prefix_is_not_a_root(self) -> None:
        """A workspace living under a 'lang' directory does not match everything."""
        watch_filter = TranslationFileFilter(Path("/home/lang/app"), ("lang",))

        assert not watch_filter.is_translation_file("/home/lang/app/config/app.php")
        assert watch_filter.is_translation_file("/home/lang/app/lang/en/auth.php")


    def test_resolved_workspace_path(self, tmp_path: Path) -> None:
        """Paths reported through a symlinked workspace's target are made relative."""
        target = tmp_path / "lang" / "project"
        target.mkdir(parents=True)
        link = tmp_path / "link"
        link.symlink_to(target, target_is_directory=True)
        watch_filter = TranslationFileFilter(link, ("lang",))

        assert not watch_filter.is_translation_file(target / "config" / "app.php")
        assert watch_filter.is_translation_file(target / "lang" / "en" / "auth.php")


class TestHandleChanges:
    """Test TranslationWatcher.handle_changes()."""

    def test_relevant_change_invalidates(self, tmp_path: Path, write_file: WriteFile) -> None:
        """A change to a language file clears the store cache."""
        auth = write_file("lang/en/auth.php", "<?php return ['failed' => 'Old.'];")
        store = TranslationStore(tmp_path)
        store.resolve("auth.failed")
        watcher = TranslationWatcher(store)

        count = watcher.handle_changes(
            {(Change.modified, str(auth)), (Change.added, str(tmp_path / "lang/es/auth.php"))}
        )

        assert count == 2
        assert store.get_cache_stats()["size"] == 0
        assert store.get_cache_stats()["invalidations"] == 1

    def test_irrelevant_change_is_ignored(self, tmp_path: Path, write_file: WriteFile) -> None:
        """Changes outside language roots keep the cache."""
        write_file("lang/en/auth.php", "<?php return ['failed' => 'Old.'];")
        store = TranslationStore(tmp_path)
        store.resolve("auth.failed")
        watcher = TranslationWatcher(store)

        count = watcher.handle_changes({(Change.modified, str(tmp_path / "app/Models/User.php"))})

        assert count == 0
        assert store.get_cache_stats()["size"] == 1
        assert store.get_cache_stats()["invalidations"] == 0


    def test_on_change_receives_each_change(self, tmp_path: Path) -> None:
        """The callback sees every relevant change after invalidation."""
        store = TranslationStore(tmp_path)
        seen: list[tuple[ChangeKind, str]] = []
        watcher = TranslationWatcher(store, on_change=lambda kind, path: seen.append((kind, path)))
        auth = str(tmp_path / "lang/en/auth.php")

        watcher.handle_changes([(Change.deleted, auth), (Change.modified, str(tmp_path / "a.py"))])

        assert seen == [(ChangeKind.DELETED, auth)]


class TestWatcherLifecycle:
    """Test the background thread with watchfiles.watch patched out."""

    @staticmethod
    def _fake_watch(*batches: set[tuple[Change, str]]) -> Callable[..., Iterator[Any]]:
        def fake(path: Path, *, stop_event: threading.Event, **kwargs: Any) -> Iterator[Any]:
            yield from batches
            stop_event.wait(5)

        return fake

    def test_start_and_stop(self, tmp_path: Path) -> None:
        """Batches from watchfiles invalidate the store until stopped."""
        store = TranslationStore(tmp_path)
        change = (Change.deleted, str(tmp_path / "lang/en/auth.php"))
        watcher = TranslationWatcher(store, debounce=10)

        with patch("larakeys.watcher.watch", side_effect=self._fake_watch({change})) as mock_watch:
            watcher.start()
            assert watcher.running
            watcher.stop()

        assert not watcher.running
        assert store.get_cache_stats()["invalidations"] == 1
        mock_watch.assert_called_once()
        assert mock_watch.call_args.args == (store.workspace_root,)
        assert mock_watch.call_args.kwargs["debounce"] == 10

    def test_double_start_is_noop(self, tmp_path: Path) -> None:
        """Starting twice runs a single watch loop."""
        watcher = TranslationWatcher(TranslationStore(tmp_path))

        with patch("larakeys.watcher.watch", side_effect=self._fake_watch()) as mock_watch:
            watcher.start()
            watcher.start()
            watcher.stop()

        mock_watch.assert_called_once()

    def test_stop_without_start(self, tmp_path: Path) -> None:
        """stop() on an idle watcher does nothing."""
        watcher = TranslationWatcher(TranslationStore(tmp_path))

        watcher.stop()

        assert not watcher.running

    def test_stop_timeout_keeps_thread(self, tmp_path: Path) -> None:
        """A loop that outlives stop() blocks a second start()."""
        release = threading.Event()

        def stuck(path: Path, **kwargs: Any) -> Iterator[Any]:
            release.wait(5)
            yield from ()

        watcher = TranslationWatcher(TranslationStore(tmp_path))

        with patch("larakeys.watcher.watch", side_effect=stuck) as mock_watch:
            watcher.start()
            watcher.stop(timeout=0.05)
            assert watcher.running

            watcher.start()
            mock_watch.assert_called_once()

            release.set()
            watcher.stop()

        assert not watcher.running
