"""Command line host for the translation store.

Mirrors what an editor integration does with the engine: go to a key's
definition, preview it in every locale, and keep the cache fresh while
files change.
"""

from __future__ import annotations

import contextlib
import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markdown import Markdown
from rich.markup import escape
from rich.table import Table

from larakeys.config import LookupConfig
from larakeys.constants import DEFAULT_LANG_PATHS, DEFAULT_LOCALE
from larakeys.preview import format_hover, locale_label
from larakeys.runtime.store import TranslationStore
from larakeys.syntax.references import extract_translation_key

app = typer.Typer(
    name="larakeys",
    help="Resolve Laravel translation keys from PHP language files.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()


@app.callback()
def main_options(
    ctx: typer.Context,
    root: Annotated[
        Path,
        typer.Option(
            "--root",
            "-r",
            help="Workspace root containing the language directories.",
            file_okay=False,
        ),
    ] = Path("."),
    lang_path: Annotated[
        list[str] | None,
        typer.Option(
            "--lang-path",
            help="Language directory template with {locale}; repeat to set probe order.",
        ),
    ] = None,
    default_locale: Annotated[
        str, typer.Option("--default-locale", help="Locale used to find the language root.")
    ] = DEFAULT_LOCALE,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
) -> None:
    """Build the shared store for the selected workspace."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        config = LookupConfig(
            lang_paths=tuple(lang_path) if lang_path else DEFAULT_LANG_PATHS,
            default_locale=default_locale,
        )
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e
    ctx.obj = TranslationStore(root.absolute(), config)


def _store(ctx: typer.Context) -> TranslationStore:
    store: TranslationStore = ctx.obj
    return store


@app.command("lookup")
def lookup(
    ctx: typer.Context,
    key: Annotated[str, typer.Argument(help="Dotted translation key, e.g. auth.failed.")],
    locale: Annotated[
        str | None, typer.Option("--locale", "-l", help="Locale to resolve in.")
    ] = None,
) -> None:
    """Print a key's value and declaration site."""
    store = _store(ctx)
    result = store.resolve_in_locale(key, locale or store.config.default_locale)
    if result is None:
        console.print(f"[red]Translation not found:[/red] {escape(key)}")
        raise typer.Exit(code=1)
    console.print(escape(result.value), soft_wrap=True)
    console.print(
        f"[dim]{escape(str(result.file_path))}:{result.position.format(zero_based=False)}[/dim]",
        soft_wrap=True,
    )


@app.command("locales")
def locales(ctx: typer.Context) -> None:
    """List locale directories found under the language root."""
    store = _store(ctx)
    table = Table(show_lines=False)
    table.add_column("locale")
    table.add_column("name")
    for code in store.available_locales():
        label = locale_label(code)
        table.add_row(f"{label.flag} {code}", label.display_name)
    console.print(table)


@app.command("hover")
def hover(
    ctx: typer.Context,
    text: Annotated[str, typer.Argument(help="Source fragment such as \"__('auth.failed')\".")],
    raw: Annotated[bool, typer.Option("--raw", help="Print Markdown source.")] = False,
) -> None:
    """Preview the translation call in TEXT across every locale."""
    key = extract_translation_key(text)
    if key is None:
        console.print("[red]No translation call found.[/red]")
        raise typer.Exit(code=1)
    translations = _store(ctx).resolve_all_locales(key)
    rendered = format_hover(key, translations)
    if raw:
        console.print(rendered, markup=False, soft_wrap=True)
    else:
        console.print(Markdown(rendered))
    if not translations:
        raise typer.Exit(code=1)


@app.command("watch")
def watch_files(
    ctx: typer.Context,
    force_polling: Annotated[
        bool, typer.Option("--poll", help="Poll instead of using native file events.")
    ] = False,
) -> None:
    """Watch language files and report each change until interrupted.

    Diagnostic command: shows which edits would invalidate a host's cache.
    """
    from larakeys.watcher import TranslationWatcher  # noqa: PLC0415

    def report(kind: str, path: str) -> None:
        console.print(f"{kind}: {escape(path)}", soft_wrap=True)

    store = _store(ctx)
    watcher = TranslationWatcher(
        store, force_polling=force_polling or None, on_change=report
    )
    console.print(f"[green]Watching {escape(str(store.workspace_root))}[/green]")
    with contextlib.suppress(KeyboardInterrupt):
        watcher.run()
    invalidations = store.get_cache_stats()["invalidations"]
    console.print(f"[dim]Stopped after {invalidations} invalidation(s)[/dim]")


def main() -> None:
    app()
