"""CLI entry point for i18n-form.

Invoked as::

    i18n-form [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m i18nform.cli.main

Commands
--------
version     Show version information
init-db     Create the SQLite schema and seed categories and languages
save        Read a submitted form from YAML and store its localized values
show        List stored language items
remove      Delete stored language items
"""
from __future__ import annotations

import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click
import yaml

if TYPE_CHECKING:
    from i18nform.config import I18nSettings
    from i18nform.store.sqlite import SqliteItemStore
from rich.console import Console
from rich.table import Table

console = Console()
err_console = Console(stderr=True)


def _load_form(path: str) -> dict[str, Any]:
    """Read submitted form data from a YAML file, exiting on error."""
    try:
        data = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    except FileNotFoundError:
        err_console.print(f"[red]Error:[/red] File not found: {path}")
        sys.exit(1)
    except OSError as exc:
        err_console.print(f"[red]Error:[/red] Cannot read {path}: {exc}")
        sys.exit(1)
    except yaml.YAMLError as exc:
        err_console.print(f"[red]Error:[/red] Invalid YAML in {path}: {exc}")
        sys.exit(1)
    if not isinstance(data, dict):
        err_console.print(f"[red]Error:[/red] {path} must contain a mapping of form fields")
        sys.exit(1)
    return data


def _load_settings_or_exit(config: str | None) -> "I18nSettings":
    from i18nform import ConfigurationError, load_settings

    try:
        return load_settings(config)
    except ConfigurationError as exc:
        err_console.print(f"[red]Configuration error:[/red] {exc}")
        sys.exit(1)


def _open_store(db: str, settings: "I18nSettings") -> "SqliteItemStore":
    from i18nform import SqliteItemStore

    store = SqliteItemStore(db, table_prefix=settings.table_prefix)
    store.create_schema()
    return store


def _parse_language(value: str) -> tuple[str, str]:
    code, _, name = value.partition(":")
    if not code:
        raise click.BadParameter(f"expected CODE or CODE:NAME, got {value!r}")
    return code, name


config_option = click.option(
    "--config",
    "config",
    type=click.Path(exists=False),
    default=None,
    help="YAML settings file",
)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="i18n-form")
def cli() -> None:
    """Multi-language form input: classify, validate and store localized values."""


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from i18nform import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]i18n-form[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# init-db command
# ---------------------------------------------------------------------------


@cli.command(name="init-db")
@click.argument("db", type=click.Path(exists=False))
@click.option("--category", "categories", multiple=True, help="Language category to create")
@click.option("--language", "languages", multiple=True, help="Language as CODE or CODE:NAME")
@config_option
def init_db_command(
    db: str, categories: tuple[str, ...], languages: tuple[str, ...], config: str | None
) -> None:
    """Create the language-item schema in DB.

    DB is the path to the SQLite database file.
    """
    settings = _load_settings_or_exit(config)
    parsed = []
    for value in languages:
        try:
            parsed.append(_parse_language(value))
        except click.BadParameter as exc:
            err_console.print(f"[red]Error:[/red] {exc.message}")
            sys.exit(1)

    with _open_store(db, settings) as store:
        for name in categories:
            category_id = store.add_category(name)
            console.print(f"[green]Category[/green] {name} (id {category_id})")
        for code, name in parsed:
            language_id = store.add_language(code, name)
            console.print(f"[green]Language[/green] {code} (id {language_id})")
    console.print(f"[green]OK[/green] {db} ready")


# ---------------------------------------------------------------------------
# save command
# ---------------------------------------------------------------------------


@cli.command(name="save")
@click.argument("db", type=click.Path(exists=False))
@click.argument("form", type=click.Path(exists=False))
@click.option("--element", "element_id", required=True, help="Form element ID")
@click.option("--key", "item_key", required=True, help="Language-item key to store under")
@click.option("--category", "category_name", required=True, help="Language category name")
@click.option("--owner", "owner_id", required=True, type=int, help="Owner ID of the items")
@config_option
def save_command(
    db: str,
    form: str,
    element_id: str,
    item_key: str,
    category_name: str,
    owner_id: int,
    config: str | None,
) -> None:
    """Store the localized values of one element from a submitted FORM.

    FORM is a YAML file holding the submitted fields, e.g.
    ``title_i18n: {1: Hello, 2: Bonjour}``.
    """
    from i18nform import ElementRegistry, I18nFormError, LanguageCatalog

    settings = _load_settings_or_exit(config)
    data = _load_form(form)

    with _open_store(db, settings) as store:
        catalog = LanguageCatalog(store.load_languages)
        registry = ElementRegistry(store=store, cache=catalog, settings=settings)
        registry.register(element_id)
        try:
            registry.read_values(data)
        except I18nFormError as exc:
            err_console.print(f"[red]Error:[/red] {exc}")
            sys.exit(1)

        if not registry.validate_value(element_id):
            err_console.print(f"[red]Invalid[/red] {element_id}: every value must be filled in")
            sys.exit(1)

        if registry.is_plain_value(element_id):
            console.print(
                f"[yellow]Plain value[/yellow] {element_id} = {registry.get_value(element_id)!r}"
                " (nothing stored)"
            )
            return

        try:
            with store.transaction():
                plan = registry.save(element_id, item_key, category_name, owner_id)
        except I18nFormError as exc:
            err_console.print(f"[red]Error:[/red] {exc}")
            sys.exit(1)

    table = Table(title=f"Saved {item_key} (owner {owner_id})", show_lines=True)
    table.add_column("Action", style="bold", min_width=8)
    table.add_column("Language", min_width=8)
    table.add_column("Value")
    for insert in plan.inserts:
        table.add_row("[green]insert[/green]", str(insert.language_id), insert.value)
    for update in plan.updates:
        table.add_row("[yellow]update[/yellow]", str(update.language_id), update.value)
    console.print(table)
    console.print(
        f"\n[bold]Summary:[/bold] {len(plan.inserts)} inserted, {len(plan.updates)} updated"
    )


# ---------------------------------------------------------------------------
# show command
# ---------------------------------------------------------------------------


@cli.command(name="show")
@click.argument("db", type=click.Path(exists=False))
@click.option("--key", "item_key", default=None, help="Only items with this key")
@click.option("--owner", "owner_id", default=None, type=int, help="Only items of this owner")
@config_option
def show_command(db: str, item_key: str | None, owner_id: int | None, config: str | None) -> None:
    """List language items stored in DB."""
    settings = _load_settings_or_exit(config)
    with _open_store(db, settings) as store:
        items = store.items(item_key=item_key, owner_id=owner_id)

    if not items:
        console.print("[dim]No language items found.[/dim]")
        return

    table = Table(title=f"Language items: {db}", show_lines=True)
    table.add_column("Row", min_width=4)
    table.add_column("Key", style="bold")
    table.add_column("Language", min_width=8)
    table.add_column("Owner", min_width=5)
    table.add_column("Value")
    for item in items:
        table.add_row(
            str(item.row_id), item.item_key, str(item.language_id), str(item.owner_id), item.content
        )
    console.print(table)


# ---------------------------------------------------------------------------
# remove command
# ---------------------------------------------------------------------------


@cli.command(name="remove")
@click.argument("db", type=click.Path(exists=False))
@click.option("--key", "item_key", required=True, help="Language-item key to delete")
@click.option("--owner", "owner_id", required=True, type=int, help="Owner ID of the items")
@config_option
def remove_command(db: str, item_key: str, owner_id: int, config: str | None) -> None:
    """Delete every language item KEY of an owner from DB."""
    from i18nform import ElementRegistry, LanguageCatalog

    settings = _load_settings_or_exit(config)
    with _open_store(db, settings) as store:
        catalog = LanguageCatalog(store.load_languages)
        registry = ElementRegistry(store=store, cache=catalog, settings=settings)
        deleted = registry.remove(item_key, owner_id)
    console.print(f"[green]Removed[/green] {deleted} item(s) {item_key} (owner {owner_id})")


if __name__ == "__main__":
    cli()
