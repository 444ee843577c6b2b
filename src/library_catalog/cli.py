"""Command line interface for the library catalog.

The catalog lives in memory only, so every invocation seeds a fresh
catalog from the configuration before running its command.
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .domain.catalog import CatalogItem, CatalogService
from .events import EventBus, ItemRemoved
from .exceptions import LibraryCatalogError
from .models.config import CatalogConfig, load_config

console = Console()

logger = logging.getLogger(__name__)

DEMO_QUERY = "The Great Gatsby"


def setup_logging(level: str) -> None:
    """Route the package's log records to stderr at ``level``."""
    package_logger = logging.getLogger("library_catalog")
    package_logger.setLevel(level.upper())
    package_logger.propagate = False

    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.addHandler(
        RichHandler(console=Console(stderr=True), show_path=False)
    )


def _build_service(config: CatalogConfig, event_bus: Optional[EventBus] = None) -> CatalogService:
    service = CatalogService(event_bus=event_bus)
    service.load_items(config.seed_items)
    return service


def _print_items(items: List[CatalogItem]) -> None:
    if not items:
        console.print("[yellow]No items found[/yellow]")
        return
    for item in items:
        console.print(item.format_line(), markup=False, highlight=False)


@click.group()
@click.version_option(package_name="library-catalog")
@click.option(
    '--config',
    type=click.Path(path_type=Path),
    help='Configuration file with the items to seed the catalog with'
)
@click.option(
    '--verbose',
    is_flag=True,
    help='Verbose output'
)
@click.pass_context
def cli(ctx: click.Context, config: Optional[Path], verbose: bool):
    """Manage an in-memory catalog of books, magazines and CDs."""
    try:
        cfg = load_config(config) if config else CatalogConfig.default()
    except LibraryCatalogError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)

    setup_logging("DEBUG" if verbose else cfg.log_level)
    logger.debug("Using configuration %r with %d seed item(s)", cfg.name, len(cfg.seed_items))
    ctx.obj = cfg


@cli.command()
def demo():
    """Seed the sample items and search for the demo title."""
    service = _build_service(CatalogConfig.default())
    _print_items(service.search_item(DEMO_QUERY))


@cli.command()
@click.argument('title')
@click.pass_obj
def search(cfg: CatalogConfig, title: str):
    """Print every item titled TITLE (case-insensitive)."""
    try:
        service = _build_service(cfg)
    except LibraryCatalogError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)

    _print_items(service.search_item(title))


@cli.command(name="list")
@click.pass_obj
def list_items(cfg: CatalogConfig):
    """Show every item in the catalog."""
    try:
        service = _build_service(cfg)
    except LibraryCatalogError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)

    table = Table(title=cfg.name)
    table.add_column("Title", style="cyan")
    table.add_column("Author")
    table.add_column("Type", style="magenta")

    for item in service.catalog:
        table.add_row(item.title, item.author, item.kind)

    console.print(table)

    counts = service.catalog.count_by_kind()
    summary = ", ".join(f"{kind}: {count}" for kind, count in counts.items())
    console.print(f"{len(service.catalog)} item(s)" + (f" ({summary})" if summary else ""))


@cli.command()
@click.argument('title')
@click.pass_obj
def remove(cfg: CatalogConfig, title: str):
    """Remove every item titled TITLE and show what is left."""
    event_bus = EventBus()
    try:
        service = _build_service(cfg, event_bus=event_bus)
    except LibraryCatalogError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)

    count = service.remove_item(title)
    if not count:
        console.print(f"[yellow]No items titled {escape(repr(title))}[/yellow]", highlight=False)
    for event in event_bus.get_events(ItemRemoved):
        console.print(f"Removed: {event.title} ({event.kind})", markup=False, highlight=False)

    console.print(f"{len(service.catalog)} item(s) remaining")
    _print_items(list(service.catalog))


def main():
    """Entry point for the ``library-catalog`` script."""
    cli()


if __name__ == '__main__':
    main()
