"""CLI entry point for versenotes."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from versenotes import __version__
from versenotes.config import BACKEND_MEMORY, Settings
from versenotes.errors import InvalidReferenceError, StorageError
from versenotes.reference.formatting import render_passage, superscript
from versenotes.service import BibleService

console = Console()


def _service(ctx: click.Context) -> BibleService:
    """Build and initialize the service, exiting if verse lookup is unavailable."""
    service = BibleService(ctx.obj["settings"])
    if not service.initialize():
        console.print(f"[red]Error: {service.status().error}[/red]")
        sys.exit(1)
    return service


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--db",
    "db_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="SQLite database path",
)
@click.option("--memory", is_flag=True, help="Use a throwaway in-memory store")
@click.option(
    "--corpus",
    "corpus_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Seed corpus JSON (defaults to the bundled demo corpus)",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, db_path: Path | None, memory: bool, corpus_path: Path | None, verbose: bool):
    """versenotes - Bible reference lookup for notes."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )

    settings = Settings()
    if db_path is not None:
        settings.db_path = db_path
    if memory:
        settings.backend = BACKEND_MEMORY
    settings.corpus_path = corpus_path

    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings


@cli.command()
@click.pass_context
def init(ctx):
    """Create the verse database and import the seed corpus."""
    settings = ctx.obj["settings"]
    console.print("[bold blue]Initializing verse store...[/bold blue]")

    service = _service(ctx)
    status = service.status()

    location = settings.db_path if status.backend != BACKEND_MEMORY else "memory"
    console.print(f"[green]✓ {status.verse_count} verses available ({location})[/green]")


@cli.command()
@click.argument("reference")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
@click.option("--superscript", "use_superscript", is_flag=True, help="Superscript verse numbers")
@click.pass_context
def lookup(ctx, reference: str, as_json: bool, use_superscript: bool):
    """Look up the verses for a reference.

    Example: versenotes lookup "Jn 3:16-18"
    """
    service = _service(ctx)

    try:
        result = service.lookup(reference)
    except InvalidReferenceError as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
        return

    if not result.found:
        console.print(f"[yellow]No verses found for {result.formatted_reference}[/yellow]")
        sys.exit(1)

    lines = []
    for verse in result.verses:
        number = superscript(verse.verse) if use_superscript else str(verse.verse)
        lines.append(f"[bold]{number}[/bold] {verse.text}")
    console.print(Panel("\n".join(lines), title=result.formatted_reference))


@cli.command()
@click.argument("text")
@click.option("--cursor", type=int, default=None, help="Cursor offset (default: end)")
@click.pass_context
def suggest(ctx, text: str, cursor: int | None):
    """Suggest verses for a reference typed at the end of TEXT."""
    service = _service(ctx)
    suggestion = service.suggest(text, cursor)

    if suggestion is None:
        console.print("[dim]No suggestion[/dim]")
        return

    console.print(
        Panel(
            render_passage(suggestion.result, superscript_numbers=True),
            title=f"{suggestion.reference} [dim](chars {suggestion.start}-{suggestion.end})[/dim]",
        )
    )


@cli.command()
@click.pass_context
def books(ctx):
    """List canonical books and recognized abbreviations."""
    service = BibleService(ctx.obj["settings"])

    table = Table(title="Books")
    table.add_column("#", justify="right")
    table.add_column("Book", style="bold")
    table.add_column("Abbreviations")

    for index, entry in enumerate(service.books.table, start=1):
        table.add_row(str(index), entry.name, ", ".join(entry.abbreviations))

    console.print(table)


@cli.group()
def cache():
    """Lookup cache maintenance."""
    pass


@cache.command("clear")
@click.pass_context
def cache_clear(ctx):
    """Remove every cached lookup."""
    service = _service(ctx)
    removed = service.cache.clear()
    console.print(f"[green]✓ Removed {removed} cached lookups[/green]")


@cache.command("purge")
@click.pass_context
def cache_purge(ctx):
    """Remove cached lookups older than the TTL."""
    service = _service(ctx)
    removed = service.cache.purge_expired()
    console.print(f"[green]✓ Purged {removed} expired lookups[/green]")


@cli.command()
@click.option("--yes", is_flag=True, help="Confirm deletion of all verses")
@click.pass_context
def reset(ctx, yes: bool):
    """Delete all verses and cached lookups."""
    if not yes:
        console.print("[red]Refusing to reset without --yes[/red]")
        sys.exit(1)

    service = BibleService(ctx.obj["settings"])
    try:
        service.store.clear()
    except StorageError as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)
    console.print("[green]✓ Verse store cleared[/green]")


@cli.command()
@click.option("--host", default="127.0.0.1", help="Bind host")
@click.option("--port", default=8000, help="Bind port")
@click.pass_context
def serve(ctx, host: str, port: int):
    """Start the API server."""
    import uvicorn

    from versenotes.api.main import app
    from versenotes.api.routes import get_service

    service = BibleService(ctx.obj["settings"])
    service.initialize()
    app.dependency_overrides[get_service] = lambda: service

    console.print(f"[bold blue]Starting versenotes API at http://{host}:{port}[/bold blue]")
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    cli()
