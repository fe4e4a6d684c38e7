"""LittleSearch CLI: build a keyword index over a collection and query it.

Four commands: validate, index, lookup, search.
Uses typer for argument parsing and rich for formatted terminal output.
The index lives in memory, so every command builds it from the collection.
"""

from __future__ import annotations

import json
import logging
from typing import NoReturn

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from lse.engine import LittleSearchEngine
from lse.errors import LittleSearchError
from lse.sources import DirectoryDocumentSource
from lse.validator import load_collection, validate_collection_file

app = typer.Typer(help="LittleSearch: frequency-ranked keyword search over text documents.")
console = Console()


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Show build logs")):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _fail(message: str) -> NoReturn:
    console.print(f"[red]Error: {escape(message)}[/red]")
    raise typer.Exit(code=1)


def _build_engine(collection_path: str) -> tuple[LittleSearchEngine, dict, dict]:
    passed, errors = validate_collection_file(collection_path)
    if not passed:
        for err in errors:
            console.print(f"  [red]✗[/red] {escape(err)}")
        _fail("invalid collection")

    config = load_collection(collection_path)
    engine = LittleSearchEngine(DirectoryDocumentSource(config["documents_dir"]))
    try:
        summary = engine.make_index_from_files(config["docs_file"], config["noise_words_file"])
    except LittleSearchError as e:
        _fail(str(e))
    return engine, config, summary


# ── validate ────────────────────────────────────────────────────────


@app.command()
def validate(collection_path: str = typer.Argument(..., help="Path to collection JSON")):
    """Check a collection file and the paths it references."""
    passed, errors = validate_collection_file(collection_path)

    if passed:
        console.print(
            Panel("[bold green]✓ Validation passed[/bold green]", border_style="green")
        )
    else:
        console.print(
            Panel("[bold red]✗ Validation failed[/bold red]", border_style="red")
        )
        for err in errors:
            console.print(f"  [red]✗[/red] {escape(err)}")
        raise typer.Exit(code=1)


# ── index ───────────────────────────────────────────────────────────


@app.command()
def index(collection_path: str = typer.Argument(..., help="Path to collection JSON")):
    """Build the keyword index and report what went into it."""
    with console.status("[bold blue]Indexing documents..."):
        _, config, summary = _build_engine(collection_path)

    table = Table(title=f"Indexing Summary: {config.get('name', '')}")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green", justify="right")
    table.add_row("Documents", str(summary["documents"]))
    table.add_row("Keywords", str(summary["keywords"]))
    table.add_row("Occurrences", str(summary["occurrences"]))
    table.add_row("Noise Words", str(summary["noise_words"]))
    console.print(table)


# ── lookup ──────────────────────────────────────────────────────────


@app.command()
def lookup(
    collection_path: str = typer.Argument(..., help="Path to collection JSON"),
    keyword: str = typer.Argument(..., help="Keyword to look up"),
    as_json: bool = typer.Option(False, "--json", help="Print occurrences as JSON"),
):
    """Show a keyword's occurrences, highest frequency first."""
    engine, _, _ = _build_engine(collection_path)
    occs = engine.occurrences(keyword)

    if as_json:
        console.print_json(json.dumps([occ.to_dict() for occ in occs]))
        return

    if not occs:
        console.print(f'No occurrences of "{keyword.lower()}".')
        return

    table = Table(title=f'Occurrences of "{keyword.lower()}"')
    table.add_column("#", style="dim", width=3)
    table.add_column("Document", style="cyan", min_width=20)
    table.add_column("Frequency", justify="right", width=10)
    for i, occ in enumerate(occs, 1):
        table.add_row(str(i), occ.document, str(occ.frequency))
    console.print(table)


# ── search ──────────────────────────────────────────────────────────


@app.command()
def search(
    collection_path: str = typer.Argument(..., help="Path to collection JSON"),
    kw1: str = typer.Argument(..., help="First keyword (wins frequency ties)"),
    kw2: str = typer.Argument(..., help="Second keyword"),
):
    """Find the top 5 documents containing either keyword."""
    engine, _, _ = _build_engine(collection_path)
    results = engine.top5search(kw1, kw2)

    console.print(f'\n[bold]Query:[/bold] "{kw1}" OR "{kw2}"')
    if not results:
        console.print("No matching documents.")
        return

    table = Table()
    table.add_column("#", style="dim", width=3)
    table.add_column("Document", style="cyan", min_width=20)
    for i, document in enumerate(results, 1):
        table.add_row(str(i), document)
    console.print(table)
    console.print(f"\n{len(results)} results returned")


if __name__ == "__main__":
    app()
