"""CLI entry point for docregistry."""

from __future__ import annotations

import json
from datetime import datetime, timedelta, timezone
from pathlib import Path

import typer

from docregistry import __version__
from docregistry.cli_services import (
    EXIT_ERROR,
    EXIT_INVALID_ARG,
    EXIT_SUCCESS,
    CLIContext,
    _escape_rich,
    configure_logging,
    console,
    error_console,
    open_document_store,
    print_document,
    print_documents_json,
    resolve_output_format,
)
from docregistry.config import get_config
from docregistry.models import Author, Document, SearchRequest
from docregistry.storage import DocumentStore

app = typer.Typer(
    name="docreg",
    help="In-memory document registry with multi-criteria search",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)

# ISO 8601 forms; %z accepts "Z" and "+HH:MM"
DATETIME_FORMATS = [
    "%Y-%m-%d",
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%dT%H:%M:%S%z",
    "%Y-%m-%d %H:%M:%S%z",
    "%Y-%m-%dT%H:%M:%S.%f%z",
]

_FORMAT_HELP = "Output format: text or json (default from DOCREGISTRY_DEFAULT_FORMAT)"


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging (or set DOCREGISTRY_VERBOSE)",
    ),
    version: bool | None = typer.Option(
        None,
        "--version",
        help="Show version information",
        is_flag=True,
    ),
):
    """docreg - In-memory document registry."""
    if version:
        console.print(f"docreg version {__version__}")
        raise typer.Exit(code=EXIT_SUCCESS)

    config = get_config()
    verbose = verbose or config.verbose
    configure_logging(verbose)

    ctx.obj = CLIContext(config=config)

    if ctx.invoked_subcommand is None:
        console.print("[bold]docreg[/bold] - In-memory document registry")
        console.print("Use --help for usage information")
        raise typer.Exit(code=EXIT_SUCCESS)


@app.command()
def demo() -> None:
    """Save a sample document, look it up, and search for it."""
    store = DocumentStore()

    author = Author(id="1", name="John Doe")
    document = Document(
        title="Sample Title",
        content="Sample Content",
        author=author,
        created=datetime.now(timezone.utc),
    )

    saved = store.save(document)
    console.print("[bold]Saved document:[/bold]")
    print_document(saved)

    found = store.find_by_id(saved.id)
    console.print("\n[bold]Found document:[/bold]")
    if found is None:
        console.print("[yellow]Not found[/yellow]")
    else:
        print_document(found)

    now = datetime.now(timezone.utc)
    request = SearchRequest(
        title_prefixes=["Sample"],
        contains_contents=["Content"],
        author_ids=["1"],
        created_from=now - timedelta(hours=1),
        created_to=now + timedelta(hours=1),
    )
    results = store.search(request)
    console.print(f"\n[bold]Search results:[/bold] {len(results)}")
    for i, result in enumerate(results, 1):
        print_document(result, index=i)


@app.command()
def search(
    ctx: typer.Context,
    file: Path = typer.Argument(..., help="JSON array or JSONL file of documents"),
    title_prefixes: list[str] | None = typer.Option(
        None,
        "--title-prefix",
        "-p",
        help="Match titles starting with this prefix (repeatable, any may match)",
    ),
    contains: list[str] | None = typer.Option(
        None,
        "--contains",
        "-c",
        help="Match content containing this text (repeatable, any may match)",
    ),
    author_ids: list[str] | None = typer.Option(
        None,
        "--author",
        "-a",
        help="Match documents by this author id (repeatable, any may match)",
    ),
    created_from: datetime | None = typer.Option(
        None,
        "--from",
        formats=DATETIME_FORMATS,
        help="Only documents created at or after this time (UTC if no offset)",
    ),
    created_to: datetime | None = typer.Option(
        None,
        "--to",
        formats=DATETIME_FORMATS,
        help="Only documents created at or before this time (UTC if no offset)",
    ),
    output_format: str | None = typer.Option(None, "--format", "-f", help=_FORMAT_HELP),
) -> None:
    """Search a document file. Criteria on different fields must all hold."""
    fmt = resolve_output_format(ctx, output_format)

    request = SearchRequest(
        title_prefixes=title_prefixes,
        contains_contents=contains,
        author_ids=author_ids,
        created_from=created_from,
        created_to=created_to,
    )
    if (
        request.created_from is not None
        and request.created_to is not None
        and request.created_from > request.created_to
    ):
        error_console.print("[red]Error:[/red] --from must not be later than --to")
        raise typer.Exit(code=EXIT_INVALID_ARG)

    with open_document_store(file) as store:
        results = store.search(request)
        total = store.count()

    if fmt == "json":
        print_documents_json(results)
        return

    if not results:
        console.print("[yellow]No results found[/yellow]")
        return

    console.print(
        f"[bold]{len(results)} of {total} document(s) matched in[/bold] {_escape_rich(str(file))}"
    )
    for i, result in enumerate(results, 1):
        console.print()
        print_document(result, index=i)


@app.command()
def show(
    ctx: typer.Context,
    file: Path = typer.Argument(..., help="JSON array or JSONL file of documents"),
    doc_id: str = typer.Argument(..., help="Document id"),
    output_format: str | None = typer.Option(None, "--format", "-f", help=_FORMAT_HELP),
) -> None:
    """Show one document from a document file by id."""
    fmt = resolve_output_format(ctx, output_format)

    with open_document_store(file) as store:
        document = store.find_by_id(doc_id)

    if document is None:
        error_console.print(f"[yellow]Document not found:[/yellow] {_escape_rich(doc_id)}")
        raise typer.Exit(code=EXIT_ERROR)

    if fmt == "json":
        print(json.dumps(document.model_dump(mode="json"), indent=2))
    else:
        print_document(document)


def run() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    run()
