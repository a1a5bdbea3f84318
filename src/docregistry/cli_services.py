"""CLI service layer for docregistry.

Holds the consoles, exit codes, and helpers shared by the CLI commands:
logging setup, loading a document file into a store, and rendering documents.
"""
from __future__ import annotations

import json
import logging
from collections.abc import Generator
from contextlib import contextmanager
from pathlib import Path

import typer
from rich.console import Console

from docregistry.config import RegistryConfig, get_config
from docregistry.exceptions import ConfigError, DocRegistryError
from docregistry.loader import load_documents
from docregistry.models import Document
from docregistry.storage import DocumentStore

# Exit codes
EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_INVALID_ARG = 2

console = Console(stderr=False)  # stdout for normal output
error_console = Console(stderr=True)  # stderr for errors

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _escape_rich(text: str) -> str:
    """Escape brackets to prevent Rich markup interpretation."""
    return text.replace("[", "\\[").replace("]", "\\]")


def configure_logging(verbose: bool) -> None:
    """Route library logging to stderr, at DEBUG when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        force=True,
    )


class CLIContext:
    """Invocation-scoped context for CLI state."""

    def __init__(self, config: RegistryConfig | None = None):
        self.config = config or get_config()


def get_cli_context(ctx: typer.Context) -> CLIContext:
    """Return the CLIContext stored by the app callback, creating one if absent."""
    if not isinstance(ctx.obj, CLIContext):
        ctx.obj = CLIContext()
    return ctx.obj


def resolve_output_format(ctx: typer.Context, requested: str | None) -> str:
    """Validate the output format, exiting with EXIT_INVALID_ARG if unsupported."""
    try:
        return get_cli_context(ctx).config.resolve_format(requested)
    except ConfigError as e:
        error_console.print(f"[red]Error:[/red] {_escape_rich(str(e))}")
        raise typer.Exit(code=EXIT_INVALID_ARG)


@contextmanager
def open_document_store(path: Path) -> Generator[DocumentStore, None, None]:
    """Context manager yielding a fresh store filled from a document file.

    Usage:
        with open_document_store(path) as store:
            results = store.search(request)

    Raises:
        typer.Exit: If the file cannot be loaded.
    """
    try:
        documents = load_documents(path)
    except DocRegistryError as e:
        error_console.print(f"[red]Error loading documents:[/red] {_escape_rich(str(e))}")
        raise typer.Exit(code=EXIT_ERROR)

    store = DocumentStore()
    for document in documents:
        store.save(document)
    yield store


def print_document(document: Document, index: int | None = None) -> None:
    """Print one document in human-readable form."""
    heading = f"[bold]{index}.[/bold] " if index is not None else ""
    console.print(f"{heading}[bold]{_escape_rich(document.title)}[/bold] [dim]({document.id})[/dim]")
    if document.author is not None:
        console.print(
            f"   Author: {_escape_rich(document.author.name)} [dim]({_escape_rich(document.author.id)})[/dim]"
        )
    console.print(f"   Created: {document.created.isoformat()}")
    console.print(f"   {_escape_rich(document.content[:200])}")


def print_documents_json(documents: list[Document]) -> None:
    """Print documents as a JSON array."""
    payload = [doc.model_dump(mode="json") for doc in documents]
    # Use built-in print to avoid Rich markup interpretation
    print(json.dumps(payload, indent=2))
