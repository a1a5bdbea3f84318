"""Read documents from JSON and JSONL files."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from docregistry.exceptions import DocumentLoadError
from docregistry.models import Document

logger = logging.getLogger(__name__)


def _to_document(raw: Any, source: str) -> Document:
    if not isinstance(raw, dict):
        raise DocumentLoadError(
            f"{source}: expected a JSON object, got {type(raw).__name__}"
        )
    try:
        return Document.model_validate(raw)
    except ValidationError as e:
        raise DocumentLoadError(f"{source}: invalid document: {e}") from e


def _load_jsonl(path: Path, text: str) -> list[Document]:
    documents = []
    for line_no, line in enumerate(text.splitlines(), 1):
        if not line.strip():
            continue
        source = f"{path}:{line_no}"
        try:
            raw = json.loads(line)
        except json.JSONDecodeError as e:
            raise DocumentLoadError(f"{source}: invalid JSON: {e.msg}") from e
        documents.append(_to_document(raw, source))
    return documents


def _load_json(path: Path, text: str) -> list[Document]:
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as e:
        raise DocumentLoadError(
            f"{path}: invalid JSON at position {e.pos}: {e.msg}"
        ) from e
    if not isinstance(raw, list):
        raise DocumentLoadError(
            f"{path}: expected a JSON array of documents, got {type(raw).__name__}"
        )
    return [_to_document(item, f"{path}[{i}]") for i, item in enumerate(raw)]


def load_documents(path: str | Path) -> list[Document]:
    """Load documents from ``path``.

    Files ending in ``.jsonl`` hold one JSON object per line (blank lines are
    skipped). Any other file must hold a JSON array of objects.

    Raises:
        DocumentLoadError: If the file cannot be read or parsed, or an entry
            is not a valid document.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise DocumentLoadError(f"Failed to read {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise DocumentLoadError(f"Failed to decode {path}: {e}") from e

    if path.suffix == ".jsonl":
        documents = _load_jsonl(path, text)
    else:
        documents = _load_json(path, text)

    logger.debug("Loaded %d documents from %s", len(documents), path)
    return documents
