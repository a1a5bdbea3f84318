"""Pytest configuration and fixtures for docregistry tests."""
from __future__ import annotations

import json
from collections.abc import Iterator
from datetime import datetime, timezone
from pathlib import Path

import pytest

from docregistry.config import _get_config_cached
from docregistry.models import Author, Document
from docregistry.storage.document_store import DocumentStore

T0 = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def store() -> DocumentStore:
    """Create an empty document store."""
    return DocumentStore()


@pytest.fixture
def john() -> Author:
    return Author(id="1", name="John Doe")


@pytest.fixture
def jane() -> Author:
    return Author(id="2", name="Jane Roe")


@pytest.fixture
def sample_document(john: Author) -> Document:
    """Create an unsaved sample document."""
    return Document(
        title="Sample Title",
        content="Sample Content",
        author=john,
        created=T0,
    )


@pytest.fixture
def clean_config(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Clear DOCREGISTRY_* env vars and the config cache around a test."""
    monkeypatch.delenv("DOCREGISTRY_DEFAULT_FORMAT", raising=False)
    monkeypatch.delenv("DOCREGISTRY_VERBOSE", raising=False)
    _get_config_cached.cache_clear()
    yield
    _get_config_cached.cache_clear()


@pytest.fixture
def documents_file(tmp_path: Path) -> Path:
    """Write a small JSON array of documents to disk."""
    docs = [
        {
            "id": "a",
            "title": "Sample Title",
            "content": "Sample Content",
            "author": {"id": "1", "name": "John Doe"},
            "created": "2024-01-01T12:00:00Z",
        },
        {
            "id": "b",
            "title": "Other",
            "content": "Nothing here",
            "author": {"id": "2", "name": "Jane Roe"},
            "created": "2024-01-02T12:00:00Z",
        },
        {
            "id": "c",
            "title": "Sample Notes",
            "content": "Draft",
            "created": "2024-01-03T12:00:00Z",
        },
    ]
    path = tmp_path / "docs.json"
    path.write_text(json.dumps(docs), encoding="utf-8")
    return path
