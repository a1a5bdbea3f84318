"""Search criteria evaluation.

A document matches a request when every populated criterion holds. Within a
single list criterion any one entry is enough. String comparisons are raw:
no case folding or trimming.
"""
from __future__ import annotations

from docregistry.models import Document, SearchRequest


def _matches_title(document: Document, prefixes: list[str]) -> bool:
    return any(document.title.startswith(prefix) for prefix in prefixes)


def _matches_content(document: Document, substrings: list[str]) -> bool:
    return any(substring in document.content for substring in substrings)


def _matches_author(document: Document, author_ids: list[str]) -> bool:
    if document.author is None:
        return False
    return document.author.id in author_ids


def matches(document: Document, request: SearchRequest) -> bool:
    """Return True if ``document`` satisfies ``request``.

    Args:
        document: The document to test.
        request: Search criteria. Empty lists and missing bounds are skipped.
    """
    if request.title_prefixes and not _matches_title(document, request.title_prefixes):
        return False

    if request.contains_contents and not _matches_content(document, request.contains_contents):
        return False

    if request.author_ids and not _matches_author(document, request.author_ids):
        return False

    # Both bounds are inclusive
    if request.created_from is not None and document.created < request.created_from:
        return False
    if request.created_to is not None and document.created > request.created_to:
        return False

    return True
