"""In-memory document store."""
from __future__ import annotations

import logging
import threading
import uuid
from collections.abc import Callable

from docregistry.exceptions import IdGenerationError
from docregistry.matching import matches
from docregistry.models import Document, SearchRequest

logger = logging.getLogger(__name__)

MAX_ID_ATTEMPTS = 100


def generate_document_id() -> str:
    """Return a random identifier for a new document."""
    return str(uuid.uuid4())


def _sort_key(document: Document) -> tuple:
    return (document.created, document.id or "")


class DocumentStore:
    """Thread-safe keyed store for documents.

    Documents are frozen, so the instances handed back to callers are the same
    ones the store keeps. Nobody can mutate them, which makes sharing safe.
    """

    def __init__(self, id_factory: Callable[[], str] | None = None):
        self._id_factory = id_factory or generate_document_id
        self._lock = threading.Lock()
        self._documents: dict[str, Document] = {}
        # Every id handed out by this instance, so a generated id is never reused
        self._issued_ids: set[str] = set()

    def _new_id(self) -> str:
        """Generate an id not issued or held before. Caller holds the lock.

        Raises:
            IdGenerationError: If the id factory keeps returning empty or used ids.
        """
        for _ in range(MAX_ID_ATTEMPTS):
            doc_id = self._id_factory()
            if doc_id and doc_id not in self._issued_ids and doc_id not in self._documents:
                self._issued_ids.add(doc_id)
                return doc_id
            logger.debug("Discarding unusable generated id %r", doc_id)
        raise IdGenerationError(
            f"No unused document id after {MAX_ID_ATTEMPTS} attempts"
        )

    def save(self, document: Document) -> Document:
        """Insert or replace a document, assigning an id when it has none.

        The input is left untouched; the returned copy carries the id.
        Re-saving a document with an existing id replaces it entirely.
        """
        with self._lock:
            if not document.id:
                document = document.model_copy(update={"id": self._new_id()})
            replaced = document.id in self._documents
            self._documents[document.id] = document

        logger.debug("%s document %s", "Replaced" if replaced else "Inserted", document.id)
        return document

    def find_by_id(self, doc_id: str) -> Document | None:
        """Get a document by ID, or None if it is not stored."""
        with self._lock:
            return self._documents.get(doc_id)

    def search(self, request: SearchRequest | None = None) -> list[Document]:
        """Return stored documents matching ``request``.

        The scan works on a snapshot taken at the start of the call. Results
        are ordered by creation time, then id.
        """
        request = request or SearchRequest()
        with self._lock:
            snapshot = list(self._documents.values())

        results = [doc for doc in snapshot if matches(doc, request)]
        results.sort(key=_sort_key)
        logger.debug("Search matched %d of %d documents", len(results), len(snapshot))
        return results

    def count(self) -> int:
        """Return the number of documents."""
        with self._lock:
            return len(self._documents)

    def get_all(self) -> list[Document]:
        """Get all documents, ordered like search results."""
        with self._lock:
            snapshot = list(self._documents.values())
        return sorted(snapshot, key=_sort_key)

    def __len__(self) -> int:
        return self.count()
