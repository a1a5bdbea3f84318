"""docregistry - In-memory document registry with multi-criteria search."""
from docregistry.models import Author, Document, SearchRequest
from docregistry.storage import DocumentStore

__version__ = "0.1.0"

__all__ = ["Author", "Document", "DocumentStore", "SearchRequest"]
