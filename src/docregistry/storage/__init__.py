"""Storage module for docregistry."""
from docregistry.storage.document_store import DocumentStore, generate_document_id

__all__ = ["DocumentStore", "generate_document_id"]
