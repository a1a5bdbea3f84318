"""Domain entities for docregistry."""
from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field, field_validator


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _as_utc(value: datetime | None) -> datetime | None:
    """Attach UTC to naive datetimes so every timestamp is comparable."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class Author(BaseModel):
    """Represents the author of a document."""
    id: str
    name: str

    model_config = {"frozen": True}


class Document(BaseModel):
    """Represents a document held by the registry.

    ``id`` may be missing or empty until the document is saved.
    """
    id: str | None = None
    title: str = ""
    content: str = ""
    author: Author | None = None
    created: datetime = Field(default_factory=_utcnow)

    model_config = {"frozen": True}

    @field_validator("created")
    @classmethod
    def _normalize_created(cls, value: datetime) -> datetime:
        return _as_utc(value)


class SearchRequest(BaseModel):
    """Search criteria; every field is optional.

    Empty lists and missing bounds place no constraint on the result.
    """
    title_prefixes: list[str] = Field(default_factory=list)
    contains_contents: list[str] = Field(default_factory=list)
    author_ids: list[str] = Field(default_factory=list)
    created_from: datetime | None = None
    created_to: datetime | None = None

    model_config = {"frozen": True}

    @field_validator("title_prefixes", "contains_contents", "author_ids", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return [] if value is None else value

    @field_validator("created_from", "created_to")
    @classmethod
    def _normalize_bounds(cls, value: datetime | None) -> datetime | None:
        return _as_utc(value)
