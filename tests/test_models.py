"""Tests for the domain entities."""
from __future__ import annotations

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from docregistry.models import Author, Document, SearchRequest


class TestDocument:
    """Tests for the Document model."""

    def test_id_is_optional(self):
        doc = Document(title="t", content="c")
        assert doc.id is None

    def test_created_defaults_to_aware_now(self):
        doc = Document(title="t")
        assert doc.created.tzinfo is not None

    def test_naive_created_is_treated_as_utc(self):
        doc = Document(created=datetime(2024, 1, 1, 12, 0, 0))
        assert doc.created == datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)

    def test_is_frozen(self):
        doc = Document(title="t")
        with pytest.raises(ValidationError):
            doc.title = "changed"

    def test_field_wise_equality(self):
        author = Author(id="1", name="John Doe")
        created = datetime(2024, 1, 1, tzinfo=timezone.utc)
        a = Document(id="x", title="t", content="c", author=author, created=created)
        b = Document(id="x", title="t", content="c", author=Author(id="1", name="John Doe"), created=created)
        assert a == b


class TestSearchRequest:
    """Tests for the SearchRequest model."""

    def test_all_fields_default_empty(self):
        request = SearchRequest()
        assert request.title_prefixes == []
        assert request.contains_contents == []
        assert request.author_ids == []
        assert request.created_from is None
        assert request.created_to is None

    def test_none_lists_become_empty(self):
        request = SearchRequest(title_prefixes=None, contains_contents=None, author_ids=None)
        assert request.title_prefixes == []
        assert request.contains_contents == []
        assert request.author_ids == []

    def test_naive_bounds_are_treated_as_utc(self):
        request = SearchRequest(created_from=datetime(2024, 1, 1))
        assert request.created_from.tzinfo == timezone.utc
