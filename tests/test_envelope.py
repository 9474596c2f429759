"""Tests for decoding JSON into the typed envelope."""

from typing import Any

import pytest

from wikiquery.datatypes import QueryEnvelope, SearchInfo
from wikiquery.envelope import parse_envelope, parse_page
from wikiquery.errors import DecodeError


def test_search_envelope(search_payload: dict[str, Any]) -> None:
    """Test that searchinfo and search are decoded and pages stays absent."""
    envelope = parse_envelope(search_payload)

    assert envelope.query is not None
    assert envelope.query.search_info == SearchInfo(total_hits=42)
    assert envelope.query.search is not None
    assert len(envelope.query.search) == 2
    assert envelope.query.pages is None


def test_page_envelope(page_payload: dict[str, Any]) -> None:
    """Test that pages are keyed by page id string and search stays absent."""
    envelope = parse_envelope(page_payload)

    assert envelope.query is not None
    assert envelope.query.search is None
    assert envelope.query.pages is not None
    assert list(envelope.query.pages) == ["23528"]
    assert envelope.query.pages["23528"].title == "Main Page"


def test_absent_query() -> None:
    """Test that a missing query section decodes to query=None."""
    assert parse_envelope({"batchcomplete": ""}) == QueryEnvelope(query=None)


def test_empty_search_is_not_absent() -> None:
    """Test that an empty search list is kept distinct from a missing one."""
    envelope = parse_envelope({"query": {"search": []}})

    assert envelope.query is not None
    assert envelope.query.search == ()


def test_page_without_revisions() -> None:
    """Test that a page with no revisions has no content."""
    page = parse_page({"pageid": 5, "ns": 0, "title": "Empty"})

    assert page.revisions == ()
    assert page.content is None
    assert page.missing is False


def test_invalid_title_marker() -> None:
    """Test that the invalid marker is detected by presence."""
    page = parse_page({"title": "<bad>", "invalid": "", "invalidreason": "x"})

    assert page.invalid is True
    assert page.page_id == 0


@pytest.mark.parametrize(
    "payload",
    [
        [],
        "not an object",
        {"query": []},
        {"query": {"search": {"a": 1}}},
        {"query": {"pages": ["1"]}},
        {"query": {"pages": {"1": {"revisions": "oops"}}}},
        {"query": {"search": [{"pageid": "abc"}]}},
    ],
    ids=[
        "top_level_list",
        "top_level_string",
        "query_list",
        "search_object",
        "pages_list",
        "revisions_string",
        "non_numeric_pageid",
    ],
)
def test_wrong_shapes_raise_decode_error(payload: Any) -> None:
    """Test that structurally wrong JSON raises DecodeError."""
    with pytest.raises(DecodeError):
        parse_envelope(payload)
