# wikiquery/envelope.py
from __future__ import annotations
from typing import Any, Mapping

from wikiquery.datatypes import (
    Page,
    QueryEnvelope,
    QueryResult,
    Revision,
    SearchInfo,
    SearchResult,
)
from wikiquery.errors import DecodeError

# Key holding revision content in the legacy (formatversion=1) JSON format
CONTENT_KEY = "*"


def _expect_mapping(value: Any, where: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise DecodeError(f"Expected an object at {where}, got {type(value).__name__}")
    return value


def _expect_list(value: Any, where: str) -> list[Any]:
    if not isinstance(value, list):
        raise DecodeError(f"Expected an array at {where}, got {type(value).__name__}")
    return value


def parse_search_result(item: Any) -> SearchResult:
    p = _expect_mapping(item, "query.search[]")
    return SearchResult(
        ns=int(p.get("ns", 0)),
        title=p.get("title") or "",
        page_id=int(p.get("pageid", 0)),
        size=int(p.get("size", 0)),
        word_count=int(p.get("wordcount", 0)),
        snippet=p.get("snippet") or "",
        timestamp=p.get("timestamp") or "",
    )


def parse_revision(item: Any) -> Revision:
    r = _expect_mapping(item, "revisions[]")
    return Revision(
        content_format=r.get("contentformat") or "",
        content_model=r.get("contentmodel") or "",
        content=r.get(CONTENT_KEY) or "",
    )


def parse_page(item: Any) -> Page:
    """
    Build a Page from one value of query.pages.
    MediaWiki marks unknown titles with empty-string 'missing'/'invalid' keys,
    so presence is what matters, not the value.
    """
    p = _expect_mapping(item, "query.pages{}")
    revisions = tuple(
        parse_revision(r) for r in _expect_list(p.get("revisions", []), "revisions")
    )
    return Page(
        page_id=int(p.get("pageid", 0)),
        ns=int(p.get("ns", 0)),
        title=p.get("title") or "",
        revisions=revisions,
        missing="missing" in p,
        invalid="invalid" in p,
    )


def parse_query(data: Any) -> QueryResult:
    q = _expect_mapping(data, "query")

    search_info: SearchInfo | None = None
    if "searchinfo" in q:
        info = _expect_mapping(q["searchinfo"], "query.searchinfo")
        search_info = SearchInfo(total_hits=int(info.get("totalhits", 0)))

    search: tuple[SearchResult, ...] | None = None
    if q.get("search") is not None:
        search = tuple(
            parse_search_result(item)
            for item in _expect_list(q["search"], "query.search")
        )

    pages: dict[str, Page] | None = None
    if q.get("pages") is not None:
        raw_pages = _expect_mapping(q["pages"], "query.pages")
        # dict keeps the document order of the JSON object
        pages = {str(key): parse_page(value) for key, value in raw_pages.items()}

    return QueryResult(search_info=search_info, search=search, pages=pages)


def parse_envelope(data: Any) -> QueryEnvelope:
    """
    Second decoding phase: turn the generic JSON structure into a QueryEnvelope.
    Raises DecodeError if the JSON does not have the expected shape.
    """
    top = _expect_mapping(data, "top level")
    try:
        query = parse_query(top["query"]) if top.get("query") is not None else None
    except (TypeError, ValueError) as exc:
        # int() on a non-numeric field
        raise DecodeError(f"Malformed field in response: {exc}") from exc
    return QueryEnvelope(query=query)
