# wikiquery/datatypes.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Mapping


@dataclass(frozen=True, slots=True)
class SearchInfo:
    """
    Search metadata (list=search 'searchinfo')
    """

    total_hits: int


@dataclass(frozen=True, slots=True)
class SearchResult:
    """
    A single search hit (list=search).
    snippet still carries the API's highlight markup.
    """

    ns: int
    title: str
    page_id: int
    size: int  # bytes
    word_count: int
    snippet: str
    timestamp: str  # e.g. "2024-01-31T12:00:00Z"


@dataclass(frozen=True, slots=True)
class Revision:
    """
    One stored version of a page (rvprop=content).
    """

    content_format: str  # e.g. "text/x-wiki"
    content_model: str  # e.g. "wikitext"
    content: str


@dataclass(frozen=True, slots=True)
class Page:
    """
    A wiki page with zero or more revisions (prop=revisions).
    missing/invalid mirror MediaWiki's markers for titles that
    do not resolve to a page; such pages carry no revisions.
    """

    page_id: int
    ns: int
    title: str
    revisions: tuple[Revision, ...] = ()
    missing: bool = False
    invalid: bool = False

    @property
    def content(self) -> str | None:
        """
        Content of the first revision, or None if there is none.
        """
        if not self.revisions:
            return None
        return self.revisions[0].content


@dataclass(frozen=True, slots=True)
class QueryResult:
    """
    The 'query' section. A field is None when its section was absent,
    which is distinct from present-but-empty.
    """

    search_info: SearchInfo | None = None
    search: tuple[SearchResult, ...] | None = None
    pages: Mapping[str, Page] | None = None  # keyed by page id string


@dataclass(frozen=True, slots=True)
class QueryEnvelope:
    """
    The outer response object.
    """

    query: QueryResult | None = None
