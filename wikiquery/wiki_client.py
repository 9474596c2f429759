# wikiquery/wiki_client.py
from __future__ import annotations
from typing import Any, Optional

import requests

from wikiquery import config
from wikiquery.datatypes import Page, QueryEnvelope, SearchResult
from wikiquery.envelope import parse_envelope
from wikiquery.errors import DecodeError, NotFoundError, ProtocolError, TransportError
from wikiquery.logger import get_logger

logger = get_logger(__name__)


class WikiClient:
    """
    Thin, typed client for a MediaWiki action API (action=query).

    Each public operation performs exactly one GET and blocks until it
    completes. The client owns one requests.Session for its lifetime;
    call close() (or use it as a context manager) to release it.

    Successful calls log through structlog at debug level, failures at
    warning level. Unconfigured structlog prints to stdout; call
    wikiquery.logger.configure_logging() first to route events to stderr.
    """

    def __init__(
        self,
        api_url: str = config.DEFAULT_API_URL,
        *,
        user_agent: str = config.DEFAULT_UA,
        timeout: Optional[float] = config.DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.api_url = api_url
        self.timeout = timeout
        if session is None:
            session = requests.Session()
            session.headers.update(
                {"User-Agent": user_agent, "Accept": "application/json"}
            )
        self._session = session

    def __enter__(self) -> WikiClient:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        self._session.close()

    def search(self, query: str, limit: int) -> list[SearchResult]:
        """
        Full-text search (list=search).

        - Neither query nor limit is validated locally; the server decides.
        - Raises NotFoundError if the response has no query/search section.
        - A present but empty section is a valid, empty result.
        """
        envelope = self._query(
            {
                "list": "search",
                "srsearch": query,
                "srlimit": str(limit),
            }
        )
        if envelope.query is None or envelope.query.search is None:
            raise NotFoundError(f"No search results section for {query!r}")

        results = list(envelope.query.search)
        logger.debug("search_completed", query=query, hits=len(results))
        return results

    def get_page_by_title(self, title: str) -> Page:
        """
        Fetch a page and its latest revision content by exact title.
        The title is sent verbatim (spaces included).
        """
        return self._get_page({"titles": title}, lookup=title)

    def get_page_by_id(self, page_id: int) -> Page:
        """
        Fetch a page and its latest revision content by numeric page id.
        """
        return self._get_page({"pageids": str(page_id)}, lookup=page_id)

    def _get_page(self, params: dict[str, str], *, lookup: object) -> Page:
        envelope = self._query({**params, "prop": "revisions", "rvprop": "content"})
        if envelope.query is None or not envelope.query.pages:
            raise NotFoundError(f"Page not found: {lookup!r}")

        # Single-title/single-id lookups yield at most one entry. If the API
        # ever returns more, which one is picked is unspecified.
        page = next(iter(envelope.query.pages.values()))
        logger.debug(
            "page_fetched",
            lookup=lookup,
            page_id=page.page_id,
            title=page.title,
            missing=page.missing,
        )
        return page

    def _query(self, params: dict[str, str]) -> QueryEnvelope:
        data = self._request({"action": "query", "format": "json", **params})

        # MediaWiki answers bad or empty parameters (e.g. srsearch="") with an
        # error object in a 200 response and no query section
        error = data.get("error") if isinstance(data, dict) else None
        if isinstance(error, dict):
            code = error.get("code")
            info = error.get("info") or "unknown API error"
            logger.warning("api_error", code=code, info=info)
            raise NotFoundError(f"API error ({code}): {info}", api_code=code)

        return parse_envelope(data)

    def _request(self, params: dict[str, str]) -> Any:
        """
        Issue one GET against the endpoint and decode the JSON body.
        requests percent-encodes params into the query string.
        """
        logger.debug("api_request", url=self.api_url, params=params)
        try:
            resp = self._session.get(self.api_url, params=params, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.warning("api_request_failed", url=self.api_url, error=str(exc))
            raise TransportError(f"Request to {self.api_url} failed: {exc}") from exc

        logger.debug("api_response", status=resp.status_code)
        if resp.status_code != requests.codes.ok:
            logger.warning(
                "api_request_failed", url=self.api_url, status=resp.status_code
            )
            raise ProtocolError(
                f"API request failed with status {resp.status_code}",
                status_code=resp.status_code,
            )

        try:
            return resp.json()
        except ValueError as exc:
            # requests.JSONDecodeError is a ValueError
            raise DecodeError(f"Response is not valid JSON: {exc}") from exc
