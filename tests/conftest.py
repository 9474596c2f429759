"""Pytest configuration and shared fixtures."""

from typing import Any
from unittest.mock import MagicMock

import pytest
import requests

from wikiquery.logger import configure_logging
from wikiquery.wiki_client import WikiClient

TEST_API_URL = "https://wiki.example.org/api.php"


@pytest.fixture(autouse=True)
def reset_logging() -> None:
    """Point logging at the current stderr; CliRunner swaps it per invoke."""
    configure_logging()


def make_response(
    payload: Any = None, status_code: int = 200, text: str | None = None
) -> MagicMock:
    """Build a stand-in for requests.Response.

    Args:
        payload: Object returned by .json()
        status_code: HTTP status code
        text: Raw body; when given, .json() raises like requests does on bad JSON
    """
    resp = MagicMock(spec=requests.Response)
    resp.status_code = status_code
    if text is not None:
        resp.json.side_effect = requests.exceptions.JSONDecodeError(
            "Expecting value", text, 0
        )
    else:
        resp.json.return_value = payload
    return resp


@pytest.fixture
def session() -> MagicMock:
    """Mocked requests.Session."""
    return MagicMock(spec=requests.Session)


@pytest.fixture
def client(session: MagicMock) -> WikiClient:
    """WikiClient wired to the mocked session."""
    return WikiClient(api_url=TEST_API_URL, session=session)


@pytest.fixture
def search_payload() -> dict[str, Any]:
    """A list=search response with two hits."""
    return {
        "batchcomplete": "",
        "query": {
            "searchinfo": {"totalhits": 42},
            "search": [
                {
                    "ns": 0,
                    "title": "Alpha",
                    "pageid": 101,
                    "size": 2048,
                    "wordcount": 300,
                    "snippet": 'the <span class="searchmatch">alpha</span> page',
                    "timestamp": "2024-01-31T12:00:00Z",
                },
                {
                    "ns": 0,
                    "title": "Beta",
                    "pageid": 102,
                    "size": 512,
                    "wordcount": 80,
                    "snippet": "beta &amp; more",
                    "timestamp": "2023-06-01T08:30:00Z",
                },
            ],
        },
    }


@pytest.fixture
def page_payload() -> dict[str, Any]:
    """A prop=revisions response holding one page."""
    return {
        "batchcomplete": "",
        "query": {
            "pages": {
                "23528": {
                    "pageid": 23528,
                    "ns": 0,
                    "title": "Main Page",
                    "revisions": [
                        {
                            "contentformat": "text/x-wiki",
                            "contentmodel": "wikitext",
                            "*": "'''Welcome''' to [[the wiki]].",
                        }
                    ],
                }
            }
        },
    }
