# wikiquery/utils.py
from __future__ import annotations

from wikiquery.config import DEFAULT_MAX_CONTENT_CHARS, TRUNCATION_NOTICE


def strip_html(text: str) -> str:
    """
    Remove tags from an HTML-bearing snippet by deleting each '<' ... '>' span.

    This is a lexical strip, not an HTML parser:
    entities (e.g. '&amp;') are left as-is, a '>' inside an attribute value
    ends the tag early, and an unterminated '<' is kept along with the rest.
    """
    result = text
    while True:
        start = result.find("<")
        if start == -1:
            break
        end = result.find(">", start)
        if end == -1:
            break
        result = result[:start] + result[end + 1 :]
    return result


def truncate_content(content: str, limit: int = DEFAULT_MAX_CONTENT_CHARS) -> str:
    """
    Keep the first `limit` characters and append a notice if content is longer.
    """
    if len(content) <= limit:
        return content
    return content[:limit] + TRUNCATION_NOTICE
