# wikiquery/cli/generic.py
from __future__ import annotations

from typing import Optional

import typer

from wikiquery import config
from wikiquery.cli.render import (
    print_error,
    print_page,
    print_page_json,
    print_search_results,
    print_search_results_json,
)
from wikiquery.datatypes import Page
from wikiquery.errors import WikiQueryError
from wikiquery.logger import configure_logging, get_logger
from wikiquery.wiki_client import WikiClient

logger = get_logger(__name__)

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    help="Search and read pages of a MediaWiki-based encyclopedia.",
)


@app.callback()
def main(
    ctx: typer.Context,
    api_url: str = typer.Option(
        config.DEFAULT_API_URL,
        "--api-url",
        envvar="WIKIQUERY_API_URL",
        help="MediaWiki api.php endpoint",
    ),
    timeout: Optional[float] = typer.Option(
        config.DEFAULT_TIMEOUT,
        "--timeout",
        envvar="WIKIQUERY_TIMEOUT",
        help="Request timeout in seconds (default: none)",
    ),
    log_level: str = typer.Option(
        config.DEFAULT_LOG_LEVEL,
        "--log-level",
        envvar="WIKIQUERY_LOG_LEVEL",
        help="Log level for stderr (DEBUG, INFO, WARNING, ...)",
    ),
) -> None:
    """
    Search and read pages of a MediaWiki-based encyclopedia.
    """
    configure_logging(log_level)

    # one client (and HTTP session) per process, closed on exit
    client = WikiClient(api_url=api_url, timeout=timeout)
    ctx.call_on_close(client.close)
    logger.debug("client_ready", api_url=api_url, timeout=timeout)
    ctx.obj = client


@app.command()
def search(
    ctx: typer.Context,
    query: str = typer.Argument(..., help="Search keywords"),
    limit: int = typer.Argument(
        config.DEFAULT_SEARCH_LIMIT, help="Number of results to return"
    ),
    json_out: bool = typer.Option(False, "--json", help="Emit JSON instead of table"),
) -> None:
    """
    Full-text search; lists title, page id, size and snippet of each hit.
    """
    client: WikiClient = ctx.obj
    try:
        results = client.search(query, limit)
    except WikiQueryError as exc:
        print_error("Search", exc)
        raise typer.Exit(code=1)

    if json_out:
        print_search_results_json(results)
        return
    print_search_results(query, results)


@app.command()
def view(
    ctx: typer.Context,
    title: list[str] = typer.Argument(..., help="Page title (words are joined)"),
    json_out: bool = typer.Option(False, "--json", help="Emit JSON output"),
) -> None:
    """
    Show a page's content by title.
    """
    client: WikiClient = ctx.obj
    full_title = " ".join(title)
    try:
        page = client.get_page_by_title(full_title)
    except WikiQueryError as exc:
        print_error("Fetching page", exc)
        raise typer.Exit(code=1)

    _show_page(page, json_out)


@app.command()
def viewid(
    ctx: typer.Context,
    page_id: int = typer.Argument(..., help="Numeric page id"),
    json_out: bool = typer.Option(False, "--json", help="Emit JSON output"),
) -> None:
    """
    Show a page's content by page id.
    """
    client: WikiClient = ctx.obj
    try:
        page = client.get_page_by_id(page_id)
    except WikiQueryError as exc:
        print_error("Fetching page", exc)
        raise typer.Exit(code=1)

    _show_page(page, json_out)


def _show_page(page: Page, json_out: bool) -> None:
    if json_out:
        print_page_json(page)
        return
    print_page(page, max_chars=config.DEFAULT_MAX_CONTENT_CHARS)
