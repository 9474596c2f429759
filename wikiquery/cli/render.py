# wikiquery/cli/render.py
from __future__ import annotations

import json
from dataclasses import asdict
from typing import Sequence

import typer
from rich import get_console, print
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from wikiquery.datatypes import Page, SearchResult
from wikiquery.errors import WikiQueryError
from wikiquery.utils import strip_html, truncate_content


def print_json(data: object) -> None:
    """
    Emit JSON verbatim; rich would wrap long strings and break the document.
    """
    typer.echo(json.dumps(data, indent=2, ensure_ascii=False))


def print_search_results(query: str, results: Sequence[SearchResult]) -> None:
    if not results:
        print(
            Panel.fit(
                f"[bold red]No matching results for:[/bold red] {escape(repr(query))}"
            )
        )
        return

    table = Table(title=Text(f"Found {len(results)} results for: {query!r}"))
    table.add_column("#", justify="right", style="bold")
    table.add_column("Title")
    table.add_column("Page ID", justify="right")
    table.add_column("Size", justify="right")
    table.add_column("Snippet")

    for i, r in enumerate(results, start=1):
        table.add_row(
            str(i),
            Text(r.title),
            str(r.page_id),
            f"{r.size:,}",
            Text(strip_html(r.snippet).replace("\n", " ")),
        )

    print(table)
    print(
        "[dim]Tip: use[/dim] [bold]viewid <page id>[/bold] [dim]to read a result.[/dim]"
    )


def print_search_results_json(results: Sequence[SearchResult]) -> None:
    print_json([asdict(r) for r in results])


def print_page(page: Page, max_chars: int) -> None:
    if page.missing or page.invalid or not page.title:
        print(Panel.fit(f"[bold red]Page not found:[/bold red] {escape(page.title)}"))
        return

    print(
        Panel.fit(
            f"[bold]{escape(page.title)}[/bold]\nPage ID: {page.page_id}",
            title="Page",
        )
    )

    content = page.content
    if not content:
        print("[bold yellow]Page content is empty.[/bold yellow]")
        return

    # wikitext is full of [[...]] and :name: sequences; print it literally
    get_console().print(
        truncate_content(content, max_chars),
        markup=False,
        emoji=False,
        highlight=False,
        soft_wrap=True,
    )


def print_page_json(page: Page) -> None:
    print_json(asdict(page))


def print_error(action: str, exc: WikiQueryError) -> None:
    print(
        Panel.fit(
            f"[bold red]{escape(action)} failed[/bold red] "
            f"[dim]({type(exc).__name__})[/dim]\n{escape(exc.message)}"
        )
    )
