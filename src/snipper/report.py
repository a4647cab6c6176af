"""Console report of reconciled snippets."""

from __future__ import annotations

from typing import Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from snipper.snippet import Snippet


def flag_summary(snippet: Snippet) -> str:
    """Four-letter flag summary: S(ource) D(ocument) M(aterialized) A/I.

    The last letter is ``A`` for active and ``I`` for inactive source
    snippets, ``-`` when the snippet has no source region.
    """
    if snippet.found_in_source:
        state = "A" if snippet.active else "I"
    else:
        state = "-"
    return " ".join([
        "S" if snippet.found_in_source else "-",
        "D" if snippet.found_in_document else "-",
        "M" if snippet.found_as_materialized_file else "-",
        state,
    ])


def _flag_style(snippet: Snippet) -> str:
    if not snippet.found_in_source:
        return "red"
    if not snippet.found_in_document:
        return "yellow"
    return "green"


def build_table(snippets: Sequence[Snippet], show_description: bool = False) -> Table:
    table = Table(title="Snippets", show_header=True, header_style="bold cyan")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Snippet name", style="bold")
    table.add_column("Flags", justify="center")
    table.add_column("Source file")
    if show_description:
        table.add_column("Description", style="dim")

    for i, snippet in enumerate(snippets, start=1):
        row = [
            f"{i}.",
            Text(snippet.name),
            Text(flag_summary(snippet), style=_flag_style(snippet)),
            Text(snippet.source_file_name),
        ]
        if show_description:
            row.append(Text(snippet.description or ""))
        table.add_row(*row)

    return table


def render_report(
    snippets: Sequence[Snippet],
    console: Console | None = None,
    show_description: bool = False,
) -> None:
    """Print the snippet table followed by the flag legend."""
    console = console or Console()
    console.print(build_table(snippets, show_description))
    console.print(
        "[dim]Flags: S source  D document  M extracted file  A active / I inactive[/dim]"
    )
