"""Tests for the console report."""

import io
from pathlib import Path

from rich.console import Console

from conftest import active, include, write
from snipper.reconcile.engine import reconcile
from snipper.report import build_table, flag_summary, render_report
from snipper.snippet import Snippet


def _render(snippets, **kwargs) -> str:
    buf = io.StringIO()
    render_report(snippets, Console(file=buf, width=120, color_system=None), **kwargs)
    return buf.getvalue()


class TestFlagSummary:
    def test_all_flags(self):
        s = Snippet("foo", found_in_source=True, found_in_document=True,
                    found_as_materialized_file=True, active=True)
        assert flag_summary(s) == "S D M A"

    def test_inactive(self):
        s = Snippet("foo", found_in_source=True, active=False)
        assert flag_summary(s) == "S - - I"

    def test_document_only(self):
        assert flag_summary(Snippet("foo", found_in_document=True)) == "- D - -"


class TestRenderReport:
    def test_rows_in_order_with_source_file_name(self):
        snippets = [
            Snippet("alpha", source_file=Path("deep/dir/a.cpp"), found_in_source=True, active=True),
            Snippet("beta", found_in_document=True),
        ]
        out = _render(snippets)
        assert "Snippet name" in out and "Source file" in out
        assert out.index("alpha") < out.index("beta")
        assert "1." in out and "2." in out
        assert "a.cpp" in out
        assert "deep/dir" not in out

    def test_names_are_not_markup(self):
        out = _render([Snippet("[bold]x[/bold]", found_in_document=True)])
        assert "[bold]x[/bold]" in out

    def test_description_column(self):
        s = Snippet("foo", description="fast path", found_in_source=True, active=True)
        assert "fast path" not in _render([s])
        assert "fast path" in _render([s], show_description=True)

    def test_table_columns(self):
        table = build_table([], show_description=True)
        assert [c.header for c in table.columns] == [
            "#", "Snippet name", "Flags", "Source file", "Description",
        ]

    def test_report_identical_across_runs(self, dirs):
        source, target, latex = dirs
        write(source / "a.cpp", active("b", "\n") + active("a", "\n"))
        write(latex / "d.tex", include("a") + include("c"))
        first = _render(reconcile(source, target, latex).snippets)
        second = _render(reconcile(source, target, latex).snippets)
        assert first == second
