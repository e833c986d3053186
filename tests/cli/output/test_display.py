"""Tests for cli/output/display.py — rich rendering of reports."""

import io

from rich.console import Console

from ccwatt.cli.output.display import render_no_data, render_report
from tests.cli.output.helpers import make_report, make_result


def _console() -> tuple[Console, io.StringIO]:
    buffer = io.StringIO()
    return Console(file=buffer, width=100, color_system=None), buffer


def _render(**result_kwargs) -> str:
    console, buffer = _console()
    render_report(console, make_report(result=make_result(**result_kwargs)))
    return buffer.getvalue()


class TestRenderReport:
    def test_contains_headings(self) -> None:
        output = _render()

        assert "ENVIRONMENTAL IMPACT" in output
        assert "USAGE REPORT" in output

    def test_contains_values(self) -> None:
        output = _render()

        assert "12.3 Wh" in output
        assert "6.2 g" in output
        assert "claude-sonnet-4" in output
        assert "1.5K" in output

    def test_model_markup_is_escaped(self) -> None:
        output = _render(model="claude[beta]")

        assert "claude[beta]" in output

    def test_reasoning_row_only_when_present(self) -> None:
        assert "Reasoning" not in _render()
        assert "Reasoning" in _render(reasoning_tokens=42)

    def test_per_source_session_counts(self) -> None:
        output = _render()

        assert "Claude Code: 2" in output
        assert "OpenCode: 1" in output

    def test_sources_without_sessions_are_omitted(self) -> None:
        console, buffer = _console()
        render_report(console, make_report(opencode_sessions=0))

        assert "Claude Code: 2" in buffer.getvalue()
        assert "OpenCode" not in buffer.getvalue()


class TestTrees:
    def test_zero_tree_days_is_a_sprout(self) -> None:
        assert "A tiny sprout" in _render(tree_days=0.0)

    def test_single_tree_day(self) -> None:
        assert "1 tree-day needed" in _render(tree_days=0.4)

    def test_few_tree_days(self) -> None:
        assert "4 tree-days needed" in _render(tree_days=3.5)

    def test_scaled_display_from_ten_trees(self) -> None:
        output = _render(tree_days=25.0)

        assert "🌳 = 10 trees | 25 tree-days needed" in output
        assert "working overtime" not in output

    def test_overflow_beyond_fifteen_rows(self) -> None:
        output = _render(tree_days=2000.0)

        assert "...and 500 more trees working overtime" in output
        assert "2,000 tree-days needed" in output


class TestRenderNoData:
    def test_distinct_no_data_view(self) -> None:
        console, buffer = _console()
        render_no_data(console)
        output = buffer.getvalue()

        assert "No carbon footprint yet" in output
        assert "No AI usage data found" in output
        assert "Claude Code, OpenCode" in output
        assert "Tokens" not in output
