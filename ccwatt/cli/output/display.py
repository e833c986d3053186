"""Rich terminal display — environmental impact trees plus a boxed usage report."""

import math

from rich import box
from rich.console import Console, Group
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ccwatt.cli.output.formatting import (
    SOURCE_LABELS,
    format_co2,
    format_energy,
    format_number,
    provider_glyph,
    tree_count,
)
from ccwatt.energy.domain.result import EnergyResult
from ccwatt.report.domain.report import UsageReport

_TREE = "🌳"
_SPROUT = "🌱"
_INDENT = "     "
# One glyph per tree below this count, one glyph per ten trees from it on.
_SCALE_THRESHOLD = 10
_TREES_PER_GLYPH = 10
_GLYPHS_PER_ROW = 10
_MAX_ROWS = 15
_PANEL_WIDTH = 47


def _heading(console: Console) -> None:
    console.print()
    console.print("  🌍 ENVIRONMENTAL IMPACT", style="bold green")
    console.print("  " + "─" * 41, style="grey50")
    console.print()


def _tree_rows(count: int) -> list[str]:
    glyphs = math.ceil(count / _TREES_PER_GLYPH)
    rows = min(math.ceil(glyphs / _GLYPHS_PER_ROW), _MAX_ROWS)
    return [
        _TREE * min(_GLYPHS_PER_ROW, glyphs - row * _GLYPHS_PER_ROW)
        for row in range(rows)
    ]


def _render_trees(console: Console, result: EnergyResult) -> None:
    count = tree_count(result.tree_days)

    if count == 0:
        console.print(_INDENT + _SPROUT, style="green")
        console.print(f"{_INDENT}A tiny sprout. You're eco-friendly!", style="grey50")
        return

    if count < _SCALE_THRESHOLD:
        plural = "" if count == 1 else "s"
        console.print(_INDENT + _TREE * count, style="green")
        console.print(
            f"{_INDENT}{count} tree-day{plural} needed to absorb your CO2",
            style="grey50",
        )
        return

    for row in _tree_rows(count):
        console.print(_INDENT + row, style="green")

    shown = _MAX_ROWS * _GLYPHS_PER_ROW * _TREES_PER_GLYPH
    if count > shown:
        console.print(
            f"{_INDENT}...and {count - shown:,} more trees working overtime",
            style="yellow",
        )
    console.print(
        f"{_INDENT}{_TREE} = {_TREES_PER_GLYPH} trees | {count:,} tree-days needed",
        style="grey50",
    )


def _report_table(result: EnergyResult) -> Table:
    table = Table.grid(padding=(0, 1))
    table.add_column()
    table.add_column(justify="right")

    table.add_row(" ⚡ Power", f"[bold yellow]{format_energy(result.energy_wh)}[/]")
    table.add_row(" 💨 CO2", f"[bold cyan]{format_co2(result.co2_grams)}[/]")
    table.add_row(
        " 🌳 Trees", f"[bold green]{tree_count(result.tree_days):,} days[/]"
    )
    glyph = provider_glyph(result.provider)
    table.add_row(f" {glyph} Model", escape(result.model))
    table.add_row("", "")
    table.add_row(" 📊 Tokens", "")
    table.add_row("    Input", format_number(result.input_tokens))
    table.add_row("    Output", format_number(result.output_tokens))
    table.add_row("    Cache", format_number(result.cache_tokens))
    if result.reasoning_tokens:
        table.add_row("    Reasoning", format_number(result.reasoning_tokens))
    table.add_row(
        "    [bold]Total[/]", f"[bold white]{format_number(result.total_tokens)}[/]"
    )
    return table


def _sessions_line(report: UsageReport) -> str:
    parts = [
        f"{SOURCE_LABELS[source]}: {count}"
        for source, count in report.source_counts.items()
        if count > 0
    ]
    if parts:
        return "  📁 " + "  ".join(parts)
    return f"  📁 Analyzed {report.session_count} sessions"


def render_report(console: Console, report: UsageReport) -> None:
    """Render the full themed report for a non-empty UsageReport."""
    _heading(console)
    _render_trees(console, report.result)
    console.print()
    console.print()
    console.print(
        Panel(
            _report_table(report.result),
            title="[bold white]⚡ USAGE REPORT[/]",
            title_align="left",
            box=box.HEAVY,
            border_style="grey50",
            width=_PANEL_WIDTH,
        )
    )
    console.print()
    console.print(_sessions_line(report), style="grey50")
    console.print()


def render_no_data(console: Console) -> None:
    """Render the distinct state shown when no source yielded any session."""
    _heading(console)
    console.print(_INDENT + _SPROUT, style="green")
    console.print(
        f"{_INDENT}No carbon footprint yet. Earth is happy!", style="grey50"
    )
    console.print()
    console.print()
    supported = ", ".join(label.split(" ", 1)[1] for label in SOURCE_LABELS.values())
    console.print(
        Panel(
            Group(
                Text(" 🔍 No AI usage data found", style="yellow"),
                Text("    Supported:", style="grey50"),
                Text(f"    {supported}", style="grey50"),
            ),
            title="[bold white]⚡ USAGE REPORT[/]",
            title_align="left",
            box=box.HEAVY,
            border_style="grey50",
            width=_PANEL_WIDTH,
        )
    )
    console.print()
