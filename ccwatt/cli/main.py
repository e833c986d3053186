"""CLI entrypoint for ccwatt — a single typer command that scans and reports."""

import json
import logging
import sys
from enum import StrEnum
from pathlib import Path

import structlog
import typer
from rich.console import Console

from ccwatt.cli.output.display import render_no_data, render_report
from ccwatt.cli.output.json_output import build_json_payload
from ccwatt.cli.output.mode import OutputMode, resolve_output_mode
from ccwatt.cli.output.quiet import render_quiet
from ccwatt.config.domain.config import CcwattConfig
from ccwatt.config.infrastructure.observer import StructlogConfigObserver
from ccwatt.config.infrastructure.yaml_loader import YamlConfigLoader
from ccwatt.core.errors import CcwattError
from ccwatt.report.application.reporter import UsageReporter
from ccwatt.report.domain.report import UsageReport
from ccwatt.report.infrastructure.observer import StructlogReportObserver
from ccwatt.scan.domain.session import SessionSource
from ccwatt.scan.infrastructure.observer import StructlogScanObserver
from ccwatt.scan.infrastructure.paths import (
    default_claude_code_root,
    default_opencode_root,
)
from ccwatt.scan.infrastructure.registry import create_scanners

app = typer.Typer(add_completion=False)


class LogFormat(StrEnum):
    CONSOLE = "console"
    JSON = "json"


def _configure_structlog(log_format: LogFormat, verbose: bool) -> None:
    """Configure structlog to write to stderr so stdout stays clean for --json."""
    if log_format is LogFormat.JSON:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.DEBUG if verbose else logging.WARNING
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def _load_config(config_path: Path | None) -> CcwattConfig:
    if config_path is None:
        return CcwattConfig()
    loader = YamlConfigLoader(observer=StructlogConfigObserver())
    return loader.load(path=config_path)


def _resolve_roots(
    config: CcwattConfig, claude_dir: Path | None, opencode_dir: Path | None
) -> dict[SessionSource, Path]:
    """Defaults, then config file roots, then command-line flags."""
    roots: dict[SessionSource, Path] = {
        SessionSource.CLAUDE_CODE: default_claude_code_root(),
        SessionSource.OPENCODE: default_opencode_root(),
    }
    roots.update(config.roots)
    if claude_dir is not None:
        roots[SessionSource.CLAUDE_CODE] = claude_dir.expanduser()
    if opencode_dir is not None:
        roots[SessionSource.OPENCODE] = opencode_dir.expanduser()
    return roots


def _build_report(reporter: UsageReporter, mode: OutputMode) -> UsageReport:
    """Run the reporter, with a spinner on stderr for the themed output only."""
    if mode is not OutputMode.DEFAULT:
        return reporter.build()

    err_console = Console(stderr=True)
    with err_console.status("Scanning AI usage data...", spinner="dots"):
        report = reporter.build()
    if not report.is_empty:
        err_console.print(f"[green]✔[/] Found {report.session_count} sessions")
    return report


def _render(
    report: UsageReport, mode: OutputMode, roots: dict[SessionSource, Path]
) -> None:
    if mode is OutputMode.JSON:
        payload = build_json_payload(report=report, directories=roots)
        typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
    elif mode is OutputMode.QUIET:
        typer.echo(render_quiet(report.result))
    elif report.is_empty:
        render_no_data(Console())
    else:
        render_report(Console(), report)


@app.command()
def main(
    json_output: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Show trees only"),
    sources: list[str] | None = typer.Option(
        None,
        "--source",
        "-s",
        help="Source to scan: 'claude-code' or 'opencode' (repeatable)",
    ),
    config_path: Path | None = typer.Option(
        None, "--config", "-c", help="Path to a ccwatt config YAML"
    ),
    claude_dir: Path | None = typer.Option(
        None, "--claude-dir", help="Claude Code projects directory"
    ),
    opencode_dir: Path | None = typer.Option(
        None, "--opencode-dir", help="OpenCode message storage directory"
    ),
    log_format: LogFormat = typer.Option(
        LogFormat.CONSOLE, "--log-format", help="Log format: 'console' or 'json'"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logs"),
) -> None:
    """How much power did your AI use? 🌳"""
    try:
        _configure_structlog(log_format=log_format, verbose=verbose)

        config = _load_config(config_path=config_path)
        roots = _resolve_roots(
            config=config, claude_dir=claude_dir, opencode_dir=opencode_dir
        )
        requested = sources or [source.value for source in config.sources]
        scanners = create_scanners(
            sources=requested, observer=StructlogScanObserver(), roots=roots
        )
        reporter = UsageReporter(
            scanners=scanners,
            observer=StructlogReportObserver(),
            energy_model=config.energy,
        )

        mode = resolve_output_mode(json_flag=json_output, quiet_flag=quiet)
        report = _build_report(reporter=reporter, mode=mode)
        _render(report=report, mode=mode, roots=roots)

    except KeyboardInterrupt:
        typer.echo("Scan interrupted.")
        sys.exit(1)
    except CcwattError as exc:
        typer.echo(str(exc))
        sys.exit(1)
    except Exception as exc:  # noqa: BLE001
        typer.echo(f"Unexpected error: {exc}\nPlease report this bug.")
        sys.exit(1)


if __name__ == "__main__":
    app()
