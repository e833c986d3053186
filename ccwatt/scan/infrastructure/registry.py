"""Scanner registry — maps source names to the correct SessionScanner."""

from collections.abc import Iterable, Mapping
from pathlib import Path

from ccwatt.scan.domain.observer import ScanObserver
from ccwatt.scan.domain.scanner import SessionScanner
from ccwatt.scan.domain.session import SessionSource
from ccwatt.scan.infrastructure.claude_code import ClaudeCodeScanner
from ccwatt.scan.infrastructure.errors import UnsupportedSourceError
from ccwatt.scan.infrastructure.opencode import OpenCodeScanner


def parse_source(name: str) -> SessionSource:
    """Return the SessionSource called name.

    Raises:
        UnsupportedSourceError: if name is not a known source.
    """
    try:
        return SessionSource(name)
    except ValueError as exc:
        raise UnsupportedSourceError(source=name) from exc


def create_scanners(
    sources: Iterable[str],
    observer: ScanObserver,
    roots: Mapping[SessionSource, Path] | None = None,
) -> list[SessionScanner]:
    """Return one scanner per distinct source, in the order first requested.

    roots overrides the default directory of individual sources.

    Raises:
        UnsupportedSourceError: if any source is not a known source.
    """
    overrides = roots or {}
    scanners: list[SessionScanner] = []
    seen: set[SessionSource] = set()

    for name in sources:
        source = parse_source(name)
        if source in seen:
            continue
        seen.add(source)
        root = overrides.get(source)
        if source is SessionSource.CLAUDE_CODE:
            scanners.append(ClaudeCodeScanner(observer=observer, root=root))
        else:
            scanners.append(OpenCodeScanner(observer=observer, root=root))

    return scanners
