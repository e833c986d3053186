"""JSON output — serializes a UsageReport plus run metadata."""

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from ccwatt.report.domain.report import UsageReport
from ccwatt.scan.domain.session import SessionSource


def build_json_payload(
    report: UsageReport, directories: Mapping[SessionSource, Path]
) -> dict[str, Any]:
    """Build the machine-readable payload.

    result is null when no source yielded any session, so consumers can tell
    "no data" apart from a zero-valued estimate.
    """
    return {
        "result": None if report.is_empty else report.result.model_dump(mode="json"),
        "session_count": report.session_count,
        "source_counts": {
            source.value: count for source, count in report.source_counts.items()
        },
        "directories": {
            source.value: str(path)
            for source, path in directories.items()
            if source in report.source_counts
        },
    }
