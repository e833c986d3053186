"""Output modes recognized by the presentation layer."""

from enum import StrEnum


class OutputMode(StrEnum):
    DEFAULT = "default"  # full themed report
    JSON = "json"  # machine-readable dump of the result plus metadata
    QUIET = "quiet"  # glyph-only summary


def resolve_output_mode(json_flag: bool, quiet_flag: bool) -> OutputMode:
    """JSON wins when both flags are set."""
    if json_flag:
        return OutputMode.JSON
    if quiet_flag:
        return OutputMode.QUIET
    return OutputMode.DEFAULT
