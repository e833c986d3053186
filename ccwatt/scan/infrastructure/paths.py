"""Default on-disk locations of each supported tool's data, relative to the home directory."""

from pathlib import Path


def _home(home: Path | None) -> Path:
    return home if home is not None else Path.home()


def default_claude_dir(home: Path | None = None) -> Path:
    return _home(home) / ".claude"


def default_claude_code_root(home: Path | None = None) -> Path:
    """Directory holding one sub-directory of JSONL transcripts per project."""
    return default_claude_dir(home) / "projects"


def default_opencode_dir(home: Path | None = None) -> Path:
    return _home(home) / ".local" / "share" / "opencode"


def default_opencode_root(home: Path | None = None) -> Path:
    """Directory holding one JSON file per OpenCode message."""
    return default_opencode_dir(home) / "storage" / "message"
