"""Recursive file discovery that tolerates missing and unreadable directories."""

import os
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class SkippedDirectory:
    path: str
    reason: str


@dataclass(frozen=True)
class FileDiscovery:
    """Files found under a root.

    root_found is False when the root does not exist, is not a directory, or
    cannot be reached or listed. Unreadable sub-directories are recorded in
    skipped_dirs and their contents are left out.
    """

    root_found: bool
    files: list[Path] = field(default_factory=list)
    skipped_dirs: list[SkippedDirectory] = field(default_factory=list)


def find_files(root: Path, suffix: str) -> FileDiscovery:
    """Return every file under root whose name ends with suffix, in sorted order."""
    try:
        if not root.is_dir():
            return FileDiscovery(root_found=False)
    except OSError:
        # A parent of the root cannot be traversed.
        return FileDiscovery(root_found=False)

    errors: list[OSError] = []
    files: list[Path] = []
    for dirpath, _dirnames, filenames in os.walk(root, onerror=errors.append):
        for name in filenames:
            if name.endswith(suffix):
                files.append(Path(dirpath) / name)

    skipped = [
        SkippedDirectory(path=str(err.filename), reason=str(err)) for err in errors
    ]
    if any(entry.path == str(root) for entry in skipped):
        return FileDiscovery(root_found=False)

    return FileDiscovery(root_found=True, files=sorted(files), skipped_dirs=skipped)
