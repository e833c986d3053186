"""Claude Code scanner — reads per-session JSONL transcripts under ~/.claude/projects."""

import json
from pathlib import Path
from urllib.parse import unquote

from ccwatt.scan.domain.observer import ScanObserver
from ccwatt.scan.domain.scan_result import ScanResult
from ccwatt.scan.domain.session import SessionInfo, SessionSource, sort_newest_first
from ccwatt.scan.infrastructure.paths import default_claude_code_root
from ccwatt.scan.infrastructure.tally import SessionTally, file_mtime, token_count
from ccwatt.scan.infrastructure.walker import find_files
from ccwatt.usage.domain.usage import UNKNOWN_LABEL

_SUFFIX = ".jsonl"
_PROVIDER = "anthropic"

# Placeholder model Claude Code writes for locally generated messages.
_SYNTHETIC_MODEL = "<synthetic>"


class ClaudeCodeScanner:
    """Builds one SessionInfo per JSONL transcript file.

    Satisfies the SessionScanner protocol structurally.
    """

    def __init__(self, observer: ScanObserver, root: Path | None = None) -> None:
        self._observer = observer
        self._root = root if root is not None else default_claude_code_root()

    @property
    def source(self) -> SessionSource:
        return SessionSource.CLAUDE_CODE

    @property
    def root(self) -> Path:
        return self._root

    def scan(self) -> ScanResult:
        """
        Scan every transcript under the root.

        A missing root yields an empty result. Files that cannot be read are
        skipped, as are lines that are not valid JSON. Transcripts without
        any usage-bearing record produce no session.
        """
        source = self.source.value
        root = str(self._root)
        self._observer.scan_started(source=source, root=root)

        discovery = find_files(root=self._root, suffix=_SUFFIX)
        if not discovery.root_found:
            self._observer.scan_root_missing(source=source, root=root)
            return self._completed(
                ScanResult(source=self.source, root=root, root_found=False)
            )

        for skipped_dir in discovery.skipped_dirs:
            self._observer.scan_directory_skipped(
                source=source, path=skipped_dir.path, reason=skipped_dir.reason
            )

        sessions: list[SessionInfo] = []
        files_skipped = 0
        records_skipped = 0

        for path in discovery.files:
            try:
                tally, skipped = self._parse_file(path=path)
                tally.touch(file_mtime(path))
            except (OSError, UnicodeDecodeError) as exc:
                files_skipped += 1
                self._observer.scan_file_skipped(
                    source=source, path=str(path), reason=str(exc)
                )
                continue

            records_skipped += skipped
            if tally.message_count == 0 or tally.last_modified is None:
                continue

            sessions.append(
                SessionInfo(
                    path=str(path),
                    project_name=self._project_name(path=path),
                    usage=tally.to_usage(),
                    message_count=tally.message_count,
                    last_modified=tally.last_modified,
                    source=self.source,
                )
            )

        return self._completed(
            ScanResult(
                source=self.source,
                root=root,
                root_found=True,
                sessions=sort_newest_first(sessions),
                files_scanned=len(discovery.files),
                directories_skipped=len(discovery.skipped_dirs),
                files_skipped=files_skipped,
                records_skipped=records_skipped,
            )
        )

    def _parse_file(self, path: Path) -> tuple[SessionTally, int]:
        """Accumulate every record of one transcript. Returns (tally, skipped line count)."""
        tally = SessionTally(provider=_PROVIDER)
        skipped = 0

        with open(path, encoding="utf-8") as fh:
            for line_number, line in enumerate(fh, start=1):
                if not line.strip():
                    continue
                try:
                    data = json.loads(line)
                except json.JSONDecodeError as exc:
                    skipped += 1
                    self._observer.scan_record_skipped(
                        source=self.source.value,
                        path=str(path),
                        line_number=line_number,
                        reason=str(exc),
                    )
                    continue
                _apply_record(tally=tally, data=data)

        return tally, skipped

    def _project_name(self, path: Path) -> str:
        """Decode the project directory name, e.g. '-Users-me-app' -> '/Users/me/app'."""
        parts = path.relative_to(self._root).parts
        if len(parts) < 2:
            return UNKNOWN_LABEL
        return unquote(parts[0].replace("-", "/"))

    def _completed(self, result: ScanResult) -> ScanResult:
        self._observer.scan_completed(
            source=result.source.value,
            root=result.root,
            total_sessions=len(result.sessions),
            files_scanned=result.files_scanned,
            directories_skipped=result.directories_skipped,
            files_skipped=result.files_skipped,
            records_skipped=result.records_skipped,
        )
        return result


def _apply_record(tally: SessionTally, data: object) -> None:
    if not isinstance(data, dict):
        return
    message = data.get("message")
    if not isinstance(message, dict):
        return

    usage = message.get("usage")
    if isinstance(usage, dict):
        tally.add_message(
            input_tokens=token_count(usage, "input_tokens"),
            output_tokens=token_count(usage, "output_tokens"),
            cache_creation_tokens=token_count(usage, "cache_creation_input_tokens"),
            cache_read_tokens=token_count(usage, "cache_read_input_tokens"),
        )

    model = message.get("model")
    if isinstance(model, str) and model and model != _SYNTHETIC_MODEL:
        tally.model = model
