"""OpenCode scanner — reads per-message JSON files and groups them by session."""

import json
from dataclasses import dataclass, field
from pathlib import Path, PurePath

from ccwatt.energy.domain.provider import infer_provider
from ccwatt.scan.domain.observer import ScanObserver
from ccwatt.scan.domain.scan_result import ScanResult
from ccwatt.scan.domain.session import SessionInfo, SessionSource, sort_newest_first
from ccwatt.scan.infrastructure.paths import default_opencode_root
from ccwatt.scan.infrastructure.tally import SessionTally, file_mtime, token_count
from ccwatt.scan.infrastructure.walker import find_files
from ccwatt.usage.domain.usage import UNKNOWN_LABEL

_SUFFIX = ".json"
_ASSISTANT_ROLE = "assistant"


@dataclass
class _OpenCodeSession:
    project_path: str
    tally: SessionTally = field(default_factory=SessionTally)


class OpenCodeScanner:
    """Builds one SessionInfo per OpenCode sessionID.

    Message files are visited in sorted path order. OpenCode message ids sort
    chronologically, so the last model/provider written is the latest one.

    Satisfies the SessionScanner protocol structurally.
    """

    def __init__(self, observer: ScanObserver, root: Path | None = None) -> None:
        self._observer = observer
        self._root = root if root is not None else default_opencode_root()

    @property
    def source(self) -> SessionSource:
        return SessionSource.OPENCODE

    @property
    def root(self) -> Path:
        return self._root

    def scan(self) -> ScanResult:
        """
        Scan every message file under the root and group usage by session.

        Only assistant messages with a tokens object contribute. A missing root
        yields an empty result; unreadable files and invalid JSON are skipped.
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

        grouped: dict[str, _OpenCodeSession] = {}
        files_skipped = 0
        records_skipped = 0

        for path in discovery.files:
            try:
                content = path.read_text(encoding="utf-8")
                modified = file_mtime(path)
            except (OSError, UnicodeDecodeError) as exc:
                files_skipped += 1
                self._observer.scan_file_skipped(
                    source=source, path=str(path), reason=str(exc)
                )
                continue

            try:
                message = json.loads(content)
            except json.JSONDecodeError as exc:
                records_skipped += 1
                self._observer.scan_record_skipped(
                    source=source,
                    path=str(path),
                    line_number=exc.lineno,
                    reason=str(exc),
                )
                continue

            if not _is_assistant_usage(message):
                continue

            session_id = str(message.get("sessionID") or UNKNOWN_LABEL)
            if session_id not in grouped:
                grouped[session_id] = _OpenCodeSession(
                    project_path=_project_path(message)
                )
            entry = grouped[session_id]
            _apply_message(tally=entry.tally, message=message)
            entry.tally.touch(modified)

        sessions: list[SessionInfo] = []
        for session_id, entry in grouped.items():
            last_modified = entry.tally.last_modified
            if entry.tally.message_count == 0 or last_modified is None:
                continue
            sessions.append(
                SessionInfo(
                    path=session_id,
                    project_name=PurePath(entry.project_path).name or UNKNOWN_LABEL,
                    usage=entry.tally.to_usage(),
                    message_count=entry.tally.message_count,
                    last_modified=last_modified,
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


def _is_assistant_usage(message: object) -> bool:
    return (
        isinstance(message, dict)
        and message.get("role") == _ASSISTANT_ROLE
        and isinstance(message.get("tokens"), dict)
    )


def _project_path(message: dict) -> str:
    """Prefer the worktree root, then the working directory."""
    path_info = message.get("path")
    if isinstance(path_info, dict):
        for key in ("root", "cwd"):
            value = path_info.get(key)
            if isinstance(value, str) and value:
                return value
    return UNKNOWN_LABEL


def _optional_str(message: dict, key: str) -> str | None:
    value = message.get(key)
    if isinstance(value, str) and value:
        return value
    return None


def _apply_message(tally: SessionTally, message: dict) -> None:
    tokens = message["tokens"]
    cache = tokens.get("cache")
    tally.add_message(
        input_tokens=token_count(tokens, "input"),
        output_tokens=token_count(tokens, "output"),
        reasoning_tokens=token_count(tokens, "reasoning"),
        cache_creation_tokens=token_count(cache, "write"),
        cache_read_tokens=token_count(cache, "read"),
    )

    model_id = _optional_str(message, "modelID")
    provider_id = _optional_str(message, "providerID")
    if model_id:
        tally.model = model_id
    if provider_id or model_id:
        tally.provider = infer_provider(provider_id=provider_id, model_id=model_id)
