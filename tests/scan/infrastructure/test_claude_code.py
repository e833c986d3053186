"""Tests for the Claude Code JSONL scanner."""

import json
import os
from datetime import UTC, datetime
from pathlib import Path

import pytest

from ccwatt.scan.domain.session import SessionSource
from ccwatt.scan.infrastructure.claude_code import ClaudeCodeScanner
from tests.scan.denied_access import deny_listing, deny_traversal
from tests.scan.fake_observer import FakeScanObserver


def _assistant(
    model: str = "claude-sonnet-4-20250514",
    input_tokens: int = 10,
    output_tokens: int = 5,
    cache_creation: int = 0,
    cache_read: int = 0,
) -> dict:
    return {
        "type": "assistant",
        "message": {
            "model": model,
            "usage": {
                "input_tokens": input_tokens,
                "output_tokens": output_tokens,
                "cache_creation_input_tokens": cache_creation,
                "cache_read_input_tokens": cache_read,
            },
        },
    }


def _write_transcript(
    root: Path, project: str, name: str, lines: list[object], mtime: float | None = None
) -> Path:
    directory = root / project
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / name
    path.write_text(
        "\n".join(line if isinstance(line, str) else json.dumps(line) for line in lines)
        + "\n",
        encoding="utf-8",
    )
    if mtime is not None:
        os.utime(path, (mtime, mtime))
    return path


def _scan(root: Path) -> tuple:
    observer = FakeScanObserver()
    result = ClaudeCodeScanner(observer=observer, root=root).scan()
    return result, observer


class TestMissingRoot:
    """A missing root yields an empty result, never an error."""

    def test_no_sessions_and_root_not_found(self, tmp_path: Path) -> None:
        result, _ = _scan(tmp_path / "projects")

        assert result.sessions == []
        assert result.root_found is False
        assert result.source == SessionSource.CLAUDE_CODE

    def test_root_missing_event_emitted(self, tmp_path: Path) -> None:
        root = tmp_path / "projects"
        _, observer = _scan(root)

        assert len(observer.roots_missing) == 1
        assert observer.roots_missing[0].root == str(root)
        assert len(observer.completed) == 1
        assert observer.completed[0].total_sessions == 0


class TestPermissionDenied:
    """Access errors degrade to skips, never to a failed scan."""

    def test_untraversable_parent_reports_root_missing(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        root = tmp_path / "home" / "projects"
        _write_transcript(root, "-proj-a", "s1.jsonl", [_assistant()])
        deny_traversal(monkeypatch, root)

        result, observer = _scan(root)

        assert result.root_found is False
        assert result.sessions == []
        assert len(observer.roots_missing) == 1
        assert observer.completed[0].total_sessions == 0

    def test_unlistable_root_reports_root_missing(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        _write_transcript(tmp_path, "-proj-a", "s1.jsonl", [_assistant()])
        deny_listing(monkeypatch, tmp_path)

        result, observer = _scan(tmp_path)

        assert result.root_found is False
        assert len(observer.roots_missing) == 1
        assert observer.directories_skipped == []

    def test_unlistable_project_is_skipped_and_counted(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        _write_transcript(tmp_path, "-proj-a", "s1.jsonl", [_assistant()])
        _write_transcript(tmp_path, "-proj-b", "s2.jsonl", [_assistant()])
        deny_listing(monkeypatch, tmp_path / "-proj-b")

        result, observer = _scan(tmp_path)

        assert result.root_found is True
        assert len(result.sessions) == 1
        assert result.directories_skipped == 1
        assert len(observer.directories_skipped) == 1
        event = observer.directories_skipped[0]
        assert event.source == SessionSource.CLAUDE_CODE.value
        assert event.path == str(tmp_path / "-proj-b")
        assert observer.completed[0].directories_skipped == 1


class TestTokenAccumulation:
    """Every record carrying message.usage contributes to its file's session."""

    def test_sums_usage_across_records(self, tmp_path: Path) -> None:
        _write_transcript(
            tmp_path,
            "-Users-me-app",
            "s1.jsonl",
            [
                {"type": "user", "message": {"role": "user", "content": "hi"}},
                _assistant(input_tokens=100, output_tokens=50, cache_read=1000),
                _assistant(input_tokens=20, output_tokens=10, cache_creation=7),
            ],
        )

        result, _ = _scan(tmp_path)

        assert len(result.sessions) == 1
        usage = result.sessions[0].usage
        assert usage.input_tokens == 120
        assert usage.output_tokens == 60
        assert usage.cache_creation_tokens == 7
        assert usage.cache_read_tokens == 1000
        assert usage.reasoning_tokens == 0
        assert result.sessions[0].message_count == 2

    def test_provider_is_anthropic(self, tmp_path: Path) -> None:
        _write_transcript(tmp_path, "p", "s.jsonl", [_assistant()])

        result, _ = _scan(tmp_path)

        assert result.sessions[0].usage.provider == "anthropic"

    def test_last_model_wins(self, tmp_path: Path) -> None:
        _write_transcript(
            tmp_path,
            "p",
            "s.jsonl",
            [_assistant(model="claude-3-opus"), _assistant(model="claude-3-haiku")],
        )

        result, _ = _scan(tmp_path)

        assert result.sessions[0].usage.model == "claude-3-haiku"

    def test_synthetic_model_does_not_replace_real_one(self, tmp_path: Path) -> None:
        _write_transcript(
            tmp_path,
            "p",
            "s.jsonl",
            [_assistant(model="claude-opus-4"), _assistant(model="<synthetic>")],
        )

        result, _ = _scan(tmp_path)

        assert result.sessions[0].usage.model == "claude-opus-4"

    def test_model_is_unknown_when_never_reported(self, tmp_path: Path) -> None:
        record = _assistant()
        del record["message"]["model"]
        _write_transcript(tmp_path, "p", "s.jsonl", [record])

        result, _ = _scan(tmp_path)

        assert result.sessions[0].usage.model == "unknown"

    def test_non_numeric_counts_are_zero(self, tmp_path: Path) -> None:
        record = _assistant()
        record["message"]["usage"]["input_tokens"] = "lots"
        _write_transcript(tmp_path, "p", "s.jsonl", [record])

        result, _ = _scan(tmp_path)

        assert result.sessions[0].usage.input_tokens == 0
        assert result.sessions[0].usage.output_tokens == 5


class TestExclusion:
    """Transcripts without usage data produce no session."""

    def test_file_without_usage_is_excluded(self, tmp_path: Path) -> None:
        _write_transcript(
            tmp_path,
            "p",
            "s.jsonl",
            [{"type": "user", "message": {"role": "user", "content": "hi"}}],
        )

        result, _ = _scan(tmp_path)

        assert result.sessions == []
        assert result.files_scanned == 1

    def test_empty_file_is_excluded(self, tmp_path: Path) -> None:
        (tmp_path / "p").mkdir()
        (tmp_path / "p" / "s.jsonl").write_text("")

        result, _ = _scan(tmp_path)

        assert result.sessions == []

    def test_other_suffixes_are_ignored(self, tmp_path: Path) -> None:
        (tmp_path / "p").mkdir()
        (tmp_path / "p" / "s.json").write_text(json.dumps(_assistant()))

        result, _ = _scan(tmp_path)

        assert result.files_scanned == 0
        assert result.sessions == []


class TestMalformedInput:
    """Invalid lines are skipped; the rest of the file still counts."""

    def test_invalid_json_line_is_skipped(self, tmp_path: Path) -> None:
        _write_transcript(
            tmp_path,
            "p",
            "s.jsonl",
            [_assistant(input_tokens=3), "{not json", _assistant(input_tokens=4)],
        )

        result, observer = _scan(tmp_path)

        assert result.sessions[0].usage.input_tokens == 7
        assert result.records_skipped == 1
        assert len(observer.records_skipped) == 1
        assert observer.records_skipped[0].line_number == 2

    def test_blank_lines_are_not_counted_as_skipped(self, tmp_path: Path) -> None:
        _write_transcript(tmp_path, "p", "s.jsonl", [_assistant(), "", "   "])

        result, _ = _scan(tmp_path)

        assert result.records_skipped == 0
        assert len(result.sessions) == 1

    def test_non_object_lines_are_ignored(self, tmp_path: Path) -> None:
        _write_transcript(tmp_path, "p", "s.jsonl", ["[1, 2]", "42", _assistant()])

        result, _ = _scan(tmp_path)

        assert result.sessions[0].message_count == 1
        assert result.records_skipped == 0

    def test_undecodable_file_is_skipped(self, tmp_path: Path) -> None:
        (tmp_path / "p").mkdir()
        (tmp_path / "p" / "bad.jsonl").write_bytes(b"\xff\xfe\x00garbage")
        _write_transcript(tmp_path, "p", "good.jsonl", [_assistant()])

        result, observer = _scan(tmp_path)

        assert len(result.sessions) == 1
        assert result.files_skipped == 1
        assert observer.files_skipped[0].path.endswith("bad.jsonl")


class TestSessionMetadata:
    """Path, project name, timestamp and ordering of scanned sessions."""

    def test_project_name_is_decoded_from_directory(self, tmp_path: Path) -> None:
        _write_transcript(tmp_path, "-Users-me-app", "s.jsonl", [_assistant()])

        result, _ = _scan(tmp_path)

        assert result.sessions[0].project_name == "/Users/me/app"

    def test_file_directly_in_root_has_unknown_project(self, tmp_path: Path) -> None:
        (tmp_path / "s.jsonl").write_text(json.dumps(_assistant()) + "\n")

        result, _ = _scan(tmp_path)

        assert result.sessions[0].project_name == "unknown"

    def test_path_and_timestamp_come_from_the_file(self, tmp_path: Path) -> None:
        mtime = datetime(2025, 6, 1, 12, tzinfo=UTC).timestamp()
        path = _write_transcript(tmp_path, "p", "s.jsonl", [_assistant()], mtime=mtime)

        result, _ = _scan(tmp_path)

        session = result.sessions[0]
        assert session.path == str(path)
        assert session.last_modified == datetime(2025, 6, 1, 12, tzinfo=UTC)
        assert session.source == SessionSource.CLAUDE_CODE

    def test_sessions_are_sorted_newest_first(self, tmp_path: Path) -> None:
        _write_transcript(tmp_path, "p", "old.jsonl", [_assistant()], mtime=1_000_000)
        _write_transcript(tmp_path, "p", "new.jsonl", [_assistant()], mtime=3_000_000)
        _write_transcript(tmp_path, "q", "mid.jsonl", [_assistant()], mtime=2_000_000)

        result, _ = _scan(tmp_path)

        assert [Path(s.path).name for s in result.sessions] == [
            "new.jsonl",
            "mid.jsonl",
            "old.jsonl",
        ]

    def test_completed_event_reports_counts(self, tmp_path: Path) -> None:
        _write_transcript(tmp_path, "p", "a.jsonl", [_assistant(), "oops"])
        _write_transcript(tmp_path, "p", "b.jsonl", [{"type": "user"}])

        _, observer = _scan(tmp_path)

        event = observer.completed[0]
        assert event.source == "claude-code"
        assert event.total_sessions == 1
        assert event.files_scanned == 2
        assert event.records_skipped == 1
