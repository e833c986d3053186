"""SessionInfo value object — one scanned conversation from a supported tool."""

from datetime import datetime
from enum import StrEnum

from pydantic import AwareDatetime, BaseModel, Field

from ccwatt.usage.domain.usage import TokenUsage


class SessionSource(StrEnum):
    """Supported coding-assistant tools."""

    CLAUDE_CODE = "claude-code"
    OPENCODE = "opencode"


class SessionInfo(BaseModel, frozen=True):
    """Immutable record of one session's usage.

    message_count is at least 1: sessions without any assistant turn carrying
    usage data are dropped by the scanners before a SessionInfo is built.
    """

    path: str = Field(min_length=1)
    project_name: str
    usage: TokenUsage
    message_count: int = Field(ge=1)
    last_modified: AwareDatetime
    source: SessionSource


def sort_newest_first(sessions: list[SessionInfo]) -> list[SessionInfo]:
    """Return sessions ordered by last_modified, most recent first."""
    return sorted(sessions, key=_last_modified, reverse=True)


def _last_modified(session: SessionInfo) -> datetime:
    return session.last_modified
