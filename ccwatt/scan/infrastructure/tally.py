"""SessionTally — mutable per-session accumulator used while a scan is running."""

from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from ccwatt.usage.domain.usage import UNKNOWN_LABEL, TokenUsage


def token_count(container: Any, key: str) -> int:
    """Read a token count from a parsed JSON object.

    Absent, null, non-numeric, fractional and negative values all count as 0.
    """
    if not isinstance(container, dict):
        return 0
    value = container.get(key)
    if isinstance(value, bool):
        return 0
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if isinstance(value, int) and value > 0:
        return value
    return 0


def file_mtime(path: Path) -> datetime:
    """Return the file's modification time as an aware UTC datetime."""
    return datetime.fromtimestamp(path.stat().st_mtime, tz=UTC)


@dataclass
class SessionTally:
    """Running token totals and latest labels for one session.

    Labels are last-write-wins. last_modified keeps the newest timestamp seen.
    """

    input_tokens: int = 0
    output_tokens: int = 0
    cache_creation_tokens: int = 0
    cache_read_tokens: int = 0
    reasoning_tokens: int = 0
    model: str = UNKNOWN_LABEL
    provider: str = UNKNOWN_LABEL
    message_count: int = 0
    last_modified: datetime | None = None

    def add_message(
        self,
        input_tokens: int = 0,
        output_tokens: int = 0,
        cache_creation_tokens: int = 0,
        cache_read_tokens: int = 0,
        reasoning_tokens: int = 0,
    ) -> None:
        self.input_tokens += input_tokens
        self.output_tokens += output_tokens
        self.cache_creation_tokens += cache_creation_tokens
        self.cache_read_tokens += cache_read_tokens
        self.reasoning_tokens += reasoning_tokens
        self.message_count += 1

    def touch(self, modified: datetime) -> None:
        if self.last_modified is None or modified > self.last_modified:
            self.last_modified = modified

    def to_usage(self) -> TokenUsage:
        return TokenUsage(
            input_tokens=self.input_tokens,
            output_tokens=self.output_tokens,
            cache_creation_tokens=self.cache_creation_tokens,
            cache_read_tokens=self.cache_read_tokens,
            reasoning_tokens=self.reasoning_tokens,
            model=self.model,
            provider=self.provider,
        )
