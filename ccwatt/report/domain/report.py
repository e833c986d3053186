"""UsageReport — the aggregate result of scanning every enabled source."""

from pydantic import BaseModel

from ccwatt.energy.domain.result import EnergyResult
from ccwatt.scan.domain.session import SessionInfo, SessionSource
from ccwatt.usage.domain.usage import TokenUsage


class UsageReport(BaseModel, frozen=True):
    """Immutable report handed to the presentation layer.

    sessions spans every enabled source, most recent first. source_counts has
    an entry for every enabled source, including those that found nothing.
    An empty report still carries a zero-valued result; callers render it as
    a distinct no-data state via is_empty.
    """

    sessions: list[SessionInfo]
    source_counts: dict[SessionSource, int]
    usage: TokenUsage
    result: EnergyResult

    @property
    def session_count(self) -> int:
        return len(self.sessions)

    @property
    def is_empty(self) -> bool:
        return not self.sessions
