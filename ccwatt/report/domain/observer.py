"""Observer port for the report domain — defines events in domain language."""

from typing import Protocol


class ReportObserver(Protocol):
    def report_completed(
        self, total_sessions: int, total_tokens: int, energy_wh: float, model: str
    ) -> None: ...

    def report_empty(self, sources: list[str]) -> None: ...
