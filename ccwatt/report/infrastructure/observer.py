"""Structlog implementation of the ReportObserver port."""

import structlog


class StructlogReportObserver:
    """Delegates report domain events to structlog.

    Satisfies the ReportObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def report_completed(
        self, total_sessions: int, total_tokens: int, energy_wh: float, model: str
    ) -> None:
        self._log.info(
            "report.completed",
            total_sessions=total_sessions,
            total_tokens=total_tokens,
            energy_wh=energy_wh,
            model=model,
        )

    def report_empty(self, sources: list[str]) -> None:
        self._log.info("report.empty", sources=sources)
