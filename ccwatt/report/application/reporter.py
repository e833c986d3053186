"""UsageReporter — orchestrates scan, aggregation and energy calculation."""

from ccwatt.energy.domain.calculator import calculate_energy
from ccwatt.energy.domain.energy_model import DEFAULT_ENERGY_MODEL, EnergyModel
from ccwatt.report.domain.observer import ReportObserver
from ccwatt.report.domain.report import UsageReport
from ccwatt.scan.domain.scanner import SessionScanner
from ccwatt.scan.domain.session import SessionInfo, SessionSource, sort_newest_first
from ccwatt.usage.domain.aggregate import aggregate_usages


class UsageReporter:
    """Builds a UsageReport from a set of scanners.

    The reporter holds no infrastructure dependencies of its own. It receives
    scanners through the SessionScanner protocol so tests can substitute fakes.
    """

    def __init__(
        self,
        scanners: list[SessionScanner],
        observer: ReportObserver,
        energy_model: EnergyModel = DEFAULT_ENERGY_MODEL,
    ) -> None:
        self._scanners = scanners
        self._observer = observer
        self._energy_model = energy_model

    def build(self) -> UsageReport:
        """Scan every source, then aggregate all sessions into one result.

        Scanners run sequentially and share no state. Sessions are merged and
        re-sorted newest first; the aggregate totals do not depend on order.
        """
        collected: list[SessionInfo] = []
        source_counts: dict[SessionSource, int] = {}

        for scanner in self._scanners:
            scan_result = scanner.scan()
            source_counts[scan_result.source] = len(scan_result.sessions)
            collected.extend(scan_result.sessions)

        sessions = sort_newest_first(collected)
        usage = aggregate_usages(session.usage for session in sessions)
        result = calculate_energy(usage=usage, energy_model=self._energy_model)

        if sessions:
            self._observer.report_completed(
                total_sessions=len(sessions),
                total_tokens=result.total_tokens,
                energy_wh=result.energy_wh,
                model=result.model,
            )
        else:
            self._observer.report_empty(
                sources=[source.value for source in source_counts]
            )

        return UsageReport(
            sessions=sessions,
            source_counts=source_counts,
            usage=usage,
            result=result,
        )
