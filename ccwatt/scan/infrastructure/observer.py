"""Structlog implementation of the ScanObserver port."""

import structlog


class StructlogScanObserver:
    """Delegates scan domain events to structlog.

    Satisfies the ScanObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def scan_started(self, source: str, root: str) -> None:
        self._log.debug("scan.started", source=source, root=root)

    def scan_root_missing(self, source: str, root: str) -> None:
        self._log.info("scan.root_missing", source=source, root=root)

    def scan_directory_skipped(self, source: str, path: str, reason: str) -> None:
        self._log.warning(
            "scan.directory_skipped", source=source, path=path, reason=reason
        )

    def scan_file_skipped(self, source: str, path: str, reason: str) -> None:
        self._log.warning("scan.file_skipped", source=source, path=path, reason=reason)

    def scan_record_skipped(
        self, source: str, path: str, line_number: int, reason: str
    ) -> None:
        self._log.debug(
            "scan.record_skipped",
            source=source,
            path=path,
            line_number=line_number,
            reason=reason,
        )

    def scan_completed(
        self,
        source: str,
        root: str,
        total_sessions: int,
        files_scanned: int,
        directories_skipped: int,
        files_skipped: int,
        records_skipped: int,
    ) -> None:
        self._log.info(
            "scan.completed",
            source=source,
            root=root,
            total_sessions=total_sessions,
            files_scanned=files_scanned,
            directories_skipped=directories_skipped,
            files_skipped=files_skipped,
            records_skipped=records_skipped,
        )
