"""Observer port for the scan domain — defines events in domain language."""

from typing import Protocol


class ScanObserver(Protocol):
    def scan_started(self, source: str, root: str) -> None: ...

    def scan_root_missing(self, source: str, root: str) -> None: ...

    def scan_directory_skipped(
        self, source: str, path: str, reason: str
    ) -> None: ...

    def scan_file_skipped(self, source: str, path: str, reason: str) -> None: ...

    def scan_record_skipped(
        self, source: str, path: str, line_number: int, reason: str
    ) -> None: ...

    def scan_completed(
        self,
        source: str,
        root: str,
        total_sessions: int,
        files_scanned: int,
        directories_skipped: int,
        files_skipped: int,
        records_skipped: int,
    ) -> None: ...
