"""SessionScanner Protocol — structural interface for reading one tool's sessions."""

from typing import Protocol

from ccwatt.scan.domain.scan_result import ScanResult
from ccwatt.scan.domain.session import SessionSource


class SessionScanner(Protocol):
    """Reads every session of one source from disk and returns a ScanResult."""

    @property
    def source(self) -> SessionSource: ...

    def scan(self) -> ScanResult: ...
