"""ScanResult — the outcome of scanning one source directory."""

from pydantic import BaseModel, Field

from ccwatt.scan.domain.session import SessionInfo, SessionSource


class ScanResult(BaseModel, frozen=True):
    """Immutable value object returned by every SessionScanner.

    A scan never raises for missing data. A root that does not exist or
    cannot be listed is reported through root_found=False with no sessions.
    Unreadable sub-directories, unreadable files and malformed records are
    counted, never raised.
    """

    source: SessionSource
    root: str
    root_found: bool
    sessions: list[SessionInfo] = Field(default_factory=list)
    files_scanned: int = Field(default=0, ge=0)
    directories_skipped: int = Field(default=0, ge=0)
    files_skipped: int = Field(default=0, ge=0)
    records_skipped: int = Field(default=0, ge=0)
