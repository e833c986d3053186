"""Error types raised by scan infrastructure."""

from ccwatt.core.errors import CcwattError


class UnsupportedSourceError(CcwattError):
    """Raised when a requested source is not a known coding-assistant tool."""

    def __init__(self, source: str) -> None:
        self.source = source
        super().__init__(f"Failed to create scanner: unsupported source '{source}'")
