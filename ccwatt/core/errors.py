"""Base exception class for all ccwatt-specific errors."""


class CcwattError(Exception):
    """Base class for all ccwatt errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
