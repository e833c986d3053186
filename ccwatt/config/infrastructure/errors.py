"""Error types raised by config infrastructure."""

from pathlib import Path

from ccwatt.core.errors import CcwattError


class ConfigValidationError(CcwattError):
    """Raised when the config file is not valid YAML or fails schema validation."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to validate config: {reason}")


class ConfigLoadError(CcwattError):
    """Raised when the config file cannot be opened or read."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Failed to load config: file not found: {path}")
