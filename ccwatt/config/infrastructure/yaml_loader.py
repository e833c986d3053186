"""YAML config loader — parses, validates, and emits observer events."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from ccwatt.config.domain.config import CcwattConfig
from ccwatt.config.domain.observer import ConfigObserver
from ccwatt.config.infrastructure.errors import ConfigLoadError, ConfigValidationError


class YamlConfigLoader:
    """Loads, validates, and returns a CcwattConfig from a YAML file."""

    def __init__(self, observer: ConfigObserver) -> None:
        self._observer = observer

    def load(self, path: Path) -> CcwattConfig:
        """
        Load and validate a CcwattConfig from a YAML file.

        Raises:
            ConfigLoadError: if the file does not exist or cannot be read.
            ConfigValidationError: if the file is not valid YAML, is not a
                mapping, or violates the schema.
        """
        raw = _parse_yaml(path=path)
        cfg = _build_config(raw=raw)
        _emit_warnings(cfg=cfg, observer=self._observer)
        self._observer.config_loaded(
            path=str(path), sources=[source.value for source in cfg.sources]
        )
        return cfg


def _parse_yaml(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as fh:
            return yaml.safe_load(fh)
    except FileNotFoundError as exc:
        raise ConfigLoadError(path=path) from exc
    except yaml.YAMLError as exc:
        raise ConfigValidationError(f"invalid YAML: {exc}") from exc


def _build_config(raw: Any) -> CcwattConfig:
    if raw is None:
        return CcwattConfig()
    if not isinstance(raw, dict):
        raise ConfigValidationError(
            f"expected a mapping at the top level, got {type(raw).__name__}"
        )
    try:
        return CcwattConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc


def _emit_warnings(cfg: CcwattConfig, observer: ConfigObserver) -> None:
    overridden = cfg.energy.overridden_fields()
    if overridden:
        observer.config_energy_model_overridden(fields=overridden)
