"""Structlog implementation of the ConfigObserver port."""

import structlog


class StructlogConfigObserver:
    """Delegates config domain events to structlog.

    Satisfies the ConfigObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def config_loaded(self, path: str, sources: list[str]) -> None:
        self._log.info("config.loaded", path=path, sources=sources)

    def config_energy_model_overridden(self, fields: list[str]) -> None:
        self._log.warning(
            "config.energy_model_overridden",
            fields=fields,
            message="Custom energy constants make estimates incomparable with defaults",
        )
