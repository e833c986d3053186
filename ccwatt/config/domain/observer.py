"""Observer port for the config domain — defines events in domain language."""

from typing import Protocol


class ConfigObserver(Protocol):
    def config_loaded(self, path: str, sources: list[str]) -> None: ...

    def config_energy_model_overridden(self, fields: list[str]) -> None: ...
