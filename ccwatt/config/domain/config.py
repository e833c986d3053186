"""Top-level CcwattConfig — optional overrides for sources, roots and energy constants."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from ccwatt.energy.domain.energy_model import EnergyModel
from ccwatt.scan.domain.session import SessionSource


def _all_sources() -> list[SessionSource]:
    return list(SessionSource)


class CcwattConfig(BaseModel, frozen=True):
    """Root configuration. Every field is optional; an empty file yields the defaults."""

    sources: list[SessionSource] = Field(default_factory=_all_sources, min_length=1)
    roots: dict[SessionSource, Path] = Field(default_factory=dict)
    energy: EnergyModel = Field(default_factory=EnergyModel)

    @field_validator("roots")
    @classmethod
    def _expand_home(
        cls, value: dict[SessionSource, Path]
    ) -> dict[SessionSource, Path]:
        return {source: path.expanduser() for source, path in value.items()}
