"""EnergyModel — the constants used to turn token counts into energy and CO2.

Wh-per-token values are rough estimates from 2024-2025 research
(arxiv.org/html/2505.09598v1, arxiv.org/html/2512.03024v1):

- GPT-4o: ~0.34 Wh/query, roughly 0.001 Wh/token at 300-400 tokens
- Llama3-70B on H100: ~0.39 J/token, roughly 0.0001 Wh/token
"""

from types import MappingProxyType

from pydantic import BaseModel, Field, field_validator

from ccwatt.energy.domain.category import ModelCategory

DEFAULT_WH_PER_TOKEN = MappingProxyType(
    {
        ModelCategory.HUGE: 0.001,  # ~175B+ params, ~3.6 J/token
        ModelCategory.LARGE: 0.0003,  # ~70B params, ~1 J/token
        ModelCategory.MEDIUM: 0.0001,  # ~20B params, ~0.36 J/token
        ModelCategory.SMALL: 0.00003,  # ~7B params, ~0.1 J/token
        ModelCategory.UNKNOWN: 0.0003,  # same as large
    }
)

# Cache reads are memory retrieval, not fresh computation.
DEFAULT_CACHE_READ_FACTOR = 0.01

# Global average grid intensity.
DEFAULT_CO2_KG_PER_KWH = 0.5

# CO2 absorbed by one tree in one year.
DEFAULT_TREE_CO2_KG_PER_YEAR = 14.0


class EnergyModel(BaseModel, frozen=True):
    """Immutable set of constants consumed by calculate_energy."""

    wh_per_token: dict[ModelCategory, float] = Field(
        default_factory=lambda: dict(DEFAULT_WH_PER_TOKEN)
    )
    cache_read_factor: float = Field(default=DEFAULT_CACHE_READ_FACTOR, ge=0.0, le=1.0)
    co2_kg_per_kwh: float = Field(default=DEFAULT_CO2_KG_PER_KWH, ge=0.0)
    tree_co2_kg_per_year: float = Field(default=DEFAULT_TREE_CO2_KG_PER_YEAR, gt=0.0)

    @field_validator("wh_per_token")
    @classmethod
    def _fill_missing_categories(
        cls, value: dict[ModelCategory, float]
    ) -> dict[ModelCategory, float]:
        """Keep defaults for categories a partial override leaves out."""
        negative = sorted(str(c) for c, wh in value.items() if wh < 0)
        if negative:
            raise ValueError(
                f"wh_per_token must be non-negative: {', '.join(negative)}"
            )
        return {**DEFAULT_WH_PER_TOKEN, **value}

    def overridden_fields(self) -> list[str]:
        """Return the names of constants that differ from the defaults."""
        changed: list[str] = []
        for name in type(self).model_fields:
            if getattr(self, name) != getattr(DEFAULT_ENERGY_MODEL, name):
                changed.append(name)
        return changed


DEFAULT_ENERGY_MODEL = EnergyModel()
