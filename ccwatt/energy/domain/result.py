"""EnergyResult value object — the computed footprint of an aggregated usage."""

from pydantic import BaseModel, Field

from ccwatt.energy.domain.category import ModelCategory


class EnergyResult(BaseModel, frozen=True):
    """Immutable report values. No rounding is applied; that is a display concern.

    total_tokens always equals input + output + cache + reasoning tokens.
    """

    total_tokens: int = Field(ge=0)
    input_tokens: int = Field(ge=0)
    output_tokens: int = Field(ge=0)
    cache_tokens: int = Field(ge=0)
    reasoning_tokens: int = Field(ge=0)
    energy_wh: float = Field(ge=0.0)
    co2_grams: float = Field(ge=0.0)
    tree_days: float = Field(ge=0.0)
    model: str
    provider: str
    category: ModelCategory
