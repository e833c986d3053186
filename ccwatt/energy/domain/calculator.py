"""Energy calculator — converts token usage into energy, CO2 and tree-days."""

from ccwatt.energy.domain.category import classify_model
from ccwatt.energy.domain.energy_model import DEFAULT_ENERGY_MODEL, EnergyModel
from ccwatt.energy.domain.result import EnergyResult
from ccwatt.usage.domain.usage import TokenUsage

_WH_PER_KWH = 1000.0
_GRAMS_PER_KG = 1000.0
_DAYS_PER_YEAR = 365


def calculate_energy(
    usage: TokenUsage, energy_model: EnergyModel = DEFAULT_ENERGY_MODEL
) -> EnergyResult:
    """Derive an EnergyResult from usage.

    Input, output, reasoning and cache-creation tokens cost the full
    per-token energy of the model's category. Cache-read tokens cost
    cache_read_factor of that. Zero usage yields an all-zero result.
    """
    cache_tokens = usage.cache_creation_tokens + usage.cache_read_tokens
    total_tokens = (
        usage.input_tokens + usage.output_tokens + cache_tokens + usage.reasoning_tokens
    )

    category = classify_model(usage.model)
    base_energy = energy_model.wh_per_token[category]

    compute_tokens = (
        usage.input_tokens
        + usage.output_tokens
        + usage.reasoning_tokens
        + usage.cache_creation_tokens
    )
    cache_read_energy = (
        usage.cache_read_tokens * base_energy * energy_model.cache_read_factor
    )
    energy_wh = compute_tokens * base_energy + cache_read_energy

    co2_kg = (energy_wh / _WH_PER_KWH) * energy_model.co2_kg_per_kwh
    co2_grams = co2_kg * _GRAMS_PER_KG
    co2_grams_per_tree_day = (
        energy_model.tree_co2_kg_per_year * _GRAMS_PER_KG
    ) / _DAYS_PER_YEAR
    tree_days = co2_grams / co2_grams_per_tree_day

    return EnergyResult(
        total_tokens=total_tokens,
        input_tokens=usage.input_tokens,
        output_tokens=usage.output_tokens,
        cache_tokens=cache_tokens,
        reasoning_tokens=usage.reasoning_tokens,
        energy_wh=energy_wh,
        co2_grams=co2_grams,
        tree_days=tree_days,
        model=usage.model,
        provider=usage.provider,
        category=category,
    )
