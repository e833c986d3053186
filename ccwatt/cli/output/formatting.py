"""Number and label formatting shared by the terminal renderers."""

import math

from ccwatt.scan.domain.session import SessionSource

# First matching row wins.
_PROVIDER_GLYPHS: tuple[tuple[tuple[str, ...], str], ...] = (
    (("anthropic", "claude"), "🟠"),
    (("openai", "gpt"), "🟢"),
    (("google", "gemini"), "🔵"),
    (("deepseek",), "🐋"),
    (("zhipu", "glm"), "🀄"),
    (("alibaba", "qwen"), "☁️"),
    (("meta", "llama"), "🦙"),
    (("mistral",), "🌬️"),
    (("xai", "grok"), "✖️"),
)
_DEFAULT_PROVIDER_GLYPH = "🤖"

SOURCE_LABELS: dict[SessionSource, str] = {
    SessionSource.CLAUDE_CODE: "🟠 Claude Code",
    SessionSource.OPENCODE: "🔷 OpenCode",
}


def format_number(n: int) -> str:
    """Abbreviate large counts: 1.5K, 2.25M, 3.10B."""
    if n >= 1_000_000_000:
        return f"{n / 1_000_000_000:.2f}B"
    if n >= 1_000_000:
        return f"{n / 1_000_000:.2f}M"
    if n >= 1_000:
        return f"{n / 1_000:.1f}K"
    return f"{n:,}"


def format_energy(energy_wh: float) -> str:
    if energy_wh >= 1000:
        return f"{energy_wh / 1000:.2f} kWh"
    return f"{energy_wh:.1f} Wh"


def format_co2(co2_grams: float) -> str:
    if co2_grams >= 1000:
        return f"{co2_grams / 1000:.2f} kg"
    return f"{co2_grams:.1f} g"


def tree_count(tree_days: float) -> int:
    """Whole trees needed for one day each; any fraction needs another tree."""
    return math.ceil(tree_days)


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def provider_glyph(provider: str) -> str:
    lower = provider.lower()
    for keywords, glyph in _PROVIDER_GLYPHS:
        if any(keyword in lower for keyword in keywords):
            return glyph
    return _DEFAULT_PROVIDER_GLYPH
