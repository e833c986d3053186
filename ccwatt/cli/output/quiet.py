"""Quiet output — a single line of tree glyphs."""

from ccwatt.cli.output.formatting import round_half_up, tree_count
from ccwatt.energy.domain.result import EnergyResult

_TREE = "🌳"
_SPROUT = "🌱"
_MAX_TREES = 15


def render_quiet(result: EnergyResult) -> str:
    """One tree per tree-day up to 15, then '+N' for the rest; a sprout for none."""
    count = min(tree_count(result.tree_days), _MAX_TREES)
    if count == 0:
        return _SPROUT

    line = _TREE * count
    if result.tree_days > _MAX_TREES:
        line += f" +{round_half_up(result.tree_days - _MAX_TREES)}"
    return line
