"""Builders for EnergyResult and UsageReport values used by output tests."""

from ccwatt.energy.domain.category import ModelCategory
from ccwatt.energy.domain.result import EnergyResult
from ccwatt.report.domain.report import UsageReport
from ccwatt.scan.domain.session import SessionSource
from ccwatt.usage.domain.usage import TokenUsage
from tests.scan.fake_scanner import make_session


def make_result(
    tree_days: float = 0.5,
    model: str = "claude-sonnet-4",
    provider: str = "anthropic",
    reasoning_tokens: int = 0,
) -> EnergyResult:
    return EnergyResult(
        total_tokens=1_500 + reasoning_tokens,
        input_tokens=1_000,
        output_tokens=500,
        cache_tokens=0,
        reasoning_tokens=reasoning_tokens,
        energy_wh=12.34,
        co2_grams=6.17,
        tree_days=tree_days,
        model=model,
        provider=provider,
        category=ModelCategory.LARGE,
    )


def make_report(
    result: EnergyResult | None = None,
    claude_sessions: int = 2,
    opencode_sessions: int = 1,
) -> UsageReport:
    sessions = [
        make_session(path=f"c{i}", day=i + 1) for i in range(claude_sessions)
    ] + [
        make_session(path=f"o{i}", source=SessionSource.OPENCODE, day=i + 1)
        for i in range(opencode_sessions)
    ]
    return UsageReport(
        sessions=sessions,
        source_counts={
            SessionSource.CLAUDE_CODE: claude_sessions,
            SessionSource.OPENCODE: opencode_sessions,
        },
        usage=TokenUsage(input_tokens=1_000, output_tokens=500),
        result=result or make_result(),
    )
