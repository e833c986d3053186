"""Aggregator — reduces many TokenUsage values into one running total."""

from collections.abc import Iterable

from ccwatt.usage.domain.usage import UNKNOWN_LABEL, TokenUsage


def _is_known(label: str) -> bool:
    return bool(label) and label != UNKNOWN_LABEL


def aggregate_usages(usages: Iterable[TokenUsage]) -> TokenUsage:
    """Sum every token count across usages.

    The counts are order-independent. The model and provider labels are not:
    each one is the last value in iteration order that is neither empty nor
    "unknown". An empty input yields zero counts and "unknown" labels.
    """
    input_tokens = 0
    output_tokens = 0
    cache_creation_tokens = 0
    cache_read_tokens = 0
    reasoning_tokens = 0
    model = UNKNOWN_LABEL
    provider = UNKNOWN_LABEL

    for usage in usages:
        input_tokens += usage.input_tokens
        output_tokens += usage.output_tokens
        cache_creation_tokens += usage.cache_creation_tokens
        cache_read_tokens += usage.cache_read_tokens
        reasoning_tokens += usage.reasoning_tokens
        if _is_known(usage.model):
            model = usage.model
        if _is_known(usage.provider):
            provider = usage.provider

    return TokenUsage(
        input_tokens=input_tokens,
        output_tokens=output_tokens,
        cache_creation_tokens=cache_creation_tokens,
        cache_read_tokens=cache_read_tokens,
        reasoning_tokens=reasoning_tokens,
        model=model,
        provider=provider,
    )
