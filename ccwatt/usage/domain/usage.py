"""TokenUsage value object — token counts for one session or an aggregate."""

from pydantic import BaseModel, Field

UNKNOWN_LABEL = "unknown"


class TokenUsage(BaseModel, frozen=True):
    """Immutable token counts plus the model and provider labels they belong to.

    Counts are never negative. Scanners map absent or null source fields to 0
    before constructing one, so arithmetic on these fields is always defined.
    """

    input_tokens: int = Field(default=0, ge=0)
    output_tokens: int = Field(default=0, ge=0)
    cache_creation_tokens: int = Field(default=0, ge=0)
    cache_read_tokens: int = Field(default=0, ge=0)
    reasoning_tokens: int = Field(default=0, ge=0)
    model: str = UNKNOWN_LABEL
    provider: str = UNKNOWN_LABEL
