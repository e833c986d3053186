"""Provider classifier — infers a provider label from provider and model identifiers."""

from ccwatt.usage.domain.usage import UNKNOWN_LABEL

# First matching row wins.
PROVIDER_KEYWORDS: tuple[tuple[tuple[str, ...], str], ...] = (
    (("openai", "gpt", "o1"), "openai"),
    (("anthropic", "claude"), "anthropic"),
    (("google", "gemini"), "google"),
    (("deepseek",), "deepseek"),
    (("zhipu", "glm", "zai"), "zhipu"),
    (("alibaba", "qwen"), "alibaba"),
    (("meta", "llama"), "meta"),
    (("mistral", "codestral"), "mistral"),
    (("xai", "grok"), "xai"),
    (("cohere", "command"), "cohere"),
)


def infer_provider(provider_id: str | None, model_id: str | None) -> str:
    """Return a normalized provider label.

    Falls back to the raw provider_id when no keyword matches, and to
    "unknown" when neither identifier is set.
    """
    if not provider_id and not model_id:
        return UNKNOWN_LABEL

    combined = f"{provider_id or ''} {model_id or ''}".lower()
    for keywords, provider in PROVIDER_KEYWORDS:
        if any(keyword in combined for keyword in keywords):
            return provider

    return provider_id or UNKNOWN_LABEL
