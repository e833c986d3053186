"""Model classifier — maps free-text model identifiers to energy-cost categories."""

from enum import StrEnum


class ModelCategory(StrEnum):
    """Coarse model size bucket used to approximate per-token energy cost."""

    HUGE = "huge"  # GPT-4, Claude Opus, Gemini Ultra
    LARGE = "large"  # GPT-4-turbo, Claude Sonnet, Gemini Pro
    MEDIUM = "medium"  # GPT-3.5, Claude Haiku, Gemini Flash
    SMALL = "small"
    UNKNOWN = "unknown"


# First matching key wins. Within a family, specific identifiers must come
# before the shorter names they contain.
MODEL_CATEGORIES: tuple[tuple[str, ModelCategory], ...] = (
    # Anthropic
    ("claude-3-opus", ModelCategory.HUGE),
    ("claude-opus-4", ModelCategory.HUGE),
    ("opus", ModelCategory.HUGE),
    ("claude-3.5-sonnet", ModelCategory.LARGE),
    ("claude-3-sonnet", ModelCategory.LARGE),
    ("claude-sonnet-4", ModelCategory.LARGE),
    ("sonnet", ModelCategory.LARGE),
    ("claude-3.5-haiku", ModelCategory.MEDIUM),
    ("claude-3-haiku", ModelCategory.MEDIUM),
    ("haiku", ModelCategory.MEDIUM),
    # OpenAI
    ("gpt-4o-mini", ModelCategory.MEDIUM),
    ("gpt-4o", ModelCategory.LARGE),
    ("gpt-4-turbo", ModelCategory.LARGE),
    ("gpt-4", ModelCategory.HUGE),
    ("gpt-3.5-turbo", ModelCategory.MEDIUM),
    ("gpt-3.5", ModelCategory.MEDIUM),
    ("o1-mini", ModelCategory.LARGE),
    ("o1-preview", ModelCategory.HUGE),
    ("o1", ModelCategory.HUGE),
    ("o3-mini", ModelCategory.LARGE),
    # Google
    ("gemini-ultra", ModelCategory.HUGE),
    ("gemini-1.5-pro", ModelCategory.LARGE),
    ("gemini-pro", ModelCategory.LARGE),
    ("gemini-1.5-flash", ModelCategory.MEDIUM),
    ("gemini-2.0-flash", ModelCategory.MEDIUM),
    # DeepSeek
    ("deepseek-chat", ModelCategory.LARGE),
    ("deepseek-coder", ModelCategory.LARGE),
    ("deepseek-v3", ModelCategory.LARGE),
    ("deepseek-r1", ModelCategory.LARGE),
    # Zhipu AI
    ("glm-4.7-free", ModelCategory.LARGE),
    ("glm-4.7", ModelCategory.LARGE),
    ("glm-4", ModelCategory.LARGE),
    ("glm-3-turbo", ModelCategory.MEDIUM),
    # Alibaba
    ("qwen-turbo", ModelCategory.MEDIUM),
    ("qwen-plus", ModelCategory.LARGE),
    ("qwen-max", ModelCategory.HUGE),
    ("qwen2.5", ModelCategory.LARGE),
    # Meta
    ("llama-3-70b", ModelCategory.LARGE),
    ("llama-3-8b", ModelCategory.MEDIUM),
    ("llama-3.1", ModelCategory.LARGE),
    ("llama-3.2", ModelCategory.LARGE),
    ("llama-3", ModelCategory.LARGE),
    ("codellama", ModelCategory.LARGE),
    # Mistral
    ("mistral-large", ModelCategory.LARGE),
    ("mistral-medium", ModelCategory.MEDIUM),
    ("mistral-small", ModelCategory.SMALL),
    ("mixtral", ModelCategory.LARGE),
    ("codestral", ModelCategory.LARGE),
    # Cohere
    ("command-r-plus", ModelCategory.HUGE),
    ("command-r", ModelCategory.LARGE),
    # xAI
    ("grok-2", ModelCategory.LARGE),
    ("grok", ModelCategory.LARGE),
)

# Applied in order when no table key matches.
FALLBACK_HEURISTICS: tuple[tuple[tuple[str, ...], ModelCategory], ...] = (
    (("opus", "ultra", "max"), ModelCategory.HUGE),
    (("haiku", "mini", "flash", "turbo"), ModelCategory.MEDIUM),
    (("sonnet", "pro", "plus"), ModelCategory.LARGE),
)


def classify_model(model_id: str) -> ModelCategory:
    """Return the energy-cost category for model_id. Never raises."""
    lower = model_id.lower()

    for key, category in MODEL_CATEGORIES:
        if key in lower:
            return category

    for keywords, category in FALLBACK_HEURISTICS:
        if any(keyword in lower for keyword in keywords):
            return category

    return ModelCategory.UNKNOWN
