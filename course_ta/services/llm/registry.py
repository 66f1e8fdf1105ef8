"""
Model Registry

Maps model IDs to their metadata and provider types.
Used at startup to select the provider for the configured model.
"""

from course_ta.services.llm.base import LLMProvider


# ── Model Registry ────────────────────────────────────────────────────────────
# Each entry maps a model_id (the OPENAI_MODEL setting) to:
#   - display_name: Human-readable name
#   - provider:     Which LLMProvider class to use
#   - api_model:    The actual model string sent to the provider API
#   - tier:         Pricing tier
#   - supports_temperature: Whether the API accepts a sampling temperature

MODEL_REGISTRY: dict[str, dict] = {
    # ── OpenAI Chat Completions API (GPT-4o) ──
    "gpt-4o-mini": {
        "display_name": "GPT-4o Mini",
        "provider": "openai_chat",
        "api_model": "gpt-4o-mini",
        "tier": "budget",
        "supports_temperature": True,
        "description": "Fast and cheap. Recommended default for grounded course Q&A.",
    },
    "gpt-4o": {
        "display_name": "GPT-4o",
        "provider": "openai_chat",
        "api_model": "gpt-4o",
        "tier": "standard",
        "supports_temperature": True,
        "description": "Stronger reasoning over long retrieved context, higher cost.",
    },
    # ── OpenAI Responses API (GPT-5.x) ──
    "gpt-5-mini": {
        "display_name": "GPT-5 Mini",
        "provider": "openai_responses",
        "api_model": "gpt-5-mini",
        "tier": "standard",
        "supports_temperature": False,
        "description": "Newer model family; ignores the temperature setting.",
    },
}

# Default model when nothing else is specified
DEFAULT_MODEL_ID = "gpt-4o-mini"


# ── Provider Factory ──────────────────────────────────────────────────────────

# Provider class registry (lazy-loaded singletons)
_provider_instances: dict[str, LLMProvider] = {}


def _create_provider(provider_type: str) -> LLMProvider:
    """Create a provider instance by type string."""
    if provider_type == "openai_responses":
        from course_ta.services.llm.openai_responses import OpenAIResponsesProvider
        return OpenAIResponsesProvider()
    elif provider_type == "openai_chat":
        from course_ta.services.llm.openai_chat import OpenAIChatProvider
        return OpenAIChatProvider()
    else:
        raise ValueError(f"Unknown provider type: {provider_type}")


def get_provider(model_id: str) -> tuple[LLMProvider, str]:
    """
    Get the provider instance and API model name for a given model_id.

    Args:
        model_id: The model identifier (e.g., "gpt-4o-mini")

    Returns:
        Tuple of (provider_instance, api_model_name)

    Raises:
        ValueError: If the model_id is not in the registry
    """
    if model_id not in MODEL_REGISTRY:
        raise ValueError(
            f"Unknown model: {model_id}. "
            f"Available models: {', '.join(MODEL_REGISTRY.keys())}"
        )

    model_info = MODEL_REGISTRY[model_id]
    provider_type = model_info["provider"]

    # Lazy singleton creation
    if provider_type not in _provider_instances:
        _provider_instances[provider_type] = _create_provider(provider_type)

    return _provider_instances[provider_type], model_info["api_model"]


def list_models() -> list[dict]:
    """Return registry entries in a frontend-friendly shape."""
    return [
        {
            "id": model_id,
            "display_name": info["display_name"],
            "tier": info["tier"],
            "description": info["description"],
        }
        for model_id, info in MODEL_REGISTRY.items()
    ]


def supports_temperature(model_id: str) -> bool:
    """Whether the model honours the configured sampling temperature."""
    return MODEL_REGISTRY[model_id]["supports_temperature"]
