"""
LLM Provider Abstraction Layer

Provides a unified interface over the OpenAI Chat Completions and
Responses APIs, with a model registry selecting the provider.
"""

from course_ta.services.llm.base import LLMProvider
from course_ta.services.llm.registry import MODEL_REGISTRY, DEFAULT_MODEL_ID, get_provider, list_models

__all__ = [
    "LLMProvider",
    "MODEL_REGISTRY",
    "DEFAULT_MODEL_ID",
    "get_provider",
    "list_models",
]
