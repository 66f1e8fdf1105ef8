"""
Abstract base class for all LLM providers.

Each provider implements the API-specific translation layer; prompt
assembly lives in the conversation orchestrator.
"""

from abc import ABC, abstractmethod


class LLMProvider(ABC):
    """Abstract base class for all LLM providers."""

    provider_name: str = "base"

    @abstractmethod
    async def chat(
        self,
        messages: list[dict],
        model: str,
        max_output_tokens: int = 1000,
        temperature: float = 0.5,
    ) -> str:
        """
        Send a conversation to the LLM and return the reply text.

        Args:
            messages: List of message dicts with "role" and "content",
                      starting with the system message
            model: The API model identifier (e.g., "gpt-4o-mini")
            max_output_tokens: Maximum tokens in the response
            temperature: Sampling temperature

        Returns:
            Reply text from the LLM

        Raises:
            GenerationError: If the reply is empty or missing
        """
        ...
