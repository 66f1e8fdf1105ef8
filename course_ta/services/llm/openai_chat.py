"""
OpenAI Chat Completions API Provider

Handles GPT-4o, GPT-4o-mini, and other Chat Completions API models:
- client.chat.completions.create()
- messages (not input)
- response.choices[0].message.content
"""

from openai import AsyncOpenAI

from course_ta.core.config import get_settings
from course_ta.core.errors import GenerationError
from course_ta.services.llm.base import LLMProvider


class OpenAIChatProvider(LLMProvider):
    """Provider for OpenAI Chat Completions API (GPT-4o, GPT-4o-mini, etc.)."""

    provider_name = "openai_chat"

    def __init__(self, client: AsyncOpenAI | None = None):
        self.client = client or AsyncOpenAI(api_key=get_settings().openai_api_key)

    async def chat(
        self,
        messages: list[dict],
        model: str,
        max_output_tokens: int = 1000,
        temperature: float = 0.5,
    ) -> str:
        response = await self.client.chat.completions.create(
            model=model,
            messages=messages,
            max_completion_tokens=max_output_tokens,
            temperature=temperature,
        )

        content = response.choices[0].message.content if response.choices else None
        if not content:
            raise GenerationError("Empty or invalid reply from OpenAI Chat Completions API")
        return content
