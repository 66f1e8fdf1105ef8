"""
OpenAI Responses API Provider

Handles GPT-5.x models using the newer Responses API format:
- client.responses.create()
- input (not messages)
- response.output_text

GPT-5.x models do not accept a temperature, so it is not sent.
"""

from openai import AsyncOpenAI

from course_ta.core.config import get_settings
from course_ta.core.errors import GenerationError
from course_ta.services.llm.base import LLMProvider


class OpenAIResponsesProvider(LLMProvider):
    """Provider for OpenAI Responses API (GPT-5.x models)."""

    provider_name = "openai_responses"

    def __init__(self, client: AsyncOpenAI | None = None):
        self.client = client or AsyncOpenAI(api_key=get_settings().openai_api_key)

    async def chat(
        self,
        messages: list[dict],
        model: str,
        max_output_tokens: int = 1000,
        temperature: float = 0.5,
    ) -> str:
        response = await self.client.responses.create(
            model=model,
            input=messages,
            max_output_tokens=max_output_tokens,
        )

        content = response.output_text
        if not content:
            raise GenerationError("Empty or invalid reply from OpenAI Responses API")
        return content
