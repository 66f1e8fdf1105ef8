"""
Tests for the conversation orchestrator (service level, real database).
"""

import json

import pytest
from sqlalchemy import func, select

from course_ta.core.errors import GenerationError, RequestValidationFailed, UpstreamError
from course_ta.models.chat_interaction import ChatInteraction
from course_ta.services.prompts import CONTEXT_INSTRUCTION, SYSTEM_PROMPT


async def count_interactions(db_session, session_id=None):
    query = select(func.count()).select_from(ChatInteraction)
    if session_id:
        query = query.where(ChatInteraction.session_id == session_id)
    return (await db_session.execute(query)).scalar_one()


class TestSend:
    async def test_successful_send_persists_one_interaction(self, orchestrator, db_session, provider):
        result = await orchestrator.send(db_session, "What is least privilege?", "s1", "module-3")

        assert result.reply == provider.reply
        assert result.session_id == "s1"
        assert result.message_id

        stored = (await db_session.execute(select(ChatInteraction))).scalars().all()
        assert len(stored) == 1
        interaction = stored[0]
        assert str(interaction.id) == result.message_id
        assert interaction.role == "assistant"
        assert interaction.content == provider.reply
        assert interaction.session_id == "s1"
        assert interaction.rating is None
        assert [(m["role"], m["content"]) for m in interaction.messages] == [
            ("user", "What is least privilege?"),
            ("assistant", provider.reply),
        ]

    async def test_prompt_layout(self, orchestrator, db_session, provider, retriever):
        await orchestrator.send(db_session, "What is least privilege?", "s1", "module-3")

        messages = provider.calls[0]["messages"]
        assert messages[0] == {"role": "system", "content": SYSTEM_PROMPT}
        assert messages[1] == {"role": "user", "content": "What is least privilege?"}

        context = messages[2]
        assert context["role"] == "user"
        assert context["content"].startswith("Context: ")
        assert context["content"].endswith(CONTEXT_INSTRUCTION)
        payload = context["content"][len("Context: "):-len(CONTEXT_INSTRUCTION)].strip()
        assert json.loads(payload) == retriever.matches

    async def test_uses_configured_generation_parameters(self, orchestrator, db_session, provider):
        await orchestrator.send(db_session, "Hi?", "s1", "syllabus")

        call = provider.calls[0]
        assert call["model"] == "gpt-4o-mini"
        assert call["temperature"] == 0.5
        assert call["max_output_tokens"] == 1000

    async def test_retrieval_uses_preprocessed_message_and_namespace(self, orchestrator, db_session, retriever):
        await orchestrator.send(db_session, "Define PII. Give an Example!", "s1", "module-2")

        assert retriever.calls == [
            {"fragments": ["define pii.", "give an example!"], "namespace": "module-2"}
        ]

    async def test_prior_turns_are_included_oldest_first(self, orchestrator, db_session, provider):
        provider.reply = "First answer"
        await orchestrator.send(db_session, "First question", "s1", "syllabus")
        provider.reply = "Second answer"
        result = await orchestrator.send(db_session, "Second question", "s1", "syllabus")

        assert result.history[1:] == [
            {"role": "user", "content": "First question"},
            {"role": "assistant", "content": "First answer"},
            {"role": "user", "content": "Second question"},
        ]

    async def test_other_sessions_are_not_included(self, orchestrator, db_session, provider):
        await orchestrator.send(db_session, "Question for s1", "s1", "syllabus")
        result = await orchestrator.send(db_session, "Question for s2", "s2", "syllabus")

        assert [m["content"] for m in result.history[1:]] == ["Question for s2"]


class TestValidation:
    @pytest.mark.parametrize("message", [None, "", "   \n\t"])
    async def test_blank_message_rejected(self, orchestrator, db_session, retriever, message):
        with pytest.raises(RequestValidationFailed, match="Message is required"):
            await orchestrator.send(db_session, message, "s1", "syllabus")

        assert retriever.calls == []
        assert await count_interactions(db_session) == 0

    @pytest.mark.parametrize("option", [None, "", "  "])
    async def test_blank_selector_rejected(self, orchestrator, db_session, option):
        with pytest.raises(RequestValidationFailed, match="Selected option is required"):
            await orchestrator.send(db_session, "Hello?", "s1", option)

        assert await count_interactions(db_session) == 0


class TestUpstreamFailures:
    async def test_retrieval_failure_becomes_upstream_error(self, orchestrator, db_session, retriever, provider):
        retriever.error = ConnectionError("vector index unreachable")

        with pytest.raises(UpstreamError, match="vector index unreachable"):
            await orchestrator.send(db_session, "Hello?", "s1", "syllabus")

        assert provider.calls == []
        assert await count_interactions(db_session) == 0

    async def test_empty_reply_is_generation_error(self, orchestrator, db_session, provider):
        provider.error = GenerationError("Empty or invalid reply from OpenAI Chat Completions API")

        with pytest.raises(GenerationError):
            await orchestrator.send(db_session, "Hello?", "s1", "syllabus")

        assert await count_interactions(db_session) == 0

    async def test_model_failure_becomes_upstream_error(self, orchestrator, db_session, provider):
        provider.error = RuntimeError("rate limited")

        with pytest.raises(UpstreamError, match="rate limited"):
            await orchestrator.send(db_session, "Hello?", "s1", "syllabus")
