"""
Conversation Orchestrator

Handles one student message end to end:
1. Load the session's earlier exchanges and flatten them into chat messages
2. Preprocess the new message and retrieve course context for it
3. Ask the LLM for a reply grounded in that context
4. Persist the exchange and return the reply with its message id
"""

import logging
from dataclasses import dataclass
from datetime import datetime

from fastapi import Request
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from course_ta.core.config import Settings
from course_ta.core.errors import AppError, RequestValidationFailed, UpstreamError
from course_ta.models.chat_interaction import ChatInteraction
from course_ta.services.llm.base import LLMProvider
from course_ta.services.preprocess import preprocess_message
from course_ta.services.prompts import compile_context_message, compile_system_message
from course_ta.services.rag.retriever import CourseRetriever

logger = logging.getLogger(__name__)


@dataclass
class ChatReply:
    reply: str
    session_id: str
    message_id: str
    history: list[dict]


class ConversationOrchestrator:
    def __init__(
        self,
        settings: Settings,
        retriever: CourseRetriever,
        provider: LLMProvider,
        api_model: str,
    ):
        self.settings = settings
        self.retriever = retriever
        self.provider = provider
        self.api_model = api_model

    async def load_history(self, db: AsyncSession, session_id: str) -> list[dict]:
        """Flatten a session's stored exchanges, oldest first, into role/content messages."""
        result = await db.execute(
            select(ChatInteraction)
            .where(ChatInteraction.session_id == session_id)
            .order_by(ChatInteraction.timestamp.asc())
        )
        return [
            {"role": msg["role"], "content": msg["content"]}
            for entry in result.scalars().all()
            for msg in entry.messages
        ]

    async def send(
        self,
        db: AsyncSession,
        message: str | None,
        session_id: str,
        selected_option: str | None,
    ) -> ChatReply:
        """
        Answer a student message.

        Raises:
            RequestValidationFailed: Blank message or module selector
            UpstreamError: Any database, embedding, index, or LLM failure
        """
        if not message or not message.strip():
            raise RequestValidationFailed("Message is required")
        if not selected_option or not selected_option.strip():
            raise RequestValidationFailed("Selected option is required")

        try:
            history = [
                compile_system_message(),
                *await self.load_history(db, session_id),
                {"role": "user", "content": message},
            ]

            fragments = preprocess_message(message)
            logger.debug("Processed message: %s", fragments)

            metadata = await self.retriever.retrieve(fragments, namespace=selected_option)

            reply = await self.provider.chat(
                messages=[*history, compile_context_message(metadata)],
                model=self.api_model,
                max_output_tokens=self.settings.max_output_tokens,
                temperature=self.settings.temperature,
            )

            now = datetime.utcnow()
            interaction = ChatInteraction(
                role="assistant",
                content=reply,
                timestamp=now,
                session_id=session_id,
                messages=[
                    {"role": "user", "content": message, "timestamp": now.isoformat()},
                    {"role": "assistant", "content": reply, "timestamp": now.isoformat()},
                ],
            )
            db.add(interaction)
            await db.commit()
        except AppError as e:
            await db.rollback()
            logger.error("Failed to process message for session %s: %s", session_id, e.message)
            raise
        except Exception as e:
            await db.rollback()
            logger.exception("Failed to process message for session %s", session_id)
            raise UpstreamError(str(e) or "Failed to process message") from e

        logger.info(
            "Stored interaction %s for session %s (module=%s)",
            interaction.id, session_id, selected_option,
        )
        return ChatReply(
            reply=reply,
            session_id=session_id,
            message_id=str(interaction.id),
            history=history,
        )


def get_orchestrator(request: Request) -> ConversationOrchestrator:
    """Dependency: the orchestrator built at startup."""
    return request.app.state.orchestrator
