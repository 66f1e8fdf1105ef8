"""
Pytest Configuration and Fixtures.

- Required settings are provided through the environment before any
  course_ta module is imported
- Each test gets a fresh in-memory SQLite database
- The retriever and LLM provider are replaced with in-process fakes
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("OPENAI_API_KEY", "test-openai-key")
os.environ.setdefault("CHROMA_API_KEY", "test-chroma-key")
os.environ.setdefault("LOG_RICH", "false")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.pool import StaticPool

from course_ta.core.config import get_settings
from course_ta.core.database import Database
from course_ta.main import create_app
from course_ta.services.conversation import ConversationOrchestrator
from course_ta.services.llm.base import LLMProvider


# ─────────────────────────────────────────────────────────────────────────────
# Fakes
# ─────────────────────────────────────────────────────────────────────────────


class FakeRetriever:
    """Stands in for CourseRetriever; records every call."""

    def __init__(self, matches: list[dict] | None = None, error: Exception | None = None):
        self.matches = matches if matches is not None else [
            {"text": "Least privilege grants only the access a task needs.", "source": "module-3-slides.pdf"},
        ]
        self.error = error
        self.calls: list[dict] = []

    async def retrieve(self, fragments, namespace, top_k=None):
        self.calls.append({"fragments": fragments, "namespace": namespace})
        if self.error:
            raise self.error
        return self.matches


class FakeProvider(LLMProvider):
    provider_name = "fake"

    def __init__(self, reply: str = "Least privilege means granting the minimum access needed.", error: Exception | None = None):
        self.reply = reply
        self.error = error
        self.calls: list[dict] = []

    async def chat(self, messages, model, max_output_tokens=1000, temperature=0.5):
        self.calls.append({
            "messages": messages,
            "model": model,
            "max_output_tokens": max_output_tokens,
            "temperature": temperature,
        })
        if self.error:
            raise self.error
        return self.reply


# ─────────────────────────────────────────────────────────────────────────────
# Database Fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
async def database():
    """Fresh in-memory database; StaticPool keeps the single connection alive."""
    db = Database(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await db.create_all()
    yield db
    await db.dispose()


@pytest.fixture
async def db_session(database):
    async with database.session_factory() as session:
        yield session


# ─────────────────────────────────────────────────────────────────────────────
# Service Fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def settings():
    return get_settings()


@pytest.fixture
def retriever() -> FakeRetriever:
    return FakeRetriever()


@pytest.fixture
def provider() -> FakeProvider:
    return FakeProvider()


@pytest.fixture
def orchestrator(settings, retriever, provider) -> ConversationOrchestrator:
    return ConversationOrchestrator(
        settings=settings,
        retriever=retriever,
        provider=provider,
        api_model="gpt-4o-mini",
    )


# ─────────────────────────────────────────────────────────────────────────────
# HTTP Client
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
async def client(database, orchestrator):
    """
    HTTP client against the app. ASGITransport does not run the lifespan,
    so the collaborators it would build are placed on app.state here.
    """
    app = create_app()
    app.state.database = database
    app.state.orchestrator = orchestrator

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


async def send_chat(client, message="What is least privilege?", session_id="s1", selected_option="module-3"):
    """
    POST /chat helper used across API tests.

    The session cookie set by the response is dropped so each test chooses
    the cookie it reads history with.
    """
    response = await client.post(
        "/chat",
        json={"message": message, "sessionId": session_id, "selectedOption": selected_option},
    )
    client.cookies.clear()
    return response
