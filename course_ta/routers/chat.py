"""
Chat Router

Answers a student message with a course-grounded reply.
"""

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from course_ta.core.config import get_settings
from course_ta.core.database import get_db
from course_ta.core.errors import UpstreamError
from course_ta.core.session import resolve_session_id, session_cookie
from course_ta.services.conversation import ConversationOrchestrator, get_orchestrator

router = APIRouter()


# Schemas
class ChatRequest(BaseModel):
    message: str | None = None
    sessionId: str | None = None
    selectedOption: str | None = None


class HistoryMessage(BaseModel):
    role: str
    content: str


class ChatResponse(BaseModel):
    reply: str
    sessionId: str
    messageId: str
    history: list[HistoryMessage]


# Endpoints
@router.post("", response_model=ChatResponse)
async def send_message(
    data: ChatRequest,
    request: Request,
    response: Response,
    db: AsyncSession = Depends(get_db),
    orchestrator: ConversationOrchestrator = Depends(get_orchestrator),
):
    """Send a message; the reply's messageId can be rated afterwards."""
    settings = get_settings()
    session_id = resolve_session_id(data.sessionId, session_cookie(request))
    selected_option = (
        data.selectedOption if data.selectedOption is not None else settings.default_module
    )

    try:
        result = await orchestrator.send(db, data.message, session_id, selected_option)
    except UpstreamError as e:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": e.message, "reply": None, "history": []},
        )

    response.set_cookie(
        settings.session_cookie_name,
        result.session_id,
        httponly=True,
        samesite="lax",
    )
    return ChatResponse(
        reply=result.reply,
        sessionId=result.session_id,
        messageId=result.message_id,
        history=[HistoryMessage(**msg) for msg in result.history],
    )
