"""
Set Context Router

Switches the course module the assistant retrieves material from.
"""

import logging

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from course_ta.core.database import get_db
from course_ta.core.errors import AppError, UpstreamError
from course_ta.core.session import resolve_session_id, session_cookie
from course_ta.services.context import set_context

router = APIRouter()
logger = logging.getLogger(__name__)


# Schemas
class SetContextRequest(BaseModel):
    selectedOption: str | None = None
    sessionId: str | None = None


class SetContextResponse(BaseModel):
    success: bool
    message: str
    selectedOption: str


# Endpoints
@router.post("", response_model=SetContextResponse)
async def set_context_option(
    data: SetContextRequest,
    request: Request,
    db: AsyncSession = Depends(get_db),
):
    """Select a course module; persisted per session when one is known."""
    session_id = resolve_session_id(data.sessionId, session_cookie(request), mint=False)

    try:
        selected_option = await set_context(db, data.selectedOption, session_id)
    except AppError:
        raise
    except Exception as e:
        logger.exception("Failed to store context for session %s", session_id)
        raise UpstreamError(str(e) or "An unexpected error occurred") from e

    return SetContextResponse(
        success=True,
        message=f"Context updated to {selected_option}",
        selectedOption=selected_option,
    )
