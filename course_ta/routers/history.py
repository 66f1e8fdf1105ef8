"""
Chat History Router

Reads or clears the current session's history and reports rating
statistics. History reads never fail: errors degrade to an empty list.
"""

import logging

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from course_ta.core.config import get_settings
from course_ta.core.database import get_db
from course_ta.core.errors import UpstreamError
from course_ta.core.session import resolve_session_id, session_cookie
from course_ta.services.history import clear_history, rating_stats, read_history

router = APIRouter()
logger = logging.getLogger(__name__)


# Schemas
class HistoryEntry(BaseModel):
    sender: str
    text: str
    id: str | None = None
    rated: bool | None = None


class HistoryResponse(BaseModel):
    history: list[HistoryEntry]


class StatsRequest(BaseModel):
    sessionId: str | None = None


class RatingStats(BaseModel):
    helpful: int
    unhelpful: int
    total: int


class StatsResponse(BaseModel):
    stats: RatingStats


# Endpoints
@router.get("", response_model=HistoryResponse, response_model_exclude_none=True)
async def get_history(
    request: Request,
    clear: str | None = None,
    db: AsyncSession = Depends(get_db),
):
    """Return the last exchanges of the cookie's session, or clear them with ?clear=true."""
    session_id = resolve_session_id(None, session_cookie(request))

    try:
        if clear == "true":
            removed = await clear_history(db, session_id)
            logger.info("Cleared %d interactions for session %s", removed, session_id)
            return HistoryResponse(history=[])

        entries = await read_history(db, session_id, limit=get_settings().history_limit)
    except Exception:
        logger.exception("Error fetching chat history for session %s", session_id)
        return HistoryResponse(history=[])

    return HistoryResponse(history=[HistoryEntry(**entry) for entry in entries])


@router.post("", response_model=StatsResponse)
async def get_rating_stats(
    data: StatsRequest | None = None,
    db: AsyncSession = Depends(get_db),
):
    """Helpful/unhelpful counts for a session, or across all sessions."""
    session_id = data.sessionId if data else None

    try:
        stats = await rating_stats(db, session_id)
    except Exception:
        logger.exception("Error fetching rating statistics")
        raise UpstreamError("Failed to retrieve rating statistics")

    return StatsResponse(stats=RatingStats(**stats))
