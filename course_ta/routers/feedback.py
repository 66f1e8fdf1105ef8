"""
Rate Message Router

Records whether a reply was helpful.
"""

import logging

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from course_ta.core.database import get_db
from course_ta.core.errors import AppError, UpstreamError
from course_ta.services.feedback import rate_interaction

router = APIRouter()
logger = logging.getLogger(__name__)


# Schemas
class RateRequest(BaseModel):
    messageId: str | None = None
    rating: str | None = None


class RateResponse(BaseModel):
    success: bool
    message: str


# Endpoints
@router.post("", response_model=RateResponse)
async def rate_message(data: RateRequest, db: AsyncSession = Depends(get_db)):
    """Rate a reply "helpful" or "unhelpful"; 404 if the messageId is unknown."""
    try:
        await rate_interaction(db, data.messageId, data.rating)
    except AppError:
        raise
    except Exception as e:
        logger.exception("Error rating message %s", data.messageId)
        raise UpstreamError(str(e) or "An unexpected error occurred") from e

    return RateResponse(success=True, message="Rating saved successfully")
