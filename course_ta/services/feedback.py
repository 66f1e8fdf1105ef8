"""
Feedback Service

Attaches a helpful/unhelpful rating to a stored exchange. Re-rating
overwrites the earlier rating and its timestamp.
"""

import logging
import uuid
from datetime import datetime

from sqlalchemy.ext.asyncio import AsyncSession

from course_ta.core.errors import NotFound, RequestValidationFailed
from course_ta.models.chat_interaction import ChatInteraction, Rating

logger = logging.getLogger(__name__)


def parse_rating(value: str | None) -> Rating:
    try:
        return Rating(value)
    except ValueError:
        raise RequestValidationFailed('Rating must be either "helpful" or "unhelpful"')


async def rate_interaction(
    db: AsyncSession,
    message_id: str | None,
    rating: str | None,
) -> ChatInteraction:
    """
    Rate a stored exchange.

    Raises:
        RequestValidationFailed: Missing message id or unknown rating value
        NotFound: No exchange with that id
    """
    if not message_id or not message_id.strip():
        raise RequestValidationFailed("Message ID is required")
    parsed = parse_rating(rating)

    try:
        interaction_id = uuid.UUID(message_id.strip())
    except ValueError:
        raise NotFound("Message not found")

    interaction = await db.get(ChatInteraction, interaction_id)
    if interaction is None:
        raise NotFound("Message not found")

    if interaction.rating is not None:
        logger.info(
            "Overwriting rating %s on %s", interaction.rating.value, interaction_id
        )

    interaction.rating = parsed
    interaction.rated_at = datetime.utcnow()
    await db.commit()
    return interaction
