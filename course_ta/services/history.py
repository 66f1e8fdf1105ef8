"""
History Service

Reads, clears, and summarizes the stored exchanges of a session.
"""

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from course_ta.models.chat_interaction import ChatInteraction, Rating


def format_entries(interactions: list[ChatInteraction]) -> list[dict]:
    """
    Flatten exchanges into UI entries.

    Each sub-message becomes {"sender": "user"|"bot", "text": ...}; bot
    entries also carry the record id and whether it has been rated.
    """
    entries = []
    for entry in interactions:
        for msg in entry.messages:
            if msg["role"] == "user":
                entries.append({"sender": "user", "text": msg["content"]})
            else:
                entries.append({
                    "sender": "bot",
                    "text": msg["content"],
                    "id": str(entry.id),
                    "rated": entry.rating is not None,
                })
    return entries


async def read_history(db: AsyncSession, session_id: str, limit: int = 20) -> list[dict]:
    """Return the session's most recent `limit` exchanges in chronological order."""
    result = await db.execute(
        select(ChatInteraction)
        .where(ChatInteraction.session_id == session_id)
        .order_by(ChatInteraction.timestamp.desc())
        .limit(limit)
    )
    recent = list(result.scalars().all())
    recent.reverse()
    return format_entries(recent)


async def clear_history(db: AsyncSession, session_id: str) -> int:
    """Delete every exchange of a session. Returns the number of records removed."""
    result = await db.execute(
        delete(ChatInteraction).where(ChatInteraction.session_id == session_id)
    )
    await db.commit()
    return result.rowcount


async def rating_stats(db: AsyncSession, session_id: str | None = None) -> dict:
    """Count helpful/unhelpful ratings for one session, or all sessions if None."""
    query = (
        select(ChatInteraction.rating, func.count())
        .where(
            ChatInteraction.role == "assistant",
            ChatInteraction.rating.is_not(None),
        )
        .group_by(ChatInteraction.rating)
    )
    if session_id:
        query = query.where(ChatInteraction.session_id == session_id)

    result = await db.execute(query)
    counts = {rating: count for rating, count in result.all()}

    helpful = counts.get(Rating.HELPFUL, 0)
    unhelpful = counts.get(Rating.UNHELPFUL, 0)
    return {
        "helpful": helpful,
        "unhelpful": unhelpful,
        "total": helpful + unhelpful,
    }
