"""
Context Selector Service

Records which course module a session is studying. The selection is
not read back on the message path; the client resends it with every
message.
"""

from datetime import datetime

from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession

from course_ta.core.errors import RequestValidationFailed
from course_ta.models.session_preference import SessionPreference

# Dialect-specific INSERT constructs that support ON CONFLICT DO UPDATE
UPSERT_INSERTS = {
    "postgresql": postgresql_insert,
    "sqlite": sqlite_insert,
}


async def set_context(
    db: AsyncSession,
    selected_option: str | None,
    session_id: str | None = None,
) -> str:
    """
    Select a course module, persisting it when a session is known.

    Returns:
        The selected module, stripped of surrounding whitespace
    """
    if not selected_option or not selected_option.strip():
        raise RequestValidationFailed("Selected option is required")
    selected_option = selected_option.strip()

    if session_id:
        await upsert_preference(db, session_id, selected_option)

    return selected_option


async def upsert_preference(
    db: AsyncSession,
    session_id: str,
    selected_option: str,
) -> None:
    """Create or update the session's preference in a single statement."""
    dialect = db.get_bind().dialect.name
    if dialect not in UPSERT_INSERTS:
        raise ValueError(f"Unsupported database dialect for upsert: {dialect}")

    insert = UPSERT_INSERTS[dialect]
    stmt = insert(SessionPreference).values(
        session_id=session_id,
        selected_option=selected_option,
        updated_at=datetime.utcnow(),
    )
    stmt = stmt.on_conflict_do_update(
        index_elements=[SessionPreference.session_id],
        set_={
            "selected_option": stmt.excluded.selected_option,
            "updated_at": stmt.excluded.updated_at,
        },
    )
    await db.execute(stmt)
    await db.commit()
