import uuid
from datetime import datetime
from enum import Enum
from sqlalchemy import JSON, String, Text, DateTime, Uuid, Enum as SQLEnum
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from course_ta.core.database import Base


class Rating(str, Enum):
    HELPFUL = "helpful"
    UNHELPFUL = "unhelpful"


class ChatInteraction(Base):
    """One completed exchange: the user turn and the assistant reply."""

    __tablename__ = "chat_interactions"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    role: Mapped[str] = mapped_column(String(20), default="assistant", nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    timestamp: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, nullable=False, index=True
    )
    session_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    # [{"role": "user"|"assistant", "content": str, "timestamp": iso str}, ...]
    messages: Mapped[list[dict]] = mapped_column(
        JSON().with_variant(JSONB, "postgresql"), nullable=False
    )
    rating: Mapped[Rating | None] = mapped_column(
        SQLEnum(
            Rating,
            name="rating",
            values_callable=lambda enum: [member.value for member in enum],
        ),
        nullable=True,
    )
    rated_at: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
