from datetime import datetime
from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from course_ta.core.database import Base


class SessionPreference(Base):
    __tablename__ = "session_preferences"

    session_id: Mapped[str] = mapped_column(String(255), primary_key=True)
    selected_option: Mapped[str] = mapped_column(String(100), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )
