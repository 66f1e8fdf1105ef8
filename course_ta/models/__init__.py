from course_ta.models.chat_interaction import ChatInteraction, Rating
from course_ta.models.session_preference import SessionPreference

__all__ = [
    "ChatInteraction",
    "Rating",
    "SessionPreference",
]
