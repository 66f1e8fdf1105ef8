"""
Models Router

Exposes the registered completion models. The list is informational:
the model that answers /chat is fixed at startup by OPENAI_MODEL.
"""

from fastapi import APIRouter
from pydantic import BaseModel

from course_ta.services.llm.registry import list_models


router = APIRouter()


class ModelInfo(BaseModel):
    id: str
    display_name: str
    tier: str
    description: str


@router.get("", response_model=list[ModelInfo])
async def get_available_models():
    """Return the registered models; the active one is set by OPENAI_MODEL."""
    return list_models()
