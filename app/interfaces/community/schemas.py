"""
Pydantic schemas for the community question board API.
"""

from datetime import datetime

from pydantic import BaseModel


class AskResponse(BaseModel):
    """Response schema for an accepted question."""

    success: bool


class QuestionItem(BaseModel):
    """A single question on the community board."""

    id: str
    wallet_type: str
    goal: str
    stuck_point: str
    locale: str
    created_at: datetime
    age: str


class QuestionListResponse(BaseModel):
    """Response schema for the community board."""

    questions: list[QuestionItem]
