"""
Domain entities for the community bounded context.

Questions are created once through the ask form and never
mutated or deleted by this system.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class QuestionSubmission:
    """Sanitized question ready to be inserted."""

    wallet_type: str
    goal: str
    stuck_point: str
    locale: str


@dataclass(frozen=True)
class Question:
    """A persisted community question."""

    id: str
    wallet_type: str
    goal: str
    stuck_point: str
    locale: str
    created_at: datetime
