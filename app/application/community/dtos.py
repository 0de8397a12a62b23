"""
Data Transfer Objects for the community application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class SubmitQuestionCommand:
    """Input DTO for the ask form, straight from the JSON body.

    Values are untrusted: anything but a string is treated as missing.
    """

    wallet_type: Any = None
    goal: Any = None
    stuck_point: Any = None
    locale: Any = None


@dataclass(frozen=True)
class SubmitQuestionResult:
    """Output DTO for an accepted question."""

    success: bool


@dataclass(frozen=True)
class ListQuestionsQuery:
    """Input DTO for the community board."""

    limit: int = 50


@dataclass(frozen=True)
class QuestionResult:
    """Output DTO for one board entry.

    Attributes:
        age: Relative age label such as ``3h ago``.
    """

    id: str
    wallet_type: str
    goal: str
    stuck_point: str
    locale: str
    created_at: datetime
    age: str
