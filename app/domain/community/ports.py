"""
Port interfaces (ABCs) for the community bounded context.

The datastore only needs insert and select over one table.
"""

from abc import ABC, abstractmethod

from app.domain.community.entities import Question, QuestionSubmission


class QuestionRepository(ABC):
    """Port for persisting and listing community questions.

    Implementations raise DatastoreError on any storage failure.
    """

    @abstractmethod
    def add(self, submission: QuestionSubmission) -> None:
        """Insert a new question."""
        raise NotImplementedError

    @abstractmethod
    def list_recent(self, limit: int) -> list[Question]:
        """Return the newest questions first."""
        raise NotImplementedError
