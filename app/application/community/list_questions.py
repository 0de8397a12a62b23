"""
Use case: List the community board.

Input: ListQuestionsQuery (limit)
Output: list[QuestionResult]
Side effects: None.
Failure cases: None. An unconfigured or failing datastore yields an
empty board.
"""

import logging
from datetime import datetime, timezone
from typing import Callable, Optional

from app.application.community.dtos import ListQuestionsQuery, QuestionResult
from app.domain.community.errors import DatastoreError
from app.domain.community.ports import QuestionRepository
from app.domain.community.questions import age_label

logger = logging.getLogger(__name__)

MAX_PAGE_SIZE = 50


class ListQuestionsUseCase:
    """Returns the newest questions with relative age labels."""

    def __init__(
        self,
        question_repo: Optional[QuestionRepository],
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ) -> None:
        self._question_repo = question_repo
        self._clock = clock

    def execute(self, query: ListQuestionsQuery) -> list[QuestionResult]:
        if self._question_repo is None:
            return []

        limit = max(1, min(query.limit, MAX_PAGE_SIZE))
        try:
            questions = self._question_repo.list_recent(limit)
        except DatastoreError as exc:
            logger.error("Could not load community questions: %s", exc.reason)
            return []

        now = self._clock()
        return [
            QuestionResult(
                id=q.id,
                wallet_type=q.wallet_type,
                goal=q.goal,
                stuck_point=q.stuck_point,
                locale=q.locale,
                created_at=q.created_at,
                age=age_label(q.created_at, now),
            )
            for q in questions
        ]
