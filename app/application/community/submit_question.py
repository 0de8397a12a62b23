"""
Use case: Accept a question from the ask form.

Input: SubmitQuestionCommand (raw wallet_type, goal, stuck_point, locale)
Output: SubmitQuestionResult
Side effects: Inserts one row into the questions datastore.
Failure cases: DatastoreNotConfiguredError, MissingFieldsError, DatastoreError.
"""

import logging
from typing import Optional

from app.application.community.dtos import (
    SubmitQuestionCommand,
    SubmitQuestionResult,
)
from app.domain.community.entities import QuestionSubmission
from app.domain.community.errors import (
    DatastoreNotConfiguredError,
    MissingFieldsError,
)
from app.domain.community.ports import QuestionRepository
from app.domain.community.questions import MAX_FIELD_LENGTH, sanitize_field

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en"
REQUIRED_FIELDS = ("wallet_type", "goal", "stuck_point")


class SubmitQuestionUseCase:
    """Sanitizes, validates and stores a community question.

    ``question_repo`` is None when no datastore is configured.
    """

    def __init__(
        self,
        question_repo: Optional[QuestionRepository],
        max_field_length: int = MAX_FIELD_LENGTH,
    ) -> None:
        self._question_repo = question_repo
        self._max_field_length = max_field_length

    def ensure_available(self) -> QuestionRepository:
        """Return the repository or fail when the datastore is unconfigured."""
        if self._question_repo is None:
            raise DatastoreNotConfiguredError()
        return self._question_repo

    def execute(self, command: SubmitQuestionCommand) -> SubmitQuestionResult:
        """Run the submission use case.

        Args:
            command: Untrusted form values.

        Returns:
            A success marker once the question is stored.
        """
        repo = self.ensure_available()

        submission = QuestionSubmission(
            wallet_type=sanitize_field(
                command.wallet_type, max_length=self._max_field_length
            ),
            goal=sanitize_field(command.goal, max_length=self._max_field_length),
            stuck_point=sanitize_field(
                command.stuck_point, max_length=self._max_field_length
            ),
            locale=sanitize_field(
                command.locale, max_length=self._max_field_length
            )
            or DEFAULT_LOCALE,
        )

        missing = [name for name in REQUIRED_FIELDS if not getattr(submission, name)]
        if missing:
            raise MissingFieldsError(missing)

        repo.add(submission)
        logger.info("Stored community question locale=%s", submission.locale)
        return SubmitQuestionResult(success=True)
