"""
Dependency injection for the community bounded context.

The SQLAlchemy engine is created once per datastore URL.
With no datastore configured the use cases receive no repository.
"""

from functools import lru_cache
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from app.application.community.list_questions import ListQuestionsUseCase
from app.application.community.submit_question import SubmitQuestionUseCase
from app.core.config import settings
from app.domain.community.ports import QuestionRepository
from app.infrastructure.community.question_repository import (
    QuestionRepositoryAdapter,
)


@lru_cache(maxsize=1)
def _get_db_engine(url: str) -> Engine:
    """Build a SQLAlchemy engine for the questions datastore."""
    return create_engine(url, pool_pre_ping=True)


def get_question_repository() -> Optional[QuestionRepository]:
    """Return the questions repository, or None when unconfigured."""
    if not settings.is_datastore_configured():
        return None
    return QuestionRepositoryAdapter(engine=_get_db_engine(settings.supabase_db_url))


def get_submit_question_use_case() -> SubmitQuestionUseCase:
    """Build SubmitQuestionUseCase with its infrastructure dependencies."""
    return SubmitQuestionUseCase(
        question_repo=get_question_repository(),
        max_field_length=settings.ask_max_field_length,
    )


def get_list_questions_use_case() -> ListQuestionsUseCase:
    """Build ListQuestionsUseCase with its infrastructure dependencies."""
    return ListQuestionsUseCase(question_repo=get_question_repository())


def bootstrap_question_schema() -> bool:
    """Create the questions table when configured to do so.

    Returns:
        True if the schema bootstrap ran.

    Raises:
        DatastoreError: The datastore rejected the DDL.
    """
    if not (settings.is_datastore_configured() and settings.datastore_create_schema):
        return False
    repo = QuestionRepositoryAdapter(engine=_get_db_engine(settings.supabase_db_url))
    repo.create_schema()
    return True
