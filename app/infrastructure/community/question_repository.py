"""
Adapter: Community questions datastore.

Implements QuestionRepository port over SQLAlchemy Core.
The ``questions`` table lives in the hosted Postgres database;
only insert and select are ever issued.
"""

import logging
from datetime import datetime, timezone
from uuid import uuid4

from sqlalchemy import (
    Column,
    DateTime,
    MetaData,
    String,
    Table,
    Text,
    insert,
    select,
)
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from app.domain.community.entities import Question, QuestionSubmission
from app.domain.community.errors import DatastoreError
from app.domain.community.ports import QuestionRepository

logger = logging.getLogger(__name__)

metadata = MetaData()

questions_table = Table(
    "questions",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("wallet_type", Text, nullable=False),
    Column("goal", Text, nullable=False),
    Column("stuck_point", Text, nullable=False),
    Column("locale", String(16), nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False),
)


class QuestionRepositoryAdapter(QuestionRepository):
    """Reads and writes the questions table.

    Implements the QuestionRepository port defined in the domain layer.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def create_schema(self) -> None:
        """Create the questions table if it does not exist.

        Used at startup when ``DATASTORE_CREATE_SCHEMA`` is set, for
        self-hosted Postgres or local SQLite. The hosted datastore ships
        the table already.
        """
        try:
            metadata.create_all(self._engine)
        except SQLAlchemyError as exc:
            logger.error("Questions schema bootstrap failed: %s", type(exc).__name__)
            raise DatastoreError(type(exc).__name__) from exc

    def add(self, submission: QuestionSubmission) -> None:
        """Insert a question with a fresh id and UTC timestamp.

        Args:
            submission: Sanitized question fields.
        """
        statement = insert(questions_table).values(
            id=str(uuid4()),
            wallet_type=submission.wallet_type,
            goal=submission.goal,
            stuck_point=submission.stuck_point,
            locale=submission.locale,
            created_at=datetime.now(timezone.utc),
        )
        try:
            with self._engine.begin() as conn:
                conn.execute(statement)
        except SQLAlchemyError as exc:
            logger.error("Question insert failed: %s", type(exc).__name__)
            raise DatastoreError(type(exc).__name__) from exc

    def list_recent(self, limit: int) -> list[Question]:
        """Return up to ``limit`` questions, newest first."""
        statement = (
            select(questions_table)
            .order_by(questions_table.c.created_at.desc())
            .limit(limit)
        )
        try:
            with self._engine.connect() as conn:
                rows = conn.execute(statement).mappings().all()
        except SQLAlchemyError as exc:
            logger.error("Question select failed: %s", type(exc).__name__)
            raise DatastoreError(type(exc).__name__) from exc

        return [
            Question(
                id=str(row["id"]),
                wallet_type=row["wallet_type"],
                goal=row["goal"],
                stuck_point=row["stuck_point"],
                locale=row["locale"],
                created_at=row["created_at"],
            )
            for row in rows
        ]
