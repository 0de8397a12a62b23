"""
FastAPI router for the community bounded context.

All routes delegate to use cases. No business logic here.
Error mapping is handled by centralized error handlers.
"""

from dataclasses import asdict

from fastapi import APIRouter, Depends, Query, Request
from starlette.concurrency import run_in_threadpool

from app.application.community.dtos import (
    ListQuestionsQuery,
    SubmitQuestionCommand,
)
from app.application.community.list_questions import ListQuestionsUseCase
from app.application.community.submit_question import SubmitQuestionUseCase
from app.core.config import settings
from app.interfaces.community.dependencies import (
    get_list_questions_use_case,
    get_submit_question_use_case,
)
from app.interfaces.community.schemas import (
    AskResponse,
    QuestionItem,
    QuestionListResponse,
)
from app.interfaces.json_body import read_json_object
from app.interfaces.schemas import ErrorResponse
from app.shared.security.rate_limiting import limiter

router = APIRouter(tags=["community"])


@router.post(
    "/ask",
    status_code=201,
    response_model=AskResponse,
    responses={
        400: {"model": ErrorResponse},
        429: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        503: {"model": ErrorResponse},
    },
    summary="Submit a question",
    description="Stores a newcomer question for the community board.",
)
@limiter.limit(settings.ask_rate_limit)
async def submit_question(
    request: Request,
    use_case: SubmitQuestionUseCase = Depends(get_submit_question_use_case),
) -> AskResponse:
    """Validate and store one question."""
    use_case.ensure_available()
    payload = await read_json_object(request)
    command = SubmitQuestionCommand(
        wallet_type=payload.get("wallet_type"),
        goal=payload.get("goal"),
        stuck_point=payload.get("stuck_point"),
        locale=payload.get("locale"),
    )
    result = await run_in_threadpool(use_case.execute, command)
    return AskResponse(success=result.success)


@router.get(
    "/questions",
    response_model=QuestionListResponse,
    summary="Community board",
    description=(
        "Newest questions first, at most 50. "
        "Empty when the datastore is unavailable."
    ),
)
def list_questions(
    limit: int = Query(default=settings.questions_page_size, ge=1),
    use_case: ListQuestionsUseCase = Depends(get_list_questions_use_case),
) -> QuestionListResponse:
    """Return the newest community questions."""
    results = use_case.execute(ListQuestionsQuery(limit=limit))
    return QuestionListResponse(
        questions=[QuestionItem(**asdict(question)) for question in results]
    )
