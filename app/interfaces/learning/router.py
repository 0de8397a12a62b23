"""
FastAPI router for the learning bounded context.

All routes delegate to use cases. No business logic here.
Error mapping is handled by centralized error handlers.
"""

from dataclasses import asdict
from typing import Literal

from fastapi import APIRouter, Depends, Query, Request

from app.application.learning.dtos import (
    ChatCommand,
    GetContentQuery,
    ListContentQuery,
)
from app.application.learning.get_content import (
    GetContentUseCase,
    ListContentUseCase,
)
from app.application.learning.respond_to_chat import RespondToChatUseCase
from app.core.config import settings
from app.interfaces.json_body import read_json_object
from app.interfaces.learning.dependencies import (
    get_content_use_case,
    get_list_content_use_case,
    get_respond_to_chat_use_case,
)
from app.interfaces.learning.schemas import (
    ChatLinkItem,
    ChatResponse,
    ContentListResponse,
    ContentMetaItem,
    ContentResponse,
    TocEntry,
)
from app.interfaces.schemas import ErrorResponse

router = APIRouter(tags=["learning"])

ContentTypeParam = Literal["course", "glossary"]


@router.post(
    "/chat",
    response_model=ChatResponse,
    responses={400: {"model": ErrorResponse}},
    summary="Chat widget",
    description=(
        "Points a newcomer question at course and glossary pages. "
        "Investment-advice requests are always answered with type=blocked."
    ),
)
async def chat(
    request: Request,
    use_case: RespondToChatUseCase = Depends(get_respond_to_chat_use_case),
) -> ChatResponse:
    """Answer a chat message."""
    payload = await read_json_object(request)
    message = payload.get("message")
    locale = payload.get("locale")

    result = use_case.execute(
        ChatCommand(
            message=message if isinstance(message, str) else "",
            locale=locale if isinstance(locale, str) else settings.default_locale,
        )
    )
    return ChatResponse(
        type=result.type,
        message=result.message,
        links=[ChatLinkItem(**asdict(link)) for link in result.links],
    )


@router.get(
    "/content/{content_type}",
    response_model=ContentListResponse,
    responses={404: {"model": ErrorResponse}},
    summary="List course lessons or glossary terms",
)
def list_content(
    content_type: ContentTypeParam,
    locale: str = Query(default=settings.default_locale),
    use_case: ListContentUseCase = Depends(get_list_content_use_case),
) -> ContentListResponse:
    """List documents of one type, courses by order, glossary by title."""
    results = use_case.execute(
        ListContentQuery(content_type=content_type, locale=locale)
    )
    return ContentListResponse(
        type=content_type,
        locale=locale,
        items=[ContentMetaItem(**asdict(meta)) for meta in results],
    )


@router.get(
    "/content/{content_type}/{slug}",
    response_model=ContentResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Get a course lesson or glossary term",
    description="Serves the English document when the translation is missing.",
)
def get_content(
    content_type: ContentTypeParam,
    slug: str,
    locale: str = Query(default=settings.default_locale),
    use_case: GetContentUseCase = Depends(get_content_use_case),
) -> ContentResponse:
    """Return one document with its table of contents."""
    result = use_case.execute(
        GetContentQuery(content_type=content_type, locale=locale, slug=slug)
    )
    return ContentResponse(
        type=result.content_type,
        locale=result.locale,
        meta=ContentMetaItem(**asdict(result.meta)),
        body=result.body,
        toc=[TocEntry(**asdict(entry)) for entry in result.toc],
    )
