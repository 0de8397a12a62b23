"""
Pydantic schemas for the learning API.

These schemas define the API contract for content, chat and sitemap.
No business logic belongs here.
"""

from pydantic import BaseModel


class ContentMetaItem(BaseModel):
    """Front-matter metadata of a document."""

    slug: str
    title: str
    description: str
    order: int | None = None
    next: str | None = None
    category: str | None = None
    related: list[str] = []
    keywords: str | None = None


class TocEntry(BaseModel):
    """One heading of the table of contents."""

    id: str
    text: str
    level: int


class ContentResponse(BaseModel):
    """Response schema for a single course lesson or glossary term."""

    type: str
    locale: str
    meta: ContentMetaItem
    body: str
    toc: list[TocEntry]


class ContentListResponse(BaseModel):
    """Response schema for a content listing."""

    type: str
    locale: str
    items: list[ContentMetaItem]


class ChatLinkItem(BaseModel):
    """A content page suggested by the chat."""

    type: str
    slug: str
    title: str


class ChatResponse(BaseModel):
    """Response schema for the chat endpoint.

    Attributes:
        type: ``blocked``, ``results`` or ``fallback``.
    """

    type: str
    message: str
    links: list[ChatLinkItem]
