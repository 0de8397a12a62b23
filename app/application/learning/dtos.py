"""
Data Transfer Objects for the learning application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class GetContentQuery:
    """Input DTO for a single document.

    Attributes:
        content_type: ``course`` or ``glossary``.
        locale: Requested locale; English is served when missing.
        slug: Document slug.
    """

    content_type: str
    locale: str
    slug: str


@dataclass(frozen=True)
class ListContentQuery:
    """Input DTO for listing documents of one type in one locale."""

    content_type: str
    locale: str


@dataclass(frozen=True)
class ContentMetaResult:
    """Output DTO for document metadata."""

    slug: str
    title: str
    description: str
    order: Optional[int]
    next: Optional[str]
    category: Optional[str]
    related: list[str]
    keywords: Optional[str]


@dataclass(frozen=True)
class TocEntryResult:
    """Output DTO for one table-of-contents heading."""

    id: str
    text: str
    level: int


@dataclass(frozen=True)
class ContentResult:
    """Output DTO for a document.

    Attributes:
        locale: Locale actually served (``en`` after a fallback).
        body: Raw markup body; rendering is left to the client.
    """

    content_type: str
    locale: str
    meta: ContentMetaResult
    body: str
    toc: list[TocEntryResult]


@dataclass(frozen=True)
class ChatCommand:
    """Input DTO for one chat message."""

    message: str
    locale: str = "en"


@dataclass(frozen=True)
class ChatLinkResult:
    """Output DTO for a suggested content link."""

    type: str
    slug: str
    title: str


@dataclass(frozen=True)
class ChatResult:
    """Output DTO for a chat reply (blocked, results or fallback)."""

    type: str
    message: str
    links: list[ChatLinkResult]
