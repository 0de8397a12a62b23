"""
Domain entities for the learning bounded context.

Content is sourced from static files and immutable at runtime.
Chat replies are ephemeral and never persisted.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class ContentType(Enum):
    """Kind of learning document."""

    COURSE = "course"
    GLOSSARY = "glossary"


class ReplyType(Enum):
    """Outcome of a chat message."""

    BLOCKED = "blocked"
    RESULTS = "results"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class ContentMeta:
    """Front-matter metadata of a course lesson or glossary term.

    ``title`` falls back to the slug and ``description`` to an empty
    string when the front matter omits them.
    """

    slug: str
    title: str
    description: str = ""
    order: Optional[int] = None
    next: Optional[str] = None
    category: Optional[str] = None
    related: tuple[str, ...] = ()
    keywords: Optional[str] = None


@dataclass(frozen=True)
class ContentItem:
    """A document with its metadata and raw markup body.

    ``locale`` is the locale actually served, which is ``en`` when the
    requested translation does not exist.
    """

    type: ContentType
    locale: str
    meta: ContentMeta
    body: str


@dataclass(frozen=True)
class TocItem:
    """One heading of a document's table of contents."""

    id: str
    text: str
    level: int


@dataclass(frozen=True)
class SearchEntry:
    """A bilingual entry of the chat search index."""

    type: ContentType
    slug: str
    title_en: str
    title_zh: str
    desc_en: str
    desc_zh: str
    keywords: str

    def title_for(self, locale: str) -> str:
        return self.title_zh if locale == "zh-CN" else self.title_en


@dataclass(frozen=True)
class ChatLink:
    """Link to a content page suggested by the chat."""

    type: ContentType
    slug: str
    title: str


@dataclass(frozen=True)
class ChatReply:
    """The chat's answer to one message."""

    type: ReplyType
    message: str
    links: tuple[ChatLink, ...] = field(default_factory=tuple)
