"""
Content catalog domain service.

Resolves documents with English fallback, lists metadata in display
order and extracts tables of contents from markup bodies.
Pure domain logic: reading files is delegated to ContentRepository.
"""

import logging
import re
from typing import Optional

from app.domain.learning.entities import (
    ContentItem,
    ContentMeta,
    ContentType,
    TocItem,
)
from app.domain.learning.ports import ContentRepository

logger = logging.getLogger(__name__)

FALLBACK_LOCALE = "en"
DEFAULT_COURSE_ORDER = 99

SLUG_PATTERN = re.compile(r"^[a-z0-9][a-z0-9-]*$")
HEADING_PATTERN = re.compile(r"^(#{2,3})\s+(.+)$", re.MULTILINE)
ANCHOR_STRIP_PATTERN = re.compile(r"[^a-z0-9\u4e00-\u9fff]+", re.IGNORECASE)


def is_valid_slug(slug: str) -> bool:
    """Return True for lowercase, dash-separated slugs."""
    return bool(SLUG_PATTERN.match(slug))


def heading_anchor(text: str) -> str:
    """Turn heading text into a URL fragment id.

    Runs of anything but ASCII letters, digits and CJK ideographs
    collapse into a single dash.
    """
    return ANCHOR_STRIP_PATTERN.sub("-", text.lower()).strip("-")


def extract_toc(body: str) -> list[TocItem]:
    """Return the level 2 and 3 headings of a markup body, in order."""
    toc = []
    for match in HEADING_PATTERN.finditer(body):
        text = match.group(2).strip()
        toc.append(
            TocItem(id=heading_anchor(text), text=text, level=len(match.group(1)))
        )
    return toc


class ContentCatalog:
    """Read-side view over the course and glossary documents."""

    def __init__(self, repository: ContentRepository) -> None:
        self._repository = repository

    def get_item(
        self, content_type: ContentType, locale: str, slug: str
    ) -> Optional[ContentItem]:
        """Return a document, falling back to English.

        Args:
            content_type: Course or glossary.
            locale: Requested locale.
            slug: Document slug.

        Returns:
            The localized document, else the English one, else None.
        """
        if not is_valid_slug(slug):
            logger.warning("Rejected content slug %r", slug)
            return None

        item = self._repository.get(content_type, locale, slug)
        if item is None and locale != FALLBACK_LOCALE:
            logger.debug(
                "No %s translation of %s/%s, falling back to %s",
                locale,
                content_type.value,
                slug,
                FALLBACK_LOCALE,
            )
            item = self._repository.get(content_type, FALLBACK_LOCALE, slug)
        return item

    def list_slugs(self, content_type: ContentType, locale: str) -> list[str]:
        """Return the slugs available in exactly this locale."""
        return self._repository.list_slugs(content_type, locale)

    def list_meta(self, content_type: ContentType, locale: str) -> list[ContentMeta]:
        """Return document metadata in display order.

        Courses are ordered by their ``order`` field (missing last),
        glossary terms alphabetically by title.
        """
        metas = []
        for slug in self.list_slugs(content_type, locale):
            item = self.get_item(content_type, locale, slug)
            if item is not None:
                metas.append(item.meta)

        if content_type is ContentType.COURSE:
            metas.sort(
                key=lambda meta: (
                    meta.order if meta.order is not None else DEFAULT_COURSE_ORDER
                )
            )
        else:
            metas.sort(key=lambda meta: meta.title.casefold())
        return metas
