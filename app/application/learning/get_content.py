"""
Use cases: Read course and glossary documents.

Input: GetContentQuery / ListContentQuery
Output: ContentResult / list[ContentMetaResult]
Side effects: None (reads static files).
Failure cases: UnsupportedLocaleError, ContentNotFoundError.
"""

import logging

from app.application.learning.dtos import (
    ContentMetaResult,
    ContentResult,
    GetContentQuery,
    ListContentQuery,
    TocEntryResult,
)
from app.domain.learning.content_catalog import ContentCatalog, extract_toc
from app.domain.learning.entities import ContentMeta, ContentType
from app.domain.learning.errors import ContentNotFoundError, UnsupportedLocaleError

logger = logging.getLogger(__name__)


def _to_meta_result(meta: ContentMeta) -> ContentMetaResult:
    return ContentMetaResult(
        slug=meta.slug,
        title=meta.title,
        description=meta.description,
        order=meta.order,
        next=meta.next,
        category=meta.category,
        related=list(meta.related),
        keywords=meta.keywords,
    )


class GetContentUseCase:
    """Returns one document with its table of contents."""

    def __init__(self, catalog: ContentCatalog, locales: list[str]) -> None:
        self._catalog = catalog
        self._locales = locales

    def execute(self, query: GetContentQuery) -> ContentResult:
        """Run the document lookup.

        Args:
            query: Content type, locale and slug.

        Returns:
            The localized document, or its English version.

        Raises:
            UnsupportedLocaleError: Locale is not configured.
            ContentNotFoundError: Neither translation exists.
        """
        if query.locale not in self._locales:
            raise UnsupportedLocaleError(query.locale)

        content_type = ContentType(query.content_type)
        item = self._catalog.get_item(content_type, query.locale, query.slug)
        if item is None:
            raise ContentNotFoundError(query.content_type, query.locale, query.slug)

        return ContentResult(
            content_type=item.type.value,
            locale=item.locale,
            meta=_to_meta_result(item.meta),
            body=item.body,
            toc=[
                TocEntryResult(id=entry.id, text=entry.text, level=entry.level)
                for entry in extract_toc(item.body)
            ],
        )


class ListContentUseCase:
    """Returns document metadata in display order."""

    def __init__(self, catalog: ContentCatalog, locales: list[str]) -> None:
        self._catalog = catalog
        self._locales = locales

    def execute(self, query: ListContentQuery) -> list[ContentMetaResult]:
        """Run the listing use case."""
        if query.locale not in self._locales:
            raise UnsupportedLocaleError(query.locale)

        metas = self._catalog.list_meta(ContentType(query.content_type), query.locale)
        logger.debug(
            "Listed %d %s documents for locale=%s",
            len(metas),
            query.content_type,
            query.locale,
        )
        return [_to_meta_result(meta) for meta in metas]
