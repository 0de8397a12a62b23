"""
Use case: Enumerate the site's public URLs.

Input: none
Output: list[SitemapEntry]
Side effects: None (lists static files).
Failure cases: None.
"""

from datetime import datetime, timezone
from typing import Callable

from app.domain.learning.content_catalog import FALLBACK_LOCALE, ContentCatalog
from app.domain.learning.entities import ContentType
from app.domain.learning.sitemap import SitemapEntry, build_sitemap_entries


class BuildSitemapUseCase:
    """Lists static pages plus every English course and glossary slug."""

    def __init__(
        self,
        catalog: ContentCatalog,
        base_url: str,
        locales: list[str],
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ) -> None:
        self._catalog = catalog
        self._base_url = base_url
        self._locales = locales
        self._clock = clock

    def execute(self) -> list[SitemapEntry]:
        # English is the source of truth: every slug exists there.
        return build_sitemap_entries(
            base_url=self._base_url,
            locales=self._locales,
            course_slugs=self._catalog.list_slugs(ContentType.COURSE, FALLBACK_LOCALE),
            glossary_slugs=self._catalog.list_slugs(
                ContentType.GLOSSARY, FALLBACK_LOCALE
            ),
            last_modified=self._clock(),
        )
