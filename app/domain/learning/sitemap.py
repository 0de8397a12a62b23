"""
Sitemap composition.

Every page is listed once per locale, with alternates pointing at
the same page in every other locale.
"""

from dataclasses import dataclass
from datetime import datetime

STATIC_PATHS = ("", "/course", "/glossary", "/prices", "/ask", "/community")


@dataclass(frozen=True)
class SitemapEntry:
    """One ``<url>`` of the sitemap."""

    url: str
    last_modified: datetime
    change_frequency: str
    priority: float
    alternates: dict[str, str]


def _localized_entries(
    base_url: str,
    locales: list[str],
    path: str,
    last_modified: datetime,
    change_frequency: str,
    priority: float,
) -> list[SitemapEntry]:
    alternates = {locale: f"{base_url}/{locale}{path}" for locale in locales}
    return [
        SitemapEntry(
            url=alternates[locale],
            last_modified=last_modified,
            change_frequency=change_frequency,
            priority=priority,
            alternates=alternates,
        )
        for locale in locales
    ]


def build_sitemap_entries(
    base_url: str,
    locales: list[str],
    course_slugs: list[str],
    glossary_slugs: list[str],
    last_modified: datetime,
) -> list[SitemapEntry]:
    """Return static pages first, then course lessons, then glossary terms."""
    base_url = base_url.rstrip("/")
    entries: list[SitemapEntry] = []

    for path in STATIC_PATHS:
        entries.extend(
            _localized_entries(
                base_url,
                locales,
                path,
                last_modified,
                "hourly" if path == "/prices" else "weekly",
                1.0 if path == "" else 0.8,
            )
        )

    for slug in course_slugs:
        entries.extend(
            _localized_entries(
                base_url, locales, f"/course/{slug}", last_modified, "monthly", 0.7
            )
        )

    for slug in glossary_slugs:
        entries.extend(
            _localized_entries(
                base_url, locales, f"/glossary/{slug}", last_modified, "monthly", 0.6
            )
        )

    return entries
