"""
Sitemap router.

Renders the sitemaps.org XML document with per-locale alternates.
"""

from xml.sax.saxutils import escape, quoteattr

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from app.application.learning.build_sitemap import BuildSitemapUseCase
from app.domain.learning.sitemap import SitemapEntry
from app.interfaces.learning.dependencies import get_build_sitemap_use_case

router = APIRouter(tags=["seo"])

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"
XHTML_NS = "http://www.w3.org/1999/xhtml"


def _render_entry(entry: SitemapEntry) -> str:
    lines = [
        "  <url>",
        f"    <loc>{escape(entry.url)}</loc>",
        f"    <lastmod>{entry.last_modified.strftime('%Y-%m-%dT%H:%M:%SZ')}</lastmod>",
        f"    <changefreq>{entry.change_frequency}</changefreq>",
        f"    <priority>{entry.priority:.1f}</priority>",
    ]
    for locale, url in entry.alternates.items():
        lines.append(
            f'    <xhtml:link rel="alternate" hreflang={quoteattr(locale)} '
            f"href={quoteattr(url)}/>"
        )
    lines.append("  </url>")
    return "\n".join(lines)


def render_sitemap(entries: list[SitemapEntry]) -> str:
    """Return the sitemap XML document for the given entries."""
    return "\n".join(
        [
            '<?xml version="1.0" encoding="UTF-8"?>',
            f'<urlset xmlns="{SITEMAP_NS}" xmlns:xhtml="{XHTML_NS}">',
            *(_render_entry(entry) for entry in entries),
            "</urlset>",
            "",
        ]
    )


@router.get("/sitemap.xml", summary="Sitemap", response_class=Response)
def sitemap_xml(
    use_case: BuildSitemapUseCase = Depends(get_build_sitemap_use_case),
) -> Response:
    """Return every static and content page, once per locale."""
    return Response(content=render_sitemap(use_case.execute()), media_type="application/xml")
