"""
Adapter: Content documents on disk.

Implements ContentRepository port.
Documents live at ``<root>/<type>/<locale>/<slug>.mdx`` and start with
a YAML front-matter block parsed by python-frontmatter.
"""

import logging
from pathlib import Path
from typing import Any, Optional

import frontmatter

from app.domain.learning.entities import ContentItem, ContentMeta, ContentType
from app.domain.learning.ports import ContentRepository

logger = logging.getLogger(__name__)

CONTENT_SUFFIX = ".mdx"


def _as_int(value: Any) -> Optional[int]:
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _as_tuple(value: Any) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return tuple(part.strip() for part in value.split(",") if part.strip())
    return tuple(str(part) for part in value)


def _as_optional_str(value: Any) -> Optional[str]:
    return None if value is None else str(value)


class FilesystemContentRepository(ContentRepository):
    """Reads front-matter-tagged documents from a content directory."""

    def __init__(self, root: Path | str) -> None:
        self._root = Path(root)

    def get(
        self, content_type: ContentType, locale: str, slug: str
    ) -> Optional[ContentItem]:
        """Return the document for exactly this locale, or None if absent."""
        path = self._path_for(content_type, locale, slug)
        if not path.is_file():
            return None

        post = frontmatter.load(str(path))
        data = post.metadata
        meta = ContentMeta(
            slug=slug,
            title=str(data.get("title") or slug),
            description=str(data.get("description") or ""),
            order=_as_int(data.get("order")),
            next=_as_optional_str(data.get("next")),
            category=_as_optional_str(data.get("category")),
            related=_as_tuple(data.get("related")),
            keywords=_as_optional_str(data.get("keywords")),
        )
        return ContentItem(type=content_type, locale=locale, meta=meta, body=post.content)

    def list_slugs(self, content_type: ContentType, locale: str) -> list[str]:
        """Return sorted document slugs, or [] when the directory is missing."""
        directory = self._root / content_type.value / locale
        if not directory.is_dir():
            logger.debug("Content directory missing: %s", directory)
            return []
        return sorted(
            path.stem
            for path in directory.iterdir()
            if path.is_file() and path.suffix == CONTENT_SUFFIX
        )

    def _path_for(self, content_type: ContentType, locale: str, slug: str) -> Path:
        return self._root / content_type.value / locale / f"{slug}{CONTENT_SUFFIX}"
