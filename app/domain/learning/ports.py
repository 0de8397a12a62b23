"""
Port interfaces (ABCs) for the learning bounded context.

Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Optional

from app.domain.learning.entities import ContentItem, ContentType


class ContentRepository(ABC):
    """Port for reading front-matter-tagged documents."""

    @abstractmethod
    def get(
        self, content_type: ContentType, locale: str, slug: str
    ) -> Optional[ContentItem]:
        """Return the document for exactly this locale, or None."""
        raise NotImplementedError

    @abstractmethod
    def list_slugs(self, content_type: ContentType, locale: str) -> list[str]:
        """Return the sorted slugs available in a locale."""
        raise NotImplementedError
