"""
Dependency injection for the learning bounded context.

Provides FastAPI dependency functions that wire the filesystem
content repository and the chat responder into use cases.
"""

from app.application.learning.build_sitemap import BuildSitemapUseCase
from app.application.learning.get_content import (
    GetContentUseCase,
    ListContentUseCase,
)
from app.application.learning.respond_to_chat import RespondToChatUseCase
from app.core.config import settings
from app.domain.learning.chat_responder import ChatResponder
from app.domain.learning.content_catalog import ContentCatalog
from app.infrastructure.learning.filesystem_content_repository import (
    FilesystemContentRepository,
)


def get_content_catalog() -> ContentCatalog:
    """Build the ContentCatalog over the configured content directory."""
    return ContentCatalog(
        repository=FilesystemContentRepository(root=settings.get_content_path())
    )


def get_content_use_case() -> GetContentUseCase:
    """Build GetContentUseCase with its infrastructure dependencies."""
    return GetContentUseCase(catalog=get_content_catalog(), locales=settings.locales)


def get_list_content_use_case() -> ListContentUseCase:
    """Build ListContentUseCase with its infrastructure dependencies."""
    return ListContentUseCase(catalog=get_content_catalog(), locales=settings.locales)


def get_respond_to_chat_use_case() -> RespondToChatUseCase:
    """Build RespondToChatUseCase with the static search index."""
    return RespondToChatUseCase(
        responder=ChatResponder(), max_length=settings.chat_max_length
    )


def get_build_sitemap_use_case() -> BuildSitemapUseCase:
    """Build BuildSitemapUseCase with its infrastructure dependencies."""
    return BuildSitemapUseCase(
        catalog=get_content_catalog(),
        base_url=settings.base_url,
        locales=settings.locales,
    )
