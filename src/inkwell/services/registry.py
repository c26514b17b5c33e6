"""Registry of data services keyed by content type."""

from __future__ import annotations

from ..dbmodels import Article, Writer
from ..logging import get_logger
from .base import ContentType, DataService, EntityService

logger = get_logger(__name__)


class ServiceRegistry:
    """
    Holds one data service per content type.

    Resolvers receive the registry through the request context and select a
    service with a ``ContentType`` member, never a bare string.
    """

    def __init__(self):
        self._services: dict[ContentType, DataService] = {}

    def register(self, content_type: ContentType, service: DataService) -> None:
        """
        Register a service for a content type, replacing any previous one.

        Raises:
            TypeError: If content_type is not a ContentType member
        """
        if not isinstance(content_type, ContentType):
            raise TypeError(f"Expected ContentType, got {type(content_type).__name__}")
        if content_type in self._services:
            logger.info("Replacing data service", content_type=content_type.value)
        self._services[content_type] = service

    def get(self, content_type: ContentType) -> DataService:
        """
        Get the service for a content type.

        Raises:
            KeyError: If no service is registered for it
        """
        try:
            return self._services[content_type]
        except KeyError:
            raise KeyError(f"No data service registered for '{content_type.value}'") from None

    def __getitem__(self, content_type: ContentType) -> DataService:
        return self.get(content_type)

    def __contains__(self, content_type: object) -> bool:
        return content_type in self._services

    def content_types(self) -> list[ContentType]:
        return list(self._services)


def create_default_registry() -> ServiceRegistry:
    """Registry wired to the SQLAlchemy-backed services."""
    registry = ServiceRegistry()
    registry.register(ContentType.ARTICLE, EntityService(Article, relations={"author": "author_id"}))
    registry.register(ContentType.WRITER, EntityService(Writer))
    return registry
