"""Data services addressed by content type."""

from .base import ContentType, DataService, EntityService, FindResult, InvalidFilterError
from .registry import ServiceRegistry, create_default_registry

__all__ = [
    "ContentType",
    "DataService",
    "EntityService",
    "FindResult",
    "InvalidFilterError",
    "ServiceRegistry",
    "create_default_registry",
]
