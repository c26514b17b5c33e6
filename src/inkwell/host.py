"""
Host runtime for GraphQL extensions.

The host owns the capabilities that extensions build on: the extension
service, response formatting and the data service registry. Extensions are
loaded once with ``load``; the schema is assembled on first access.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

import strawberry

from .config import settings
from .graphql.extension import ExtensionError, ExtensionService
from .graphql.format import FormatService
from .logging import get_logger
from .services import ServiceRegistry, create_default_registry

logger = get_logger(__name__)


@dataclass
class Host:
    extension_service: ExtensionService
    format: FormatService
    services: ServiceRegistry
    _loaded: bool = field(default=False, init=False, repr=False)
    _schema: strawberry.Schema | None = field(default=None, init=False, repr=False)

    @classmethod
    def create(cls, services: ServiceRegistry | None = None) -> Host:
        """Host with default capabilities; ``services`` replaces the SQLAlchemy registry."""
        return cls(
            extension_service=ExtensionService(),
            format=FormatService(),
            services=services if services is not None else create_default_registry(),
        )

    def load(self, register: Callable[[Host], None]) -> None:
        """
        Run an extension's registration entry point.

        Raises:
            ExtensionError: If called a second time or after the schema was built
        """
        if self._loaded:
            raise ExtensionError("Extensions have already been registered on this host")
        if self._schema is not None:
            raise ExtensionError("Cannot register extensions after the schema was built")
        register(self)
        self._loaded = True
        logger.info("Extension registered", entry_point=getattr(register, "__module__", None))

    @property
    def schema(self) -> strawberry.Schema:
        if self._schema is None:
            self._schema = self.extension_service.build_schema(self)
        return self._schema


def create_host(services: ServiceRegistry | None = None) -> Host:
    """Host with the content extension registered."""
    from .extensions.content import register

    host = Host.create(services)
    host.load(register)
    return host


async def bootstrap() -> None:
    """Process-level startup: connect, create tables and optionally seed demo content."""
    from .database import create_tables, get_async_session, init_database
    from .database.seed_data import seed_demo_content

    init_database()
    await create_tables()

    if settings.seed_demo_data:
        async with get_async_session() as session:
            await seed_demo_content(session)
