"""
GraphQL extension service.

Extensions contribute types, query fields and per-field resolver config to one
shared schema. Builders are collected with ``use`` and only invoked when the
schema is built, so every builder sees the fully wired host.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import strawberry
from strawberry.tools import create_type

from ..logging import get_logger
from .permissions import IsAuthenticated

if TYPE_CHECKING:
    from ..host import Host

logger = get_logger(__name__)


class ExtensionError(Exception):
    """Raised when extensions cannot be merged into a schema."""


@dataclass(frozen=True)
class ResolverConfig:
    """Per-field resolver options. ``auth=False`` opens the field to anonymous callers."""

    auth: bool = True


@dataclass
class Extension:
    """A schema fragment: its types, its query resolvers keyed by GraphQL name, and their config."""

    types: list[type] = field(default_factory=list)
    query_fields: dict[str, Callable[..., Any]] = field(default_factory=dict)
    resolvers_config: dict[str, ResolverConfig] = field(default_factory=dict)


ExtensionBuilder = Callable[["Host"], Extension]


class ExtensionService:
    """Collects extension builders and merges their output into a Strawberry schema."""

    def __init__(self):
        self._builders: list[ExtensionBuilder] = []
        self._extensions: list[Extension] = []

    def use(self, builder: ExtensionBuilder) -> None:
        """Queue a builder; it runs when ``build_schema`` is called."""
        if not callable(builder):
            raise ExtensionError("Extension builder must be callable")
        self._builders.append(builder)

    @property
    def extensions(self) -> list[Extension]:
        return list(self._extensions)

    def build_schema(self, host: Host) -> strawberry.Schema:
        """
        Run every builder in registration order and merge the results.

        A query field contributed twice keeps the later resolver.

        Raises:
            ExtensionError: If nothing was contributed, a builder returned the
                wrong type, or resolver config names an unknown field
        """
        extensions = []
        for builder in self._builders:
            extension = builder(host)
            if not isinstance(extension, Extension):
                raise ExtensionError(
                    f"Extension builder {getattr(builder, '__name__', builder)!r} "
                    f"returned {type(extension).__name__}, expected Extension"
                )
            extensions.append(extension)
        self._extensions = extensions

        resolvers: dict[str, Callable[..., Any]] = {}
        configs: dict[str, ResolverConfig] = {}
        types: list[type] = []
        for extension in extensions:
            for name, resolver in extension.query_fields.items():
                if name in resolvers:
                    logger.info("Overriding query field", field=name)
                resolvers[name] = resolver
            configs.update(extension.resolvers_config)
            types.extend(t for t in extension.types if t not in types)

        if not resolvers:
            raise ExtensionError("No query fields were contributed by any extension")

        for key in configs:
            type_name, _, field_name = key.partition(".")
            if type_name != "Query" or field_name not in resolvers:
                raise ExtensionError(f"Resolver config references unknown field '{key}'")

        fields = [
            self._make_field(name, resolver, configs.get(f"Query.{name}", ResolverConfig()))
            for name, resolver in resolvers.items()
        ]
        query = create_type("Query", fields, description="Root query type.")

        public = [key.partition(".")[2] for key, config in configs.items() if not config.auth]
        logger.info("GraphQL query type assembled", fields=sorted(resolvers), public=sorted(public))
        return strawberry.Schema(query=query, types=types)

    @staticmethod
    def _make_field(name: str, resolver: Callable[..., Any], config: ResolverConfig):
        doc = (resolver.__doc__ or "").strip()
        query_field = strawberry.field(
            resolver=resolver,
            name=name,
            description=doc.splitlines()[0] if doc else None,
            permission_classes=[IsAuthenticated] if config.auth else [],
        )
        # create_type keys the namespace by python name; keep it unique per field
        query_field.python_name = name
        return query_field
