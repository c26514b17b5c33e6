"""
GraphQL schema wiring for FastAPI
"""

from typing import TYPE_CHECKING, Any

import strawberry
from fastapi import Request
from graphql import get_introspection_query, graphql_sync
from graphql import validate_schema as gql_validate_schema
from strawberry.fastapi import GraphQLRouter

from ..auth import get_auth_context_optional
from ..config import settings
from ..logging import get_logger

if TYPE_CHECKING:
    from ..host import Host

logger = get_logger(__name__)


def validate_schema(schema: strawberry.Schema) -> None:
    """Validate the GraphQL schema at startup.

    Resolves every type reference and runs an introspection query so that a
    broken schema stops the server instead of failing at request time.

    Raises:
        Exception: If the schema is invalid or has unresolved types
    """
    try:
        graphql_schema = schema._schema

        errors = gql_validate_schema(graphql_schema)
        if errors:
            error_messages = [str(e) for e in errors]
            raise Exception(f"GraphQL schema validation failed: {'; '.join(error_messages)}")

        result = graphql_sync(graphql_schema, get_introspection_query())
        if result.errors:
            error_messages = [str(e) for e in result.errors]
            raise Exception(f"GraphQL introspection failed: {'; '.join(error_messages)}")

        logger.info("GraphQL schema validation successful")

    except Exception as e:
        logger.error("GraphQL schema validation failed", error=str(e))
        raise


def create_graphql_router(host: "Host") -> GraphQLRouter[dict[str, Any], None]:
    """Create a GraphQL router for FastAPI."""

    async def get_context(request: Request) -> dict[str, Any]:
        """Per-request capabilities handed to resolvers."""
        auth = await get_auth_context_optional(request.headers.get("authorization"))
        return {
            "request": request,
            "auth": auth,
            "services": host.services,
            "format": host.format,
            "logger": get_logger("inkwell.resolvers").bind(user_id=auth.user_id),
        }

    return GraphQLRouter(
        host.schema,
        path="/graphql",
        graphql_ide="graphiql" if settings.graphiql else None,
        context_getter=get_context,
    )
