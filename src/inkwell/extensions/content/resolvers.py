"""
Resolvers for article and author contact queries.

Capabilities come from the request context rather than module globals:

    services  data service registry keyed by ContentType
    format    entity-response formatting
    logger    request-bound structlog logger

Data service errors propagate to the GraphQL engine untouched.
"""

from typing import TYPE_CHECKING, Any

import strawberry

from ...graphql.types.article import ArticleEntityResponse
from ...logging import get_logger
from ...services import ContentType
from .types import AuthorContact, AuthorsArticles

if TYPE_CHECKING:
    from ...services import ServiceRegistry

logger = get_logger(__name__)


def _services(info: strawberry.Info) -> "ServiceRegistry":
    return info.context["services"]


def _logger(info: strawberry.Info) -> Any:
    return info.context.get("logger") or logger


async def resolve_article(info: strawberry.Info, slug: str) -> ArticleEntityResponse | None:
    """Get an article by its slug."""
    data = await _services(info)[ContentType.ARTICLE].find(filters={"slug": slug})
    record = data.first()

    response = info.context["format"].to_entity_response(record)
    _logger(info).debug("Article resolved", slug=slug, found=record is not None)
    return response


async def resolve_authors_contacts(
    info: strawberry.Info,
) -> list[AuthorContact | None] | None:
    """Get all authors with their contact details."""
    data = await _services(info)[ContentType.WRITER].find()

    return [
        AuthorContact(id=author.id, name=author.name, email=author.email)
        for author in data.results
    ]


async def resolve_author_articles(
    author: AuthorContact, info: strawberry.Info
) -> list[AuthorsArticles | None] | None:
    # One lookup per author; sibling authors are not batched
    _logger(info).debug("Resolving author articles", author_id=author.id)

    data = await _services(info)[ContentType.ARTICLE].find(filters={"author": author.id})

    return [
        AuthorsArticles(
            id=article.id,
            title=article.title,
            slug=article.slug,
            description=article.description,
        )
        for article in data.results
    ]
