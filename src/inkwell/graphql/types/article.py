"""
Article entity-response GraphQL types
"""

from datetime import datetime

import strawberry


@strawberry.type
class Article:
    """Attributes of a stored article."""

    title: str
    slug: str
    description: str | None
    content: str | None
    published_at: datetime | None
    created_at: datetime | None
    updated_at: datetime | None


@strawberry.type
class ArticleEntity:
    """An article paired with its identifier."""

    id: strawberry.ID
    attributes: Article


@strawberry.type
class ArticleEntityResponse:
    """Envelope around a single article; ``data`` is null when nothing matched."""

    data: ArticleEntity | None = None
