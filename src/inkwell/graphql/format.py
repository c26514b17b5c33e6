"""
Response formatting capability.

Wraps raw records in the entity-response envelope so that "found" and
"not found" share one shape.
"""

from __future__ import annotations

from typing import Any

import strawberry

from .types.article import Article, ArticleEntity, ArticleEntityResponse


class FormatService:
    """Builds entity-response envelopes from raw article records."""

    def to_entity_response(self, record: Any | None) -> ArticleEntityResponse:
        if record is None:
            return ArticleEntityResponse(data=None)

        return ArticleEntityResponse(
            data=ArticleEntity(
                id=strawberry.ID(str(record.id)),
                attributes=Article(
                    title=record.title,
                    slug=record.slug,
                    description=record.description,
                    content=record.content,
                    published_at=record.published_at,
                    created_at=record.created_at,
                    updated_at=record.updated_at,
                ),
            )
        )
