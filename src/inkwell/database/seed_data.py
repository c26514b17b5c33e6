"""
Demo content for local development.

Seeding is idempotent: nothing is written once any writer exists.
"""

from __future__ import annotations

from datetime import UTC, datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..dbmodels import Article, Writer
from ..logging import get_logger

logger = get_logger(__name__)

DEMO_CONTENT: list[dict] = [
    {
        "name": "Ana Ribeiro",
        "email": "ana@example.com",
        "articles": [
            {
                "title": "Shipping a GraphQL API",
                "slug": "shipping-a-graphql-api",
                "description": "What changed when our blog moved to GraphQL.",
                "content": "Schema first, resolvers second.",
            },
            {
                "title": "Writing for the web",
                "slug": "writing-for-the-web",
                "description": "Short paragraphs, clear headings.",
                "content": "Readers skim. Help them.",
            },
        ],
    },
    {
        "name": "Tomás Velasco",
        "email": "tomas@example.com",
        "articles": [
            {
                "title": "A field guide to slugs",
                "slug": "a-field-guide-to-slugs",
                "description": "Stable URLs for content that changes.",
                "content": "Lowercase, hyphenated, unique.",
            },
        ],
    },
    {
        "name": "Mei Lin",
        "email": "mei@example.com",
        "articles": [],
    },
]


async def seed_demo_content(db: AsyncSession, content: list[dict] | None = None) -> bool:
    """
    Insert demo writers and their articles.

    Args:
        db: Database session
        content: Writers with nested ``articles``; defaults to DEMO_CONTENT

    Returns:
        True if data was written, False if the store already had writers
    """
    existing = await db.execute(select(Writer.id).limit(1))
    if existing.scalar_one_or_none() is not None:
        logger.info("Demo content already present, skipping seed")
        return False

    now = datetime.now(UTC)
    article_count = 0
    for entry in content if content is not None else DEMO_CONTENT:
        writer = Writer(name=entry["name"], email=entry.get("email"))
        writer.articles = [
            Article(
                title=item["title"],
                slug=item["slug"],
                description=item.get("description"),
                content=item.get("content"),
                published_at=now,
            )
            for item in entry.get("articles", [])
        ]
        article_count += len(writer.articles)
        db.add(writer)

    await db.flush()
    logger.info("Seeded demo content", articles=article_count)
    return True
