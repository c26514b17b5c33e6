"""
Author contact GraphQL types
"""

import strawberry


@strawberry.type
class AuthorsArticles:
    """Article summary listed under an author."""

    id: strawberry.ID | None
    title: str | None
    slug: str | None
    description: str | None


@strawberry.type
class AuthorContact:
    """Author with contact details."""

    id: strawberry.ID | None
    name: str | None
    email: str | None

    @strawberry.field
    async def articles(
        self, info: strawberry.Info
    ) -> list[AuthorsArticles | None] | None:
        """Articles written by this author."""
        from .resolvers import resolve_author_articles

        return await resolve_author_articles(self, info)
