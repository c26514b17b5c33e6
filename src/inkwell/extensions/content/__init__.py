"""
Article and author contact queries.

``register`` is called once by the host at startup and contributes two schema
fragments through the host's extension service:

* ``article(slug: String!): ArticleEntityResponse``
* ``authorsContacts: [AuthorContact]``, readable without authentication,
  with a nested ``AuthorContact.articles`` list
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ...graphql.extension import Extension, ResolverConfig
from ...graphql.types.article import ArticleEntityResponse
from .resolvers import resolve_article, resolve_author_articles, resolve_authors_contacts
from .types import AuthorContact, AuthorsArticles

if TYPE_CHECKING:
    from ...host import Host


def article_by_slug(host: Host) -> Extension:
    """Replaces the default article lookup with a lookup by slug."""
    return Extension(
        types=[ArticleEntityResponse],
        query_fields={"article": resolve_article},
    )


def author_contacts(host: Host) -> Extension:
    return Extension(
        types=[AuthorContact, AuthorsArticles],
        query_fields={"authorsContacts": resolve_authors_contacts},
        resolvers_config={"Query.authorsContacts": ResolverConfig(auth=False)},
    )


def register(host: Host) -> None:
    extension_service = host.extension_service
    extension_service.use(article_by_slug)
    extension_service.use(author_contacts)


__all__ = [
    "article_by_slug",
    "author_contacts",
    "register",
    "resolve_article",
    "resolve_author_articles",
    "resolve_authors_contacts",
]
