"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import Generator, Mapping
from datetime import UTC, datetime, timedelta
from typing import Any
from unittest.mock import MagicMock

import jwt
import pytest

from inkwell.auth.context import AuthContext
from inkwell.dbmodels import Article, Writer
from inkwell.graphql.format import FormatService
from inkwell.services import ContentType, FindResult, ServiceRegistry


class InMemoryService:
    """Data service over a list of records; records every filter it receives."""

    def __init__(self, records: list[Any], relations: Mapping[str, str] | None = None):
        self.records = list(records)
        self.relations = dict(relations or {})
        self.calls: list[dict[str, Any]] = []

    async def find(self, filters: Mapping[str, Any] | None = None) -> FindResult:
        filters = dict(filters or {})
        self.calls.append(filters)
        matched = [
            record
            for record in self.records
            if all(
                getattr(record, self.relations.get(key, key)) == value
                for key, value in filters.items()
            )
        ]
        return FindResult(results=tuple(matched))


@pytest.fixture
def writers() -> list[Writer]:
    return [Writer(id=1, name="Ana", email="a@x.com")]


@pytest.fixture
def articles() -> list[Article]:
    return [
        Article(
            id=10,
            title="T1",
            slug="t1",
            description="D1",
            content="Body of T1",
            author_id=1,
        )
    ]


@pytest.fixture
def article_service(articles: list[Article]) -> InMemoryService:
    return InMemoryService(articles, relations={"author": "author_id"})


@pytest.fixture
def writer_service(writers: list[Writer]) -> InMemoryService:
    return InMemoryService(writers)


@pytest.fixture
def registry(article_service: InMemoryService, writer_service: InMemoryService) -> ServiceRegistry:
    services = ServiceRegistry()
    services.register(ContentType.ARTICLE, article_service)
    services.register(ContentType.WRITER, writer_service)
    return services


@pytest.fixture
def anonymous() -> AuthContext:
    return AuthContext.anonymous()


@pytest.fixture
def authenticated() -> AuthContext:
    return AuthContext(
        user_id="test-user",
        principal={"provider": "none", "subject": "test-user"},
        token="test-token",
    )


@pytest.fixture
def resolver_logger() -> MagicMock:
    return MagicMock()


@pytest.fixture
def make_context(registry: ServiceRegistry, resolver_logger: MagicMock):
    """Build a resolver context dict for a given auth context."""

    def _make(auth: AuthContext) -> dict[str, Any]:
        return {
            "auth": auth,
            "services": registry,
            "format": FormatService(),
            "logger": resolver_logger,
        }

    return _make


@pytest.fixture
def mock_info(make_context, authenticated: AuthContext) -> MagicMock:
    """Create a mock GraphQL info object with resolver capabilities."""
    info = MagicMock()
    info.context = make_context(authenticated)
    return info


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def make_jwt():
    """Encode a token the way an external issuer would for the JWT adapter."""

    def _make(
        secret: str,
        subject: str | None = "user-1",
        audience: str = "inkwell-api",
        **claims: Any,
    ) -> str:
        now = datetime.now(UTC)
        payload = {
            "iss": "inkwell",
            "aud": audience,
            "iat": now,
            "nbf": now,
            "exp": now + timedelta(hours=1),
            **claims,
        }
        if subject:
            payload["sub"] = subject
        return jwt.encode(payload, secret, algorithm="HS256")

    return _make
