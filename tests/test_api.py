"""
Tests for the FastAPI application
"""

from unittest.mock import AsyncMock, patch

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from inkwell.api.app import create_app
from inkwell.auth import AuthContext
from inkwell.host import create_host


@pytest.fixture
def app(registry):
    return create_app(host=create_host(registry))


@pytest_asyncio.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


class TestApp:
    @pytest.mark.asyncio
    async def test_health(self, client):
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    @pytest.mark.asyncio
    async def test_authors_contacts_without_token(self, client):
        with patch(
            "inkwell.graphql.schema.get_auth_context_optional",
            new=AsyncMock(return_value=AuthContext.anonymous()),
        ):
            response = await client.post(
                "/graphql",
                json={"query": "{ authorsContacts { name articles { title } } }"},
            )

        assert response.status_code == 200
        assert response.json() == {
            "data": {"authorsContacts": [{"name": "Ana", "articles": [{"title": "T1"}]}]}
        }

    @pytest.mark.asyncio
    async def test_article_without_token_is_rejected(self, client):
        with patch(
            "inkwell.graphql.schema.get_auth_context_optional",
            new=AsyncMock(return_value=AuthContext.anonymous()),
        ):
            response = await client.post(
                "/graphql",
                json={"query": '{ article(slug: "t1") { data { id } } }'},
            )

        body = response.json()
        assert body["data"] == {"article": None}
        assert body["errors"][0]["message"] == "User is not authenticated"

    @pytest.mark.asyncio
    async def test_article_with_dev_token(self, client):
        # Default settings run the no-auth adapter
        response = await client.post(
            "/graphql",
            json={"query": '{ article(slug: "t1") { data { id attributes { title } } } }'},
            headers={"Authorization": "Bearer dev-token"},
        )

        assert response.json() == {
            "data": {"article": {"data": {"id": "10", "attributes": {"title": "T1"}}}}
        }

    def test_app_exposes_host(self, app):
        assert app.state.host.schema is not None
