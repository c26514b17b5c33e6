"""
Tests for authentication adapters
"""

import pytest

from inkwell.auth.adapters.base import AuthenticationError
from inkwell.auth.adapters.jwt import JWTAuthAdapter
from inkwell.auth.adapters.none import NoAuthAdapter

SECRET = "test-secret-key-that-is-at-least-32-bytes"


class TestNoAuthAdapter:
    @pytest.mark.asyncio
    async def test_any_token_is_accepted(self):
        adapter = NoAuthAdapter(default_user_id="dev-user")

        principal = await adapter.verify_token("anything")

        assert principal["provider"] == "none"
        assert principal["subject"] == "dev-user"

    @pytest.mark.asyncio
    async def test_empty_token_is_rejected(self):
        with pytest.raises(AuthenticationError):
            await NoAuthAdapter().verify_token("")

    def test_refuses_production(self):
        with pytest.raises(RuntimeError, match="production"):
            NoAuthAdapter(environment="production")


class TestJWTAuthAdapter:
    @pytest.mark.asyncio
    async def test_valid_token_verifies(self, make_jwt):
        token = make_jwt(SECRET, subject="user-1", email="u@x.com", name="User One")

        principal = await JWTAuthAdapter(secret_key=SECRET).verify_token(token)

        assert principal["provider"] == "jwt"
        assert principal["subject"] == "user-1"
        assert principal["email"] == "u@x.com"
        assert principal["display_name"] == "User One"

    @pytest.mark.asyncio
    async def test_wrong_secret(self, make_jwt):
        token = make_jwt(SECRET)

        with pytest.raises(AuthenticationError, match="Invalid token"):
            await JWTAuthAdapter(secret_key=SECRET + "-other").verify_token(token)

    @pytest.mark.asyncio
    async def test_wrong_audience(self, make_jwt):
        token = make_jwt(SECRET, audience="elsewhere")

        with pytest.raises(AuthenticationError):
            await JWTAuthAdapter(secret_key=SECRET).verify_token(token)

    @pytest.mark.asyncio
    async def test_missing_subject(self, make_jwt):
        token = make_jwt(SECRET, subject=None)

        with pytest.raises(AuthenticationError, match="sub"):
            await JWTAuthAdapter(secret_key=SECRET).verify_token(token)

    @pytest.mark.asyncio
    async def test_garbage_token(self):
        with pytest.raises(AuthenticationError):
            await JWTAuthAdapter(secret_key=SECRET).verify_token("not-a-jwt")
