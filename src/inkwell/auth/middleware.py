"""Resolve the authentication context of an incoming request."""

from __future__ import annotations

from ..logging import get_logger
from .adapters.base import AuthAdapter, AuthenticationError
from .adapters.none import NoAuthAdapter
from .context import AuthContext
from .factory import get_auth_adapter_cached

logger = get_logger(__name__)


async def get_auth_context(
    authorization: str | None,
    adapter: AuthAdapter | None = None,
) -> AuthContext:
    """
    Build the AuthContext for an Authorization header value.

    Without a header the request is anonymous, except in no-auth mode where the
    development user is assumed.

    Raises:
        AuthenticationError: If the header is malformed or the token is rejected
    """
    adapter = adapter or get_auth_adapter_cached()

    if not authorization:
        if not isinstance(adapter, NoAuthAdapter):
            return AuthContext.anonymous()
        authorization = "Bearer dev-token"

    if not authorization.startswith("Bearer "):
        logger.warning("Invalid authorization format received")
        raise AuthenticationError("Invalid authorization format. Expected: Bearer <token>")

    token = authorization[7:]
    if not token:
        logger.warning("Empty token provided")
        raise AuthenticationError("Empty token")

    principal = await adapter.verify_token(token)
    return AuthContext(user_id=principal["subject"], principal=principal, token=token)


async def get_auth_context_optional(
    authorization: str | None,
    adapter: AuthAdapter | None = None,
) -> AuthContext:
    """Like get_auth_context, but a rejected token yields an anonymous context."""
    try:
        return await get_auth_context(authorization, adapter)
    except AuthenticationError as e:
        logger.info("Treating request as anonymous", reason=str(e))
        return AuthContext.anonymous()
