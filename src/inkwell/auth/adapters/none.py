"""No-auth adapter for local development without authentication."""

from __future__ import annotations

from ...logging import get_logger
from .base import AuthenticationError, Principal

logger = get_logger(__name__)


class NoAuthAdapter:
    """
    No-auth adapter that bypasses authentication for local development.

    Every request is treated as authenticated with a default user.
    Refuses to start in production environments.
    """

    def __init__(self, default_user_id: str = "dev-user", environment: str = "development"):
        self.default_user_id = default_user_id

        if environment.lower() in ("production", "prod"):
            logger.error(
                "NoAuthAdapter detected in production environment",
                environment=environment,
            )
            raise RuntimeError(
                "NoAuthAdapter cannot be used in production environments. "
                "Please configure a proper authentication provider."
            )

        logger.warning(
            "NoAuthAdapter is active - ALL requests will be treated as authenticated",
            user_id=default_user_id,
            environment=environment,
        )

    async def verify_token(self, token: str) -> Principal:
        """Accept any non-empty token."""
        if not token:
            raise AuthenticationError("Token required (even in no-auth mode)")

        return Principal(
            provider="none",
            subject=self.default_user_id,
            email="dev@example.com",
            display_name="Development User",
            claims={"mode": "development"},
        )
