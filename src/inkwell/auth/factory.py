"""Factory for creating auth adapters based on configuration."""

from __future__ import annotations

from functools import lru_cache

from ..config import Settings, settings
from .adapters.base import AuthAdapter
from .adapters.jwt import JWTAuthAdapter
from .adapters.none import NoAuthAdapter


def get_auth_adapter(config: Settings | None = None) -> AuthAdapter:
    """Create and return the configured auth adapter."""
    config = config or settings
    provider = config.auth_provider.lower()
    options = config.auth_config or {}

    if provider == "none":
        return NoAuthAdapter(
            default_user_id=options.get("default_user_id", "dev-user"),
            environment=config.environment,
        )

    if provider == "jwt":
        secret_key = options.get("secret_key") or config.jwt_secret
        if not secret_key:
            raise ValueError(
                "JWT secret key is required. Set INKWELL_JWT_SECRET or provide in config."
            )
        return JWTAuthAdapter(
            secret_key=secret_key,
            algorithm=options.get("algorithm", config.jwt_algorithm),
            issuer=options.get("issuer", "inkwell"),
            audience=options.get("audience", "inkwell-api"),
        )

    raise ValueError(f"Unsupported auth provider: {config.auth_provider}")


@lru_cache(maxsize=1)
def get_auth_adapter_cached() -> AuthAdapter:
    """Process-wide adapter built from the global settings."""
    return get_auth_adapter()
