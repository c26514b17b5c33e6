"""
Field permissions applied by the extension service
"""

from typing import Any

import strawberry
from strawberry.permission import BasePermission

from ..logging import get_logger

logger = get_logger(__name__)


class IsAuthenticated(BasePermission):
    """Default guard for contributed query fields."""

    message = "User is not authenticated"

    def has_permission(self, source: Any, info: strawberry.Info, **kwargs: Any) -> bool:
        auth = info.context.get("auth") if isinstance(info.context, dict) else None
        if auth is not None and auth.is_authenticated:
            return True
        logger.info("Rejected unauthenticated field access", field=info.field_name)
        return False
