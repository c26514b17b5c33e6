"""
Data services for content types.

A data service answers ``find(filters)`` with a ``FindResult`` whose ``results``
hold raw records in primary-key order.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol

from sqlalchemy import select
from sqlalchemy.orm import DeclarativeBase

from ..database.connection import get_async_session
from ..logging import get_logger

logger = get_logger(__name__)


class ContentType(Enum):
    """Content types addressable through the service registry."""

    ARTICLE = "api::article.article"
    WRITER = "api::writer.writer"


class InvalidFilterError(ValueError):
    """Raised when a filter names a field the content type does not have."""


@dataclass(frozen=True)
class FindResult:
    """Records returned by a data service lookup."""

    results: tuple[Any, ...] = ()

    def first(self) -> Any | None:
        return self.results[0] if self.results else None


class DataService(Protocol):
    """Lookup-by-filter interface implemented per content type."""

    async def find(self, filters: Mapping[str, Any] | None = None) -> FindResult: ...


class EntityService:
    """SQLAlchemy-backed data service for one model.

    ``relations`` maps relation names used in filters (``author``) onto the
    foreign key column that stores them (``author_id``).
    """

    def __init__(
        self,
        model: type[DeclarativeBase],
        relations: Mapping[str, str] | None = None,
    ):
        self.model = model
        self.relations = dict(relations or {})

    def _column(self, field: str):
        name = self.relations.get(field, field)
        if name not in self.model.__table__.columns:
            raise InvalidFilterError(
                f"Unknown filter field '{field}' for {self.model.__tablename__}"
            )
        return getattr(self.model, name)

    async def find(self, filters: Mapping[str, Any] | None = None) -> FindResult:
        stmt = select(self.model)
        for field, value in (filters or {}).items():
            stmt = stmt.where(self._column(field) == value)
        stmt = stmt.order_by(self.model.id)

        async with get_async_session() as session:
            result = await session.execute(stmt)
            records = tuple(result.scalars().all())

        logger.debug(
            "Data service lookup",
            table=self.model.__tablename__,
            filters=sorted(filters or {}),
            count=len(records),
        )
        return FindResult(results=records)
