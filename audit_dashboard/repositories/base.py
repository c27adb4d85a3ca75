"""Generic async SQLAlchemy repository with pagination and hard delete."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from sqlalchemy import delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import Select

from audit_dashboard.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseRepository(Generic[ModelT]):
    """Generic CRUD repository bound to one AsyncSession.

    ``default_order`` lists the columns (newest first) used when a listing
    has no explicit ordering.
    """

    model: type[ModelT]
    default_order: tuple[str, ...] = ("created_at", "id")

    def __init__(self, session: AsyncSession):
        self._session = session

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _base_query(self) -> Select:
        return select(self.model)

    def _ordered(self, q: Select) -> Select:
        return q.order_by(*(getattr(self.model, col).desc() for col in self.default_order))

    async def _page(
        self, q: Select, *, offset: int = 0, limit: int | None = None
    ) -> tuple[list[ModelT], int]:
        """Return (items, total_count) for an already-filtered query."""
        count_q = select(func.count()).select_from(q.subquery())
        total = (await self._session.execute(count_q)).scalar_one()

        q = self._ordered(q).offset(offset)
        if limit is not None:
            q = q.limit(limit)
        items = (await self._session.execute(q)).scalars().all()
        return list(items), total

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    async def get_by_id(self, entity_id: int) -> ModelT | None:
        result = await self._session.execute(
            self._base_query().where(self.model.id == entity_id)
        )
        return result.scalars().first()

    async def get_by(self, **criteria: Any) -> ModelT | None:
        q = self._base_query()
        for col_name, value in criteria.items():
            q = q.where(getattr(self.model, col_name) == value)
        return (await self._session.execute(q)).scalars().first()

    async def list(
        self,
        *,
        offset: int = 0,
        limit: int | None = None,
        filters: dict[str, Any] | None = None,
    ) -> tuple[list[ModelT], int]:
        """Return (items, total_count) with pagination and optional equality filters."""
        q = self._base_query()

        if filters:
            for col_name, value in filters.items():
                if value is not None and hasattr(self.model, col_name):
                    q = q.where(getattr(self.model, col_name) == value)

        return await self._page(q, offset=offset, limit=limit)

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    async def create(self, **kwargs: Any) -> ModelT:
        instance = self.model(**kwargs)
        self._session.add(instance)
        await self._session.flush()  # populate id
        await self._session.refresh(instance)
        return instance

    async def update(self, entity_id: int, **kwargs: Any) -> ModelT | None:
        from datetime import datetime, timezone

        kwargs.pop("id", None)
        if "updated_at" not in kwargs and hasattr(self.model, "updated_at"):
            kwargs["updated_at"] = datetime.now(timezone.utc)

        result = await self._session.execute(
            update(self.model)
            .where(self.model.id == entity_id)
            .values(**kwargs)
            .execution_options(synchronize_session=False)
        )
        await self._session.flush()
        if result.rowcount == 0:
            return None
        instance = await self.get_by_id(entity_id)
        if instance is not None:
            await self._session.refresh(instance)
        return instance

    async def delete(self, entity_id: int) -> bool:
        result = await self._session.execute(
            delete(self.model)
            .where(self.model.id == entity_id)
            .execution_options(synchronize_session=False)
        )
        await self._session.flush()
        return result.rowcount > 0
