"""Generic async repository over one ORM model."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Generic, TypeVar

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from supplier_api.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseRepository(Generic[ModelT]):
    """Generic CRUD repository. Deletes are hard deletes."""

    model: type[ModelT]

    def __init__(self, session: AsyncSession):
        self._session = session

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _base_query(self):
        return select(self.model)

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    async def get_by_id(self, entity_id: str) -> ModelT | None:
        result = await self._session.execute(
            self._base_query()
            .where(self.model.id == entity_id)
            .execution_options(populate_existing=True)
        )
        return result.scalars().first()

    async def get_many(self, entity_ids: Sequence[str]) -> list[ModelT]:
        """Return every row whose id is in *entity_ids*; unknown ids are skipped."""
        result = await self._session.execute(
            self._base_query().where(self.model.id.in_(list(entity_ids)))
        )
        return list(result.scalars().all())

    async def list(
        self,
        *,
        order_by: str | None = None,
        order: str = "asc",
    ) -> list[ModelT]:
        """Return all rows, ordered by *order_by* when it names a column."""
        q = self._base_query()

        col = getattr(self.model, order_by, None) if order_by else None
        if col is not None:
            q = q.order_by(col.desc() if order == "desc" else col.asc())

        items = (await self._session.execute(q)).scalars().all()
        return list(items)

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    async def create(self, **kwargs: Any) -> ModelT:
        instance = self.model(**kwargs)
        self._session.add(instance)
        await self._session.flush()  # populate id
        await self._session.refresh(instance)
        return instance

    async def update(self, entity_id: str, **kwargs: Any) -> ModelT | None:
        from datetime import datetime, timezone

        kwargs.pop("id", None)
        if "updated_at" not in kwargs and hasattr(self.model, "updated_at"):
            kwargs["updated_at"] = datetime.now(timezone.utc)

        result = await self._session.execute(
            update(self.model)
            .where(self.model.id == entity_id)
            .values(**kwargs)
        )
        await self._session.flush()
        if result.rowcount == 0:
            return None
        return await self.get_by_id(entity_id)

    async def delete(self, entity_id: str) -> ModelT | None:
        """Remove the row and return it as it was, or None if absent."""
        instance = await self.get_by_id(entity_id)
        if instance is None:
            return None
        await self._session.delete(instance)
        await self._session.flush()
        return instance
