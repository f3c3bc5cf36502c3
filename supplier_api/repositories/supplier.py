"""Supplier repository — CRUD from BaseRepository plus free-text search."""


from sqlalchemy import String, func, or_

from supplier_api.domain.supplier import SEARCHABLE_FIELDS, Supplier
from supplier_api.repositories.base import BaseRepository


class SupplierRepository(BaseRepository[Supplier]):
    model = Supplier

    def _fold(self, column):
        """Unicode case folding for *column*.

        SQLite gets the casefold() function registered in ``build_engine``;
        other backends' lower() already handles non-ASCII letters.
        """
        if self._session.bind.dialect.name == "sqlite":
            return func.casefold(column, type_=String)
        return func.lower(column, type_=String)

    async def search(self, text: str) -> list[Supplier]:
        """Case-insensitive substring match on any searchable column."""
        q = self._base_query()
        if text:
            needle = text.casefold()
            q = q.where(
                or_(
                    *(
                        self._fold(getattr(Supplier, field)).contains(needle, autoescape=True)
                        for field in SEARCHABLE_FIELDS
                    )
                )
            )
        result = await self._session.execute(q)
        return list(result.scalars().all())
