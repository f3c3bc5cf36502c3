"""Supplier service — business rules for the supplier endpoints.

Validation runs before any store access; a rejected payload never touches
the database.

Rule: No FastAPI here. Routers call this, this calls the repository.
"""


import logging

from sqlalchemy.ext.asyncio import AsyncSession

from supplier_api.core.exceptions import NotFoundError
from supplier_api.core.sorting import SortParams
from supplier_api.domain.supplier import BUSINESS_FIELDS, Supplier
from supplier_api.repositories.supplier import SupplierRepository
from supplier_api.schemas.supplier import SupplierPayload
from supplier_api.services.validation import validate_for_create, validate_for_update

logger = logging.getLogger(__name__)

class SupplierService:
    def __init__(self, session: AsyncSession):
        self._repo = SupplierRepository(session)

    async def list_suppliers(self, sort: SortParams) -> list[Supplier]:
        return await self._repo.list(order_by=sort.column, order=sort.order)

    async def get_supplier(self, supplier_id: str) -> Supplier:
        supplier = await self._repo.get_by_id(supplier_id)
        if not supplier:
            raise NotFoundError()
        return supplier

    async def create_supplier(self, data: SupplierPayload) -> Supplier:
        validate_for_create(data)
        supplier = await self._repo.create(**data.model_dump(include=set(BUSINESS_FIELDS)))
        logger.info("Created supplier %s", supplier.id)
        return supplier

    async def update_supplier(self, supplier_id: str, data: SupplierPayload) -> Supplier:
        validate_for_update(data)
        # Absent fields keep their stored value; the columns are NOT NULL
        fields = data.model_dump(include=set(BUSINESS_FIELDS), exclude_none=True)
        updated = await self._repo.update(supplier_id, **fields)
        if not updated:
            raise NotFoundError()
        logger.info("Updated supplier %s", supplier_id)
        return updated

    async def delete_supplier(self, supplier_id: str) -> Supplier:
        deleted = await self._repo.delete(supplier_id)
        if not deleted:
            raise NotFoundError()
        logger.info("Deleted supplier %s", supplier_id)
        return deleted

    async def search_suppliers(self, query: str | None) -> list[Supplier]:
        return await self._repo.search(query or "")
