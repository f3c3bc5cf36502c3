"""Supplier CRUD and search router.

Pattern:
  1. Inject DB session via Depends
  2. Instantiate the service with the session
  3. Call service methods and shape the result with SupplierOut

Paths keep the names existing clients already call (/getUser, /CreateUser, ...).
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from supplier_api.core.sorting import SortParams
from supplier_api.db.base import get_db
from supplier_api.schemas.common import ErrorResponse
from supplier_api.schemas.supplier import SupplierOut, SupplierPayload
from supplier_api.services.supplier import SupplierService

router = APIRouter(tags=["Suppliers"])

_NOT_FOUND = {404: {"model": ErrorResponse}}
_INVALID = {400: {"model": ErrorResponse}}


@router.get("/", response_model=list[SupplierOut])
async def list_suppliers(
    sort: SortParams = Depends(),
    session: AsyncSession = Depends(get_db),
):
    """List all suppliers. Sort with ?sortField=name&sortOrder=asc|desc."""
    items = await SupplierService(session).list_suppliers(sort)
    return [SupplierOut.model_validate(s) for s in items]


@router.get("/getUser/{supplier_id}", response_model=SupplierOut, responses=_NOT_FOUND)
async def get_supplier(
    supplier_id: str,
    session: AsyncSession = Depends(get_db),
):
    supplier = await SupplierService(session).get_supplier(supplier_id)
    return SupplierOut.model_validate(supplier)


@router.put(
    "/UpdateUser/{supplier_id}",
    response_model=SupplierOut,
    responses={**_NOT_FOUND, **_INVALID},
)
async def update_supplier(
    supplier_id: str,
    body: SupplierPayload,
    session: AsyncSession = Depends(get_db),
):
    supplier = await SupplierService(session).update_supplier(supplier_id, body)
    return SupplierOut.model_validate(supplier)


@router.delete("/deleteUser/{supplier_id}", response_model=SupplierOut, responses=_NOT_FOUND)
async def delete_supplier(
    supplier_id: str,
    session: AsyncSession = Depends(get_db),
):
    """Delete a supplier and return the record as it was."""
    supplier = await SupplierService(session).delete_supplier(supplier_id)
    return SupplierOut.model_validate(supplier)


@router.post(
    "/CreateUser",
    response_model=SupplierOut,
    status_code=status.HTTP_201_CREATED,
    responses=_INVALID,
)
async def create_supplier(
    body: SupplierPayload,
    session: AsyncSession = Depends(get_db),
):
    """Create a new supplier. All five fields are required."""
    supplier = await SupplierService(session).create_supplier(body)
    return SupplierOut.model_validate(supplier)


@router.get("/search", response_model=list[SupplierOut])
async def search_suppliers(
    query: Optional[str] = Query(default=None, description="Text matched against name, company, product and email"),
    session: AsyncSession = Depends(get_db),
):
    items = await SupplierService(session).search_suppliers(query)
    return [SupplierOut.model_validate(s) for s in items]
