"""Supplier Pydantic schemas (request DTOs and response models)."""


from datetime import datetime

from supplier_api.schemas.common import ApiModel

class SupplierPayload(ApiModel):
    """Create/update body. Every field is optional here so the validation
    layer, not FastAPI, decides what is missing."""

    name: str | None = None
    company_name: str | None = None
    product_name: str | None = None
    contact_number: str | None = None
    email: str | None = None

class SupplierOut(ApiModel):
    id: str
    name: str
    company_name: str
    product_name: str
    contact_number: str
    email: str
    created_at: datetime
    updated_at: datetime
