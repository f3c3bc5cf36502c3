"""Field rules applied to a candidate supplier before it reaches the store.

Each rule returns a list of ``{"field", "message"}`` violations. The
``validate_for_*`` helpers combine rules per operation and raise
:class:`RecordValidationError` when anything is wrong. Values are checked as
given; nothing is trimmed or coerced.
"""

from __future__ import annotations

from supplier_api.core.exceptions import RecordValidationError
from supplier_api.domain.supplier import BUSINESS_FIELDS
from supplier_api.schemas.supplier import SupplierPayload

CONTACT_NUMBER_LENGTH = 10
CONTACT_NUMBER_MESSAGE = "Contact number should be in 10 digits"
REQUIRED_FIELDS_MESSAGE = "All fields are required"


def check_contact_number(payload: SupplierPayload) -> list[dict[str, str]]:
    value = payload.contact_number
    if value is None or len(value) != CONTACT_NUMBER_LENGTH:
        return [{"field": "contact_number", "message": CONTACT_NUMBER_MESSAGE}]
    return []


def check_required_fields(payload: SupplierPayload) -> list[dict[str, str]]:
    return [
        {"field": field, "message": f"{field} is required"}
        for field in BUSINESS_FIELDS
        if not getattr(payload, field)
    ]


def _raise_if_any(
    errors: list[dict[str, str]], missing: list[dict[str, str]] | None = None
) -> None:
    if not errors:
        return
    message = REQUIRED_FIELDS_MESSAGE if missing else errors[0]["message"]
    raise RecordValidationError(message, errors)


def validate_for_create(payload: SupplierPayload) -> None:
    contact = check_contact_number(payload)
    missing = check_required_fields(payload)
    _raise_if_any(contact + missing, missing)


def validate_for_update(payload: SupplierPayload) -> None:
    _raise_if_any(check_contact_number(payload))
