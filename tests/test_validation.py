import pytest

from supplier_api.core.exceptions import RecordValidationError
from supplier_api.schemas.supplier import SupplierPayload
from supplier_api.services.validation import (
    CONTACT_NUMBER_MESSAGE,
    REQUIRED_FIELDS_MESSAGE,
    check_contact_number,
    check_required_fields,
    validate_for_create,
    validate_for_update,
)

VALID = {
    "name": "Jo",
    "company_name": "Co",
    "product_name": "Pen",
    "contact_number": "1234567890",
    "email": "a@b.com",
}


def test_valid_payload_passes_create_and_update():
    payload = SupplierPayload(**VALID)
    validate_for_create(payload)
    validate_for_update(payload)


@pytest.mark.parametrize("number", ["123", "12345678901", "", None])
def test_contact_number_must_be_ten_characters(number):
    payload = SupplierPayload(**{**VALID, "contact_number": number})
    assert check_contact_number(payload) == [
        {"field": "contact_number", "message": CONTACT_NUMBER_MESSAGE}
    ]


def test_missing_and_empty_fields_are_reported_per_field():
    payload = SupplierPayload(name="Jo", company_name="", contact_number="1234567890")
    fields = [e["field"] for e in check_required_fields(payload)]
    assert fields == ["company_name", "product_name", "email"]


def test_create_rejects_with_required_message():
    with pytest.raises(RecordValidationError) as exc_info:
        validate_for_create(SupplierPayload(name="Jo"))
    exc = exc_info.value
    assert exc.status_code == 400
    assert exc.message == REQUIRED_FIELDS_MESSAGE
    assert {"field": "contact_number", "message": CONTACT_NUMBER_MESSAGE} in exc.errors


def test_create_with_only_bad_contact_number_uses_its_message():
    with pytest.raises(RecordValidationError) as exc_info:
        validate_for_create(SupplierPayload(**{**VALID, "contact_number": "123"}))
    assert "10 digits" in exc_info.value.message


def test_update_only_checks_contact_number():
    validate_for_update(SupplierPayload(contact_number="0987654321"))
    with pytest.raises(RecordValidationError):
        validate_for_update(SupplierPayload(**{**VALID, "contact_number": "12"}))
