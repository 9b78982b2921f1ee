import dataclasses

import pytest

from idmatch.reconciliation.exceptions import DeclaredFieldsValidationError
from idmatch.reconciliation.models import DeclaredFields
from idmatch.reconciliation.validator import validate_declared_fields


def _declared(**overrides: str) -> DeclaredFields:
    base = DeclaredFields(
        name="Asha Verma",
        id_number="1234 5678 9012",
        date_of_birth="1995-07-14",
        phone="98765 43210",
    )
    return dataclasses.replace(base, **overrides)


class TestValidDeclaredFields:
    def test_returns_input(self) -> None:
        declared = _declared()
        assert validate_declared_fields(declared) is declared

    @pytest.mark.parametrize("phone", ["9876543210", "+91 98765 43210", "91-98765-43210"])
    def test_accepted_phone_formats(self, phone: str) -> None:
        validate_declared_fields(_declared(phone=phone))

    def test_compact_id_number(self) -> None:
        validate_declared_fields(_declared(id_number="123456789012"))

    def test_year_only_date_of_birth(self) -> None:
        validate_declared_fields(_declared(date_of_birth="1995"))


class TestInvalidDeclaredFields:
    @pytest.mark.parametrize(
        ("overrides", "field", "message"),
        [
            ({"name": "  "}, "name", "Full name is required"),
            ({"name": "A"}, "name", "Name must be at least 2 characters"),
            ({"id_number": ""}, "idNumber", "Aadhaar number is required"),
            ({"id_number": "1234 5678"}, "idNumber", "Aadhaar number must be 12 digits"),
            ({"id_number": "1234-5678-9012"}, "idNumber", "Aadhaar number must be 12 digits"),
            ({"date_of_birth": ""}, "dateOfBirth", "Date of birth is required"),
            (
                {"date_of_birth": "yesterday"},
                "dateOfBirth",
                "Date of birth is not a recognizable date",
            ),
            ({"phone": ""}, "phone", "Phone number is required"),
            ({"phone": "5876543210"}, "phone", "Please enter a valid 10-digit mobile number"),
            ({"phone": "98765"}, "phone", "Please enter a valid 10-digit mobile number"),
        ],
    )
    def test_single_field_error(
        self, overrides: dict[str, str], field: str, message: str
    ) -> None:
        with pytest.raises(DeclaredFieldsValidationError) as exc_info:
            validate_declared_fields(_declared(**overrides))
        assert exc_info.value.errors == {field: message}

    def test_reports_all_errors_at_once(self) -> None:
        declared = DeclaredFields(name="", id_number="", date_of_birth="", phone="")
        with pytest.raises(DeclaredFieldsValidationError) as exc_info:
            validate_declared_fields(declared)
        assert set(exc_info.value.errors) == {"name", "idNumber", "dateOfBirth", "phone"}
        assert "Invalid declared fields" in str(exc_info.value)
