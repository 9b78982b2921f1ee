"""Caller-side structural checks on declared fields.

The reconciler assumes its input was checked here first; it never rejects
declared values itself.
"""

import re

from idmatch.matching.date_rules import parse_declared_date
from idmatch.reconciliation.exceptions import DeclaredFieldsValidationError
from idmatch.reconciliation.models import DeclaredFields, FieldName

_MIN_NAME_LENGTH = 2
_ID_NUMBER_RE = re.compile(r"\d{12}", re.ASCII)
_MOBILE_RE = re.compile(r"(?:\+?91)?[6-9]\d{9}", re.ASCII)
_WHITESPACE_RE = re.compile(r"\s+")


def validate_declared_fields(declared: DeclaredFields) -> DeclaredFields:
    """Check every declared field and report all problems at once.

    Raises:
        DeclaredFieldsValidationError: listing each invalid field.
    """
    errors: dict[str, str] = {}
    _check_name(declared.name, errors)
    _check_id_number(declared.id_number, errors)
    _check_date_of_birth(declared.date_of_birth, errors)
    _check_phone(declared.phone, errors)
    if errors:
        raise DeclaredFieldsValidationError(errors)
    return declared


def _strip_whitespace(value: str) -> str:
    return _WHITESPACE_RE.sub("", value or "")


def _check_name(name: str, errors: dict[str, str]) -> None:
    stripped = (name or "").strip()
    if not stripped:
        errors[FieldName.NAME.value] = "Full name is required"
    elif len(stripped) < _MIN_NAME_LENGTH:
        errors[FieldName.NAME.value] = "Name must be at least 2 characters"


def _check_id_number(id_number: str, errors: dict[str, str]) -> None:
    compact = _strip_whitespace(id_number)
    if not compact:
        errors[FieldName.ID_NUMBER.value] = "Aadhaar number is required"
    elif not _ID_NUMBER_RE.fullmatch(compact):
        errors[FieldName.ID_NUMBER.value] = "Aadhaar number must be 12 digits"


def _check_date_of_birth(date_of_birth: str, errors: dict[str, str]) -> None:
    if not (date_of_birth or "").strip():
        errors[FieldName.DATE_OF_BIRTH.value] = "Date of birth is required"
    elif parse_declared_date(date_of_birth).year is None:
        errors[FieldName.DATE_OF_BIRTH.value] = "Date of birth is not a recognizable date"


def _check_phone(phone: str, errors: dict[str, str]) -> None:
    compact = _strip_whitespace(phone).replace("-", "")
    if not compact:
        errors[FieldName.PHONE.value] = "Phone number is required"
    elif not _MOBILE_RE.fullmatch(compact):
        errors[FieldName.PHONE.value] = "Please enter a valid 10-digit mobile number"
