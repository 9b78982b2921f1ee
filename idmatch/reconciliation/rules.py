"""Field rules: which matcher reconciles each declared field and how its outcome is reported."""

from collections.abc import Callable
from dataclasses import dataclass
from functools import partial

from idmatch.matching import MatchResult, match_date, match_id_number, match_name, match_phone
from idmatch.matching.name import DEFAULT_NAME_THRESHOLD
from idmatch.reconciliation.models import DeclaredFields, FieldName, FieldValidation, Severity

Matcher = Callable[[str, str], MatchResult]


@dataclass(frozen=True)
class FieldRule:
    field_name: FieldName
    declared_attr: str
    matcher: Matcher
    critical: bool
    success_threshold: float
    found_message: str
    missing_message: str

    def declared_value(self, declared: DeclaredFields) -> str:
        return getattr(declared, self.declared_attr) or ""

    def validate(self, result: MatchResult) -> FieldValidation:
        """Translate a matcher result into a user-facing FieldValidation."""
        if result.found:
            severity = (
                Severity.SUCCESS
                if result.confidence >= self.success_threshold
                else Severity.WARNING
            )
            message = self.found_message.format(percent=f"{result.confidence:.0%}")
        else:
            severity = Severity.ERROR if self.critical else Severity.WARNING
            message = self.missing_message
        return FieldValidation(
            field_name=self.field_name,
            found=result.found,
            confidence=result.confidence,
            message=message,
            severity=severity,
        )


def default_field_rules(
    name_threshold: float = DEFAULT_NAME_THRESHOLD,
) -> tuple[FieldRule, ...]:
    """Rules in reporting order: name, idNumber, dateOfBirth, phone."""
    return (
        FieldRule(
            field_name=FieldName.NAME,
            declared_attr="name",
            matcher=partial(match_name, threshold=name_threshold),
            critical=True,
            success_threshold=0.8,
            found_message="Name found with {percent} confidence",
            missing_message=(
                "Name not found in document. "
                "Please ensure the document is clear and matches your input."
            ),
        ),
        FieldRule(
            field_name=FieldName.ID_NUMBER,
            declared_attr="id_number",
            matcher=match_id_number,
            critical=True,
            success_threshold=0.9,
            found_message="Aadhaar number verified with {percent} confidence",
            missing_message=(
                "Aadhaar number not found. "
                "Please check if the document is clear and complete."
            ),
        ),
        FieldRule(
            field_name=FieldName.DATE_OF_BIRTH,
            declared_attr="date_of_birth",
            matcher=match_date,
            critical=False,
            success_threshold=0.7,
            found_message="Date of birth found with {percent} confidence",
            missing_message=(
                "Date of birth not clearly visible. "
                "This might be due to document quality or format."
            ),
        ),
        FieldRule(
            field_name=FieldName.PHONE,
            declared_attr="phone",
            matcher=match_phone,
            critical=False,
            success_threshold=0.0,
            found_message="Phone number found with {percent} confidence",
            missing_message=(
                "Phone number not visible in document. "
                "This is optional and doesn't affect verification."
            ),
        ),
    )
