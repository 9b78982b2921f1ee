from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

from idmatch.classification.models import DocumentClassification


class FieldName(str, Enum):
    NAME = "name"
    ID_NUMBER = "idNumber"
    DATE_OF_BIRTH = "dateOfBirth"
    PHONE = "phone"
    DOCUMENT_TYPE = "documentType"


class Severity(str, Enum):
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


class OverallStatus(str, Enum):
    VALID = "valid"
    WARNING = "warning"
    INVALID = "invalid"


class ReconciliationStage(str, Enum):
    PENDING = "pending"
    CLASSIFYING = "classifying"
    MATCHING = "matching"
    AGGREGATED = "aggregated"


@dataclass(frozen=True)
class DeclaredFields:
    """Identity fields as typed by the user, submitted together."""

    name: str
    id_number: str
    date_of_birth: str
    phone: str


@dataclass(frozen=True)
class FieldValidation:
    """Per-field verdict shown to the user as a badge."""

    field_name: FieldName
    found: bool
    confidence: float
    message: str
    severity: Severity


@dataclass(frozen=True)
class ReconciliationVerdict:
    """Final, read-only outcome of reconciling one document submission."""

    overall_status: OverallStatus
    classification: DocumentClassification
    raw_ocr_text: str
    per_field: Mapping[FieldName, FieldValidation] = field(
        default_factory=lambda: MappingProxyType({})
    )
    extracted_fields: Mapping[FieldName, str | None] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "per_field", MappingProxyType(dict(self.per_field)))
        object.__setattr__(
            self, "extracted_fields", MappingProxyType(dict(self.extracted_fields))
        )

    @property
    def can_proceed(self) -> bool:
        """The caller may move on to the next workflow step."""
        return self.overall_status in (OverallStatus.VALID, OverallStatus.WARNING)
