from typing import Any

from idmatch.reconciliation.models import FieldValidation, ReconciliationVerdict
from idmatch.verification.models import OcrFailure, VerificationOutcome


class VerdictSerializer:
    """Converts verification outcomes to JSON-serializable structures."""

    def serialize(self, outcome: VerificationOutcome) -> dict[str, Any]:
        """Transform a verdict or OCR failure into a plain dict."""
        if isinstance(outcome, OcrFailure):
            return self._failure_to_dict(outcome)
        return self._verdict_to_dict(outcome)

    def _verdict_to_dict(self, verdict: ReconciliationVerdict) -> dict[str, Any]:
        return {
            "status": verdict.overall_status.value,
            "can_proceed": verdict.can_proceed,
            "document": {
                "is_expected_type": verdict.classification.is_expected_type,
                "confidence": round(verdict.classification.confidence, 4),
            },
            "fields": {
                name.value: self._validation_to_dict(validation)
                for name, validation in verdict.per_field.items()
            },
            "extracted": {name.value: value for name, value in verdict.extracted_fields.items()},
            "ocr_text": verdict.raw_ocr_text,
        }

    def _validation_to_dict(self, validation: FieldValidation) -> dict[str, Any]:
        return {
            "found": validation.found,
            "confidence": round(validation.confidence, 4),
            "message": validation.message,
            "severity": validation.severity.value,
        }

    def _failure_to_dict(self, failure: OcrFailure) -> dict[str, Any]:
        return {
            "status": "ocr_failed",
            "can_proceed": False,
            "message": failure.message,
            "attempts": failure.attempts,
        }
