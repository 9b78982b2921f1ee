from dataclasses import dataclass

from idmatch.reconciliation.models import ReconciliationVerdict


@dataclass(frozen=True)
class OcrFailure:
    """OCR could not produce text; the same image may be retried later."""

    message: str
    attempts: int


VerificationOutcome = ReconciliationVerdict | OcrFailure
