from dataclasses import dataclass


@dataclass(frozen=True)
class DocumentClassification:
    """Whether OCR text looks like the expected identity document."""

    is_expected_type: bool
    confidence: float
    keyword_matches: int = 0
    has_number_pattern: bool = False
