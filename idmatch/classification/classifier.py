from idmatch.classification.models import DocumentClassification
from idmatch.logging.logger import Log
from idmatch.matching.id_number import ID_NUMBER_RE
from idmatch.text.normalizer import normalize

AADHAAR_KEYWORDS: tuple[str, ...] = (
    "aadhaar",
    "aadhar",
    "uidai",
    "unique identification",
    "government of india",
    "भारत सरकार",
    "आधार",
)

NUMBER_PATTERN_BONUS = 0.3
EXPECTED_TYPE_THRESHOLD = 0.3

_NORMALIZED_KEYWORDS: tuple[str, ...] = tuple(
    keyword for keyword in (normalize(k) for k in AADHAAR_KEYWORDS) if keyword
)


def classify_document(ocr_text: str) -> DocumentClassification:
    """Score how strongly OCR text resembles an Aadhaar card.

    Confidence is the share of document keywords present plus a fixed bonus
    when a 4-4-4 digit number is printed, clamped to [0, 1]. The document is
    accepted only when confidence exceeds 0.3, so neither the number alone
    nor a single keyword is enough.
    """
    normalized = normalize(ocr_text)
    keyword_matches = sum(1 for keyword in _NORMALIZED_KEYWORDS if keyword in normalized)
    has_number = ID_NUMBER_RE.search(ocr_text or "") is not None

    confidence = keyword_matches / len(AADHAAR_KEYWORDS)
    if has_number:
        confidence += NUMBER_PATTERN_BONUS
    confidence = max(0.0, min(1.0, confidence))

    result = DocumentClassification(
        is_expected_type=confidence > EXPECTED_TYPE_THRESHOLD,
        confidence=confidence,
        keyword_matches=keyword_matches,
        has_number_pattern=has_number,
    )
    Log.debug(
        "Classified document",
        keywords=keyword_matches,
        number_pattern=has_number,
        confidence=f"{confidence:.2f}",
    )
    return result
