import re

from idmatch.matching.models import MatchResult
from idmatch.text.normalizer import digits_only
from idmatch.text.similarity import similarity

ID_SIMILARITY_THRESHOLD = 0.9

# Twelve digits, optionally printed as three groups of four split by single spaces.
# Zero-width lookahead: every overlapping window matches, digits in group 1.
ID_NUMBER_RE = re.compile(r"(?=(\d{4} ?\d{4} ?\d{4}))", re.ASCII)


def match_id_number(id_number: str, ocr_text: str) -> MatchResult:
    """Find the declared 12-digit national ID number in OCR text.

    ID numbers get no partial credit: anything short of an exact digit match
    must clear a strict similarity threshold.
    """
    declared = digits_only(id_number)
    if not declared:
        return MatchResult.not_found()

    candidates = [(m.group(1), digits_only(m.group(1))) for m in ID_NUMBER_RE.finditer(ocr_text)]
    for text, digits in candidates:
        if digits == declared:
            return MatchResult(found=True, confidence=1.0, extracted=text)

    best: MatchResult = MatchResult.not_found()
    for text, digits in candidates:
        score = similarity(declared, digits)
        if score >= ID_SIMILARITY_THRESHOLD and score > best.confidence:
            best = MatchResult(found=True, confidence=score, extracted=text)
    return best
