import re

from idmatch.matching.models import MatchResult
from idmatch.text.normalizer import digits_only
from idmatch.text.similarity import similarity

PHONE_SIMILARITY_THRESHOLD = 0.8
_LOCAL_DIGITS = 10

_PHONE_PATTERNS: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("mobile", re.compile(r"\b[6-9]\d{9}\b", re.ASCII)),
    ("ten-digit", re.compile(r"\b\d{10}\b", re.ASCII)),
    ("grouped-3-3-4", re.compile(r"\b\d{3}[\s-]?\d{3}[\s-]?\d{4}\b", re.ASCII)),
    ("grouped-5-5", re.compile(r"\b\d{5}[\s-]\d{5}\b", re.ASCII)),
    ("country-code", re.compile(r"(?<![\w+])\+?91[\s-]?\d{5}[\s-]?\d{5}\b", re.ASCII)),
)


def _phone_candidates(ocr_text: str) -> list[tuple[str, str]]:
    """Return (matched text, last ten digits) for every pattern hit, in pattern order."""
    candidates: list[tuple[str, str]] = []
    for _tag, pattern in _PHONE_PATTERNS:
        for m in pattern.finditer(ocr_text):
            candidates.append((m.group(0), digits_only(m.group(0))[-_LOCAL_DIGITS:]))
    return candidates


def match_phone(phone: str, ocr_text: str) -> MatchResult:
    """Find the declared mobile number in OCR text by its last ten digits."""
    declared = digits_only(phone)[-_LOCAL_DIGITS:]
    if not declared:
        return MatchResult.not_found()

    candidates = _phone_candidates(ocr_text)
    for text, digits in candidates:
        if digits == declared:
            return MatchResult(found=True, confidence=1.0, extracted=text)

    best: MatchResult = MatchResult.not_found()
    for text, digits in candidates:
        score = similarity(declared, digits)
        if score >= PHONE_SIMILARITY_THRESHOLD and score > best.confidence:
            best = MatchResult(found=True, confidence=score, extracted=text)
    return best
