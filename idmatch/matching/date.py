from idmatch.matching.date_rules import parse_declared_date, scan_dates
from idmatch.matching.models import MatchResult, PartialDate
from idmatch.text.normalizer import digits_only
from idmatch.text.similarity import similarity

YEAR_ONLY_CONFIDENCE = 0.85
DIGIT_SIMILARITY_THRESHOLD = 0.6

# Partial credit per component, in hundredths so sums stay exact.
_DAY_WEIGHT = 34
_MONTH_WEIGHT = 33
_YEAR_WEIGHT = 33
_STRONG_SCORE = 66
_PARTIAL_SCORE = 34
_STRONG_BONUS = 0.2


def _component_score(declared: PartialDate, candidate: PartialDate) -> int:
    score = 0
    if declared.day is not None and declared.day == candidate.day:
        score += _DAY_WEIGHT
    if declared.month is not None and declared.month == candidate.month:
        score += _MONTH_WEIGHT
    if declared.year is not None and declared.year == candidate.year:
        score += _YEAR_WEIGHT
    return score


def score_candidate(
    declared: PartialDate,
    declared_raw: str,
    candidate: PartialDate,
    candidate_text: str,
) -> float:
    """Confidence that *candidate* is the declared date; 0.0 when it is not accepted."""
    if declared.year is not None and candidate.is_year_only and candidate.year == declared.year:
        return YEAR_ONLY_CONFIDENCE

    score = _component_score(declared, candidate)
    if score >= _STRONG_SCORE:
        return min(1.0, score / 100 + _STRONG_BONUS)
    if score >= _PARTIAL_SCORE:
        return score / 100

    digit_score = similarity(digits_only(declared_raw), digits_only(candidate_text))
    if digit_score >= DIGIT_SIMILARITY_THRESHOLD:
        return digit_score
    return 0.0


def match_date(date_of_birth: str, ocr_text: str) -> MatchResult:
    """Find the declared date of birth among the dates printed in OCR text.

    Every date-like span is scored; the highest-confidence candidate wins and
    earlier rules win ties.
    """
    declared = parse_declared_date(date_of_birth)

    best = MatchResult.not_found()
    for _rule, text, candidate in scan_dates(ocr_text):
        confidence = score_candidate(declared, date_of_birth, candidate, text)
        if confidence > best.confidence:
            best = MatchResult(found=True, confidence=confidence, extracted=text)
            if confidence >= 1.0:
                break
    return best
