from idmatch.matching.models import MatchResult
from idmatch.text.normalizer import normalize
from idmatch.text.similarity import similarity

DEFAULT_NAME_THRESHOLD = 0.7
_PARTIAL_TOKEN_RATIO = 0.6


def match_name(
    name: str,
    ocr_text: str,
    threshold: float = DEFAULT_NAME_THRESHOLD,
) -> MatchResult:
    """Locate a declared full name in OCR text.

    Tries, in order: the whole normalized name as a substring, the share of
    individual name tokens present, and finally the best fuzzy match over a
    sliding window of OCR words as wide as the name.
    """
    normalized_name = normalize(name)
    normalized_text = normalize(ocr_text)

    tokens = [token for token in normalized_name.split(" ") if len(token) > 1]
    if not tokens:
        return MatchResult.not_found()

    if normalized_name in normalized_text:
        return MatchResult(found=True, confidence=1.0, extracted=name.strip())

    found_tokens = [token for token in tokens if token in normalized_text]
    ratio = len(found_tokens) / len(tokens)
    if ratio >= _PARTIAL_TOKEN_RATIO:
        return MatchResult(found=True, confidence=ratio, extracted=" ".join(found_tokens))

    words = normalized_text.split()
    best_score = 0.0
    best_window = ""
    for start in range(len(words) - len(tokens) + 1):
        window = " ".join(words[start : start + len(tokens)])
        score = similarity(normalized_name, window)
        if score > best_score:
            best_score = score
            best_window = window

    if best_score >= threshold:
        return MatchResult(found=True, confidence=best_score, extracted=best_window)
    return MatchResult(found=False, confidence=best_score)
