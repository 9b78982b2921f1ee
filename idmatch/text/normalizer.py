"""Text canonicalization shared by every matcher and the classifier.

Normalization flow:
1. Lower-case the text.
2. Drop every character that is not a letter, combining mark, decimal digit
   or whitespace.
3. Collapse whitespace runs to a single space and trim.
4. Compose to NFC so decomposed OCR output compares equal to typed input.

Combining marks are kept so Devanagari vowel signs survive (``आधार`` would
otherwise lose its ``ा``).
"""

import re
import unicodedata

_KEPT_CATEGORY_PREFIXES = ("L", "M")
_NON_DIGIT_RE = re.compile(r"[^0-9]")


def _is_kept(ch: str) -> bool:
    if ch.isspace():
        return True
    category = unicodedata.category(ch)
    return category == "Nd" or category.startswith(_KEPT_CATEGORY_PREFIXES)


def normalize(text: str) -> str:
    """Canonicalize *text* for comparison. Idempotent."""
    if not text:
        return ""
    lowered = text.lower()
    kept = "".join(ch for ch in lowered if _is_kept(ch))
    collapsed = " ".join(kept.split())
    return unicodedata.normalize("NFC", collapsed)


def digits_only(text: str) -> str:
    """Return the ASCII digits of *text* in order; empty input gives ``""``."""
    if not text:
        return ""
    return _NON_DIGIT_RE.sub("", text)
