"""Bigram-overlap (Dice coefficient) string similarity."""

from collections import Counter

from idmatch.text.normalizer import normalize


def _bigrams(text: str) -> Counter[str]:
    return Counter(text[i : i + 2] for i in range(len(text) - 1))


def similarity(a: str, b: str) -> float:
    """Return a symmetric similarity score in [0, 1].

    Both inputs are normalized and stripped of whitespace. Identical strings
    score 1.0, including two empty strings. A string shorter than two
    characters has no bigrams and scores 0.0 against anything else.
    """
    first = "".join(normalize(a).split())
    second = "".join(normalize(b).split())
    if first == second:
        return 1.0
    if len(first) < 2 or len(second) < 2:
        return 0.0

    overlap = sum((_bigrams(first) & _bigrams(second)).values())
    return 2.0 * overlap / (len(first) + len(second) - 2)
