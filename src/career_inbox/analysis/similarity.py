"""String normalization and edit-distance similarity."""

import re
from typing import Any, List

_NON_ALNUM = re.compile(r"[^a-z0-9]")


def normalize(value: Any) -> str:
    """
    Canonicalize a string for comparison.

    Lower-cases, trims and drops every character outside ``[a-z0-9]``.
    The result is only meant for matching, never for display.
    """
    if not value:
        return ""
    return _NON_ALNUM.sub("", str(value).lower().strip())


def levenshtein_distance(a: str, b: str) -> int:
    """Edit distance with unit cost for insertion, deletion and substitution."""
    if len(a) < len(b):
        a, b = b, a

    previous: List[int] = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i] + [0] * len(b)
        for j, char_b in enumerate(b, start=1):
            cost = 0 if char_a == char_b else 1
            current[j] = min(
                previous[j] + 1,
                current[j - 1] + 1,
                previous[j - 1] + cost,
            )
        previous = current

    return previous[len(b)]


def levenshtein_similarity(a: str, b: str) -> float:
    """
    Similarity ratio ``1 - distance / max(len(a), len(b))``.

    Identical strings (including two empty strings) score 1.0 and a string
    compared against an empty one scores 0.0.
    """
    if a == b:
        return 1.0
    if not a or not b:
        return 0.0

    max_len = max(len(a), len(b))
    return 1.0 - levenshtein_distance(a, b) / max_len


def is_similar(a: str, b: str, threshold: float) -> bool:
    """Equal, contained in one another, or above the similarity threshold."""
    return a == b or a in b or b in a or levenshtein_similarity(a, b) > threshold
