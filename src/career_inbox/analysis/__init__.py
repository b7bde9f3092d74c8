"""Duplicate detection and history analysis for tracked applications."""

from .similarity import (
    normalize,
    levenshtein_distance,
    levenshtein_similarity
)
from .dedup import (
    are_duplicates,
    find_duplicate_pairs
)
from .gaps import identify_application_gaps

__all__ = [
    "normalize",
    "levenshtein_distance",
    "levenshtein_similarity",
    "are_duplicates",
    "find_duplicate_pairs",
    "identify_application_gaps"
]
