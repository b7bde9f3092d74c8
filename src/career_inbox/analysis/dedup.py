"""Heuristic duplicate detection for job applications."""

from typing import Any, List, Sequence, Tuple

from career_inbox.analysis.records import get_date, get_field
from career_inbox.analysis.similarity import is_similar, normalize
from career_inbox.utils.logging import get_logger

logger = get_logger(__name__)

COMPANY_SIMILARITY_THRESHOLD = 0.8
TITLE_SIMILARITY_THRESHOLD = 0.7
SECONDS_PER_DAY = 86_400


def are_duplicates(job_a: Any, job_b: Any, date_window_days: float = 7) -> bool:
    """
    Decide whether two application records describe the same submission.

    Gates are applied in order: company, then title, then the applied date
    window when both records carry a date. This is a heuristic and accepts
    occasional false positives and negatives; it is symmetric but not
    transitive, so callers grouping many records must not chain verdicts.
    """
    company_a = normalize(get_field(job_a, "company"))
    company_b = normalize(get_field(job_b, "company"))
    if not is_similar(company_a, company_b, COMPANY_SIMILARITY_THRESHOLD):
        return False

    title_a = normalize(get_field(job_a, "title"))
    title_b = normalize(get_field(job_b, "title"))
    if not is_similar(title_a, title_b, TITLE_SIMILARITY_THRESHOLD):
        return False

    date_a = get_date(job_a, "applied_date")
    date_b = get_date(job_b, "applied_date")
    if date_a is not None and date_b is not None:
        days_apart = abs((date_a - date_b).total_seconds()) / SECONDS_PER_DAY
        if days_apart > date_window_days:
            return False

    return True


def find_duplicate_pairs(
    records: Sequence[Any],
    date_window_days: float = 7
) -> List[Tuple[int, int]]:
    """Return every index pair ``(i, j)`` with ``i < j`` judged duplicate."""
    pairs = []
    for i in range(len(records)):
        for j in range(i + 1, len(records)):
            if are_duplicates(records[i], records[j], date_window_days):
                pairs.append((i, j))

    logger.debug(
        "Duplicate scan complete",
        records=len(records),
        pairs=len(pairs),
        date_window_days=date_window_days
    )
    return pairs
