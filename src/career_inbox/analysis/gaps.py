"""Inactivity gaps in an application history."""

from typing import Any, Iterable, List

from career_inbox.analysis.records import history_date
from career_inbox.core.models import GapRecord

SECONDS_PER_DAY = 86_400

GAP_SUGGESTION = "No applications logged for {days} days. Did you forget to track some applications?"


def identify_application_gaps(applications: Iterable[Any], gap_days: int = 7) -> List[GapRecord]:
    """
    Report windows of at least ``gap_days`` whole days between consecutive applications.

    Records without any of the application, applied or creation dates are
    ignored. Only chronologically adjacent records are compared, so the
    returned gaps are ordered and never overlap.
    """
    dated = []
    for record in applications or []:
        when = history_date(record)
        if when is not None:
            dated.append(when)

    if len(dated) < 2:
        return []

    dated.sort()

    gaps = []
    for previous, current in zip(dated, dated[1:]):
        days_diff = int((current - previous).total_seconds() // SECONDS_PER_DAY)
        if days_diff >= gap_days:
            gaps.append(GapRecord(
                start_date=previous,
                end_date=current,
                days_missing=days_diff,
                suggestion=GAP_SUGGESTION.format(days=days_diff)
            ))

    return gaps
