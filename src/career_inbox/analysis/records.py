"""Field access for loosely shaped application records."""

from collections.abc import Mapping
from datetime import datetime
from typing import Any, Optional, Tuple

from career_inbox.core.models import to_utc_datetime

# Logical field -> accepted spellings, in lookup order
FIELD_ALIASES = {
    "title": ("title",),
    "company": ("company",),
    "applied_date": ("appliedDate", "applied_date"),
    "application_date": ("applicationDate", "application_date"),
    "created_at": ("createdAt", "created_at"),
}

# Date fields consulted for chronology, first present wins
HISTORY_DATE_FIELDS: Tuple[str, ...] = ("application_date", "applied_date", "created_at")


def get_field(record: Any, field: str) -> Any:
    """Read a logical field from a mapping or an attribute-style object."""
    for name in FIELD_ALIASES.get(field, (field,)):
        if isinstance(record, Mapping):
            value = record.get(name)
        else:
            value = getattr(record, name, None)
        if value is not None and value != "":
            return value
    return None


def get_date(record: Any, field: str) -> Optional[datetime]:
    """Read a date field and coerce it to an aware datetime."""
    return to_utc_datetime(get_field(record, field))


def history_date(record: Any) -> Optional[datetime]:
    """First usable date among application, applied and creation dates."""
    for field in HISTORY_DATE_FIELDS:
        value = get_date(record, field)
        if value is not None:
            return value
    return None
