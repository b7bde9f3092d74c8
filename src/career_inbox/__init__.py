"""
Career Inbox: job application import and history analysis.

This package turns job-board confirmation emails into structured application
records, flags records that describe the same submission, and finds
inactivity gaps in an application history.
"""

__version__ = "0.1.0"

from career_inbox.core.models import (
    EmailRecord,
    GapRecord,
    ImportBatch,
    ParsedApplication,
    ParseResult
)
from career_inbox.parsing.pipeline import ApplicationEmailParser, parse_application_email
from career_inbox.analysis.dedup import are_duplicates
from career_inbox.analysis.gaps import identify_application_gaps

__all__ = [
    "EmailRecord",
    "GapRecord",
    "ImportBatch",
    "ParsedApplication",
    "ParseResult",
    "ApplicationEmailParser",
    "parse_application_email",
    "are_duplicates",
    "identify_application_gaps",
]
