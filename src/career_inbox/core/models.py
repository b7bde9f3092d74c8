"""Core data models for Career Inbox."""

from datetime import date, datetime, timezone
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator
from pydantic.alias_generators import to_camel


_DATETIME_ADAPTER = TypeAdapter(datetime)


def to_utc_datetime(value: Any) -> Optional[datetime]:
    """
    Coerce a loosely typed timestamp into an aware datetime.

    Accepts datetimes, dates, ISO-8601 strings and epoch numbers. Naive values
    are taken as UTC. Anything that cannot be parsed yields None.
    """
    if value is None or value == "" or isinstance(value, bool):
        return None
    if isinstance(value, date) and not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day)
    try:
        parsed = _DATETIME_ADAPTER.validate_python(value)
    except ValidationError:
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed


class CamelModel(BaseModel):
    """Base model exposing camelCase aliases on the wire."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class EmailRecord(CamelModel):
    """A fetched or forwarded email, already reduced to plain text."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    message_id: Optional[str] = Field(None, description="Opaque transport message identifier")
    sender: str = Field("", description="Sender address or display string")
    subject: str = Field("", description="Subject line")
    body: str = Field("", description="Plain-text body")
    received_date: Optional[datetime] = Field(None, description="When the email was received")

    @field_validator("sender", "subject", "body", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        if value is None:
            return ""
        return value if isinstance(value, str) else str(value)

    @field_validator("message_id", mode="before")
    @classmethod
    def _coerce_message_id(cls, value: Any) -> Optional[str]:
        if value is None or value == "":
            return None
        return value if isinstance(value, str) else str(value)

    @field_validator("received_date", mode="before")
    @classmethod
    def _coerce_received_date(cls, value: Any) -> Optional[datetime]:
        return to_utc_datetime(value)


class ParsedApplication(CamelModel):
    """Structured application produced from a confirmation email."""
    platform: Optional[str] = Field(None, description="Detected job platform")
    title: str = Field(..., description="Job title, or a sentinel when not found")
    company: str = Field(..., description="Company name, or a sentinel when not found")
    location: str = Field("", description="Job location, empty when not found")
    applied_date: datetime = Field(..., description="Application timestamp")
    source_email_id: Optional[str] = Field(None, description="Message id of the source email")


class ParseResult(CamelModel):
    """Outcome of parsing a single email."""
    success: bool = Field(..., description="Whether a platform was detected")
    platform: Optional[str] = Field(None, description="Detected job platform")
    job_details: Optional[ParsedApplication] = Field(None, description="Parsed application")
    error: Optional[str] = Field(None, description="Failure reason")
    source_email_id: Optional[str] = Field(None, description="Message id of the source email")


class ImportFailure(CamelModel):
    """An email that could not be turned into an application."""
    message_id: Optional[str] = Field(None, description="Message id of the email")
    subject: str = Field("", description="Subject line for manual review")
    reason: str = Field(..., description="Why the import failed")


class ImportBatch(CamelModel):
    """Result of running a batch of emails through the parser."""
    applications: List[ParsedApplication] = Field(default_factory=list, description="Imported applications")
    failed: List[ImportFailure] = Field(default_factory=list, description="Emails needing manual review")
    source: str = Field("mailbox", description="Where the emails came from")
    emails_scanned: int = Field(0, description="Number of emails processed")
    message: str = Field("", description="Human-readable summary")

    @property
    def needs_review(self) -> int:
        return len(self.failed)


class GapRecord(CamelModel):
    """A window in the application history with no logged applications."""
    start_date: datetime = Field(..., description="Date of the application before the gap")
    end_date: datetime = Field(..., description="Date of the application after the gap")
    days_missing: int = Field(..., description="Whole days between the two applications")
    suggestion: str = Field(..., description="Prompt shown to the user")
