"""Turns confirmation emails into structured application records."""

import re
from datetime import datetime, timezone
from typing import Any, Callable, Iterable, Mapping, Optional, Union

from pydantic import ValidationError

from career_inbox.core.models import (
    EmailRecord,
    ImportBatch,
    ImportFailure,
    ParsedApplication,
    ParseResult
)
from career_inbox.parsing.classifier import PlatformClassifier
from career_inbox.parsing.extractor import FieldExtractor
from career_inbox.parsing.registry import PlatformRegistry, default_registry
from career_inbox.utils.logging import get_logger, log_email_context

logger = get_logger(__name__)

UNKNOWN_TITLE = "Unknown Position"
UNKNOWN_COMPANY = "Unknown Company"
PLATFORM_NOT_DETECTED = "Could not detect platform from email"
EXTRACTION_FAILED = "Could not extract job details"

# "Your application for <title> at <company>" style subjects
SUBJECT_TITLE_PATTERN = re.compile(
    r"(?:application|applied).*?\b(?:for|to)\s+(.+?)(?=\s+at\b|\s+-|$)",
    re.IGNORECASE
)

EmailInput = Union[EmailRecord, Mapping[str, Any]]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ApplicationEmailParser:
    """Classifies an email, extracts its fields and fills display defaults."""
    
    def __init__(
        self,
        registry: Optional[PlatformRegistry] = None,
        clock: Optional[Callable[[], datetime]] = None
    ):
        self.logger = logger.bind(component="application_email_parser")
        self.registry = registry if registry is not None else default_registry()
        self.classifier = PlatformClassifier(self.registry)
        self.extractor = FieldExtractor(self.registry)
        self.clock = clock or _utc_now
    
    def parse(self, email: EmailInput) -> ParseResult:
        """
        Parse a single email into a ParseResult.
        
        Classification and extraction run against the subject and body
        joined by a newline. When no title is found there, a generic pattern
        is tried on the subject alone. Fields that remain unmatched are
        filled with display sentinels so a detected platform always
        produces a usable record.
        
        Args:
            email: EmailRecord or a mapping with the same fields
            
        Returns:
            ParseResult with success=False only when no platform matched
        """
        record = email if isinstance(email, EmailRecord) else EmailRecord.model_validate(email)
        combined_text = f"{record.subject}\n{record.body}"
        
        platform = self.classifier.classify(record.sender, combined_text)
        if platform is None:
            self.logger.info("Platform not detected", **log_email_context(record))
            return ParseResult(
                success=False,
                platform=None,
                job_details=None,
                error=PLATFORM_NOT_DETECTED,
                source_email_id=record.message_id
            )
        
        raw = self.extractor.extract(platform, combined_text)
        
        if not raw.title and record.subject:
            subject_match = SUBJECT_TITLE_PATTERN.search(record.subject)
            if subject_match and subject_match.group(1).strip():
                raw.title = subject_match.group(1).strip()
        
        job_details = ParsedApplication(
            platform=platform,
            title=raw.title or UNKNOWN_TITLE,
            company=raw.company or UNKNOWN_COMPANY,
            location=raw.location or "",
            applied_date=record.received_date or self.clock(),
            source_email_id=record.message_id
        )
        
        self.logger.debug(
            "Email parsed",
            platform=platform,
            message_id=record.message_id,
            missing=raw.missing
        )
        
        return ParseResult(
            success=True,
            platform=platform,
            job_details=job_details,
            error=None,
            source_email_id=record.message_id
        )
    
    def process_batch(
        self,
        emails: Iterable[Any],
        source: str = "mailbox"
    ) -> ImportBatch:
        """
        Parse a batch of emails independently.
        
        Emails without a detectable platform, or that cannot be read as an
        email record at all, are listed as failures for manual review.
        """
        batch = ImportBatch(source=source)
        
        for email in emails:
            batch.emails_scanned += 1
            try:
                record = email if isinstance(email, EmailRecord) else EmailRecord.model_validate(email)
            except ValidationError as e:
                batch.failed.append(ImportFailure(
                    message_id=_peek(email, "messageId", "message_id"),
                    subject=_peek(email, "subject") or "",
                    reason=f"Invalid email record: {e.error_count()} validation error(s)"
                ))
                continue

            result = self.parse(record)
            if result.success and result.job_details:
                batch.applications.append(result.job_details)
            else:
                batch.failed.append(ImportFailure(
                    message_id=record.message_id,
                    subject=record.subject,
                    reason=EXTRACTION_FAILED
                ))
        
        batch.message = (
            f"Imported {len(batch.applications)} of {batch.emails_scanned} emails"
            f" ({batch.needs_review} need manual review)"
        )
        
        self.logger.info(
            "Batch processed",
            source=source,
            emails_scanned=batch.emails_scanned,
            imported=len(batch.applications),
            needs_review=batch.needs_review
        )
        
        return batch


def _peek(email: Any, *names: str) -> Optional[str]:
    if isinstance(email, EmailRecord):
        return getattr(email, names[-1], None)
    if isinstance(email, Mapping):
        for name in names:
            value = email.get(name)
            if value:
                return str(value)
    return None


def parse_application_email(
    email_data: EmailInput,
    registry: Optional[PlatformRegistry] = None
) -> ParseResult:
    """Parse one email with a parser built on the given (or default) registry."""
    return ApplicationEmailParser(registry=registry).parse(email_data)
