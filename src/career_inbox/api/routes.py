"""API routes for Career Inbox."""

from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends

from career_inbox import __version__
from career_inbox.analysis.dedup import find_duplicate_pairs
from career_inbox.analysis.gaps import identify_application_gaps
from career_inbox.api.models import (
    BatchImportRequest, DuplicateCheckRequest, DuplicateCheckResponse, DuplicatePair,
    GapAnalysisRequest, GapAnalysisResponse, HealthCheck
)
from career_inbox.config import settings
from career_inbox.core.models import EmailRecord, ImportBatch, ParseResult
from career_inbox.parsing.pipeline import ApplicationEmailParser
from career_inbox.parsing.samples import import_sample_applications
from career_inbox.utils.logging import get_logger

logger = get_logger(__name__)

# Set by the application factory; tests may override through dependency_overrides
parser: Optional[ApplicationEmailParser] = None

# Create routers
imports_router = APIRouter(prefix="/imports", tags=["imports"])
applications_router = APIRouter(prefix="/applications", tags=["applications"])
health_router = APIRouter(prefix="/health", tags=["health"])


def get_parser() -> ApplicationEmailParser:
    """Shared email parser."""
    global parser
    if parser is None:
        parser = ApplicationEmailParser()
    return parser


@imports_router.post("/parse", response_model=ParseResult)
def parse_email(
    email: EmailRecord,
    email_parser: ApplicationEmailParser = Depends(get_parser)
):
    """Parse a single forwarded confirmation email."""
    result = email_parser.parse(email)
    logger.info(
        "Parse request handled",
        success=result.success,
        platform=result.platform,
        message_id=result.source_email_id
    )
    return result


@imports_router.post("/batch", response_model=ImportBatch)
def import_batch(
    request: BatchImportRequest,
    email_parser: ApplicationEmailParser = Depends(get_parser)
):
    """Parse a batch of emails, reporting those that need manual review."""
    return email_parser.process_batch(request.emails, source=request.source)


@imports_router.get("/sample", response_model=ImportBatch)
def import_sample(email_parser: ApplicationEmailParser = Depends(get_parser)):
    """Import the built-in sample emails."""
    return import_sample_applications(email_parser)


@applications_router.post("/duplicates", response_model=DuplicateCheckResponse)
def check_duplicates(request: DuplicateCheckRequest):
    """List pairs of application records that look like the same submission."""
    window = request.date_window_days
    if window is None:
        window = settings.duplicate_window_days
    
    pairs = find_duplicate_pairs(request.applications, date_window_days=window)
    return DuplicateCheckResponse(
        pairs=[DuplicatePair(first=i, second=j) for i, j in pairs],
        count=len(pairs),
        date_window_days=window
    )


@applications_router.post("/gaps", response_model=GapAnalysisResponse)
def find_gaps(request: GapAnalysisRequest):
    """Find inactivity windows in an application history."""
    gap_days = request.gap_days or settings.gap_threshold_days
    gaps = identify_application_gaps(request.applications, gap_days=gap_days)
    return GapAnalysisResponse(gaps=gaps, count=len(gaps), gap_days=gap_days)


@health_router.get("/", response_model=HealthCheck)
def health_check(email_parser: ApplicationEmailParser = Depends(get_parser)):
    """Health check endpoint."""
    return HealthCheck(
        status="healthy",
        timestamp=datetime.now(timezone.utc),
        version=__version__,
        platforms=list(email_parser.registry.names)
    )


all_routers = [
    imports_router,
    applications_router,
    health_router
]
