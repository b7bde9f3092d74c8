"""API models for request/response schemas."""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import Field

from career_inbox.core.models import CamelModel, GapRecord


class BatchImportRequest(CamelModel):
    """A batch of emails to import."""
    emails: List[Any] = Field(..., description="Email records to parse")
    source: str = Field("mailbox", description="Label for where the emails came from")


class DuplicateCheckRequest(CamelModel):
    """Application records to scan for duplicate pairs."""
    applications: List[Dict[str, Any]] = Field(..., description="Application records")
    date_window_days: Optional[float] = Field(None, ge=0, description="Applied date window in days")


class DuplicatePair(CamelModel):
    """Indices of two records judged to be the same submission."""
    first: int = Field(..., description="Index of the earlier record in the request")
    second: int = Field(..., description="Index of the later record in the request")


class DuplicateCheckResponse(CamelModel):
    """Duplicate scan result."""
    pairs: List[DuplicatePair] = Field(default_factory=list, description="Duplicate pairs")
    count: int = Field(0, description="Number of duplicate pairs")
    date_window_days: float = Field(..., description="Window that was applied")


class GapAnalysisRequest(CamelModel):
    """Application history to scan for inactivity gaps."""
    applications: List[Dict[str, Any]] = Field(..., description="Application records")
    gap_days: Optional[int] = Field(None, ge=1, description="Minimum gap length in days")


class GapAnalysisResponse(CamelModel):
    """Gap analysis result."""
    gaps: List[GapRecord] = Field(default_factory=list, description="Detected gaps")
    count: int = Field(0, description="Number of gaps")
    gap_days: int = Field(..., description="Threshold that was applied")


class HealthCheck(CamelModel):
    """Health check response."""
    status: str = Field(..., description="Service status")
    timestamp: datetime = Field(..., description="Check timestamp")
    version: str = Field(..., description="Service version")
    platforms: List[str] = Field(..., description="Platforms known to the classifier")


class ErrorResponse(CamelModel):
    """Error response model."""
    error: str = Field(..., description="Error type")
    message: str = Field(..., description="Error message")
    details: Optional[Dict[str, Any]] = Field(None, description="Additional error details")
    timestamp: datetime = Field(..., description="Error timestamp")
