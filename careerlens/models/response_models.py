"""Response models for the CareerLens HTTP routes."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field

from careerlens.models.course_models import ScrapedCourse


class HealthResponse(BaseModel):
    """Health-check response."""

    status: str = "ok"
    version: str = "1.0.0"


class RelayFailure(BaseModel):
    """Body returned when the cloud-function trigger fails."""

    success: bool = False
    message: str


class ScrapeSummary(BaseModel):
    """Body returned by GET /api/test/web-scraper on success."""

    success: bool = True
    count: int = Field(..., ge=0)
    sample: Optional[ScrapedCourse] = None
    message: str


class ScrapeFailure(BaseModel):
    success: bool = False
    error: str


class ParsedDocument(BaseModel):
    """Body returned by POST /api/parse-resume."""

    success: bool = True
    text: str
    pages: int = Field(..., ge=0)


class FailureEnvelope(BaseModel):
    """Uniform error body for handled failures."""

    success: bool = False
    error: str
    details: Optional[Any] = None
