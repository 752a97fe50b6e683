"""Pydantic request/response models for API endpoints."""

from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from core.config import MAX_WEEK_OFFSET
from models.planning import SyncIssue, WeekGrid


class HealthResponse(BaseModel):
    """Health check response."""

    status: str  # "healthy"
    version: str
    timestamp: str  # ISO 8601 UTC


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    code: str
    details: list[str] = []


class ErrorCodes:
    """Error code constants."""

    INTERNAL_ERROR = "INTERNAL_ERROR"


class GridRequest(BaseModel):
    """
    Planning snapshot plus the week to render.

    Records are accepted as raw JSON; they are validated one by one and
    invalid ones are reported back instead of failing the request.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    contacts: list[Any] = Field(default_factory=list)
    projects: list[Any] = Field(default_factory=list)
    assignments: list[Any] = Field(default_factory=list)
    assignment_templates: list[Any] = Field(default_factory=list)
    sync_issues: list[Any] = Field(default_factory=list)
    week_offset: int = Field(default=0, ge=-MAX_WEEK_OFFSET, le=MAX_WEEK_OFFSET)
    today: date | None = None
    keyword: str | None = None  # None uses the configured active-employee keyword


class GridResponse(BaseModel):
    """Rendered grid, skipped records and reported sync issues."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    grid: WeekGrid
    rejected: list[str] = []
    sync_issues: list[SyncIssue] = []
