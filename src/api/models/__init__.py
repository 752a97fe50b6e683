"""API Pydantic models."""

from .responses import ErrorCodes, ErrorResponse, GridRequest, GridResponse, HealthResponse

__all__ = ["HealthResponse", "ErrorResponse", "ErrorCodes", "GridRequest", "GridResponse"]
