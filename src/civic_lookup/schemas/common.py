"""Common Pydantic v2 schemas shared across the API."""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standard error response body."""

    detail: str = Field(description="Human-readable error message")
    code: str | None = Field(default=None, description="Machine-readable error code")
    errors: list[dict] | None = Field(default=None, description="Detailed validation errors")


class HealthResponse(BaseModel):
    status: str = "ok"


class InfoResponse(BaseModel):
    """Service identity and environment."""

    name: str
    version: str
    environment: str
    civic_api_configured: bool
