"""
Pydantic models for API responses.
Auto-generates OpenAPI documentation.
"""

from pydantic import BaseModel

from models import FirearmRecord

__all__ = ["FirearmRecord", "ErrorResponse", "MessageResponse", "HealthResponse"]


class ErrorResponse(BaseModel):
    """Validation or storage failure."""
    error: str


class MessageResponse(BaseModel):
    """Empty-result notice."""
    message: str


class HealthResponse(BaseModel):
    """Service health and catalog size."""
    service: str
    version: str
    status: str
    database_path: str
    record_count: int
