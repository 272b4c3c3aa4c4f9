"""
==============================================================================
Common Schemas Module
==============================================================================

Shared response schemas used across all API endpoints.

==============================================================================
"""

from typing import Any, Dict, Optional
from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Body of the ``error`` member of an error response."""
    code: str
    message: str
    timestamp: str
    details: Optional[Dict[str, Any]] = Field(default=None)


class ErrorResponse(BaseModel):
    """Standard error response wrapper."""
    success: bool = Field(default=False)
    error: ErrorDetail


class CatalogHealth(BaseModel):
    """Catalog section of the health report."""
    status: str
    products: int = Field(ge=0)
    skipped_records: int = Field(default=0, ge=0)


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    catalog: CatalogHealth
