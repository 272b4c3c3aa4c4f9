"""
==============================================================================
Schemas Package - Pydantic Models
==============================================================================

Response schemas used for API documentation and health reports.

==============================================================================
"""

from .common import CatalogHealth, ErrorDetail, ErrorResponse, HealthResponse

__all__ = [
    "CatalogHealth",
    "ErrorDetail",
    "ErrorResponse",
    "HealthResponse",
]
