"""
==============================================================================
Core Package
==============================================================================

Core utilities and infrastructure for the application.

This package provides:
- Custom exception handling with consistent error responses
- FastAPI dependencies for handing the catalog to request handlers
- Exception factory functions for common error scenarios

Modules:
--------
- exceptions: AppException class and error factory functions
- dependencies: FastAPI dependency injection functions

Usage:
------
    from catalog_api.core import AppException, get_product_catalog

    # Or use exception factory functions via module
    from catalog_api.core import exceptions
    raise exceptions.product_not_found(product_id)

==============================================================================
"""

from .exceptions import (
    AppException,
    register_exception_handlers,
)
from .dependencies import get_app_settings, get_product_catalog

__all__ = [
    "AppException",
    "register_exception_handlers",
    "get_app_settings",
    "get_product_catalog",
]
