"""
==============================================================================
Utilities Package
==============================================================================

Utility classes and functions for the application.

Modules:
--------
- validators: Product ID and limit validation

==============================================================================
"""

from .validators import LimitValidator, ProductIdValidator

__all__ = [
    "LimitValidator",
    "ProductIdValidator",
]
