"""
==============================================================================
Validation Utilities Module
==============================================================================

Validation classes for identifiers and query parameters.

This module implements:
- ProductIdValidator: Validates product identifiers (UUID text form)
- LimitValidator: Validates the list ``limit`` query parameter

Validation Rules for Product IDs:
--------------------------------
- Exactly 36 characters
- Five groups of hexadecimal digits: 8-4-4-4-12
- Groups separated by hyphens
- Case-insensitive, normalized to lowercase

==============================================================================
"""

from __future__ import annotations

import re
import sys
from typing import Any, Optional, Tuple


class ProductIdValidator:
    """
    Validator for product identifiers.

    Accepts the canonical textual UUID layout without checking the
    version or variant nibbles, so nil-like ids such as
    ``11111111-1111-1111-1111-111111111111`` are well-formed.

    Example:
        >>> validator = ProductIdValidator()
        >>> validator.is_valid("3F2504E0-4F89-11D3-9A0C-0305E82C3301")
        True
        >>> validator.normalize("3F2504E0-4F89-11D3-9A0C-0305E82C3301")
        '3f2504e0-4f89-11d3-9a0c-0305e82c3301'
    """

    # Regex pattern for valid identifiers
    PATTERN = re.compile(
        r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$",
        re.IGNORECASE,
    )

    LENGTH = 36

    def validate(self, candidate: Any) -> Tuple[bool, Optional[str], Optional[str]]:
        """
        Validate and normalize a product identifier.

        Args:
            candidate: Raw identifier value

        Returns:
            Tuple of (is_valid, normalized_id, error_message)
            - If valid: (True, "lowercase-id", None)
            - If invalid: (False, None, "Error description")
        """
        if not isinstance(candidate, str):
            return False, None, "Product ID must be a string"

        if len(candidate) != self.LENGTH:
            return False, None, f"Product ID must be {self.LENGTH} characters"

        # fullmatch so a trailing newline is not accepted by "$"
        if not self.PATTERN.fullmatch(candidate):
            return False, None, "Product ID must be a UUID (8-4-4-4-12 hex groups)"

        return True, candidate.lower(), None

    def is_valid(self, candidate: Any) -> bool:
        """Quick validation check."""
        is_valid, _, _ = self.validate(candidate)
        return is_valid

    def normalize(self, candidate: str) -> str:
        """Return the lowercase form of a valid identifier."""
        is_valid, normalized, error = self.validate(candidate)
        if not is_valid:
            raise ValueError(error)
        return normalized


class LimitValidator:
    """
    Validator for the ``limit`` query parameter of list endpoints.

    The parameter arrives as text. A missing value falls back to the
    default; anything that is not a plain non-negative ASCII integer is
    rejected. Values too long to be a real count are clamped to
    MAX_LIMIT, which is above any catalog size.
    """

    PATTERN = re.compile(r"([+-]?)([0-9]+)")

    MAX_LIMIT = sys.maxsize
    MAX_DIGITS = len(str(MAX_LIMIT)) - 1

    def __init__(self, default: int = 10) -> None:
        self.default = default

    def validate(self, raw: Optional[str]) -> Tuple[bool, Optional[int], Optional[str]]:
        """
        Validate a raw limit value.

        Args:
            raw: Query string value, or None when absent

        Returns:
            Tuple of (is_valid, limit, error_message)
        """
        if raw is None:
            return True, self.default, None

        raw = raw.strip()

        if not raw:
            return True, self.default, None

        match = self.PATTERN.fullmatch(raw)
        if not match:
            return False, None, "Limit must be an integer"

        sign, digits = match.groups()
        digits = digits.lstrip("0") or "0"

        if sign == "-" and digits != "0":
            return False, None, "Limit cannot be negative"

        # int() refuses very long digit strings
        if len(digits) > self.MAX_DIGITS:
            return True, self.MAX_LIMIT, None

        return True, int(digits), None
