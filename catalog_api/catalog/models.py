"""
==============================================================================
Product Models Module
==============================================================================

Pydantic model for product catalog items.

==============================================================================
"""

from __future__ import annotations

import math
from typing import Any, Dict, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr, field_validator
from pydantic import ValidationError as PydanticValidationError

from catalog_api.catalog.exceptions import ProductValidationError
from catalog_api.utils.validators import ProductIdValidator


_id_validator = ProductIdValidator()


class Product(BaseModel):
    """
    Product model for catalog items.

    Immutable once built. Fields not declared here are kept as-is so that
    the plain record mirrors the source record.

    Attributes:
        id: Product identifier (UUID text form, lowercase)
        title: Product display name
        description: Free-text description
        price: Unit price, never negative
        stock: Units available, never negative
    """

    model_config = ConfigDict(
        extra="allow",
        frozen=True,
    )

    id: StrictStr = Field(..., description="Product identifier (UUID)")
    title: StrictStr = Field(..., min_length=1, description="Product title")
    description: StrictStr = Field(..., description="Product description")
    price: Union[StrictInt, StrictFloat] = Field(..., description="Unit price")
    stock: StrictInt = Field(..., ge=0, description="Units in stock")

    @field_validator("id")
    @classmethod
    def validate_id(cls, value: str) -> str:
        """Reject malformed identifiers and normalize to lowercase."""
        is_valid, normalized, error = _id_validator.validate(value)
        if not is_valid:
            raise ValueError(error)
        return normalized

    @field_validator("price")
    @classmethod
    def validate_price(cls, value: Union[int, float]) -> Union[int, float]:
        """Price must be a finite, non-negative number."""
        if isinstance(value, float) and not math.isfinite(value):
            raise ValueError("Price must be a finite number")
        if value < 0:
            raise ValueError("Price cannot be negative")
        return value

    @classmethod
    def from_record(cls, record: Any) -> "Product":
        """
        Build a Product from a raw source record.

        Args:
            record: Mapping parsed from the backing source

        Returns:
            Validated Product

        Raises:
            ProductValidationError: If the record is not a mapping or any
                field is missing or malformed
        """
        if not isinstance(record, Mapping):
            raise ProductValidationError(
                f"Expected an object, got {type(record).__name__}"
            )

        try:
            return cls.model_validate(dict(record))
        except PydanticValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(part) for part in err['loc']) or 'record'}: {err['msg']}"
                for err in e.errors()
            )
            raise ProductValidationError(problems) from e

    @staticmethod
    def is_valid_id(candidate: Any) -> bool:
        """Check whether ``candidate`` has the canonical identifier format."""
        return _id_validator.is_valid(candidate)

    def to_plain_record(self) -> Dict[str, Any]:
        """
        Project the product into a JSON-safe dictionary.

        This is the only representation that leaves the catalog. It holds
        exactly the fields of the source record and a fresh copy of every
        value, so callers may modify it freely.
        """
        return self.model_dump(mode="json")
