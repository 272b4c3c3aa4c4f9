"""
==============================================================================
Product Sources Module
==============================================================================

Backing sources the catalog reads its records from.

The catalog is constructed with a source instead of a path, so tests can
hand it records directly and production can point it at a JSON file.

JSON Structure:
--------------
[
  {
    "id": "6f1c7a52-9a4e-4c1b-8f0e-2d4b5a6c7d8e",
    "title": "Product Name",
    "description": "...",
    "price": 12.5,
    "stock": 40,
    ...any other fields...
  },
  ...
]

==============================================================================
"""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Iterable, List

from catalog_api.catalog.exceptions import CatalogLoadError


# Module logger
logger = logging.getLogger(__name__)


class ProductSource(ABC):
    """Where the catalog's raw records come from."""

    @abstractmethod
    def read(self) -> List[Any]:
        """
        Return the raw records in source order.

        Raises:
            CatalogLoadError: If the source is missing or corrupt
        """

    @property
    def description(self) -> str:
        """Human-readable name used in log messages."""
        return type(self).__name__


class JsonFileSource(ProductSource):
    """Records stored as a top-level JSON array in a file."""

    def __init__(self, file_path: Path) -> None:
        self._file_path = Path(file_path)

    @property
    def file_path(self) -> Path:
        return self._file_path

    @property
    def description(self) -> str:
        return str(self._file_path)

    def read(self) -> List[Any]:
        try:
            with self._file_path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError as e:
            logger.error(f"Products file not found: {self._file_path}")
            raise CatalogLoadError(f"Products file not found: {self._file_path}") from e
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in {self._file_path}: {e}")
            raise CatalogLoadError(f"Invalid JSON in {self._file_path}: {e}") from e
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Cannot read products file {self._file_path}: {e}")
            raise CatalogLoadError(f"Cannot read products file {self._file_path}: {e}") from e

        if not isinstance(data, list):
            raise CatalogLoadError(
                f"Expected a JSON array in {self._file_path}, got {type(data).__name__}"
            )

        return data


class InMemorySource(ProductSource):
    """Records held in memory, mainly for tests and fixtures."""

    def __init__(self, records: Iterable[Any]) -> None:
        self._records = list(records)

    def read(self) -> List[Any]:
        return list(self._records)
