"""
==============================================================================
Product Catalog Module
==============================================================================

In-memory, read-only product catalog.

Features:
---------
- One-time load from a swappable backing source
- Per-record validation with skip-and-log or strict (abort) policy
- Identifier index for constant-time lookup
- Load-order listing with an optional limit

Lifecycle:
---------
    catalog = ProductCatalog(JsonFileSource(Path("data/products.json")))
    catalog.load()          # once, before serving requests
    catalog.list_all(10)    # plain records, load order
    catalog.get_by_id(pid)  # Product or None

After load() the product tuple and the index are never modified in place;
reload() builds new ones and swaps them in with a single assignment, so
readers need no locking.

==============================================================================
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, NamedTuple, Optional, Tuple

from .exceptions import (
    CatalogAlreadyLoadedError,
    CatalogNotLoadedError,
    DuplicateProductError,
    InvalidProductIdError,
    ProductValidationError,
)
from .models import Product
from .sources import ProductSource


# Module logger
logger = logging.getLogger(__name__)


class _Snapshot(NamedTuple):
    """Products in load order plus their id index, replaced as one unit."""

    products: Tuple[Product, ...]
    by_id: Dict[str, Product]


class ProductCatalog:
    """
    Product catalog manager.

    Owns every Product loaded from its source, keeps them in load order and
    indexes them by identifier.

    Attributes:
        source: Backing source records are read from
        strict: Abort the load on the first invalid record instead of
            skipping it

    Example:
        >>> catalog = ProductCatalog(InMemorySource(records))
        >>> catalog.load()
        >>> product = catalog.get_by_id("6f1c7a52-9a4e-4c1b-8f0e-2d4b5a6c7d8e")
        >>> first_two = catalog.list_all(2)
    """

    def __init__(self, source: ProductSource, strict: bool = False) -> None:
        """
        Create an empty catalog.

        Args:
            source: Backing source to load from
            strict: Invalid record policy (False = skip and log)
        """
        self._source = source
        self._strict = strict
        self._snapshot = _Snapshot((), {})
        self._loaded = False
        self._skipped = 0

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def source(self) -> ProductSource:
        return self._source

    @property
    def strict(self) -> bool:
        return self._strict

    @property
    def is_loaded(self) -> bool:
        """Whether load() has completed."""
        return self._loaded

    @property
    def products(self) -> Tuple[Product, ...]:
        """All products in load order."""
        return self._snapshot.products

    def __len__(self) -> int:
        return len(self._snapshot.products)

    # =========================================================================
    # LOADING
    # =========================================================================

    def load(self) -> None:
        """
        Load products from the backing source.

        Raises:
            CatalogAlreadyLoadedError: If the catalog was already loaded
            CatalogLoadError: If the source is missing or corrupt
            ProductValidationError: In strict mode, on the first bad record
        """
        if self._loaded:
            raise CatalogAlreadyLoadedError(
                f"Catalog already loaded from {self._source.description}; use reload()"
            )
        self._load()

    def reload(self) -> None:
        """Discard current contents and load again from the source."""
        logger.info("Reloading product catalog...")
        self._load()

    def _load(self) -> None:
        records = self._source.read()

        products, by_id, skipped = self._build(records)

        # Single reference swap; readers see the old or the new snapshot
        self._snapshot = _Snapshot(products, by_id)
        self._skipped = skipped
        self._loaded = True

        if skipped:
            logger.warning(
                f"⚠️ Skipped {skipped} invalid record(s) from {self._source.description}"
            )
        logger.info(
            f"✅ Loaded {len(products)} products from {self._source.description}"
        )

    def _build(self, records: List[Any]) -> Tuple[Tuple[Product, ...], Dict[str, Product], int]:
        """Validate records and build the ordered tuple and the index."""
        products: List[Product] = []
        by_id: Dict[str, Product] = {}
        skipped = 0

        for index, record in enumerate(records):
            try:
                product = Product.from_record(record)
                if product.id in by_id:
                    raise DuplicateProductError(product.id)
            except ProductValidationError as e:
                error = self._with_index(e, index) if e.index is None else e
                if self._strict:
                    logger.error(f"❌ Invalid product record, aborting load: {error}")
                    if error is e:
                        raise
                    raise error from e.__cause__
                logger.warning(f"Skipping invalid product record: {error}")
                skipped += 1
                continue

            products.append(product)
            by_id[product.id] = product

        return tuple(products), by_id, skipped

    @staticmethod
    def _with_index(error: ProductValidationError, index: int) -> ProductValidationError:
        if isinstance(error, DuplicateProductError):
            return DuplicateProductError(error.product_id, index)
        return ProductValidationError(str(error), index)

    # =========================================================================
    # QUERIES
    # =========================================================================

    def list_all(self, limit: Optional[int] = None) -> List[Dict[str, Any]]:
        """
        Get products as plain records in load order.

        Args:
            limit: Maximum number of records (None = all)

        Returns:
            List of plain records

        Raises:
            CatalogNotLoadedError: If load() has not completed
            ValueError: If limit is negative
        """
        self._ensure_loaded()

        if limit is not None and limit < 0:
            raise ValueError(f"Limit cannot be negative: {limit}")

        products = self._snapshot.products
        if limit is not None:
            products = products[:limit]
        return [product.to_plain_record() for product in products]

    def get_by_id(self, product_id: str) -> Optional[Product]:
        """
        Find product by identifier.

        Args:
            product_id: Identifier in UUID text form

        Returns:
            Product or None

        Raises:
            InvalidProductIdError: If product_id is malformed
            CatalogNotLoadedError: If load() has not completed
        """
        if not Product.is_valid_id(product_id):
            raise InvalidProductIdError(product_id)

        self._ensure_loaded()
        return self._snapshot.by_id.get(product_id.lower())

    def _ensure_loaded(self) -> None:
        if not self._loaded:
            raise CatalogNotLoadedError("Product catalog not loaded")

    # =========================================================================
    # UTILITY METHODS
    # =========================================================================

    def log_products(self, level: int = logging.DEBUG) -> None:
        """Log every product, one line each."""
        if not logger.isEnabledFor(level):
            return
        for product in self._snapshot.products:
            logger.log(level, f"  {product.id} {product.title!r} price={product.price} stock={product.stock}")

    def get_stats(self) -> Dict[str, Any]:
        """Get catalog statistics."""
        return {
            "loaded": self._loaded,
            "total_products": len(self._snapshot.products),
            "skipped_records": self._skipped,
            "total_stock": sum(product.stock for product in self._snapshot.products),
        }
