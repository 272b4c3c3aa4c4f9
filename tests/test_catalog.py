"""
==============================================================================
Product Catalog Tests
==============================================================================

Tests for the catalog load lifecycle and its queries.

==============================================================================
"""

import json
import logging
from pathlib import Path

import pytest

from catalog_api.catalog import (
    CatalogAlreadyLoadedError,
    CatalogLoadError,
    CatalogNotLoadedError,
    DuplicateProductError,
    InMemorySource,
    InvalidProductIdError,
    JsonFileSource,
    Product,
    ProductCatalog,
    ProductValidationError,
)

from conftest import ABSENT_ID, U1, U2, U3


class TestCatalogLoading:
    """Tests for load(), reload() and the invalid record policy."""

    def test_load_from_json_file(self, products_file: Path):
        catalog = ProductCatalog(JsonFileSource(products_file))
        catalog.load()
        assert catalog.is_loaded
        assert len(catalog) == 3
        assert [p.id for p in catalog.products] == [U1, U2, U3]

    def test_bundled_data_file_loads(self):
        path = Path(__file__).resolve().parents[1] / "data" / "products.json"
        catalog = ProductCatalog(JsonFileSource(path), strict=True)
        catalog.load()
        assert len(catalog) > 0

    def test_missing_file_is_load_error(self, tmp_path: Path):
        catalog = ProductCatalog(JsonFileSource(tmp_path / "missing.json"))
        with pytest.raises(CatalogLoadError):
            catalog.load()
        assert not catalog.is_loaded

    def test_corrupt_json_is_load_error(self, tmp_path: Path):
        path = tmp_path / "products.json"
        path.write_text("[{\"id\": ", encoding="utf-8")
        with pytest.raises(CatalogLoadError):
            ProductCatalog(JsonFileSource(path)).load()

    def test_non_array_json_is_load_error(self, tmp_path: Path):
        path = tmp_path / "products.json"
        path.write_text(json.dumps({"products": []}), encoding="utf-8")
        with pytest.raises(CatalogLoadError) as exc_info:
            ProductCatalog(JsonFileSource(path)).load()
        assert "JSON array" in str(exc_info.value)

    def test_empty_source(self, empty_catalog: ProductCatalog):
        assert empty_catalog.is_loaded
        assert len(empty_catalog) == 0
        assert empty_catalog.list_all() == []
        assert empty_catalog.get_by_id(ABSENT_ID) is None

    def test_invalid_records_skipped_and_logged(self, records, caplog):
        bad = [{"id": "not-a-uuid", "title": "x", "description": "", "price": 1, "stock": 1},
               "not a record",
               dict(records[0], id="22222222-2222-2222-2222-222222222222", price=-5)]
        source = InMemorySource([records[0], bad[0], records[1], bad[1], bad[2], records[2]])
        catalog = ProductCatalog(source)

        with caplog.at_level(logging.WARNING, logger="catalog_api.catalog.catalog"):
            catalog.load()

        assert [p.id for p in catalog.products] == [U1, U2, U3]
        assert catalog.get_stats()["skipped_records"] == 3
        skipped = [r for r in caplog.records if "Skipping invalid product record" in r.getMessage()]
        assert len(skipped) == 3
        assert "Record #1" in skipped[0].getMessage()

    def test_strict_mode_aborts_on_invalid_record(self, records):
        source = InMemorySource([records[0], dict(records[1], stock=-1), records[2]])
        catalog = ProductCatalog(source, strict=True)

        with pytest.raises(ProductValidationError) as exc_info:
            catalog.load()

        assert exc_info.value.index == 1
        assert not catalog.is_loaded
        assert len(catalog) == 0

    def test_duplicate_id_keeps_first(self, records):
        duplicate = dict(records[0], title="Impostor")
        catalog = ProductCatalog(InMemorySource([records[0], duplicate, records[1]]))
        catalog.load()

        assert len(catalog) == 2
        assert catalog.get_by_id(U1).title == "Mate de calabaza"

    def test_duplicate_id_differing_only_in_case(self, records):
        duplicate = dict(records[0], id=U1.upper())
        catalog = ProductCatalog(InMemorySource([records[0], duplicate]))
        catalog.load()
        assert len(catalog) == 1

    def test_duplicate_id_strict(self, records):
        catalog = ProductCatalog(InMemorySource([records[0], records[0]]), strict=True)
        with pytest.raises(DuplicateProductError) as exc_info:
            catalog.load()
        assert exc_info.value.product_id == U1
        assert exc_info.value.index == 1

    def test_second_load_fails(self, catalog: ProductCatalog):
        with pytest.raises(CatalogAlreadyLoadedError):
            catalog.load()
        assert len(catalog) == 3

    def test_reload_replaces_contents(self, records):
        source = InMemorySource(records)
        catalog = ProductCatalog(source)
        catalog.load()
        catalog.reload()
        catalog.reload()
        assert len(catalog) == 3
        assert [p.id for p in catalog.products] == [U1, U2, U3]

    def test_reload_picks_up_file_changes(self, products_file: Path, records):
        catalog = ProductCatalog(JsonFileSource(products_file))
        catalog.load()
        products_file.write_text(json.dumps(records[:1]), encoding="utf-8")
        catalog.reload()
        assert [p.id for p in catalog.products] == [U1]

    def test_failed_reload_keeps_previous_contents(self, products_file: Path):
        catalog = ProductCatalog(JsonFileSource(products_file))
        catalog.load()
        products_file.unlink()
        with pytest.raises(CatalogLoadError):
            catalog.reload()
        assert len(catalog) == 3


class TestCatalogQueries:
    """Tests for list_all() and get_by_id()."""

    def test_list_all_in_load_order(self, catalog: ProductCatalog, records):
        assert catalog.list_all() == records

    def test_list_all_with_limit(self, catalog: ProductCatalog, records):
        assert catalog.list_all(2) == records[:2]

    @pytest.mark.parametrize("limit", [3, 4, 1000])
    def test_limit_at_or_above_size(self, catalog: ProductCatalog, records, limit):
        assert catalog.list_all(limit) == records

    def test_limit_zero(self, catalog: ProductCatalog):
        assert catalog.list_all(0) == []

    def test_negative_limit(self, catalog: ProductCatalog):
        with pytest.raises(ValueError):
            catalog.list_all(-1)

    def test_list_all_is_repeatable(self, catalog: ProductCatalog):
        assert catalog.list_all() == catalog.list_all()

    def test_list_all_returns_copies(self, catalog: ProductCatalog):
        first = catalog.list_all()
        first[0]["title"] = "changed"
        first.clear()
        assert catalog.list_all()[0]["title"] == "Mate de calabaza"

    def test_get_by_id_matches_plain_record(self, catalog: ProductCatalog):
        for product in catalog.products:
            found = catalog.get_by_id(product.id)
            assert found is product
            assert found.to_plain_record() == product.to_plain_record()

    def test_get_by_id_case_insensitive(self, catalog: ProductCatalog):
        assert catalog.get_by_id(U3.upper()).id == U3

    def test_get_by_id_absent(self, catalog: ProductCatalog):
        assert catalog.get_by_id(ABSENT_ID) is None

    @pytest.mark.parametrize("candidate", ["not-a-uuid", "", U1 + "ff", U1.replace("-", "_"), None])
    def test_get_by_id_malformed(self, catalog: ProductCatalog, candidate):
        with pytest.raises(InvalidProductIdError) as exc_info:
            catalog.get_by_id(candidate)
        assert exc_info.value.candidate == candidate

    def test_malformed_id_never_touches_index(self, catalog: ProductCatalog):
        class ExplodingIndex(dict):
            def get(self, *args, **kwargs):
                raise AssertionError("index consulted")

        catalog._snapshot = catalog._snapshot._replace(by_id=ExplodingIndex(catalog._snapshot.by_id))
        with pytest.raises(InvalidProductIdError):
            catalog.get_by_id("not-a-uuid")

    def test_scenario_three_products(self, catalog: ProductCatalog, records):
        assert catalog.list_all(2) == [records[0], records[1]]
        assert catalog.get_by_id(U3).to_plain_record() == records[2]
        with pytest.raises(InvalidProductIdError):
            catalog.get_by_id("not-a-uuid")
        assert catalog.get_by_id(ABSENT_ID) is None


class TestCatalogLifecycle:
    """Tests for querying an unloaded catalog and diagnostics."""

    def test_queries_before_load(self, records):
        catalog = ProductCatalog(InMemorySource(records))
        with pytest.raises(CatalogNotLoadedError):
            catalog.list_all()
        with pytest.raises(CatalogNotLoadedError):
            catalog.get_by_id(U1)

    def test_malformed_id_checked_before_load_state(self, records):
        catalog = ProductCatalog(InMemorySource(records))
        with pytest.raises(InvalidProductIdError):
            catalog.get_by_id("not-a-uuid")

    def test_get_stats(self, catalog: ProductCatalog):
        assert catalog.get_stats() == {
            "loaded": True,
            "total_products": 3,
            "skipped_records": 0,
            "total_stock": 85,
        }

    def test_log_products(self, catalog: ProductCatalog, caplog):
        with caplog.at_level(logging.DEBUG, logger="catalog_api.catalog.catalog"):
            catalog.log_products()
        messages = [r.getMessage() for r in caplog.records]
        assert len(messages) == 3
        assert U1 in messages[0]

    def test_in_memory_source_is_isolated(self, records):
        source = InMemorySource(records)
        records.append({"id": ABSENT_ID})
        assert len(source.read()) == 3

    def test_products_are_product_instances(self, catalog: ProductCatalog):
        assert all(isinstance(p, Product) for p in catalog.products)
