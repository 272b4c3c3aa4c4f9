"""
==============================================================================
Pytest Configuration and Fixtures
==============================================================================

Provides product records, an in-memory catalog and a test client.

==============================================================================
"""

import json
from pathlib import Path
from typing import Any, Dict, Generator, List

import pytest
from fastapi.testclient import TestClient

from catalog_api.catalog import InMemorySource, ProductCatalog
from catalog_api.config import Settings
from catalog_api.main import create_app


U1 = "6f1c7a52-9a4e-4c1b-8f0e-2d4b5a6c7d8e"
U2 = "0b8e2f44-3c1d-4a7e-9f62-5e8d1c3b2a10"
U3 = "c4a1d9e7-58b2-4f03-a6de-91f07b3c5e22"
ABSENT_ID = "11111111-1111-1111-1111-111111111111"


# ============================================================================
# RECORD FIXTURES
# ============================================================================

@pytest.fixture
def records() -> List[Dict[str, Any]]:
    """Three valid product records, in source order."""
    return [
        {
            "id": U1,
            "title": "Mate de calabaza",
            "description": "Mate tradicional",
            "price": 8500,
            "stock": 25,
            "code": "MAT-001",
            "category": "mates",
        },
        {
            "id": U2,
            "title": "Bombilla de acero",
            "description": "Bombilla con filtro",
            "price": 3200.5,
            "stock": 60,
            "code": "BOM-002",
        },
        {
            "id": U3,
            "title": "Yerba mate 1kg",
            "description": "Yerba con palo",
            "price": 4100,
            "stock": 0,
            "thumbnails": ["yerba-front.jpg", "yerba-back.jpg"],
        },
    ]


@pytest.fixture
def products_file(tmp_path: Path, records: List[Dict[str, Any]]) -> Path:
    """Records written to a JSON file."""
    path = tmp_path / "products.json"
    path.write_text(json.dumps(records), encoding="utf-8")
    return path


# ============================================================================
# CATALOG FIXTURES
# ============================================================================

@pytest.fixture
def catalog(records: List[Dict[str, Any]]) -> ProductCatalog:
    """Loaded catalog over the in-memory records."""
    catalog = ProductCatalog(InMemorySource(records))
    catalog.load()
    return catalog


@pytest.fixture
def empty_catalog() -> ProductCatalog:
    """Loaded catalog with no products."""
    catalog = ProductCatalog(InMemorySource([]))
    catalog.load()
    return catalog


# ============================================================================
# CLIENT FIXTURES
# ============================================================================

@pytest.fixture
def settings() -> Settings:
    """Settings independent of the environment and .env files."""
    return Settings(_env_file=None, default_limit=10, debug=False)


@pytest.fixture
def client(settings: Settings, catalog: ProductCatalog) -> Generator[TestClient, None, None]:
    """Test client over an application serving the in-memory catalog."""
    app = create_app(settings=settings, catalog=catalog)
    with TestClient(app) as test_client:
        yield test_client
