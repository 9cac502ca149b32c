import json

import pytest

from apps.catalog.repositories import ProductRepository
from apps.common.repository import StoreReadError


@pytest.fixture
def catalog_file(tmp_path):
    path = tmp_path / "products.json"
    path.write_text(
        json.dumps(
            [
                {"id": 1, "name": "Backpack", "price": 109.95, "description": "", "image": "", "category": "bags"},
                {"id": 2, "name": "T-Shirt", "price": 22.3, "description": "", "image": "", "category": "men's clothing"},
                {"id": 3, "name": "Jacket", "price": 55.99, "description": "", "image": "", "category": "men's clothing"},
            ]
        ),
        encoding="utf-8",
    )
    return path


def test_list_returns_products_in_file_order(catalog_file):
    repo = ProductRepository(catalog_file)
    assert [p.id for p in repo.list()] == [1, 2, 3]


def test_list_by_category_is_exact_match(catalog_file):
    repo = ProductRepository(catalog_file)
    assert [p.id for p in repo.list_by_category("men's clothing")] == [2, 3]
    assert repo.list_by_category("Men's Clothing") == []


def test_get_finds_product_by_id(catalog_file):
    repo = ProductRepository(catalog_file)
    assert repo.get(2).name == "T-Shirt"
    assert repo.get(99) is None


def test_missing_catalog_is_empty(tmp_path):
    repo = ProductRepository(tmp_path / "absent.json")
    assert repo.list() == []
    assert repo.get(1) is None


def test_corrupt_catalog_fails_open_by_default(tmp_path):
    path = tmp_path / "products.json"
    path.write_text("not json", encoding="utf-8")
    assert ProductRepository(path).list() == []


def test_corrupt_catalog_raises_when_fail_closed(tmp_path):
    path = tmp_path / "products.json"
    path.write_text("not json", encoding="utf-8")
    with pytest.raises(StoreReadError):
        ProductRepository(path, fail_open=False).list()
