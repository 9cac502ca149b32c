import os
import sys

import pytest

# Ensure backend package is importable when running `pytest` from repo root
BASE_DIR = os.path.dirname(__file__)
BACKEND_DIR = os.path.join(BASE_DIR, 'backend')
if BACKEND_DIR not in sys.path:
    sys.path.insert(0, BACKEND_DIR)


@pytest.fixture(autouse=True)
def isolated_data_dir(settings, tmp_path):
    """Point the JSON document settings at a per-test directory."""
    settings.STOREFRONT_DATA_DIR = tmp_path
    settings.CATALOG_PATH = tmp_path / 'products.json'
    settings.CART_PATH = tmp_path / 'cart.json'
    return tmp_path
