import json

import pytest

from catalog import ProductCatalog


@pytest.fixture
def product_file(tmp_path):
    return tmp_path / "products.json"


@pytest.fixture
def catalog(product_file):
    return ProductCatalog(product_file, backups=2)


@pytest.fixture
def seeded(catalog):
    catalog.create("Widget", "A small widget", 5, "widget.png", "W-1", 10).unwrap()
    catalog.create("Gadget", "A shiny gadget", 7.5, "gadget.png", "G-1", 3).unwrap()
    return catalog


@pytest.fixture
def read_file(product_file):
    def _read():
        return json.loads(product_file.read_text(encoding="utf-8"))

    return _read
