import pytest
from pydantic import ValidationError

from catalog.models import FIELD_ORDER, ProductModel, ProductUpdateModel


def test_product_model_strips_and_orders_fields():
    product = ProductModel(
        title=" Widget ",
        description="Small",
        price=5,
        thumbnail="w.png",
        code=" W-1",
        stock=3,
    )
    record = product.to_record(7)
    assert tuple(record) == FIELD_ORDER
    assert record["id"] == 7
    assert record["title"] == "Widget"
    assert record["code"] == "W-1"


def test_product_model_keeps_integer_prices():
    product = ProductModel(title="a", description="b", price=200, thumbnail="c", code="d", stock=1)
    assert product.price == 200
    assert isinstance(product.price, int)


def test_product_model_rejects_negative_stock():
    with pytest.raises(ValidationError):
        ProductModel(title="a", description="b", price=1, thumbnail="c", code="d", stock=-1)


def test_product_model_requires_every_field():
    with pytest.raises(ValidationError) as excinfo:
        ProductModel(title="a")
    missing = {err["loc"][0] for err in excinfo.value.errors()}
    assert missing == {"description", "price", "thumbnail", "code", "stock"}


def test_update_model_overlay_contains_only_given_fields():
    assert ProductUpdateModel(title=" New ").overlay() == {"title": "New"}
    assert ProductUpdateModel().overlay() == {}


def test_update_model_rejects_null():
    with pytest.raises(ValidationError):
        ProductUpdateModel(description=None)
