# tests/unit/libs/price-resolution-engine/test_validation.py
from datetime import datetime

import pytest

from price_resolution_engine import (
    InvalidPriceQueryError,
    PriceQuery,
    is_valid_price_query,
    validate_price_query,
)

INSTANT = datetime(2020, 6, 14, 16, 0, 0)


def test_validate_price_query_happy_path():
    validate_price_query(PriceQuery(instant=INSTANT, product_id=35455, brand_id=1))


def test_validate_price_query_rejects_missing_query():
    with pytest.raises(InvalidPriceQueryError) as exc_info:
        validate_price_query(None)
    assert exc_info.value.field == "query"


def test_validate_price_query_rejects_missing_instant():
    with pytest.raises(InvalidPriceQueryError) as exc_info:
        validate_price_query(PriceQuery(instant=None, product_id=35455, brand_id=1))

    assert exc_info.value.field == "applicationDate"
    assert exc_info.value.reason == "Application date is required"


def test_validate_price_query_rejects_non_datetime_instant():
    with pytest.raises(InvalidPriceQueryError) as exc_info:
        validate_price_query(PriceQuery(instant="2020-06-14", product_id=35455, brand_id=1))
    assert exc_info.value.field == "applicationDate"


@pytest.mark.parametrize(
    "product_id, brand_id, field, value, reason",
    [
        (0, 1, "productId", 0, "Product ID must be positive"),
        (-5, 1, "productId", -5, "Product ID must be positive"),
        (None, 1, "productId", None, "Product ID is required"),
        (35455, 0, "brandId", 0, "Brand ID must be positive"),
        (35455, None, "brandId", None, "Brand ID is required"),
    ],
)
def test_validate_price_query_rejects_bad_identifiers(product_id, brand_id, field, value, reason):
    with pytest.raises(InvalidPriceQueryError) as exc_info:
        validate_price_query(PriceQuery(instant=INSTANT, product_id=product_id, brand_id=brand_id))

    error = exc_info.value
    assert error.field == field
    assert error.value == value
    assert error.reason == reason
    assert error.message == f"Invalid price query - {field}: {value} ({reason})"


def test_validate_price_query_rejects_bool_identifier():
    with pytest.raises(InvalidPriceQueryError) as exc_info:
        validate_price_query(PriceQuery(instant=INSTANT, product_id=True, brand_id=1))
    assert exc_info.value.field == "productId"


def test_invalid_price_query_error_is_a_value_error():
    with pytest.raises(ValueError):
        validate_price_query(PriceQuery(instant=INSTANT, product_id=0, brand_id=1))


def test_is_valid_price_query():
    assert is_valid_price_query(PriceQuery(instant=INSTANT, product_id=1, brand_id=1)) is True
    assert is_valid_price_query(PriceQuery(instant=INSTANT, product_id=1, brand_id=0)) is False
    assert is_valid_price_query(None) is False
