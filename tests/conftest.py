# tests/conftest.py
import os
import sys
from datetime import datetime
from decimal import Decimal
from typing import Callable

import pytest

project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
for path in (
    project_root,
    os.path.join(project_root, 'src', 'libs', 'price-common'),
    os.path.join(project_root, 'src', 'libs', 'price-resolution-engine', 'src'),
):
    if path not in sys.path:
        sys.path.insert(0, path)

from price_resolution_engine import PriceRecord  # noqa: E402


@pytest.fixture
def make_price_record() -> Callable[..., PriceRecord]:
    """
    Factory for PriceRecord test data. Defaults describe price list 1 of
    product 35455 / brand 1, valid for the second half of 2020.
    """
    def _make(**overrides) -> PriceRecord:
        values = {
            "product_id": 35455,
            "brand_id": 1,
            "valid_from": datetime(2020, 6, 14, 0, 0, 0),
            "valid_to": datetime(2020, 12, 31, 23, 59, 59),
            "price_list_id": 1,
            "priority": 0,
            "amount": Decimal("35.50"),
            "currency": "EUR",
        }
        values.update(overrides)
        return PriceRecord(**values)

    return _make


@pytest.fixture
def reference_prices(make_price_record) -> list:
    """The four seeded price lists for product 35455 / brand 1."""
    return [
        make_price_record(),
        make_price_record(
            valid_from=datetime(2020, 6, 14, 15, 0, 0),
            valid_to=datetime(2020, 6, 14, 18, 30, 0),
            price_list_id=2,
            priority=1,
            amount=Decimal("25.45"),
        ),
        make_price_record(
            valid_from=datetime(2020, 6, 15, 0, 0, 0),
            valid_to=datetime(2020, 6, 15, 11, 0, 0),
            price_list_id=3,
            priority=1,
            amount=Decimal("30.50"),
        ),
        make_price_record(
            valid_from=datetime(2020, 6, 15, 16, 0, 0),
            valid_to=datetime(2020, 12, 31, 23, 59, 59),
            price_list_id=4,
            priority=1,
            amount=Decimal("38.95"),
        ),
    ]
