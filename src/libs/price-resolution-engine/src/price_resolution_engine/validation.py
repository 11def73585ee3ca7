# src/libs/price-resolution-engine/src/price_resolution_engine/validation.py
from datetime import datetime
from typing import Any, Optional

from .exceptions import InvalidPriceQueryError
from .models import PriceQuery

PRICE_QUERY_REQUIRED = "PriceQuery cannot be null"
APPLICATION_DATE_REQUIRED = "Application date is required"
PRODUCT_ID_REQUIRED = "Product ID is required"
PRODUCT_ID_POSITIVE = "Product ID must be positive"
BRAND_ID_REQUIRED = "Brand ID is required"
BRAND_ID_POSITIVE = "Brand ID must be positive"


def _validate_positive_id(field: str, value: Any, required_reason: str, positive_reason: str) -> None:
    if value is None:
        raise InvalidPriceQueryError(field, value, required_reason)
    # bool is an int subclass; True must not pass as id 1.
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidPriceQueryError(field, value, f"{field} must be an integer")
    if value <= 0:
        raise InvalidPriceQueryError(field, value, positive_reason)


def validate_price_query(query: Optional[PriceQuery]) -> None:
    """
    Rejects malformed queries before any candidate lookup happens.

    Raises:
        InvalidPriceQueryError: naming the first offending field and its value.
    """
    if query is None:
        raise InvalidPriceQueryError("query", None, PRICE_QUERY_REQUIRED)

    if query.instant is None:
        raise InvalidPriceQueryError("applicationDate", None, APPLICATION_DATE_REQUIRED)
    if not isinstance(query.instant, datetime):
        raise InvalidPriceQueryError(
            "applicationDate", query.instant, "Application date must be a timestamp"
        )

    _validate_positive_id("productId", query.product_id, PRODUCT_ID_REQUIRED, PRODUCT_ID_POSITIVE)
    _validate_positive_id("brandId", query.brand_id, BRAND_ID_REQUIRED, BRAND_ID_POSITIVE)


def is_valid_price_query(query: Optional[PriceQuery]) -> bool:
    try:
        validate_price_query(query)
    except InvalidPriceQueryError:
        return False
    return True
