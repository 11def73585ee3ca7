"""Pure price resolution: value types, query validation and the selection rule."""

from .exceptions import (
    InvalidPriceQueryError,
    PriceServiceError,
    PriceSourceUnavailableError,
)
from .models import PriceQuery, PriceRecord, PriceResult
from .resolver import NOT_FOUND, Found, NotFound, PriceResolver, Resolution, resolve
from .validation import is_valid_price_query, validate_price_query

__all__ = [
    "InvalidPriceQueryError",
    "PriceServiceError",
    "PriceSourceUnavailableError",
    "PriceQuery",
    "PriceRecord",
    "PriceResult",
    "NOT_FOUND",
    "Found",
    "NotFound",
    "PriceResolver",
    "Resolution",
    "resolve",
    "is_valid_price_query",
    "validate_price_query",
]
