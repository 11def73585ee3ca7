# src/libs/price-resolution-engine/src/price_resolution_engine/exceptions.py
from typing import Any

INVALID_PRICE_QUERY_FORMAT = "Invalid price query - {field}: {value} ({reason})"


class PriceServiceError(Exception):
    """Base exception for all price service errors."""
    def __init__(self, message="An unspecified error occurred in the price service."):
        self.message = message
        super().__init__(self.message)


class InvalidPriceQueryError(PriceServiceError, ValueError):
    """
    Raised when a price query is malformed: a missing or unparsable
    application date, or a missing or non-positive product/brand id.
    """
    def __init__(self, field: str, value: Any, reason: str):
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(
            INVALID_PRICE_QUERY_FORMAT.format(field=field, value=value, reason=reason)
        )


class PriceSourceUnavailableError(PriceServiceError):
    """Raised when the candidate price source cannot be read."""
    def __init__(self, message="The price source is currently unavailable."):
        super().__init__(message)
