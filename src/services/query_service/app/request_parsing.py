# src/services/query_service/app/request_parsing.py
import logging
import re
from datetime import datetime
from typing import Optional

from price_resolution_engine import InvalidPriceQueryError

logger = logging.getLogger(__name__)

API_DATE_TIME_FORMAT = "yyyy-MM-dd-HH:mm:ss"
RESPONSE_DATE_TIME_FORMAT = "yyyy-MM-dd-HH.mm.ss"
RESPONSE_DATE_TIME_STRFTIME = "%Y-%m-%d-%H.%M.%S"

APPLICATION_DATE_FIELD = "applicationDate"
APPLICATION_DATE_PATTERN = re.compile(r"(\d{4})-(\d{2})-(\d{2})-(\d{2}):(\d{2}):(\d{2})", re.ASCII)

# (component name, match group, min, max); checked in this order.
DATE_COMPONENT_RANGES = (
    ("month", 2, 1, 12),
    ("day", 3, 1, 31),
    ("hour", 4, 0, 23),
    ("minute", 5, 0, 59),
    ("second", 6, 0, 59),
)


def parse_application_date(raw: Optional[str]) -> datetime:
    """
    Parses an application date in the API format yyyy-MM-dd-HH:mm:ss.

    Component ranges are checked individually; the day is not checked against
    the month, so 2020-02-31 gets past the range checks and is rejected only
    when the calendar date is built.

    Raises:
        InvalidPriceQueryError: with field 'applicationDate'.
    """
    if raw is None or not raw.strip():
        raise InvalidPriceQueryError(APPLICATION_DATE_FIELD, raw, "Application date is required")

    match = APPLICATION_DATE_PATTERN.fullmatch(raw)
    if match is None:
        raise InvalidPriceQueryError(
            APPLICATION_DATE_FIELD, raw, f"Application date must be in format {API_DATE_TIME_FORMAT}"
        )

    for name, group, low, high in DATE_COMPONENT_RANGES:
        value = int(match.group(group))
        if value < low or value > high:
            raise InvalidPriceQueryError(APPLICATION_DATE_FIELD, raw, f"Invalid {name} value: {value}")

    try:
        parsed = datetime(*(int(part) for part in match.groups()))
    except ValueError as e:
        logger.warning(f"Error parsing date string '{raw}': {e}")
        raise InvalidPriceQueryError(
            APPLICATION_DATE_FIELD,
            raw,
            f"Invalid date format: {raw}. Expected format: {API_DATE_TIME_FORMAT}",
        ) from e

    logger.debug(f"Successfully parsed date: {raw} -> {parsed.isoformat()}")
    return parsed


def format_response_date(value: datetime) -> str:
    return value.strftime(RESPONSE_DATE_TIME_STRFTIME)
