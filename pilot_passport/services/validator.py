"""
Field validation for visited-airport records.

Pure functions that check candidate values before any store mutation.
validate_airport runs the checks in a fixed order (identifier, city,
date visited, rating) and raises on the first failure, so the reported
violation is deterministic when several fields are bad at once.
"""

from datetime import date, datetime, timezone
from typing import Any, Optional

from .errors import (
    InvalidDateError,
    Messages,
    NullArgumentError,
    OutOfRangeError,
)

AIRPORT_ID_LENGTH = 4
MIN_RATING = 1
MAX_RATING = 5


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def validate_id(airport_id: Optional[str]) -> str:
    """Require a present identifier of exactly AIRPORT_ID_LENGTH characters."""
    if _is_blank(airport_id):
        raise NullArgumentError("id")
    if not isinstance(airport_id, str) or len(airport_id) != AIRPORT_ID_LENGTH:
        raise OutOfRangeError("id", airport_id, Messages.ILLEGAL_ID_MSG)
    return airport_id


def validate_city(city: Optional[str]) -> str:
    """Require a non-empty city name."""
    if _is_blank(city):
        raise NullArgumentError("city")
    return city


def normalize_date_visited(date_visited: Any) -> Any:
    """Promote a plain date to midnight of that day; datetimes pass through."""
    if isinstance(date_visited, date) and not isinstance(date_visited, datetime):
        return datetime.combine(date_visited, datetime.min.time())
    return date_visited


def current_time_for(value: datetime) -> datetime:
    """Return "now" in the same timezone flavour (naive or aware) as value."""
    if value.tzinfo is not None and value.tzinfo.utcoffset(value) is not None:
        return datetime.now(timezone.utc)
    return datetime.now()


def validate_date_visited(date_visited: Any, now: Optional[datetime] = None) -> datetime:
    """
    Reject missing dates and dates strictly later than ``now``.

    Args:
        date_visited: Candidate visit date (datetime or date)
        now: Reference moment; defaults to the current time at call

    Returns:
        The visit date as a datetime
    """
    if date_visited is None:
        raise NullArgumentError("date_visited")

    value = normalize_date_visited(date_visited)
    if not isinstance(value, datetime):
        raise OutOfRangeError("date_visited", date_visited, Messages.ILLEGAL_DATE_TYPE_MSG)

    reference = now if now is not None else current_time_for(value)
    try:
        in_future = value > reference
    except TypeError:
        # naive vs aware: compare both as UTC, treating naive as local time
        in_future = value.astimezone(timezone.utc) > reference.astimezone(timezone.utc)
    if in_future:
        raise InvalidDateError(value)
    return value


def validate_rating(rating: Any) -> int:
    """Require an integer rating within [MIN_RATING, MAX_RATING]."""
    if rating is None:
        raise NullArgumentError("rating")
    if isinstance(rating, bool) or not isinstance(rating, int):
        raise OutOfRangeError("rating", rating, Messages.ILLEGAL_RATING_MSG)
    if rating < MIN_RATING or rating > MAX_RATING:
        raise OutOfRangeError("rating", rating, Messages.ILLEGAL_RATING_MSG)
    return rating


def validate_airport(
    airport_id: Optional[str],
    city: Optional[str],
    date_visited: Any,
    rating: Any,
    now: Optional[datetime] = None,
) -> datetime:
    """
    Validate all four airport fields in order: id, city, date, rating.

    Raises the first failure encountered. Returns the normalized visit date
    so callers store a datetime even when a plain date was supplied.
    """
    validate_id(airport_id)
    validate_city(city)
    visited = validate_date_visited(date_visited, now=now)
    validate_rating(rating)
    return visited


__all__ = [
    "AIRPORT_ID_LENGTH",
    "MIN_RATING",
    "MAX_RATING",
    "validate_id",
    "validate_city",
    "validate_date_visited",
    "validate_rating",
    "validate_airport",
    "normalize_date_visited",
    "current_time_for",
]
