"""
Error taxonomy for visited-airport mutations.

Every failure raised by the validator or the airport manager is an
AirportError carrying an AirportErrorKind tag and a message that contains
one of the fixed marker texts in Messages. Callers branch on the exception
type (or ``kind``) and may match the marker to identify the violated rule.

Hierarchy:
- AirportError
  - AirportValidationError (malformed input)
    - NullArgumentError
    - OutOfRangeError
      - InvalidDateError
  - DuplicateIdError (business-rule conflict)
"""

from enum import Enum
from typing import Any, Optional


class AirportErrorKind(str, Enum):
    """Tag identifying which rule a failure violated."""
    NULL_ARGUMENT = "null_argument"
    OUT_OF_RANGE = "out_of_range"
    INVALID_DATE = "invalid_date"
    DUPLICATE_ID = "duplicate_id"


class Messages:
    """Fixed marker texts carried by each failure."""
    NULL_ARGUMENT_MSG = "A required airport field was not supplied"
    ILLEGAL_ID_MSG = "Airport identifier must be exactly 4 characters"
    ILLEGAL_RATING_MSG = "Airport rating must be between 1 and 5"
    INVALID_DATE_MSG = "Date visited cannot be in the future"
    ILLEGAL_DATE_TYPE_MSG = "Date visited must be a date or datetime"
    DUPLICATE_ID_MSG = "An airport with this identifier already exists"


class AirportError(Exception):
    """Base class for all visited-airport failures."""

    kind: AirportErrorKind

    def __init__(self, message: str, *, field: Optional[str] = None, value: Any = None):
        super().__init__(message)
        self.message = message
        self.field = field
        self.value = value

    def __str__(self) -> str:
        if self.field:
            return f"{self.message} ({self.field})"
        return self.message

    def to_dict(self) -> dict:
        """Serialize the failure for logging or API responses."""
        return {
            "kind": self.kind.value,
            "message": self.message,
            "field": self.field,
        }


class AirportValidationError(AirportError):
    """A candidate field value is malformed."""


class NullArgumentError(AirportValidationError):
    """A required field is missing or empty."""
    kind = AirportErrorKind.NULL_ARGUMENT

    def __init__(self, field: str, message: str = Messages.NULL_ARGUMENT_MSG):
        super().__init__(message, field=field)


class OutOfRangeError(AirportValidationError):
    """Identifier length or rating falls outside its allowed range."""
    kind = AirportErrorKind.OUT_OF_RANGE

    def __init__(self, field: str, value: Any, message: str):
        super().__init__(message, field=field, value=value)


class InvalidDateError(OutOfRangeError):
    """Date visited lies in the future."""
    kind = AirportErrorKind.INVALID_DATE

    def __init__(self, value: Any, message: str = Messages.INVALID_DATE_MSG):
        super().__init__("date_visited", value, message)


class DuplicateIdError(AirportError):
    """An airport with the same identifier is already stored."""
    kind = AirportErrorKind.DUPLICATE_ID

    def __init__(self, airport_id: str, message: str = Messages.DUPLICATE_ID_MSG):
        super().__init__(f"{message}: {airport_id}", field="id", value=airport_id)
        self.airport_id = airport_id


__all__ = [
    "AirportErrorKind",
    "Messages",
    "AirportError",
    "AirportValidationError",
    "NullArgumentError",
    "OutOfRangeError",
    "InvalidDateError",
    "DuplicateIdError",
]
