"""
Business logic services for the pilot passport.

This module contains the field validator, the error taxonomy and the
airport manager that guards every add, edit and delete.
"""

from .errors import (
    AirportErrorKind,
    Messages,
    AirportError,
    AirportValidationError,
    NullArgumentError,
    OutOfRangeError,
    InvalidDateError,
    DuplicateIdError
)
from .validator import (
    validate_id,
    validate_city,
    validate_date_visited,
    validate_rating,
    validate_airport
)
from .airport_manager import AirportManager

__all__ = [
    # Errors
    'AirportErrorKind',
    'Messages',
    'AirportError',
    'AirportValidationError',
    'NullArgumentError',
    'OutOfRangeError',
    'InvalidDateError',
    'DuplicateIdError',

    # Validation
    'validate_id',
    'validate_city',
    'validate_date_visited',
    'validate_rating',
    'validate_airport',

    # Manager
    'AirportManager',
]
