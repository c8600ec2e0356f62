"""
Airport manager: validated CRUD over an airport store.

Every mutation runs the validator first and only then touches the store,
so a rejected add or edit leaves stored data exactly as it was. Rule
violations surface as the typed failures in ``errors``; store-level errors
propagate unchanged.
"""

import logging
from datetime import datetime
from typing import Any, Callable, List, Optional, Union

from ..database.store import AirportStore, DuplicateKeyError
from ..models.airport import AirportModel
from .errors import DuplicateIdError
from .validator import validate_airport

logger = logging.getLogger(__name__)


class AirportManager:
    """
    Orchestrates list, find, add, edit and delete for visited airports.

    Typical usage:
        manager = AirportManager(InMemoryAirportStore())
        manager.add_airport("KMSN", "Madison", datetime(2024, 5, 1), 4)
        manager.find_airport("KMSN")
    """

    def __init__(self, store: AirportStore, clock: Optional[Callable[[], datetime]] = None):
        """
        Args:
            store: Persistence capability for airports
            clock: Optional callable returning "now" for future-date checks;
                defaults to the wall clock at each call
        """
        self.store = store
        self.clock = clock

    def _now(self) -> Optional[datetime]:
        return self.clock() if self.clock is not None else None

    def list_airports(self) -> List[AirportModel]:
        """Return all stored airports in identifier order."""
        return list(self.store.list())

    def count(self) -> int:
        """Return how many airports are stored."""
        return len(self.store.list())

    def find_airport(self, airport_id: Optional[str]) -> Optional[AirportModel]:
        """Return the airport with this identifier, or None when there is none."""
        if not airport_id:
            return None
        return self.store.get(airport_id)

    def add_airport(
        self,
        airport_id: Optional[str],
        city: Optional[str],
        date_visited: Any,
        rating: Any,
    ) -> AirportModel:
        """
        Validate and store a new airport.

        Raises:
            NullArgumentError: id or city missing
            OutOfRangeError: id not 4 characters, or rating outside 1-5
            InvalidDateError: date visited in the future
            DuplicateIdError: an airport with this id is already stored
        """
        visited = validate_airport(airport_id, city, date_visited, rating, now=self._now())

        if self.store.get(airport_id) is not None:
            logger.warning(f"Rejected duplicate airport {airport_id}")
            raise DuplicateIdError(airport_id)

        airport = AirportModel(id=airport_id, city=city, date_visited=visited, rating=rating)
        try:
            created = self.store.insert(airport)
        except DuplicateKeyError as e:
            logger.warning(f"Rejected duplicate airport {airport_id} at insert")
            raise DuplicateIdError(airport_id) from e

        logger.info(f"Added airport {created.id} ({created.city})")
        return created

    def edit_airport(
        self,
        airport_id: Optional[str],
        city: Optional[str],
        date_visited: Any,
        rating: Any,
    ) -> Optional[AirportModel]:
        """
        Validate and replace the city, date and rating of a stored airport.

        The identifier is validated like every other field, so a malformed
        id fails before any lookup. Editing an identifier that is not stored
        changes nothing and returns None.
        """
        visited = validate_airport(airport_id, city, date_visited, rating, now=self._now())

        existing = self.store.get(airport_id)
        if existing is None:
            logger.warning(f"Edit skipped, airport {airport_id} not found")
            return None

        updated = self.store.update(existing.with_changes(city, visited, rating))
        if updated is not None:
            logger.info(f"Edited airport {updated.id}")
        return updated

    def delete_airport(self, airport: Union[AirportModel, str, None]) -> Optional[AirportModel]:
        """
        Remove an airport by identifier.

        Accepts the entity or its identifier. Returns the removed airport,
        or None when nothing was stored under that identifier.
        """
        airport_id = airport.id if isinstance(airport, AirportModel) else airport
        if not airport_id:
            return None

        removed = self.store.remove(airport_id)
        if removed is None:
            logger.warning(f"Delete skipped, airport {airport_id} not found")
        else:
            logger.info(f"Deleted airport {removed.id}")
        return removed


__all__ = ['AirportManager']
