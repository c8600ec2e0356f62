"""
Airport store implementations.

The airport manager talks to persistence only through the AirportStore
capability: list, get, insert, update, remove. Two implementations ship:

- InMemoryAirportStore: dict-backed, lock-guarded; used by tests and the
  CLI's ``--memory`` mode
- SQLAlchemyAirportStore: rows in the ``visited_airport`` table, reached
  through DatabaseConfig sessions

Both return AirportModel entities and raise DuplicateKeyError when an
insert collides with an existing identifier.
"""

import logging
import threading
from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional, Tuple

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from ..models.airport import AirportModel
from .config import DatabaseConfig
from .models import AirportRecord

logger = logging.getLogger(__name__)


def split_visit_time(value: datetime) -> Tuple[datetime, Optional[int]]:
    """
    Split a visit time into a naive column value and a UTC offset.

    Aware values are stored as naive UTC plus their offset in seconds so
    they read back in the timezone they were written in. Naive values are
    stored as-is with no offset.
    """
    offset = value.utcoffset()
    if offset is None:
        return value, None
    naive_utc = value.astimezone(timezone.utc).replace(tzinfo=None)
    return naive_utc, int(offset.total_seconds())


def join_visit_time(stored: datetime, utc_offset: Optional[int]) -> datetime:
    """Rebuild the visit time written by split_visit_time."""
    if utc_offset is None:
        return stored
    return stored.replace(tzinfo=timezone.utc).astimezone(timezone(timedelta(seconds=utc_offset)))


class StoreError(Exception):
    """Base class for store-level failures."""


class DuplicateKeyError(StoreError):
    """An insert collided with an identifier already in the store."""

    def __init__(self, airport_id: str):
        super().__init__(f"Duplicate airport identifier: {airport_id}")
        self.airport_id = airport_id


class AirportStore(ABC):
    """Persistence capability consumed by the airport manager."""

    @abstractmethod
    def list(self) -> List[AirportModel]:
        """Return every stored airport ordered by identifier."""

    @abstractmethod
    def get(self, airport_id: str) -> Optional[AirportModel]:
        """Return the airport with this identifier, or None."""

    @abstractmethod
    def insert(self, airport: AirportModel) -> AirportModel:
        """Store a new airport; raise DuplicateKeyError if the id exists."""

    @abstractmethod
    def update(self, airport: AirportModel) -> Optional[AirportModel]:
        """Replace the stored fields of an existing airport; None if absent."""

    @abstractmethod
    def remove(self, airport_id: str) -> Optional[AirportModel]:
        """Delete the airport with this identifier and return it; None if absent."""


class InMemoryAirportStore(AirportStore):
    """Airport store kept in a process-local dictionary."""

    def __init__(self, airports: Optional[List[AirportModel]] = None):
        self._airports: Dict[str, AirportModel] = {}
        self._lock = threading.Lock()
        for airport in airports or []:
            self._airports[airport.id] = airport

    def list(self) -> List[AirportModel]:
        with self._lock:
            return [self._airports[key] for key in sorted(self._airports)]

    def get(self, airport_id: str) -> Optional[AirportModel]:
        with self._lock:
            return self._airports.get(airport_id)

    def insert(self, airport: AirportModel) -> AirportModel:
        with self._lock:
            if airport.id in self._airports:
                raise DuplicateKeyError(airport.id)
            self._airports[airport.id] = airport
            return airport

    def update(self, airport: AirportModel) -> Optional[AirportModel]:
        with self._lock:
            if airport.id not in self._airports:
                return None
            self._airports[airport.id] = airport
            return airport

    def remove(self, airport_id: str) -> Optional[AirportModel]:
        with self._lock:
            return self._airports.pop(airport_id, None)

    def __len__(self) -> int:
        return len(self._airports)


class SQLAlchemyAirportStore(AirportStore):
    """
    Airport store backed by a relational database.

    Each operation runs in its own session from
    ``DatabaseConfig.get_session_context()``, which commits on success and
    rolls back and re-raises on failure.
    """

    def __init__(self, db_config: DatabaseConfig, create_tables: bool = True):
        """
        Args:
            db_config: Database configuration providing sessions
            create_tables: Create the airport table if missing
        """
        self.db_config = db_config
        if create_tables:
            self.db_config.create_tables()

    @staticmethod
    def _to_model(record: AirportRecord) -> AirportModel:
        return AirportModel(
            id=record.id,
            city=record.city,
            date_visited=join_visit_time(record.date_visited, record.utc_offset),
            rating=record.rating,
        )

    def list(self) -> List[AirportModel]:
        with self.db_config.get_session_context() as session:
            records = session.scalars(select(AirportRecord).order_by(AirportRecord.id)).all()
            return [self._to_model(record) for record in records]

    def get(self, airport_id: str) -> Optional[AirportModel]:
        with self.db_config.get_session_context() as session:
            record = session.get(AirportRecord, airport_id)
            return self._to_model(record) if record is not None else None

    def insert(self, airport: AirportModel) -> AirportModel:
        try:
            with self.db_config.get_session_context() as session:
                date_visited, utc_offset = split_visit_time(airport.date_visited)
                record = AirportRecord(
                    id=airport.id,
                    city=airport.city,
                    date_visited=date_visited,
                    utc_offset=utc_offset,
                    rating=airport.rating,
                )
                session.add(record)
                session.flush()
                return self._to_model(record)
        except IntegrityError as e:
            # Primary key collision; check constraints are pre-empted by validation
            logger.debug(f"Insert rejected for airport {airport.id}: {e.orig}")
            raise DuplicateKeyError(airport.id) from e

    def update(self, airport: AirportModel) -> Optional[AirportModel]:
        with self.db_config.get_session_context() as session:
            record = session.get(AirportRecord, airport.id)
            if record is None:
                return None
            record.city = airport.city
            record.date_visited, record.utc_offset = split_visit_time(airport.date_visited)
            record.rating = airport.rating
            session.flush()
            return self._to_model(record)

    def remove(self, airport_id: str) -> Optional[AirportModel]:
        with self.db_config.get_session_context() as session:
            record = session.get(AirportRecord, airport_id)
            if record is None:
                return None
            removed = self._to_model(record)
            session.delete(record)
            return removed


__all__ = [
    'split_visit_time',
    'join_visit_time',
    'StoreError',
    'DuplicateKeyError',
    'AirportStore',
    'InMemoryAirportStore',
    'SQLAlchemyAirportStore',
]
