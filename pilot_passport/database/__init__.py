"""
Database package for the pilot passport system.

This package provides the SQLAlchemy table model, database configuration
and the airport store implementations used by the airport manager.
"""

from .models import (
    Base,
    AirportRecord,
    create_all_tables,
    drop_all_tables
)

from .config import DatabaseConfig

from .store import (
    StoreError,
    DuplicateKeyError,
    AirportStore,
    InMemoryAirportStore,
    SQLAlchemyAirportStore
)

__all__ = [
    # Models
    'Base',
    'AirportRecord',
    'create_all_tables',
    'drop_all_tables',

    # Configuration
    'DatabaseConfig',

    # Stores
    'StoreError',
    'DuplicateKeyError',
    'AirportStore',
    'InMemoryAirportStore',
    'SQLAlchemyAirportStore',
]
