"""
SQLAlchemy database models for the pilot passport system.

This module defines the single table backing the SQL store:
- AirportRecord: one visited airport keyed by its 4-character identifier
"""

from sqlalchemy import CheckConstraint, Column, DateTime, Integer, String
from sqlalchemy.orm import declarative_base

# Create the declarative base for all models
Base = declarative_base()


class AirportRecord(Base):
    """
    Visited airport row.

    The identifier is the primary key, so the database itself rejects a
    second insert with the same id even if two writers race past the
    manager's duplicate check.
    """
    __tablename__ = 'visited_airport'

    id = Column(String(4), primary_key=True)  # e.g. 'KMSN'
    city = Column(String(100), nullable=False, index=True)
    # Naive wall time; UTC when utc_offset is set
    date_visited = Column(DateTime, nullable=False, index=True)
    # Seconds east of UTC for timezone-aware visits, NULL for naive ones
    utc_offset = Column(Integer, nullable=True)
    rating = Column(Integer, nullable=False)

    __table_args__ = (
        CheckConstraint('rating BETWEEN 1 AND 5', name='ck_visited_airport_rating'),
    )

    def __repr__(self):
        return f"<AirportRecord(id='{self.id}', city='{self.city}', rating={self.rating})>"


def create_all_tables(engine):
    """
    Create all database tables using the provided SQLAlchemy engine.

    Args:
        engine: SQLAlchemy engine instance
    """
    Base.metadata.create_all(bind=engine)


def drop_all_tables(engine):
    """
    Drop all database tables using the provided SQLAlchemy engine.

    Args:
        engine: SQLAlchemy engine instance
    """
    Base.metadata.drop_all(bind=engine)


__all__ = [
    'Base',
    'AirportRecord',
    'create_all_tables',
    'drop_all_tables',
]
