"""
Engine and session management for the pilot passport database.

The database URL comes from PassportConfig (``DATABASE_URL``) or the CLI's
``--database-url`` option; this module only turns it into an engine and
hands out sessions to the SQL airport store.
"""

import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.engine.url import make_url
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from .models import create_all_tables

logger = logging.getLogger(__name__)


class DatabaseConfig:
    """
    Lazily built engine plus session factory for one database URL.

    SQLite URLs share a single connection (StaticPool) so an in-memory
    database survives across sessions.
    """

    def __init__(self, database_url: str, echo: bool = False):
        """
        Args:
            database_url: SQLAlchemy database URL
            echo: Log emitted SQL
        """
        self.database_url = database_url
        self.echo = echo
        self.db_type = make_url(database_url).get_backend_name()
        self.engine: Optional[Engine] = None
        self.SessionLocal: Optional[sessionmaker] = None

    def _engine_kwargs(self) -> Dict[str, Any]:
        kwargs: Dict[str, Any] = {'echo': self.echo, 'pool_pre_ping': True}
        if self.db_type == 'sqlite':
            kwargs.update({
                'poolclass': StaticPool,
                'connect_args': {'check_same_thread': False},
            })
        return kwargs

    def initialize(self) -> None:
        """Create the engine and session factory on first use."""
        if self.engine is not None:
            return

        self.engine = create_engine(self.database_url, **self._engine_kwargs())
        self.SessionLocal = sessionmaker(
            bind=self.engine,
            autoflush=False,
            expire_on_commit=False,  # entities are read after commit
        )
        logger.info(f"Database engine ready ({self.db_type})")

    def create_tables(self) -> None:
        """Create the airport table if it doesn't exist."""
        self.initialize()
        create_all_tables(self.engine)

    @contextmanager
    def get_session_context(self) -> Iterator[Session]:
        """
        Yield a session that commits on success and rolls back on error.

        Errors are re-raised unchanged; callers decide how loudly to report
        them (a rejected duplicate insert is routine).
        """
        self.initialize()
        session = self.SessionLocal()
        try:
            yield session
            session.commit()
        except Exception as e:
            session.rollback()
            logger.debug(f"Rolled back database session: {e}")
            raise
        finally:
            session.close()

    def get_connection_info(self) -> Dict[str, Any]:
        """Describe the connection without exposing credentials."""
        return {
            'database_type': self.db_type,
            'database_url': make_url(self.database_url).render_as_string(hide_password=True),
            'is_initialized': self.engine is not None,
        }

    def close(self) -> None:
        """Dispose of the engine and its connections."""
        if self.engine is not None:
            self.engine.dispose()
            self.engine = None
            self.SessionLocal = None
            logger.info("Database connections closed")


__all__ = ['DatabaseConfig']
