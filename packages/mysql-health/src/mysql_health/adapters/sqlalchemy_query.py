"""SQLAlchemy implementation of DiagnosticQueryPort.

The engine's connection pool is the only resource shared between requests.
SQLAlchemy engines are thread-safe; each fetch checks a connection out of
the pool for the duration of one statement.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from mysql_health.adapters.ports import TabularResult
from mysql_health.domain.exceptions import ProbeUnavailableError

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

logger = logging.getLogger(__name__)


class SQLAlchemyQueryAdapter:
    """Runs diagnostic statements through a pooled SQLAlchemy engine.

    Example:
        >>> engine = create_engine("mysql+pymysql://monitor:secret@db/mysql")
        >>> adapter = SQLAlchemyQueryAdapter(engine)
        >>> adapter.fetch("SHOW VARIABLES LIKE 'read_only'").rows
        (('read_only', 'OFF'),)
    """

    def __init__(self, engine: Engine) -> None:
        """Initialize the adapter.

        Args:
            engine: SQLAlchemy engine pointing at the monitored node.
        """
        self._engine = engine

    def fetch(self, statement: str) -> TabularResult:
        """Execute a statement and return all of its rows.

        Raises:
            ProbeUnavailableError: On any SQLAlchemy or driver error.
        """
        try:
            with self._engine.connect() as conn:
                result = conn.execute(text(statement))
                columns = tuple(result.keys())
                rows = tuple(tuple(row) for row in result.fetchall())
        except SQLAlchemyError as e:
            raise ProbeUnavailableError(statement, original_error=e) from e

        return TabularResult(columns=columns, rows=rows)

    def ping(self) -> None:
        """Run ``SELECT 1`` against the database.

        Raises:
            ProbeUnavailableError: If the database cannot be reached.
        """
        self.fetch("SELECT 1")

    def dispose(self) -> None:
        """Close every pooled connection."""
        logger.debug("Disposing database connection pool")
        self._engine.dispose()
