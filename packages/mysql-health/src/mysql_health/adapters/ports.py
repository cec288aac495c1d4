"""Port interfaces for the mysql-health core package.

Ports define the contracts that adapters must implement.
These are Protocol classes (structural subtyping) for flexible testing.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable


@dataclass(frozen=True)
class TabularResult:
    """Raw result of a diagnostic query.

    Immutable value object. Column names keep the server's spelling and
    order; rows hold driver values as returned (str, bytes, int, None...).

    Attributes:
        columns: Ordered column names.
        rows: Data rows, each a tuple aligned with ``columns``.
    """

    columns: tuple[str, ...] = ()
    rows: tuple[tuple[Any, ...], ...] = field(default=())

    @property
    def is_empty(self) -> bool:
        """True if the query returned no data row."""
        return not self.rows

    def first_row(self) -> dict[str, Any] | None:
        """Return the first row keyed by column name, or None if empty."""
        if self.is_empty:
            return None
        return dict(zip(self.columns, self.rows[0]))


@runtime_checkable
class DiagnosticQueryPort(Protocol):
    """Port interface for running read-only diagnostic statements.

    Implementations own the database connection handle and must be safe
    to call from concurrent requests.

    Contract:
        - fetch() returns every row of the statement's result set
        - fetch() raises ProbeUnavailableError on any driver or
          connectivity error, never a driver-specific exception
        - Implementations never cache results between calls
    """

    def fetch(self, statement: str) -> TabularResult:
        """Execute a diagnostic statement.

        Args:
            statement: SQL statement to execute.

        Returns:
            TabularResult with the column names and all rows.

        Raises:
            ProbeUnavailableError: If the statement could not be executed.
        """
        ...

    def ping(self) -> None:
        """Check that the database is reachable.

        Raises:
            ProbeUnavailableError: If the database cannot be reached.
        """
        ...
