"""Fake diagnostic query adapter for testing.

Provides an in-memory test double for DiagnosticQueryPort that answers
statements from a configurable table instead of a real database.
"""

from __future__ import annotations

import threading
from typing import Any

from mysql_health.adapters.ports import TabularResult
from mysql_health.domain.exceptions import ProbeUnavailableError


class FakeDiagnosticQuery:
    """In-memory fake for DiagnosticQueryPort - no database access.

    Statements are matched exactly. An unknown statement returns an empty
    result, which is what a server without the relevant feature reports.

    Example:
        >>> fake = FakeDiagnosticQuery()
        >>> fake.set_result("SHOW VARIABLES LIKE 'read_only'",
        ...                 ("Variable_name", "Value"), [("read_only", "ON")])
        >>> fake.fetch("SHOW VARIABLES LIKE 'read_only'").rows
        (('read_only', 'ON'),)
    """

    def __init__(self) -> None:
        """Initialize with no configured results."""
        self._results: dict[str, TabularResult] = {}
        self._errors: dict[str, Exception] = {}
        self._reachable = True
        self._statements: list[str] = []
        self._lock = threading.Lock()

    @property
    def statements(self) -> list[str]:
        """Return a copy of every statement fetched, in call order."""
        with self._lock:
            return list(self._statements)

    def set_result(
        self,
        statement: str,
        columns: tuple[str, ...] | list[str],
        rows: list[tuple[Any, ...]] | tuple[tuple[Any, ...], ...] = (),
    ) -> None:
        """Configure the result returned for a statement."""
        with self._lock:
            self._errors.pop(statement, None)
            self._results[statement] = TabularResult(
                columns=tuple(columns), rows=tuple(tuple(row) for row in rows)
            )

    def set_error(self, statement: str, error: Exception | None = None) -> None:
        """Make a statement fail with ProbeUnavailableError."""
        with self._lock:
            self._errors[statement] = error or RuntimeError("simulated failure")

    def set_unreachable(self, unreachable: bool = True) -> None:
        """Make every statement (and ping) fail."""
        with self._lock:
            self._reachable = not unreachable

    def fetch(self, statement: str) -> TabularResult:
        """Return the configured result or raise the configured error."""
        with self._lock:
            self._statements.append(statement)
            if not self._reachable:
                raise ProbeUnavailableError(statement, RuntimeError("database unreachable"))
            if statement in self._errors:
                raise ProbeUnavailableError(statement, self._errors[statement])
            return self._results.get(statement, TabularResult())

    def ping(self) -> None:
        """Raise if the fake is configured as unreachable."""
        with self._lock:
            if not self._reachable:
                raise ProbeUnavailableError("SELECT 1", RuntimeError("database unreachable"))

    def clear_statements(self) -> None:
        """Forget the recorded statements."""
        with self._lock:
            self._statements.clear()
