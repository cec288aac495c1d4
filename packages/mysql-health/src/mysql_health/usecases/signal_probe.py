"""Signal probe use case: issues the diagnostic queries of a MySQL node.

The probe applies no policy. Every failed query is logged and reported as
"no result", which callers treat exactly like a negative observation.
"""

from __future__ import annotations

import logging

from mysql_health.adapters.ports import DiagnosticQueryPort, TabularResult
from mysql_health.domain.exceptions import ProbeUnavailableError

logger = logging.getLogger(__name__)

READ_ONLY_STATEMENT = "SHOW VARIABLES LIKE 'read_only'"

BINLOG_DUMP_COUNT_STATEMENT = (
    "SELECT COUNT(*) AS n "
    "FROM information_schema.processlist "
    "WHERE command IN ('Binlog Dump', 'Binlog Dump GTID')"
)

GALERA_STATE_STATEMENT = (
    "SELECT variable_value AS v "
    "FROM information_schema.global_status "
    "WHERE variable_name = 'wsrep_local_state'"
)


class SignalProbe:
    """Reads raw signals from the monitored node.

    Each method issues exactly one statement per call; nothing is cached.

    Thread safety:
        Stateless. The query port owns and serializes access to the
        shared connection pool.
    """

    def __init__(
        self,
        query_port: DiagnosticQueryPort,
        replication_status_statement: str = "SHOW SLAVE STATUS",
    ) -> None:
        """Initialize the signal probe.

        Args:
            query_port: Port used to run diagnostic statements.
            replication_status_statement: Statement returning the replica
                status row ("SHOW SLAVE STATUS" or "SHOW REPLICA STATUS").
        """
        self._query_port = query_port
        self._replication_status_statement = replication_status_statement

    def _fetch(self, statement: str) -> TabularResult | None:
        try:
            return self._query_port.fetch(statement)
        except ProbeUnavailableError as e:
            logger.warning(f"Probe unavailable, assuming negative signal: {e}")
            return None

    def read_only_variable(self) -> TabularResult | None:
        """Return the ``read_only`` variable row, or None if the query failed."""
        return self._fetch(READ_ONLY_STATEMENT)

    def replication_status(self) -> TabularResult | None:
        """Return the replica status result (zero or one row), or None on failure."""
        return self._fetch(self._replication_status_statement)

    def galera_local_state(self) -> TabularResult | None:
        """Return the wsrep_local_state status row, or None on failure."""
        return self._fetch(GALERA_STATE_STATEMENT)

    def binlog_dump_count(self) -> int:
        """Return the number of sessions streaming binlogs to replicas.

        Returns:
            Non-negative session count. 0 if the query failed, returned no
            row, or returned a value that is not a non-negative integer.
        """
        result = self._fetch(BINLOG_DUMP_COUNT_STATEMENT)
        if result is None or result.is_empty or not result.rows[0]:
            return 0

        value = result.rows[0][0]
        if isinstance(value, (bytes, bytearray)):
            value = value.decode("utf-8", errors="replace")

        try:
            count = int(value)
        except (TypeError, ValueError):
            logger.warning(f"Unparseable binlog dump count {value!r}, assuming 0")
            return 0

        return max(count, 0)
