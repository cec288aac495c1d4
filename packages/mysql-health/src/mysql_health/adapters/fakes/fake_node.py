"""Fake MySQL node for testing.

Configures a FakeDiagnosticQuery with the result sets a real server
returns for the diagnostic statements, so tests can describe a node in
terms of its state instead of raw rows.
"""

from __future__ import annotations

from mysql_health.adapters.fakes.fake_query import FakeDiagnosticQuery
from mysql_health.usecases.signal_probe import (
    BINLOG_DUMP_COUNT_STATEMENT,
    GALERA_STATE_STATEMENT,
    READ_ONLY_STATEMENT,
)

# Column layout of SHOW SLAVE STATUS (abridged, in server order)
SLAVE_STATUS_COLUMNS = (
    "Slave_IO_State",
    "Master_Host",
    "Master_User",
    "Master_Port",
    "Connect_Retry",
    "Master_Log_File",
    "Read_Master_Log_Pos",
    "Slave_IO_Running",
    "Slave_SQL_Running",
    "Last_Errno",
    "Seconds_Behind_Master",
    "Master_Server_Id",
)

# Column layout of SHOW REPLICA STATUS on MySQL 8.0.22+ (abridged)
REPLICA_STATUS_COLUMNS = (
    "Replica_IO_State",
    "Source_Host",
    "Source_User",
    "Source_Port",
    "Connect_Retry",
    "Source_Log_File",
    "Read_Source_Log_Pos",
    "Replica_IO_Running",
    "Replica_SQL_Running",
    "Last_Errno",
    "Seconds_Behind_Source",
    "Source_Server_Id",
)


class FakeNode(FakeDiagnosticQuery):
    """FakeDiagnosticQuery preloaded with the answers of a standalone node.

    A fresh FakeNode is writable, not replicating, serves no binlogs and
    reports no Galera state.

    Example:
        >>> node = FakeNode()
        >>> node.set_read_only(True)
        >>> node.set_replica(host="db1", port=3306, lag="12")
    """

    def __init__(self, replication_status_statement: str = "SHOW SLAVE STATUS") -> None:
        """Initialize a standalone writable node.

        Args:
            replication_status_statement: Statement the probe under test uses.
        """
        super().__init__()
        self.replication_status_statement = replication_status_statement
        self.set_read_only(False)
        self.set_not_replica()
        self.set_binlog_dumps(0)
        self.set_galera_state(None)

    @property
    def _status_columns(self) -> tuple[str, ...]:
        if self.replication_status_statement == "SHOW REPLICA STATUS":
            return REPLICA_STATUS_COLUMNS
        return SLAVE_STATUS_COLUMNS

    def set_read_only(self, read_only: bool | str | None) -> None:
        """Set the read_only variable; None removes the row."""
        if read_only is None:
            self.set_result(READ_ONLY_STATEMENT, ("Variable_name", "Value"), [])
            return
        if isinstance(read_only, bool):
            read_only = "ON" if read_only else "OFF"
        self.set_result(READ_ONLY_STATEMENT, ("Variable_name", "Value"), [("read_only", read_only)])

    def set_not_replica(self) -> None:
        """Report no replica status row (replication never configured)."""
        self.set_result(self.replication_status_statement, self._status_columns, [])

    def set_replica(
        self,
        host: str | bytes | None = "primary.db",
        port: int | str | bytes | None = 3306,
        lag: str | int | bytes | None = "0",
    ) -> None:
        """Report a replica status row.

        Args:
            host: Upstream host column value; None for SQL NULL.
            port: Upstream port column value; None for SQL NULL.
            lag: Seconds behind upstream; None for SQL NULL.
        """
        # Both layouts share the same column order
        row = (
            "Waiting for source to send event",
            host,
            "repl",
            port,
            60,
            "mysql-bin.000042",
            1337,
            "Yes",
            "Yes" if lag is not None else "No",
            0,
            lag,
            1,
        )
        self.set_result(self.replication_status_statement, self._status_columns, [row])

    def set_binlog_dumps(self, count: int) -> None:
        """Set the number of Binlog Dump sessions."""
        self.set_result(BINLOG_DUMP_COUNT_STATEMENT, ("n",), [(count,)])

    def set_galera_state(self, state: str | int | None) -> None:
        """Set wsrep_local_state; None removes the row (not a Galera node)."""
        if state is None:
            self.set_result(GALERA_STATE_STATEMENT, ("v",), [])
            return
        self.set_result(GALERA_STATE_STATEMENT, ("v",), [(str(state),)])
