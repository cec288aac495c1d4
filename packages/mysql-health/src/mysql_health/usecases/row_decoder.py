"""Row decoder use case: turns raw diagnostic results into typed signals.

Diagnostic results are loosely typed. Column sets differ between server
versions and variants, values may be SQL NULL, and drivers may hand back
bytes instead of text. Absence of a column or row is a meaningful state
here, never an error.
"""

from __future__ import annotations

from typing import Any

from mysql_health.adapters.ports import TabularResult
from mysql_health.domain.signals import (
    GALERA_SYNCED_STATE,
    NOT_A_REPLICA,
    GaleraState,
    ReplicationRow,
)

# Recognized replica status columns, matched case-sensitively. MySQL 8.0.22+
# reports the Source_* spelling under SHOW REPLICA STATUS.
REPLICATION_COLUMNS: dict[str, str] = {
    "Master_Host": "master_host",
    "Master_Port": "master_port",
    "Seconds_Behind_Master": "lag_seconds",
    "Source_Host": "master_host",
    "Source_Port": "master_port",
    "Seconds_Behind_Source": "lag_seconds",
}


def as_text(value: Any) -> str | None:
    """Return a driver value as text, keeping SQL NULL as None."""
    if value is None:
        return None
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value).decode("utf-8", errors="replace")
    return str(value)


def parse_lag(value: str) -> int:
    """Parse a lag value, resolving unparseable input to 0."""
    try:
        return int(value.strip())
    except ValueError:
        return 0


def decode_replication_row(result: TabularResult | None) -> ReplicationRow:
    """Decode a replica status result into a ReplicationRow.

    Only the first data row is considered. Recognized columns are read by
    exact name; any other column is ignored. A recognized column holding
    NULL (or an empty string) leaves its field unset.

    Args:
        result: Raw result of the replica status statement, or None when
            the statement failed.

    Returns:
        ReplicationRow. The non-replica record when there is no row or the
        master host is empty.
    """
    if result is None:
        return NOT_A_REPLICA

    row = result.first_row()
    if row is None:
        return NOT_A_REPLICA

    fields: dict[str, str] = {}
    for column, value in row.items():
        field_name = REPLICATION_COLUMNS.get(column)
        if field_name is None:
            continue
        text = as_text(value)
        if text:
            fields[field_name] = text

    master_host = fields.get("master_host")
    if not master_host:
        return NOT_A_REPLICA

    lag = fields.get("lag_seconds")

    return ReplicationRow(
        is_replica=True,
        master_host=master_host,
        master_port=fields.get("master_port"),
        lag_seconds=parse_lag(lag) if lag is not None else None,
    )


def _variable_value(result: TabularResult | None) -> str | None:
    """Return the value of a single key/value variable row."""
    if result is None:
        return None

    row = result.first_row()
    if not row:
        return None

    for column in ("Value", "VALUE", "v", "variable_value", "VARIABLE_VALUE"):
        if column in row:
            return as_text(row[column])

    # Unknown spelling: the value is the last column of a key/value row
    return as_text(result.rows[0][-1])


def decode_read_only(result: TabularResult | None) -> bool:
    """Decode the ``read_only`` variable.

    A missing row, a failed query, NULL and ``OFF`` all mean writable.
    """
    value = _variable_value(result)
    if value is None:
        return False
    return value.strip().upper() not in ("OFF", "0", "")


def decode_galera_state(result: TabularResult | None) -> GaleraState:
    """Decode the ``wsrep_local_state`` status row.

    A missing row and a failed query are identical: inactive with an empty
    raw value. Only the synced state marks the node active.
    """
    value = _variable_value(result)
    if value is None:
        return GaleraState()

    raw_value = value.strip()
    return GaleraState(active=raw_value == GALERA_SYNCED_STATE, raw_value=raw_value)
