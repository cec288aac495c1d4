"""Signal value objects observed on a MySQL node.

Every object in this module is computed fresh for a single classification
request and is never persisted or shared between requests.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field

from mysql_health.domain.exceptions import MySQLHealthConfigError

# Threshold value meaning "no upper bound on replication lag".
UNBOUNDED_THRESHOLD = 0

# wsrep_local_state value of a synced Galera member.
GALERA_SYNCED_STATE = "4"


def effective_threshold(threshold_seconds: int) -> int:
    """Translate a lag threshold into the upper bound used for comparison.

    The sentinel ``0`` means "unbounded" and becomes ``sys.maxsize``.
    """
    if threshold_seconds == UNBOUNDED_THRESHOLD:
        return sys.maxsize
    return threshold_seconds


@dataclass(frozen=True)
class ReplicationRow:
    """Decoded replica status of a node.

    A non-empty ``master_host`` is the only witness of replica-ness: an
    absent status row and an empty host both mean "not a replica".

    Attributes:
        is_replica: True if the node replicates from an upstream source.
        master_host: Upstream host, None when not a replica.
        master_port: Upstream port as reported by the server, None when
            not a replica.
        lag_seconds: Seconds behind the upstream source. None when the
            server reported no value (NULL or missing column) or when the
            node is not a replica.
    """

    is_replica: bool = False
    master_host: str | None = None
    master_port: str | None = None
    lag_seconds: int | None = None

    def __post_init__(self) -> None:
        """Validate replica invariants."""
        if self.is_replica and not self.master_host:
            raise MySQLHealthConfigError("a replica row requires a non-empty master_host")

        if not self.is_replica and (
            self.master_host is not None
            or self.master_port is not None
            or self.lag_seconds is not None
        ):
            raise MySQLHealthConfigError(
                "a non-replica row cannot carry master_host, master_port or lag_seconds"
            )

    @property
    def master_address(self) -> str:
        """Return ``host:port`` of the upstream source, or "" if not a replica."""
        if not self.is_replica:
            return ""
        return f"{self.master_host}:{self.master_port or ''}"


NOT_A_REPLICA = ReplicationRow()


@dataclass(frozen=True)
class GaleraState:
    """Galera cluster membership observed on a node.

    Attributes:
        active: True only when the node reports the synced state.
        raw_value: The observed wsrep_local_state value, "" when the status
            row is absent or the query failed.
    """

    active: bool = False
    raw_value: str = ""


@dataclass(frozen=True)
class LagResult:
    """Outcome of evaluating replication lag against a threshold.

    Attributes:
        within_threshold: True if the node is a replica whose lag is within
            the threshold (a caught-up replica included).
        lag_seconds: Observed lag, 0 when the node is not a replica.
    """

    within_threshold: bool
    lag_seconds: int


@dataclass(frozen=True)
class NodeSignals:
    """Point-in-time snapshot of the raw signals of one node.

    Signals that a classification did not ask for keep their negative
    default, which is the same value a failed probe produces.
    """

    read_only: bool = False
    replication: ReplicationRow = field(default=NOT_A_REPLICA)
    binlog_dump_count: int = 0
    galera: GaleraState = field(default_factory=GaleraState)
    master_marker: bool = False

    def __post_init__(self) -> None:
        if self.binlog_dump_count < 0:
            raise MySQLHealthConfigError(
                f"binlog_dump_count cannot be negative, got: {self.binlog_dump_count}"
            )

    @property
    def serving_binlogs(self) -> bool:
        """True if at least one downstream replica streams binlogs from this node."""
        return self.binlog_dump_count > 0


@dataclass(frozen=True)
class ClassificationResult:
    """Answer of one classification, as handed to the HTTP layer.

    Attributes:
        succeeded: Drives success/failure signalling of the endpoint.
        detail: Optional payload (lag, master address, Galera state, count).
    """

    succeeded: bool
    detail: str = ""
