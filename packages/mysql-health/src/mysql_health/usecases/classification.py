"""Classification engine: pure formulas over node signals.

Every function here is side-effect free and performs no I/O; it only
combines values already fetched by the signal probe. ``leader`` ignores
``read_only`` while ``master`` requires a writable node.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from mysql_health.domain.signals import ClassificationResult, NodeSignals
from mysql_health.usecases.lag_evaluator import decide_lag


class Signal(Enum):
    """Raw signals a classification may depend on."""

    READ_ONLY = "read_only"
    REPLICATION = "replication"
    BINLOG_DUMPS = "binlog_dumps"
    GALERA = "galera"
    MASTER_MARKER = "master_marker"


def within_lag_threshold(signals: NodeSignals, threshold_seconds: int) -> bool:
    """True if the node is a replica within ``threshold_seconds`` of lag (0 = unbounded)."""
    return decide_lag(signals.replication, threshold_seconds).within_threshold


def is_read_only(signals: NodeSignals) -> bool:
    return signals.read_only


def is_read_write(signals: NodeSignals) -> bool:
    return not signals.read_only


def is_single(signals: NodeSignals) -> bool:
    """Writable node with no replication involvement in either direction."""
    return (
        not signals.read_only
        and not signals.replication.is_replica
        and not signals.serving_binlogs
    )


def is_leader(signals: NodeSignals) -> bool:
    """Node streams binlogs to replicas and does not replicate itself."""
    return not signals.replication.is_replica and signals.serving_binlogs


def is_follower(signals: NodeSignals) -> bool:
    return signals.replication.is_replica


def is_topology_consistent(signals: NodeSignals) -> bool:
    """Node takes part in a replication topology, upstream or downstream."""
    return (
        not within_lag_threshold(signals, 0) and signals.serving_binlogs
    ) or signals.replication.is_replica


def is_master_role(signals: NodeSignals) -> bool:
    return (
        not signals.read_only
        and not signals.replication.is_replica
        and signals.serving_binlogs
    )


def is_replica_role(signals: NodeSignals, threshold_seconds: int = 0) -> bool:
    """Read-only replica within the lag threshold (0 = unbounded)."""
    return signals.read_only and within_lag_threshold(signals, threshold_seconds)


def is_galera_role(signals: NodeSignals) -> bool:
    return signals.galera.active


def replication_lag_detail(signals: NodeSignals) -> ClassificationResult:
    """Current lag of a replica, as text."""
    if not signals.replication.is_replica:
        return ClassificationResult(succeeded=False)

    lag = decide_lag(signals.replication, 0)
    return ClassificationResult(succeeded=True, detail=str(lag.lag_seconds))


def replication_master_detail(signals: NodeSignals) -> ClassificationResult:
    """Upstream ``host:port`` of a replica."""
    replication = signals.replication
    return ClassificationResult(
        succeeded=replication.is_replica, detail=replication.master_address
    )


def replicas_count_detail(signals: NodeSignals) -> ClassificationResult:
    """Number of downstream binlog streaming sessions."""
    return ClassificationResult(
        succeeded=signals.serving_binlogs, detail=str(signals.binlog_dump_count)
    )


def galera_state_detail(signals: NodeSignals) -> ClassificationResult:
    """Raw Galera membership state."""
    return ClassificationResult(
        succeeded=signals.galera.active, detail=signals.galera.raw_value
    )


Evaluator = Callable[[NodeSignals, int], ClassificationResult]


def _predicate(formula: Callable[[NodeSignals], bool]) -> Evaluator:
    """Wrap a boolean formula that ignores the threshold and has no detail."""

    def evaluate(signals: NodeSignals, threshold_seconds: int) -> ClassificationResult:
        return ClassificationResult(succeeded=formula(signals))

    return evaluate


def _detail(reader: Callable[[NodeSignals], ClassificationResult]) -> Evaluator:
    def evaluate(signals: NodeSignals, threshold_seconds: int) -> ClassificationResult:
        return reader(signals)

    return evaluate


def _replica_role_within(signals: NodeSignals, threshold_seconds: int) -> ClassificationResult:
    return ClassificationResult(succeeded=is_replica_role(signals, threshold_seconds))


def _master_role(signals: NodeSignals, threshold_seconds: int) -> ClassificationResult:
    """Master role, forced to succeed while the master marker file exists."""
    if signals.master_marker:
        return ClassificationResult(succeeded=True)
    return ClassificationResult(succeeded=is_master_role(signals))


@dataclass(frozen=True)
class Classification:
    """One named endpoint semantic.

    Attributes:
        name: Stable classification name (e.g. "role.master").
        description: Human-readable description, used in logs.
        signals: Raw signals the formula reads. Only these are probed.
        evaluate: Pure function of (signals, threshold_seconds).
    """

    name: str
    description: str
    signals: frozenset[Signal]
    evaluate: Evaluator


_R, _P, _B, _G = Signal.READ_ONLY, Signal.REPLICATION, Signal.BINLOG_DUMPS, Signal.GALERA
_M = Signal.MASTER_MARKER

CLASSIFICATIONS: dict[str, Classification] = {
    c.name: c
    for c in (
        Classification("status.ro", "status: readOnly", frozenset({_R}), _predicate(is_read_only)),
        Classification(
            "status.rw", "status: readable and writable", frozenset({_R}), _predicate(is_read_write)
        ),
        Classification(
            "status.single", "status: single", frozenset({_R, _P, _B}), _predicate(is_single)
        ),
        Classification(
            "status.leader", "status: leader", frozenset({_P, _B}), _predicate(is_leader)
        ),
        Classification(
            "status.follower", "status: follower", frozenset({_P}), _predicate(is_follower)
        ),
        Classification(
            "status.topology",
            "status: topology",
            frozenset({_P, _B}),
            _predicate(is_topology_consistent),
        ),
        Classification(
            "role.master", "role: master", frozenset({_M, _R, _P, _B}), _master_role
        ),
        Classification(
            "role.replica", "role: replica", frozenset({_R, _P}), _predicate(is_replica_role)
        ),
        Classification(
            "role.replica_by_lag", "role: replica by lag", frozenset({_R, _P}), _replica_role_within
        ),
        Classification("role.galera", "role: galera", frozenset({_G}), _predicate(is_galera_role)),
        Classification(
            "read.galera_state", "state: galera", frozenset({_G}), _detail(galera_state_detail)
        ),
        Classification(
            "read.replication_lag",
            "replication: lag",
            frozenset({_P}),
            _detail(replication_lag_detail),
        ),
        Classification(
            "read.replication_master",
            "replication: master",
            frozenset({_P}),
            _detail(replication_master_detail),
        ),
        Classification(
            "read.replicas_count",
            "replication: replicas count",
            frozenset({_B}),
            _detail(replicas_count_detail),
        ),
    )
}


def classify(name: str, signals: NodeSignals, threshold_seconds: int = 0) -> ClassificationResult:
    """Evaluate a named classification over an already-collected snapshot.

    Raises:
        KeyError: If ``name`` is not a known classification.
    """
    return CLASSIFICATIONS[name].evaluate(signals, threshold_seconds)
