"""Lag evaluator use case for replica lag thresholds.

A replica whose ``Seconds_Behind_Master`` is ``0`` is fully caught up, while
a node that reports no lag at all is not replicating. Both stringify to
"0"; this module keeps them apart.
"""

from __future__ import annotations

from mysql_health.domain.signals import LagResult, ReplicationRow, effective_threshold
from mysql_health.usecases.row_decoder import decode_replication_row
from mysql_health.usecases.signal_probe import SignalProbe

NOT_WITHIN_THRESHOLD = LagResult(within_threshold=False, lag_seconds=0)


def decide_lag(replication: ReplicationRow, threshold_seconds: int) -> LagResult:
    """Decide whether a decoded replica row is within a lag threshold.

    Pure function. Decision table:
    - lag unset (not a replica, or the server reported NULL): (False, 0)
    - 0 < lag <= threshold: (True, lag)
    - lag == 0 with the field present (caught-up replica): (True, 0)
    - otherwise: (False, lag)

    Args:
        replication: Decoded replica status.
        threshold_seconds: Upper bound in seconds, 0 for unbounded.

    Returns:
        LagResult with the decision and the observed lag.
    """
    upper_bound = effective_threshold(threshold_seconds)

    lag = replication.lag_seconds
    if lag is None:
        return NOT_WITHIN_THRESHOLD

    if 0 < lag <= upper_bound:
        return LagResult(within_threshold=True, lag_seconds=lag)

    if lag == 0:
        return LagResult(within_threshold=True, lag_seconds=0)

    return LagResult(within_threshold=False, lag_seconds=lag)


class LagEvaluator:
    """Evaluates the current replication lag of the node against a threshold.

    The threshold is always an explicit argument; the evaluator keeps no
    state between calls, so concurrent requests with different thresholds
    cannot observe each other's value.
    """

    def __init__(self, probe: SignalProbe) -> None:
        """Initialize the lag evaluator.

        Args:
            probe: Signal probe used to read the replica status.
        """
        self._probe = probe

    def evaluate_lag(self, threshold_seconds: int = 0) -> LagResult:
        """Fetch the replica status and decide it against the threshold.

        Args:
            threshold_seconds: Upper bound in seconds, 0 for unbounded.

        Returns:
            LagResult. (False, 0) when there is no status row at all.
        """
        result = self._probe.replication_status()
        if result is None or result.is_empty:
            return NOT_WITHIN_THRESHOLD

        return decide_lag(decode_replication_row(result), threshold_seconds)
