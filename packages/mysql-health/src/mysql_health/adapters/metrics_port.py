"""Port interface and no-op implementation for metrics collection.

Metrics ports follow fire-and-forget semantics: implementations may
buffer, sample, or drop metrics as needed. No exceptions should propagate.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class MetricsPort(Protocol):
    """Port interface for metrics collection.

    Contract:
        - All methods are fire-and-forget (no return value, no exceptions)
        - Thread safety is implementation-defined
        - Implementations may no-op if metrics are disabled
    """

    def record_classification(self, name: str, succeeded: bool) -> None:
        """Record the answer of one classification request.

        Args:
            name: Classification name (e.g. "role.replica").
            succeeded: The answer returned to the caller.
        """
        ...

    def set_replication_lag(self, seconds: int) -> None:
        """Set the last observed replication lag gauge.

        Args:
            seconds: Lag in seconds, 0 when the node is not a replica.
        """
        ...


class NoOpMetricsAdapter:
    """No-operation metrics adapter for when metrics are disabled.

    Example:
        >>> adapter = NoOpMetricsAdapter()
        >>> adapter.record_classification("status.ro", True)  # Does nothing
    """

    def record_classification(self, name: str, succeeded: bool) -> None:
        """No-op."""
        pass

    def set_replication_lag(self, seconds: int) -> None:
        """No-op."""
        pass
