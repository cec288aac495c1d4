"""Fake metrics adapter for testing.

Provides a test double for MetricsPort that records all metric updates
for assertion in tests.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MetricCall:
    """Record of a single metric update.

    Attributes:
        metric_name: Name of the metric that was updated.
        value: Value that was set.
    """

    metric_name: str
    value: object


class FakeMetricsAdapter:
    """Fake implementation of MetricsPort for testing.

    Example:
        >>> fake = FakeMetricsAdapter()
        >>> fake.record_classification("status.ro", True)
        >>> fake.calls
        [MetricCall(metric_name='classification', value=('status.ro', True))]
    """

    def __init__(self) -> None:
        """Initialize with no recorded state."""
        self._replication_lag: int | None = None
        self._calls: list[MetricCall] = []

    @property
    def calls(self) -> list[MetricCall]:
        """Return a copy of all metric update calls, in order of invocation."""
        return list(self._calls)

    @property
    def current_replication_lag(self) -> int | None:
        """Return last set replication lag, or None if never set."""
        return self._replication_lag

    def outcomes(self, name: str) -> list[bool]:
        """Return every recorded outcome of one classification."""
        return [
            call.value[1]  # type: ignore[index]
            for call in self._calls
            if call.metric_name == "classification" and call.value[0] == name  # type: ignore[index]
        ]

    def record_classification(self, name: str, succeeded: bool) -> None:
        """Record a classification answer."""
        self._calls.append(MetricCall("classification", (name, succeeded)))

    def set_replication_lag(self, seconds: int) -> None:
        """Record replication lag update."""
        self._replication_lag = seconds
        self._calls.append(MetricCall("replication_lag", seconds))

    def reset(self) -> None:
        """Reset all state and calls."""
        self._replication_lag = None
        self._calls.clear()
