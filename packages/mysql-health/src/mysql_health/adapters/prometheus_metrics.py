"""Prometheus metrics adapter for mysql-health.

Implements MetricsPort using prometheus-client library.
Gracefully handles missing prometheus-client (raises ImportError at init).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from prometheus_client import CollectorRegistry, Counter, Gauge


class PrometheusMetricsAdapter:
    """Prometheus implementation of MetricsPort.

    This adapter requires prometheus-client to be installed:
        pip install mysql-health-check[metrics]

    Example:
        >>> adapter = PrometheusMetricsAdapter(prefix="mysql_health")
        >>> adapter.record_classification("role.master", True)
        >>> adapter.set_replication_lag(3)

    Raises:
        ImportError: If prometheus-client is not installed.
    """

    def __init__(
        self,
        prefix: str = "mysql_health",
        registry: CollectorRegistry | None = None,
    ) -> None:
        """Initialize Prometheus collectors.

        Args:
            prefix: Metric name prefix. Defaults to "mysql_health".
            registry: Registry to register collectors in. Defaults to the
                global prometheus-client registry.

        Raises:
            ImportError: If prometheus-client is not installed.
        """
        # Import here to make prometheus-client optional
        from prometheus_client import REGISTRY, Counter, Gauge

        if registry is None:
            registry = REGISTRY

        self.registry = registry
        self._classifications: Counter = Counter(
            f"{prefix}_classifications",
            "Classification answers by name and outcome",
            ["classification", "outcome"],
            registry=registry,
        )
        self._replication_lag: Gauge = Gauge(
            f"{prefix}_replication_lag_seconds",
            "Last observed replication lag in seconds (0 when not a replica)",
            registry=registry,
        )

    def record_classification(self, name: str, succeeded: bool) -> None:
        """Increment the classification counter.

        Args:
            name: Classification name.
            succeeded: Outcome, exported as label "success" or "failure".
        """
        outcome = "success" if succeeded else "failure"
        self._classifications.labels(classification=name, outcome=outcome).inc()

    def set_replication_lag(self, seconds: int) -> None:
        """Set replication lag gauge."""
        self._replication_lag.set(seconds)
