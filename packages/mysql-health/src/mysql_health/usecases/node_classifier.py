"""Node classifier use case: answers one named classification per request."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from mysql_health.domain.signals import ClassificationResult
from mysql_health.usecases.classification import CLASSIFICATIONS, Signal
from mysql_health.usecases.lag_evaluator import decide_lag
from mysql_health.usecases.signal_collector import SignalCollector

if TYPE_CHECKING:
    from mysql_health.adapters.metrics_port import MetricsPort

logger = logging.getLogger(__name__)


class NodeClassifier:
    """Answers classifications of the monitored node.

    Each call collects the signals its classification needs and evaluates
    the pure formula over that snapshot. Probe failures have already been
    turned into negative signals, so a classification answers False
    instead of raising.

    Dependencies:
        - SignalCollector: Probes and decodes the raw signals
        - MetricsPort (optional): Records answers and observed lag

    Thread safety:
        Stateless. The lag threshold is a call argument and never stored.
    """

    def __init__(
        self,
        collector: SignalCollector,
        metrics: MetricsPort | None = None,
    ) -> None:
        """Initialize the node classifier.

        Args:
            collector: Collector used to snapshot node signals.
            metrics: Optional port for emitting classification metrics.
        """
        self._collector = collector
        self._metrics = metrics

    def classify(self, name: str, threshold_seconds: int = 0) -> ClassificationResult:
        """Answer one classification.

        Args:
            name: Classification name, a key of CLASSIFICATIONS.
            threshold_seconds: Lag threshold for "role.replica_by_lag",
                0 for unbounded. Ignored by other classifications.

        Returns:
            ClassificationResult with the answer and its detail.

        Raises:
            KeyError: If ``name`` is not a known classification.
            ValueError: If ``threshold_seconds`` is negative.
        """
        classification = CLASSIFICATIONS[name]
        if threshold_seconds < 0:
            raise ValueError(f"threshold_seconds cannot be negative, got: {threshold_seconds}")

        logger.info(f"Checking database {classification.description}...")

        signals = self._collector.collect(classification.signals)
        result = classification.evaluate(signals, threshold_seconds)

        if self._metrics is not None:
            self._metrics.record_classification(name, result.succeeded)
            if Signal.REPLICATION in classification.signals and not signals.master_marker:
                self._metrics.set_replication_lag(
                    decide_lag(signals.replication, 0).lag_seconds
                )

        return result
