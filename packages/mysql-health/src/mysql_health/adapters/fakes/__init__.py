"""Fake adapters for testing.

This module provides test doubles for port interfaces, enabling
deterministic testing without a running MySQL server.
"""

from mysql_health.adapters.fakes.fake_metrics import FakeMetricsAdapter, MetricCall
from mysql_health.adapters.fakes.fake_node import FakeNode
from mysql_health.adapters.fakes.fake_query import FakeDiagnosticQuery

__all__ = [
    "FakeDiagnosticQuery",
    "FakeNode",
    "FakeMetricsAdapter",
    "MetricCall",
]
