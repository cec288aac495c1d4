"""Fixtures for mysql-health core unit tests."""

import pytest

from mysql_health.adapters.fakes import FakeMetricsAdapter, FakeNode
from mysql_health.usecases.lag_evaluator import LagEvaluator
from mysql_health.usecases.node_classifier import NodeClassifier
from mysql_health.usecases.signal_collector import SignalCollector
from mysql_health.usecases.signal_probe import SignalProbe


@pytest.fixture
def node() -> FakeNode:
    """A standalone, writable node with no replication and no Galera."""
    return FakeNode()


@pytest.fixture
def probe(node: FakeNode) -> SignalProbe:
    return SignalProbe(node)


@pytest.fixture
def collector(probe: SignalProbe) -> SignalCollector:
    return SignalCollector(probe)


@pytest.fixture
def lag_evaluator(probe: SignalProbe) -> LagEvaluator:
    return LagEvaluator(probe)


@pytest.fixture
def metrics() -> FakeMetricsAdapter:
    return FakeMetricsAdapter()


@pytest.fixture
def classifier(collector: SignalCollector, metrics: FakeMetricsAdapter) -> NodeClassifier:
    """NodeClassifier over the fake node, recording metrics."""
    return NodeClassifier(collector, metrics=metrics)
