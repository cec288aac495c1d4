"""Fixtures for FastAPI adapter unit tests."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from mysql_health.adapters.fakes import FakeMetricsAdapter, FakeNode
from mysql_health.domain.settings import ServiceSettings
from mysql_health.factories import create_node_classifier
from mysql_health.usecases.node_classifier import NodeClassifier
from mysql_health_fastapi.app import create_app


@pytest.fixture
def node() -> FakeNode:
    """A standalone, writable node with no replication and no Galera."""
    return FakeNode()


@pytest.fixture
def metrics() -> FakeMetricsAdapter:
    return FakeMetricsAdapter()


@pytest.fixture
def classifier(node: FakeNode, metrics: FakeMetricsAdapter) -> NodeClassifier:
    return create_node_classifier(node, metrics=metrics)


@pytest.fixture
def app(classifier: NodeClassifier) -> FastAPI:
    return create_app(classifier, ServiceSettings())


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)
