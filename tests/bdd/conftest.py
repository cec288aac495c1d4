"""Shared fixtures for BDD tests."""

import pytest

from mysql_health.adapters.fakes import FakeMetricsAdapter


@pytest.fixture
def metrics() -> FakeMetricsAdapter:
    """Metrics double for scenarios that assert on emitted metrics."""
    return FakeMetricsAdapter()
