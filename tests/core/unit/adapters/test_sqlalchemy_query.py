"""Tests for SQLAlchemyQueryAdapter.

Runs against an in-memory SQLite engine: the adapter is driver-agnostic
and only MySQL-specific statements differ.
"""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from mysql_health.adapters.ports import DiagnosticQueryPort
from mysql_health.adapters.sqlalchemy_query import SQLAlchemyQueryAdapter
from mysql_health.domain.exceptions import ProbeUnavailableError


@pytest.fixture
def adapter():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    adapter = SQLAlchemyQueryAdapter(engine)
    yield adapter
    adapter.dispose()


@pytest.mark.tier(1)
@pytest.mark.tra("Adapter.SQLAlchemyQuery")
class TestSQLAlchemyQueryAdapter:
    """Test statement execution through SQLAlchemy."""

    def test_implements_protocol(self, adapter) -> None:
        assert isinstance(adapter, DiagnosticQueryPort)

    def test_fetch_columns_and_rows(self, adapter) -> None:
        result = adapter.fetch("SELECT 'read_only' AS Variable_name, 'OFF' AS Value")
        assert result.columns == ("Variable_name", "Value")
        assert result.rows == (("read_only", "OFF"),)

    def test_fetch_all_rows(self, adapter) -> None:
        result = adapter.fetch("SELECT 1 AS n UNION ALL SELECT 2")
        assert result.rows == ((1,), (2,))

    def test_fetch_null(self, adapter) -> None:
        result = adapter.fetch("SELECT NULL AS Seconds_Behind_Master")
        assert result.first_row() == {"Seconds_Behind_Master": None}

    def test_ping(self, adapter) -> None:
        adapter.ping()

    def test_failed_statement_raises_probe_error(self, adapter) -> None:
        with pytest.raises(ProbeUnavailableError) as exc_info:
            adapter.fetch("SHOW SLAVE STATUS")

        assert exc_info.value.statement == "SHOW SLAVE STATUS"
        assert exc_info.value.original_error is not None

    def test_unreachable_database(self, tmp_path) -> None:
        missing = tmp_path / "missing" / "node.db"
        adapter = SQLAlchemyQueryAdapter(create_engine(f"sqlite:///{missing}"))

        with pytest.raises(ProbeUnavailableError):
            adapter.ping()
