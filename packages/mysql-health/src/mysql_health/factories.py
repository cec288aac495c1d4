"""Factory functions wiring the classifier to a real database.

Provides factory methods to build the SQLAlchemy engine, the query adapter
and the use cases from settings.
"""

from __future__ import annotations

import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import URL, Engine

from mysql_health.adapters.metrics_port import MetricsPort
from mysql_health.adapters.ports import DiagnosticQueryPort
from mysql_health.adapters.sqlalchemy_query import SQLAlchemyQueryAdapter
from mysql_health.domain.exceptions import DatabaseUnreachableError, ProbeUnavailableError
from mysql_health.domain.settings import DatabaseSettings
from mysql_health.usecases.node_classifier import NodeClassifier
from mysql_health.usecases.signal_collector import SignalCollector
from mysql_health.usecases.signal_probe import SignalProbe

logger = logging.getLogger(__name__)

DRIVER_NAME = "mysql+pymysql"


def build_database_url(settings: DatabaseSettings) -> URL:
    """Build the SQLAlchemy URL for the monitored node.

    A unix socket, when configured, is passed to PyMySQL as ``unix_socket``
    and the host/port are ignored by the driver.
    """
    query: dict[str, str] = {}
    if settings.socket is not None:
        query["unix_socket"] = settings.socket

    return URL.create(
        DRIVER_NAME,
        username=settings.user,
        password=settings.password,
        host=None if settings.uses_socket else settings.host,
        port=None if settings.uses_socket else settings.port,
        database=settings.database,
        query=query,
    )


def create_database_engine(settings: DatabaseSettings) -> Engine:
    """Create a pooled, thread-safe engine for the monitored node."""
    return create_engine(
        build_database_url(settings),
        pool_size=settings.pool_size,
        pool_pre_ping=True,
        connect_args={"connect_timeout": settings.connect_timeout},
    )


def create_query_adapter(settings: DatabaseSettings) -> SQLAlchemyQueryAdapter:
    """Create a DiagnosticQueryPort backed by SQLAlchemy and PyMySQL."""
    return SQLAlchemyQueryAdapter(create_database_engine(settings))


def check_connectivity(query_port: DiagnosticQueryPort) -> None:
    """Verify the database answers before serving requests.

    Raises:
        DatabaseUnreachableError: If the database cannot be reached.
    """
    try:
        query_port.ping()
    except ProbeUnavailableError as e:
        raise DatabaseUnreachableError(
            f"Cannot connect to database: {e.original_error}", original_error=e
        ) from e

    logger.info("Database connectivity check passed")


def create_node_classifier(
    query_port: DiagnosticQueryPort,
    replication_status_statement: str = "SHOW SLAVE STATUS",
    metrics: MetricsPort | None = None,
    master_marker_path: str | None = None,
) -> NodeClassifier:
    """Wire probe, collector and classifier around a query port."""
    probe = SignalProbe(query_port, replication_status_statement=replication_status_statement)
    collector = SignalCollector(probe, master_marker_path=master_marker_path)
    return NodeClassifier(collector, metrics=metrics)
