"""Interface adapters: database access and metrics."""

from mysql_health.adapters.ports import DiagnosticQueryPort, TabularResult
from mysql_health.adapters.metrics_port import MetricsPort, NoOpMetricsAdapter
from mysql_health.adapters.sqlalchemy_query import SQLAlchemyQueryAdapter

__all__ = [
    "DiagnosticQueryPort",
    "TabularResult",
    "MetricsPort",
    "NoOpMetricsAdapter",
    "SQLAlchemyQueryAdapter",
]
