"""Domain layer: Entities with zero external dependencies."""

from mysql_health.domain.exceptions import (
    DatabaseUnreachableError,
    MySQLHealthConfigError,
    ProbeUnavailableError,
)
from mysql_health.domain.settings import DatabaseSettings, ServiceSettings
from mysql_health.domain.signals import (
    ClassificationResult,
    GaleraState,
    LagResult,
    NodeSignals,
    ReplicationRow,
)

__all__ = [
    "MySQLHealthConfigError",
    "DatabaseUnreachableError",
    "ProbeUnavailableError",
    "DatabaseSettings",
    "ServiceSettings",
    "ClassificationResult",
    "GaleraState",
    "LagResult",
    "NodeSignals",
    "ReplicationRow",
]
