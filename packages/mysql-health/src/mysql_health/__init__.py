"""mysql-health: Role and status classification for MySQL nodes."""

__version__ = "0.1.0"

from mysql_health.domain.settings import DatabaseSettings, ServiceSettings
from mysql_health.domain.exceptions import MySQLHealthConfigError
from mysql_health.domain.signals import ClassificationResult, LagResult
from mysql_health.usecases.lag_evaluator import LagEvaluator
from mysql_health.usecases.node_classifier import NodeClassifier

__all__ = [
    "DatabaseSettings",
    "ServiceSettings",
    "MySQLHealthConfigError",
    "ClassificationResult",
    "LagResult",
    "LagEvaluator",
    "NodeClassifier",
]
