"""Use cases: Application logic layer."""

from mysql_health.usecases.classification import (
    CLASSIFICATIONS,
    Classification,
    Signal,
    classify,
)
from mysql_health.usecases.config_parser import ConfigParser
from mysql_health.usecases.lag_evaluator import LagEvaluator, decide_lag
from mysql_health.usecases.mycnf_parser import MyCnfParser
from mysql_health.usecases.node_classifier import NodeClassifier
from mysql_health.usecases.row_decoder import (
    decode_galera_state,
    decode_read_only,
    decode_replication_row,
)
from mysql_health.usecases.signal_collector import SignalCollector
from mysql_health.usecases.signal_probe import SignalProbe

__all__ = [
    "CLASSIFICATIONS",
    "Classification",
    "Signal",
    "classify",
    "ConfigParser",
    "LagEvaluator",
    "decide_lag",
    "MyCnfParser",
    "NodeClassifier",
    "decode_galera_state",
    "decode_read_only",
    "decode_replication_row",
    "SignalCollector",
    "SignalProbe",
]
