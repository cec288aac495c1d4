"""Signal collector use case: builds a NodeSignals snapshot on demand."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from mysql_health.domain.signals import NOT_A_REPLICA, GaleraState, NodeSignals
from mysql_health.usecases.classification import Signal
from mysql_health.usecases.row_decoder import (
    decode_galera_state,
    decode_read_only,
    decode_replication_row,
)
from mysql_health.usecases.signal_probe import SignalProbe

logger = logging.getLogger(__name__)


class SignalCollector:
    """Probes and decodes the signals a classification needs.

    Signals that were not requested are not probed and keep the negative
    default of NodeSignals. Every call probes again; nothing is cached.

    When the master marker is requested and its file exists, the database
    is not queried at all and only ``master_marker`` is set.
    """

    def __init__(
        self, probe: SignalProbe, master_marker_path: str | Path | None = None
    ) -> None:
        """Initialize the collector.

        Args:
            probe: Signal probe for the monitored node.
            master_marker_path: File whose presence marks the node as master.
                None or an empty string disables the check.
        """
        self._probe = probe
        self._master_marker_path = Path(master_marker_path) if master_marker_path else None

    def master_marker_present(self) -> bool:
        """True if the master marker file exists."""
        if self._master_marker_path is None:
            return False
        return self._master_marker_path.exists()

    def collect(self, signals: Iterable[Signal]) -> NodeSignals:
        """Collect a point-in-time snapshot of the requested signals.

        Args:
            signals: Signals to probe.

        Returns:
            NodeSignals with requested signals observed and all others at
            their negative default.
        """
        requested = frozenset(signals)

        if Signal.MASTER_MARKER in requested and self.master_marker_present():
            logger.debug(f"Master marker {self._master_marker_path} present, skipping database")
            return NodeSignals(master_marker=True)

        read_only = False
        if Signal.READ_ONLY in requested:
            read_only = decode_read_only(self._probe.read_only_variable())

        replication = NOT_A_REPLICA
        if Signal.REPLICATION in requested:
            replication = decode_replication_row(self._probe.replication_status())

        binlog_dump_count = 0
        if Signal.BINLOG_DUMPS in requested:
            binlog_dump_count = self._probe.binlog_dump_count()

        galera = GaleraState()
        if Signal.GALERA in requested:
            galera = decode_galera_state(self._probe.galera_local_state())

        return NodeSignals(
            read_only=read_only,
            replication=replication,
            binlog_dump_count=binlog_dump_count,
            galera=galera,
        )

    def collect_all(self) -> NodeSignals:
        """Collect every signal."""
        return self.collect(Signal)
