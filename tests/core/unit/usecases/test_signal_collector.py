"""Unit tests for SignalCollector."""

from pathlib import Path

import pytest

from mysql_health.adapters.fakes import FakeNode
from mysql_health.domain.signals import NOT_A_REPLICA, GaleraState, NodeSignals
from mysql_health.usecases.classification import Signal
from mysql_health.usecases.signal_collector import SignalCollector
from mysql_health.usecases.signal_probe import (
    BINLOG_DUMP_COUNT_STATEMENT,
    GALERA_STATE_STATEMENT,
    READ_ONLY_STATEMENT,
    SignalProbe,
)


@pytest.mark.tier(1)
@pytest.mark.tra("UseCase.SignalCollector")
class TestSignalCollector:
    """Test on-demand signal snapshots."""

    def test_collect_all_on_standalone_node(self, collector: SignalCollector) -> None:
        assert collector.collect_all() == NodeSignals()

    def test_collect_all_on_replica(self, node: FakeNode, collector: SignalCollector) -> None:
        node.set_read_only(True)
        node.set_replica(host="db1", port=3306, lag="5")
        node.set_binlog_dumps(1)
        node.set_galera_state(None)

        signals = collector.collect_all()

        assert signals.read_only is True
        assert signals.replication.master_address == "db1:3306"
        assert signals.replication.lag_seconds == 5
        assert signals.binlog_dump_count == 1
        assert signals.galera == GaleraState()

    def test_only_requested_signals_are_probed(
        self, node: FakeNode, collector: SignalCollector
    ) -> None:
        node.set_read_only(True)
        node.set_replica()

        signals = collector.collect([Signal.READ_ONLY])

        assert node.statements == [READ_ONLY_STATEMENT]
        assert signals.read_only is True
        assert signals.replication == NOT_A_REPLICA

    def test_unrequested_signals_keep_negative_default(
        self, node: FakeNode, collector: SignalCollector
    ) -> None:
        node.set_binlog_dumps(4)
        node.set_galera_state("4")

        signals = collector.collect([Signal.GALERA])

        assert node.statements == [GALERA_STATE_STATEMENT]
        assert signals.galera.active is True
        assert signals.binlog_dump_count == 0

    def test_each_signal_probed_once(self, node: FakeNode, collector: SignalCollector) -> None:
        collector.collect([Signal.BINLOG_DUMPS, Signal.BINLOG_DUMPS])
        assert node.statements == [BINLOG_DUMP_COUNT_STATEMENT]

    def test_failed_probes_are_negative(self, node: FakeNode, collector: SignalCollector) -> None:
        node.set_read_only(True)
        node.set_replica()
        node.set_binlog_dumps(2)
        node.set_galera_state("4")
        node.set_unreachable()

        assert collector.collect_all() == NodeSignals()

    def test_snapshots_are_not_cached(self, node: FakeNode, collector: SignalCollector) -> None:
        assert collector.collect([Signal.READ_ONLY]).read_only is False
        node.set_read_only(True)
        assert collector.collect([Signal.READ_ONLY]).read_only is True


@pytest.mark.tier(1)
@pytest.mark.tra("UseCase.SignalCollector")
class TestMasterMarker:
    """Test the master marker file check."""

    def test_present_marker_skips_database(self, node: FakeNode, tmp_path: Path) -> None:
        marker = tmp_path / "master"
        marker.touch()
        collector = SignalCollector(SignalProbe(node), master_marker_path=marker)

        signals = collector.collect([Signal.MASTER_MARKER, Signal.READ_ONLY])

        assert signals == NodeSignals(master_marker=True)
        assert node.statements == []

    def test_absent_marker_falls_through(self, node: FakeNode, tmp_path: Path) -> None:
        collector = SignalCollector(SignalProbe(node), master_marker_path=tmp_path / "master")

        signals = collector.collect([Signal.MASTER_MARKER, Signal.READ_ONLY])

        assert signals.master_marker is False
        assert node.statements == [READ_ONLY_STATEMENT]

    def test_marker_ignored_unless_requested(self, node: FakeNode, tmp_path: Path) -> None:
        marker = tmp_path / "master"
        marker.touch()
        collector = SignalCollector(SignalProbe(node), master_marker_path=marker)

        assert collector.collect([Signal.READ_ONLY]).master_marker is False
        assert node.statements == [READ_ONLY_STATEMENT]

    @pytest.mark.parametrize("path", [None, ""])
    def test_disabled_marker(self, node: FakeNode, path: str | None) -> None:
        collector = SignalCollector(SignalProbe(node), master_marker_path=path)
        assert collector.master_marker_present() is False
