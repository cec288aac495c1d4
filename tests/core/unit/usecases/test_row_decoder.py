"""Unit tests for the diagnostic row decoder."""

import pytest
from hypothesis import given, strategies as st

from mysql_health.adapters.ports import TabularResult
from mysql_health.domain.signals import NOT_A_REPLICA, GaleraState, ReplicationRow
from mysql_health.usecases.row_decoder import (
    as_text,
    decode_galera_state,
    decode_read_only,
    decode_replication_row,
    parse_lag,
)


def status(**columns: object) -> TabularResult:
    return TabularResult(columns=tuple(columns), rows=(tuple(columns.values()),))


@pytest.mark.tier(1)
@pytest.mark.tra("UseCase.RowDecoder")
class TestDecodeReplicationRow:
    """Test replica status decoding."""

    def test_failed_query_is_not_a_replica(self) -> None:
        assert decode_replication_row(None) == NOT_A_REPLICA

    def test_empty_result_is_not_a_replica(self) -> None:
        result = TabularResult(columns=("Master_Host", "Seconds_Behind_Master"))
        assert decode_replication_row(result) == NOT_A_REPLICA

    def test_full_row(self) -> None:
        row = decode_replication_row(
            status(Master_Host="db1", Master_Port=3306, Seconds_Behind_Master="12")
        )
        assert row == ReplicationRow(
            is_replica=True, master_host="db1", master_port="3306", lag_seconds=12
        )

    def test_source_spelling(self) -> None:
        row = decode_replication_row(
            status(Source_Host="db1", Source_Port=3307, Seconds_Behind_Source=4)
        )
        assert row.master_address == "db1:3307"
        assert row.lag_seconds == 4

    def test_empty_host_is_not_a_replica(self) -> None:
        result = status(Master_Host="", Master_Port=3306, Seconds_Behind_Master="0")
        assert decode_replication_row(result) == NOT_A_REPLICA

    def test_null_host_is_not_a_replica(self) -> None:
        result = status(Master_Host=None, Seconds_Behind_Master=None)
        assert decode_replication_row(result) == NOT_A_REPLICA

    def test_null_lag_is_unset(self) -> None:
        row = decode_replication_row(status(Master_Host="db1", Seconds_Behind_Master=None))
        assert row.is_replica is True
        assert row.lag_seconds is None

    def test_missing_lag_column_is_unset(self) -> None:
        row = decode_replication_row(status(Master_Host="db1"))
        assert row.lag_seconds is None

    def test_empty_lag_is_unset(self) -> None:
        row = decode_replication_row(status(Master_Host="db1", Seconds_Behind_Master=""))
        assert row.lag_seconds is None

    def test_zero_lag_is_present(self) -> None:
        row = decode_replication_row(status(Master_Host="db1", Seconds_Behind_Master="0"))
        assert row.lag_seconds == 0

    def test_bytes_values(self) -> None:
        row = decode_replication_row(
            status(Master_Host=b"db1", Master_Port=b"3306", Seconds_Behind_Master=b"5")
        )
        assert row.master_address == "db1:3306"
        assert row.lag_seconds == 5

    def test_column_names_are_case_sensitive(self) -> None:
        result = status(master_host="db1", seconds_behind_master="3")
        assert decode_replication_row(result) == NOT_A_REPLICA

    def test_unrecognized_columns_ignored(self) -> None:
        row = decode_replication_row(
            status(Slave_IO_State="Waiting", Master_Host="db1", Last_Error="boom")
        )
        assert row.master_host == "db1"

    def test_only_first_row_considered(self) -> None:
        result = TabularResult(
            columns=("Master_Host", "Seconds_Behind_Master"),
            rows=(("db1", "1"), ("db2", "99")),
        )
        row = decode_replication_row(result)
        assert row.master_host == "db1"
        assert row.lag_seconds == 1


@pytest.mark.tier(1)
@pytest.mark.tra("UseCase.RowDecoder")
class TestParseLag:
    """Test lag parsing."""

    @pytest.mark.parametrize(
        "value,expected",
        [("0", 0), ("42", 42), (" 7 ", 7), ("abc", 0), ("1.5", 0), ("-3", -3)],
    )
    def test_parse(self, value: str, expected: int) -> None:
        assert parse_lag(value) == expected

    @given(st.integers(min_value=0, max_value=10**12))
    def test_parses_any_decimal(self, lag: int) -> None:
        assert parse_lag(str(lag)) == lag


@pytest.mark.tier(1)
@pytest.mark.tra("UseCase.RowDecoder")
class TestAsText:
    """Test driver value normalization."""

    def test_none_kept(self) -> None:
        assert as_text(None) is None

    @pytest.mark.parametrize("value", [b"ON", bytearray(b"ON"), memoryview(b"ON"), "ON"])
    def test_text_and_bytes(self, value: object) -> None:
        assert as_text(value) == "ON"

    def test_int(self) -> None:
        assert as_text(4) == "4"


@pytest.mark.tier(1)
@pytest.mark.tra("UseCase.RowDecoder")
class TestDecodeReadOnly:
    """Test read_only variable decoding."""

    def _variable(self, value: object) -> TabularResult:
        return TabularResult(columns=("Variable_name", "Value"), rows=(("read_only", value),))

    @pytest.mark.parametrize("value", ["ON", "on", "1", b"ON"])
    def test_read_only(self, value: object) -> None:
        assert decode_read_only(self._variable(value)) is True

    @pytest.mark.parametrize("value", ["OFF", "off", "0", "", None])
    def test_writable(self, value: object) -> None:
        assert decode_read_only(self._variable(value)) is False

    def test_failed_query_is_writable(self) -> None:
        assert decode_read_only(None) is False

    def test_missing_row_is_writable(self) -> None:
        assert decode_read_only(TabularResult(columns=("Variable_name", "Value"))) is False

    def test_unknown_value_column_uses_last_column(self) -> None:
        result = TabularResult(columns=("name", "setting"), rows=(("read_only", "ON"),))
        assert decode_read_only(result) is True


@pytest.mark.tier(1)
@pytest.mark.tra("UseCase.RowDecoder")
class TestDecodeGaleraState:
    """Test wsrep_local_state decoding."""

    def _state(self, value: object) -> TabularResult:
        return TabularResult(columns=("v",), rows=((value,),))

    def test_synced(self) -> None:
        assert decode_galera_state(self._state("4")) == GaleraState(active=True, raw_value="4")

    def test_synced_as_integer(self) -> None:
        assert decode_galera_state(self._state(4)).active is True

    def test_donor_state_is_inactive_but_reported(self) -> None:
        assert decode_galera_state(self._state("2")) == GaleraState(active=False, raw_value="2")

    def test_missing_row(self) -> None:
        assert decode_galera_state(TabularResult(columns=("v",))) == GaleraState()

    def test_failed_query(self) -> None:
        assert decode_galera_state(None) == GaleraState()
