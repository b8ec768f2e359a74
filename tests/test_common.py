import pytest
from hypothesis import given
from hypothesis import strategies as st

from evmprecompiles.common import (
    Log,
    OutOfGasError,
    PrecompileError,
    PrecompileFailure,
    PrecompileOutput,
    calc_linear_cost_u32,
    gas_query,
    make_address,
    u256_to_bytes,
)


def _u8_to_address(x):
    return bytes(19) + bytes([x])


def _split_address(address):
    return int.from_bytes(address[:4], "big"), int.from_bytes(address[4:], "big")


def test_make_address_small_values():
    for i in range(255):
        assert make_address(0, i) == _u8_to_address(i)


@given(st.binary(min_size=20, max_size=20))
def test_make_address_round_trip(address):
    x, y = _split_address(address)
    assert make_address(x, y) == address


def test_make_address_rejects_out_of_range():
    with pytest.raises(ValueError):
        make_address(1 << 32, 0)
    with pytest.raises(ValueError):
        make_address(0, 1 << 128)
    with pytest.raises(ValueError):
        make_address(-1, 0)


def test_linear_cost_empty_is_base():
    assert calc_linear_cost_u32(0, 15, 3) == 15


def test_linear_cost_word_boundaries():
    assert calc_linear_cost_u32(1, 15, 3) == calc_linear_cost_u32(32, 15, 3)
    assert calc_linear_cost_u32(33, 15, 3) == calc_linear_cost_u32(64, 15, 3)
    assert calc_linear_cost_u32(33, 15, 3) - calc_linear_cost_u32(32, 15, 3) == 3


@given(st.integers(min_value=0, max_value=10_000))
def test_linear_cost_is_monotonic(length):
    assert calc_linear_cost_u32(length + 1, 60, 12) >= calc_linear_cost_u32(length, 60, 12)


def test_gas_query_within_limit():
    assert gas_query(500, 500) == 500
    assert gas_query(0, 10) == 0


def test_gas_query_over_limit():
    with pytest.raises(OutOfGasError):
        gas_query(501, 500)


def test_out_of_gas_is_precompile_error():
    with pytest.raises(PrecompileError):
        gas_query(2, 1)


def test_failure_keeps_message():
    err = PrecompileFailure("ERR_BN128_INVALID_LEN")
    assert err.message == "ERR_BN128_INVALID_LEN"
    assert str(err) == "ERR_BN128_INVALID_LEN"


def test_without_logs():
    out = PrecompileOutput.without_logs(21, b"\x01\x02")
    assert out.cost == 21
    assert out.output == b"\x01\x02"
    assert out.logs == []


def test_log_defaults():
    log = Log()
    assert log.address == bytes(20)
    assert log.topics == []
    assert log.data == b""


def test_u256_to_bytes_one():
    assert u256_to_bytes(1) == bytes(31) + b"\x01"


@given(st.integers(min_value=0, max_value=(1 << 256) - 1))
def test_u256_round_trip(value):
    encoded = u256_to_bytes(value)
    assert len(encoded) == 32
    assert int.from_bytes(encoded, "big") == value


def test_u256_rejects_out_of_range():
    with pytest.raises(ValueError):
        u256_to_bytes(1 << 256)
    with pytest.raises(ValueError):
        u256_to_bytes(-1)