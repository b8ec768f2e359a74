import hashlib
import struct

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from evmprecompiles.blake2 import IV, blake2f_run, compress
from evmprecompiles.common import OutOfGasError, PrecompileFailure

_WORD = st.integers(min_value=0, max_value=(1 << 64) - 1)


def _blake2b_initial_state():
    h = list(IV)
    h[0] ^= 0x01010040  # digest length 64, no key, fanout 1, depth 1
    return h


def _encode_input(rounds, h, m, t, flag):
    return (
        rounds.to_bytes(4, "big")
        + struct.pack("<8Q", *h)
        + struct.pack("<16Q", *m)
        + struct.pack("<2Q", *t)
        + bytes([flag])
    )


def _abc_block():
    return list(struct.unpack("<16Q", b"abc".ljust(128, b"\x00")))


def test_compress_matches_hashlib_blake2b():
    state = compress(12, _blake2b_initial_state(), _abc_block(), (3, 0), True)
    assert struct.pack("<8Q", *state) == hashlib.blake2b(b"abc").digest()


def test_run_matches_hashlib_blake2b():
    data = _encode_input(12, _blake2b_initial_state(), _abc_block(), (3, 0), 1)
    result = blake2f_run(data, 12)
    assert result.output == hashlib.blake2b(b"abc").digest()
    assert result.cost == 12


def test_zero_rounds_yields_iv():
    state = compress(0, [0] * 8, [0] * 16, (0, 0), False)
    assert state == list(IV)


def test_invalid_length():
    with pytest.raises(PrecompileFailure) as info:
        blake2f_run(bytes(212), 100)
    assert info.value.message == "Invalid last flag for blake2"


def test_invalid_final_flag():
    data = _encode_input(12, [0] * 8, [0] * 16, (0, 0), 2)
    with pytest.raises(PrecompileFailure):
        blake2f_run(data, 100)


def test_out_of_gas():
    data = _encode_input(12, [0] * 8, [0] * 16, (0, 0), 1)
    with pytest.raises(OutOfGasError):
        blake2f_run(data, 11)


def test_compress_rejects_bad_shapes():
    with pytest.raises(ValueError):
        compress(1, [0] * 7, [0] * 16, (0, 0), False)
    with pytest.raises(ValueError):
        compress(-1, [0] * 8, [0] * 16, (0, 0), False)


def test_flag_changes_result():
    h = _blake2b_initial_state()
    m = _abc_block()
    assert compress(12, h, m, (3, 0), True) != compress(12, h, m, (3, 0), False)


@settings(max_examples=30)
@given(
    st.integers(min_value=0, max_value=24),
    st.lists(_WORD, min_size=8, max_size=8),
    st.lists(_WORD, min_size=16, max_size=16),
    st.lists(_WORD, min_size=2, max_size=2),
    st.booleans(),
)
def test_run_agrees_with_compress(rounds, h, m, t, f):
    data = _encode_input(rounds, h, m, t, int(f))
    result = blake2f_run(data, rounds)
    assert result.cost == rounds
    assert list(struct.unpack("<8Q", result.output)) == compress(rounds, h, m, t, f)
    assert all(0 <= w < (1 << 64) for w in compress(rounds, h, m, t, f))