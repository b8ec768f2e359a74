import pytest

from evmprecompiles.common import OutOfGasError
from evmprecompiles.secp256k1 import G, N, ec_recover_run, ecrecover, keccak256

KEY_ONE_ADDRESS = bytes.fromhex("7e5f4552091a69125d5dfcb7b8c2659029395bdf")


def _signed_input(e: int) -> bytes:
    # Signature by private key 1 with nonce 1: R = G, s = e + r.
    r = G[0]
    s = (e + r) % N
    return e.to_bytes(32, "big") + (27).to_bytes(32, "big") + r.to_bytes(32, "big") + s.to_bytes(32, "big")


def test_keccak_empty():
    assert keccak256(b"").hex() == (
        "c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470"
    )


def test_ecrecover_key_one():
    data = _signed_input(12345)
    sig = data[64:128] + b"\x00"
    assert ecrecover(sig, data[:32]) == KEY_ONE_ADDRESS


def test_run_returns_padded_address():
    out = ec_recover_run(_signed_input(777), 3000)
    assert out.cost == 3000
    assert out.output == bytes(12) + KEY_ONE_ADDRESS


def test_run_out_of_gas():
    with pytest.raises(OutOfGasError):
        ec_recover_run(_signed_input(1), 2999)


def test_run_bad_v_gives_empty():
    data = bytearray(_signed_input(5))
    data[63] = 29
    assert ec_recover_run(bytes(data), 3000).output == b""


def test_run_zero_input_gives_empty():
    assert ec_recover_run(b"", 5000).output == b""


def test_ecrecover_rejects_zero_r():
    with pytest.raises(ValueError):
        ecrecover(bytes(64) + b"\x00", bytes(32))