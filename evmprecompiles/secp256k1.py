"""The ECRECOVER precompile: recover a signer's address from a signature."""

from __future__ import annotations

from Crypto.Hash import keccak

from .common import PrecompileOutput, gas_query

ADDRESS_INDEX = 1
ECRECOVER_BASE = 3_000

P = 2**256 - 2**32 - 977
N = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
G = (
    0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798,
    0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8,
)

_Point = tuple[int, int] | None


def keccak256(data: bytes) -> bytes:
    """Return the Keccak-256 digest of ``data``."""
    return keccak.new(digest_bits=256, data=bytes(data)).digest()


def _add(p1: _Point, p2: _Point) -> _Point:
    if p1 is None:
        return p2
    if p2 is None:
        return p1
    x1, y1 = p1
    x2, y2 = p2
    if x1 == x2:
        if (y1 + y2) % P == 0:
            return None
        m = 3 * x1 * x1 * pow(2 * y1, -1, P) % P
    else:
        m = (y2 - y1) * pow(x2 - x1, -1, P) % P
    x3 = (m * m - x1 - x2) % P
    return x3, (m * (x1 - x3) - y1) % P


def _mul(point: _Point, n: int) -> _Point:
    result: _Point = None
    addend = point
    while n:
        if n & 1:
            result = _add(result, addend)
        addend = _add(addend, addend)
        n >>= 1
    return result


def ecrecover(sig: bytes, msg: bytes) -> bytes:
    """Recover the 20-byte address that made ``sig`` (r || s || recid) over ``msg``.

    Raises :class:`ValueError` if the signature cannot be recovered.
    """
    if len(sig) != 65 or len(msg) != 32:
        raise ValueError("expected a 65-byte signature and a 32-byte message")
    recid = sig[64]
    if recid > 3:
        raise ValueError("invalid recovery id")
    r = int.from_bytes(sig[:32], "big")
    s = int.from_bytes(sig[32:64], "big")
    if not (0 < r < N and 0 < s < N):
        raise ValueError("signature scalar out of range")
    x = r + (N if recid >= 2 else 0)
    if x >= P:
        raise ValueError("signature x coordinate out of range")
    alpha = (pow(x, 3, P) + 7) % P
    beta = pow(alpha, (P + 1) // 4, P)
    if beta * beta % P != alpha:
        raise ValueError("signature point is not on the curve")
    y = beta if beta % 2 == recid % 2 else P - beta
    e = int.from_bytes(msg, "big")
    r_inv = pow(r, -1, N)
    public = _add(_mul(G, -e * r_inv % N), _mul((x, y), s * r_inv % N))
    if public is None:
        raise ValueError("recovered the point at infinity")
    encoded = public[0].to_bytes(32, "big") + public[1].to_bytes(32, "big")
    return keccak256(encoded)[12:]


def ec_recover_run(data: bytes, target_gas: int) -> PrecompileOutput:
    """Recover a signer; the output is empty when the input is not a valid signature."""
    cost = gas_query(ECRECOVER_BASE, target_gas)
    padded = bytes(data[:128]).ljust(128, b"\x00")
    msg = padded[:32]
    if any(padded[32:63]) or padded[63] not in (27, 28):
        return PrecompileOutput.without_logs(cost, b"")
    sig = padded[64:128] + bytes([padded[63] - 27])
    try:
        address = ecrecover(sig, msg)
    except ValueError:
        return PrecompileOutput.without_logs(cost, b"")
    return PrecompileOutput.without_logs(cost, address.rjust(32, b"\x00"))