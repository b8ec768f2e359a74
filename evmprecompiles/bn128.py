"""The alt_bn128 addition, scalar multiplication and pairing precompiles."""

from __future__ import annotations

from .alt_bn128 import (
    CURVE_ORDER,
    FIELD_MODULUS,
    Fq2,
    G1Point,
    G2Point,
    g1_add,
    g1_is_on_curve,
    g1_mul,
    g2_in_subgroup,
    g2_is_on_curve,
    pairing_check,
)
from .common import PrecompileFailure, PrecompileOutput, gas_query, u256_to_bytes

ADD_ADDRESS_INDEX = 6
MUL_ADDRESS_INDEX = 7
PAIR_ADDRESS_INDEX = 8

ADD_INPUT_LEN = 128
MUL_INPUT_LEN = 128
PAIR_ELEMENT_LEN = 192

ISTANBUL_ADD_COST = 150
BYZANTIUM_ADD_COST = 500
ISTANBUL_MUL_COST = 6_000
BYZANTIUM_MUL_COST = 40_000
ISTANBUL_PAIR_PER_POINT = 34_000
ISTANBUL_PAIR_BASE = 45_000
BYZANTIUM_PAIR_PER_POINT = 80_000
BYZANTIUM_PAIR_BASE = 100_000

# Field words of one pairing element, in the order they appear in the input.
_PAIR_WORD_ERRORS = (
    "ERR_BN128_INVALID_AX",
    "ERR_BN128_INVALID_AY",
    "ERR_BN128_INVALID_B_AY",
    "ERR_BN128_INVALID_B_AX",
    "ERR_BN128_INVALID_B_BY",
    "ERR_BN128_INVALID_B_BX",
)


def _read_fq(word: bytes, error: str) -> int:
    value = int.from_bytes(word, "big")
    if value >= FIELD_MODULUS:
        raise PrecompileFailure(error)
    return value


def _pad(data: bytes, length: int) -> bytes:
    return bytes(data[:length]).ljust(length, b"\x00")


def _encode_g1(point: G1Point) -> bytes:
    if point is None:
        return bytes(64)
    x, y = point
    return x.to_bytes(32, "big") + y.to_bytes(32, "big")


def read_point(data: bytes, pos: int) -> G1Point:
    """Decode a G1 point from 64 bytes at ``pos``; all zeros is the point at infinity."""
    x = _read_fq(data[pos : pos + 32], "ERR_BN128_INVALID_X")
    y = _read_fq(data[pos + 32 : pos + 64], "ERR_BN128_INVALID_Y")
    if x == 0 and y == 0:
        return None
    point = (x, y)
    if not g1_is_on_curve(point):
        raise PrecompileFailure("ERR_BN128_INVALID_POINT")
    return point


def run_add(data: bytes, cost: int, target_gas: int) -> PrecompileOutput:
    """Add two G1 points given as 128 bytes (zero padded or truncated)."""
    cost = gas_query(cost, target_gas)
    padded = _pad(data, ADD_INPUT_LEN)
    p1 = read_point(padded, 0)
    p2 = read_point(padded, 64)
    return PrecompileOutput.without_logs(cost, _encode_g1(g1_add(p1, p2)))


def run_mul(data: bytes, cost: int, target_gas: int) -> PrecompileOutput:
    """Multiply a G1 point by a scalar below the curve order."""
    cost = gas_query(cost, target_gas)
    padded = _pad(data, MUL_INPUT_LEN)
    point = read_point(padded, 0)
    scalar = int.from_bytes(padded[64:96], "big")
    if scalar >= CURVE_ORDER:
        raise PrecompileFailure("Invalid field element")
    return PrecompileOutput.without_logs(cost, _encode_g1(g1_mul(point, scalar)))


def _read_pair(element: bytes) -> tuple[G1Point, G2Point]:
    ax, ay, bay, bax, bby, bbx = (
        _read_fq(element[32 * k : 32 * k + 32], error)
        for k, error in enumerate(_PAIR_WORD_ERRORS)
    )

    a: G1Point = None
    if ax or ay:
        a = (ax, ay)
        if not g1_is_on_curve(a):
            raise PrecompileFailure("ERR_BN128_INVALID_A")

    b: G2Point = None
    if bax or bay or bbx or bby:
        b = (Fq2([bax, bay]), Fq2([bbx, bby]))
        if not (g2_is_on_curve(b) and g2_in_subgroup(b)):
            raise PrecompileFailure("ERR_BN128_INVALID_B")
    return a, b


def run_pair(
    data: bytes, pair_per_point_cost: int, pair_base_cost: int, target_gas: int
) -> PrecompileOutput:
    """Check that the product of pairings over the input elements is one."""
    cost = pair_per_point_cost * len(data) // PAIR_ELEMENT_LEN + pair_base_cost
    cost = gas_query(cost, target_gas)

    if len(data) % PAIR_ELEMENT_LEN:
        raise PrecompileFailure("ERR_BN128_INVALID_LEN")

    if not data:
        success = True
    else:
        pairs = [
            _read_pair(data[offset : offset + PAIR_ELEMENT_LEN])
            for offset in range(0, len(data), PAIR_ELEMENT_LEN)
        ]
        success = pairing_check(pairs)

    return PrecompileOutput.without_logs(cost, u256_to_bytes(1 if success else 0))


def add_istanbul(data: bytes, target_gas: int) -> PrecompileOutput:
    """G1 addition with Istanbul gas pricing."""
    return run_add(data, ISTANBUL_ADD_COST, target_gas)


def add_byzantium(data: bytes, target_gas: int) -> PrecompileOutput:
    """G1 addition with Byzantium gas pricing."""
    return run_add(data, BYZANTIUM_ADD_COST, target_gas)


def mul_istanbul(data: bytes, target_gas: int) -> PrecompileOutput:
    """G1 scalar multiplication with Istanbul gas pricing."""
    return run_mul(data, ISTANBUL_MUL_COST, target_gas)


def mul_byzantium(data: bytes, target_gas: int) -> PrecompileOutput:
    """G1 scalar multiplication with Byzantium gas pricing."""
    return run_mul(data, BYZANTIUM_MUL_COST, target_gas)


def pair_istanbul(data: bytes, target_gas: int) -> PrecompileOutput:
    """Pairing check with Istanbul gas pricing."""
    return run_pair(data, ISTANBUL_PAIR_PER_POINT, ISTANBUL_PAIR_BASE, target_gas)


def pair_byzantium(data: bytes, target_gas: int) -> PrecompileOutput:
    """Pairing check with Byzantium gas pricing."""
    return run_pair(data, BYZANTIUM_PAIR_PER_POINT, BYZANTIUM_PAIR_BASE, target_gas)