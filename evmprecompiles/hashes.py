"""SHA-256 and RIPEMD-160 precompiles."""

from __future__ import annotations

import hashlib

from Crypto.Hash import RIPEMD160

from .common import PrecompileOutput, calc_linear_cost_u32, gas_query

SHA256_ADDRESS_INDEX = 2
RIPEMD160_ADDRESS_INDEX = 3

SHA256_BASE = 60
SHA256_PER_WORD = 12
RIPEMD160_BASE = 600
RIPEMD160_PER_WORD = 120


def sha256_run(data: bytes, gas_limit: int) -> PrecompileOutput:
    """Return the SHA-256 digest of the input."""
    cost = gas_query(
        calc_linear_cost_u32(len(data), SHA256_BASE, SHA256_PER_WORD), gas_limit
    )
    return PrecompileOutput.without_logs(cost, hashlib.sha256(data).digest())


def ripemd160_run(data: bytes, gas_limit: int) -> PrecompileOutput:
    """Return the RIPEMD-160 digest of the input, left-padded to 32 bytes."""
    cost = gas_query(
        calc_linear_cost_u32(len(data), RIPEMD160_BASE, RIPEMD160_PER_WORD), gas_limit
    )
    digest = RIPEMD160.new(bytes(data)).digest()
    return PrecompileOutput.without_logs(cost, digest.rjust(32, b"\x00"))