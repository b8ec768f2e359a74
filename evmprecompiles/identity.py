"""The identity precompile: returns its input unchanged."""

from __future__ import annotations

from .common import PrecompileOutput, calc_linear_cost_u32, gas_query

ADDRESS_INDEX = 4

IDENTITY_BASE = 15
IDENTITY_PER_WORD = 3


def identity_run(data: bytes, gas_limit: int) -> PrecompileOutput:
    """Copy the input to the output, charging per 32-byte word."""
    cost = gas_query(
        calc_linear_cost_u32(len(data), IDENTITY_BASE, IDENTITY_PER_WORD), gas_limit
    )
    return PrecompileOutput.without_logs(cost, bytes(data))