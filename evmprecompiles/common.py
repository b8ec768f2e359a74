"""Shared types and helpers for the precompiled contracts."""

from __future__ import annotations

from dataclasses import dataclass, field

ADDRESS_LENGTH = 20
WORD_SIZE = 32

_U32_MAX = (1 << 32) - 1
_U128_MAX = (1 << 128) - 1
_U256_MAX = (1 << 256) - 1


class PrecompileError(Exception):
    """Base class for every failure reported by a precompile."""


class OutOfGasError(PrecompileError):
    """The operation needs more gas than the caller allowed."""

    def __init__(self, message: str = "out of gas") -> None:
        super().__init__(message)


class PrecompileExit(PrecompileError):
    """The precompile asked for execution to stop."""


class PrecompileFailure(PrecompileError):
    """An ordinary failure with a descriptive message."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


@dataclass
class Log:
    """A log entry emitted by a precompile."""

    address: bytes = bytes(ADDRESS_LENGTH)
    topics: list[bytes] = field(default_factory=list)
    data: bytes = b""


@dataclass
class PrecompileOutput:
    """The gas a precompile used, the bytes it returned and its logs."""

    cost: int
    output: bytes
    logs: list[Log] = field(default_factory=list)

    @classmethod
    def without_logs(cls, cost: int, output: bytes) -> PrecompileOutput:
        """Build an output that carries no logs."""
        return cls(cost=cost, output=bytes(output), logs=[])


def calc_linear_cost_u32(length: int, base: int, word: int) -> int:
    """Cost of ``base`` plus ``word`` for every started 32-byte word."""
    return (length + WORD_SIZE - 1) // WORD_SIZE * word + base


def gas_query(gas_used: int, gas_limit: int) -> int:
    """Return ``gas_used``, raising :class:`OutOfGasError` if it exceeds the limit."""
    if gas_used > gas_limit:
        raise OutOfGasError()
    return gas_used


def make_address(x: int, y: int) -> bytes:
    """Build a 20-byte address from a 32-bit prefix and a 128-bit suffix."""
    if not 0 <= x <= _U32_MAX:
        raise ValueError(f"address prefix out of range: {x}")
    if not 0 <= y <= _U128_MAX:
        raise ValueError(f"address suffix out of range: {y}")
    return x.to_bytes(4, "big") + y.to_bytes(16, "big")


def u256_to_bytes(value: int) -> bytes:
    """Encode an unsigned 256-bit integer as 32 big-endian bytes."""
    if not 0 <= value <= _U256_MAX:
        raise ValueError(f"value does not fit in 256 bits: {value}")
    return value.to_bytes(WORD_SIZE, "big")