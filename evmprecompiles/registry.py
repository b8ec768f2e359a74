"""The set of precompiled contracts active under each protocol revision."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from enum import Enum, IntEnum

from . import bn128, hashes, identity
from .blake2 import ADDRESS_INDEX as BLAKE2_ADDRESS_INDEX
from .blake2 import blake2f_run
from .common import PrecompileOutput, make_address
from .secp256k1 import ADDRESS_INDEX as ECRECOVER_ADDRESS_INDEX
from .secp256k1 import ec_recover_run

PrecompileFn = Callable[[bytes, int], PrecompileOutput]


class SpecId(IntEnum):
    """Protocol revisions that change the precompile set."""

    HOMESTEAD = 0
    BYZANTINE = 1
    ISTANBUL = 2
    BERLIN = 3

    def enabled(self, spec_id: int) -> bool:
        """Whether this revision is active at ``spec_id``."""
        return int(spec_id) >= self.value


class PrecompileKind(Enum):
    """How a precompile is provided."""

    STANDARD = "standard"
    CUSTOM = "custom"


@dataclass(frozen=True)
class Precompile:
    """A callable precompiled contract."""

    kind: PrecompileKind
    function: PrecompileFn

    def __call__(self, data: bytes, gas_limit: int) -> PrecompileOutput:
        return self.function(data, gas_limit)


def _standard(index: int, function: PrecompileFn) -> tuple[bytes, Precompile]:
    return make_address(0, index), Precompile(PrecompileKind.STANDARD, function)


class Precompiles:
    """The precompiles available at one revision, keyed by address."""

    def __init__(self, spec_id: int = SpecId.BERLIN) -> None:
        spec = int(spec_id)
        if not 0 <= spec <= 0xFF:
            raise ValueError(f"spec id out of range: {spec_id}")

        entries: list[tuple[bytes, Precompile]] = []
        if SpecId.HOMESTEAD.enabled(spec):
            entries += [
                _standard(hashes.SHA256_ADDRESS_INDEX, hashes.sha256_run),
                _standard(hashes.RIPEMD160_ADDRESS_INDEX, hashes.ripemd160_run),
                _standard(ECRECOVER_ADDRESS_INDEX, ec_recover_run),
                _standard(identity.ADDRESS_INDEX, identity.identity_run),
            ]

        if SpecId.ISTANBUL.enabled(spec):
            # EIP-152: BLAKE2 compression function F.
            entries.append(_standard(BLAKE2_ADDRESS_INDEX, blake2f_run))

        if SpecId.ISTANBUL.enabled(spec):
            # EIP-1108: cheaper alt_bn128 operations.
            entries += [
                _standard(bn128.ADD_ADDRESS_INDEX, bn128.add_istanbul),
                _standard(bn128.MUL_ADDRESS_INDEX, bn128.mul_istanbul),
                _standard(bn128.PAIR_ADDRESS_INDEX, bn128.pair_istanbul),
            ]
        elif SpecId.BYZANTINE.enabled(spec):
            # EIP-196 and EIP-197: alt_bn128 operations and pairing check.
            entries += [
                _standard(bn128.ADD_ADDRESS_INDEX, bn128.add_byzantium),
                _standard(bn128.MUL_ADDRESS_INDEX, bn128.mul_byzantium),
                _standard(bn128.PAIR_ADDRESS_INDEX, bn128.pair_byzantium),
            ]

        self._entries = entries

    def get(self, address: bytes) -> Precompile | None:
        """Return the precompile at ``address``, or ``None`` if there is none."""
        wanted = bytes(address)
        return next(
            (precompile for addr, precompile in self._entries if addr == wanted), None
        )

    def __contains__(self, address: object) -> bool:
        if not isinstance(address, (bytes, bytearray, memoryview)):
            return False
        return self.get(address) is not None

    def __iter__(self) -> Iterator[tuple[bytes, Precompile]]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def addresses(self) -> list[bytes]:
        """Addresses of all active precompiles, in registration order."""
        return [address for address, _ in self._entries]