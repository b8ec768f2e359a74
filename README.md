# evmprecompiles

Pure-Python implementations of Ethereum precompiled contracts, with the gas
costs of each hard fork.

Every precompile takes the call data as `bytes` and a gas limit, and returns a
`PrecompileOutput` (from `evmprecompiles.common`) holding the gas `cost`, the
`output` bytes and an empty list of `logs`. When the gas limit is too small an
`OutOfGasError` is raised; malformed input raises a `PrecompileFailure` whose
`message` gives the reason. Both derive from `PrecompileError`.

| Address | Precompile            | Function(s)                                      | Module                     |
|---------|-----------------------|--------------------------------------------------|----------------------------|
| 0x01    | ecrecover             | `ec_recover_run`                                 | `evmprecompiles.secp256k1` |
| 0x02    | SHA-256               | `sha256_run`                                     | `evmprecompiles.hashes`    |
| 0x03    | RIPEMD-160            | `ripemd160_run`                                  | `evmprecompiles.hashes`    |
| 0x04    | identity              | `identity_run`                                   | `evmprecompiles.identity`  |
| 0x06    | alt_bn128 add         | `add_istanbul`, `add_byzantium`, `run_add`       | `evmprecompiles.bn128`     |
| 0x07    | alt_bn128 scalar mul  | `mul_istanbul`, `mul_byzantium`, `run_mul`       | `evmprecompiles.bn128`     |
| 0x08    | alt_bn128 pairing     | `pair_istanbul`, `pair_byzantium`, `run_pair`    | `evmprecompiles.bn128`     |
| 0x09    | BLAKE2 F compression  | `blake2f_run`                                    | `evmprecompiles.blake2`    |

Some behaviour worth knowing:

- `ec_recover_run` always charges 3000 gas; when the input is not a valid
  signature its output is empty rather than an error. A successful recovery
  returns the 20-byte address left-padded to 32 bytes. The lower-level
  `ecrecover(sig, msg)` raises `ValueError` instead.
- `ripemd160_run` returns the 20-byte digest left-padded to 32 bytes.
- The alt_bn128 add and mul inputs are zero-padded (or truncated) to 128
  bytes; the point at infinity is encoded as 64 zero bytes.
- `blake2f_run` requires exactly 213 bytes of input and charges one gas per
  round. The compression function itself is available as `compress`.

## Installation

```
pip install evmprecompiles
```

## Usage

Call a precompile directly:

```python
from evmprecompiles.identity import identity_run
from evmprecompiles.common import OutOfGasError

result = identity_run(b"\x00\x01", 18)
assert result.output == b"\x00\x01"
assert result.cost == 18

try:
    identity_run(b"\x00\x01", 17)
except OutOfGasError:
    print("not enough gas")
```

Or look one up by address for a given hard fork:

```python
from evmprecompiles.common import make_address
from evmprecompiles.registry import Precompiles, SpecId

precompiles = Precompiles(SpecId.ISTANBUL)
sha256 = make_address(0, 2)

if sha256 in precompiles:
    result = precompiles.get(sha256)(b"abc", 1_000)
    print(result.output.hex(), result.cost)

print([address.hex() for address in precompiles.addresses()])
```

`Precompiles` defaults to `SpecId.BERLIN`. It can be iterated as
`(address, Precompile)` pairs and supports `len()`. The set follows the fork:
Homestead provides 0x01–0x04, Byzantium adds the alt_bn128 operations at their
original prices, and Istanbul adds BLAKE2 F and the cheaper alt_bn128 prices of
EIP-1108. Berlin has the same set as Istanbul.

The curve arithmetic behind the alt_bn128 precompiles is available on its own
in `evmprecompiles.alt_bn128`: `g1_add`, `g1_mul`, `g1_is_on_curve`, `g2_add`,
`g2_mul`, `g2_is_on_curve`, `g2_in_subgroup`, `pairing`, `pairing_check`, and
the field types `Fq2` and `Fq12`.

Helpers in `evmprecompiles.common`: `calc_linear_cost_u32`, `gas_query`,
`make_address` and `u256_to_bytes`.

## What this package does not do

- There is no modular exponentiation precompile (address 0x05); no fork's
  `Precompiles` set contains an entry at that address.
- It is a library only: there is no command-line tool and no EVM to run
  transactions. It evaluates precompiles on the bytes you give it.
- The pure-Python curve arithmetic, and the pairing check in particular, is
  slow.

## Running the tests

```
pip install -e ".[test]"
pytest
```