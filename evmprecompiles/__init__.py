"""Ethereum precompiled contracts (ecrecover, hashes, identity, alt_bn128, BLAKE2 F) with per-fork gas costs."""

__version__ = "0.1.0"