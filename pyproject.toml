[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "evmprecompiles"
version = "0.1.0"
description = "Ethereum precompiled contracts (ecrecover, SHA-256, RIPEMD-160, identity, alt_bn128, BLAKE2 F) with per-fork gas costs"
requires-python = ">=3.10"
keywords = ["ethereum", "evm", "precompile", "alt_bn128", "blake2", "ecrecover", "pairing"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Security :: Cryptography",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "pycryptodome",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["evmprecompiles"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
