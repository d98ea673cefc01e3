[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "evmutils"
version = "0.1.0"
description = "In-memory models of EVM contract utilities: bitmaps, nonces, pausable state, checkpoints, EIP-712 hashing and ECDSA signer recovery"
requires-python = ">=3.10"
keywords = ["ethereum", "evm", "eip712", "ecdsa", "ecrecover", "checkpoints", "bitmap", "nonces", "keccak"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Security :: Cryptography",
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
packages = ["evmutils"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
