"""In-memory models of EVM contract utilities: math, bitmaps, nonces, pausing, checkpoints, metadata, EIP-712 hashing and ECDSA recovery."""

__version__ = "0.1.0"

__all__ = [
    "bitmap",
    "checkpoints",
    "ecdsa",
    "eip712",
    "math",
    "metadata",
    "nonces",
    "pausable",
]