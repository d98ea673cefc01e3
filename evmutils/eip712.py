"""EIP-712 hashing of typed structured data (the "v4" encoding)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple

from Crypto.Hash import keccak as _keccak

_U256_MAX = (1 << 256) - 1

TYPE_HASH = bytes.fromhex(
    "8b73c3c69bb8fe3d512ecc4cf759cc79239f7b179b0ffacaa9a75d522b39400f"
)
"""keccak256 of the EIP712Domain type string with name, version, chainId and verifyingContract."""

FIELDS = b"\x0f"
"""Bit set of the fields present in the domain."""

SALT = bytes(32)
"""Salt of the domain separator."""

TYPED_DATA_PREFIX = b"\x19\x01"
"""Prefix of ERC-191 version ``0x01``."""


def keccak256(data: bytes) -> bytes:
    """Return the 32-byte Keccak-256 digest of ``data``."""
    return _keccak.new(digest_bits=256, data=bytes(data)).digest()


def _check_word(value: bytes, name: str) -> bytes:
    if not isinstance(value, (bytes, bytearray)):
        raise TypeError(f"{name} must be bytes, got {type(value).__name__}")
    if len(value) != 32:
        raise ValueError(f"{name} must be 32 bytes long, got {len(value)}")
    return bytes(value)


def _to_address(value: bytes | str) -> bytes:
    if isinstance(value, str):
        text = value[2:] if value[:2].lower() == "0x" else value
        if len(text) != 40:
            raise ValueError(f"address must have 40 hex digits: {value!r}")
        return bytes.fromhex(text)
    if not isinstance(value, (bytes, bytearray)):
        raise TypeError(f"address must be bytes or str, got {type(value).__name__}")
    if len(value) != 20:
        raise ValueError(f"address must be 20 bytes long, got {len(value)}")
    return bytes(value)


def to_typed_data_hash(domain_separator: bytes, struct_hash: bytes) -> bytes:
    """Return the digest of EIP-712 typed data for a domain and a struct hash."""
    preimage = (
        TYPED_DATA_PREFIX
        + _check_word(domain_separator, "domain_separator")
        + _check_word(struct_hash, "struct_hash")
    )
    return keccak256(preimage)


class Eip712Domain(NamedTuple):
    """Fields and values describing an EIP-712 domain."""

    fields: bytes
    name: str
    version: str
    chain_id: int
    verifying_contract: bytes
    salt: bytes
    extensions: list[int]


@dataclass(frozen=True)
class Eip712:
    """An EIP-712 signing domain bound to a chain and a contract address."""

    name: str
    version: str
    chain_id: int
    verifying_contract: bytes | str
    hashed_name: bytes = field(init=False, repr=False)
    hashed_version: bytes = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.chain_id, int) or isinstance(self.chain_id, bool):
            raise TypeError("chain_id must be an int")
        if not 0 <= self.chain_id <= _U256_MAX:
            raise ValueError(f"chain_id is out of the uint256 range: {self.chain_id}")
        object.__setattr__(
            self, "verifying_contract", _to_address(self.verifying_contract)
        )
        object.__setattr__(self, "hashed_name", keccak256(self.name.encode()))
        object.__setattr__(self, "hashed_version", keccak256(self.version.encode()))

    def eip712_domain(self) -> Eip712Domain:
        """Return the fields and values of the domain used for signatures."""
        return Eip712Domain(
            FIELDS,
            self.name,
            self.version,
            self.chain_id,
            self.verifying_contract,
            SALT,
            [],
        )

    def domain_separator_v4(self) -> bytes:
        """Return the domain separator for this chain and contract."""
        encoded = b"".join(
            (
                TYPE_HASH,
                self.hashed_name,
                self.hashed_version,
                self.chain_id.to_bytes(32, "big"),
                bytes(12) + self.verifying_contract,
            )
        )
        return keccak256(encoded)

    def hash_typed_data_v4(self, struct_hash: bytes) -> bytes:
        """Return the hash of the fully encoded EIP-712 message for this domain."""
        return to_typed_data_hash(self.domain_separator_v4(), struct_hash)