"""ECDSA signer recovery on secp256k1 with malleability checks."""

from __future__ import annotations

from evmutils.eip712 import keccak256

ECRECOVER_ADDR = bytes(19) + b"\x01"
"""Address of the ``ecrecover`` precompile."""

ZERO_ADDRESS = bytes(20)

SIGNATURE_S_UPPER_BOUND = (
    0x7FFFFFFFFFFFFFFFFFFFFFFFFFFFFFFF5D576E7357A4501DDFE92F46681B20A0
)
"""Largest accepted ``s`` value of a signature (half the curve order)."""

_P = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F
_N = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
_G = (
    0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798,
    0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8,
)

_Point = "tuple[int, int] | None"


class ECDSAError(Exception):
    """Base error of ECDSA operations."""


class ECDSAInvalidSignature(ECDSAError):
    """The signature derives the zero address."""

    def __init__(self) -> None:
        super().__init__("invalid signature")


class ECDSAInvalidSignatureLength(ECDSAError):
    """The signature has an invalid length."""

    def __init__(self, length: int) -> None:
        super().__init__(f"invalid signature length: {length}")
        self.length = length


class ECDSAInvalidSignatureS(ECDSAError):
    """The signature has an ``s`` value in the upper half order."""

    def __init__(self, s: bytes) -> None:
        super().__init__(f"invalid signature s value: 0x{s.hex()}")
        self.s = s


def _check_word(value: bytes, name: str) -> bytes:
    if not isinstance(value, (bytes, bytearray)):
        raise TypeError(f"{name} must be bytes, got {type(value).__name__}")
    if len(value) != 32:
        raise ValueError(f"{name} must be 32 bytes long, got {len(value)}")
    return bytes(value)


def _check_v(v: int) -> int:
    if not isinstance(v, int) or isinstance(v, bool):
        raise TypeError(f"v must be an int, got {type(v).__name__}")
    if not 0 <= v <= 0xFF:
        raise ValueError(f"v is out of the uint8 range: {v}")
    return v


def _add(a: tuple[int, int] | None, b: tuple[int, int] | None) -> tuple[int, int] | None:
    if a is None:
        return b
    if b is None:
        return a
    (x1, y1), (x2, y2) = a, b
    if x1 == x2:
        if (y1 + y2) % _P == 0:
            return None
        lam = 3 * x1 * x1 * pow(2 * y1, -1, _P) % _P
    else:
        lam = (y2 - y1) * pow(x2 - x1, -1, _P) % _P
    x3 = (lam * lam - x1 - x2) % _P
    return x3, (lam * (x1 - x3) - y1) % _P


def _mul(k: int, point: tuple[int, int]) -> tuple[int, int] | None:
    result = None
    addend: tuple[int, int] | None = point
    while k:
        if k & 1:
            result = _add(result, addend)
        addend = _add(addend, addend)
        k >>= 1
    return result


def ecrecover(hash: bytes, v: int, r: bytes, s: bytes) -> bytes:
    """Recover the signer address as the precompile does.

    Returns the zero address when no public key can be recovered.
    """
    digest = _check_word(hash, "hash")
    v = _check_v(v)
    r_int = int.from_bytes(_check_word(r, "r"), "big")
    s_int = int.from_bytes(_check_word(s, "s"), "big")

    if v not in (27, 28) or not (0 < r_int < _N and 0 < s_int < _N):
        return ZERO_ADDRESS

    alpha = (pow(r_int, 3, _P) + 7) % _P
    y = pow(alpha, (_P + 1) // 4, _P)
    if y * y % _P != alpha:
        return ZERO_ADDRESS
    if y & 1 != v - 27:
        y = _P - y

    r_inv = pow(r_int, -1, _N)
    e = int.from_bytes(digest, "big")
    public = _add(
        _mul(-e * r_inv % _N, _G),
        _mul(s_int * r_inv % _N, (r_int, y)),
    )
    if public is None:
        return ZERO_ADDRESS
    encoded = public[0].to_bytes(32, "big") + public[1].to_bytes(32, "big")
    return keccak256(encoded)[12:]


def recover(hash: bytes, v: int, r: bytes, s: bytes) -> bytes:
    """Return the 20-byte address that signed ``hash``.

    Raises :class:`ECDSAInvalidSignatureS` for a malleable ``s`` and
    :class:`ECDSAInvalidSignature` when the signature yields no signer.
    """
    check_if_malleable(s)
    _check_word(hash, "hash")
    _check_word(r, "r")
    if _check_v(v) in (0, 1):
        raise ECDSAInvalidSignature()
    recovered = ecrecover(hash, v, r, s)
    if recovered == ZERO_ADDRESS:
        raise ECDSAInvalidSignature()
    return recovered


def encode_calldata(hash: bytes, v: int, r: bytes, s: bytes) -> bytes:
    """Return the ABI-encoded input of the ``ecrecover`` precompile."""
    return b"".join(
        (
            _check_word(hash, "hash"),
            _check_v(v).to_bytes(32, "big"),
            _check_word(r, "r"),
            _check_word(s, "s"),
        )
    )


def check_if_malleable(s: bytes) -> None:
    """Raise :class:`ECDSAInvalidSignatureS` if ``s`` lies in the upper half order."""
    s = _check_word(s, "s")
    if int.from_bytes(s, "big") > SIGNATURE_S_UPPER_BOUND:
        raise ECDSAInvalidSignatureS(s)