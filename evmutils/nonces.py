"""Per-account nonces that only ever increase."""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass, field

_U256_MAX = (1 << 256) - 1


class InvalidAccountNonce(Exception):
    """The nonce used for an account is not its expected current nonce."""

    def __init__(self, account: Hashable, current_nonce: int) -> None:
        super().__init__(
            f"invalid nonce for account {account!r}: current nonce is {current_nonce}"
        )
        self.account = account
        self.current_nonce = current_nonce


@dataclass
class Nonces:
    """Tracks the next unused nonce of each address."""

    _nonces: dict[Hashable, int] = field(default_factory=dict)

    def nonces(self, owner: Hashable) -> int:
        """Return the unused nonce of ``owner``."""
        return self._nonces.get(owner, 0)

    def use_nonce(self, owner: Hashable) -> int:
        """Consume and return the current nonce of ``owner``."""
        nonce = self.nonces(owner)
        self._advance(owner, nonce)
        return nonce

    def use_checked_nonce(self, owner: Hashable, nonce: int) -> None:
        """Consume ``nonce`` for ``owner``, raising if it is not the current one."""
        current = self.nonces(owner)
        if nonce != current:
            raise InvalidAccountNonce(owner, current)
        self._advance(owner, current)

    def _advance(self, owner: Hashable, nonce: int) -> None:
        if nonce >= _U256_MAX:
            raise OverflowError(f"nonce of {owner!r} cannot be incremented past uint256")
        self._nonces[owner] = nonce + 1