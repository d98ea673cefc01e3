"""Emergency stop mechanism that an authorised account can trigger."""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass


class PausableError(Exception):
    """Base error of the pausable mechanism."""


class EnforcedPause(PausableError):
    """The operation failed because the contract is paused."""

    def __init__(self) -> None:
        super().__init__("contract is paused")


class ExpectedPause(PausableError):
    """The operation failed because the contract is not paused."""

    def __init__(self) -> None:
        super().__init__("contract is not paused")


@dataclass(frozen=True)
class Paused:
    """Emitted when the pause is triggered by ``account``."""

    account: Hashable


@dataclass(frozen=True)
class Unpaused:
    """Emitted when the pause is lifted by ``account``."""

    account: Hashable


class Pausable:
    """Holds the paused flag and the events emitted when it changes."""

    def __init__(self, paused: bool = False) -> None:
        self._paused = paused
        self.events: list[Paused | Unpaused] = []

    def paused(self) -> bool:
        """Return whether the contract is paused."""
        return self._paused

    def pause(self, account: Hashable) -> Paused:
        """Enter the paused state on behalf of ``account``."""
        self.when_not_paused()
        self._paused = True
        event = Paused(account)
        self.events.append(event)
        return event

    def unpause(self, account: Hashable) -> Unpaused:
        """Leave the paused state on behalf of ``account``."""
        self.when_paused()
        self._paused = False
        event = Unpaused(account)
        self.events.append(event)
        return event

    def when_not_paused(self) -> None:
        """Raise :class:`EnforcedPause` if the contract is paused."""
        if self._paused:
            raise EnforcedPause()

    def when_paused(self) -> None:
        """Raise :class:`ExpectedPause` if the contract is not paused."""
        if not self._paused:
            raise ExpectedPause()