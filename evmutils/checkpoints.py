"""History of values checkpointed at increasing keys, with past-value lookup."""

from __future__ import annotations

from bisect import bisect_left, bisect_right

from evmutils.math import sqrt

_U96_MAX = (1 << 96) - 1
_U160_MAX = (1 << 160) - 1


def _checkpoint_key(checkpoint: tuple[int, int]) -> int:
    return checkpoint[0]


def _check_uint(value: int, bits_max: int, name: str) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if not 0 <= value <= bits_max:
        raise ValueError(f"{name} is out of range: {value}")
    return value


class CheckpointUnorderedInsertion(Exception):
    """A value was attempted to be inserted into a past checkpoint."""

    def __init__(self, key: int, last_key: int) -> None:
        super().__init__(
            f"checkpoint key {key} is lower than the last key {last_key}"
        )
        self.key = key
        self.last_key = last_key


class Trace160:
    """Checkpoints of 160-bit values sorted by non-decreasing 96-bit keys."""

    def __init__(self) -> None:
        self._checkpoints: list[tuple[int, int]] = []

    def __len__(self) -> int:
        return len(self._checkpoints)

    def push(self, key: int, value: int) -> tuple[int, int]:
        """Store ``value`` at ``key`` and return ``(previous, new)`` values.

        A key equal to the last one overwrites that checkpoint; a lower key
        raises :class:`CheckpointUnorderedInsertion`.
        """
        _check_uint(key, _U96_MAX, "key")
        _check_uint(value, _U160_MAX, "value")
        if not self._checkpoints:
            self._checkpoints.append((key, value))
            return 0, value

        last_key, last_value = self._checkpoints[-1]
        if last_key > key:
            raise CheckpointUnorderedInsertion(key, last_key)
        if last_key == key:
            self._checkpoints[-1] = (key, value)
        else:
            self._checkpoints.append((key, value))
        return last_value, value

    def lower_lookup(self, key: int) -> int:
        """Return the value of the oldest checkpoint with key >= ``key``, or 0."""
        _check_uint(key, _U96_MAX, "key")
        pos = bisect_left(self._checkpoints, key, key=_checkpoint_key)
        if pos == len(self._checkpoints):
            return 0
        return self._checkpoints[pos][1]

    def upper_lookup(self, key: int) -> int:
        """Return the value of the newest checkpoint with key <= ``key``, or 0."""
        _check_uint(key, _U96_MAX, "key")
        pos = bisect_right(self._checkpoints, key, key=_checkpoint_key)
        return self._checkpoints[pos - 1][1] if pos else 0

    def upper_lookup_recent(self, key: int) -> int:
        """Like :meth:`upper_lookup`, tuned for keys near the end of the history."""
        _check_uint(key, _U96_MAX, "key")
        length = len(self._checkpoints)
        low, high = 0, length
        if length > 5:
            mid = length - sqrt(length)
            if key < self._checkpoints[mid][0]:
                high = mid
            else:
                low = mid + 1
        pos = bisect_right(self._checkpoints, key, low, high, key=_checkpoint_key)
        return self._checkpoints[pos - 1][1] if pos else 0

    def latest(self) -> int:
        """Return the value of the most recent checkpoint, or 0 if there is none."""
        return self._checkpoints[-1][1] if self._checkpoints else 0

    def latest_checkpoint(self) -> tuple[int, int] | None:
        """Return ``(key, value)`` of the most recent checkpoint, or ``None``."""
        return self._checkpoints[-1] if self._checkpoints else None

    def length(self) -> int:
        """Return the number of checkpoints."""
        return len(self._checkpoints)

    def at(self, pos: int) -> tuple[int, int]:
        """Return ``(key, value)`` of the checkpoint at ``pos``."""
        if not 0 <= pos < len(self._checkpoints):
            raise IndexError(f"no checkpoint at index {pos}")
        return self._checkpoints[pos]