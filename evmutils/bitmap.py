"""Compact mapping from uint256 indices to booleans, 256 flags per bucket."""

from __future__ import annotations

from dataclasses import dataclass, field

_U256_MAX = (1 << 256) - 1


def _check_index(index: int) -> int:
    if not isinstance(index, int) or isinstance(index, bool):
        raise TypeError(f"index must be an int, got {type(index).__name__}")
    if not 0 <= index <= _U256_MAX:
        raise ValueError(f"index is out of the uint256 range: {index}")
    return index


def _locate(index: int) -> tuple[int, int]:
    _check_index(index)
    return index >> 8, 1 << (index & 0xFF)


@dataclass
class BitMap:
    """Packs booleans for sequential indices into 256-bit buckets."""

    _data: dict[int, int] = field(default_factory=dict)

    def get(self, index: int) -> bool:
        """Return whether the bit at ``index`` is set."""
        bucket, mask = _locate(index)
        return bool(self._data.get(bucket, 0) & mask)

    def set_to(self, index: int, value: bool) -> None:
        """Set the bit at ``index`` to ``value``."""
        if value:
            self.set(index)
        else:
            self.unset(index)

    def set(self, index: int) -> None:
        """Set the bit at ``index``."""
        bucket, mask = _locate(index)
        self._data[bucket] = self._data.get(bucket, 0) | mask

    def unset(self, index: int) -> None:
        """Clear the bit at ``index``."""
        bucket, mask = _locate(index)
        remaining = self._data.get(bucket, 0) & ~mask
        if remaining:
            self._data[bucket] = remaining
        else:
            self._data.pop(bucket, None)