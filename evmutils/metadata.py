"""Name and symbol of a token."""

from __future__ import annotations


class Metadata:
    """Token name and symbol."""

    def __init__(self, name: str = "", symbol: str = "") -> None:
        self._name = name
        self._symbol = symbol

    def name(self) -> str:
        """Return the name of the token."""
        return self._name

    def symbol(self) -> str:
        """Return the symbol of the token, usually a shorter form of the name."""
        return self._symbol