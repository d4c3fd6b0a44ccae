"""The fixed 94-symbol alphabet shared by every machine component.

Research / education only. Do NOT use in production.
"""
from __future__ import annotations

from typing import Dict, Optional, Tuple


class UnknownSymbol(ValueError):
    """Raised when a character is not a member of the alphabet."""

    def __init__(self, symbol: str, position: Optional[int] = None):
        self.symbol = symbol
        self.position = position
        where = f" at position {position}" if position is not None else ""
        super().__init__(f"Unknown symbol {symbol!r}{where}: not in the machine alphabet")


class Alphabet:
    """Ordered, immutable symbol set with a symbol <-> index bijection."""

    __slots__ = ("_symbols", "_index")

    def __init__(self, symbols: str):
        if len(set(symbols)) != len(symbols):
            raise ValueError("Alphabet symbols must be unique")
        if not symbols:
            raise ValueError("Alphabet must not be empty")
        self._symbols: Tuple[str, ...] = tuple(symbols)
        self._index: Dict[str, int] = {ch: i for i, ch in enumerate(symbols)}

    def __len__(self) -> int:
        return len(self._symbols)

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._index

    def __iter__(self):
        return iter(self._symbols)

    def __repr__(self) -> str:
        return f"Alphabet(size={len(self)})"

    @property
    def symbols(self) -> str:
        return "".join(self._symbols)

    def index_of(self, symbol: str) -> int:
        try:
            return self._index[symbol]
        except KeyError:
            raise UnknownSymbol(symbol) from None

    def symbol_at(self, index: int) -> str:
        if not 0 <= index < len(self._symbols):
            raise ValueError(f"Index {index} out of range 0-{len(self._symbols) - 1}")
        return self._symbols[index]


# Upper, lower, space, digits (1-9 then 0), punctuation.
DEFAULT_SYMBOLS = (
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "abcdefghijklmnopqrstuvwxyz"
    " "
    "1234567890"
    "!@#$%^&*()_-+={|\\[]}:;\"'?>/<.,`"
)

DEFAULT_ALPHABET = Alphabet(DEFAULT_SYMBOLS)
