from __future__ import annotations

from typing import Dict, Iterator, Tuple

from .errors import IndexOutOfRange, InvalidAlphabet, InvalidSymbol

# Characters with a meaning in cycle notation and setup lines.
RESERVED_SYMBOLS = frozenset("()*")

UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"


class Alphabet:
    """An ordered, duplicate-free set of symbols indexed 0..size-1."""

    def __init__(self, symbols: str = UPPER):
        if not symbols:
            raise InvalidAlphabet("Alphabet must contain at least one symbol")
        index: Dict[str, int] = {}
        for i, ch in enumerate(symbols):
            if ch in RESERVED_SYMBOLS or ch.isspace():
                raise InvalidAlphabet(f"Reserved character {ch!r} in alphabet")
            if ch in index:
                raise InvalidAlphabet(f"Duplicate symbol {ch!r} in alphabet")
            index[ch] = i
        self._symbols: Tuple[str, ...] = tuple(symbols)
        self._index = index

    @property
    def symbols(self) -> str:
        return "".join(self._symbols)

    def size(self) -> int:
        return len(self._symbols)

    def contains(self, ch: str) -> bool:
        return ch in self._index

    def to_index(self, ch: str) -> int:
        try:
            return self._index[ch]
        except KeyError:
            raise InvalidSymbol(f"Symbol {ch!r} is not in the alphabet") from None

    def to_char(self, index: int) -> str:
        if not 0 <= index < len(self._symbols):
            raise IndexOutOfRange(f"Index {index} out of range 0..{len(self._symbols) - 1}")
        return self._symbols[index]

    def wrap(self, index: int) -> int:
        """Return INDEX modulo the alphabet size (always non-negative)."""
        return index % len(self._symbols)

    def __len__(self) -> int:
        return len(self._symbols)

    def __contains__(self, ch: object) -> bool:
        return ch in self._index

    def __iter__(self) -> Iterator[str]:
        return iter(self._symbols)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Alphabet):
            return NotImplemented
        return self._symbols == other._symbols

    def __hash__(self) -> int:
        return hash(self._symbols)

    def __repr__(self) -> str:
        return f"Alphabet({self.symbols!r})"
