"""Permutations of an alphabet written in cycle notation.

A permutation such as ``"(AELTPHQXRU) (BKNW) (CMOY)"`` sends each symbol to the
one that follows it in its cycle, wrapping at the end of the group. Symbols
that appear in no cycle map to themselves.

Research / education only. Do NOT use in production.
"""
from __future__ import annotations

from typing import List, Tuple

from .alphabet import Alphabet
from .errors import MalformedPermutation


def parse_cycles(cycles: str, alphabet: Alphabet) -> List[str]:
    """Split cycle notation into groups, validating every symbol.

    Whitespace is ignored and empty groups such as ``"()"`` are dropped.
    """
    groups: List[str] = []
    seen: set = set()
    current: List[str] | None = None

    for ch in cycles:
        if ch.isspace():
            continue
        if ch == "(":
            if current is not None:
                raise MalformedPermutation(f"Nested '(' in cycles {cycles!r}")
            current = []
        elif ch == ")":
            if current is None:
                raise MalformedPermutation(f"Unbalanced ')' in cycles {cycles!r}")
            if current:
                groups.append("".join(current))
            current = None
        else:
            if current is None:
                raise MalformedPermutation(f"Symbol {ch!r} outside of a cycle in {cycles!r}")
            if ch not in alphabet:
                raise MalformedPermutation(f"Symbol {ch!r} is not in the alphabet")
            if ch in seen:
                raise MalformedPermutation(f"Symbol {ch!r} appears more than once")
            seen.add(ch)
            current.append(ch)

    if current is not None:
        raise MalformedPermutation(f"Unterminated cycle in {cycles!r}")
    return groups


def cycles_from_wiring(wiring: str, alphabet: Alphabet) -> str:
    """Convert a wiring table into cycle notation.

    WIRING lists the image of each alphabet symbol in alphabet order, e.g. the
    historical rotor I is ``"EKMFLGDQVZNTOWYHXUSPAIBRCJ"`` (A->E, B->K, ...).
    Fixed points are omitted from the result.
    """
    if len(wiring) != alphabet.size() or sorted(wiring) != sorted(alphabet.symbols):
        raise MalformedPermutation("Wiring must be a rearrangement of the alphabet")

    visited = [False] * alphabet.size()
    out: List[str] = []
    for start in range(alphabet.size()):
        if visited[start]:
            continue
        cycle: List[str] = []
        i = start
        while not visited[i]:
            visited[i] = True
            cycle.append(alphabet.to_char(i))
            i = alphabet.to_index(wiring[i])
        if len(cycle) > 1:
            out.append("(" + "".join(cycle) + ")")
    return " ".join(out)


class Permutation:
    """A bijection on 0..N-1 for an Alphabet of size N, given as cycles."""

    def __init__(self, cycles: str, alphabet: Alphabet):
        self._alphabet = alphabet
        self._cycles: Tuple[str, ...] = tuple(parse_cycles(cycles, alphabet))

        n = alphabet.size()
        fwd = list(range(n))
        inv = list(range(n))
        for cycle in self._cycles:
            for pos, ch in enumerate(cycle):
                src = alphabet.to_index(ch)
                dst = alphabet.to_index(cycle[(pos + 1) % len(cycle)])
                fwd[src] = dst
                inv[dst] = src
        self._fwd = fwd
        self._inv = inv

    @classmethod
    def from_mapping(cls, wiring: str, alphabet: Alphabet) -> "Permutation":
        return cls(cycles_from_wiring(wiring, alphabet), alphabet)

    @property
    def alphabet(self) -> Alphabet:
        return self._alphabet

    @property
    def cycles(self) -> Tuple[str, ...]:
        return self._cycles

    def size(self) -> int:
        return self._alphabet.size()

    def wrap(self, p: int) -> int:
        return self._alphabet.wrap(p)

    def permute(self, p: int) -> int:
        """Index of the symbol after P's symbol in its cycle (P taken mod size)."""
        return self._fwd[self.wrap(p)]

    def invert(self, c: int) -> int:
        """Index of the symbol before C's symbol in its cycle (C taken mod size)."""
        return self._inv[self.wrap(c)]

    def permute_char(self, p: str) -> str:
        return self._alphabet.to_char(self.permute(self._alphabet.to_index(p)))

    def invert_char(self, c: str) -> str:
        return self._alphabet.to_char(self.invert(self._alphabet.to_index(c)))

    def derangement(self) -> bool:
        """True iff no symbol maps to itself.

        Singleton cycles such as ``"(S)"`` are fixed points even though they
        count toward coverage, so they are rejected explicitly.
        """
        if any(len(cycle) < 2 for cycle in self._cycles):
            return False
        return sum(len(cycle) for cycle in self._cycles) == self.size()

    def is_involution(self) -> bool:
        return all(len(cycle) <= 2 for cycle in self._cycles)

    def wiring(self) -> str:
        """The image of each alphabet symbol, in alphabet order."""
        return "".join(self._alphabet.to_char(i) for i in self._fwd)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Permutation):
            return NotImplemented
        return self._alphabet == other._alphabet and self._fwd == other._fwd

    def __hash__(self) -> int:
        return hash((self._alphabet, tuple(self._fwd)))

    def __repr__(self) -> str:
        return f"Permutation({' '.join('(' + c + ')' for c in self._cycles)!r})"
