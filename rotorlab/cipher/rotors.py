"""Rotor variants: reflectors, fixed rotors and moving rotors.

All variants share the contact-shift arithmetic of a rotating wheel; they
differ only in the capabilities the Machine asks about (``reflecting``,
``rotates``, ``notches``).

Research / education only. Do NOT use in production.
"""
from __future__ import annotations

from typing import Literal, Union

from .alphabet import Alphabet
from .errors import InvalidSetting, InvalidSymbol, ReflectorConstraintViolated
from .permutation import Permutation

RotorKind = Literal["reflector", "fixed", "moving"]


class Rotor:
    """A permutation wheel with a rotational setting in 0..size-1."""

    kind: RotorKind = "fixed"

    def __init__(self, name: str, perm: Permutation):
        self._name = name
        self._perm = perm
        self._setting = 0

    @property
    def name(self) -> str:
        return self._name

    @property
    def permutation(self) -> Permutation:
        return self._perm

    @property
    def alphabet(self) -> Alphabet:
        return self._perm.alphabet

    def size(self) -> int:
        return self._perm.size()

    def rotates(self) -> bool:
        return False

    def reflecting(self) -> bool:
        return False

    def notches(self) -> str:
        return ""

    @property
    def setting(self) -> int:
        return self._setting

    def set(self, posn: Union[int, str]) -> None:
        """Set the rotor to POSN, an alphabet symbol or an index (taken mod size)."""
        if isinstance(posn, str):
            if posn not in self.alphabet:
                raise InvalidSetting(f"Setting {posn!r} of rotor {self._name} is not in the alphabet")
            self._setting = self.alphabet.to_index(posn)
        else:
            self._setting = self._perm.wrap(posn)

    def at_notch(self) -> bool:
        return False

    def advance(self) -> None:
        """Rotors without a pawl do nothing when advanced."""

    def convert_forward(self, p: int) -> int:
        return self._perm.wrap(self._perm.permute(p + self._setting) - self._setting)

    def convert_backward(self, e: int) -> int:
        return self._perm.wrap(self._perm.invert(e + self._setting) - self._setting)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self._name} setting={self.alphabet.to_char(self._setting)}>"


class FixedRotor(Rotor):
    """A rotor that may be set but never advances."""

    kind: RotorKind = "fixed"


class Reflector(FixedRotor):
    """The leftmost, non-rotating wheel that folds the signal back."""

    kind: RotorKind = "reflector"

    def __init__(self, name: str, perm: Permutation):
        if not perm.derangement():
            raise ReflectorConstraintViolated(
                f"Reflector {name} must map every symbol to a different one"
            )
        super().__init__(name, perm)

    def reflecting(self) -> bool:
        return True

    def set(self, posn: Union[int, str]) -> None:
        super().set(posn)
        if self._setting != 0:
            self._setting = 0
            raise ReflectorConstraintViolated(f"Reflector {self.name} has only one position")


class MovingRotor(Rotor):
    """A rotor driven by a pawl, carrying notches that engage its left neighbour."""

    kind: RotorKind = "moving"

    def __init__(self, name: str, perm: Permutation, notches: str):
        super().__init__(name, perm)
        for ch in notches:
            if ch not in perm.alphabet:
                raise InvalidSymbol(f"Notch {ch!r} of rotor {name} is not in the alphabet")
        self._notches = notches
        self._notch_indices = frozenset(perm.alphabet.to_index(ch) for ch in notches)

    def rotates(self) -> bool:
        return True

    def notches(self) -> str:
        return self._notches

    def at_notch(self) -> bool:
        return self._setting in self._notch_indices

    def advance(self) -> None:
        self._setting = self._perm.wrap(self._setting + 1)
