"""The rotor machine: slot assignment, stepping and the signal path.

Slot 0 holds the reflector and slot ``num_rotors - 1`` the fastest rotor.
Each keypress first advances the rotors, then sends the signal through

    plugboard -> rightmost rotor ... reflector ... rightmost rotor -> plugboard

Research / education only. Do NOT use in production.
"""
from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Optional, Sequence, Union

from .alphabet import Alphabet
from .errors import (
    IndexOutOfRange,
    InvalidRotorPlacement,
    InvalidSettingLength,
    InvalidSymbol,
    ReflectorConstraintViolated,
    SlotCountMismatch,
    SlotUnconfigured,
)
from .permutation import Permutation
from .registry import RotorCatalog
from .rotors import Rotor

logger = logging.getLogger(__name__)

TraceFn = Callable[[str], None]


class Machine:
    """A rotor machine with NUM_ROTORS slots, NUM_PAWLS of which can rotate."""

    def __init__(
        self,
        alphabet: Alphabet,
        num_rotors: int,
        num_pawls: int,
        rotors: Union[RotorCatalog, Iterable[Rotor]],
        *,
        trace: Optional[TraceFn] = None,
    ):
        if num_rotors < 2:
            raise ValueError("A machine needs at least a reflector and one rotor")
        if not 0 <= num_pawls < num_rotors:
            raise ValueError(f"num_pawls must be in 0..{num_rotors - 1}")

        self._alphabet = alphabet
        self._num_rotors = num_rotors
        self._pawls = num_pawls
        self._catalog = rotors if isinstance(rotors, RotorCatalog) else RotorCatalog(alphabet, rotors)
        if self._catalog.alphabet != alphabet:
            raise ValueError("Rotor catalog uses a different alphabet")
        self._slots: List[Optional[Rotor]] = [None] * num_rotors
        self._plugboard = Permutation("", alphabet)
        self._trace = trace

    @property
    def alphabet(self) -> Alphabet:
        return self._alphabet

    @property
    def catalog(self) -> RotorCatalog:
        return self._catalog

    def num_rotors(self) -> int:
        return self._num_rotors

    def num_pawls(self) -> int:
        return self._pawls

    def get_rotor(self, k: int) -> Optional[Rotor]:
        """Rotor in slot K (0 is the reflector), or None if the slot is empty."""
        return self._slots[k]

    def plugboard(self) -> Permutation:
        return self._plugboard

    # ------------------------------------------------------------------
    # Setup
    # ------------------------------------------------------------------

    def insert_rotors(self, names: Sequence[str]) -> None:
        """Fill the slots with the named rotors, NAMES[0] being the reflector.

        Inserted rotors start at setting 0.
        """
        if len(names) != self._num_rotors:
            raise SlotCountMismatch(
                f"Expected {self._num_rotors} rotor names, got {len(names)}"
            )
        chosen = [self._catalog.get(name) for name in names]

        if len(set(names)) != len(names):
            raise InvalidRotorPlacement(f"A rotor may occupy only one slot: {' '.join(names)}")
        if not chosen[0].reflecting():
            raise ReflectorConstraintViolated(f"Rotor {chosen[0].name} in slot 0 is not a reflector")

        first_moving = self._num_rotors - self._pawls
        for k, rotor in enumerate(chosen[1:], start=1):
            if rotor.reflecting():
                raise ReflectorConstraintViolated(f"Reflector {rotor.name} may only occupy slot 0")
            if rotor.rotates() != (k >= first_moving):
                where = "a pawl slot" if k >= first_moving else "a slot without a pawl"
                raise InvalidRotorPlacement(f"Rotor {rotor.name} ({rotor.kind}) cannot occupy {where}")

        for rotor in chosen:
            rotor.set(0)
        self._slots = chosen
        logger.debug("Inserted rotors %s", " ".join(names))

    def set_rotors(self, setting: str) -> None:
        """Set slots 1.. left to right from SETTING, num_rotors()-1 symbols."""
        self._require_configured()
        if len(setting) != self._num_rotors - 1:
            raise InvalidSettingLength(
                f"Setting {setting!r} must have {self._num_rotors - 1} symbols"
            )
        for ch in setting:
            if ch not in self._alphabet:
                raise InvalidSymbol(f"Setting symbol {ch!r} is not in the alphabet")
        for k, ch in enumerate(setting, start=1):
            self._slots[k].set(ch)
        logger.debug("Rotor settings %s", setting)

    def set_plugboard(self, plugboard: Permutation) -> None:
        if plugboard.alphabet != self._alphabet:
            raise ValueError("Plugboard uses a different alphabet")
        self._plugboard = plugboard
        logger.debug("Plugboard %r", plugboard)

    def reset_plugboard(self) -> None:
        self.set_plugboard(Permutation("", self._alphabet))

    def settings(self) -> str:
        """Current settings of slots 1.., as alphabet symbols."""
        self._require_configured()
        return "".join(self._alphabet.to_char(r.setting) for r in self._slots[1:])

    def _require_configured(self) -> None:
        empty = [k for k, r in enumerate(self._slots) if r is None]
        if empty:
            raise SlotUnconfigured(f"Rotor slots {empty} have not been assigned")

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def convert_index(self, c: int) -> int:
        """Advance the rotors, then encode index C (0..size-1)."""
        self._require_configured()
        if not 0 <= c < self._alphabet.size():
            raise IndexOutOfRange(f"Index {c} out of range 0..{self._alphabet.size() - 1}")

        self._advance_rotors()
        prefix = f"[{self.settings()}] {self._alphabet.to_char(c)} -> " if self._trace else ""

        c = self._plugboard.permute(c)
        plugged = c
        c = self._apply_rotors(c)
        c = self._plugboard.permute(c)

        if self._trace:
            self._trace(f"{prefix}{self._alphabet.to_char(plugged)} -> {self._alphabet.to_char(c)}")
        return c

    def convert(self, msg: Union[str, int]) -> Union[str, int]:
        """Encode MSG, skipping symbols outside the alphabet.

        Given an int, behaves like convert_index. Rotor state persists across
        calls.
        """
        if isinstance(msg, int):
            return self.convert_index(msg)
        self._require_configured()
        out: List[str] = []
        for ch in msg:
            if ch in self._alphabet:
                out.append(self._alphabet.to_char(self.convert_index(self._alphabet.to_index(ch))))
        return "".join(out)

    def step(self) -> List[bool]:
        """Advance the rotors as one keypress would, without converting.

        Returns which slots moved.
        """
        self._require_configured()
        return self._advance_rotors()

    def _advance_rotors(self) -> List[bool]:
        # Decide from the pre-advance positions, then move everything at once.
        slots = self._slots
        last = self._num_rotors - 1
        advance = [False] * self._num_rotors
        advance[last] = True
        for j in range(last, 0, -1):
            if slots[j].at_notch():
                advance[j - 1] = True
                if slots[j - 1].rotates():
                    advance[j] = True
        for k, rotor in enumerate(slots):
            advance[k] = advance[k] and rotor.rotates()
            if advance[k]:
                rotor.advance()
        return advance

    def _apply_rotors(self, c: int) -> int:
        for rotor in reversed(self._slots):
            c = rotor.convert_forward(c)
        for rotor in self._slots[1:]:
            c = rotor.convert_backward(c)
        return c
