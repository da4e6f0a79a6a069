from __future__ import annotations

from typing import Dict, Iterable, Iterator, List

from .alphabet import Alphabet
from .errors import UnknownRotor
from .rotors import FixedRotor, MovingRotor, Reflector, Rotor
from .permutation import Permutation
from .spec import RotorSpec


def build_rotor(spec: RotorSpec, alphabet: Alphabet) -> Rotor:
    perm = Permutation(spec.cycles, alphabet)
    if spec.kind == "reflector":
        return Reflector(spec.name, perm)
    if spec.kind == "fixed":
        return FixedRotor(spec.name, perm)
    if spec.kind == "moving":
        return MovingRotor(spec.name, perm, spec.notches)
    raise ValueError(f"Unknown rotor kind: {spec.kind}")


class RotorCatalog:
    """Name -> Rotor table for the rotors available to one machine."""

    def __init__(self, alphabet: Alphabet, rotors: Iterable[Rotor] = ()):
        self._alphabet = alphabet
        self._rotors: Dict[str, Rotor] = {}
        for r in rotors:
            self.register(r)

    @classmethod
    def from_specs(cls, alphabet: Alphabet, specs: Iterable[RotorSpec]) -> "RotorCatalog":
        return cls(alphabet, (build_rotor(s, alphabet) for s in specs))

    @property
    def alphabet(self) -> Alphabet:
        return self._alphabet

    def get(self, name: str) -> Rotor:
        if name not in self._rotors:
            raise UnknownRotor(f"Unknown rotor: {name}")
        return self._rotors[name]

    def exists(self, name: str) -> bool:
        return name in self._rotors

    def names(self) -> List[str]:
        return list(self._rotors)

    def list_by_kind(self, kind: str) -> List[Rotor]:
        kind = kind.lower()
        out = [r for r in self._rotors.values() if r.kind == kind]
        out.sort(key=lambda r: r.name)
        return out

    def register(self, rotor: Rotor) -> None:
        if rotor.alphabet != self._alphabet:
            raise ValueError(f"Rotor {rotor.name} uses a different alphabet")
        if rotor.name in self._rotors:
            raise ValueError(f"Duplicate rotor name: {rotor.name}")
        self._rotors[rotor.name] = rotor

    def __len__(self) -> int:
        return len(self._rotors)

    def __iter__(self) -> Iterator[Rotor]:
        return iter(self._rotors.values())
