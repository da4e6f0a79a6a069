from __future__ import annotations

from typing import List, Tuple

from .alphabet import Alphabet
from .errors import EnigmaError
from .registry import build_rotor
from .spec import MachineSpec


def validate_spec(spec: MachineSpec) -> Tuple[bool, List[str]]:
    """Collect every problem with SPEC instead of stopping at the first."""
    errs: List[str] = []

    try:
        alphabet = Alphabet(spec.alphabet)
    except EnigmaError as exc:
        return False, [f"alphabet: {exc}"]

    kinds = {"reflector": 0, "fixed": 0, "moving": 0}
    for rs in spec.rotors:
        try:
            build_rotor(rs, alphabet)
        except EnigmaError as exc:
            errs.append(f"rotor {rs.name}: {exc}")
            continue
        kinds[rs.kind] += 1

    # Enough rotors of each kind to fill every slot at least once.
    fixed_slots = spec.num_rotors - 1 - spec.num_pawls
    if kinds["reflector"] < 1:
        errs.append("no valid reflector in the catalog")
    if kinds["moving"] < spec.num_pawls:
        errs.append(f"{spec.num_pawls} pawl slots but only {kinds['moving']} moving rotors")
    if kinds["fixed"] < fixed_slots:
        errs.append(f"{fixed_slots} non-rotating slots but only {kinds['fixed']} fixed rotors")

    return (len(errs) == 0), errs
