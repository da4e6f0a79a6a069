"""Historical rotor wirings and ready-made machine templates.

Wirings are given the way they are usually tabulated (the image of A, B, C, ...)
and converted to cycle notation when a template is requested.

Research / education only. Do NOT use in production.
"""
from __future__ import annotations

from typing import Dict, List, Optional

from .alphabet import Alphabet, UPPER
from .permutation import cycles_from_wiring
from .spec import MachineSpec, RotorSpec


# name -> (kind, notches, wiring)
HISTORICAL_ROTORS: Dict[str, tuple] = {
    # Enigma I / M3
    "I":    ("moving", "Q",  "EKMFLGDQVZNTOWYHXUSPAIBRCJ"),
    "II":   ("moving", "E",  "AJDKSIRUXBLHWTMCQGZNPYFVOE"),
    "III":  ("moving", "V",  "BDFHJLCPRTXVZNYEIWGAKMUSQO"),
    "IV":   ("moving", "J",  "ESOVPZJAYQUIRHXLNFTGKDCMWB"),
    "V":    ("moving", "Z",  "VZBRGITYUPSDNHLXAWMJQOFECK"),
    # Kriegsmarine M3/M4 additions (two notches)
    "VI":   ("moving", "ZM", "JPGVOUMFYQBENHZRDKASXLICTW"),
    "VII":  ("moving", "ZM", "NZJHGRCXMYSWBOUFAIVLPEKQDT"),
    "VIII": ("moving", "ZM", "FKQHTLXOCBJSPDZRAMEWNIUYGV"),
    # M4 greek wheels
    "Beta":  ("fixed", "", "LEYJVCNIXWPBQMDRTAKZGFUHOS"),
    "Gamma": ("fixed", "", "FSOKANUERHMBTIYCWLQPZXVGJD"),
    # Reflectors
    "B":      ("reflector", "", "YRUHQSLDPXNGOKMIEBFZCWVJAT"),
    "C":      ("reflector", "", "FVPJIAOYEDRZXWGCTKUQSBNMHL"),
    "B-thin": ("reflector", "", "ENKQAUYWJICOPBLMDXZVFTHRGS"),
    "C-thin": ("reflector", "", "RDOBJNTKVEHMLFCWZAXGYIPSUQ"),
}


TEMPLATES: Dict[str, Dict[str, object]] = {
    "ENIGMA_I": {
        "num_rotors": 4,
        "num_pawls": 3,
        "rotors": ["I", "II", "III", "IV", "V", "B", "C"],
        "notes": "Army/Air Force Enigma I: reflector plus three of five rotors.",
    },
    "ENIGMA_M3": {
        "num_rotors": 4,
        "num_pawls": 3,
        "rotors": ["I", "II", "III", "IV", "V", "VI", "VII", "VIII", "B", "C"],
        "notes": "Naval M3: reflector plus three of eight rotors.",
    },
    "ENIGMA_M4": {
        "num_rotors": 5,
        "num_pawls": 3,
        "rotors": ["I", "II", "III", "IV", "V", "VI", "VII", "VIII",
                   "Beta", "Gamma", "B-thin", "C-thin"],
        "notes": "Naval M4: thin reflector, greek wheel, three moving rotors.",
    },
}


def rotor_spec(name: str, alphabet: Optional[Alphabet] = None) -> RotorSpec:
    """RotorSpec for a historical rotor, with its wiring in cycle notation."""
    if name not in HISTORICAL_ROTORS:
        raise KeyError(f"Unknown historical rotor: {name}. Available: {list(HISTORICAL_ROTORS)}")
    kind, notches, wiring = HISTORICAL_ROTORS[name]
    alpha = alphabet or Alphabet(UPPER)
    return RotorSpec(name=name, kind=kind, notches=notches, cycles=cycles_from_wiring(wiring, alpha))


def get_template(name: str, *, override_name: Optional[str] = None) -> MachineSpec:
    """Get a predefined machine as a MachineSpec.

    Args:
        name: Template name (e.g., "ENIGMA_I", "ENIGMA_M4")
        override_name: Optional custom name for the spec

    Returns:
        MachineSpec over the 26-letter alphabet
    """
    if name not in TEMPLATES:
        raise KeyError(f"Unknown template: {name}. Available: {list(TEMPLATES.keys())}")

    t = TEMPLATES[name]
    alpha = Alphabet(UPPER)
    return MachineSpec(
        name=override_name or name,
        alphabet=UPPER,
        num_rotors=int(t["num_rotors"]),
        num_pawls=int(t["num_pawls"]),
        rotors=[rotor_spec(r, alpha) for r in t["rotors"]],
        notes=str(t.get("notes", "")),
    )


def list_templates() -> List[str]:
    return sorted(TEMPLATES.keys())
