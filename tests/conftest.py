import sys
from pathlib import Path

import pytest

# Ensure project root is on path for rotorlab imports
_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from rotorlab.cipher.alphabet import Alphabet
from rotorlab.cipher.machine import Machine
from rotorlab.cipher.permutation import Permutation
from rotorlab.cipher.rotors import FixedRotor, MovingRotor, Reflector
from rotorlab.cipher.spec import MachineSpec, RotorSpec


SMALL_CONFIG = """
ABCD
3 1
R1 R (AC) (BD)
F1 N
M1 MA (ABCD)
"""


@pytest.fixture
def abcd():
    return Alphabet("ABCD")


@pytest.fixture
def small_machine(abcd):
    """Reflector (AC)(BD), identity fixed rotor, moving rotor (ABCD) notched at A."""
    rotors = [
        Reflector("R1", Permutation("(AC) (BD)", abcd)),
        FixedRotor("F1", Permutation("", abcd)),
        MovingRotor("M1", Permutation("(ABCD)", abcd), "A"),
    ]
    return Machine(abcd, 3, 1, rotors)


@pytest.fixture
def small_spec():
    return MachineSpec(
        name="small",
        alphabet="ABCD",
        num_rotors=3,
        num_pawls=1,
        rotors=[
            RotorSpec(name="R1", kind="reflector", cycles="(AC) (BD)"),
            RotorSpec(name="F1", kind="fixed"),
            RotorSpec(name="M1", kind="moving", notches="A", cycles="(ABCD)"),
        ],
    )
