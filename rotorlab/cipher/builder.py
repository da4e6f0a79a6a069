from __future__ import annotations

import logging
from typing import Optional

from .alphabet import Alphabet
from .machine import Machine, TraceFn
from .permutation import Permutation
from .registry import RotorCatalog
from .spec import MachineSpec, SetupSpec

logger = logging.getLogger(__name__)


def build_machine(spec: MachineSpec, *, trace: Optional[TraceFn] = None) -> Machine:
    """Build an unconfigured Machine with its own freshly built rotors."""
    alphabet = Alphabet(spec.alphabet)
    catalog = RotorCatalog.from_specs(alphabet, spec.rotors)
    logger.debug(
        "Built machine %s: %d slots, %d pawls, %d rotors available",
        spec.name, spec.num_rotors, spec.num_pawls, len(catalog),
    )
    return Machine(alphabet, spec.num_rotors, spec.num_pawls, catalog, trace=trace)


def apply_setup(machine: Machine, setup: SetupSpec) -> None:
    """Insert rotors, set them, and install the plugboard for one message block.

    The plugboard is always replaced: an empty setup.plugboard means identity,
    so a plugboard from an earlier block never carries over.
    """
    machine.insert_rotors(setup.rotors)
    machine.set_rotors(setup.setting)
    machine.set_plugboard(Permutation(setup.plugboard, machine.alphabet))


def build_configured_machine(
    spec: MachineSpec,
    setup: SetupSpec,
    *,
    trace: Optional[TraceFn] = None,
) -> Machine:
    machine = build_machine(spec, trace=trace)
    apply_setup(machine, setup)
    return machine
