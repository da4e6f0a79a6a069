"""Stepping period of a configured machine.

Counts keypresses until the rotor settings first return to their starting
values. With three 26-symbol single-notch rotors the double step shortens the
naive 26**3 = 17576 to 26*25*26 = 16900.
"""
from __future__ import annotations

import time
from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Optional

from rotorlab.cipher.builder import build_configured_machine
from rotorlab.cipher.spec import MachineSpec, SetupSpec


@dataclass
class PeriodResult:
    machine_name: str
    rotors: List[str]
    start_setting: str
    period: Optional[int]            # None if the limit was reached first
    limit: int
    advances_per_slot: List[int] = field(default_factory=list)
    double_steps: int = 0            # steps a rotor took because of its own notch
    elapsed_seconds: float = 0.0

    @property
    def found(self) -> bool:
        return self.period is not None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def summary(self) -> str:
        if self.period is None:
            return f"{self.machine_name} [{' '.join(self.rotors)}] from {self.start_setting}: no period within {self.limit}"
        return (
            f"{self.machine_name} [{' '.join(self.rotors)}] from {self.start_setting}: "
            f"period {self.period}, {self.double_steps} double steps"
        )


def measure_period(spec: MachineSpec, setup: SetupSpec, *, limit: int = 100_000) -> PeriodResult:
    machine = build_configured_machine(spec, setup)
    start_setting = machine.settings()
    n = machine.num_rotors()
    advances = [0] * n
    double_steps = 0
    period: Optional[int] = None

    t0 = time.perf_counter()
    for tick in range(1, limit + 1):
        before = [machine.get_rotor(k).at_notch() for k in range(n)]
        moved = machine.step()
        for k in range(n):
            if moved[k]:
                advances[k] += 1
        # Moved at its own notch while driving its left neighbour,
        # with no notch engaged to its right.
        for k in range(1, n - 1):
            if moved[k] and moved[k - 1] and before[k] and not before[k + 1]:
                double_steps += 1
        if machine.settings() == start_setting:
            period = tick
            break
    elapsed = time.perf_counter() - t0

    return PeriodResult(
        machine_name=spec.name,
        rotors=list(setup.rotors),
        start_setting=start_setting,
        period=period,
        limit=limit,
        advances_per_slot=advances,
        double_steps=double_steps,
        elapsed_seconds=round(elapsed, 4),
    )
