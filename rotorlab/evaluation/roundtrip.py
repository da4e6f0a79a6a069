"""Self-inverse verification: decrypting C = E(P) at the same setup gives P.

Draws random setups (rotor choice, settings, plugboard pairs) and random
messages from a machine spec and checks that every message survives the
roundtrip. Also counts symbols that encrypted to themselves, which a
reflector with no fixed points makes impossible.

Research / education only. Do NOT use in production.
"""
from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Optional

from rotorlab.cipher.builder import apply_setup, build_machine
from rotorlab.cipher.errors import EnigmaError
from rotorlab.cipher.spec import MachineSpec, SetupSpec

logger = logging.getLogger(__name__)


@dataclass
class RoundtripFailure:
    """Details of a single failed roundtrip."""
    message_index: int
    rotors: List[str]
    setting: str
    plugboard: str
    plaintext: str
    ciphertext: str
    decrypted: str           # What the second pass returned (should equal plaintext)
    error: Optional[str]     # Exception message if a pass threw


@dataclass
class RoundtripResult:
    """Aggregate result of roundtrip testing for one machine."""
    machine_name: str
    num_rotors: int
    num_pawls: int
    total_messages: int
    passed: int
    failed: int
    self_encryptions: int = 0
    failures: List[RoundtripFailure] = field(default_factory=list)
    elapsed_seconds: float = 0.0
    seed: int = 1337

    @property
    def success_rate(self) -> float:
        return self.passed / self.total_messages if self.total_messages > 0 else 0.0

    @property
    def is_perfect(self) -> bool:
        return self.failed == 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def summary(self) -> str:
        status = "PASS" if self.is_perfect else "FAIL"
        return (
            f"[{status}] {self.machine_name}: "
            f"{self.passed}/{self.total_messages} messages roundtripped, "
            f"{self.self_encryptions} self-encryptions "
            f"({self.elapsed_seconds:.2f}s)"
        )


def random_plugboard(alphabet: str, rng: random.Random, *, max_pairs: int = 10) -> str:
    """Cycle notation for up to MAX_PAIRS random disjoint swaps."""
    symbols = list(alphabet)
    rng.shuffle(symbols)
    n_pairs = rng.randint(0, min(max_pairs, len(symbols) // 2))
    return " ".join(f"({symbols[2 * i]}{symbols[2 * i + 1]})" for i in range(n_pairs))


def random_setup(spec: MachineSpec, rng: random.Random, *, max_pairs: int = 10) -> SetupSpec:
    """Pick a legal rotor order, setting and plugboard for SPEC."""
    by_kind: Dict[str, List[str]] = {"reflector": [], "fixed": [], "moving": []}
    for r in spec.rotors:
        by_kind[r.kind].append(r.name)

    n_fixed = spec.num_rotors - 1 - spec.num_pawls
    if not by_kind["reflector"] or len(by_kind["fixed"]) < n_fixed or len(by_kind["moving"]) < spec.num_pawls:
        raise ValueError(f"{spec.name}: not enough rotors of each kind to fill the slots")

    rotors = (
        [rng.choice(by_kind["reflector"])]
        + rng.sample(by_kind["fixed"], n_fixed)
        + rng.sample(by_kind["moving"], spec.num_pawls)
    )
    setting = "".join(rng.choice(spec.alphabet) for _ in range(spec.num_rotors - 1))
    return SetupSpec(
        rotors=rotors,
        setting=setting,
        plugboard=random_plugboard(spec.alphabet, rng, max_pairs=max_pairs),
    )


def run_roundtrip_tests(
    spec: MachineSpec,
    *,
    num_messages: int = 200,
    message_length: int = 60,
    seed: int = 1337,
    max_failures_recorded: int = 10,
) -> RoundtripResult:
    """Encrypt random messages under random setups, then decrypt and compare.

    Args:
        spec: Machine description to test.
        num_messages: Number of (setup, message) pairs to test.
        message_length: Symbols per message.
        seed: Random seed for deterministic reproducibility.
        max_failures_recorded: Maximum number of failure details to keep.

    Returns:
        RoundtripResult with pass/fail counts and failure details.
    """
    machine = build_machine(spec)
    rng = random.Random(seed)
    passed = 0
    failed = 0
    self_encryptions = 0
    failures: List[RoundtripFailure] = []

    start = time.perf_counter()

    for i in range(num_messages):
        setup = random_setup(spec, rng)
        pt = "".join(rng.choice(spec.alphabet) for _ in range(message_length))
        ct = pt2 = ""

        try:
            apply_setup(machine, setup)
            ct = machine.convert(pt)
            apply_setup(machine, setup)
            pt2 = machine.convert(ct)
        except EnigmaError as exc:
            failed += 1
            if len(failures) < max_failures_recorded:
                failures.append(RoundtripFailure(
                    message_index=i,
                    rotors=setup.rotors,
                    setting=setup.setting,
                    plugboard=setup.plugboard,
                    plaintext=pt,
                    ciphertext=ct or "<error>",
                    decrypted="<error>",
                    error=str(exc),
                ))
            continue

        self_encryptions += sum(1 for a, b in zip(pt, ct) if a == b)
        if pt == pt2:
            passed += 1
        else:
            failed += 1
            if len(failures) < max_failures_recorded:
                failures.append(RoundtripFailure(
                    message_index=i,
                    rotors=setup.rotors,
                    setting=setup.setting,
                    plugboard=setup.plugboard,
                    plaintext=pt,
                    ciphertext=ct,
                    decrypted=pt2,
                    error=None,
                ))

    elapsed = time.perf_counter() - start
    if failed:
        logger.warning("%s: %d of %d roundtrips failed", spec.name, failed, num_messages)

    return RoundtripResult(
        machine_name=spec.name,
        num_rotors=spec.num_rotors,
        num_pawls=spec.num_pawls,
        total_messages=num_messages,
        passed=passed,
        failed=failed,
        self_encryptions=self_encryptions,
        failures=failures,
        elapsed_seconds=round(elapsed, 4),
        seed=seed,
    )
