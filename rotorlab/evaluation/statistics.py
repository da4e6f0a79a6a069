"""Symbol-frequency statistics of plaintext and ciphertext.

A polyalphabetic rotor machine should flatten the plaintext's frequency
profile: the index of coincidence of the ciphertext drifts toward the value
for uniformly random text, 1/N.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Tuple

import numpy as np

from rotorlab.cipher.alphabet import Alphabet
from rotorlab.cipher.builder import build_configured_machine
from rotorlab.cipher.spec import MachineSpec, SetupSpec


def letter_frequencies(text: str, alphabet: Alphabet) -> np.ndarray:
    """Counts of each alphabet symbol in TEXT (non-members ignored)."""
    idx = np.fromiter(
        (alphabet.to_index(ch) for ch in text if ch in alphabet),
        dtype=np.int64,
    )
    return np.bincount(idx, minlength=alphabet.size())


def index_of_coincidence(text: str, alphabet: Alphabet) -> float:
    counts = letter_frequencies(text, alphabet)
    total = int(counts.sum())
    if total < 2:
        return 0.0
    return float((counts * (counts - 1)).sum()) / (total * (total - 1))


def chi_squared_uniform(counts: np.ndarray) -> float:
    total = counts.sum()
    if total == 0:
        return 0.0
    expected = total / len(counts)
    return float(((counts - expected) ** 2 / expected).sum())


@dataclass
class StatisticsResult:
    machine_name: str
    length: int
    plaintext_ioc: float
    ciphertext_ioc: float
    random_ioc: float
    ciphertext_chi_squared: float
    most_common: List[Tuple[str, int]]

    @property
    def flattened(self) -> bool:
        """Ciphertext closer to uniform than the plaintext was."""
        return abs(self.ciphertext_ioc - self.random_ioc) < abs(self.plaintext_ioc - self.random_ioc)

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["flattened"] = self.flattened
        return d

    def summary(self) -> str:
        return (
            f"{self.machine_name}: IoC plaintext={self.plaintext_ioc:.4f}, "
            f"ciphertext={self.ciphertext_ioc:.4f} (random={self.random_ioc:.4f}), "
            f"chi2={self.ciphertext_chi_squared:.1f} over {self.length} symbols"
        )


def ciphertext_statistics(
    spec: MachineSpec,
    setup: SetupSpec,
    plaintext: str,
    *,
    top: int = 5,
) -> StatisticsResult:
    machine = build_configured_machine(spec, setup)
    alphabet = machine.alphabet
    ciphertext = machine.convert(plaintext)

    counts = letter_frequencies(ciphertext, alphabet)
    order = np.argsort(-counts, kind="stable")[:top]
    return StatisticsResult(
        machine_name=spec.name,
        length=len(ciphertext),
        plaintext_ioc=round(index_of_coincidence(plaintext, alphabet), 6),
        ciphertext_ioc=round(index_of_coincidence(ciphertext, alphabet), 6),
        random_ioc=round(1.0 / alphabet.size(), 6),
        ciphertext_chi_squared=round(chi_squared_uniform(counts), 4),
        most_common=[(alphabet.to_char(int(i)), int(counts[i])) for i in order],
    )
