"""Evaluation of rotor machine configurations.

Provides self-inverse roundtrip verification, stepping-period measurement
and symbol-frequency statistics, aggregated into a report.

Research / education only. Do NOT use in production.
"""

from .roundtrip import (
    RoundtripResult,
    RoundtripFailure,
    random_plugboard,
    random_setup,
    run_roundtrip_tests,
)
from .period import PeriodResult, measure_period
from .statistics import (
    StatisticsResult,
    chi_squared_uniform,
    ciphertext_statistics,
    index_of_coincidence,
    letter_frequencies,
)
from .report import EvaluationReport

__all__ = [
    "RoundtripResult",
    "RoundtripFailure",
    "random_plugboard",
    "random_setup",
    "run_roundtrip_tests",
    "PeriodResult",
    "measure_period",
    "StatisticsResult",
    "chi_squared_uniform",
    "ciphertext_statistics",
    "index_of_coincidence",
    "letter_frequencies",
    "EvaluationReport",
]
