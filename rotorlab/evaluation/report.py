"""Collects the results of one evaluation run for JSON export and console output."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List

from .period import PeriodResult
from .roundtrip import RoundtripResult
from .statistics import StatisticsResult


@dataclass
class EvaluationReport:
    timestamp: str = ""
    roundtrip_results: List[RoundtripResult] = field(default_factory=list)
    period_results: List[PeriodResult] = field(default_factory=list)
    statistics_results: List[StatisticsResult] = field(default_factory=list)

    def __post_init__(self):
        if not self.timestamp:
            self.timestamp = datetime.now(timezone.utc).isoformat()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "timestamp": self.timestamp,
            "roundtrip": [r.to_dict() for r in self.roundtrip_results],
            "period": [p.to_dict() for p in self.period_results],
            "statistics": [s.to_dict() for s in self.statistics_results],
            "summary": {
                "machines_tested": len(self.roundtrip_results),
                "roundtrip_all_pass": all(r.is_perfect for r in self.roundtrip_results),
                "failing_machines": self.failing_machines(),
            },
        }

    def to_summary(self) -> str:
        lines = [f"Evaluation Report - {self.timestamp}", "=" * 50]

        if self.roundtrip_results:
            rt_pass = sum(1 for r in self.roundtrip_results if r.is_perfect)
            lines.append(f"\nRoundtrip Tests: {rt_pass}/{len(self.roundtrip_results)} machines pass")
            for r in self.roundtrip_results:
                lines.append(f"  {r.summary()}")

        if self.period_results:
            lines.append(f"\nStepping Periods: {len(self.period_results)} setups")
            for p in self.period_results:
                lines.append(f"  {p.summary()}")

        if self.statistics_results:
            lines.append(f"\nFrequency Statistics: {len(self.statistics_results)} samples")
            for s in self.statistics_results:
                lines.append(f"  {s.summary()}")

        return "\n".join(lines)

    def failing_machines(self) -> List[str]:
        return [r.machine_name for r in self.roundtrip_results if not r.is_perfect]
