"""Structured evaluation report builder.

Aggregates results from reciprocity tests, stepping analysis and ciphertext
frequency statistics into a single serializable report.

Research / education only. Do NOT use in production.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from .roundtrip import RoundtripResult
from .avalanche import SteppingResult
from .frequency import FrequencyResult


@dataclass
class EvaluationReport:
    """Complete evaluation report aggregating all analysis results."""
    timestamp: str = ""
    machine: Dict[str, Any] = field(default_factory=dict)
    validation_errors: List[str] = field(default_factory=list)
    roundtrip_results: List[RoundtripResult] = field(default_factory=list)
    stepping_results: List[SteppingResult] = field(default_factory=list)
    frequency: Optional[FrequencyResult] = None

    def __post_init__(self):
        if not self.timestamp:
            self.timestamp = datetime.now(timezone.utc).isoformat()

    @property
    def all_pass(self) -> bool:
        return (
            not self.validation_errors
            and all(r.is_perfect for r in self.roundtrip_results)
            and all(s.passes for s in self.stepping_results)
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize full report for JSON export."""
        return {
            "timestamp": self.timestamp,
            "machine": self.machine,
            "validation_errors": self.validation_errors,
            "roundtrip": [r.to_dict() for r in self.roundtrip_results],
            "stepping": [s.to_dict() for s in self.stepping_results],
            "frequency": self.frequency.to_dict() if self.frequency else None,
            "summary": {
                "roundtrip_all_pass": all(r.is_perfect for r in self.roundtrip_results),
                "stepping_all_pass": all(s.passes for s in self.stepping_results),
                "valid": not self.validation_errors,
                "all_pass": self.all_pass,
            },
        }

    def to_summary(self) -> str:
        """Human-readable summary for terminal display."""
        lines = [f"Evaluation Report - {self.timestamp}", "=" * 50]

        if self.validation_errors:
            lines.append(f"\nStructure: {len(self.validation_errors)} problem(s)")
            for err in self.validation_errors:
                lines.append(f"  {err}")
        else:
            lines.append("\nStructure: valid")

        if self.roundtrip_results:
            rt_pass = sum(1 for r in self.roundtrip_results if r.is_perfect)
            lines.append(f"\nReciprocity: {rt_pass}/{len(self.roundtrip_results)} runs pass")
            for r in self.roundtrip_results:
                lines.append(f"  {r.summary()}")

        if self.stepping_results:
            st_pass = sum(1 for s in self.stepping_results if s.passes)
            lines.append(f"\nStepping: {st_pass}/{len(self.stepping_results)} symbols pass")
            worst = max(self.stepping_results, key=lambda s: s.adjacent_equal_pairs)
            lines.append(f"  worst: {worst.summary()}")

        if self.frequency:
            lines.append(f"\nCiphertext {self.frequency.summary()}")

        return "\n".join(lines)

    def failing_symbols(self) -> List[str]:
        """Symbols whose stepping run produced a self-encryption."""
        return [s.symbol for s in self.stepping_results if not s.passes]
