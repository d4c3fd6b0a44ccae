"""Stepping analysis: how the output changes while the input stays constant.

Feeds a run of one repeated symbol through the machine from its starting
state. Because the rotor bank advances before every symbol, a good machine
should rarely repeat an output on consecutive positions and must never map
a symbol to itself (the reflector has no fixed points, and conjugating it by
the plugboard and rotors preserves that).

Research / education only. Do NOT use in production.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional

from enigmalab.machine.engine import Machine


@dataclass
class SteppingResult:
    """Output statistics for one repeated-symbol run."""
    symbol: str
    length: int
    output: str
    adjacent_equal_pairs: int   # positions i with out[i] == out[i+1]
    distinct_outputs: int
    self_encryptions: int       # positions where the output equals the input
    period: Optional[int]       # smallest repeat period of the output, if seen

    @property
    def adjacent_equal_rate(self) -> float:
        pairs = self.length - 1
        return self.adjacent_equal_pairs / pairs if pairs > 0 else 0.0

    @property
    def passes(self) -> bool:
        return self.self_encryptions == 0

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["adjacent_equal_rate"] = self.adjacent_equal_rate
        d["passes"] = self.passes
        return d

    def summary(self) -> str:
        status = "PASS" if self.passes else "FAIL"
        period = self.period if self.period is not None else "n/a"
        return (
            f"[{status}] stepping({self.symbol!r} x{self.length}): "
            f"distinct={self.distinct_outputs}, "
            f"adjacent_equal={self.adjacent_equal_pairs}, "
            f"self_maps={self.self_encryptions}, period={period}"
        )


def _smallest_period(seq: str) -> Optional[int]:
    n = len(seq)
    for p in range(1, n // 2 + 1):
        if all(seq[i] == seq[i + p] for i in range(n - p)):
            return p
    return None


def analyze_stepping(machine: Machine, symbol: str = "A", length: Optional[int] = None) -> SteppingResult:
    """Encrypt ``symbol`` repeated ``length`` times from the starting state.

    ``length`` defaults to two full rotor cycles (2 * alphabet size) so the
    period of the uniform stepping shows up. The machine is left reset.
    """
    if length is None:
        length = 2 * len(machine.alphabet)
    if length < 1:
        raise ValueError(f"length must be >= 1, got {length}")

    machine.reset()
    out = machine.process(symbol * length)
    machine.reset()

    adjacent = sum(1 for a, b in zip(out, out[1:]) if a == b)
    return SteppingResult(
        symbol=symbol,
        length=length,
        output=out,
        adjacent_equal_pairs=adjacent,
        distinct_outputs=len(set(out)),
        self_encryptions=out.count(symbol),
        period=_smallest_period(out),
    )


def analyze_stepping_all(machine: Machine, length: Optional[int] = None) -> List[SteppingResult]:
    """Run ``analyze_stepping`` once per alphabet symbol."""
    return [analyze_stepping(machine, ch, length) for ch in machine.alphabet]
