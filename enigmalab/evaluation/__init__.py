"""Evaluation framework for the rotor machine.

Provides reciprocity verification, repeated-symbol stepping analysis and
ciphertext frequency statistics, plus a report aggregate.

Research / education only. Do NOT use in production.
"""

from .roundtrip import (
    RoundtripResult,
    RoundtripFailure,
    check_reciprocity,
    random_message,
    run_roundtrip_tests,
)
from .avalanche import SteppingResult, analyze_stepping, analyze_stepping_all
from .frequency import FrequencyResult, analyze_frequency
from .report import EvaluationReport
from .runner import evaluate_machine

__all__ = [
    "RoundtripResult",
    "RoundtripFailure",
    "check_reciprocity",
    "random_message",
    "run_roundtrip_tests",
    "SteppingResult",
    "analyze_stepping",
    "analyze_stepping_all",
    "FrequencyResult",
    "analyze_frequency",
    "EvaluationReport",
    "evaluate_machine",
]
