from __future__ import annotations

import logging
import random
from typing import Callable, Optional

from enigmalab.machine.builder import build_machine
from enigmalab.machine.spec import MachineSpec
from enigmalab.machine.validator import validate_machine

from .avalanche import analyze_stepping_all
from .frequency import analyze_frequency
from .report import EvaluationReport
from .roundtrip import random_message, run_roundtrip_tests

logger = logging.getLogger(__name__)


def evaluate_machine(
    spec: MachineSpec,
    *,
    num_vectors: int = 200,
    message_length: int = 64,
    frequency_length: int = 5000,
    seed: int = 1337,
    progress_callback: Optional[Callable[[str, int, int], None]] = None,
) -> EvaluationReport:
    """Run the full evaluation: structure, reciprocity, stepping, frequency.

    Args:
        spec: Machine specification; ``spec.seed`` falls back to ``seed``.
        num_vectors: Random messages for the reciprocity check.
        message_length: Symbols per reciprocity message.
        frequency_length: Length of the random plaintext whose ciphertext is
            used for frequency statistics.
        seed: Seed for message generation.
        progress_callback: Optional callback(stage, current, total).

    Returns:
        EvaluationReport with every section filled in.
    """
    if spec.seed is None:
        spec = spec.model_copy(update={"seed": seed})
    machine = build_machine(spec)

    if progress_callback:
        progress_callback("structure", 0, 4)
    ok, errs = validate_machine(machine)
    if not ok:
        logger.warning("%s failed structural validation: %s", spec.name, "; ".join(errs))

    if progress_callback:
        progress_callback("reciprocity", 1, 4)
    rt = run_roundtrip_tests(
        spec,
        num_vectors=num_vectors,
        message_length=message_length,
        seed=seed,
        machine=machine,
    )

    if progress_callback:
        progress_callback("stepping", 2, 4)
    stepping = analyze_stepping_all(machine)

    if progress_callback:
        progress_callback("frequency", 3, 4)
    plaintext = random_message(random.Random(seed + 1), machine.alphabet, frequency_length)
    machine.reset()
    freq = analyze_frequency(machine.process(plaintext), machine.alphabet)
    machine.reset()

    report = EvaluationReport(
        machine={**machine.describe(), "name": spec.name, "seed": spec.seed},
        validation_errors=errs,
        roundtrip_results=[rt],
        stepping_results=stepping,
        frequency=freq,
    )
    logger.info("Evaluation of %s finished: all_pass=%s", spec.name, report.all_pass)
    return report
