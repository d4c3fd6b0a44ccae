"""Reciprocity verification: reset, encrypt, reset, decrypt must give back M.

Generates randomized messages over the machine alphabet and checks that a
second pass from the starting rotor state reproduces every message exactly.

Research / education only. Do NOT use in production.
"""
from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Optional

from enigmalab.machine.alphabet import Alphabet
from enigmalab.machine.builder import build_machine
from enigmalab.machine.engine import Machine
from enigmalab.machine.spec import MachineSpec

logger = logging.getLogger(__name__)


@dataclass
class RoundtripFailure:
    """Details of a single failed message."""
    vector_index: int
    plaintext: str
    ciphertext: str
    decrypted: str           # What the second pass returned (should equal plaintext)
    error: Optional[str]     # Exception message if a pass threw


@dataclass
class RoundtripResult:
    """Aggregate result of reciprocity testing for one machine."""
    machine_name: str
    num_rotors: int
    alphabet_size: int
    message_length: int
    total_vectors: int
    passed: int
    failed: int
    failures: List[RoundtripFailure] = field(default_factory=list)
    elapsed_seconds: float = 0.0
    seed: int = 1337

    @property
    def success_rate(self) -> float:
        return self.passed / self.total_vectors if self.total_vectors > 0 else 0.0

    @property
    def is_perfect(self) -> bool:
        return self.failed == 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def summary(self) -> str:
        status = "PASS" if self.is_perfect else "FAIL"
        return (
            f"[{status}] {self.machine_name} ({self.num_rotors} rotors): "
            f"{self.passed}/{self.total_vectors} messages reciprocal "
            f"({self.elapsed_seconds:.2f}s)"
        )


def random_message(rng: random.Random, alphabet: Alphabet, length: int) -> str:
    symbols = alphabet.symbols
    return "".join(rng.choice(symbols) for _ in range(length))


def check_reciprocity(machine: Machine, message: str) -> tuple[str, str]:
    """Return (ciphertext, decrypted) for one message from the starting state."""
    machine.reset()
    ct = machine.process(message)
    machine.reset()
    pt = machine.process(ct)
    return ct, pt


def run_roundtrip_tests(
    spec: MachineSpec,
    *,
    num_vectors: int = 200,
    message_length: int = 64,
    seed: int = 1337,
    max_failures_recorded: int = 10,
    machine: Optional[Machine] = None,
) -> RoundtripResult:
    """Run reciprocity verification across many random messages.

    Args:
        spec: Machine specification to build (ignored if ``machine`` is given).
        num_vectors: Number of random messages to test.
        message_length: Symbols per message.
        seed: Seed for the message generator (and for the machine when
            ``spec.seed`` is unset).
        max_failures_recorded: Maximum number of failure details to keep.
        machine: Optional pre-built machine to test instead.

    Returns:
        RoundtripResult with pass/fail counts and failure details.
    """
    if machine is None:
        machine_seed = spec.seed if spec.seed is not None else seed
        machine = build_machine(spec.model_copy(update={"seed": machine_seed}))

    rng = random.Random(seed)
    passed = 0
    failed = 0
    failures: List[RoundtripFailure] = []

    start = time.perf_counter()

    for i in range(num_vectors):
        msg = random_message(rng, machine.alphabet, message_length)

        try:
            ct, pt = check_reciprocity(machine, msg)

            if pt == msg:
                passed += 1
            else:
                failed += 1
                if len(failures) < max_failures_recorded:
                    failures.append(RoundtripFailure(
                        vector_index=i,
                        plaintext=msg,
                        ciphertext=ct,
                        decrypted=pt,
                        error=None,
                    ))
        except Exception as exc:
            failed += 1
            if len(failures) < max_failures_recorded:
                failures.append(RoundtripFailure(
                    vector_index=i,
                    plaintext=msg,
                    ciphertext="<error>",
                    decrypted="<error>",
                    error=str(exc),
                ))

    elapsed = time.perf_counter() - start
    machine.reset()

    if failed:
        logger.warning("%s: %d/%d messages failed reciprocity", spec.name, failed, num_vectors)

    return RoundtripResult(
        machine_name=spec.name,
        num_rotors=machine.num_rotors,
        alphabet_size=len(machine.alphabet),
        message_length=message_length,
        total_vectors=num_vectors,
        passed=passed,
        failed=failed,
        failures=failures,
        elapsed_seconds=round(elapsed, 4),
        seed=seed,
    )
