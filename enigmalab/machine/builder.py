from __future__ import annotations

import random
from typing import Optional

from ..utils.repro import build_rng
from .engine import Machine
from .spec import MachineSpec


def build_machine(spec: MachineSpec, rng: Optional[random.Random] = None) -> Machine:
    """Create and initialize a machine from a spec.

    An explicit ``rng`` wins over ``spec.seed``.
    """
    source = rng if rng is not None else build_rng(spec.seed)
    machine = Machine(num_rotors=spec.num_rotors, rng=source)
    machine.initialize()
    return machine
