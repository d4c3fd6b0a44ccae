from __future__ import annotations

from typing import List, Tuple

from .components import fixed_points, is_involution, is_permutation
from .engine import Machine


def validate_machine(machine: Machine) -> Tuple[bool, List[str]]:
    errs: List[str] = []

    if not machine.is_initialized:
        return False, ["Machine is not initialized"]

    size = len(machine.alphabet)

    # Plugboard
    pb = machine.plugboard.mapping
    if len(pb) != size:
        errs.append(f"Plugboard size {len(pb)} != alphabet size {size}")
    elif not is_involution(pb):
        errs.append("Plugboard is not an involution")

    # Reflector
    ref = machine.reflector.mapping
    if len(ref) != size:
        errs.append(f"Reflector size {len(ref)} != alphabet size {size}")
    else:
        if not is_involution(ref):
            errs.append("Reflector is not an involution")
        fp = fixed_points(ref)
        if fp:
            errs.append(f"Reflector has fixed points: {fp[:5]}")

    # Rotors
    if len(machine.rotors) != machine.num_rotors:
        errs.append(f"Rotor bank holds {len(machine.rotors)} rotors, expected {machine.num_rotors}")
    for i, rotor in enumerate(machine.rotors):
        if rotor.size != size:
            errs.append(f"Rotor {i} size {rotor.size} != alphabet size {size}")
            continue
        if not is_permutation(rotor.wiring):
            errs.append(f"Rotor {i} live wiring is not a permutation")
        if not is_permutation(rotor.starting_configuration):
            errs.append(f"Rotor {i} starting configuration is not a permutation")

    return (len(errs) == 0), errs
