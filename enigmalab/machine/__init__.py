"""Rotor machine core: alphabet, components and the session engine.

Research / education only. Do NOT use in production.
"""

from .alphabet import DEFAULT_ALPHABET, DEFAULT_SYMBOLS, Alphabet, UnknownSymbol
from .components import (
    Plugboard,
    Reflector,
    Rotor,
    RotorBank,
    build_plugboard,
    build_reflector,
    build_rotor,
    build_rotor_bank,
    fixed_points,
    invert,
    is_involution,
    is_permutation,
)
from .engine import DEFAULT_NUM_ROTORS, Machine
from .spec import MachineSpec
from .builder import build_machine
from .validator import validate_machine

__all__ = [
    "DEFAULT_ALPHABET",
    "DEFAULT_SYMBOLS",
    "Alphabet",
    "UnknownSymbol",
    "Plugboard",
    "Reflector",
    "Rotor",
    "RotorBank",
    "build_plugboard",
    "build_reflector",
    "build_rotor",
    "build_rotor_bank",
    "fixed_points",
    "invert",
    "is_involution",
    "is_permutation",
    "DEFAULT_NUM_ROTORS",
    "Machine",
    "MachineSpec",
    "build_machine",
    "validate_machine",
]
