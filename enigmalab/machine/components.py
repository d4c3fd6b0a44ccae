"""Rotor-machine components: plugboard, reflector, rotors and the rotor bank.

All components work on alphabet indices in [0, size). Randomized builders
take an injected ``random.Random``-compatible source and construct their
permutations by explicit rejection sampling, so a seeded source reproduces
the same machine.

Research / education only. Do NOT use in production.
"""
from __future__ import annotations

import random
from typing import List, Sequence, Tuple

from .alphabet import Alphabet


# ============================================================================
# PERMUTATION HELPERS
# ============================================================================

def is_permutation(mapping: Sequence[int]) -> bool:
    """True if mapping is a bijection over range(len(mapping))."""
    return sorted(mapping) == list(range(len(mapping)))


def is_involution(mapping: Sequence[int]) -> bool:
    """True if mapping[mapping[i]] == i for every i."""
    n = len(mapping)
    return all(0 <= v < n and mapping[v] == i for i, v in enumerate(mapping))


def fixed_points(mapping: Sequence[int]) -> List[int]:
    return [i for i, v in enumerate(mapping) if i == v]


def invert(mapping: Sequence[int]) -> List[int]:
    inv = [0] * len(mapping)
    for i, v in enumerate(mapping):
        inv[v] = i
    return inv


# ============================================================================
# PLUGBOARD
# ============================================================================

class Plugboard:
    """Fixed involutive substitution applied on entry and on exit."""

    def __init__(self, mapping: Sequence[int]):
        if not is_involution(mapping):
            raise ValueError("Plugboard mapping must be an involution")
        self._map: Tuple[int, ...] = tuple(mapping)

    @property
    def size(self) -> int:
        return len(self._map)

    @property
    def mapping(self) -> Tuple[int, ...]:
        return self._map

    def apply(self, index: int) -> int:
        return self._map[index]

    def __repr__(self) -> str:
        return f"<Plugboard size={self.size}>"


def build_plugboard(alphabet: Alphabet) -> Plugboard:
    """Pair each symbol with its mirror: index i <-> index size-1-i."""
    size = len(alphabet)
    mapping = [alphabet.index_of(alphabet.symbol_at(size - 1 - i)) for i in range(size)]
    return Plugboard(mapping)


# ============================================================================
# REFLECTOR
# ============================================================================

class Reflector:
    """Fixed-point-free involution that turns the signal back through the rotors."""

    def __init__(self, mapping: Sequence[int]):
        if not is_involution(mapping):
            raise ValueError("Reflector wiring must be an involution")
        if fixed_points(mapping):
            raise ValueError("Reflector wiring must not map any index to itself")
        self._map: Tuple[int, ...] = tuple(mapping)

    @property
    def size(self) -> int:
        return len(self._map)

    @property
    def mapping(self) -> Tuple[int, ...]:
        return self._map

    def reflect(self, index: int) -> int:
        return self._map[index]

    def __repr__(self) -> str:
        return f"<Reflector size={self.size}>"


def build_reflector(size: int, rng: random.Random) -> Reflector:
    """Pair every index with a distinct random partner.

    Walks indices in order; each unassigned index draws candidates until one
    is neither itself nor already paired, then both ends are wired together.
    """
    if size < 2 or size % 2 != 0:
        raise ValueError(f"Reflector needs an even size >= 2, got {size}")

    wiring = [-1] * size
    for i in range(size):
        if wiring[i] != -1:
            continue
        k = rng.randrange(size)
        while k == i or wiring[k] != -1:
            k = rng.randrange(size)
        wiring[i] = k
        wiring[k] = i
    return Reflector(wiring)


# ============================================================================
# ROTORS
# ============================================================================

class Rotor:
    """A permutation of indices plus the starting configuration it resets to.

    Advancing adds 1 (mod size) to every mapping target. The live wiring is
    kept as the starting wiring plus an offset, with the inverse table
    precomputed once, so ``reverse`` needs no scan.
    """

    def __init__(self, wiring: Sequence[int]):
        if not wiring or not is_permutation(wiring):
            raise ValueError("Rotor wiring must be a permutation of range(size)")
        self._start: Tuple[int, ...] = tuple(wiring)
        self._inverse: Tuple[int, ...] = tuple(invert(wiring))
        self._offset = 0

    @property
    def size(self) -> int:
        return len(self._start)

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def starting_configuration(self) -> Tuple[int, ...]:
        return self._start

    @property
    def wiring(self) -> List[int]:
        """Current mapping targets, column by column."""
        n = self.size
        return [(v + self._offset) % n for v in self._start]

    def advance(self) -> None:
        self._offset = (self._offset + 1) % self.size

    def forward(self, index: int) -> int:
        return (self._start[index] + self._offset) % self.size

    def reverse(self, index: int) -> int:
        # column j such that wiring[j] == index
        return self._inverse[(index - self._offset) % self.size]

    def reset(self) -> None:
        self._offset = 0

    def __repr__(self) -> str:
        return f"<Rotor size={self.size} offset={self._offset}>"


def build_rotor(size: int, rng: random.Random) -> Rotor:
    """Fill each column with a random target not yet used by this rotor."""
    wiring = [-1] * size
    used = [False] * size
    for j in range(size):
        k = rng.randrange(size)
        while used[k]:
            k = rng.randrange(size)
        used[k] = True
        wiring[j] = k
    return Rotor(wiring)


class RotorBank:
    """Ordered rotors composed in bank order going forward, reversed coming back."""

    def __init__(self, rotors: Sequence[Rotor]):
        if not rotors:
            raise ValueError("RotorBank needs at least one rotor")
        sizes = {r.size for r in rotors}
        if len(sizes) != 1:
            raise ValueError(f"All rotors must share one size, got {sorted(sizes)}")
        self._rotors: List[Rotor] = list(rotors)

    def __len__(self) -> int:
        return len(self._rotors)

    def __getitem__(self, i: int) -> Rotor:
        return self._rotors[i]

    def __iter__(self):
        return iter(self._rotors)

    @property
    def size(self) -> int:
        return self._rotors[0].size

    def advance(self) -> None:
        for rotor in self._rotors:
            rotor.advance()

    def forward(self, index: int) -> int:
        for rotor in self._rotors:
            index = rotor.forward(index)
        return index

    def reverse(self, index: int) -> int:
        for rotor in reversed(self._rotors):
            index = rotor.reverse(index)
        return index

    def reset(self) -> None:
        for rotor in self._rotors:
            rotor.reset()

    def snapshot(self) -> List[List[int]]:
        """Live wiring of every rotor, in bank order."""
        return [rotor.wiring for rotor in self._rotors]

    def is_at_start(self) -> bool:
        return all(rotor.offset == 0 for rotor in self._rotors)

    def __repr__(self) -> str:
        return f"<RotorBank rotors={len(self)} size={self.size}>"


def build_rotor_bank(size: int, count: int, rng: random.Random) -> RotorBank:
    if count < 1:
        raise ValueError(f"Rotor count must be >= 1, got {count}")
    return RotorBank([build_rotor(size, rng) for _ in range(count)])
