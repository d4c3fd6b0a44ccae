"""The rotor machine session: plugboard -> rotors -> reflector -> rotors -> plugboard.

Research / education only. Do NOT use in production.
"""
from __future__ import annotations

import logging
import random
from typing import Any, Callable, Dict, Optional

from .alphabet import DEFAULT_ALPHABET, Alphabet, UnknownSymbol
from .components import (
    Plugboard,
    Reflector,
    RotorBank,
    build_plugboard,
    build_reflector,
    build_rotor_bank,
)

logger = logging.getLogger(__name__)

DEFAULT_NUM_ROTORS = 50


class Machine:
    """One cipher session.

    Lifecycle: construct, ``initialize()`` once, then ``process()`` any number
    of times. Each processed symbol advances the rotor bank; ``reset()``
    returns the rotors to their starting configuration, which is required
    before a decryption pass.
    """

    def __init__(
        self,
        *,
        num_rotors: int = DEFAULT_NUM_ROTORS,
        alphabet: Alphabet = DEFAULT_ALPHABET,
        rng: Optional[random.Random] = None,
    ):
        if num_rotors < 1:
            raise ValueError(f"num_rotors must be >= 1, got {num_rotors}")
        self.alphabet = alphabet
        self.num_rotors = num_rotors
        self._rng = rng
        self.plugboard: Optional[Plugboard] = None
        self.reflector: Optional[Reflector] = None
        self.rotors: Optional[RotorBank] = None

    @classmethod
    def from_components(
        cls,
        plugboard: Plugboard,
        reflector: Reflector,
        rotors: RotorBank,
        *,
        alphabet: Alphabet = DEFAULT_ALPHABET,
    ) -> "Machine":
        """Assemble an already-initialized machine from explicit components."""
        size = len(alphabet)
        for part in (plugboard, reflector, rotors):
            if part.size != size:
                raise ValueError(f"{part!r} does not match alphabet size {size}")
        machine = cls(num_rotors=len(rotors), alphabet=alphabet)
        machine.plugboard = plugboard
        machine.reflector = reflector
        machine.rotors = rotors
        return machine

    @property
    def is_initialized(self) -> bool:
        return self.rotors is not None

    def initialize(self) -> None:
        """Build plugboard, reflector and rotor bank. Only the first call has effect."""
        if self.is_initialized:
            logger.debug("initialize() called on an initialized machine; ignoring")
            return
        rng = self._rng if self._rng is not None else random.Random()
        size = len(self.alphabet)
        self.plugboard = build_plugboard(self.alphabet)
        self.reflector = build_reflector(size, rng)
        self.rotors = build_rotor_bank(size, self.num_rotors, rng)
        logger.info("Machine initialized: %d rotors over %d symbols", self.num_rotors, size)

    def reset(self) -> None:
        """Restore every rotor to the configuration captured at initialization."""
        self._require_initialized()
        self.rotors.reset()
        logger.debug("Rotors reset to starting configuration")

    def process_symbol(self, symbol: str) -> str:
        self._require_initialized()
        self.rotors.advance()
        index = self.alphabet.index_of(symbol)
        index = self.plugboard.apply(index)
        index = self.rotors.forward(index)
        index = self.reflector.reflect(index)
        index = self.rotors.reverse(index)
        index = self.plugboard.apply(index)
        return self.alphabet.symbol_at(index)

    def process(
        self,
        text: str,
        *,
        progress_callback: Optional[Callable[[int, int], None]] = None,
    ) -> str:
        """Encipher (or, after ``reset()``, decipher) ``text`` symbol by symbol.

        Raises UnknownSymbol at the first character outside the alphabet; no
        output is returned for the message in that case.
        """
        self._require_initialized()
        total = len(text)
        out = []
        for pos, symbol in enumerate(text):
            try:
                out.append(self.process_symbol(symbol))
            except UnknownSymbol as exc:
                raise UnknownSymbol(exc.symbol, position=pos) from None
            if progress_callback:
                progress_callback(pos + 1, total)
        logger.debug("Processed %d symbols", total)
        return "".join(out)

    def describe(self) -> Dict[str, Any]:
        """Summary of the session for display and reports."""
        info: Dict[str, Any] = {
            "alphabet_size": len(self.alphabet),
            "num_rotors": self.num_rotors,
            "initialized": self.is_initialized,
        }
        if self.is_initialized:
            info["rotor_offset"] = self.rotors[0].offset
            info["at_start"] = self.rotors.is_at_start()
        return info

    def _require_initialized(self) -> None:
        if not self.is_initialized:
            raise RuntimeError("Machine is not initialized; call initialize() first")

    def __repr__(self) -> str:
        return f"<Machine rotors={self.num_rotors} alphabet={len(self.alphabet)} initialized={self.is_initialized}>"
