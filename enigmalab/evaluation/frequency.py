"""Symbol-frequency statistics for ciphertext.

Research / education only. Do NOT use in production.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict, field
from typing import Any, Dict, List

import numpy as np

from enigmalab.machine.alphabet import Alphabet


@dataclass
class FrequencyResult:
    """Counts and flatness measures for one text."""
    length: int
    alphabet_size: int
    counts: List[int] = field(default_factory=list)
    index_of_coincidence: float = 0.0   # 1/alphabet_size for uniform text
    chi_square_uniform: float = 0.0     # against the uniform distribution

    @property
    def uniform_ic(self) -> float:
        return 1.0 / self.alphabet_size if self.alphabet_size else 0.0

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["uniform_ic"] = self.uniform_ic
        return d

    def summary(self) -> str:
        return (
            f"frequency(n={self.length}): IC={self.index_of_coincidence:.5f} "
            f"(uniform {self.uniform_ic:.5f}), chi2={self.chi_square_uniform:.2f}"
        )


def analyze_frequency(text: str, alphabet: Alphabet) -> FrequencyResult:
    """Raises UnknownSymbol if ``text`` holds a character outside ``alphabet``."""
    size = len(alphabet)
    idx = np.fromiter((alphabet.index_of(ch) for ch in text), dtype=np.int64, count=len(text))
    counts = np.bincount(idx, minlength=size)
    n = int(counts.sum())

    if n > 1:
        ic = float((counts * (counts - 1)).sum() / (n * (n - 1)))
    else:
        ic = 0.0

    if n > 0:
        expected = n / size
        chi2 = float(((counts - expected) ** 2 / expected).sum())
    else:
        chi2 = 0.0

    return FrequencyResult(
        length=n,
        alphabet_size=size,
        counts=counts.tolist(),
        index_of_coincidence=round(ic, 6),
        chi_square_uniform=round(chi2, 4),
    )
