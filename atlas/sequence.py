"""
sequence.py — Seeded pseudo-random sequence for deterministic token output.

Every bit of variability in a generated design system comes from one of
these. A sequence owns a single 32-bit unsigned state and advances it with
the Numerical Recipes linear congruential recurrence:

    state = (1664525 * state + 1013904223) mod 2**32

String seeds are folded into the initial state with a rolling ``*31``
polynomial hash over UTF-16 code units, so existing seeds keep producing the
palettes they always have.

Usage:
    from atlas.sequence import DeterministicSequence, derive_sequence

    seq = DeterministicSequence("hackathon")
    seq.next()              # → 0.7371...
    seq.next_float(-5, 5)   # hue jitter

    spacing_seq = derive_sequence("hackathon", "-spacing")
"""

from __future__ import annotations

import math
from typing import List, Sequence, TypeVar, Union

T = TypeVar("T")

Seed = Union[str, int]

# ── LCG parameters (Numerical Recipes) ────────────────────────────────────────

LCG_MULTIPLIER = 1664525
LCG_INCREMENT = 1013904223
LCG_MODULUS = 2 ** 32

_INT32_SIGN = 0x80000000
_UINT32_MASK = 0xFFFFFFFF


def hash_seed(text: str) -> int:
    """
    Fold a string into a 32-bit unsigned integer.

    hash = hash * 31 + code_unit, wrapped to a signed 32-bit integer, then
    the absolute value. Code units are UTF-16, so astral characters count
    as two surrogate units.
    """
    data = text.encode("utf-16-le", "surrogatepass")
    h = 0
    for i in range(0, len(data), 2):
        unit = data[i] | (data[i + 1] << 8)
        h = (h * 31 + unit) & _UINT32_MASK
    if h & _INT32_SIGN:
        h -= LCG_MODULUS
    return abs(h)


class DeterministicSequence:
    """
    Seeded LCG. Two instances built from the same seed yield the same draws.

    The only mutable state is ``current``; it advances once per ``next()``
    and cannot be rewound. Build a new instance from the seed to replay.
    """

    def __init__(self, seed: Seed) -> None:
        if isinstance(seed, str):
            self.seed = hash_seed(seed)
        else:
            self.seed = int(seed) % LCG_MODULUS
        self.current = self.seed

    def __repr__(self) -> str:
        return f"DeterministicSequence(seed={self.seed}, current={self.current})"

    def next(self) -> float:
        """Advance once and return a float in [0, 1)."""
        self.current = (LCG_MULTIPLIER * self.current + LCG_INCREMENT) % LCG_MODULUS
        return self.current / LCG_MODULUS

    def next_int(self, lo: int, hi: int) -> int:
        """Integer in [lo, hi], both ends inclusive."""
        return math.floor(self.next() * (hi - lo + 1)) + lo

    def next_float(self, lo: float, hi: float) -> float:
        """Float in [lo, hi)."""
        return self.next() * (hi - lo) + lo

    def choice(self, items: Sequence[T]) -> T:
        return items[self.next_int(0, len(items) - 1)]

    def shuffle(self, items: Sequence[T]) -> List[T]:
        """Fisher–Yates shuffle into a new list; ``items`` is left alone."""
        shuffled = list(items)
        for i in range(len(shuffled) - 1, 0, -1):
            j = self.next_int(0, i)
            shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
        return shuffled


def derive_sequence(seed: Seed, salt: str = "") -> DeterministicSequence:
    """
    Build a private sequence for one subsystem.

    The salt is appended to the seed's string form (``"abc" + "-spacing"``),
    so subsystems never share draws and can run in any order.
    """
    if not salt:
        return DeterministicSequence(seed)
    return DeterministicSequence(f"{seed}{salt}")
