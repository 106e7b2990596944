#!/usr/bin/env python3
"""
Seeded Random Source
====================
Deterministic random streams for name generation.

A generator built from the same 64-bit seed always yields the same sequence
of draws, in every process. The Markov chain only needs ``random()``; any
object providing it (including ``random.Random``) can stand in.
"""

import random
from typing import Protocol

UINT64_MASK = 0xFFFFFFFFFFFFFFFF


class RandomSource(Protocol):
    """Anything that draws uniform floats in [0.0, 1.0)."""

    def random(self) -> float:
        ...


class SeededRandom:
    """
    Reproducible random number generator seeded from a 64-bit integer.

    Negative seeds are folded onto the unsigned 64-bit range, so ``-1`` and
    ``1`` give different streams (``random.Random`` alone would treat them
    as the same seed).
    """

    def __init__(self, seed: int):
        self._seed = int(seed)
        self._rng = random.Random(self._seed & UINT64_MASK)

    @property
    def seed(self) -> int:
        return self._seed

    def random(self) -> float:
        """Return random float in [0.0, 1.0)."""
        return self._rng.random()

    def randint(self, a: int, b: int) -> int:
        """Return random integer N such that a <= N <= b."""
        return self._rng.randint(a, b)

    def __repr__(self) -> str:
        return f"SeededRandom(seed={self._seed})"
