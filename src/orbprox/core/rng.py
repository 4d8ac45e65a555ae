"""Deterministic pseudo-random stream for synthetic scenarios.

Implements the 32-bit mulberry32 generator. Output is bit-identical to the
common JavaScript rendition, so a seed reproduces the same scenario across
implementations.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator

from orbprox.utils.constants import PRNG_DEFAULT_SEED

logger = logging.getLogger(__name__)

_MASK32 = 0xFFFFFFFF
_INCREMENT = 0x6D2B79F5
_TWO_POW_32 = 4294967296.0


def _imul(a: int, b: int) -> int:
    """Low 32 bits of a 32x32 multiply, unsigned."""
    return (a * b) & _MASK32


def _coerce_seed(seed: object) -> int:
    if seed is None or isinstance(seed, bool):
        return PRNG_DEFAULT_SEED
    if isinstance(seed, int):
        return seed & _MASK32
    try:
        value = float(seed)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        logger.debug("Unusable PRNG seed %r, using %d", seed, PRNG_DEFAULT_SEED)
        return PRNG_DEFAULT_SEED
    if not math.isfinite(value):
        return PRNG_DEFAULT_SEED
    return int(value) & _MASK32


class Mulberry32:
    """Seeded mulberry32 stream of floats in [0, 1).

    Args:
        seed: Integer seed. ``None`` or a non-numeric value falls back to 1.
            Seeds are reduced modulo 2**32.

    Example::

        rng = Mulberry32(42)
        radius = rng.uniform(6650.0, 7500.0)
    """

    def __init__(self, seed: object = None) -> None:
        self.seed = _coerce_seed(seed)
        self._state = self.seed

    def next_uint32(self) -> int:
        """Advance the state and return the raw unsigned 32-bit output."""
        self._state = (self._state + _INCREMENT) & _MASK32
        t = self._state
        t = _imul(t ^ (t >> 15), t | 1)
        t ^= (t + _imul(t ^ (t >> 7), t | 61)) & _MASK32
        return (t ^ (t >> 14)) & _MASK32

    def random(self) -> float:
        """Return the next value in [0, 1)."""
        return self.next_uint32() / _TWO_POW_32

    def uniform(self, low: float, high: float) -> float:
        """Return the next value scaled into [low, high)."""
        return low + self.random() * (high - low)

    def __iter__(self) -> Iterator[float]:
        while True:
            yield self.random()

    def __repr__(self) -> str:
        return f"Mulberry32(seed={self.seed})"
