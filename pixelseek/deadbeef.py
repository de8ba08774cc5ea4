"""The small "dead beef" pseudo-random number generator."""

from __future__ import annotations

import time

DEADBEEF_MAX = 0xFFFFFFFF
_BEEF = 0xDEADBEEF
_MASK = 0xFFFFFFFF


class DeadbeefRandom:
    """A fast, deterministic 32-bit pseudo-random generator."""

    def __init__(self, seed: int = 0) -> None:
        self.seed(seed)

    def seed(self, x: int) -> None:
        """Reset the generator to the given 32-bit seed."""
        self._seed = x & _MASK
        self._beef = _BEEF

    def rand(self) -> int:
        """Return the next number in 0..DEADBEEF_MAX."""
        s, b = self._seed, self._beef
        self._seed = ((s << 7) ^ (((s >> 25) + b) & _MASK)) & _MASK
        self._beef = ((b << 7) ^ (((b >> 25) + _BEEF) & _MASK)) & _MASK
        return self._seed

    def uniform(self, a: float, b: float) -> float:
        """Return a random float in [a, b)."""
        return a + self.rand() / (float(DEADBEEF_MAX) / (b - a) + 1)

    def randrange(self, a: float, b: float) -> int:
        """Return a random integer in [a, b)."""
        return int(self.uniform(a, b))


def generate_seed() -> int:
    """Derive a 32-bit seed from the wall clock and processor time."""
    t = int(time.time()) & _MASK
    c = int(time.process_time() * 1_000_000) & _MASK
    marker = id(object()) & _MASK
    return ((t << 24) ^ (c << 11) ^ t ^ marker) & _MASK