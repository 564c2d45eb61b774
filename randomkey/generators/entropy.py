#!/usr/bin/env python3
"""
Random Sources
==============
The draw capability behind key generation.

A random source answers a single question: "give me an integer in
``[0, bound)``". Keeping the capability this small lets tests pin the exact
sequence of draws while production code uses Python's Mersenne Twister.

Sources:
- SeededRandom: ``random.Random`` seeded from the OS, or from a fixed seed
- ScriptedRandom: replays a recorded sequence of draws

Neither source is cryptographically secure.
"""

import random
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional


class RandomSource(ABC):
    """Capability for drawing bounded integers."""

    @abstractmethod
    def next_int(self, bound: int) -> int:
        """Return an integer r with 0 <= r < bound."""


def _check_bound(bound: int) -> None:
    if bound <= 0:
        raise ValueError(f"bound must be positive, got {bound}")


class SeededRandom(RandomSource):
    """
    Pseudo-random source backed by ``random.Random``.

    With ``seed=None`` the generator is seeded once from the operating
    system. It is never re-seeded afterwards.
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def next_int(self, bound: int) -> int:
        _check_bound(bound)
        return self._rng.randrange(bound)

    def __repr__(self):
        return f"SeededRandom(seed={self.seed!r})"


class ScriptedRandom(RandomSource):
    """
    Replays a fixed sequence of draws.

    Each draw must already lie inside the requested bound; a draw outside it
    raises ``ValueError`` rather than being folded into range.
    """

    def __init__(self, draws: Iterable[int], cycle: bool = False):
        self._draws: List[int] = list(draws)
        if not self._draws:
            raise ValueError("ScriptedRandom needs at least one draw")
        self._cycle = cycle
        self._position = 0

    @property
    def consumed(self) -> int:
        """Number of draws handed out so far."""
        return self._position

    def next_int(self, bound: int) -> int:
        _check_bound(bound)
        if self._position >= len(self._draws) and not self._cycle:
            raise IndexError("ScriptedRandom ran out of draws")
        value = self._draws[self._position % len(self._draws)]
        self._position += 1
        if not 0 <= value < bound:
            raise ValueError(f"scripted draw {value} outside [0, {bound})")
        return value


__all__ = [
    'RandomSource',
    'SeededRandom',
    'ScriptedRandom',
]
