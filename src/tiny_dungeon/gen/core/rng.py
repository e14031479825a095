"""Seeded randomness for the generation pipeline.

A run owns one ``DungeonRNG``.  The pipeline never draws from it directly;
it forks one stream per stage (``"growth"``, ``"gating"``, ``"loot"``) so
that, for example, asking for more treasure rooms leaves the room shape
and key position of a seed unchanged.
"""

from __future__ import annotations

import hashlib
import random
import secrets
from typing import Sequence, TypeVar

T = TypeVar("T")


class DungeonRNG:
    """Random source for one generation run.

    Parameters
    ----------
    seed:
        Recorded on the finished layout so the run can be repeated.
    """

    def __init__(self, seed: int) -> None:
        self._seed = seed
        self._rng = random.Random(seed)

    @classmethod
    def from_entropy(cls) -> DungeonRNG:
        """Draw a fresh seed from the OS for an unseeded run."""
        return cls(secrets.randbits(63))

    @property
    def seed(self) -> int:
        return self._seed

    def random_int(self, low: int, high: int) -> int:
        """Integer in ``[low, high]``; frontier, key and loot picks use this."""
        return self._rng.randint(low, high)

    def random_float(self) -> float:
        """Float in ``[0.0, 1.0)``, compared against the branching factor."""
        return self._rng.random()

    def random_choice(self, seq: Sequence[T]) -> T:
        return self._rng.choice(seq)

    def shuffle(self, lst: list[T]) -> None:
        """Uniform in-place permutation (growth direction order)."""
        self._rng.shuffle(lst)

    def fork(self, stage: str) -> DungeonRNG:
        """Independent stream for a pipeline *stage*.

        The child seed hashes ``(seed, stage)`` and does not advance this
        stream, so stage order and consumption never leak between stages.
        """
        digest = hashlib.sha256(f"{self._seed}:{stage}".encode()).digest()
        return DungeonRNG(int.from_bytes(digest[:8], "big"))

    def __repr__(self) -> str:
        return f"DungeonRNG(seed={self._seed})"
