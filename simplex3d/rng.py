# rng.py - pinned seeded uniform stream used to shuffle permutation tables
from __future__ import annotations

import numpy as np


def fold_seed(seed: int) -> int:
    """Map any Python int onto a distinct non-negative int.

    Negative seeds are interleaved with the positive ones
    (0, -1, 1, -2, 2 ... -> 0, 1, 2, 3, 4).
    """
    if isinstance(seed, bool) or not isinstance(seed, (int, np.integer)):
        raise TypeError(f"seed must be an integer, got {type(seed).__name__}")
    seed = int(seed)
    return 2 * seed if seed >= 0 else -2 * seed - 1


def _seed_words(entropy: int):
    """Split ``entropy`` into little-endian 32 bit words for ``RandomState``."""
    if entropy < 2 ** 32:
        return entropy
    words = []
    while entropy:
        words.append(entropy & 0xFFFFFFFF)
        entropy >>= 32
    return np.array(words, dtype=np.uint32)


class RandomNumberGenerator:
    """Deterministic uniform stream in ``[0, 1)``.

    Backed by numpy's legacy ``RandomState`` (MT19937), whose stream numpy
    keeps frozen across releases.  Seeds below ``2**32`` after folding seed
    it directly; larger ones go through its array seeding.  The golden values
    in ``tests/test_rng.py`` catch any drift.
    """

    def __init__(self, seed: int = 0):
        entropy = fold_seed(seed)
        self.seed = int(seed)
        self._state = np.random.RandomState(_seed_words(entropy))

    def next(self) -> float:
        return float(self._state.random_sample())

    def random(self, n: int) -> np.ndarray:
        """Draw ``n`` values at once; same values as ``n`` calls to :meth:`next`."""
        return self._state.random_sample(n)
