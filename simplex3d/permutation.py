# permutation.py - seeded permutation table for gradient hashing
from __future__ import annotations

import numpy as np

from .rng import RandomNumberGenerator

TABLE_SIZE = 256


def build_permutation(seed: int) -> np.ndarray:
    """Return the 512 entry permutation table for ``seed``.

    The integers ``0..255`` are shuffled in place by swapping each slot ``i``
    with ``floor(256 * r)`` for a fresh uniform ``r``, then the table is
    concatenated with itself so nested lookups ``perm[a + perm[b + ...]]``
    with an offset of at most 1 never need a modulo.  The returned array is
    read-only.
    """
    perm = list(range(TABLE_SIZE))
    rng = RandomNumberGenerator(seed)
    for i in range(TABLE_SIZE):
        index = int(TABLE_SIZE * rng.next())
        perm[i], perm[index] = perm[index], perm[i]

    table = np.array(perm + perm, dtype=np.int32)
    table.flags.writeable = False
    return table


def is_valid_permutation(table) -> bool:
    """Check the doubled-permutation invariant of ``table``."""
    arr = np.asarray(table)
    if arr.shape != (2 * TABLE_SIZE,):
        return False
    lo, hi = arr[:TABLE_SIZE], arr[TABLE_SIZE:]
    if not np.array_equal(lo, hi):
        return False
    return bool(np.array_equal(np.sort(lo), np.arange(TABLE_SIZE)))
