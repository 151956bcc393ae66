# generator.py - seeded multi-octave 3D simplex noise
from __future__ import annotations

import logging
import math
from typing import Any, Mapping, Optional, Tuple, Union

import numpy as np

from .params import NoiseParams
from .permutation import build_permutation
from .simplex import generate_noise

logger = logging.getLogger(__name__)


class Simplex3D:
    """3D simplex noise with octaves, scaled into ``[base, base + amplitude]``.

    ``params`` may be a :class:`NoiseParams`, a mapping using the option names
    (``octaves``, ``amplitude``, ``frequency``, ``persistance``, ``base``,
    ``seed``) or ``None``.  Keyword arguments override mapping entries.

    Queries are pure functions of the coordinates and the current
    permutation table.  :meth:`seed` builds a complete new table before
    publishing it, so concurrent readers see either the old or the new table.
    """

    def __init__(self, params: Union[NoiseParams, Mapping[str, Any], None] = None, **overrides: Any):
        if isinstance(params, NoiseParams):
            if overrides:
                params = NoiseParams.from_mapping(vars(params), **overrides)
        else:
            params = NoiseParams.from_mapping(params, **overrides)
        self.params = params
        self._scale = params.scale
        self._base_offset = params.base_offset
        self._perm: Tuple[int, ...] = ()
        self._table: Optional[np.ndarray] = None
        self._seed = params.seed
        self.seed(params.seed)

    def seed(self, seed_number: int) -> None:
        """Rebuild the permutation table from ``seed_number``."""
        table = build_permutation(seed_number)
        perm = tuple(int(v) for v in table)
        self._table, self._seed = table, seed_number
        # Queries only read _perm, so this one store publishes the new table
        self._perm = perm
        logger.debug("Simplex3D reseeded with %r", seed_number)

    # ------------------------------------------------------------------
    # Read-only configuration
    # ------------------------------------------------------------------

    @property
    def octaves(self) -> int:
        return self.params.octaves

    @property
    def amplitude(self) -> float:
        return self.params.amplitude

    @property
    def frequency(self) -> float:
        return self.params.frequency

    @property
    def persistance(self) -> float:
        return self.params.persistance

    @property
    def base(self) -> float:
        return self.params.base

    @property
    def scale(self) -> float:
        return self._scale

    @property
    def base_offset(self) -> float:
        return self._base_offset

    @property
    def perm(self) -> np.ndarray:
        """Current 512 entry permutation table (read-only)."""
        return self._table

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def generate_noise(self, x: float, y: float, z: float) -> float:
        """Single octave of raw noise in roughly ``[-1, 1]``."""
        return generate_noise(self._perm, x, y, z)

    def get_noise(self, x: float, y: float, z: float) -> float:
        """Octave sum at ``(x, y, z)``; runs in O(octaves)."""
        perm = self._perm
        freq = self.params.frequency
        persistance = self.params.persistance
        noise = 0.0
        amp = 1.0
        for _ in range(self.params.octaves):
            noise += generate_noise(perm, x, y, z) * amp
            x *= freq
            y *= freq
            z *= freq
            amp *= persistance
            # Later octaves would only sample overflowed coordinates
            if not (math.isfinite(x) and math.isfinite(y) and math.isfinite(z)):
                break
        return noise * self._scale + self._base_offset

    def __repr__(self) -> str:
        p = self.params
        return (f"Simplex3D(octaves={p.octaves}, amplitude={p.amplitude}, frequency={p.frequency}, "
                f"persistance={p.persistance}, base={p.base}, seed={self._seed})")
