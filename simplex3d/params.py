from __future__ import annotations

"""Noise generator configuration."""

from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional
import logging

from .safe_parse import to_int, to_float, clamp

logger = logging.getLogger(__name__)

DEFAULT_OCTAVES = 1
DEFAULT_AMPLITUDE = 1.0
DEFAULT_FREQUENCY = 1.0
DEFAULT_PERSISTANCE = 0.5
DEFAULT_BASE = 0.0
DEFAULT_SEED = 0


@dataclass(frozen=True)
class NoiseParams:
    """Immutable octave/amplitude settings of a :class:`~simplex3d.Simplex3D`.

    ``persistance`` is the per-octave amplitude decay.  ``base`` is the floor
    of the output interval ``[base, base + amplitude]``; the offset actually
    added to the scaled sum is :attr:`base_offset`.
    """

    octaves: int = DEFAULT_OCTAVES
    amplitude: float = DEFAULT_AMPLITUDE
    frequency: float = DEFAULT_FREQUENCY
    persistance: float = DEFAULT_PERSISTANCE
    base: float = DEFAULT_BASE
    seed: int = DEFAULT_SEED

    def __post_init__(self) -> None:
        # Normalise in place; frozen dataclasses need object.__setattr__
        octaves = to_int(self.octaves, DEFAULT_OCTAVES, "octaves")
        if octaves < 1:
            logger.warning("octaves: %r is below 1, using %r", octaves, DEFAULT_OCTAVES)
            octaves = DEFAULT_OCTAVES
        amplitude = to_float(self.amplitude, DEFAULT_AMPLITUDE, "amplitude")
        if amplitude <= 0:
            logger.warning("amplitude: %r is not positive, using %r", amplitude, DEFAULT_AMPLITUDE)
            amplitude = DEFAULT_AMPLITUDE
        persistance = clamp(to_float(self.persistance, DEFAULT_PERSISTANCE, "persistance"), 0.0, 1.0)

        object.__setattr__(self, "octaves", octaves)
        object.__setattr__(self, "amplitude", amplitude)
        object.__setattr__(self, "frequency", to_float(self.frequency, DEFAULT_FREQUENCY, "frequency"))
        object.__setattr__(self, "persistance", persistance)
        object.__setattr__(self, "base", to_float(self.base, DEFAULT_BASE, "base"))
        if isinstance(self.seed, bool):
            raise TypeError("seed must be an integer, got bool")
        object.__setattr__(self, "seed", to_int(self.seed, DEFAULT_SEED, "seed"))

    @classmethod
    def from_mapping(cls, params: Optional[Mapping[str, Any]] = None, **overrides: Any) -> "NoiseParams":
        """Build params from a settings mapping; ``None`` entries mean "use the default"."""
        merged = dict(params or {})
        merged.update(overrides)
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(merged) - known)
        if unknown:
            raise TypeError(f"unknown noise option(s): {', '.join(unknown)}")
        return cls(**{k: v for k, v in merged.items() if v is not None})

    @property
    def scale(self) -> float:
        """Factor mapping the weighted octave sum onto ``[-amplitude/2, amplitude/2]``."""
        half = self.amplitude / 2
        if self.persistance == 1:
            return self.octaves * half
        return (1 - self.persistance) / (1 - self.persistance ** self.octaves) * half

    @property
    def base_offset(self) -> float:
        return self.base + self.amplitude / 2
