# simplex3d/__init__.py
# Seeded 3D simplex noise with octave composition

from .rng import RandomNumberGenerator, fold_seed
from .permutation import build_permutation, is_valid_permutation, TABLE_SIZE
from .simplex import generate_noise, GRAD3, F3, G3
from .params import NoiseParams
from .generator import Simplex3D

__all__ = [
    "RandomNumberGenerator", "fold_seed",
    "build_permutation", "is_valid_permutation", "TABLE_SIZE",
    "generate_noise", "GRAD3", "F3", "G3",
    "NoiseParams",
    "Simplex3D",
]
