# simplex.py - single-octave 3D simplex noise
from __future__ import annotations

import math
from typing import Sequence, Tuple

# Gradient directions: the 12 cube edge midpoints, three corner diagonals and
# a null vector, so an index masked with 15 always hits a valid entry.
GRAD3: Tuple[Tuple[int, int, int], ...] = (
    (1, 1, 0), (-1, 1, 0), (1, -1, 0), (-1, -1, 0),
    (1, 0, 1), (-1, 0, 1), (1, 0, -1), (-1, 0, -1),
    (0, 1, 1), (0, -1, 1), (0, 1, -1), (0, -1, -1),
    (-1, 1, 1), (1, -1, 1), (1, 1, -1), (0, 0, 0),
)

F3 = 1.0 / 3.0  # skew factor
G3 = 1.0 / 6.0  # unskew factor


def _corner(gi: int, t: float, x: float, y: float, z: float) -> float:
    g = GRAD3[gi & 15]
    t *= t
    return t * t * (g[0] * x + g[1] * y + g[2] * z)


def generate_noise(perm: Sequence[int], xin: float, yin: float, zin: float) -> float:
    """Evaluate one octave of simplex noise at ``(xin, yin, zin)``.

    ``perm`` is a doubled permutation table (512 entries).  The result lies
    in roughly ``[-1, 1]``; identical inputs and table give identical output.
    Coordinates so large that the skewed cell overflows a float (or NaN)
    yield 0.0.
    """
    # Skew the input space to find the simplex cell
    s = (xin + yin + zin) * F3
    xs, ys, zs = xin + s, yin + s, zin + s
    # The cell index sum must stay representable as a float
    if not math.isfinite(abs(xs) + abs(ys) + abs(zs)):
        return 0.0
    i = math.floor(xs)
    j = math.floor(ys)
    k = math.floor(zs)

    # Unskew the cell origin and take the distances from it
    t = (i + j + k) * G3
    x0 = xin - (i - t)
    y0 = yin - (j - t)
    z0 = zin - (k - t)

    # Pick the tetrahedron: (i1,j1,k1) second corner, (i2,j2,k2) third corner
    if x0 >= y0:
        if y0 >= z0:
            i1, j1, k1, i2, j2, k2 = 1, 0, 0, 1, 1, 0  # X Y Z
        elif x0 >= z0:
            i1, j1, k1, i2, j2, k2 = 1, 0, 0, 1, 0, 1  # X Z Y
        else:
            i1, j1, k1, i2, j2, k2 = 0, 0, 1, 1, 0, 1  # Z X Y
    else:
        if y0 < z0:
            i1, j1, k1, i2, j2, k2 = 0, 0, 1, 0, 1, 1  # Z Y X
        elif x0 < z0:
            i1, j1, k1, i2, j2, k2 = 0, 1, 0, 0, 1, 1  # Y Z X
        else:
            i1, j1, k1, i2, j2, k2 = 0, 1, 0, 1, 1, 0  # Y X Z

    # Corner offsets in unskewed (x,y,z) space
    x1 = x0 - i1 + G3
    y1 = y0 - j1 + G3
    z1 = z0 - k1 + G3
    x2 = x0 - i2 + 2.0 * G3
    y2 = y0 - j2 + 2.0 * G3
    z2 = z0 - k2 + 2.0 * G3
    x3 = x0 - 1.0 + 3.0 * G3
    y3 = y0 - 1.0 + 3.0 * G3
    z3 = z0 - 1.0 + 3.0 * G3

    ii = i & 255
    jj = j & 255
    kk = k & 255

    t0 = 0.5 - x0 * x0 - y0 * y0 - z0 * z0
    t1 = 0.5 - x1 * x1 - y1 * y1 - z1 * z1
    t2 = 0.5 - x2 * x2 - y2 * y2 - z2 * z2
    t3 = 0.5 - x3 * x3 - y3 * y3 - z3 * z3

    # Gradient hashes are only looked up for corners that contribute
    n0 = _corner(perm[ii + perm[jj + perm[kk]]], t0, x0, y0, z0) if t0 >= 0 else 0.0
    n1 = (_corner(perm[ii + i1 + perm[jj + j1 + perm[kk + k1]]], t1, x1, y1, z1)
          if t1 >= 0 else 0.0)
    n2 = (_corner(perm[ii + i2 + perm[jj + j2 + perm[kk + k2]]], t2, x2, y2, z2)
          if t2 >= 0 else 0.0)
    n3 = (_corner(perm[ii + 1 + perm[jj + 1 + perm[kk + 1]]], t3, x3, y3, z3)
          if t3 >= 0 else 0.0)

    return 32.0 * (n0 + n1 + n2 + n3)
