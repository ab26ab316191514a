"""
Simplex noise in 1 to 4 dimensions.

Gradient noise on the simplex lattice: the input point is skewed onto a
hypercubic grid, the enclosing simplex is found by ranking the fractional
offsets, and each corner contributes

    max(0, R - |offset|^2)^4 * dot(gradient(hash(corner)), offset)

with R = 1.0 (1D), 0.5 (2D) and 0.6 (3D/4D). Corner hashes are chained
lookups into the classic 256-entry permutation table, wrapped with & 0xFF at
every level so negative and very large lattice coordinates stay in range.

signed_noise_* is roughly in [-1, 1]; simplex_noise_* maps it to [0, 1].
The 4D scale factor (27) is preliminary and is kept for output
compatibility with existing noise fields.

Results are a pure function of the coordinates: no seeds, no state.

Usable coordinates satisfy |x| < 2^60 (COORDINATE_LIMIT), so that lattice
indices fit in int64 after skewing. Anything outside that range, and any
non-finite coordinate, returns nan. Past about 2^52 every float is an
integer, so the field is already degenerate well before the limit.

Copyright (c) 2026 kmath contributors

MIT License
"""

import math

import numba as nb
import numpy as np
from numpy.typing import ArrayLike

from kmath.config import handle_error
from kmath.vectorize import elementwise


def _readonly_table(values) -> np.ndarray:
    arr = np.array(values, dtype=np.int64)
    arr.flags.writeable = False
    return arr


# ---------------------------------------------------------------------------
# Lattice constants
# ---------------------------------------------------------------------------

SQRT3 = math.sqrt(3.0)
SQRT5 = math.sqrt(5.0)

# Skew (F) and unskew (G) factors
F2 = 1.0 / (1.0 + SQRT3)
G2 = 1.0 / (3.0 + SQRT3)
F3 = 1.0 / 3.0
G3 = 1.0 / 6.0
F4 = 1.0 / (1.0 + SQRT5)
G4 = 1.0 / (5.0 + SQRT5)

# Output scale per dimension
SCALE_1D = 0.25
SCALE_2D = 40.0
SCALE_3D = 32.0
SCALE_4D = 27.0

# Lattice indices are int64; coordinates at or beyond this magnitude (or
# non-finite) give nan. Skewing can grow a coordinate by up to ~2.3x in 4D.
COORDINATE_LIMIT = 2.0 ** 60

PERMUTATION = _readonly_table([
    151, 160, 137, 91, 90, 15, 131, 13, 201, 95, 96, 53, 194, 233, 7, 225,
    140, 36, 103, 30, 69, 142, 8, 99, 37, 240, 21, 10, 23, 190, 6, 148,
    247, 120, 234, 75, 0, 26, 197, 62, 94, 252, 219, 203, 117, 35, 11, 32,
    57, 177, 33, 88, 237, 149, 56, 87, 174, 20, 125, 136, 171, 168, 68, 175,
    74, 165, 71, 134, 139, 48, 27, 166, 77, 146, 158, 231, 83, 111, 229, 122,
    60, 211, 133, 230, 220, 105, 92, 41, 55, 46, 245, 40, 244, 102, 143, 54,
    65, 25, 63, 161, 1, 216, 80, 73, 209, 76, 132, 187, 208, 89, 18, 169,
    200, 196, 135, 130, 116, 188, 159, 86, 164, 100, 109, 198, 173, 186, 3, 64,
    52, 217, 226, 250, 124, 123, 5, 202, 38, 147, 118, 126, 255, 82, 85, 212,
    207, 206, 59, 227, 47, 16, 58, 17, 182, 189, 28, 42, 223, 183, 170, 213,
    119, 248, 152, 2, 44, 154, 163, 70, 221, 153, 101, 155, 167, 43, 172, 9,
    129, 22, 39, 253, 19, 98, 108, 110, 79, 113, 224, 232, 178, 185, 112, 104,
    218, 246, 97, 228, 251, 34, 242, 193, 238, 210, 144, 12, 191, 179, 162, 241,
    81, 51, 145, 235, 249, 14, 239, 107, 49, 192, 214, 31, 181, 199, 106, 157,
    184, 84, 204, 176, 115, 121, 50, 45, 127, 4, 150, 254, 138, 236, 205, 93,
    222, 114, 67, 29, 24, 72, 243, 141, 128, 195, 78, 66, 215, 61, 156, 180,
])

PERM_MOD12 = _readonly_table(PERMUTATION % 12)

# Corner ranks for the 4D simplex, indexed by the 6-bit comparison code
#   32*(x>y) + 16*(x>z) + 8*(y>z) + 4*(x>w) + 2*(y>w) + (z>w)
# Codes that no consistent ordering can produce hold zeros.
SIMPLEX_LOOKUP = _readonly_table([
    [0, 1, 2, 3], [0, 1, 3, 2], [0, 0, 0, 0], [0, 2, 3, 1],
    [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [1, 2, 3, 0],
    [0, 2, 1, 3], [0, 0, 0, 0], [0, 3, 1, 2], [0, 3, 2, 1],
    [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [1, 3, 2, 0],
    [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0],
    [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0],
    [1, 2, 0, 3], [0, 0, 0, 0], [1, 3, 0, 2], [0, 0, 0, 0],
    [0, 0, 0, 0], [0, 0, 0, 0], [2, 3, 0, 1], [2, 3, 1, 0],
    [1, 0, 2, 3], [1, 0, 3, 2], [0, 0, 0, 0], [0, 0, 0, 0],
    [0, 0, 0, 0], [2, 0, 3, 1], [0, 0, 0, 0], [2, 1, 3, 0],
    [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0],
    [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0],
    [2, 0, 1, 3], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0],
    [3, 0, 1, 2], [3, 0, 2, 1], [0, 0, 0, 0], [3, 1, 2, 0],
    [2, 1, 0, 3], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0],
    [3, 1, 0, 2], [0, 0, 0, 0], [3, 2, 0, 1], [3, 2, 1, 0],
])


# ---------------------------------------------------------------------------
# Gradients
# ---------------------------------------------------------------------------

@nb.njit(cache=True)
def gradient_1d(hash_, x):
    """Dot product of x with one of 8 gradients (+-1..+-8) picked by hash."""
    h = hash_ & 15
    grad = 1.0 + (h & 7)
    if h & 8:
        grad = -grad
    return grad * x


@nb.njit(cache=True)
def gradient_2d(hash_, x, y):
    """8 gradients of the form (+-1, +-2) and (+-2, +-1)."""
    h = hash_ & 7
    if h < 4:
        u, v = x, y
    else:
        u, v = y, x
    return (-u if h & 1 else u) + (-2.0 * v if h & 2 else 2.0 * v)


@nb.njit(cache=True)
def gradient_3d(hash_, x, y, z):
    """12 cube-edge gradients; feed it PERM_MOD12 hashes."""
    h = hash_ & 15
    u = x if h < 8 else y
    if h < 4:
        v = y
    elif h == 12 or h == 14:
        v = x
    else:
        v = z
    return (-u if h & 1 else u) + (-v if h & 2 else v)


@nb.njit(cache=True)
def gradient_4d(hash_, x, y, z, t):
    """32 gradients along the edges of the 4D hypercube."""
    h = hash_ & 31
    u = x if h < 24 else y
    v = y if h < 16 else z
    w = z if h < 8 else t
    return (-u if h & 1 else u) + (-v if h & 2 else v) + (-w if h & 4 else w)


# ---------------------------------------------------------------------------
# Corner contributions
# ---------------------------------------------------------------------------

@nb.njit(cache=True)
def _fast_floor(x):
    i = int(x)
    return i - 1 if x < i else i


@nb.njit(cache=True)
def _corner_1d(h, x):
    t = 1.0 - x * x
    t *= t
    return t * t * gradient_1d(h, x)


@nb.njit(cache=True)
def _corner_2d(h, x, y):
    t = 0.5 - x * x - y * y
    if t < 0.0:
        return 0.0
    t *= t
    return t * t * gradient_2d(h, x, y)


@nb.njit(cache=True)
def _corner_3d(h, x, y, z):
    t = 0.6 - x * x - y * y - z * z
    if t < 0.0:
        return 0.0
    t *= t
    return t * t * gradient_3d(h, x, y, z)


@nb.njit(cache=True)
def _corner_4d(h, x, y, z, w):
    t = 0.6 - x * x - y * y - z * z - w * w
    if t < 0.0:
        return 0.0
    t *= t
    return t * t * gradient_4d(h, x, y, z, w)


# ---------------------------------------------------------------------------
# Noise kernels
# ---------------------------------------------------------------------------

@nb.njit(cache=True)
def _signed_noise_1d(x):
    if not abs(x) < COORDINATE_LIMIT:
        return math.nan
    i0 = _fast_floor(x)
    x0 = x - i0
    x1 = x0 - 1.0
    n0 = _corner_1d(PERMUTATION[i0 & 0xFF], x0)
    n1 = _corner_1d(PERMUTATION[(i0 + 1) & 0xFF], x1)
    return SCALE_1D * (n0 + n1)


@nb.njit(cache=True)
def _signed_noise_2d(x, y):
    if not (abs(x) < COORDINATE_LIMIT and abs(y) < COORDINATE_LIMIT):
        return math.nan
    s = (x + y) * F2
    i = _fast_floor(x + s)
    j = _fast_floor(y + s)
    t = (i + j) * G2
    x0 = x - (i - t)
    y0 = y - (j - t)

    # Lower triangle (x0 > y0) steps in x first, upper in y
    if x0 > y0:
        i1, j1 = 1, 0
    else:
        i1, j1 = 0, 1

    x1 = x0 - i1 + G2
    y1 = y0 - j1 + G2
    x2 = x0 - 1.0 + 2.0 * G2
    y2 = y0 - 1.0 + 2.0 * G2

    ii = i & 0xFF
    jj = j & 0xFF
    h0 = PERMUTATION[(ii + PERMUTATION[jj]) & 0xFF]
    h1 = PERMUTATION[(ii + i1 + PERMUTATION[(jj + j1) & 0xFF]) & 0xFF]
    h2 = PERMUTATION[(ii + 1 + PERMUTATION[(jj + 1) & 0xFF]) & 0xFF]

    return SCALE_2D * (
        _corner_2d(h0, x0, y0)
        + _corner_2d(h1, x1, y1)
        + _corner_2d(h2, x2, y2)
    )


@nb.njit(cache=True)
def _signed_noise_3d(x, y, z):
    if not (abs(x) < COORDINATE_LIMIT and abs(y) < COORDINATE_LIMIT
            and abs(z) < COORDINATE_LIMIT):
        return math.nan
    s = (x + y + z) * F3
    i = _fast_floor(x + s)
    j = _fast_floor(y + s)
    k = _fast_floor(z + s)
    t = (i + j + k) * G3
    x0 = x - (i - t)
    y0 = y - (j - t)
    z0 = z - (k - t)

    # Second and third corners of the simplex, from the ordering of offsets
    if x0 >= y0:
        if y0 >= z0:
            i1, j1, k1, i2, j2, k2 = 1, 0, 0, 1, 1, 0
        elif x0 >= z0:
            i1, j1, k1, i2, j2, k2 = 1, 0, 0, 1, 0, 1
        else:
            i1, j1, k1, i2, j2, k2 = 0, 0, 1, 1, 0, 1
    else:
        if y0 < z0:
            i1, j1, k1, i2, j2, k2 = 0, 0, 1, 0, 1, 1
        elif x0 < z0:
            i1, j1, k1, i2, j2, k2 = 0, 1, 0, 0, 1, 1
        else:
            i1, j1, k1, i2, j2, k2 = 0, 1, 0, 1, 1, 0

    x1 = x0 - i1 + G3
    y1 = y0 - j1 + G3
    z1 = z0 - k1 + G3
    x2 = x0 - i2 + 2.0 * G3
    y2 = y0 - j2 + 2.0 * G3
    z2 = z0 - k2 + 2.0 * G3
    x3 = x0 - 1.0 + 3.0 * G3
    y3 = y0 - 1.0 + 3.0 * G3
    z3 = z0 - 1.0 + 3.0 * G3

    ii = i & 0xFF
    jj = j & 0xFF
    kk = k & 0xFF
    h0 = PERM_MOD12[(ii + PERMUTATION[(jj + PERMUTATION[kk]) & 0xFF]) & 0xFF]
    h1 = PERM_MOD12[(ii + i1 + PERMUTATION[
        (jj + j1 + PERMUTATION[(kk + k1) & 0xFF]) & 0xFF]) & 0xFF]
    h2 = PERM_MOD12[(ii + i2 + PERMUTATION[
        (jj + j2 + PERMUTATION[(kk + k2) & 0xFF]) & 0xFF]) & 0xFF]
    h3 = PERM_MOD12[(ii + 1 + PERMUTATION[
        (jj + 1 + PERMUTATION[(kk + 1) & 0xFF]) & 0xFF]) & 0xFF]

    return SCALE_3D * (
        _corner_3d(h0, x0, y0, z0)
        + _corner_3d(h1, x1, y1, z1)
        + _corner_3d(h2, x2, y2, z2)
        + _corner_3d(h3, x3, y3, z3)
    )


@nb.njit(cache=True)
def _hash_4d(i, j, k, l):
    return PERMUTATION[(i + PERMUTATION[(j + PERMUTATION[
        (k + PERMUTATION[l & 0xFF]) & 0xFF]) & 0xFF]) & 0xFF]


@nb.njit(cache=True)
def _signed_noise_4d(x, y, z, w):
    if not (abs(x) < COORDINATE_LIMIT and abs(y) < COORDINATE_LIMIT
            and abs(z) < COORDINATE_LIMIT and abs(w) < COORDINATE_LIMIT):
        return math.nan
    s = (x + y + z + w) * F4
    i = _fast_floor(x + s)
    j = _fast_floor(y + s)
    k = _fast_floor(z + s)
    l = _fast_floor(w + s)  # noqa: E741
    t = (i + j + k + l) * G4
    x0 = x - (i - t)
    y0 = y - (j - t)
    z0 = z - (k - t)
    w0 = w - (l - t)

    c = 0
    if x0 > y0:
        c += 32
    if x0 > z0:
        c += 16
    if y0 > z0:
        c += 8
    if x0 > w0:
        c += 4
    if y0 > w0:
        c += 2
    if z0 > w0:
        c += 1
    rank = SIMPLEX_LOOKUP[c]

    # A coordinate steps at corner n when its rank is >= 4 - n
    i1 = 1 if rank[0] >= 3 else 0
    j1 = 1 if rank[1] >= 3 else 0
    k1 = 1 if rank[2] >= 3 else 0
    l1 = 1 if rank[3] >= 3 else 0
    i2 = 1 if rank[0] >= 2 else 0
    j2 = 1 if rank[1] >= 2 else 0
    k2 = 1 if rank[2] >= 2 else 0
    l2 = 1 if rank[3] >= 2 else 0
    i3 = 1 if rank[0] >= 1 else 0
    j3 = 1 if rank[1] >= 1 else 0
    k3 = 1 if rank[2] >= 1 else 0
    l3 = 1 if rank[3] >= 1 else 0

    x1 = x0 - i1 + G4
    y1 = y0 - j1 + G4
    z1 = z0 - k1 + G4
    w1 = w0 - l1 + G4
    x2 = x0 - i2 + 2.0 * G4
    y2 = y0 - j2 + 2.0 * G4
    z2 = z0 - k2 + 2.0 * G4
    w2 = w0 - l2 + 2.0 * G4
    x3 = x0 - i3 + 3.0 * G4
    y3 = y0 - j3 + 3.0 * G4
    z3 = z0 - k3 + 3.0 * G4
    w3 = w0 - l3 + 3.0 * G4
    x4 = x0 - 1.0 + 4.0 * G4
    y4 = y0 - 1.0 + 4.0 * G4
    z4 = z0 - 1.0 + 4.0 * G4
    w4 = w0 - 1.0 + 4.0 * G4

    ii = i & 0xFF
    jj = j & 0xFF
    kk = k & 0xFF
    ll = l & 0xFF
    h0 = _hash_4d(ii, jj, kk, ll)
    h1 = _hash_4d(ii + i1, jj + j1, kk + k1, ll + l1)
    h2 = _hash_4d(ii + i2, jj + j2, kk + k2, ll + l2)
    h3 = _hash_4d(ii + i3, jj + j3, kk + k3, ll + l3)
    h4 = _hash_4d(ii + 1, jj + 1, kk + 1, ll + 1)

    return SCALE_4D * (
        _corner_4d(h0, x0, y0, z0, w0)
        + _corner_4d(h1, x1, y1, z1, w1)
        + _corner_4d(h2, x2, y2, z2, w2)
        + _corner_4d(h3, x3, y3, z3, w3)
        + _corner_4d(h4, x4, y4, z4, w4)
    )


@nb.njit(cache=True)
def _simplex_noise_1d(x):
    return 0.5 * _signed_noise_1d(x) + 0.5


@nb.njit(cache=True)
def _simplex_noise_2d(x, y):
    return 0.5 * _signed_noise_2d(x, y) + 0.5


@nb.njit(cache=True)
def _simplex_noise_3d(x, y, z):
    return 0.5 * _signed_noise_3d(x, y, z) + 0.5


@nb.njit(cache=True)
def _simplex_noise_4d(x, y, z, w):
    return 0.5 * _signed_noise_4d(x, y, z, w) + 0.5


_SIGNED = {
    1: elementwise(_signed_noise_1d, arity=1),
    2: elementwise(_signed_noise_2d, arity=2),
    3: elementwise(_signed_noise_3d, arity=3),
    4: elementwise(_signed_noise_4d, arity=4),
}
_UNSIGNED = {
    1: elementwise(_simplex_noise_1d, arity=1),
    2: elementwise(_simplex_noise_2d, arity=2),
    3: elementwise(_simplex_noise_3d, arity=3),
    4: elementwise(_simplex_noise_4d, arity=4),
}


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def signed_noise_1d(x: ArrayLike):
    """
    1D simplex noise in about [-0.65, 0.65].

    Zero at every integer. Non-finite input gives nan.
    """
    return _SIGNED[1](x)


def signed_noise_2d(x: ArrayLike, y: ArrayLike):
    """
    2D simplex noise in about [-1, 1].

    Args:
        x, y: Coordinates (scalars or arrays, broadcast together)

    Returns:
        float for scalar input, float64 ndarray otherwise

    Example:
        >>> xs, ys = np.meshgrid(np.linspace(0, 4, 256), np.linspace(0, 4, 256))
        >>> field = signed_noise_2d(xs, ys)    # shape (256, 256)
    """
    return _SIGNED[2](x, y)


def signed_noise_3d(x: ArrayLike, y: ArrayLike, z: ArrayLike):
    """3D simplex noise in about [-1, 1]."""
    return _SIGNED[3](x, y, z)


def signed_noise_4d(x: ArrayLike, y: ArrayLike, z: ArrayLike, w: ArrayLike):
    """4D simplex noise in about [-1, 1]; scale factor is preliminary."""
    return _SIGNED[4](x, y, z, w)


def simplex_noise_1d(x: ArrayLike):
    """1D noise mapped to [0, 1]: signed_noise_1d(x) * 0.5 + 0.5."""
    return _UNSIGNED[1](x)


def simplex_noise_2d(x: ArrayLike, y: ArrayLike):
    """2D noise mapped to [0, 1]."""
    return _UNSIGNED[2](x, y)


def simplex_noise_3d(x: ArrayLike, y: ArrayLike, z: ArrayLike):
    """3D noise mapped to [0, 1]."""
    return _UNSIGNED[3](x, y, z)


def simplex_noise_4d(x: ArrayLike, y: ArrayLike, z: ArrayLike, w: ArrayLike):
    """4D noise mapped to [0, 1]."""
    return _UNSIGNED[4](x, y, z, w)


def _dispatch(table: dict, coords: tuple):
    fn = table.get(len(coords))
    if fn is None:
        handle_error(
            f"Simplex noise takes 1 to 4 coordinates, got {len(coords)}",
            fatal=True,
            exception_class=ValueError,
        )
    return fn(*coords)


def signed_noise(*coords: ArrayLike):
    """
    Signed simplex noise, dimension chosen by the number of coordinates.

    Raises:
        ValueError: Unless 1 to 4 coordinates are given
    """
    return _dispatch(_SIGNED, coords)


def simplex_noise(*coords: ArrayLike):
    """Simplex noise in [0, 1], dimension chosen by the number of coordinates."""
    return _dispatch(_UNSIGNED, coords)
