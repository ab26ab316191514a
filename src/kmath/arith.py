"""
Arithmetic, range-mapping, bit and random helpers.

All numeric functions are vectorized and work with numpy arrays or scalars
(scalars come back as 0-d arrays or numpy scalars). The random helpers draw
from an injected numpy Generator so results are reproducible under a seed.

Copyright (c) 2026 kmath contributors

MIT License
"""

import numpy as np
from numpy.typing import ArrayLike

from kmath.config import handle_error

# Input ranges narrower than this are treated as a single point by remap
REMAP_DEGENERATE_WIDTH = 1e-15


# ---------------------------------------------------------------------------
# Rounding
# ---------------------------------------------------------------------------

def to_int(x: ArrayLike) -> np.ndarray:
    """Truncate toward zero, returning int64."""
    return np.trunc(np.asarray(x, dtype=np.float64)).astype(np.int64)


def floor32(x: ArrayLike) -> np.ndarray:
    """
    Floor built on truncation, returning int64.

    Example:
        >>> floor32(1.5)
        1
        >>> floor32(-1.5)
        -2
        >>> floor32(-2.0)
        -2
    """
    x = np.asarray(x, dtype=np.float64)
    truncated = np.trunc(x)
    return (truncated - (x < truncated)).astype(np.int64)


# ---------------------------------------------------------------------------
# Interpolation and range mapping
# ---------------------------------------------------------------------------

def clamp(x: ArrayLike, v0: ArrayLike, v1: ArrayLike) -> np.ndarray:
    """Limit x to [v0, v1]."""
    return np.minimum(np.maximum(np.asarray(x, dtype=np.float64), v0), v1)


def lerp(x: ArrayLike, v0: ArrayLike, v1: ArrayLike) -> np.ndarray:
    """
    Linear interpolation: v0 at x = 0, v1 at x = 1.

    Example:
        >>> lerp(0.25, 10.0, 20.0)
        12.5
    """
    x = np.asarray(x, dtype=np.float64)
    return v0 + (np.asarray(v1, dtype=np.float64) - v0) * x


def normalize(x: ArrayLike, v0: ArrayLike, v1: ArrayLike) -> np.ndarray:
    """(x - v0) / (v1 - v0), clamped to [-1, 1]."""
    x = np.asarray(x, dtype=np.float64)
    return clamp((x - v0) / (np.asarray(v1, dtype=np.float64) - v0), -1.0, 1.0)


def remap(
    x: ArrayLike,
    v0: ArrayLike,
    v1: ArrayLike,
    vx0: ArrayLike,
    vx1: ArrayLike,
    clamp: bool = False,
) -> np.ndarray:
    """
    Re-map x from the range [v0, v1] to [vx0, vx1].

    Args:
        x: Value(s) to re-map
        v0, v1: Input range
        vx0, vx1: Output range; may be reversed (vx1 < vx0)
        clamp: If True, limit the result to the output range

    Returns:
        The re-mapped value(s). A degenerate input range
        (|v0 - v1| < 1e-15) maps everything to vx0.

    Example:
        >>> remap(5.0, 0.0, 10.0, 100.0, 200.0)
        150.0
        >>> remap(20.0, 0.0, 10.0, 1.0, 0.0, clamp=True)
        0.0
    """
    x = np.asarray(x, dtype=np.float64)
    v0 = np.asarray(v0, dtype=np.float64)
    v1 = np.asarray(v1, dtype=np.float64)
    vx0 = np.asarray(vx0, dtype=np.float64)
    vx1 = np.asarray(vx1, dtype=np.float64)

    degenerate = np.abs(v0 - v1) < REMAP_DEGENERATE_WIDTH
    width = np.where(degenerate, 1.0, v1 - v0)
    out = (x - v0) / width * (vx1 - vx0) + vx0
    if clamp:
        out = np.minimum(np.maximum(out, np.minimum(vx0, vx1)), np.maximum(vx0, vx1))
    return np.where(degenerate, vx0, out)


map_range = remap


# ---------------------------------------------------------------------------
# Geometry and signs
# ---------------------------------------------------------------------------

def dist(x1: ArrayLike, y1: ArrayLike, x2: ArrayLike, y2: ArrayLike) -> np.ndarray:
    """Euclidean distance between (x1, y1) and (x2, y2)."""
    return np.sqrt(dist_squared(x1, y1, x2, y2))


def dist_squared(x1: ArrayLike, y1: ArrayLike, x2: ArrayLike, y2: ArrayLike) -> np.ndarray:
    """Squared distance; cheaper than dist() when only comparing."""
    dx = np.asarray(x1, dtype=np.float64) - x2
    dy = np.asarray(y1, dtype=np.float64) - y2
    return dx * dx + dy * dy


def sign(x: ArrayLike) -> np.ndarray:
    """-1, 0 or 1 (nan stays nan)."""
    return np.sign(np.asarray(x, dtype=np.float64))


def mod(x: ArrayLike, y: ArrayLike) -> np.ndarray:
    """Floored modulo, x - floor(x / y) * y; takes the sign of y."""
    x = np.asarray(x, dtype=np.float64)
    return x - np.floor(x / y) * y


# ---------------------------------------------------------------------------
# Bit helpers
# ---------------------------------------------------------------------------

def bit_divisor(bits: ArrayLike) -> np.ndarray:
    """2^(bits - 1), the value of the top bit of a `bits`-wide word."""
    return np.left_shift(1, np.asarray(bits, dtype=np.int64) - 1)


def bit_mask(bits: ArrayLike) -> np.ndarray:
    """(1 << bits) - 1."""
    return np.left_shift(1, np.asarray(bits, dtype=np.int64)) - 1


def bit_shift(x: ArrayLike, bits: ArrayLike) -> np.ndarray:
    """
    Low `bits` bits of x scaled by the top-bit value.

    Example:
        >>> bit_shift(0xFF, 8)     # 255 / 128
        1.9921875
    """
    masked = np.bitwise_and(bit_mask(bits), np.asarray(x, dtype=np.int64))
    return masked / bit_divisor(bits)


# ---------------------------------------------------------------------------
# Random helpers
# ---------------------------------------------------------------------------

def _ordered(lo, hi, what: str):
    if lo > hi:
        if handle_error(
            f"{what}: lower bound {lo} exceeds upper bound {hi}",
            exception_class=ValueError,
        ):
            lo, hi = hi, lo
    return lo, hi


def random_float(
    lo: float,
    hi: float,
    precision: int = 2,
    rng: np.random.Generator | None = None,
) -> float:
    """
    Uniform random float in [lo, hi], rounded to `precision` decimals.

    Args:
        lo, hi: Range bounds
        precision: Number of decimal places kept (default 2)
        rng: Generator to draw from (default: a fresh default_rng())

    Returns:
        The rounded value, clamped to [lo, hi]. When no multiple of
        10^-precision lies inside a narrow range, the nearer bound is
        returned unrounded.

    Raises:
        ValueError: In STRICT mode, if lo > hi or precision < 0
    """
    lo, hi = _ordered(lo, hi, "random_float")
    if precision < 0:
        if handle_error(
            f"random_float: precision must be >= 0, got {precision}",
            exception_class=ValueError,
        ):
            precision = 0
    rng = rng if rng is not None else np.random.default_rng()
    value = min(lo + rng.random() * (hi - lo), hi)
    return max(min(round(float(value), int(precision)), float(hi)), float(lo))


def random_int(lo: int, hi: int, rng: np.random.Generator | None = None) -> int:
    """Uniform random integer in [lo, hi], both ends inclusive."""
    lo, hi = _ordered(int(lo), int(hi), "random_int")
    rng = rng if rng is not None else np.random.default_rng()
    return int(rng.integers(lo, hi, endpoint=True))


def random_perm(n: int, rng: np.random.Generator | None = None) -> np.ndarray:
    """
    Uniform random permutation of 0..n-1 (int64).

    Raises:
        ValueError: In STRICT mode, if n < 0 (LENIENT returns an empty array)
    """
    n = int(n)
    if n < 0:
        if handle_error(
            f"random_perm: size must be >= 0, got {n}",
            exception_class=ValueError,
        ):
            n = 0
    rng = rng if rng is not None else np.random.default_rng()
    return rng.permutation(n).astype(np.int64)
