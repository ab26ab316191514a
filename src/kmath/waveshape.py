"""
Digamma-based square-wave shaper.

    c = b * cos(a)
    square(a, b) = 0.5 * (cos(2 pi c) * (psi(3/4 - c) - psi(1/4 - c)) / pi - 1)

`a` is the phase and `b` the drive. With b = 0 the output is 0; as |b|
grows the shape flattens toward +-1/2 with a small overshoot (about 0.64
at its peak), so the result always stays well inside [-1, 1].

Whenever c sits on 1/4 + n or 3/4 + n (n >= 0 an integer) one of the two
digamma calls hits a pole while cos(2 pi c) is zero. The product has a
finite limit there, and the shaper returns that limit (1/2) instead of
inf * 0.

Copyright (c) 2026 kmath contributors

MIT License
"""

import math

import numba as nb
from numpy.typing import ArrayLike

from kmath.constants import INV_PI, TAU
from kmath.digamma import (
    DEFAULT_PRECISION,
    _PROFILES,
    Accuracy,
    _digamma12_kernel,
    _digamma_core,
)
from kmath.vectorize import elementwise

# Value of the shaper at its removable singularities
POLE_LIMIT = 0.5

_SHIFT_TARGET, _TAIL_TERMS, _TINY = _PROFILES[Accuracy.STANDARD]


@nb.njit(cache=True)
def _shape(c, psi_hi, psi_lo):
    if math.isinf(psi_hi) or math.isinf(psi_lo):
        if math.isfinite(c):
            return POLE_LIMIT
    return 0.5 * (math.cos(TAU * c) * (psi_hi - psi_lo) * INV_PI - 1.0)


@nb.njit(cache=True)
def _square_kernel(a, b):
    c = b * math.cos(a)
    return _shape(
        c,
        _digamma_core(0.75 - c, _SHIFT_TARGET, _TAIL_TERMS, _TINY),
        _digamma_core(0.25 - c, _SHIFT_TARGET, _TAIL_TERMS, _TINY),
    )


@nb.njit(cache=True)
def _square12_kernel(a, b):
    c = b * math.cos(a)
    precision = float(DEFAULT_PRECISION)
    return _shape(
        c,
        _digamma12_kernel(0.75 - c, precision),
        _digamma12_kernel(0.25 - c, precision),
    )


_square = elementwise(_square_kernel, arity=2)
_square12 = elementwise(_square12_kernel, arity=2)


def square(a: ArrayLike, b: ArrayLike):
    """
    Square-wave shaper driven by the STANDARD digamma.

    Args:
        a: Phase in radians (scalar or array)
        b: Drive amount; broadcast against `a`

    Returns:
        Shaped value(s), roughly within [-0.64, 0.64]

    Example:
        >>> square(0.0, 0.75)     # removable singularity
        0.5
    """
    return _square(a, b)


def square12(a: ArrayLike, b: ArrayLike):
    """Square-wave shaper driven by digamma12 (default precision)."""
    return _square12(a, b)
