"""
Digamma (psi) function family and harmonic numbers.

One parameterized evaluator serves four accuracy profiles:

    Accuracy        shift target   asymptotic tail           tiny |x|
    STANDARD        a >= 12        4 Bernoulli terms         1e-5
    FAST            a >= 6         -1/(12 a^2) only          1e-5
    ULTRA           a >= 1.5       none, psi(a) ~ ln(a-1/2)  1e-5
    HIGH_PRECISION  a >= precision 6 Bernoulli terms         1e-6

Evaluation order for a real x:

1. nan and +-inf are returned unchanged.
2. Nonpositive integers are poles and return +inf (unsigned; no attempt is
   made to pick a side or a complex residue).
3. x >= 1e8 uses the Stirling leading term ln(x) - 1/(2x).
4. Near zero, x > 0 uses the Laurent term -gamma - 1/x + zeta(2) x and x < 0
   is reflected.
5. For x in (-8, 0.5) the argument is shifted upward by unit steps, which
   keeps cot(pi x) out of the picture near the poles; x <= -8 is reflected
   once through psi(x) = psi(1 - x) - pi cot(pi x).
6. The (possibly reflected) argument is shifted to the profile's target and
   the truncated asymptotic series is applied.

Reflection is done inline (one pass through the shift/tail code), never by
recursion.

Copyright (c) 2026 kmath contributors

MIT License
"""

from __future__ import annotations

import math
from enum import Enum

import numba as nb
from numpy.typing import ArrayLike
import numpy as np

from kmath.config import handle_error
from kmath.constants import (
    BERNOULLI_TAIL,
    EULER_GAMMA,
    HARMONIC_DENOMINATORS,
    HARMONIC_NUMERATORS,
    PI_4_OVER_45,
    PI_SQ_OVER_3,
    TWO_LN2,
    ZETA2,
)
from kmath.vectorize import elementwise


class Accuracy(Enum):
    """Accuracy/performance profile of a digamma evaluation."""
    STANDARD = "standard"              # ~1e-12 absolute
    FAST = "fast"                      # ~1e-5 absolute
    ULTRA = "ultra"                    # coarse, ~1e-2 near the shift target
    HIGH_PRECISION = "high_precision"  # exact shortcuts + 6-term tail


DEFAULT_PRECISION = 12

# Above this the Stirling leading term is accurate to double precision
ASYMPTOTIC_CUTOFF = 1e8
# Below this, negative arguments are reflected rather than shifted
REFLECTION_CUTOFF = -8.0
# |x - round(x)| under which pi*cot(pi*x) switches to its Laurent series
COT_SERIES_THRESHOLD = 1e-5

PRECISION_TAIL_TERMS = 6
PRECISION_TINY = 1e-6

# (shift target, tail terms, tiny threshold); tail terms == 0 selects the
# ln(a - 1/2) approximation
_PROFILES = {
    Accuracy.STANDARD: (12.0, 4, 1e-5),
    Accuracy.FAST: (6.0, 1, 1e-5),
    Accuracy.ULTRA: (1.5, 0, 1e-5),
}


# ---------------------------------------------------------------------------
# Kernels
# ---------------------------------------------------------------------------

@nb.njit(cache=True)
def _pi_cot_pi(x):
    # cot has period pi, so reduce to y in [-1/2, 1/2] first
    y = x - math.floor(x + 0.5)
    if y == 0.0:
        return math.inf
    if abs(y) < COT_SERIES_THRESHOLD:
        return 1.0 / y - y * (PI_SQ_OVER_3 + y * y * PI_4_OVER_45)
    return math.pi / math.tan(math.pi * y)


@nb.njit(cache=True)
def _shift_and_tail(a, shift_target, tail_terms):
    acc = 0.0
    while a < shift_target:
        acc -= 1.0 / a
        a += 1.0
    if tail_terms == 0:
        return acc + math.log(a - 0.5)
    inv = 1.0 / a
    inv2 = inv * inv
    tail = 0.0
    for k in range(tail_terms - 1, -1, -1):
        tail = (tail + BERNOULLI_TAIL[k]) * inv2
    return acc + math.log(a) - 0.5 * inv + tail


@nb.njit(cache=True)
def _digamma_core(x, shift_target, tail_terms, tiny):
    if not math.isfinite(x):
        return x
    if x <= 0.0 and x == math.floor(x):
        return math.inf
    if x >= ASYMPTOTIC_CUTOFF:
        return math.log(x) - 0.5 / x
    if abs(x) <= tiny:
        if x > 0.0:
            return -EULER_GAMMA - 1.0 / x + ZETA2 * x
        return _shift_and_tail(1.0 - x, shift_target, tail_terms) - _pi_cot_pi(x)
    if x <= REFLECTION_CUTOFF:
        return _shift_and_tail(1.0 - x, shift_target, tail_terms) - _pi_cot_pi(x)
    return _shift_and_tail(x, shift_target, tail_terms)


@nb.njit(cache=True)
def _harmonic_exact(n):
    # H(n) from the rational table, continued by direct summation
    if n <= 0:
        return 0.0
    size = HARMONIC_NUMERATORS.size
    if n <= size:
        return HARMONIC_NUMERATORS[n - 1] / HARMONIC_DENOMINATORS[n - 1]
    total = HARMONIC_NUMERATORS[size - 1] / HARMONIC_DENOMINATORS[size - 1]
    for k in range(size + 1, n + 1):
        total += 1.0 / k
    return total


@nb.njit(cache=True)
def _digamma12_kernel(x, precision):
    if not math.isfinite(x):
        return x
    if x <= 0.0 and x == math.floor(x):
        return math.inf
    if x > 0.0:
        if x == math.floor(x):
            if x < precision:
                return _harmonic_exact(int(x) - 1) - EULER_GAMMA
        elif x - 0.5 == math.floor(x - 0.5) and x < 0.5 * (precision + 1.0) + 0.5:
            n = int(x - 0.5)
            return (-EULER_GAMMA - TWO_LN2
                    + 2.0 * (_harmonic_exact(2 * n) - 0.5 * _harmonic_exact(n)))
    return _digamma_core(x, precision, PRECISION_TAIL_TERMS, PRECISION_TINY)


def _make_kernel(shift_target: float, tail_terms: int, tiny: float):
    @nb.njit
    def kernel(x):
        return _digamma_core(x, shift_target, tail_terms, tiny)
    return kernel


_EVALUATORS = {
    accuracy: elementwise(_make_kernel(*profile))
    for accuracy, profile in _PROFILES.items()
}
_evaluate12 = elementwise(_digamma12_kernel, arity=2)
_pi_cot = elementwise(_pi_cot_pi)


# ---------------------------------------------------------------------------
# Argument handling
# ---------------------------------------------------------------------------

def resolve_accuracy(accuracy: Accuracy | str) -> Accuracy:
    """
    Coerce an Accuracy or its string value ("fast", "ultra", ...).

    Raises:
        ValueError: For an unknown name, regardless of error mode.
    """
    if isinstance(accuracy, Accuracy):
        return accuracy
    try:
        return Accuracy(str(accuracy).lower())
    except ValueError:
        names = ", ".join(a.value for a in Accuracy)
        handle_error(
            f"Unknown accuracy {accuracy!r}; expected one of: {names}",
            fatal=True,
            exception_class=ValueError,
        )


def _validate_precision(precision) -> int:
    if not math.isfinite(float(precision)):
        if handle_error(
            f"precision must be finite, got {precision!r}",
            exception_class=ValueError,
        ):
            return DEFAULT_PRECISION
    if isinstance(precision, bool) or float(precision) != math.floor(float(precision)):
        if handle_error(
            f"precision must be an integer, got {precision!r}",
            exception_class=ValueError,
        ):
            precision = math.ceil(float(precision))
    precision = int(precision)
    if precision < 1:
        if handle_error(
            f"precision must be >= 1, got {precision}",
            exception_class=ValueError,
        ):
            precision = 1
    return precision


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def digamma(x: ArrayLike, accuracy: Accuracy | str = Accuracy.STANDARD):
    """
    Digamma function psi(x) = Gamma'(x) / Gamma(x).

    Args:
        x: Real argument(s). Scalars return a float, array-likes an ndarray.
        accuracy: Accuracy profile (default STANDARD, ~1e-12 absolute).
            HIGH_PRECISION is digamma12 with the default precision.

    Returns:
        psi(x); +inf at nonpositive integers; nan/inf inputs unchanged.

    Example:
        >>> digamma(1.0)
        -0.5772156649015329
        >>> digamma(0.5)
        -1.9635100260214235
        >>> digamma(-2.0)
        inf
    """
    accuracy = resolve_accuracy(accuracy)
    if accuracy is Accuracy.HIGH_PRECISION:
        return _evaluate12(x, float(DEFAULT_PRECISION))
    return _EVALUATORS[accuracy](x)


def digamma12(x: ArrayLike, precision: int = DEFAULT_PRECISION):
    """
    High-precision digamma.

    Positive integers below `precision` and positive half-integers below
    (precision + 1) / 2 + 1/2 are answered exactly from harmonic numbers:

        psi(n)       = H(n - 1) - gamma
        psi(n + 1/2) = -gamma - 2 ln 2 + 2 (H(2n) - H(n) / 2)

    Everything else is shifted up to `precision` and finished with a 6-term
    Bernoulli tail.

    Args:
        x: Real argument(s)
        precision: Shift target, an integer >= 1 (default 12). Larger values
            trade speed for accuracy.

    Raises:
        ValueError: In STRICT mode, for a precision that is not an integer
            >= 1 (LENIENT mode warns and corrects it).
    """
    return _evaluate12(x, float(_validate_precision(precision)))


def digamma_fast(x: ArrayLike):
    """Digamma with the FAST profile (~1e-5 typical absolute error)."""
    return _EVALUATORS[Accuracy.FAST](x)


def digamma_ultra(x: ArrayLike):
    """
    Digamma with the ULTRA profile: psi(a) ~ ln(a - 1/2) after shifting to
    a >= 1.5. Coarse; meant for throughput-critical callers.
    """
    return _EVALUATORS[Accuracy.ULTRA](x)


def pi_cot_pi(x: ArrayLike):
    """
    pi * cot(pi * x), stable next to the integers.

    Within 1e-5 of an integer the Laurent expansion
    1/y - pi^2 y / 3 - pi^4 y^3 / 45 (y = x - round(x)) is used instead of
    tan, which loses all precision there.
    """
    return _pi_cot(x)


def harmonic(x: ArrayLike, accuracy: Accuracy | str = Accuracy.STANDARD):
    """
    Harmonic number extended to the reals: H(x) = psi(x + 1) + gamma.

    Example:
        >>> harmonic(10)
        2.9289682539682538
    """
    return digamma(np.add(x, 1.0), accuracy) + EULER_GAMMA


def harmonic12(x: ArrayLike, precision: int = DEFAULT_PRECISION):
    """Harmonic number through the high-precision digamma."""
    return digamma12(np.add(x, 1.0), precision) + EULER_GAMMA


H = harmonic
H12 = harmonic12
