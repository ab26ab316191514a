"""
Numeric constants and read-only coefficient tables.

Every table here is built once at import time and flagged non-writeable, so
kernels may read them from any thread without coordination.

Copyright (c) 2026 kmath contributors

MIT License
"""

import math

import numpy as np


def _readonly(values, dtype=np.float64) -> np.ndarray:
    arr = np.array(values, dtype=dtype)
    arr.flags.writeable = False
    return arr


# ---------------------------------------------------------------------------
# Scalar constants
# ---------------------------------------------------------------------------

EPSILON = 2.220446049250313e-16
PI = math.pi
TAU = 2.0 * math.pi
HALF_PI = 0.5 * math.pi
INV_PI = 1.0 / math.pi
PHI = 0.5 * (1.0 + math.sqrt(5.0))        # golden ratio
EULER_GAMMA = 0.5772156649015328606       # lim (H(n) - ln n)
ZETA2 = math.pi * math.pi / 6.0           # zeta(2)
TWO_LN2 = 2.0 * math.log(2.0)
SQRT2 = math.sqrt(2.0)
SQRT_2PI = math.sqrt(2.0 * math.pi)
LOG_SQRT_2PI = 0.5 * math.log(2.0 * math.pi)

# Laurent coefficients of pi*cot(pi*y) about y = 0
PI_SQ_OVER_3 = math.pi ** 2 / 3.0
PI_4_OVER_45 = math.pi ** 4 / 45.0


# ---------------------------------------------------------------------------
# Digamma asymptotic tail
# ---------------------------------------------------------------------------

# -B(2k) / (2k) for k = 1..13, the coefficients of a^(-2k) in
#   psi(a) ~ ln(a) - 1/(2a) + sum_k BERNOULLI_TAIL[k-1] * a^(-2k)
BERNOULLI_TAIL = _readonly([
    -1.0 / 12.0,
    1.0 / 120.0,
    -1.0 / 252.0,
    1.0 / 240.0,
    -1.0 / 132.0,
    691.0 / 32760.0,
    -1.0 / 12.0,
    3617.0 / 8160.0,
    -43867.0 / 14364.0,
    174611.0 / 6600.0,
    -77683.0 / 276.0,
    236364091.0 / 65520.0,
    -657931.0 / 12.0,
])


# ---------------------------------------------------------------------------
# Harmonic numbers H(n) = sum_{k=1..n} 1/k as exact rationals, n = 1..29
# ---------------------------------------------------------------------------

HARMONIC_NUMERATORS = _readonly([
    1, 3, 11, 25, 137, 49, 363, 761, 7129, 7381, 83711, 86021, 1145993,
    1171733, 1195757, 2436559, 42142223, 14274301, 275295799, 55835135,
    18858053, 19093197, 444316699, 1347822955, 34052522467, 34395742267,
    312536252003, 315404588903, 9227046511387,
])

HARMONIC_DENOMINATORS = _readonly([
    1, 2, 6, 12, 60, 20, 140, 280, 2520, 2520, 27720, 27720, 360360,
    360360, 360360, 720720, 12252240, 4084080, 77597520, 15519504,
    5173168, 5173168, 118982864, 356948592, 8923714800, 8923714800,
    80313433200, 80313433200, 2329089562800,
])


def _harmonic_from_table(n: int) -> float:
    if n == 0:
        return 0.0
    return float(HARMONIC_NUMERATORS[n - 1] / HARMONIC_DENOMINATORS[n - 1])


# psi(n) for n = 1..12
DIGAMMA_INT = _readonly([
    _harmonic_from_table(n - 1) - EULER_GAMMA for n in range(1, 13)
])

# psi(n + 1/2) for n = 0..11
DIGAMMA_HALF_INT = _readonly([
    -EULER_GAMMA - TWO_LN2
    + 2.0 * (_harmonic_from_table(2 * n) - 0.5 * _harmonic_from_table(n))
    for n in range(12)
])

# Historical aliases for the two lookup tables
GAMMAINT = DIGAMMA_INT
GAMMAHALFINT = DIGAMMA_HALF_INT
