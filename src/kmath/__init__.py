"""
kmath - Numerical kernels: digamma and harmonic numbers, a digamma-based
square-wave shaper, simplex noise in 1-4 dimensions, special functions and
small arithmetic helpers.

Copyright (c) 2026 kmath contributors

MIT License
"""

from kmath.config import ErrorMode, set_error_mode, get_error_mode, handle_error
from kmath.digamma import (
    Accuracy,
    digamma,
    digamma12,
    digamma_fast,
    digamma_ultra,
    pi_cot_pi,
    harmonic,
    harmonic12,
    H,
    H12,
)
from kmath.waveshape import square, square12
from kmath.simplex import (
    PERMUTATION,
    PERM_MOD12,
    SIMPLEX_LOOKUP,
    gradient_1d,
    gradient_2d,
    gradient_3d,
    gradient_4d,
    signed_noise_1d,
    signed_noise_2d,
    signed_noise_3d,
    signed_noise_4d,
    simplex_noise_1d,
    simplex_noise_2d,
    simplex_noise_3d,
    simplex_noise_4d,
    signed_noise,
    simplex_noise,
)
from kmath.special import (
    factorial,
    gamma,
    lngamma,
    erf,
    phi,
    zeta,
    fresnel_c,
    fresnel_s,
    sinc,
    unit_step,
    cantor,
    machine_epsilon,
)
from kmath.arith import (
    to_int,
    floor32,
    clamp,
    lerp,
    normalize,
    remap,
    map_range,
    dist,
    dist_squared,
    sign,
    mod,
    bit_divisor,
    bit_mask,
    bit_shift,
    random_float,
    random_int,
    random_perm,
)
from kmath.logger import set_global_logging, get_logger

__version__ = "0.1.0"

__all__ = [
    # Configuration
    "ErrorMode",
    "set_error_mode",
    "get_error_mode",
    "handle_error",
    # Digamma family
    "Accuracy",
    "digamma",
    "digamma12",
    "digamma_fast",
    "digamma_ultra",
    "pi_cot_pi",
    "harmonic",
    "harmonic12",
    "H",
    "H12",
    # Waveshaping
    "square",
    "square12",
    # Simplex noise
    "PERMUTATION",
    "PERM_MOD12",
    "SIMPLEX_LOOKUP",
    "gradient_1d",
    "gradient_2d",
    "gradient_3d",
    "gradient_4d",
    "signed_noise_1d",
    "signed_noise_2d",
    "signed_noise_3d",
    "signed_noise_4d",
    "simplex_noise_1d",
    "simplex_noise_2d",
    "simplex_noise_3d",
    "simplex_noise_4d",
    "signed_noise",
    "simplex_noise",
    # Special functions
    "factorial",
    "gamma",
    "lngamma",
    "erf",
    "phi",
    "zeta",
    "fresnel_c",
    "fresnel_s",
    "sinc",
    "unit_step",
    "cantor",
    "machine_epsilon",
    # Arithmetic and random helpers
    "to_int",
    "floor32",
    "clamp",
    "lerp",
    "normalize",
    "remap",
    "map_range",
    "dist",
    "dist_squared",
    "sign",
    "mod",
    "bit_divisor",
    "bit_mask",
    "bit_shift",
    "random_float",
    "random_int",
    "random_perm",
    # Logging utilities
    "set_global_logging",
    "get_logger",
    # Version
    "__version__",
]
