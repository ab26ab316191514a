"""
Array support for scalar numba kernels.

Every kernel in kmath is written for one float at a time. `elementwise`
wraps such a kernel so that callers may pass either scalars (and get a
Python float back) or array-likes (and get a float64 ndarray of the
broadcast shape back).

Copyright (c) 2026 kmath contributors

MIT License
"""

from typing import Callable

import numpy as np
import numba as nb
from numpy.typing import ArrayLike


def _make_loop(kernel, arity: int):
    # The loops close over `kernel`; numba freezes it as a constant, so each
    # wrapped kernel gets its own compiled loop.
    if arity == 1:
        @nb.njit
        def loop(a, out):
            for n in range(out.size):
                out[n] = kernel(a[n])
    elif arity == 2:
        @nb.njit
        def loop(a, b, out):
            for n in range(out.size):
                out[n] = kernel(a[n], b[n])
    elif arity == 3:
        @nb.njit
        def loop(a, b, c, out):
            for n in range(out.size):
                out[n] = kernel(a[n], b[n], c[n])
    elif arity == 4:
        @nb.njit
        def loop(a, b, c, d, out):
            for n in range(out.size):
                out[n] = kernel(a[n], b[n], c[n], d[n])
    else:
        raise ValueError(f"arity must be 1-4, got {arity}")
    return loop


def elementwise(kernel, arity: int = 1) -> Callable[..., float | np.ndarray]:
    """
    Make a scalar numba kernel callable on scalars or arrays.

    Args:
        kernel: njit-compiled function of `arity` float arguments
        arity: Number of arguments (1-4)

    Returns:
        A function taking `arity` scalars or array-likes. All-scalar calls
        return a float; otherwise the inputs are broadcast together and a
        float64 ndarray is returned.

    Example:
        >>> fn = elementwise(_signed_noise_2d, arity=2)
        >>> fn(0.5, 0.25)            # float
        >>> fn(np.arange(4.0), 0.0)  # ndarray, shape (4,)
    """
    loop = _make_loop(kernel, arity)

    def apply(*args: ArrayLike):
        if len(args) != arity:
            raise TypeError(f"expected {arity} arguments, got {len(args)}")
        if all(np.ndim(a) == 0 for a in args):
            return kernel(*(float(a) for a in args))
        arrays = np.broadcast_arrays(*(np.asarray(a, dtype=np.float64) for a in args))
        flat = [np.ascontiguousarray(a).reshape(-1) for a in arrays]
        out = np.empty(arrays[0].shape, dtype=np.float64)
        loop(*flat, out.reshape(-1))
        return out

    apply.kernel = kernel
    apply.__name__ = getattr(kernel, "__name__", "elementwise").lstrip("_")
    apply.__doc__ = getattr(kernel, "__doc__", None)
    return apply
