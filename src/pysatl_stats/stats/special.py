"""
Special Functions
=================

Inverse of the Gauss error function, used by the Normal and LogNormal
quantiles. The forward error function is taken from :mod:`scipy.special`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, overload

import numpy as np
from scipy.special import erf

from pysatl_stats.errors import DomainError

if TYPE_CHECKING:
    import numpy.typing as npt

    from pysatl_stats.types import Number, NumericArray

ERFINV_CENTER = 0.7
"""Boundary between the central and the tail rational approximations."""

_A = (0.886226899, -1.645349621, 0.914624893, -0.140543331)
_B = (-2.118377725, 1.442710462, -0.329097515, 0.012229801)
_C = (-1.970840454, -1.624906493, 3.429567803, 1.641345311)
_D = (3.543889200, 1.637067800)

_NEWTON_STEPS = 2
_TWO_OVER_SQRT_PI = 2.0 / math.sqrt(math.pi)


def _central(y: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
    z = y**2
    num = ((_A[3] * z + _A[2]) * z + _A[1]) * z + _A[0]
    den = (((_B[3] * z + _B[2]) * z + _B[1]) * z + _B[0]) * z + 1.0
    return y * num / den


def _tail(y: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
    z = np.sqrt(-np.log((1.0 - np.abs(y)) / 2.0))
    num = ((_C[3] * z + _C[2]) * z + _C[1]) * z + _C[0]
    den = (_D[1] * z + _D[0]) * z + 1.0
    return np.sign(y) * num / den


@overload
def erfinv(y: Number) -> float: ...
@overload
def erfinv(y: NumericArray) -> npt.NDArray[np.float64]: ...


def erfinv(y: Number | NumericArray) -> float | npt.NDArray[np.float64]:
    """
    Inverse error function.

    A rational approximation is chosen per magnitude band and then refined
    with exactly two Newton steps ``x <- x - (erf(x) - y) / (2/√π · e^(-x²))``:

    - ``|y| <= 0.7``: central approximation in ``y²``;
    - ``0.7 < |y| < 1``: tail approximation in ``sqrt(-log((1 - |y|) / 2))``;
    - ``|y| == 1``: ``±inf``.

    Parameters
    ----------
    y : Number or NumericArray
        Value(s) in ``[-1, 1]``.

    Returns
    -------
    float or numpy.ndarray
        ``x`` such that ``erf(x) == y``. ``nan`` inputs propagate.

    Raises
    ------
    DomainError
        If any ``|y| > 1``.
    """
    y_arr = np.asarray(y, dtype=np.float64)
    flat = np.atleast_1d(y_arr)
    abs_y = np.abs(flat)

    if np.any(abs_y > 1.0):
        raise DomainError("erfinv is defined on [-1, 1]")

    x = np.full_like(flat, np.nan)

    central = abs_y <= ERFINV_CENTER
    tail = (abs_y > ERFINV_CENTER) & (abs_y < 1.0)
    edge = abs_y == 1.0

    x[central] = _central(flat[central])
    x[tail] = _tail(flat[tail])

    inner = central | tail
    target = flat[inner]
    approx = x[inner]
    for _ in range(_NEWTON_STEPS):
        approx = approx - (erf(approx) - target) / (_TWO_OVER_SQRT_PI * np.exp(-approx * approx))
    x[inner] = approx

    x[edge] = np.copysign(np.inf, flat[edge])

    if y_arr.ndim == 0:
        return float(x[0])
    return x.reshape(y_arr.shape)


__all__ = [
    "erf",
    "erfinv",
]
