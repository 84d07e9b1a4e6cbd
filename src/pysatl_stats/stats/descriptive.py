"""
Descriptive Statistics
======================

Pure functions over numeric samples:

- location and spread: :func:`mean`, :func:`median`, :func:`variance`,
  :func:`pvariance`, :func:`sd`;
- combinatorics through the gamma function: :func:`factorial`, :func:`choose`;
- helpers: :func:`log_array` and ordinary least squares :func:`lsr`.

Notes
-----
Samples are converted with :func:`numpy.asarray` and are never mutated.
Statistics that need more points than supplied raise
:class:`~pysatl_stats.errors.InsufficientDataError`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from numbers import Integral
from typing import TYPE_CHECKING, overload

import numpy as np
from scipy.special import binom, gamma

from pysatl_stats.errors import DomainError, InsufficientDataError

if TYPE_CHECKING:
    from collections.abc import Sequence

    import numpy.typing as npt

    from pysatl_stats.types import SampleLike


def _as_sample(data: SampleLike, statistic: str, required: int) -> npt.NDArray[np.float64]:
    """
    Convert ``data`` to a 1D float array holding at least ``required`` points.

    Raises
    ------
    ValueError
        If ``data`` is not one-dimensional.
    InsufficientDataError
        If ``data`` holds fewer than ``required`` points.
    """
    arr = np.asarray(data, dtype=np.float64)
    if arr.ndim != 1:
        raise ValueError(f"{statistic} expects a one-dimensional sample, got shape {arr.shape}.")
    if arr.size < required:
        raise InsufficientDataError(statistic, required, int(arr.size))
    return arr


def mean(data: SampleLike) -> float:
    """
    Arithmetic mean of a sample.

    Raises
    ------
    InsufficientDataError
        If ``data`` is empty.
    """
    arr = _as_sample(data, "mean", 1)
    return float(arr.mean())


def variance(data: SampleLike) -> float:
    """
    Unbiased sample variance (divisor ``n - 1``).

    Raises
    ------
    InsufficientDataError
        If ``data`` contains fewer than two values.
    """
    arr = _as_sample(data, "variance", 2)
    return float(np.var(arr, ddof=1))


def pvariance(data: SampleLike) -> float:
    """
    Population variance (divisor ``n``).

    Raises
    ------
    InsufficientDataError
        If ``data`` is empty.
    """
    arr = _as_sample(data, "pvariance", 1)
    return float(np.var(arr, ddof=0))


def sd(data: SampleLike) -> float:
    """Unbiased sample standard deviation, ``sqrt(variance(data))``."""
    return math.sqrt(variance(data))


def median(data: SampleLike) -> float:
    """
    Median of a sample.

    Odd-length samples return the middle element of the sorted copy,
    even-length samples return the mean of the two central elements.

    Raises
    ------
    InsufficientDataError
        If ``data`` is empty.
    """
    arr = np.sort(_as_sample(data, "median", 1))
    n = arr.size
    middle = n // 2
    if n % 2 == 1:
        return float(arr[middle])
    return float((arr[middle - 1] + arr[middle]) / 2)


@overload
def factorial(n: int) -> int: ...
@overload
def factorial(n: float) -> float: ...


def factorial(n: int | float) -> int | float:
    """
    Compute ``n!``.

    Integer arguments return an exact ``int``. Floating arguments are
    evaluated as ``Γ(n + 1)``, which fills in non-integer values of ``n``.

    Raises
    ------
    DomainError
        If ``n < 0``.
    """
    if n < 0:
        raise DomainError(f"factorial is undefined for negative arguments, got {n}")
    if isinstance(n, Integral):
        return math.factorial(int(n))
    return float(gamma(float(n) + 1.0))


@overload
def choose(n: int, k: int) -> int: ...
@overload
def choose(n: float, k: int) -> float: ...


def choose(n: int | float, k: int) -> int | float:
    """
    Generalized binomial coefficient ``Γ(n+1) / (Γ(k+1) Γ(n-k+1))``.

    Notes
    -----
    No bounds checking is done: callers keep ``0 <= k <= n``. Outside of that
    range the value is whatever the gamma-function formula yields.
    """
    value = float(binom(n, k))
    if isinstance(n, Integral) and isinstance(k, Integral):
        return round(value)
    return value


def log_array(data: SampleLike) -> npt.NDArray[np.float64]:
    """
    Element-wise natural logarithm, preserving length and order.

    Raises
    ------
    DomainError
        If any value is not strictly positive.
    """
    arr = np.asarray(data, dtype=np.float64)
    if np.any(arr <= 0):
        raise DomainError("log_array requires strictly positive values")
    return np.log(arr)


def lsr(points: Sequence[Sequence[float]] | npt.NDArray[np.float64]) -> list[float]:
    """
    Ordinary least-squares fit of ``y = a + b*x``.

    Parameters
    ----------
    points : sequence of (x, y) pairs
        Observations.

    Returns
    -------
    list[float]
        ``[a, b]``, the intercept and the slope.

    Notes
    -----
    When all x values coincide the denominator vanishes and the result is
    the IEEE outcome of the division (``nan`` or ``inf``).
    """
    arr = np.asarray(points, dtype=np.float64)
    if arr.size == 0:
        raise InsufficientDataError("lsr", 1, 0)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"lsr expects (x, y) pairs of shape (n, 2), got shape {arr.shape}.")

    x = arr[:, 0]
    y = arr[:, 1]
    n = float(arr.shape[0])
    total_x = x.sum()
    total_y = y.sum()
    total_xy = (x * y).sum()
    total_x2 = (x**2).sum()

    with np.errstate(divide="ignore", invalid="ignore"):
        b = (n * total_xy - total_x * total_y) / (n * total_x2 - total_x**2)
        a = (total_y - b * total_x) / n
    return [float(a), float(b)]


__all__ = [
    "mean",
    "variance",
    "pvariance",
    "sd",
    "median",
    "factorial",
    "choose",
    "log_array",
    "lsr",
]
