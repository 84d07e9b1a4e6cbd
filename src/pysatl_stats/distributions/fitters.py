"""
Discrete Conversions
====================

Generic conversions from a probability mass function on an integer support:

- :func:`pmf_to_cdf_1D` — CDF by prefix summation of the pmf;
- :func:`pmf_to_ppf_1D` — step quantile by a linear cumulative-sum scan.

Both walk the support from its lower bound, so a call costs O(value).
This is fine for small expected values and a known limitation for large
rates.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from collections.abc import Callable
from math import isnan
from typing import TYPE_CHECKING, cast

import numpy as np

from pysatl_stats.errors import DomainError

if TYPE_CHECKING:
    import numpy.typing as npt

    from pysatl_stats.distributions.support import IntegerDiscreteSupport
    from pysatl_stats.types import Number, NumericArray

    type PMF = Callable[[npt.NDArray[np.float64]], npt.NDArray[np.float64]]

logger = logging.getLogger(__name__)

_SCAN_BLOCK = 1024
_MAX_INDEX = float(2**62)


def _lower_bound(support: IntegerDiscreteSupport) -> int:
    first = support.first()
    if first is None:
        raise RuntimeError("A left-bounded integer support is required for pmf conversions.")
    return first


def _prefix_sums(pmf: PMF, lower: int, stop: int) -> npt.NDArray[np.float64]:
    """
    Cumulative pmf over ``lower..stop``, evaluated in blocks of ``_SCAN_BLOCK``.

    The scan ends early once the sum saturates at 1 or the pmf has underflowed
    to zero after some mass was collected; the result is then shorter than
    ``stop - lower + 1``.
    """
    blocks: list[npt.NDArray[np.float64]] = []
    total = 0.0
    start = lower
    while start <= stop:
        end = min(start + _SCAN_BLOCK - 1, stop)
        mass = np.asarray(pmf(np.arange(start, end + 1, dtype=np.float64)), dtype=np.float64)
        prefix = total + np.cumsum(mass)
        blocks.append(prefix)
        total = float(prefix[-1])
        if total >= 1.0 or (total > 0.0 and mass[-1] == 0.0):
            logger.debug("pmf mass exhausted at %d with cumulative %.17g", end, total)
            break
        start = end + 1
    return np.concatenate(blocks)


def pmf_to_cdf_1D(
    pmf: PMF, support: IntegerDiscreteSupport, x: Number | NumericArray
) -> npt.NDArray[np.float64]:
    """
    Evaluate ``P(X <= x)`` as a prefix sum of ``pmf`` over the support.

    Parameters
    ----------
    pmf : Callable
        Vectorized probability mass function.
    support : IntegerDiscreteSupport
        Left-bounded integer support of the distribution.
    x : Number or NumericArray
        Point(s) at which to evaluate the CDF; non-integer points are floored.

    Returns
    -------
    numpy.ndarray
        CDF values in ``[0, 1]`` with the shape of ``x``. At and beyond the
        upper support bound the value is exactly ``1``, and so is it past the
        point where the pmf underflows to zero on a right-unbounded support.
    """
    lower = _lower_bound(support)
    upper = support.last()

    shape = np.shape(x)
    x_arr = np.atleast_1d(np.asarray(x, dtype=np.float64))
    result = np.zeros_like(x_arr)

    above = x_arr >= upper if upper is not None else np.isposinf(x_arr)
    inside = (x_arr >= lower) & ~above & np.isfinite(x_arr)

    if np.any(inside):
        floored = np.minimum(np.floor(x_arr[inside]), _MAX_INDEX)
        offsets = floored.astype(np.int64) - lower
        prefix = _prefix_sums(pmf, lower, lower + int(offsets.max()))
        scanned = offsets < prefix.size
        values = np.ones_like(offsets, dtype=np.float64)
        values[scanned] = prefix[offsets[scanned]]
        result[inside] = values

    result[above] = 1.0
    result[np.isnan(x_arr)] = np.nan
    return cast("npt.NDArray[np.float64]", np.clip(result, 0.0, 1.0).reshape(shape))


def pmf_to_ppf_1D(pmf: PMF, support: IntegerDiscreteSupport, q: float) -> int:
    """
    Smallest support point ``j`` with ``sum(pmf(lower..j)) >= q``.

    Parameters
    ----------
    pmf : Callable
        Vectorized probability mass function.
    support : IntegerDiscreteSupport
        Left-bounded integer support of the distribution.
    q : float
        Probability in ``[0, 1]``.

    Returns
    -------
    int
        Step quantile. On a right-bounded support the scan stops at the upper
        bound; otherwise it stops early once the pmf underflows to zero past
        the bulk of the mass.

    Raises
    ------
    DomainError
        If ``q`` is ``nan``, or ``q == 1`` on a right-unbounded support.
    """
    if isnan(q):
        raise DomainError("Probability must be in [0, 1]")

    lower = _lower_bound(support)
    upper = support.last()
    if upper is None and q >= 1.0:
        raise DomainError("quantile(1) is unbounded on a right-unbounded support")

    def _mass(j: int) -> float:
        return float(pmf(np.asarray(float(j))))

    j = lower
    total = _mass(j)
    while total < q:
        if upper is not None and j >= upper:
            break
        j += 1
        term = _mass(j)
        if term == 0.0 and total > 0.0:
            logger.debug("pmf mass exhausted at %d with cumulative %.17g < %.17g", j, total, q)
            break
        total += term
    return j


__all__ = [
    "pmf_to_cdf_1D",
    "pmf_to_ppf_1D",
]
