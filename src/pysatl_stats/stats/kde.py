"""
Kernel Density Estimation
=========================

Gaussian kernel density estimate of a univariate sample: a normalized mixture
of Normal densities centred at the data points, all sharing one bandwidth.

When no bandwidth is given, Silverman's rule of thumb is used:
``h = 1.06 * sd(data) * n ** (-1/5)``.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import math
from typing import TYPE_CHECKING, overload

import numpy as np

from pysatl_stats.errors import DomainError, InsufficientDataError
from pysatl_stats.stats.descriptive import sd

if TYPE_CHECKING:
    import numpy.typing as npt

    from pysatl_stats.types import Number, NumericArray, SampleLike

logger = logging.getLogger(__name__)

SILVERMAN_FACTOR = 1.06


def silverman_bandwidth(data: SampleLike) -> float:
    """
    Silverman's rule-of-thumb bandwidth ``1.06 * sd(data) * n ** (-1/5)``.

    Raises
    ------
    InsufficientDataError
        If ``data`` has fewer than two points.
    """
    n = np.asarray(data).size
    return SILVERMAN_FACTOR * sd(data) * n ** (-1 / 5)


class KernelDensityEstimation:
    """
    Gaussian kernel density estimator.

    Parameters
    ----------
    data : SampleLike
        One-dimensional sample. It is copied and stored read-only.
    bandwidth : float, optional
        Standard deviation of every kernel. Defaults to
        :func:`silverman_bandwidth` of ``data``.

    Raises
    ------
    InsufficientDataError
        If ``data`` is empty, or has fewer than two points and no bandwidth
        is given.
    DomainError
        If ``bandwidth`` is not positive.
    """

    __slots__ = ("_data", "_bandwidth")

    def __init__(self, data: SampleLike, bandwidth: float | None = None) -> None:
        values = np.array(data, dtype=np.float64)
        if values.ndim != 1:
            raise ValueError(f"KDE expects a one-dimensional sample, got shape {values.shape}.")
        if values.size == 0:
            raise InsufficientDataError("kde", 1, 0)
        values.setflags(write=False)

        if bandwidth is None:
            bandwidth = silverman_bandwidth(values)
            logger.debug("Silverman bandwidth %.6g for %d points", bandwidth, values.size)
        elif not bandwidth > 0:
            raise DomainError(f"KDE bandwidth must be positive, got {bandwidth}")

        self._data = values
        self._bandwidth = float(bandwidth)

    def __repr__(self) -> str:
        return f"KernelDensityEstimation(n={self.n}, bandwidth={self._bandwidth:.6g})"

    @property
    def data(self) -> npt.NDArray[np.float64]:
        """Retained sample (read-only)."""
        return self._data

    @property
    def n(self) -> int:
        """Sample size."""
        return int(self._data.size)

    @property
    def bandwidth(self) -> float:
        """Kernel standard deviation."""
        return self._bandwidth

    @overload
    def evaluate(self, x: Number) -> float: ...
    @overload
    def evaluate(self, x: NumericArray) -> npt.NDArray[np.float64]: ...

    def evaluate(self, x: Number | NumericArray) -> float | npt.NDArray[np.float64]:
        """
        Density estimate at ``x``.

        Parameters
        ----------
        x : Number or NumericArray
            Evaluation point(s).

        Returns
        -------
        float or numpy.ndarray
            ``mean_i N(x; data_i, bandwidth)``; a float for scalar input,
            otherwise an array with the shape of ``x``.
        """
        points = np.asarray(x, dtype=np.float64)
        h = self._bandwidth

        z = (points[..., np.newaxis] - self._data) / h
        kernels = np.exp(-0.5 * z**2) / (h * math.sqrt(2 * math.pi))
        density = kernels.mean(axis=-1)

        if density.ndim == 0:
            return float(density)
        return density

    __call__ = evaluate


__all__ = [
    "SILVERMAN_FACTOR",
    "KernelDensityEstimation",
    "silverman_bandwidth",
]
