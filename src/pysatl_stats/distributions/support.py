"""
Distribution Supports
=====================

Support descriptors for univariate distributions:

- :class:`ContinuousSupport` — an interval on the real line;
- :class:`IntegerDiscreteSupport` — a (possibly one-sided) range of integers.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import Protocol, cast, overload, runtime_checkable

import numpy as np

from pysatl_stats.types import BoolArray, Interval1D, Number, NumericArray


@runtime_checkable
class Support(Protocol):
    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...


class ContinuousSupport(Interval1D, Support): ...


@dataclass(frozen=True, slots=True)
class IntegerDiscreteSupport(Support):
    """
    Integers ``k`` with ``min_k <= k <= max_k``.

    Parameters
    ----------
    min_k : int or None, default=None
        Smallest support point, ``None`` for a left-unbounded support.
    max_k : int or None, default=None
        Largest support point, ``None`` for a right-unbounded support.
    """

    min_k: int | None = None
    max_k: int | None = None

    def __post_init__(self) -> None:
        if self.min_k is not None and self.max_k is not None and self.min_k > self.max_k:
            raise ValueError("min_k must not exceed max_k.")

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        xf = np.asarray(x, dtype=float)
        with np.errstate(invalid="ignore"):
            mask = np.isfinite(xf) & (xf == np.floor(xf))
        if self.min_k is not None:
            mask &= xf >= self.min_k
        if self.max_k is not None:
            mask &= xf <= self.max_k

        if np.ndim(xf) == 0:
            return bool(mask)
        return cast(BoolArray, mask)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast(Number, x)))

    def first(self) -> int | None:
        return self.min_k

    def last(self) -> int | None:
        return self.max_k


__all__ = [
    "Support",
    "ContinuousSupport",
    "IntegerDiscreteSupport",
]
