"""
Shared Types
============

Type aliases, enumerations and the interval type that the statistics,
the distribution supports and the built-in families of PySATL Stats
have in common.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum, StrEnum, auto
from math import inf
from typing import Any, cast, overload

import numpy as np
from numpy.typing import NDArray


class Kind(StrEnum):
    """
    Whether a family puts its mass on integers or spreads it over an interval.

    Attributes
    ----------
    DISCRETE : str
        Bernoulli, Binomial, Geometric and Poisson; described by a pmf.
    CONTINUOUS : str
        Exponential, Laplace, LogNormal, Normal and Uniform; described by a pdf.
    """

    DISCRETE = "discrete"
    CONTINUOUS = "continuous"


@dataclass(frozen=True, slots=True)
class EuclideanDistributionType:
    """
    Kind and dimension of the values a distribution produces.

    Parameters
    ----------
    kind : Kind
        Discrete or continuous.
    dimension : int
        Number of coordinates of one draw. Every built-in family is univariate.
    """

    kind: Kind
    dimension: int


UnivariateContinuous = EuclideanDistributionType(kind=Kind.CONTINUOUS, dimension=1)
"""Distribution type of the continuous built-in families."""

UnivariateDiscrete = EuclideanDistributionType(kind=Kind.DISCRETE, dimension=1)
"""Distribution type of the discrete built-in families."""

NumPyNumber = np.floating[Any] | np.integer[Any]
"""NumPy integer or floating scalar."""

Number = NumPyNumber | int | float
"""Any real scalar accepted by a characteristic."""

NumericArray = NDArray[NumPyNumber]
"""Array of evaluation points or of characteristic values."""

BoolArray = NDArray[np.bool_]
"""Elementwise membership mask."""

SampleLike = Sequence[Number] | NumericArray
"""Type alias for sample sequences accepted by statistics and fitting routines."""


class ContinuousSupportShape1D(Enum):
    """
    Classification of a real interval by which of its ends are finite.

    Attributes
    ----------
    REAL_LINE
        Both ends infinite (Normal, Laplace).
    RAY_LEFT
        Only the right end is finite.
    RAY_RIGHT
        Only the left end is finite (Exponential, LogNormal).
    BOUNDED_INTERVAL
        Both ends finite and distinct (Uniform).
    EMPTY
        No real number belongs to the interval.
    SINGLE_POINT
        A closed interval whose ends coincide.
    """

    REAL_LINE = auto()
    RAY_LEFT = auto()
    RAY_RIGHT = auto()
    BOUNDED_INTERVAL = auto()
    EMPTY = auto()
    SINGLE_POINT = auto()


@dataclass(frozen=True, slots=True)
class Interval1D:
    """
    Real interval used as the support of a continuous family.

    Parameters
    ----------
    left : float, default=-inf
        Lower end.
    right : float, default=inf
        Upper end.
    left_closed : bool, default=True
        Whether ``left`` itself belongs to the interval.
    right_closed : bool, default=True
        Whether ``right`` itself belongs to the interval.

    Notes
    -----
    An infinite end is always stored as open, so ``Interval1D()`` is the
    open real line whatever closure flags were passed.
    """

    left: float = -inf
    right: float = inf
    left_closed: bool = True
    right_closed: bool = True

    def __post_init__(self) -> None:
        if self.left == -inf:
            object.__setattr__(self, "left_closed", False)
        if self.right == inf:
            object.__setattr__(self, "right_closed", False)

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        """
        Membership test for a point or, elementwise, for an array of points.

        Parameters
        ----------
        x : Number or NumericArray
            Evaluation point(s), e.g. the argument of a pdf.

        Returns
        -------
        bool or BoolArray
            A plain ``bool`` for a scalar, a mask of ``x``'s shape otherwise.
            NaN never belongs to the interval.
        """
        points = np.asarray(x)

        above_left = points > self.left
        if self.left_closed:
            above_left = above_left | (points == self.left)
        below_right = points < self.right
        if self.right_closed:
            below_right = below_right | (points == self.right)
        inside = above_left & below_right

        if np.ndim(points) == 0:
            return bool(inside)
        return cast(BoolArray, inside)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast(Number, x)))

    @property
    def is_empty(self) -> bool:
        """True when the ends are reversed, or coincide without both being closed."""
        if self.left != self.right:
            return self.left > self.right
        return not (self.left_closed and self.right_closed)

    @property
    def shape(self) -> ContinuousSupportShape1D:
        """Which of the :class:`ContinuousSupportShape1D` cases the interval falls into."""
        if self.is_empty:
            return ContinuousSupportShape1D.EMPTY
        if self.left == self.right:
            return ContinuousSupportShape1D.SINGLE_POINT

        finite_left = self.left > -inf
        finite_right = self.right < inf
        if finite_left and finite_right:
            return ContinuousSupportShape1D.BOUNDED_INTERVAL
        if finite_left:
            return ContinuousSupportShape1D.RAY_RIGHT
        if finite_right:
            return ContinuousSupportShape1D.RAY_LEFT
        return ContinuousSupportShape1D.REAL_LINE


type GenericCharacteristicName = str
"""Characteristic key in a family's characteristic table."""

type ParametrizationName = str
"""Name under which a parametrization is registered in its family."""


class CharacteristicName(StrEnum):
    """
    Enumeration of distribution characteristics provided by the built-in families.

    Discrete families expose ``pmf``, continuous families expose ``pdf``;
    every family exposes ``cdf``, ``ppf`` (quantile), ``mean`` and ``var``.
    """

    PDF = "pdf"
    PMF = "pmf"
    CDF = "cdf"
    PPF = "ppf"
    MEAN = "mean"
    VAR = "var"


class FamilyName(StrEnum):
    BERNOULLI = "Bernoulli"
    BINOMIAL = "Binomial"
    GEOMETRIC = "Geometric"
    POISSON = "Poisson"
    EXPONENTIAL = "Exponential"
    LAPLACE = "Laplace"
    LOGNORMAL = "LogNormal"
    NORMAL = "Normal"
    CONTINUOUS_UNIFORM = "ContinuousUniform"


__all__ = [
    "Kind",
    "EuclideanDistributionType",
    "UnivariateContinuous",
    "UnivariateDiscrete",
    "GenericCharacteristicName",
    "ParametrizationName",
    "Interval1D",
    "ContinuousSupportShape1D",
    "BoolArray",
    "NumPyNumber",
    "Number",
    "NumericArray",
    "SampleLike",
    "CharacteristicName",
    "FamilyName",
]
