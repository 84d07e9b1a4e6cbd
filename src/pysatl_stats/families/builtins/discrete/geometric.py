"""
Geometric distribution family implementation.

Contains the Geometric family (number of trials up to and including the
first success) parameterized by the success probability.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, cast

import numpy as np

from pysatl_stats.distributions.support import IntegerDiscreteSupport
from pysatl_stats.errors import DomainError
from pysatl_stats.families.parametric_family import ParametricFamily
from pysatl_stats.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_stats.families.registry import ParametricFamilyRegister
from pysatl_stats.stats.descriptive import mean
from pysatl_stats.types import (
    CharacteristicName,
    FamilyName,
    NumericArray,
    UnivariateDiscrete,
)

if TYPE_CHECKING:
    from typing import Any

    from pysatl_stats.types import SampleLike

_SUPPORT = IntegerDiscreteSupport(1, None)


def _distribution_function(p: float, k: NumericArray) -> NumericArray:
    """``P(X <= k) = 1 - (1 - p)^k`` for integer ``k >= 1``."""
    return cast(NumericArray, 1.0 - np.exp(k * np.log1p(-p)))


def configure_geometric_family() -> None:
    """
    Configure and register the Geometric distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.GEOMETRIC):
        return

    GEOMETRIC_DOC = """
    Geometric distribution.

    Number of independent Bernoulli(p) trials needed to get the first
    success, so the support is k = 1, 2, 3, ...

    Probability mass function:
        P(X = k) = (1 - p)^(k-1) * p

    Quantile function:
        Q(q) = max(1, ceil(ln(1 - q) / ln(1 - p)))
    """

    def pmf(parameters: Parametrization, k: NumericArray) -> NumericArray:
        """
        Probability mass function for geometric distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with field:
            - p: float (success probability)
        k : NumericArray
            Points at which to evaluate the probability mass function

        Returns
        -------
        NumericArray
            Probability mass at points k, zero off the positive integers
        """
        parameters = cast(_Probability, parameters)
        k = np.asarray(k, dtype=np.float64)

        p = parameters.p
        on_support = np.asarray(_SUPPORT.contains(k))
        safe_k = np.where(on_support, k, 1.0)
        return cast(NumericArray, np.where(on_support, np.power(1 - p, safe_k - 1) * p, 0.0))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Cumulative distribution function for geometric distribution."""
        parameters = cast(_Probability, parameters)
        x = np.asarray(x, dtype=np.float64)

        with np.errstate(divide="ignore", invalid="ignore"):
            values = _distribution_function(parameters.p, np.floor(np.where(x >= 1, x, 1.0)))
        below = np.where(np.isnan(x), np.nan, 0.0)
        return cast(NumericArray, np.where(x >= 1, values, below))

    def ppf(parameters: Parametrization, q: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) for geometric distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with field:
            - p: float (success probability)
        q : NumericArray
            Probability from [0, 1]

        Returns
        -------
        NumericArray
            Quantiles as integers, never below 1

        Raises
        ------
        DomainError
            If probability is outside [0, 1], or equals 1 while p < 1
        """
        q = np.asarray(q, dtype=np.float64)
        if np.any((q < 0) | (q > 1) | np.isnan(q)):
            raise DomainError("Probability must be in [0, 1]")

        parameters = cast(_Probability, parameters)
        p = parameters.p
        if p == 1:
            return cast(NumericArray, np.ones_like(q, dtype=np.int64))
        if np.any(q == 1):
            raise DomainError("quantile(1) is unbounded for a geometric distribution with p < 1")

        trials = np.maximum(np.ceil(np.log1p(-q) / np.log1p(-p)), 1.0)
        # the log ratio may land one step off when q is exactly a CDF value
        previous = trials - 1
        overshoot = (previous >= 1) & (_distribution_function(p, previous) >= q)
        trials = np.where(overshoot, previous, trials)
        trials = np.where(_distribution_function(p, trials) < q, trials + 1, trials)
        return cast(NumericArray, trials.astype(np.int64))

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of geometric distribution."""
        parameters = cast(_Probability, parameters)
        return 1.0 / parameters.p

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of geometric distribution."""
        parameters = cast(_Probability, parameters)
        return (1 - parameters.p) / parameters.p**2

    def _support(parameters: Parametrization) -> IntegerDiscreteSupport:
        """Support of geometric distribution, a single point when p = 1"""
        parameters = cast(_Probability, parameters)
        return IntegerDiscreteSupport(1, 1) if parameters.p == 1 else _SUPPORT

    def _estimate(data: SampleLike) -> Parametrization:
        """Reciprocal of the sample mean."""
        sample_mean = mean(data)
        if sample_mean <= 0:
            raise DomainError(f"Geometric fit needs a positive sample mean, got {sample_mean}")
        return _Probability(p=1.0 / sample_mean)

    Geometric = ParametricFamily(
        name=FamilyName.GEOMETRIC,
        distr_type=UnivariateDiscrete,
        distr_parametrizations=["probability"],
        distr_characteristics={
            CharacteristicName.PMF: pmf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        support_by_parametrization=_support,
        data_estimator=_estimate,
    )
    Geometric.__doc__ = GEOMETRIC_DOC

    @parametrization(family=Geometric, name="probability")
    class _Probability(Parametrization):
        """
        Success-probability parametrization of geometric distribution.

        Parameters
        ----------
        p : float
            Probability of success in a single trial
        """

        p: float

        @constraint(description="0 < p <= 1")
        def check_p_in_half_open_unit(self) -> bool:
            """Check that p lies in (0, 1]."""
            return 0 < self.p <= 1

    ParametricFamilyRegister.register(Geometric)
