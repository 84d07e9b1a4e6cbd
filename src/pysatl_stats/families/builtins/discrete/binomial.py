"""
Binomial distribution family implementation.

Contains the Binomial family parameterized by the number of trials and the
success probability.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from functools import partial
from numbers import Integral
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import gammaln, xlog1py, xlogy

from pysatl_stats.distributions.fitters import pmf_to_cdf_1D, pmf_to_ppf_1D
from pysatl_stats.distributions.support import IntegerDiscreteSupport
from pysatl_stats.errors import DomainError
from pysatl_stats.families.parametric_family import ParametricFamily
from pysatl_stats.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_stats.families.registry import ParametricFamilyRegister
from pysatl_stats.types import (
    CharacteristicName,
    FamilyName,
    NumericArray,
    UnivariateDiscrete,
)

if TYPE_CHECKING:
    from typing import Any


def configure_binomial_family() -> None:
    """
    Configure and register the Binomial distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.BINOMIAL):
        return

    BINOMIAL_DOC = """
    Binomial distribution.

    Number of successes in n independent Bernoulli(p) trials, supported on
    k = 0, 1, ..., n.

    Probability mass function:
        P(X = k) = C(n, k) * p^k * (1 - p)^(n - k)

    The CDF is a prefix sum of the pmf from 0 and the quantile is a linear
    cumulative-sum scan over 0..n.
    """

    def _support_of(parameters: _Standard) -> IntegerDiscreteSupport:
        return IntegerDiscreteSupport(0, int(parameters.n))

    def _mass(n: int, p: float, k: NumericArray) -> NumericArray:
        k = np.asarray(k, dtype=np.float64)
        on_support = np.asarray(IntegerDiscreteSupport(0, n).contains(k))
        safe_k = np.where(on_support, k, 0.0)
        log_mass = (
            gammaln(n + 1)
            - gammaln(safe_k + 1)
            - gammaln(n - safe_k + 1)
            + xlogy(safe_k, p)
            + xlog1py(n - safe_k, -p)
        )
        return cast(NumericArray, np.where(on_support, np.exp(log_mass), 0.0))

    def pmf(parameters: Parametrization, k: NumericArray) -> NumericArray:
        """
        Probability mass function for binomial distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - n: int (number of trials)
            - p: float (success probability)
        k : NumericArray
            Points at which to evaluate the probability mass function

        Returns
        -------
        NumericArray
            Probability mass at points k, zero outside 0..n
        """
        parameters = cast(_Standard, parameters)
        return _mass(int(parameters.n), parameters.p, k)

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Cumulative distribution function for binomial distribution."""
        parameters = cast(_Standard, parameters)
        mass = partial(_mass, int(parameters.n), parameters.p)
        return pmf_to_cdf_1D(mass, _support_of(parameters), x)

    def ppf(parameters: Parametrization, q: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) for binomial distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - n: int (number of trials)
            - p: float (success probability)
        q : NumericArray
            Probability from [0, 1]

        Returns
        -------
        NumericArray
            Smallest j in 0..n with cdf(j) >= q, as integers

        Raises
        ------
        DomainError
            If probability is outside [0, 1]
        """
        q = np.asarray(q, dtype=np.float64)
        if np.any((q < 0) | (q > 1)):
            raise DomainError("Probability must be in [0, 1]")

        parameters = cast(_Standard, parameters)
        mass = partial(_mass, int(parameters.n), parameters.p)
        search = partial(pmf_to_ppf_1D, mass, _support_of(parameters))
        if q.ndim == 0:
            return cast(NumericArray, search(float(q)))
        return cast(NumericArray, np.vectorize(search, otypes=[np.int64])(q))

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of binomial distribution."""
        parameters = cast(_Standard, parameters)
        return parameters.n * parameters.p

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of binomial distribution."""
        parameters = cast(_Standard, parameters)
        return parameters.n * parameters.p * (1 - parameters.p)

    def _support(parameters: Parametrization) -> IntegerDiscreteSupport:
        return _support_of(cast(_Standard, parameters))

    Binomial = ParametricFamily(
        name=FamilyName.BINOMIAL,
        distr_type=UnivariateDiscrete,
        distr_parametrizations=["standard"],
        distr_characteristics={
            CharacteristicName.PMF: pmf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        support_by_parametrization=_support,
    )
    Binomial.__doc__ = BINOMIAL_DOC

    @parametrization(family=Binomial, name="standard")
    class _Standard(Parametrization):
        """
        Trials-probability parametrization of binomial distribution.

        Parameters
        ----------
        n : int
            Number of trials
        p : float
            Probability of success in a single trial
        """

        n: int
        p: float

        @constraint(description="n is a non-negative integer")
        def check_n_non_negative_integer(self) -> bool:
            """Check that the number of trials is a whole number, at least 0."""
            is_whole = isinstance(self.n, Integral) or float(self.n).is_integer()
            return is_whole and self.n >= 0

        @constraint(description="0 <= p <= 1")
        def check_p_is_probability(self) -> bool:
            """Check that p is a probability."""
            return 0 <= self.p <= 1

    ParametricFamilyRegister.register(Binomial)
