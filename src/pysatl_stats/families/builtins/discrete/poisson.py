"""
Poisson distribution family implementation.

Contains the Poisson family parameterized by its rate.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from functools import partial
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import gammaln, xlogy

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

_SUPPORT = IntegerDiscreteSupport(0, None)


def configure_poisson_family() -> None:
    """
    Configure and register the Poisson distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.POISSON):
        return

    POISSON_DOC = """
    Poisson distribution.

    Number of events in a fixed interval when events occur independently at a
    constant average rate λ > 0.

    Probability mass function, evaluated in log space so that large k and λ
    neither overflow nor underflow:
        P(X = k) = exp(k ln λ - λ - ln Γ(k + 1)) for k = 0, 1, 2, ...

    The CDF is a prefix sum of the pmf and the quantile is a linear
    cumulative-sum scan from 0, so both cost O(value) per call.
    """

    def _mass(lambda_: float, k: NumericArray) -> NumericArray:
        k = np.asarray(k, dtype=np.float64)
        on_support = np.asarray(_SUPPORT.contains(k))
        safe_k = np.where(on_support, k, 0.0)
        log_mass = xlogy(safe_k, lambda_) - lambda_ - gammaln(safe_k + 1)
        return cast(NumericArray, np.where(on_support, np.exp(log_mass), 0.0))

    def pmf(parameters: Parametrization, k: NumericArray) -> NumericArray:
        """
        Probability mass function for Poisson distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with field:
            - lambda_: float (rate)
        k : NumericArray
            Points at which to evaluate the probability mass function

        Returns
        -------
        NumericArray
            Probability mass at points k, zero off the non-negative integers
        """
        parameters = cast(_Rate, parameters)
        return _mass(parameters.lambda_, k)

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Cumulative distribution function for Poisson distribution.

        Non-integer points are floored; the value is a prefix sum of the pmf.
        """
        parameters = cast(_Rate, parameters)
        return pmf_to_cdf_1D(partial(_mass, parameters.lambda_), _SUPPORT, x)

    def ppf(parameters: Parametrization, q: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) for Poisson distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with field:
            - lambda_: float (rate)
        q : NumericArray
            Probability from [0, 1]

        Returns
        -------
        NumericArray
            Smallest j with cdf(j) >= q, as integers

        Raises
        ------
        DomainError
            If probability is outside [0, 1], or equals 1 (unbounded support)
        """
        q = np.asarray(q, dtype=np.float64)
        if np.any((q < 0) | (q > 1)):
            raise DomainError("Probability must be in [0, 1]")

        parameters = cast(_Rate, parameters)
        search = partial(pmf_to_ppf_1D, partial(_mass, parameters.lambda_), _SUPPORT)
        if q.ndim == 0:
            return cast(NumericArray, search(float(q)))
        return cast(NumericArray, np.vectorize(search, otypes=[np.int64])(q))

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of Poisson distribution."""
        parameters = cast(_Rate, parameters)
        return parameters.lambda_

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of Poisson distribution."""
        parameters = cast(_Rate, parameters)
        return parameters.lambda_

    def _support(_: Parametrization) -> IntegerDiscreteSupport:
        return _SUPPORT

    def _estimate(data: SampleLike) -> Parametrization:
        return _Rate(lambda_=mean(data))

    Poisson = ParametricFamily(
        name=FamilyName.POISSON,
        distr_type=UnivariateDiscrete,
        distr_parametrizations=["rate"],
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
    Poisson.__doc__ = POISSON_DOC

    @parametrization(family=Poisson, name="rate")
    class _Rate(Parametrization):
        """
        Rate parametrization of Poisson distribution.

        Parameters
        ----------
        lambda_ : float
            Expected number of events (λ > 0)
        """

        lambda_: float

        @constraint(description="lambda > 0")
        def check_lambda_positive(self) -> bool:
            """Check that rate is positive."""
            return self.lambda_ > 0

    ParametricFamilyRegister.register(Poisson)
