"""
Laplace distribution family implementation.

Contains the Laplace (double exponential) family with location-scale
parameterization.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, cast

import numpy as np

from pysatl_stats.distributions.support import ContinuousSupport
from pysatl_stats.errors import DomainError
from pysatl_stats.families.parametric_family import ParametricFamily
from pysatl_stats.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_stats.families.registry import ParametricFamilyRegister
from pysatl_stats.stats.descriptive import mean, median
from pysatl_stats.types import (
    CharacteristicName,
    FamilyName,
    NumericArray,
    UnivariateContinuous,
)

if TYPE_CHECKING:
    from typing import Any

    from pysatl_stats.types import SampleLike


def configure_laplace_family() -> None:
    """
    Configure and register the Laplace distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.LAPLACE):
        return

    LAPLACE_DOC = """
    Laplace distribution.

    The Laplace (double exponential) distribution is a continuous distribution
    made of two exponential halves glued back to back at the location μ.
    The scale b > 0 controls the spread.

    Probability density function:
        f(x) = 1/(2b) * exp(-|x - μ| / b)

    Quantile function:
        Q(p) = μ + b * ln(2p)          for p ≤ 1/2
        Q(p) = μ - b * ln(2(1 - p))    for p > 1/2
    """

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Probability density function for Laplace distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - mu: float (location)
            - b: float (scale)
        x : NumericArray
            Points at which to evaluate the probability density function

        Returns
        -------
        NumericArray
            Probability density values at points x
        """
        parameters = cast(_LocScale, parameters)
        x = np.asarray(x, dtype=np.float64)

        b = parameters.b
        return cast(NumericArray, np.exp(-np.abs(x - parameters.mu) / b) / (2 * b))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Cumulative distribution function for Laplace distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - mu: float (location)
            - b: float (scale)
        x : NumericArray
            Points at which to evaluate the cumulative distribution function

        Returns
        -------
        NumericArray
            Probabilities P(X ≤ x) for each point x
        """
        parameters = cast(_LocScale, parameters)
        x = np.asarray(x, dtype=np.float64)

        # exp(-|z|) keeps both branches finite
        z = (x - parameters.mu) / parameters.b
        half_tail = 0.5 * np.exp(-np.abs(z))
        return cast(NumericArray, np.where(z < 0, half_tail, 1.0 - half_tail))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) for Laplace distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - mu: float (location)
            - b: float (scale)
        p : NumericArray
            Probability from [0, 1]

        Returns
        -------
        NumericArray
            Quantiles corresponding to probabilities p
            If p[i] is 0 or 1, then the result[i] is -inf and inf correspondingly

        Raises
        ------
        DomainError
            If probability is outside [0, 1] or nan
        """
        p = np.asarray(p, dtype=np.float64)
        if np.any((p < 0) | (p > 1) | np.isnan(p)):
            raise DomainError("Probability must be in [0, 1]")

        parameters = cast(_LocScale, parameters)
        mu, b = parameters.mu, parameters.b
        with np.errstate(divide="ignore"):
            lower = mu + b * np.log(2 * p)
            upper = mu - b * np.log(2 * (1 - p))
        return cast(NumericArray, np.where(p <= 0.5, lower, upper))

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of Laplace distribution."""
        parameters = cast(_LocScale, parameters)
        return parameters.mu

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of Laplace distribution."""
        parameters = cast(_LocScale, parameters)
        return 2 * parameters.b**2

    def _support(_: Parametrization) -> ContinuousSupport:
        """Support of Laplace distribution"""
        return ContinuousSupport()

    def _estimate(data: SampleLike) -> Parametrization:
        """Sample median as location, mean absolute deviation around it as scale."""
        mu = median(data)
        b = mean(np.abs(np.asarray(data, dtype=np.float64) - mu))
        return _LocScale(mu=mu, b=b)

    Laplace = ParametricFamily(
        name=FamilyName.LAPLACE,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["locScale"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        support_by_parametrization=_support,
        data_estimator=_estimate,
    )
    Laplace.__doc__ = LAPLACE_DOC

    @parametrization(family=Laplace, name="locScale")
    class _LocScale(Parametrization):
        """
        Location-scale parametrization of Laplace distribution.

        Parameters
        ----------
        mu : float
            Location (mean and median) of the distribution
        b : float
            Scale of the distribution
        """

        mu: float
        b: float

        @constraint(description="b > 0")
        def check_b_positive(self) -> bool:
            """Check that scale is positive."""
            return self.b > 0

    ParametricFamilyRegister.register(Laplace)
