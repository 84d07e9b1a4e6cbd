"""
Normal distribution family implementation.

Contains the Normal family with mean-variance and mean-standard deviation
parameterizations.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import erf

from pysatl_stats.distributions.support import ContinuousSupport
from pysatl_stats.errors import DomainError
from pysatl_stats.families.parametric_family import ParametricFamily
from pysatl_stats.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_stats.families.registry import ParametricFamilyRegister
from pysatl_stats.stats.descriptive import mean, variance
from pysatl_stats.stats.special import erfinv
from pysatl_stats.types import (
    CharacteristicName,
    FamilyName,
    NumericArray,
    UnivariateContinuous,
)

if TYPE_CHECKING:
    from typing import Any

    from pysatl_stats.types import SampleLike


def configure_normal_family() -> None:
    """
    Configure and register the Normal distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.NORMAL):
        return

    NORMAL_DOC = """
    Normal (Gaussian) distribution.

    The normal distribution is a continuous probability distribution characterized
    by its bell-shaped curve. It is symmetric about its mean and is defined by
    two parameters: mean (μ) and variance (σ²).

    Probability density function:
        f(x) = 1/√(2πσ²) * exp(-(x-μ)²/(2σ²))

    Quantiles are computed in closed form through the inverse error function:
        Q(p) = μ + √(2σ²) * erfinv(2p - 1)
    """

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Probability density function for normal distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - mu: float (mean)
            - var: float (variance)
        x : NumericArray
            Points at which to evaluate the probability density function

        Returns
        -------
        NumericArray
            Probability density values at points x
        """
        parameters = cast(_MeanVar, parameters)
        x = np.asarray(x, dtype=np.float64)

        coefficient = 1.0 / np.sqrt(2 * np.pi * parameters.var)
        exponent = -((x - parameters.mu) ** 2) / (2 * parameters.var)

        return cast(NumericArray, coefficient * np.exp(exponent))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Cumulative distribution function for normal distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - mu: float (mean)
            - var: float (variance)
        x : NumericArray
            Points at which to evaluate the cumulative distribution function

        Returns
        -------
        NumericArray
            Probabilities P(X ≤ x) for each point x
        """
        parameters = cast(_MeanVar, parameters)
        x = np.asarray(x, dtype=np.float64)

        z = (x - parameters.mu) / np.sqrt(2 * parameters.var)
        return cast(NumericArray, 0.5 * (1 + erf(z)))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) for normal distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - mu: float (mean)
            - var: float (variance)
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

        parameters = cast(_MeanVar, parameters)
        return cast(
            NumericArray,
            parameters.mu + np.sqrt(2 * parameters.var) * erfinv(2 * p - 1),
        )

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of normal distribution."""
        parameters = cast(_MeanVar, parameters)
        return parameters.mu

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of normal distribution."""
        parameters = cast(_MeanVar, parameters)
        return parameters.var

    def _support(_: Parametrization) -> ContinuousSupport:
        """Support of normal distribution"""
        return ContinuousSupport()

    def _estimate(data: SampleLike) -> Parametrization:
        """Sample mean and unbiased sample variance; needs at least two points."""
        sample_var = variance(data)
        return _MeanVar(mu=mean(data), var=sample_var)

    Normal = ParametricFamily(
        name=FamilyName.NORMAL,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["meanVar", "meanStd"],
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
    Normal.__doc__ = NORMAL_DOC

    @parametrization(family=Normal, name="meanVar")
    class _MeanVar(Parametrization):
        """
        Mean-variance parametrization of normal distribution.

        Parameters
        ----------
        mu : float
            Mean of the distribution
        var : float
            Variance of the distribution
        """

        mu: float
        var: float

        @constraint(description="var > 0")
        def check_var_positive(self) -> bool:
            """Check that variance is positive."""
            return self.var > 0

    @parametrization(family=Normal, name="meanStd")
    class _MeanStd(Parametrization):
        """
        Mean-standard deviation parametrization of normal distribution.

        Parameters
        ----------
        mu : float
            Mean of the distribution
        sigma : float
            Standard deviation of the distribution
        """

        mu: float
        sigma: float

        @constraint(description="sigma > 0")
        def check_sigma_positive(self) -> bool:
            """Check that standard deviation is positive."""
            return self.sigma > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            """
            Transform to mean-variance parametrization.

            Returns
            -------
            Parametrization
                Mean-variance parametrization instance
            """
            return _MeanVar(mu=self.mu, var=math.pow(self.sigma, 2))

    ParametricFamilyRegister.register(Normal)
