"""
Log-normal distribution family implementation.

Contains the LogNormal family parameterized by the mean and the variance
(or standard deviation) of the underlying normal variable ``ln X``.
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
from pysatl_stats.stats.descriptive import log_array, mean, variance
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


def configure_lognormal_family() -> None:
    """
    Configure and register the LogNormal distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.LOGNORMAL):
        return

    LOGNORMAL_DOC = """
    Log-normal distribution.

    A positive random variable X is log-normal when ln X is normal with
    mean μ and variance σ². Parameters are those of ln X, not of X itself.

    Probability density function:
        f(x) = 1/(x√(2πσ²)) * exp(-(ln x - μ)²/(2σ²)) for x > 0

    Quantile function:
        Q(p) = exp(μ + √(2σ²) * erfinv(2p - 1))
    """

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Probability density function for log-normal distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - mu: float (mean of ln X)
            - var: float (variance of ln X)
        x : NumericArray
            Points at which to evaluate the probability density function

        Returns
        -------
        NumericArray
            Probability density values at points x, zero for x ≤ 0
        """
        parameters = cast(_LogMeanVar, parameters)
        x = np.asarray(x, dtype=np.float64)

        positive = x > 0
        safe_x = np.where(positive, x, 1.0)
        coefficient = 1.0 / (safe_x * np.sqrt(2 * np.pi * parameters.var))
        exponent = -((np.log(safe_x) - parameters.mu) ** 2) / (2 * parameters.var)

        return cast(NumericArray, np.where(positive, coefficient * np.exp(exponent), 0.0))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Cumulative distribution function for log-normal distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - mu: float (mean of ln X)
            - var: float (variance of ln X)
        x : NumericArray
            Points at which to evaluate the cumulative distribution function

        Returns
        -------
        NumericArray
            Probabilities P(X ≤ x) for each point x
        """
        parameters = cast(_LogMeanVar, parameters)
        x = np.asarray(x, dtype=np.float64)

        positive = x > 0
        safe_x = np.where(positive, x, 1.0)
        z = (np.log(safe_x) - parameters.mu) / np.sqrt(2 * parameters.var)

        return cast(NumericArray, np.where(positive, 0.5 * (1 + erf(z)), 0.0))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) for log-normal distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - mu: float (mean of ln X)
            - var: float (variance of ln X)
        p : NumericArray
            Probability from [0, 1]

        Returns
        -------
        NumericArray
            Quantiles corresponding to probabilities p
            If p[i] is 0 or 1, then the result[i] is 0 and inf correspondingly

        Raises
        ------
        DomainError
            If probability is outside [0, 1] or nan
        """
        p = np.asarray(p, dtype=np.float64)
        if np.any((p < 0) | (p > 1) | np.isnan(p)):
            raise DomainError("Probability must be in [0, 1]")

        parameters = cast(_LogMeanVar, parameters)
        log_quantile = parameters.mu + np.sqrt(2 * parameters.var) * erfinv(2 * p - 1)
        return cast(NumericArray, np.exp(log_quantile))

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of log-normal distribution."""
        parameters = cast(_LogMeanVar, parameters)
        return math.exp(parameters.mu + parameters.var / 2)

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of log-normal distribution."""
        parameters = cast(_LogMeanVar, parameters)
        return math.expm1(parameters.var) * math.exp(2 * parameters.mu + parameters.var)

    def _support(_: Parametrization) -> ContinuousSupport:
        """Support of log-normal distribution"""
        return ContinuousSupport(left=0.0, left_closed=False)

    def _estimate(data: SampleLike) -> Parametrization:
        """Mean and unbiased variance of the element-wise logarithm of the data."""
        logs = log_array(data)
        return _LogMeanVar(mu=mean(logs), var=variance(logs))

    LogNormal = ParametricFamily(
        name=FamilyName.LOGNORMAL,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["logMeanVar", "logMeanStd"],
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
    LogNormal.__doc__ = LOGNORMAL_DOC

    @parametrization(family=LogNormal, name="logMeanVar")
    class _LogMeanVar(Parametrization):
        """
        Log-mean / log-variance parametrization of log-normal distribution.

        Parameters
        ----------
        mu : float
            Mean of ln X
        var : float
            Variance of ln X
        """

        mu: float
        var: float

        @constraint(description="var > 0")
        def check_var_positive(self) -> bool:
            """Check that log-variance is positive."""
            return self.var > 0

    @parametrization(family=LogNormal, name="logMeanStd")
    class _LogMeanStd(Parametrization):
        """
        Log-mean / log-standard deviation parametrization of log-normal distribution.

        Parameters
        ----------
        mu : float
            Mean of ln X
        sigma : float
            Standard deviation of ln X
        """

        mu: float
        sigma: float

        @constraint(description="sigma > 0")
        def check_sigma_positive(self) -> bool:
            """Check that log-standard deviation is positive."""
            return self.sigma > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            """
            Transform to log-mean / log-variance parametrization.

            Returns
            -------
            Parametrization
                Log-mean / log-variance parametrization instance
            """
            return _LogMeanVar(mu=self.mu, var=self.sigma**2)

    ParametricFamilyRegister.register(LogNormal)
