"""
Bernoulli distribution family implementation.

Contains the Bernoulli family parameterized by the success probability.
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


def configure_bernoulli_family() -> None:
    """
    Configure and register the Bernoulli distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.BERNOULLI):
        return

    BERNOULLI_DOC = """
    Bernoulli distribution.

    A single trial that succeeds (1) with probability p and fails (0)
    with probability 1 - p.

    Probability mass function:
        P(X = 1) = p,  P(X = 0) = 1 - p
    """

    def pmf(parameters: Parametrization, k: NumericArray) -> NumericArray:
        """
        Probability mass function for Bernoulli distribution.

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
            Probability mass at points k, zero outside {0, 1}
        """
        parameters = cast(_Probability, parameters)
        k = np.asarray(k, dtype=np.float64)

        p = parameters.p
        return cast(NumericArray, np.where(k == 1, p, np.where(k == 0, 1 - p, 0.0)))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Cumulative distribution function for Bernoulli distribution."""
        parameters = cast(_Probability, parameters)
        x = np.asarray(x, dtype=np.float64)

        step = np.where(x >= 1, 1.0, 1 - parameters.p)
        result = np.where(x < 0, 0.0, step)
        return cast(NumericArray, np.where(np.isnan(x), np.nan, result))

    def ppf(parameters: Parametrization, q: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) for Bernoulli distribution.

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
            0 where q < 1 - p, otherwise 1

        Raises
        ------
        DomainError
            If probability is outside [0, 1]
        """
        q = np.asarray(q, dtype=np.float64)
        if np.any((q < 0) | (q > 1) | np.isnan(q)):
            raise DomainError("Probability must be in [0, 1]")

        parameters = cast(_Probability, parameters)
        return cast(NumericArray, np.where(q < 1 - parameters.p, 0, 1).astype(np.int64))

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of Bernoulli distribution."""
        parameters = cast(_Probability, parameters)
        return parameters.p

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of Bernoulli distribution."""
        parameters = cast(_Probability, parameters)
        return parameters.p * (1 - parameters.p)

    def _support(_: Parametrization) -> IntegerDiscreteSupport:
        """Support of Bernoulli distribution"""
        return IntegerDiscreteSupport(0, 1)

    def _estimate(data: SampleLike) -> Parametrization:
        """Success frequency of 0/1 data."""
        return _Probability(p=mean(data))

    Bernoulli = ParametricFamily(
        name=FamilyName.BERNOULLI,
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
    Bernoulli.__doc__ = BERNOULLI_DOC

    @parametrization(family=Bernoulli, name="probability")
    class _Probability(Parametrization):
        """
        Success-probability parametrization of Bernoulli distribution.

        Parameters
        ----------
        p : float
            Probability of success
        """

        p: float

        @constraint(description="0 <= p <= 1")
        def check_p_is_probability(self) -> bool:
            """Check that p is a probability."""
            return 0 <= self.p <= 1

    ParametricFamilyRegister.register(Bernoulli)
