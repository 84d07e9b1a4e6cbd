"""
Concrete distribution instances with specific parameter values.

This module provides the implementation for individual distribution instances
created from parametric families.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import numpy as np

from pysatl_stats.distributions.sampling import random_variate
from pysatl_stats.types import CharacteristicName

if TYPE_CHECKING:
    from collections.abc import Mapping

    import numpy.typing as npt

    from pysatl_stats.distributions.computation import AnalyticalComputation
    from pysatl_stats.distributions.sampling import RandomSource, SamplingStrategy
    from pysatl_stats.distributions.support import Support
    from pysatl_stats.families.parametric_family import ParametricFamily
    from pysatl_stats.families.parametrizations import Parametrization
    from pysatl_stats.types import (
        EuclideanDistributionType,
        GenericCharacteristicName,
        Number,
        NumericArray,
    )


def _unwrap(value: Any) -> Any:
    """Turn NumPy scalars and 0-d arrays into plain Python numbers."""
    if isinstance(value, np.generic) or (isinstance(value, np.ndarray) and value.ndim == 0):
        return value.item()
    return value


@dataclass(frozen=True, slots=True)
class ParametricFamilyDistribution:
    """
    A specific distribution instance from a parametric family.

    Instances are immutable: characteristics are bound to the base
    parametrization once, at construction, and nothing is written afterwards.

    Parameters
    ----------
    family : ParametricFamily
        Family this distribution belongs to.
    parameters : Parametrization
        Parameter values, in the parametrization the user chose.
    distribution_type : EuclideanDistributionType
        Type of this distribution.
    support : Support or None
        Support of this distribution.
    """

    family: ParametricFamily = field(compare=False, repr=False)
    parameters: Parametrization
    distribution_type: EuclideanDistributionType
    support: Support | None
    _analytical: dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]] = field(
        init=False, repr=False, compare=False, hash=False
    )

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "_analytical", self.family.build_analytical_computations(self.parameters)
        )

    @property
    def family_name(self) -> str:
        """Name of the family this distribution belongs to."""
        return self.family.name

    @property
    def parametrization_name(self) -> str:
        """Name of the parametrization the distribution was created with."""
        return self.parameters.name

    @property
    def base_parameters(self) -> Parametrization:
        """Parameters converted to the base parametrization of the family."""
        return self.family.to_base(self.parameters)

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        """Characteristics bound to this distribution's parameters."""
        return self._analytical

    @property
    def sampling_strategy(self) -> SamplingStrategy:
        """Get the sampling strategy for this distribution."""
        return self.family.sampling_strategy

    def query_method(
        self, characteristic_name: GenericCharacteristicName
    ) -> AnalyticalComputation[Any, Any]:
        """
        Resolve the analytical callable for ``characteristic_name``.

        Raises
        ------
        RuntimeError
            If the family does not provide the characteristic (e.g. ``pmf`` of
            a continuous family).
        """
        try:
            return self._analytical[characteristic_name]
        except KeyError as exc:
            raise RuntimeError(
                f"Family {self.family_name} provides no analytical '{characteristic_name}'."
            ) from exc

    def calculate_characteristic(
        self, characteristic_name: GenericCharacteristicName, value: Any, **options: Any
    ) -> Any:
        """Evaluate a characteristic; scalar inputs give plain Python numbers."""
        return _unwrap(self.query_method(characteristic_name)(value, **options))

    def pmf(self, k: Number | NumericArray) -> Any:
        """Probability mass at ``k`` (discrete families)."""
        return self.calculate_characteristic(CharacteristicName.PMF, k)

    def pdf(self, x: Number | NumericArray) -> Any:
        """Probability density at ``x`` (continuous families)."""
        return self.calculate_characteristic(CharacteristicName.PDF, x)

    def cdf(self, x: Number | NumericArray) -> Any:
        """Probability ``P(X <= x)``."""
        return self.calculate_characteristic(CharacteristicName.CDF, x)

    def quantile(self, p: Number | NumericArray) -> Any:
        """
        Inverse CDF at probability ``p``.

        Raises
        ------
        DomainError
            If ``p`` lies outside ``[0, 1]``.
        """
        return self.calculate_characteristic(CharacteristicName.PPF, p)

    ppf = quantile

    def mean(self) -> float:
        """Expected value of the distribution."""
        return float(self.calculate_characteristic(CharacteristicName.MEAN, None))

    def var(self) -> float:
        """Variance of the distribution."""
        return float(self.calculate_characteristic(CharacteristicName.VAR, None))

    def sample(self, n: int, rng: RandomSource = None, **options: Any) -> npt.NDArray[Any]:
        """
        Generate ``n`` samples through the family's sampling strategy.

        Returns
        -------
        numpy.ndarray
            1D array of length ``n``.
        """
        return self.sampling_strategy.sample(n, distr=self, rng=rng, **options)

    def random(self, n: int | None = None, rng: RandomSource = None) -> Any:
        """
        Draw random variates.

        Parameters
        ----------
        n : int, optional
            Number of variates. ``None`` draws a single value.
        rng : RandomSource, optional
            ``None`` for the default generator, an integer seed, or a
            :class:`numpy.random.Generator`.

        Returns
        -------
        int, float or numpy.ndarray
            A single variate when ``n`` is ``None``, otherwise an array of
            ``n`` variates in draw order.
        """
        if n is None:
            return random_variate(self, rng=rng)
        return self.sample(n, rng=rng)


__all__ = [
    "ParametricFamilyDistribution",
]
