"""
Parametric family definitions and management infrastructure.

This module contains the main class for defining parametric families of
distributions: named parametrizations with constraints, analytical
characteristics, a sampling strategy and an optional method-of-moments
estimator used to fit the family to sample data.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from functools import partial
from typing import TYPE_CHECKING, dataclass_transform

from pysatl_stats.distributions.computation import AnalyticalComputation
from pysatl_stats.distributions.sampling import InverseTransformSamplingStrategy
from pysatl_stats.families.distribution import ParametricFamilyDistribution

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any

    from pysatl_stats.distributions.sampling import SamplingStrategy
    from pysatl_stats.distributions.support import Support
    from pysatl_stats.families.parametrizations import Parametrization
    from pysatl_stats.types import (
        EuclideanDistributionType,
        GenericCharacteristicName,
        Kind,
        ParametrizationName,
        SampleLike,
    )

    type ParametrizedFunction = Callable[..., Any]
    type SupportResolver = Callable[[Parametrization], Support | None]
    type DataEstimator = Callable[[SampleLike], Parametrization]

logger = logging.getLogger(__name__)


class ParametricFamily:
    """
    A family of distributions with multiple parametrizations.

    Represents a parametric family (e.g., Normal, Poisson) that can be
    parameterized in different ways. Characteristics are defined once, on the
    base parametrization; any other parametrization is converted to the base
    one before evaluation.

    Parameters
    ----------
    name : str
        Name of the distribution family.
    distr_type : EuclideanDistributionType
        Distribution type (kind and dimension) shared by all members.
    distr_parametrizations : list[ParametrizationName]
        Parametrization names; the first one is the base parametrization.
    distr_characteristics : dict[str, Callable]
        Mapping from characteristic names to functions
        ``(base_parameters, value, **options) -> result``.
    sampling_strategy : SamplingStrategy, optional
        Strategy for sampling; inverse transform sampling by default.
    support_by_parametrization : Callable, optional
        Function returning the support for given base parameters.
    data_estimator : Callable, optional
        Method-of-moments estimator ``(data) -> Parametrization``. Families
        without one cannot be fitted to data.
    """

    def __init__(
        self,
        name: str,
        distr_type: EuclideanDistributionType,
        distr_parametrizations: list[ParametrizationName],
        distr_characteristics: dict[GenericCharacteristicName, ParametrizedFunction],
        sampling_strategy: SamplingStrategy | None = None,
        support_by_parametrization: SupportResolver | None = None,
        data_estimator: DataEstimator | None = None,
    ):
        if not distr_parametrizations:
            raise ValueError("A family needs at least one parametrization name.")

        self._name = name
        self._distr_type = distr_type
        self._support_resolver: SupportResolver = (
            support_by_parametrization
            if support_by_parametrization is not None
            else (lambda _params: None)
        )
        self._data_estimator = data_estimator

        # Ordered names; the first one is the base parametrization name
        self.parametrization_names: list[ParametrizationName] = distr_parametrizations
        self.base_parametrization_name: ParametrizationName = distr_parametrizations[0]

        self._parametrizations: dict[ParametrizationName, type[Parametrization]] = {}

        self.sampling_strategy: SamplingStrategy = (
            InverseTransformSamplingStrategy() if sampling_strategy is None else sampling_strategy
        )
        self.distr_characteristics = dict(distr_characteristics)

    def __repr__(self) -> str:
        return f"ParametricFamily(name={self._name!r}, kind={self.kind.value!r})"

    @property
    def name(self) -> str:
        """Get the family name."""
        return self._name

    @property
    def distribution_type(self) -> EuclideanDistributionType:
        """Get the distribution type shared by the family members."""
        return self._distr_type

    @property
    def kind(self) -> Kind:
        """Discrete or continuous."""
        return self._distr_type.kind

    @property
    def parametrizations(self) -> dict[ParametrizationName, type[Parametrization]]:
        """Get mapping from parametrization names to classes."""
        return self._parametrizations

    @property
    def base(self) -> type[Parametrization]:
        """
        Get the base parametrization class.

        Raises
        ------
        ValueError
            If base parametrization is not registered.
        """
        try:
            return self._parametrizations[self.base_parametrization_name]
        except KeyError as exc:
            raise ValueError(
                f"Base parametrization '{self.base_parametrization_name}' is not registered."
            ) from exc

    @property
    def support_resolver(self) -> SupportResolver:
        """Get the support resolver function."""
        return self._support_resolver

    @property
    def can_fit(self) -> bool:
        """Whether the family has a data-fitting rule."""
        return self._data_estimator is not None

    def register_parametrization(
        self,
        name: ParametrizationName,
        parametrization_class: type[Parametrization],
    ) -> None:
        """
        Register a parametrization class.

        Raises
        ------
        ValueError
            If ``name`` is not declared for the family or already registered.
        """
        if name not in self.parametrization_names:
            raise ValueError(f"Parametrization '{name}' is not declared for family {self._name}.")
        if name in self._parametrizations:
            raise ValueError(f"Parametrization '{name}' is already registered.")
        self._parametrizations[name] = parametrization_class

    def get_parametrization(self, name: ParametrizationName) -> type[Parametrization]:
        """
        Fetch a parametrization class by name.

        Raises
        ------
        KeyError
            If name is not registered.
        """
        return self._parametrizations[name]

    def to_base(self, parameters: Parametrization) -> Parametrization:
        """Convert parameters to the base parametrization."""
        if parameters.name == self.base_parametrization_name:
            return parameters
        return parameters.transform_to_base_parametrization()

    def build_analytical_computations(
        self, parameters: Parametrization
    ) -> dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        """Bind every characteristic of the family to the base form of ``parameters``."""
        base_params = self.to_base(parameters)
        return {
            characteristic: AnalyticalComputation(
                target=characteristic, func=partial(func, base_params)
            )
            for characteristic, func in self.distr_characteristics.items()
        }

    def _make_distribution(self, parameters: Parametrization) -> ParametricFamilyDistribution:
        parameters.validate()
        base_parameters = self.to_base(parameters)
        if base_parameters is not parameters:
            base_parameters.validate()
        return ParametricFamilyDistribution(
            family=self,
            parameters=parameters,
            distribution_type=self._distr_type,
            support=self._support_resolver(base_parameters),
        )

    def distribution(
        self,
        parametrization_name: ParametrizationName | None = None,
        **parameters_values: Any,
    ) -> ParametricFamilyDistribution:
        """
        Create a distribution instance with given parameters.

        Parameters
        ----------
        parametrization_name : str, optional
            Name of parametrization to use (defaults to base).
        **parameters_values
            Parameter values for the distribution.

        Returns
        -------
        ParametricFamilyDistribution
            Distribution instance with specified parameters.

        Raises
        ------
        KeyError
            If parametrization name is not registered.
        TypeError
            If parameters are missing or unexpected.
        DomainError
            If parameters don't satisfy constraints.
        """
        if parametrization_name is None:
            parametrization_class = self.base
        else:
            parametrization_class = self._parametrizations[parametrization_name]

        return self._make_distribution(parametrization_class(**parameters_values))

    def fit(self, data: SampleLike) -> ParametricFamilyDistribution:
        """
        Fit the family to ``data`` by the method of moments.

        Raises
        ------
        NotImplementedError
            If the family has no data-fitting rule.
        InsufficientDataError
            If ``data`` is too small for the statistics the rule needs.
        DomainError
            If the estimated parameters fall outside the family's domain.
        """
        if self._data_estimator is None:
            raise NotImplementedError(f"Family {self._name} has no data-fitting rule.")

        parameters = self._data_estimator(data)
        logger.debug("Fitted %s to data: %s", self._name, parameters.parameters)
        return self._make_distribution(parameters)

    @dataclass_transform()
    def parametrization(
        self, *, name: ParametrizationName
    ) -> Callable[[type[Parametrization]], type[Parametrization]]:
        """
        Create a class decorator that registers a parametrization.

        Equivalent to :func:`pysatl_stats.families.parametrizations.parametrization`
        with ``family=self``.
        """
        from pysatl_stats.families.parametrizations import parametrization as _param_deco

        return _param_deco(family=self, name=name)

    __call__ = distribution


__all__ = [
    "ParametricFamily",
]
