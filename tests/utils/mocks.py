from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass, field
from typing import Any

import numpy as np
import numpy.typing as npt

from pysatl_stats.distributions import QuantileDistribution, SamplingStrategy
from pysatl_stats.types import EuclideanDistributionType, UnivariateContinuous, UnivariateDiscrete


class MockSamplingStrategy(SamplingStrategy):
    def sample(self, n: int, distr: QuantileDistribution, **options: Any) -> npt.NDArray[Any]:
        return np.full(n, 0.5)


@dataclass(slots=True)
class StandaloneUniformQuantile:
    """
    Continuous distribution on [0, 1) known only through its quantile.

    Records every probability it was asked about.
    """

    distribution_type: EuclideanDistributionType = UnivariateContinuous
    calls: list[float] = field(default_factory=list)

    def quantile(self, p: float) -> float:
        self.calls.append(p)
        return p


@dataclass(slots=True)
class StandaloneCoinQuantile:
    """Fair coin with integer quantile, without any distribution_type metadata."""

    def quantile(self, p: float) -> int:
        return 0 if p < 0.5 else 1


@dataclass(slots=True)
class StandaloneDieQuantile:
    """Fair six-sided die declared as discrete."""

    distribution_type: EuclideanDistributionType = UnivariateDiscrete

    def quantile(self, p: float) -> int:
        return int(np.floor(6 * p)) + 1
