"""
Distributions subpackage

Interfaces and default implementations for probability distributions used by
PySATL Stats:

- capability protocols (:mod:`.distribution`);
- analytical computations (:mod:`.computation`);
- discrete pmf conversions (:mod:`.fitters`);
- inverse transform sampling (:mod:`.sampling`);
- supports (:mod:`.support`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
from .computation import AnalyticalComputation
from .distribution import ContinuousDistribution, DiscreteDistribution, QuantileDistribution
from .fitters import pmf_to_cdf_1D, pmf_to_ppf_1D
from .sampling import (
    InverseTransformSamplingStrategy,
    RandomSource,
    SamplingStrategy,
    default_generator,
    random_variate,
    random_variates,
    resolve_random_source,
)
from .support import ContinuousSupport, IntegerDiscreteSupport, Support

__all__ = [
    # computation primitives
    "AnalyticalComputation",
    # capability protocols
    "DiscreteDistribution",
    "ContinuousDistribution",
    "QuantileDistribution",
    # discrete conversions
    "pmf_to_cdf_1D",
    "pmf_to_ppf_1D",
    # sampling
    "RandomSource",
    "default_generator",
    "resolve_random_source",
    "random_variate",
    "random_variates",
    "SamplingStrategy",
    "InverseTransformSamplingStrategy",
    # supports
    "Support",
    "ContinuousSupport",
    "IntegerDiscreteSupport",
]
