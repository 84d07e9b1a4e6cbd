"""
Distribution Capability Protocols
=================================

Two small structural contracts describe what the sampling machinery needs
from a distribution:

- :class:`DiscreteDistribution` — ``quantile`` returns integers;
- :class:`ContinuousDistribution` — ``quantile`` returns reals.

Sampling itself lives in free functions
(:func:`~pysatl_stats.distributions.sampling.random_variate`,
:func:`~pysatl_stats.distributions.sampling.random_variates`), so any object
with a suitable ``quantile`` can be sampled without inheriting from a base
class.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import Protocol, runtime_checkable


@runtime_checkable
class DiscreteDistribution(Protocol):
    """Distribution whose quantile function produces integers."""

    def quantile(self, p: float) -> int: ...


@runtime_checkable
class ContinuousDistribution(Protocol):
    """Distribution whose quantile function produces reals."""

    def quantile(self, p: float) -> float: ...


type QuantileDistribution = DiscreteDistribution | ContinuousDistribution
"""Anything that can be sampled by inverse transform."""


__all__ = [
    "DiscreteDistribution",
    "ContinuousDistribution",
    "QuantileDistribution",
]
