"""
Built-in distribution families for PySATL Stats.

This package contains implementations of standard statistical distribution families
that are available by default in PySATL Stats.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_stats.families.builtins.continuous import (
    configure_exponential_family,
    configure_laplace_family,
    configure_lognormal_family,
    configure_normal_family,
    configure_uniform_family,
)
from pysatl_stats.families.builtins.discrete import (
    configure_bernoulli_family,
    configure_binomial_family,
    configure_geometric_family,
    configure_poisson_family,
)

__all__ = [
    "configure_bernoulli_family",
    "configure_binomial_family",
    "configure_geometric_family",
    "configure_poisson_family",
    "configure_exponential_family",
    "configure_laplace_family",
    "configure_lognormal_family",
    "configure_normal_family",
    "configure_uniform_family",
]
