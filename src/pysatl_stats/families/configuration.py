"""
Distribution Families Configuration
====================================

This module registers the built-in parametric families of PySATL Stats:

- discrete: Bernoulli, Binomial, Geometric, Poisson;
- continuous: Exponential, Laplace, LogNormal, Normal, ContinuousUniform.

Notes
-----
- All families are registered in the global ParametricFamilyRegister.
- Registration happens once; call :func:`reset_families_register` to start
  over (mostly useful in tests).
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from functools import lru_cache

from pysatl_stats.families.builtins import (
    configure_bernoulli_family,
    configure_binomial_family,
    configure_exponential_family,
    configure_geometric_family,
    configure_laplace_family,
    configure_lognormal_family,
    configure_normal_family,
    configure_poisson_family,
    configure_uniform_family,
)
from pysatl_stats.families.registry import ParametricFamilyRegister

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def configure_families_register() -> ParametricFamilyRegister:
    """
    Configure and register all built-in distribution families.

    Returns
    -------
    ParametricFamilyRegister
        The global registry of parametric families.
    """
    configure_bernoulli_family()
    configure_binomial_family()
    configure_geometric_family()
    configure_poisson_family()
    configure_exponential_family()
    configure_laplace_family()
    configure_lognormal_family()
    configure_normal_family()
    configure_uniform_family()
    logger.debug("Families register configured: %s", ", ".join(ParametricFamilyRegister.names()))
    return ParametricFamilyRegister()


def reset_families_register() -> None:
    """
    Reset the cached families registry.
    """
    configure_families_register.cache_clear()
    ParametricFamilyRegister._reset()


__all__ = [
    "configure_families_register",
    "reset_families_register",
]
