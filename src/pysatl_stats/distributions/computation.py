"""
Computation Primitives
======================

:class:`AnalyticalComputation` binds a family characteristic (``pmf``, ``pdf``,
``cdf``, ``ppf``, ``mean``, ``var``) to concrete parameter values and exposes
it as a plain callable.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from pysatl_stats.types import GenericCharacteristicName


@dataclass(frozen=True, slots=True)
class AnalyticalComputation[In, Out]:
    """Analytical computation provided directly by the distribution.

    Parameters
    ----------
    target : str
        Characteristic name (e.g., ``"pdf"``).
    func : Callable[..., Out]
        Analytical callable.

    Notes
    -----
    Characteristics of the built-in families accept both scalars and
    array-likes.
    """

    target: GenericCharacteristicName
    func: Callable[..., Out]

    def __call__(self, data: In, **options: Any) -> Out:
        """Evaluate the analytical function."""
        return self.func(data, **options)


__all__ = [
    "AnalyticalComputation",
]
