"""
Error Taxonomy
==============

Exceptions raised by statistics routines and distribution families.

Both concrete errors derive from :class:`ValueError`, so callers that only
care about "bad input" can keep catching ``ValueError``.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


class StatsError(Exception):
    """Base class for all errors raised by PySATL Stats."""


class InsufficientDataError(StatsError, ValueError):
    """
    The sample is too small for the requested statistic.

    Parameters
    ----------
    statistic : str
        Name of the statistic or estimator that was requested.
    required : int
        Minimal number of points the statistic needs.
    actual : int
        Number of points that were supplied.
    """

    def __init__(self, statistic: str, required: int, actual: int) -> None:
        self.statistic = statistic
        self.required = required
        self.actual = actual
        super().__init__(
            f"{statistic} requires at least {required} data point(s), got {actual}"
        )


class DomainError(StatsError, ValueError):
    """An argument or parameter lies outside the valid mathematical domain."""


__all__ = [
    "StatsError",
    "InsufficientDataError",
    "DomainError",
]
