"""
Statistics subpackage

Closed-form statistical helpers used across PySATL Stats:

- descriptive statistics and combinatorics (:mod:`.descriptive`);
- the error function and its inverse (:mod:`.special`);
- Gaussian kernel density estimation (:mod:`.kde`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
from .descriptive import (
    choose,
    factorial,
    log_array,
    lsr,
    mean,
    median,
    pvariance,
    sd,
    variance,
)
from .kde import KernelDensityEstimation, silverman_bandwidth
from .special import erf, erfinv

__all__ = [
    # descriptive
    "mean",
    "variance",
    "pvariance",
    "sd",
    "median",
    "factorial",
    "choose",
    "log_array",
    "lsr",
    # special functions
    "erf",
    "erfinv",
    # density estimation
    "KernelDensityEstimation",
    "silverman_bandwidth",
]
