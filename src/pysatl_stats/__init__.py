"""
PySATL Stats
============

Closed-form statistics for PySATL: descriptive statistics, the inverse error
function, discrete and continuous parametric distribution families with
inverse transform sampling, and Gaussian kernel density estimation.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from importlib.metadata import version

from .distributions import *
from .distributions import __all__ as _distr_all
from .errors import *
from .errors import __all__ as _errors_all
from .families import *
from .families import __all__ as _family_all
from .stats import *
from .stats import __all__ as _stats_all
from .types import *
from .types import __all__ as _types_all

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = version("pysatl-stats")
__all__ = [
    "__version__",
    *_distr_all,
    *_errors_all,
    *_family_all,
    *_stats_all,
    *_types_all,
]

del _distr_all
del _errors_all
del _family_all
del _stats_all
del _types_all
