"""
Sampling
========

Inverse transform sampling on top of a distribution's ``quantile``:
draw ``U ~ U[0, 1)`` and return ``quantile(U)``.

Random sources
--------------
Every function accepts ``rng``:

- ``None`` — the process-wide default :class:`numpy.random.Generator`;
- ``int`` — a fresh generator seeded with that value;
- :class:`numpy.random.Generator` — used as is; sequential draws consume its
  state in call order, so a fixed seed reproduces the same variates.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Any, Protocol

import numpy as np

from pysatl_stats.types import Kind

if TYPE_CHECKING:
    import numpy.typing as npt

    from pysatl_stats.distributions.distribution import QuantileDistribution

type RandomSource = np.random.Generator | int | None

_default_generator: np.random.Generator | None = None


def default_generator() -> np.random.Generator:
    """Return the process-wide default generator, creating it on first use."""
    global _default_generator
    if _default_generator is None:
        _default_generator = np.random.default_rng()
    return _default_generator


def resolve_random_source(rng: RandomSource = None) -> np.random.Generator:
    """
    Turn a :data:`RandomSource` into a :class:`numpy.random.Generator`.

    Raises
    ------
    TypeError
        If ``rng`` is neither ``None``, an integer seed nor a generator.
    """
    if rng is None:
        return default_generator()
    if isinstance(rng, np.random.Generator):
        return rng
    if isinstance(rng, (int, np.integer)) and not isinstance(rng, bool):
        return np.random.default_rng(int(rng))
    raise TypeError(f"Unsupported random source: {type(rng).__name__}")


def _is_discrete(distr: QuantileDistribution) -> bool:
    distribution_type = getattr(distr, "distribution_type", None)
    return getattr(distribution_type, "kind", None) == Kind.DISCRETE


def random_variate(distr: QuantileDistribution, rng: RandomSource = None) -> Any:
    """
    Draw a single variate from ``distr``.

    Parameters
    ----------
    distr : DiscreteDistribution or ContinuousDistribution
        Anything exposing ``quantile(p)``.
    rng : RandomSource, optional
        Random source, see module notes.

    Returns
    -------
    int or float
        ``distr.quantile(U)`` for ``U ~ U[0, 1)``.
    """
    u = float(resolve_random_source(rng).random())
    return distr.quantile(u)


def random_variates(
    distr: QuantileDistribution, n: int, rng: RandomSource = None
) -> npt.NDArray[Any]:
    """
    Draw ``n`` independent variates from ``distr``.

    Parameters
    ----------
    distr : DiscreteDistribution or ContinuousDistribution
        Anything exposing ``quantile(p)``.
    n : int
        Number of variates.
    rng : RandomSource, optional
        Random source, see module notes.

    Returns
    -------
    numpy.ndarray
        1D array of length ``n`` in draw order: ``int64`` for discrete
        distributions, ``float64`` for continuous ones.

    Raises
    ------
    ValueError
        If ``n`` is negative.
    """
    if n < 0:
        raise ValueError(f"Number of variates must be non-negative, got {n}.")

    generator = resolve_random_source(rng)
    U = generator.random(n)
    values = [distr.quantile(float(u)) for u in U]

    if _is_discrete(distr):
        return np.asarray(values, dtype=np.int64)
    distribution_type = getattr(distr, "distribution_type", None)
    if distribution_type is not None:
        return np.asarray(values, dtype=np.float64)
    return np.asarray(values)


class SamplingStrategy(Protocol):
    """Protocol for sampling strategies."""

    def sample(self, n: int, distr: QuantileDistribution, **options: Any) -> npt.NDArray[Any]: ...


class InverseTransformSamplingStrategy(SamplingStrategy):
    """
    Default univariate sampler using inverse transform sampling.

    Applies the distribution's ``quantile`` to i.i.d. uniforms
    ``U ~ U[0, 1)``.

    Returns
    -------
    numpy.ndarray
        A 1D sample of shape ``(n,)``.
    """

    def sample(
        self, n: int, distr: QuantileDistribution, rng: RandomSource = None, **options: Any
    ) -> npt.NDArray[Any]:
        return random_variates(distr, n, rng=rng)


__all__ = [
    "RandomSource",
    "default_generator",
    "resolve_random_source",
    "random_variate",
    "random_variates",
    "SamplingStrategy",
    "InverseTransformSamplingStrategy",
]
