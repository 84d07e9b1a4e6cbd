from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy.special import gamma

from pysatl_stats.errors import DomainError, InsufficientDataError
from pysatl_stats.stats.descriptive import (
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


class TestLocationAndSpread:
    def test_mean(self) -> None:
        assert mean([1, 2, 3]) == 2.0
        assert mean(np.array([0.5, 1.5])) == 1.0

    def test_variance_is_unbiased(self) -> None:
        assert variance([1, 2, 3, 4, 5]) == 2.5

    def test_pvariance_divides_by_n(self) -> None:
        assert pvariance([1, 2, 3, 4, 5]) == 2.0
        assert pvariance([7]) == 0.0

    def test_sd(self) -> None:
        assert sd([1, 2, 3, 4, 5]) == pytest.approx(math.sqrt(2.5))

    @pytest.mark.parametrize(
        "data, expected",
        [
            ([1, 2, 3, 4], 2.5),
            ([3, 1, 2], 2.0),
            ([5], 5.0),
            ([4.0, -1.0], 1.5),
        ],
        ids=["even", "odd_unsorted", "single", "two_points"],
    )
    def test_median(self, data, expected) -> None:
        assert median(data) == expected

    def test_median_does_not_mutate_input(self) -> None:
        data = np.array([3.0, 1.0, 2.0])
        median(data)
        np.testing.assert_array_equal(data, [3.0, 1.0, 2.0])

    @pytest.mark.parametrize(
        "func, data, required",
        [
            (mean, [], 1),
            (median, [], 1),
            (pvariance, [], 1),
            (variance, [1], 2),
            (sd, [1], 2),
        ],
        ids=["mean", "median", "pvariance", "variance", "sd"],
    )
    def test_insufficient_data(self, func, data, required) -> None:
        with pytest.raises(InsufficientDataError) as excinfo:
            func(data)
        assert excinfo.value.required == required
        assert excinfo.value.actual == len(data)

    def test_insufficient_data_is_a_value_error(self) -> None:
        with pytest.raises(ValueError):
            variance([1])

    def test_two_dimensional_sample_is_rejected(self) -> None:
        with pytest.raises(ValueError, match="one-dimensional"):
            mean([[1, 2], [3, 4]])


class TestCombinatorics:
    @pytest.mark.parametrize("n, expected", [(0, 1), (1, 1), (5, 120), (10, 3628800)])
    def test_integer_factorial_is_exact(self, n, expected) -> None:
        result = factorial(n)
        assert result == expected
        assert isinstance(result, int)

    def test_float_factorial_uses_gamma(self) -> None:
        assert factorial(4.0) == pytest.approx(24.0)
        assert isinstance(factorial(4.0), float)
        assert factorial(0.5) == pytest.approx(gamma(1.5))

    def test_negative_factorial(self) -> None:
        with pytest.raises(DomainError):
            factorial(-1)

    def test_choose_integers(self) -> None:
        assert choose(5, 2) == 10
        assert isinstance(choose(5, 2), int)
        assert choose(20, 10) == math.comb(20, 10)

    def test_choose_generalized(self) -> None:
        assert choose(4.5, 2) == pytest.approx(4.5 * 3.5 / 2)


class TestHelpers:
    def test_log_array_keeps_length_and_order(self) -> None:
        data = [1.0, 2.0, 3.0]
        result = log_array(data)
        assert result.shape == (3,)
        for value, logged in zip(data, result, strict=True):
            assert logged == pytest.approx(math.log(value))

    @pytest.mark.parametrize("data", [[0.0], [1.0, -2.0]])
    def test_log_array_non_positive(self, data) -> None:
        with pytest.raises(DomainError):
            log_array(data)

    def test_lsr(self) -> None:
        points = [[60.0, 3.1], [61.0, 3.6], [62.0, 3.8], [63.0, 4.0], [65.0, 4.1]]
        a, b = lsr(points)
        assert a == pytest.approx(-7.963513513, abs=1e-8)
        assert b == pytest.approx(0.187837837, abs=1e-8)

    def test_lsr_exact_line(self) -> None:
        a, b = lsr([[0, 1], [1, 3], [2, 5]])
        assert a == pytest.approx(1.0)
        assert b == pytest.approx(2.0)

    def test_lsr_identical_x_is_not_an_error(self) -> None:
        a, b = lsr([[1.0, 2.0], [1.0, 3.0]])
        assert not math.isfinite(b)
        assert not math.isfinite(a)

    def test_lsr_empty(self) -> None:
        with pytest.raises(InsufficientDataError):
            lsr([])
