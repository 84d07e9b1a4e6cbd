"""
Tests for Binomial Distribution Family
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest
from scipy.stats import binom

from pysatl_stats.distributions.support import IntegerDiscreteSupport
from pysatl_stats.errors import DomainError
from pysatl_stats.types import CharacteristicName, FamilyName

from ..base import BaseDistributionTest


class TestBinomialFamily(BaseDistributionTest):
    """Test suite for Binomial distribution family."""

    def setup_method(self):
        self.binomial_family = self.get_family(FamilyName.BINOMIAL)
        self.binomial_dist_example = self.binomial_family(n=10, p=0.3)

    def test_family_properties(self):
        assert self.binomial_family.name == FamilyName.BINOMIAL
        assert self.binomial_family.parametrization_names == ["standard"]
        assert self.binomial_family.can_fit is False

    @pytest.mark.parametrize(
        "params, message",
        [
            ({"n": -1, "p": 0.5}, "n is a non-negative integer"),
            ({"n": 2.5, "p": 0.5}, "n is a non-negative integer"),
            ({"n": 4, "p": 1.5}, "0 <= p <= 1"),
        ],
    )
    def test_parametrization_constraints(self, params, message):
        with pytest.raises(DomainError, match=message):
            self.binomial_family(**params)

    def test_integral_float_trials_are_accepted(self):
        dist = self.binomial_family(n=4.0, p=0.5)
        assert dist.pmf(2) == pytest.approx(0.375)

    @pytest.mark.parametrize(
        "char_name, test_data, scipy_func",
        [
            (CharacteristicName.PMF, np.arange(-1, 12), binom.pmf),
            (CharacteristicName.CDF, np.linspace(-1.0, 11.0, 25), binom.cdf),
        ],
    )
    def test_characteristics_match_scipy(self, char_name, test_data, scipy_func):
        actual = self.binomial_dist_example.calculate_characteristic(char_name, test_data)
        self.assert_arrays_almost_equal(actual, scipy_func(test_data, 10, 0.3))

    def test_cdf_reaches_one_at_n(self):
        assert self.binomial_dist_example.cdf(10) == 1.0

    def test_quantile_matches_scipy(self):
        q = np.array([0.01, 0.1, 0.5, 0.85, 0.99])
        result = self.binomial_dist_example.quantile(q)

        assert result.dtype == np.int64
        np.testing.assert_array_equal(result, binom.ppf(q, 10, 0.3).astype(np.int64))

    def test_quantile_edges(self):
        assert self.binomial_dist_example.quantile(0.0) == 0
        assert self.binomial_dist_example.quantile(1.0) == 10

        with pytest.raises(DomainError):
            self.binomial_dist_example.quantile(1.5)

    def test_quantile_can_be_zero(self):
        # P(X = 0) = 0.7^10 ≈ 0.028
        assert self.binomial_dist_example.quantile(0.02) == 0

    def test_moments(self):
        assert self.binomial_dist_example.mean() == pytest.approx(3.0)
        assert self.binomial_dist_example.var() == pytest.approx(2.1)

    def test_support(self):
        assert self.binomial_dist_example.support == IntegerDiscreteSupport(0, 10)

    def test_degenerate_trials(self):
        dist = self.binomial_family(n=0, p=0.4)

        assert dist.pmf(0) == 1.0
        assert dist.quantile(0.5) == 0

    def test_random(self):
        samples = self.binomial_dist_example.random(400, rng=21)

        assert samples.dtype == np.int64
        assert np.all((samples >= 0) & (samples <= 10))
