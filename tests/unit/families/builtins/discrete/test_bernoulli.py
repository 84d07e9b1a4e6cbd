"""
Tests for Bernoulli Distribution Family
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy.stats import bernoulli

from pysatl_stats.distributions.support import IntegerDiscreteSupport
from pysatl_stats.errors import DomainError, InsufficientDataError
from pysatl_stats.types import CharacteristicName, FamilyName, UnivariateDiscrete

from ..base import BaseDistributionTest


class TestBernoulliFamily(BaseDistributionTest):
    """Test suite for Bernoulli distribution family."""

    def setup_method(self):
        self.bernoulli_family = self.get_family(FamilyName.BERNOULLI)
        self.bernoulli_dist_example = self.bernoulli_family(p=0.7)

    def test_family_properties(self):
        assert self.bernoulli_family.name == FamilyName.BERNOULLI
        assert self.bernoulli_family.distribution_type == UnivariateDiscrete
        assert self.bernoulli_family.parametrization_names == ["probability"]

    @pytest.mark.parametrize("p", [-0.1, 1.5])
    def test_probability_constraint(self, p):
        with pytest.raises(DomainError, match="0 <= p <= 1"):
            self.bernoulli_family(p=p)

    @pytest.mark.parametrize("p", [0.0, 1.0])
    def test_degenerate_probabilities_are_allowed(self, p):
        dist = self.bernoulli_family(p=p)
        assert dist.pmf(1) == p

    def test_reference_values(self):
        dist = self.bernoulli_dist_example

        assert dist.pmf(1) == pytest.approx(0.7)
        assert dist.pmf(0) == pytest.approx(0.3)
        assert dist.pmf(2) == 0.0
        assert dist.cdf(1) == 1.0
        assert dist.quantile(0.5) == 1
        assert dist.quantile(0.2) == 0

    def test_cdf_steps(self):
        x = np.array([-1.0, 0.0, 0.5, 1.0, 3.0])
        expected = np.array([0.0, 0.3, 0.3, 1.0, 1.0])
        self.assert_arrays_almost_equal(self.bernoulli_dist_example.cdf(x), expected)
        assert math.isnan(self.bernoulli_dist_example.cdf(math.nan))

    def test_quantile_types(self):
        assert isinstance(self.bernoulli_dist_example.quantile(0.9), int)

        result = self.bernoulli_dist_example.quantile(np.array([0.0, 0.1, 0.35, 1.0]))
        assert result.dtype == np.int64
        np.testing.assert_array_equal(result, [0, 0, 1, 1])

    @pytest.mark.parametrize("q", [-0.1, 1.1, math.nan])
    def test_quantile_outside_unit_interval(self, q):
        with pytest.raises(DomainError):
            self.bernoulli_dist_example.quantile(q)

    def test_moments(self):
        assert self.bernoulli_dist_example.mean() == pytest.approx(0.7)
        assert self.bernoulli_dist_example.var() == pytest.approx(0.21)

    @pytest.mark.parametrize(
        "char_name, test_data, scipy_func",
        [
            (CharacteristicName.PMF, np.arange(-1, 3), bernoulli.pmf),
            (CharacteristicName.CDF, np.arange(-1, 3), bernoulli.cdf),
        ],
    )
    def test_characteristics_match_scipy(self, char_name, test_data, scipy_func):
        actual = self.bernoulli_dist_example.calculate_characteristic(char_name, test_data)
        self.assert_arrays_almost_equal(actual, scipy_func(test_data, 0.7))

    def test_support(self):
        assert self.bernoulli_dist_example.support == IntegerDiscreteSupport(0, 1)

    def test_fit(self):
        dist = self.bernoulli_family.fit([1, 1, 0, 1])
        assert dist.parameters.p == 0.75

    def test_fit_empty(self):
        with pytest.raises(InsufficientDataError):
            self.bernoulli_family.fit([])

    def test_random(self):
        samples = self.bernoulli_dist_example.random(2_000, rng=5)

        assert samples.dtype == np.int64
        assert set(np.unique(samples).tolist()) == {0, 1}
        assert samples.mean() == pytest.approx(0.7, abs=0.05)
        assert self.bernoulli_dist_example.random(rng=5) in (0, 1)
