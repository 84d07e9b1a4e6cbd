"""
Tests for Normal Distribution Family

This module tests the functionality of the normal distribution family,
including parameterizations, characteristics, fitting and sampling.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy.stats import norm

from pysatl_stats.distributions.support import ContinuousSupport
from pysatl_stats.errors import DomainError, InsufficientDataError
from pysatl_stats.types import (
    CharacteristicName,
    ContinuousSupportShape1D,
    FamilyName,
    UnivariateContinuous,
)

from ..base import BaseDistributionTest


class TestNormalFamily(BaseDistributionTest):
    """Test suite for Normal distribution family."""

    def setup_method(self):
        """Setup before each test method."""
        self.normal_family = self.get_family(FamilyName.NORMAL)
        self.standard = self.normal_family(mu=0.0, var=1.0)
        self.normal_dist_example = self.normal_family(mu=2.0, var=2.25)

    def test_family_properties(self):
        """Test basic properties of normal family."""
        assert self.normal_family.name == FamilyName.NORMAL
        assert self.normal_family.distribution_type == UnivariateContinuous

        assert self.normal_family.parametrization_names == ["meanVar", "meanStd"]
        assert self.normal_family.base_parametrization_name == "meanVar"

    def test_mean_std_parametrization(self):
        """Test creation of distribution through standard deviation."""
        dist = self.normal_family("meanStd", mu=2.0, sigma=1.5)

        assert dist.parametrization_name == "meanStd"
        assert dist.parameters.parameters == {"mu": 2.0, "sigma": 1.5}
        assert dist.base_parameters.parameters == {"mu": 2.0, "var": 2.25}
        assert dist.cdf(3.0) == pytest.approx(self.normal_dist_example.cdf(3.0))

    @pytest.mark.parametrize(
        "parametrization_name, params, message",
        [
            ("meanVar", {"mu": 0.0, "var": 0.0}, "var > 0"),
            ("meanVar", {"mu": 0.0, "var": -1.0}, "var > 0"),
            ("meanStd", {"mu": 0.0, "sigma": -1.0}, "sigma > 0"),
        ],
    )
    def test_parametrization_constraints(self, parametrization_name, params, message):
        """Test parameter constraints validation."""
        with pytest.raises(DomainError, match=message):
            self.normal_family(parametrization_name, **params)

    def test_moments(self):
        """Test mean and variance."""
        assert self.normal_dist_example.mean() == 2.0
        assert self.normal_dist_example.var() == 2.25
        assert self.normal_dist_example.query_method(CharacteristicName.MEAN)(None) == 2.0

    def test_reference_values(self):
        """Test values of the standard normal distribution."""
        assert self.standard.cdf(0.0) == pytest.approx(0.5)
        assert self.standard.cdf(1.96) == pytest.approx(0.975, abs=1e-4)
        assert self.standard.pdf(0.0) == pytest.approx(0.3989423, abs=1e-7)

    @pytest.mark.parametrize("p", [0.0, 0.05, 0.5, 0.8, 0.9, 0.95, 1.0])
    def test_cdf_inverts_quantile(self, p):
        """Test that cdf(quantile(p)) returns p."""
        assert self.standard.cdf(self.standard.quantile(p)) == pytest.approx(p, abs=1e-9)

    def test_quantile_edges(self):
        """Test infinite quantiles at 0 and 1."""
        assert self.standard.quantile(0.0) == -math.inf
        assert self.standard.quantile(1.0) == math.inf

    @pytest.mark.parametrize("p", [-0.1, 1.5, math.nan])
    def test_quantile_outside_unit_interval(self, p):
        with pytest.raises(DomainError):
            self.standard.quantile(p)

    @pytest.mark.parametrize(
        "char_name, test_data, scipy_func",
        [
            (CharacteristicName.PDF, np.linspace(-4.0, 8.0, 25), norm.pdf),
            (CharacteristicName.CDF, np.linspace(-4.0, 8.0, 25), norm.cdf),
            (CharacteristicName.PPF, np.linspace(0.01, 0.99, 25), norm.ppf),
        ],
    )
    def test_characteristics_match_scipy(self, char_name, test_data, scipy_func):
        """Test characteristics against scipy.stats.norm."""
        actual = self.normal_dist_example.calculate_characteristic(char_name, test_data)
        expected = scipy_func(test_data, loc=2.0, scale=1.5)

        assert isinstance(actual, np.ndarray)
        self.assert_arrays_almost_equal(actual, expected, precision=1e-9)

    def test_scalar_input_gives_float(self):
        assert isinstance(self.standard.pdf(0.5), float)
        assert isinstance(self.standard.quantile(0.5), float)

    def test_support(self):
        support = self.standard.support
        assert isinstance(support, ContinuousSupport)
        assert support.shape == ContinuousSupportShape1D.REAL_LINE

    def test_fit(self):
        """Test method-of-moments fit."""
        data = [1.0, 2.0, 4.0, 7.0]
        dist = self.normal_family.fit(data)

        assert dist.parameters.mu == pytest.approx(3.5)
        assert dist.parameters.var == pytest.approx(np.var(data, ddof=1))

    @pytest.mark.parametrize("data", [[], [0.0]], ids=["empty", "single"])
    def test_fit_insufficient_data(self, data):
        with pytest.raises(InsufficientDataError):
            self.normal_family.fit(data)

    def test_random_is_reproducible(self):
        first = self.normal_dist_example.random(50, rng=123)
        second = self.normal_dist_example.random(50, rng=np.random.default_rng(123))

        np.testing.assert_array_equal(first, second)
        assert first.shape == (50,)
        assert first.dtype == np.float64

    def test_sample_moments(self):
        samples = self.normal_dist_example.sample(5_000, rng=7)

        assert samples.mean() == pytest.approx(2.0, abs=0.1)
        assert samples.var() == pytest.approx(2.25, abs=0.2)
