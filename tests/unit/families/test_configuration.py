from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import pytest

from pysatl_stats.families import (
    ParametricFamilyRegister,
    configure_families_register,
    reset_families_register,
)
from pysatl_stats.types import FamilyName, Kind


class TestFamiliesConfiguration:
    def test_all_builtin_families_are_registered(self) -> None:
        configure_families_register()
        assert set(ParametricFamilyRegister.names()) == {name.value for name in FamilyName}

    @pytest.mark.parametrize(
        "name, kind",
        [
            (FamilyName.BERNOULLI, Kind.DISCRETE),
            (FamilyName.BINOMIAL, Kind.DISCRETE),
            (FamilyName.GEOMETRIC, Kind.DISCRETE),
            (FamilyName.POISSON, Kind.DISCRETE),
            (FamilyName.EXPONENTIAL, Kind.CONTINUOUS),
            (FamilyName.LAPLACE, Kind.CONTINUOUS),
            (FamilyName.LOGNORMAL, Kind.CONTINUOUS),
            (FamilyName.NORMAL, Kind.CONTINUOUS),
            (FamilyName.CONTINUOUS_UNIFORM, Kind.CONTINUOUS),
        ],
    )
    def test_family_kinds(self, name, kind) -> None:
        configure_families_register()
        assert ParametricFamilyRegister.get(name).kind is kind

    def test_configuration_is_cached(self) -> None:
        first = configure_families_register()
        second = configure_families_register()

        assert first is second
        assert first is ParametricFamilyRegister()

    def test_reset_drops_registered_families(self) -> None:
        configure_families_register()
        normal = ParametricFamilyRegister.get(FamilyName.NORMAL)

        reset_families_register()
        assert ParametricFamilyRegister.names() == []

        configure_families_register()
        assert ParametricFamilyRegister.get(FamilyName.NORMAL) is not normal

    def test_unknown_family(self) -> None:
        configure_families_register()
        with pytest.raises(ValueError, match="No family"):
            ParametricFamilyRegister.get("Cauchy")
