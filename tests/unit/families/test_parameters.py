from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import FrozenInstanceError
from typing import Any

import pytest

from pysatl_stats.errors import DomainError
from pysatl_stats.families import (
    ParametricFamily,
    Parametrization,
    ParametrizationConstraint,
    constraint,
    parametrization,
)
from pysatl_stats.types import UnivariateContinuous
from tests.unit.families.test_basic import TestBaseFamily


class TestParametrizationAPI(TestBaseFamily):
    def test_constraint_is_a_simple_holder(self) -> None:
        def is_positive(obj: object) -> bool:
            return getattr(obj, "value", 0) > 0

        c = ParametrizationConstraint(description="Value must be positive", check=is_positive)
        assert c.description == "Value must be positive"
        assert c.check is is_positive

    def test_constraint_decorator_marks_function(self) -> None:
        @constraint("Value must be positive")
        def check_positive(self: Any) -> bool:
            return getattr(self, "value", 0) > 0

        assert getattr(check_positive, "__is_constraint", False) is True
        assert getattr(check_positive, "__constraint_description", None) == "Value must be positive"

    def test_free_function_parametrization_decorator(self) -> None:
        family = ParametricFamily(
            name="FreeDecoratorFamily",
            distr_type=UnivariateContinuous,
            distr_parametrizations=["kind"],
            distr_characteristics={},
        )

        @parametrization(family=family, name="kind")
        class Kind(Parametrization):
            value: float

        obj = Kind(value=1.25)  # type: ignore[call-arg]
        assert obj.name == "kind"
        assert obj.parameters == {"value": 1.25}
        assert getattr(Kind, "__family__", None) is family
        assert getattr(Kind, "__param_name__", None) == "kind"
        assert hasattr(Kind, "__dataclass_fields__")
        assert family.base is Kind

    def test_parametrization_is_frozen(self) -> None:
        family = self.make_default_family()
        params = family.parametrizations["base"](width=1.0)  # type: ignore[call-arg]

        with pytest.raises(FrozenInstanceError):
            params.width = 2.0  # type: ignore[misc]

    def test_validate_lists_violated_constraints(self) -> None:
        family = ParametricFamily(
            name="TwoConstraints",
            distr_type=UnivariateContinuous,
            distr_parametrizations=["base"],
            distr_characteristics={},
        )

        @family.parametrization(name="base")
        class Base(Parametrization):
            a: float
            b: float

            @constraint("a > 0")
            def check_a(self) -> bool:
                return self.a > 0

            @constraint("b > 0")
            def check_b(self) -> bool:
                return self.b > 0

        valid = Base(a=1.0, b=1.0)  # type: ignore[call-arg]
        assert [c.description for c in valid.constraints] == ["a > 0", "b > 0"]
        valid.validate()

        with pytest.raises(DomainError, match='"a > 0", "b > 0"'):
            Base(a=-1.0, b=0.0).validate()  # type: ignore[call-arg]

    def test_static_constraint_is_rejected(self) -> None:
        family = ParametricFamily(
            name="StaticConstraint",
            distr_type=UnivariateContinuous,
            distr_parametrizations=["base"],
            distr_characteristics={},
        )

        with pytest.raises(TypeError, match="instance method"):

            @family.parametrization(name="base")
            class Base(Parametrization):
                value: float

                @staticmethod
                @constraint("always")
                def check() -> bool:
                    return True

    def test_undeclared_name_is_rejected(self) -> None:
        family = self.make_default_family()

        with pytest.raises(ValueError, match="not declared"):

            @family.parametrization(name="unknown")
            class Unknown(Parametrization):
                value: float

    def test_duplicate_registration_is_rejected(self) -> None:
        family = self.make_default_family()

        with pytest.raises(ValueError, match="already registered"):

            @family.parametrization(name="base")
            class Again(Parametrization):
                width: float

    # ---------- Family-level conversion to base ----------

    def test_get_base_parameters_uses_family_logic(self) -> None:
        family = self.make_default_family()

        BaseCls = family.parametrizations["base"]
        HalfCls = family.parametrizations["half"]

        base_params = BaseCls(width=5.0)  # type: ignore[call-arg]
        assert family.to_base(base_params) is base_params

        half_params = HalfCls(half_width=3.0)  # type: ignore[call-arg]
        base_from_half = family.to_base(half_params)
        assert isinstance(base_from_half, BaseCls)
        assert base_from_half.width == 6.0  # type: ignore[attr-defined]
