"""
Parametrizations of distribution families.

A parametrization is a frozen dataclass holding the parameter values of one
named way to describe a family (e.g. Normal by mean/variance or by
mean/standard deviation). Domain restrictions are declared with
:func:`constraint` and enforced by :meth:`Parametrization.validate`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from abc import ABC
from dataclasses import dataclass, fields, is_dataclass
from inspect import isfunction
from typing import TYPE_CHECKING

from pysatl_stats.errors import DomainError
from pysatl_stats.types import ParametrizationName

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any, ClassVar

    from pysatl_stats.families.parametric_family import ParametricFamily

_CONSTRAINT_MARK = "__is_constraint"
_CONSTRAINT_DESCRIPTION = "__constraint_description"


@dataclass(slots=True, frozen=True)
class ParametrizationConstraint:
    """
    Constraint on parameter values for a parametrization.

    Parameters
    ----------
    description : str
        Human-readable description of the constraint, e.g. ``"0 <= p <= 1"``.
    check : Callable[[Any], bool]
        Predicate that returns True if the constraint is satisfied.
    """

    description: str
    check: Callable[[Any], bool]


class Parametrization(ABC):
    """
    Abstract base class for distribution parametrizations.

    Subclasses are turned into frozen dataclasses by :func:`parametrization`,
    which also attaches the owning family and the parametrization name.
    """

    __family__: ClassVar[ParametricFamily]
    __param_name__: ClassVar[ParametrizationName]

    _constraints: ClassVar[list[ParametrizationConstraint]] = []

    @property
    def name(self) -> ParametrizationName:
        """Name of this parametrization within its family."""
        return self.__class__.__param_name__

    @property
    def parameters(self) -> dict[str, Any]:
        """Parameter values keyed by field name."""
        if is_dataclass(self):
            return {f.name: getattr(self, f.name) for f in fields(self)}
        ann = getattr(self, "__annotations__", {})
        return {k: getattr(self, k) for k in ann}

    @property
    def constraints(self) -> list[ParametrizationConstraint]:
        """Constraints declared on this parametrization."""
        return self._constraints

    def validate(self) -> None:
        """
        Check every declared constraint.

        Raises
        ------
        DomainError
            Naming all constraints that do not hold.
        """
        violated = [c.description for c in self._constraints if not c.check(self)]
        if violated:
            listed = ", ".join(f'"{d}"' for d in violated)
            raise DomainError(
                f"Constraint {listed} does not hold for {type(self).__name__}{self.parameters}"
            )

    def transform_to_base_parametrization(self) -> Parametrization:
        """
        Convert to the base parametrization of the family.

        The default implementation returns ``self``; alternative
        parametrizations override it.
        """
        return self


def constraint[F: Callable[..., bool]](description: str) -> Callable[[F], F]:
    """
    Mark an instance method as a parameter constraint.

    Parameters
    ----------
    description : str
        Human-readable description used in error messages.

    Notes
    -----
    The method must be a predicate ``(self) -> bool``. It is returned
    unchanged apart from two marker attributes.
    """

    def decorator(func: F) -> F:
        setattr(func, _CONSTRAINT_MARK, True)
        setattr(func, _CONSTRAINT_DESCRIPTION, description)
        return func

    return decorator


def _collect_constraints(cls: type[Parametrization]) -> list[ParametrizationConstraint]:
    """Collect methods marked with :func:`constraint`, rejecting static/class methods."""
    collected: list[ParametrizationConstraint] = []
    for attr_name, attr in cls.__dict__.items():
        if isinstance(attr, (staticmethod, classmethod)):
            inner = attr.__func__
            if getattr(inner, _CONSTRAINT_MARK, False):
                raise TypeError(f"@constraint '{attr_name}' must be an instance method")
            continue
        if isfunction(attr) and getattr(attr, _CONSTRAINT_MARK, False):
            description = getattr(attr, _CONSTRAINT_DESCRIPTION, attr_name)
            collected.append(ParametrizationConstraint(description=description, check=attr))
    return collected


def parametrization(
    *,
    family: ParametricFamily,
    name: ParametrizationName,
) -> Callable[[type[Parametrization]], type[Parametrization]]:
    """
    Class decorator registering a parametrization with ``family``.

    The class is converted to a frozen, slotted dataclass when needed, its
    constraints are collected, and it is registered under ``name``.
    """

    def decorator(cls: type[Parametrization]) -> type[Parametrization]:
        if not is_dataclass(cls):
            cls = dataclass(slots=True, frozen=True)(cls)

        cls.__family__ = family
        cls.__param_name__ = name
        cls._constraints = _collect_constraints(cls)

        family.register_parametrization(name, cls)
        return cls

    return decorator


__all__ = [
    "ParametrizationConstraint",
    "Parametrization",
    "constraint",
    "parametrization",
]
