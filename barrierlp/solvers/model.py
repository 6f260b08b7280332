"""Problem model: variables, constraints and the objective.

Instances are created through a solver (``make_num_var``,
``make_constraint``, ``objective()``) and mutated by the caller until
``solve()`` is called. The solver never creates or destroys variables; it
only writes their solution values.
"""

from __future__ import annotations

import math
from typing import Dict, Optional


def _check_coefficient(variable: "Variable", coefficient: float) -> float:
    if not isinstance(variable, Variable):
        raise TypeError(f"Expected a Variable, got {type(variable).__name__}.")
    value = float(coefficient)
    if not math.isfinite(value):
        raise ValueError(
            f"Coefficient for variable '{variable.name()}' must be finite, got {coefficient}."
        )
    return value


class Variable:
    """A decision variable with independent lower and upper bounds."""

    __slots__ = ("_name", "_lb", "_ub", "_solution")

    def __init__(
        self,
        name: str = "",
        lb: float = 0.0,
        ub: float = math.inf,
    ) -> None:
        self._name = name
        self._lb = float(lb)
        self._ub = float(ub)
        self._solution = 0.0

    def name(self) -> str:
        return self._name

    def lb(self) -> float:
        return self._lb

    def ub(self) -> float:
        return self._ub

    def solution_value(self) -> float:
        """Value assigned by the last successful ``solve()`` (0.0 before)."""
        return self._solution

    def _set_solution_value(self, value: float) -> None:
        self._solution = float(value)

    def __repr__(self) -> str:
        return f"Variable({self._name!r}, lb={self._lb}, ub={self._ub})"


class Constraint:
    """
    Linear constraint ``lb <= sum(coef * var) <= ub``.

    Coefficients are sparse by omission: a variable that was never given a
    coefficient contributes 0.
    """

    def __init__(self, name: str = "", lb: float = -math.inf, ub: float = math.inf) -> None:
        self._name = name
        self._lb = float(lb)
        self._ub = float(ub)
        self._coefficients: Dict[Variable, float] = {}

    def name(self) -> str:
        return self._name

    def lb(self) -> float:
        return self._lb

    def ub(self) -> float:
        return self._ub

    def set_coefficient(self, variable: Variable, coefficient: float) -> None:
        """Set or overwrite the coefficient of ``variable``."""
        self._coefficients[variable] = _check_coefficient(variable, coefficient)

    def get_coefficient(self, variable: Variable) -> float:
        return self._coefficients.get(variable, 0.0)

    @property
    def coefficients(self) -> Dict[Variable, float]:
        return self._coefficients

    def __repr__(self) -> str:
        return (
            f"Constraint({self._name!r}, lb={self._lb}, ub={self._ub}, "
            f"terms={len(self._coefficients)})"
        )


class Objective:
    """Linear objective with a minimize/maximize flag (minimize by default)."""

    def __init__(
        self,
        coefficients: Optional[Dict[Variable, float]] = None,
        minimization: bool = True,
    ) -> None:
        self._coefficients: Dict[Variable, float] = dict(coefficients or {})
        self._minimization = bool(minimization)

    def set_coefficient(self, variable: Variable, coefficient: float) -> None:
        self._coefficients[variable] = _check_coefficient(variable, coefficient)

    def get_coefficient(self, variable: Variable) -> float:
        return self._coefficients.get(variable, 0.0)

    @property
    def coefficients(self) -> Dict[Variable, float]:
        return self._coefficients

    def clear(self) -> None:
        self._coefficients.clear()

    def set_minimization(self) -> None:
        self._minimization = True

    def set_maximization(self) -> None:
        self._minimization = False

    def minimization(self) -> bool:
        return self._minimization

    def maximization(self) -> bool:
        return not self._minimization

    def value(self) -> float:
        """Objective evaluated at the current solution values."""
        return float(
            sum(coef * var.solution_value() for var, coef in self._coefficients.items())
        )

    def __repr__(self) -> str:
        sense = "minimize" if self._minimization else "maximize"
        return f"Objective({sense}, terms={len(self._coefficients)})"


__all__ = ["Variable", "Constraint", "Objective"]
