"""Base class for linear programming backends."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import List, Optional

from .core import ResultStatus
from .model import Constraint, Objective, Variable


class Solver(ABC):
    """
    Contract shared by every linear programming backend.

    Callers build the model through ``make_num_var``/``make_constraint`` and
    ``objective()``, call ``solve()`` and read ``Variable.solution_value()``.
    Solvers are context managers; ``close()`` releases backend resources.
    """

    @abstractmethod
    def variables(self) -> List[Variable]:
        """Registered variables in creation order."""

    @abstractmethod
    def constraints(self) -> List[Constraint]:
        """Registered constraints in creation order."""

    @abstractmethod
    def objective(self) -> Objective:
        """The (mutable) objective of the model."""

    @abstractmethod
    def make_num_var(self, lb: float = 0.0, ub: float = math.inf, name: str = "") -> Variable:
        """Create and register a continuous variable."""

    @abstractmethod
    def make_constraint(
        self, lb: float = -math.inf, ub: float = math.inf, name: str = ""
    ) -> Constraint:
        """Create and register a constraint with no coefficients."""

    @abstractmethod
    def solve(self) -> ResultStatus:
        """Solve the model and write solution values onto the variables."""

    @abstractmethod
    def wall_time(self) -> float:
        """Seconds spent in the last ``solve()``."""

    @abstractmethod
    def iterations(self) -> int:
        """Iterations executed by the last ``solve()``."""

    @staticmethod
    def infinity() -> float:
        return math.inf

    def num_variables(self) -> int:
        return len(self.variables())

    def num_constraints(self) -> int:
        return len(self.constraints())

    def lookup_variable(self, name: str) -> Optional[Variable]:
        """First variable with the given name, or None."""
        return next((v for v in self.variables() if v.name() == name), None)

    def lookup_constraint(self, name: str) -> Optional[Constraint]:
        """First constraint with the given name, or None."""
        return next((c for c in self.constraints() if c.name() == name), None)

    def close(self) -> None:
        """Release backend resources. No-op by default."""

    def __enter__(self) -> "Solver":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


__all__ = ["Solver"]
