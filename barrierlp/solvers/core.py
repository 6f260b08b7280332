"""
Core status, parameter and result types for the barrier solver.

The canonical system handled by the solver is the strict inequality system
``A x > b`` together with a (sign-adjusted) cost vector ``c``; the barrier
method always minimizes ``t * c^T x - sum(log(A x - b))``.

References:
    - Boyd & Vandenberghe, *Convex Optimization* (2004), Chapter 11
    - Nocedal & Wright, *Numerical Optimization* (2006), Chapter 3
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

import numpy as np


class ResultStatus(Enum):
    """Solution status reported by :meth:`Solver.solve`."""

    OPTIMAL = "optimal"
    FEASIBLE = "feasible"
    INFEASIBLE = "infeasible"
    ABNORMAL = "abnormal"
    UNBOUNDED = "unbounded"


@dataclass(frozen=True)
class BarrierParameters:
    """
    Numerical constants of the log-barrier method.

    Attributes:
        t0: Initial barrier scale ``t``.
        mu: Growth factor applied to ``t`` after every outer iteration.
        tol: Convergence tolerance for ``m / t``, the gradient norm and the
            zero-snap of returned coordinates.
        max_iterations: Ceiling on the total number of inner steps.
        inner_iterations: Maximum inner steps per outer iteration.
        lower_bound_floor: Elementwise floor applied to line-search
            candidates so that every coordinate stays strictly positive.
        min_step: Smallest step the line search will try.
        armijo: Sufficient-decrease constant.
        backtrack: Step shrink factor of the line search.
    """

    t0: float = 1.0
    mu: float = 2.0
    tol: float = 1e-7
    max_iterations: int = 1000
    inner_iterations: int = 50
    lower_bound_floor: float = 1e-9
    min_step: float = 1e-12
    armijo: float = 0.25
    backtrack: float = 0.5

    def __post_init__(self) -> None:
        """Validate parameter ranges."""
        if self.t0 <= 0:
            raise ValueError(f"t0 must be positive, got {self.t0}.")
        if self.mu <= 1.0:
            raise ValueError(f"mu must be greater than 1, got {self.mu}.")
        if self.tol <= 0:
            raise ValueError(f"tol must be positive, got {self.tol}.")
        if self.max_iterations < 1:
            raise ValueError(f"max_iterations must be >= 1, got {self.max_iterations}.")
        if self.inner_iterations < 1:
            raise ValueError(f"inner_iterations must be >= 1, got {self.inner_iterations}.")
        if self.lower_bound_floor <= 0:
            raise ValueError(
                f"lower_bound_floor must be positive, got {self.lower_bound_floor}."
            )
        if not (0 < self.min_step < 1):
            raise ValueError(f"min_step must lie in (0, 1), got {self.min_step}.")
        if not (0 < self.armijo < 1):
            raise ValueError(f"armijo must lie in (0, 1), got {self.armijo}.")
        if not (0 < self.backtrack < 1):
            raise ValueError(f"backtrack must lie in (0, 1), got {self.backtrack}.")


DEFAULT_PARAMETERS = BarrierParameters()


@dataclass
class SolveReport:
    """
    Diagnostics for the most recent :meth:`Solver.solve` call.

    Attributes:
        status: Status returned by ``solve()``.
        objective_value: Objective at the reported solution, using the
            caller's coefficients (``None`` when no iterate was produced).
        x: Reported solution vector after zero-snapping.
        iterations: Total inner steps executed.
        outer_iterations: Number of barrier parameter updates.
        barrier_parameter: Final value of ``t``.
        grad_norm: Gradient norm at the last evaluated iterate.
        wall_time: Seconds spent inside ``solve()``.
        termination: ``"empty_problem"``, ``"gap_tolerance"`` or
            ``"iteration_limit"``.
        feasible: Whether the final iterate satisfies ``A x > b``.
    """

    status: ResultStatus
    objective_value: Optional[float]
    x: Optional[np.ndarray]
    iterations: int
    outer_iterations: int
    barrier_parameter: float
    grad_norm: float
    wall_time: float
    termination: str
    feasible: bool


__all__ = ["ResultStatus", "BarrierParameters", "DEFAULT_PARAMETERS", "SolveReport"]
