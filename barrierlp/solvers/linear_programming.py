"""
Dense log-barrier linear programming solver.

Example:
    >>> from barrierlp import LinearProgrammingSolver, ResultStatus
    >>> solver = LinearProgrammingSolver("example")
    >>> x = solver.make_num_var(0.0, 4.0, "x")
    >>> y = solver.make_num_var(0.0, solver.infinity(), "y")
    >>> demand = solver.make_constraint(2.0, solver.infinity(), "demand")
    >>> demand.set_coefficient(x, 1.0)
    >>> demand.set_coefficient(y, 1.0)
    >>> solver.objective().set_coefficient(x, 1.0)
    >>> solver.objective().set_coefficient(y, 3.0)
    >>> solver.objective().set_minimization()
    >>> solver.solve() is ResultStatus.OPTIMAL
    True
"""

from __future__ import annotations

import math
import os
import time
from concurrent.futures import ThreadPoolExecutor
from contextlib import nullcontext
from typing import List, Optional

from ..logging import get_logger, log_solve_summary
from .barrier import barrier_method, snap_to_zero
from .base import Solver
from .core import DEFAULT_PARAMETERS, ResultStatus, SolveReport
from .model import Constraint, Objective, Variable
from .system import build_canonical_system

logger = get_logger(__name__)


class LinearProgrammingSolver(Solver):
    """
    Bounded-variable LP solver backed by :func:`barrier_method`.

    ``solve()`` returns ``INFEASIBLE`` only for a model without variables or
    without constraints, or one whose bounds are all infinite so that no
    inequality row is emitted. Every other model yields ``OPTIMAL`` once the fixed
    iteration schedule finishes; the status is not a certificate of
    optimality or feasibility (see :meth:`last_report`).

    Args:
        name: Name used in log messages.
        parallel_gradient: Fan the gradient accumulation out over a thread
            pool created for the duration of each ``solve()``.
        max_workers: Pool size for the parallel gradient (defaults to the
            CPU count).
    """

    def __init__(
        self,
        name: str = "barrierlp",
        parallel_gradient: bool = False,
        max_workers: Optional[int] = None,
    ) -> None:
        if max_workers is not None and max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {max_workers}.")
        self.name = name
        self.parallel_gradient = parallel_gradient
        self.max_workers = max_workers or os.cpu_count() or 1
        self._params = DEFAULT_PARAMETERS
        self._variables: List[Variable] = []
        self._constraints: List[Constraint] = []
        self._objective = Objective()
        self._wall_time = 0.0
        self._iterations = 0
        self._report: Optional[SolveReport] = None

    def variables(self) -> List[Variable]:
        return self._variables

    def constraints(self) -> List[Constraint]:
        return self._constraints

    def objective(self) -> Objective:
        return self._objective

    def make_num_var(self, lb: float = 0.0, ub: float = math.inf, name: str = "") -> Variable:
        variable = Variable(name, lb, ub)
        self._variables.append(variable)
        return variable

    def make_constraint(
        self, lb: float = -math.inf, ub: float = math.inf, name: str = ""
    ) -> Constraint:
        constraint = Constraint(name, lb, ub)
        self._constraints.append(constraint)
        return constraint

    def solve(self) -> ResultStatus:
        start = time.perf_counter()

        if not self._variables or not self._constraints:
            return self._finish_empty(start, "empty_problem")

        system = build_canonical_system(self._variables, self._constraints, self._objective)
        logger.debug(
            "%s: canonical system has %d rows and %d columns",
            self.name,
            system.num_rows,
            system.num_cols,
        )
        # Free constraints and unbounded variables emit no rows.
        if system.num_rows == 0 or system.num_cols == 0:
            return self._finish_empty(start, "empty_system")

        if self.parallel_gradient:
            pool = ThreadPoolExecutor(max_workers=self.max_workers)
        else:
            pool = nullcontext()
        with pool as executor:
            result = barrier_method(
                system, self._params, executor=executor, blocks=self.max_workers
            )

        feasible = system.is_strictly_feasible(result.x)
        x = snap_to_zero(result.x, self._params.tol)
        for variable, value in zip(self._variables, x):
            variable._set_solution_value(value)

        self._iterations = result.iterations
        self._wall_time = time.perf_counter() - start
        self._report = SolveReport(
            status=ResultStatus.OPTIMAL,
            objective_value=self._objective.value(),
            x=x,
            iterations=result.iterations,
            outer_iterations=result.outer_iterations,
            barrier_parameter=result.t,
            grad_norm=result.grad_norm,
            wall_time=self._wall_time,
            termination=result.termination,
            feasible=feasible,
        )
        log_solve_summary(logger, self.name, self._report)
        return ResultStatus.OPTIMAL

    def _finish_empty(self, start: float, termination: str) -> ResultStatus:
        """Record an INFEASIBLE outcome without touching variable values."""
        self._iterations = 0
        self._wall_time = time.perf_counter() - start
        self._report = SolveReport(
            status=ResultStatus.INFEASIBLE,
            objective_value=None,
            x=None,
            iterations=0,
            outer_iterations=0,
            barrier_parameter=self._params.t0,
            grad_norm=float("inf"),
            wall_time=self._wall_time,
            termination=termination,
            feasible=False,
        )
        log_solve_summary(logger, self.name, self._report)
        return ResultStatus.INFEASIBLE

    def wall_time(self) -> float:
        return self._wall_time

    def iterations(self) -> int:
        return self._iterations

    def last_report(self) -> Optional[SolveReport]:
        """Diagnostics of the last ``solve()``, or None before the first call."""
        return self._report


__all__ = ["LinearProgrammingSolver"]
