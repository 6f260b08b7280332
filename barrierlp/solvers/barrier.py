"""
Log-barrier interior-point method for the canonical system ``A x > b``.

The method starts from the all-ones point and minimizes the barrier
subproblem ``t * c^T x - sum(log(A x - b))`` by steepest descent with a
backtracking line search, doubling ``t`` after each block of inner steps
until ``m / t`` drops below the tolerance or the iteration ceiling is hit.

The iteration does not certify optimality: a block of inner steps is simply
abandoned when the iterate is not strictly feasible, the gradient vanishes
or the line search cannot make progress.
"""

from __future__ import annotations

from concurrent.futures import Executor
from dataclasses import dataclass
from typing import Optional

import numpy as np

from ..diagnostics import check_accepted_step
from ..logging import get_logger, log_outer_iteration
from .core import DEFAULT_PARAMETERS, BarrierParameters
from .functions import barrier_value_from_slacks, compute_gradient, compute_slacks, slacks_positive
from .line_search import backtracking_line_search
from .system import CanonicalSystem

logger = get_logger(__name__)


@dataclass
class BarrierResult:
    """Raw result of :func:`barrier_method` before zero-snapping."""

    x: np.ndarray
    iterations: int
    outer_iterations: int
    t: float
    grad_norm: float
    termination: str


def barrier_method(
    system: CanonicalSystem,
    params: BarrierParameters = DEFAULT_PARAMETERS,
    executor: Optional[Executor] = None,
    blocks: int = 1,
) -> BarrierResult:
    """
    Run the fixed-schedule barrier iteration on a non-empty system.

    Args:
        system: Canonical system with at least one row and one column.
        params: Numerical constants of the method.
        executor: Optional executor used to fan out the gradient.
        blocks: Number of column blocks when ``executor`` is given.

    Returns:
        BarrierResult holding the final iterate and iteration counters.
    """
    m, n = system.num_rows, system.num_cols
    if m == 0 or n == 0:
        raise ValueError("barrier_method requires at least one row and one column")

    x = np.ones(n)
    t = params.t0
    iterations = 0
    outer = 0
    grad_norm = float("inf")

    while iterations < params.max_iterations and m / t >= params.tol:
        for _ in range(params.inner_iterations):
            if iterations >= params.max_iterations:
                break
            iterations += 1

            slacks = compute_slacks(system, x)
            if not slacks_positive(slacks):
                break

            grad = compute_gradient(system, slacks, t, executor=executor, blocks=blocks)
            grad_norm = float(np.linalg.norm(grad))
            if grad_norm < params.tol:
                break

            current = barrier_value_from_slacks(system, x, slacks, t)
            search = backtracking_line_search(system, x, grad, t, params, current_value=current)
            if search.step < params.min_step:
                break

            check_accepted_step(search.slacks, current, search.value)
            x = search.candidate

        outer += 1
        log_outer_iteration(logger, outer, t, iterations, grad_norm)
        t *= params.mu

    termination = "iteration_limit" if iterations >= params.max_iterations else "gap_tolerance"
    return BarrierResult(
        x=x,
        iterations=iterations,
        outer_iterations=outer,
        t=t,
        grad_norm=grad_norm,
        termination=termination,
    )


def snap_to_zero(x: np.ndarray, tol: float) -> np.ndarray:
    """Return a copy of ``x`` with every ``|x_j| < tol`` set to exactly 0.0."""
    snapped = np.array(x, dtype=float, copy=True)
    snapped[np.abs(snapped) < tol] = 0.0
    return snapped


__all__ = ["BarrierResult", "barrier_method", "snap_to_zero"]
