"""Backtracking line search along the steepest-descent direction."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np

from .core import DEFAULT_PARAMETERS, BarrierParameters
from .functions import barrier_value, barrier_value_from_slacks, compute_slacks, slacks_positive
from .system import CanonicalSystem


@dataclass
class LineSearchResult:
    """Outcome of one line search.

    ``step`` is 0.0 when no acceptable step was found, in which case
    ``candidate`` is the unchanged starting point and ``slacks`` is None.
    ``evaluations`` counts the candidates tried.
    """

    step: float
    candidate: np.ndarray
    value: float
    evaluations: int
    slacks: Optional[np.ndarray] = None


def projected_candidate(
    x: np.ndarray, grad: np.ndarray, step: float, floor: float
) -> np.ndarray:
    """Return ``max(x - step * grad, floor)`` elementwise."""
    return np.maximum(x - step * grad, floor)


def backtracking_line_search(
    system: CanonicalSystem,
    x: np.ndarray,
    grad: np.ndarray,
    t: float,
    params: BarrierParameters = DEFAULT_PARAMETERS,
    current_value: Optional[float] = None,
) -> LineSearchResult:
    """
    Armijo backtracking from ``x`` along ``-grad``.

    A step is accepted when the floored candidate is strictly feasible and

        f(candidate) <= f(x) - armijo * step * grad^T (x - candidate).

    Because ``x`` never drops below the floor, ``grad^T (x - candidate)`` is
    non-negative, so every accepted step is a descent step. The decrease
    term is subtracted, not added: with ``+`` an accepted step could raise
    the barrier value by up to ``armijo * step * grad^T (x - candidate)``.
    The step is halved until it falls below ``params.min_step``.
    """
    fx = barrier_value(system, x, t) if current_value is None else current_value
    step = 1.0
    evaluations = 0
    while step >= params.min_step:
        candidate = projected_candidate(x, grad, step, params.lower_bound_floor)
        slacks = compute_slacks(system, candidate)
        evaluations += 1
        if slacks_positive(slacks):
            value = barrier_value_from_slacks(system, candidate, slacks, t)
            decrease = float(np.dot(grad, x - candidate))
            if value <= fx - params.armijo * step * decrease:
                return LineSearchResult(
                    step=step,
                    candidate=candidate,
                    value=value,
                    evaluations=evaluations,
                    slacks=slacks,
                )
        step *= params.backtrack
    return LineSearchResult(step=0.0, candidate=x, value=fx, evaluations=evaluations)


__all__ = ["LineSearchResult", "backtracking_line_search", "projected_candidate"]
