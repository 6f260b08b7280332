"""
Barrier objective, gradient and feasibility helpers.

For the canonical system ``A x > b`` with cost ``c`` the barrier subproblem at
scale ``t`` is

```
    f_t(x) = t * c^T x - sum_i log(a_i^T x - b_i)
    grad f_t(x) = t * c - sum_i a_i / (a_i^T x - b_i)
```

``f_t`` is defined as ``+inf`` outside the strict interior so that infeasible
candidates are rejected outright by the line search.
"""

from __future__ import annotations

from concurrent.futures import Executor
from typing import Optional

import numpy as np

from .system import CanonicalSystem


def compute_slacks(system: CanonicalSystem, x: np.ndarray) -> np.ndarray:
    """Return the slack vector ``A x - b``."""
    return system.A @ x - system.b


def slacks_positive(slacks: np.ndarray) -> bool:
    """True when every slack is strictly positive."""
    return bool(np.all(slacks > 0.0))


def barrier_value_from_slacks(
    system: CanonicalSystem, x: np.ndarray, slacks: np.ndarray, t: float
) -> float:
    """Barrier value when the slacks at ``x`` are already known."""
    if not slacks_positive(slacks):
        return float("inf")
    return float(t * np.dot(system.c, x) - np.sum(np.log(slacks)))


def barrier_value(system: CanonicalSystem, x: np.ndarray, t: float) -> float:
    """Evaluate ``t * c^T x - sum(log(A x - b))`` (``+inf`` if infeasible)."""
    return barrier_value_from_slacks(system, x, compute_slacks(system, x), t)


def _column_blocks(n: int, blocks: int) -> list[slice]:
    blocks = max(1, min(blocks, n))
    bounds = np.linspace(0, n, blocks + 1).astype(int)
    return [slice(int(lo), int(hi)) for lo, hi in zip(bounds[:-1], bounds[1:]) if hi > lo]


def compute_gradient(
    system: CanonicalSystem,
    slacks: np.ndarray,
    t: float,
    executor: Optional[Executor] = None,
    blocks: int = 1,
) -> np.ndarray:
    """
    Gradient of the barrier subproblem at the point whose slacks are given.

    With an ``executor`` the columns are split into ``blocks`` disjoint
    slices, each task filling its own slice of the gradient. The sequential
    and fanned-out paths agree up to floating-point summation order.
    """
    inv_slacks = -1.0 / slacks
    if executor is None or blocks <= 1:
        return t * system.c + system.A.T @ inv_slacks

    grad = np.empty(system.num_cols)

    def fill(cols: slice) -> None:
        grad[cols] = t * system.c[cols] + system.A[:, cols].T @ inv_slacks

    futures = [executor.submit(fill, cols) for cols in _column_blocks(system.num_cols, blocks)]
    for future in futures:
        future.result()
    return grad


__all__ = [
    "compute_slacks",
    "slacks_positive",
    "barrier_value",
    "barrier_value_from_slacks",
    "compute_gradient",
]
