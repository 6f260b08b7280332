"""
Translation of a bounded model into the canonical strict inequality system.

Every finite bound becomes one row of ``A x > b``:

```
    lb_k <= a_k^T x        ->   a_k^T x   >  lb_k
    a_k^T x <= ub_k        ->  -a_k^T x   > -ub_k
    x_j <= ub_j            ->  -x_j       > -ub_j
```

Variable lower bounds are not emitted as rows. The barrier line search keeps
every coordinate above a small positive floor, so the implicit bound
``x >= 0`` is enforced by the iteration itself while other finite lower
bounds are ignored.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, List, Sequence

import numpy as np

from .model import Constraint, Objective, Variable


@dataclass
class CanonicalSystem:
    """Dense system ``A x > b`` with cost vector ``c`` (always minimized)."""

    A: np.ndarray
    b: np.ndarray
    c: np.ndarray

    @property
    def num_rows(self) -> int:
        return int(self.A.shape[0])

    @property
    def num_cols(self) -> int:
        return int(self.A.shape[1])

    def slacks(self, x: np.ndarray) -> np.ndarray:
        """Return ``A x - b``."""
        return self.A @ x - self.b

    def is_strictly_feasible(self, x: np.ndarray) -> bool:
        return bool(np.all(self.slacks(x) > 0.0))


def variable_indices(variables: Sequence[Variable]) -> Dict[Variable, int]:
    """Map each variable to its column, following registration order."""
    return {variable: idx for idx, variable in enumerate(variables)}


def _column(indices: Dict[Variable, int], variable: Variable, owner: str) -> int:
    try:
        return indices[variable]
    except KeyError:
        raise ValueError(
            f"{owner} references variable '{variable.name()}' that does not "
            "belong to this solver"
        ) from None


def _constraint_row(
    constraint: Constraint, indices: Dict[Variable, int], n: int, sign: float
) -> np.ndarray:
    row = np.zeros(n)
    for variable, coefficient in constraint.coefficients.items():
        row[_column(indices, variable, f"Constraint '{constraint.name()}'")] = sign * coefficient
    return row


def build_canonical_system(
    variables: Sequence[Variable],
    constraints: Sequence[Constraint],
    objective: Objective,
) -> CanonicalSystem:
    """
    Assemble ``(A, b, c)`` from the model.

    Rows are emitted per constraint in registration order (lower-bound row
    before upper-bound row), followed by one row per variable with a finite
    upper bound. Columns follow variable registration order, so repeated
    builds of an unmodified model are identical.
    """

    indices = variable_indices(variables)
    n = len(variables)
    rows: List[np.ndarray] = []
    rhs: List[float] = []

    for constraint in constraints:
        if math.isfinite(constraint.lb()):
            rows.append(_constraint_row(constraint, indices, n, 1.0))
            rhs.append(constraint.lb())
        if math.isfinite(constraint.ub()):
            rows.append(_constraint_row(constraint, indices, n, -1.0))
            rhs.append(-constraint.ub())

    for variable in variables:
        if math.isfinite(variable.ub()):
            row = np.zeros(n)
            row[indices[variable]] = -1.0
            rows.append(row)
            rhs.append(-variable.ub())

    sign = 1.0 if objective.minimization() else -1.0
    c = np.zeros(n)
    for variable, coefficient in objective.coefficients.items():
        c[_column(indices, variable, "Objective")] = sign * coefficient

    A = np.vstack(rows) if rows else np.zeros((0, n))
    b = np.asarray(rhs, dtype=float)
    return CanonicalSystem(A=A, b=b, c=c)


__all__ = ["CanonicalSystem", "build_canonical_system", "variable_indices"]
