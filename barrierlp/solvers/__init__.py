"""
Dense log-barrier solver for bounded-variable linear programs.

The subpackage is split along the stages of a solve: the problem model
(:mod:`.model`), the translation into the strict inequality system
``A x > b`` (:mod:`.system`), the barrier objective and gradient
(:mod:`.functions`), the backtracking line search (:mod:`.line_search`), the
outer/inner barrier loop (:mod:`.barrier`) and the solver facade that writes
results back onto the model (:mod:`.linear_programming`).
"""

from . import barrier, base, core, functions, line_search, linear_programming, model, system
from .barrier import BarrierResult, barrier_method, snap_to_zero
from .base import Solver
from .core import DEFAULT_PARAMETERS, BarrierParameters, ResultStatus, SolveReport
from .functions import barrier_value, compute_gradient, compute_slacks
from .line_search import LineSearchResult, backtracking_line_search
from .linear_programming import LinearProgrammingSolver
from .model import Constraint, Objective, Variable
from .system import CanonicalSystem, build_canonical_system

__all__ = [
    "barrier",
    "base",
    "core",
    "functions",
    "line_search",
    "linear_programming",
    "model",
    "system",
    # Core types
    "ResultStatus",
    "BarrierParameters",
    "DEFAULT_PARAMETERS",
    "SolveReport",
    # Model
    "Variable",
    "Constraint",
    "Objective",
    "CanonicalSystem",
    "build_canonical_system",
    # Algorithms
    "barrier_value",
    "compute_slacks",
    "compute_gradient",
    "LineSearchResult",
    "backtracking_line_search",
    "BarrierResult",
    "barrier_method",
    "snap_to_zero",
    # Solvers
    "Solver",
    "LinearProgrammingSolver",
]
