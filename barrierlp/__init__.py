"""barrierlp - a dense log-barrier solver for bounded-variable linear programs."""

__version__ = "0.1.0"

from .diagnostics import debug_context, is_debug_enabled, set_debug_enabled
from .logging import configure_logging, get_logger
from .solvers import (
    DEFAULT_PARAMETERS,
    BarrierParameters,
    CanonicalSystem,
    Constraint,
    LinearProgrammingSolver,
    Objective,
    ResultStatus,
    Solver,
    SolveReport,
    Variable,
    backtracking_line_search,
    barrier_method,
    build_canonical_system,
)

__all__ = [
    "__version__",
    # Solvers
    "Solver",
    "LinearProgrammingSolver",
    "ResultStatus",
    "SolveReport",
    "BarrierParameters",
    "DEFAULT_PARAMETERS",
    # Model
    "Variable",
    "Constraint",
    "Objective",
    "CanonicalSystem",
    "build_canonical_system",
    # Algorithms
    "barrier_method",
    "backtracking_line_search",
    # Diagnostics
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    # Logging
    "get_logger",
    "configure_logging",
]
