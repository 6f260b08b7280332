"""Diagnostics and debugging utilities for barrierlp."""

from .core import assert_descent, assert_strictly_feasible, min_slack
from .debug_mode import (
    check_accepted_step,
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "min_slack",
    "assert_strictly_feasible",
    "assert_descent",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    "check_accepted_step",
]
