"""Debug mode: re-check barrier invariants after every accepted step.

The flag starts from the ``BARRIERLP_DEBUG`` environment variable and can be
changed at runtime. It is process-wide; solves running in other threads see
the change as well.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator

import numpy as np

from .core import assert_descent, assert_strictly_feasible

_DEBUG_ENV_VAR = "BARRIERLP_DEBUG"
_TRUTHY = frozenset({"1", "true", "yes", "on"})


def _flag_from_env() -> bool:
    return os.getenv(_DEBUG_ENV_VAR, "").strip().lower() in _TRUTHY


_debug_enabled = _flag_from_env()


def is_debug_enabled() -> bool:
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> bool:
    """Set the debug flag and return its previous value."""
    global _debug_enabled
    previous = _debug_enabled
    _debug_enabled = bool(enabled)
    return previous


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Temporarily set the debug flag, restoring it on exit.

    Example
    -------
    >>> with debug_context(True):
    ...     pass  # every accepted barrier step is re-checked here
    """
    previous = set_debug_enabled(enabled)
    try:
        yield
    finally:
        set_debug_enabled(previous)


def check_accepted_step(slacks: np.ndarray, before: float, after: float) -> None:
    """
    Verify one accepted step when debug mode is on.

    Args:
        slacks: ``A x - b`` at the accepted candidate.
        before: Barrier value at the previous iterate.
        after: Barrier value at the accepted candidate.

    Raises
    ------
    ValueError
        If debug mode is on and the candidate is not strictly feasible or
        the barrier value increased.
    """
    if not _debug_enabled:
        return
    assert_strictly_feasible(slacks)
    assert_descent(before, after)
