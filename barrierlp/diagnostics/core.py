"""Invariant checks for barrier iterates."""

from __future__ import annotations

import numpy as np


def min_slack(slacks: np.ndarray) -> float:
    """Return the smallest slack, or ``+inf`` for an empty system."""
    if slacks.size == 0:
        return float("inf")
    return float(np.min(slacks))


def assert_strictly_feasible(slacks: np.ndarray) -> None:
    """
    Assert that every slack ``A x - b`` is strictly positive.

    Raises
    ------
    ValueError
        If any slack is zero, negative or NaN.
    """
    slacks = np.asarray(slacks, dtype=float)
    if not np.all(slacks > 0.0):
        raise ValueError(
            f"Iterate is not strictly feasible: min slack {min_slack(slacks):.3e}."
        )


def assert_descent(before: float, after: float, atol: float = 0.0) -> None:
    """
    Assert that an accepted step did not increase the barrier value.

    Raises
    ------
    ValueError
        If ``after`` exceeds ``before`` by more than ``atol``.
    """
    if not after <= before + atol:
        raise ValueError(
            f"Barrier value increased from {before:.12g} to {after:.12g}."
        )
