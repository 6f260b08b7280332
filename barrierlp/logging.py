"""Logging for barrierlp.

All modules log through children of the ``barrierlp`` package logger. Only
the package logger owns a handler (stderr, ``[LEVEL] name: message``) and it
does not propagate to the root logger, so applications that configure
logging themselves see no duplicate records. The starting level is read from
``BARRIERLP_LOG_LEVEL`` and defaults to WARNING.

Solver progress is written through :func:`log_outer_iteration` and
:func:`log_solve_summary`, which fix the wording of the per-iteration DEBUG
records and the per-solve INFO/WARNING records.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import IO, TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .solvers.core import SolveReport

PACKAGE_LOGGER = "barrierlp"

_LEVEL_ENV_VAR = "BARRIERLP_LOG_LEVEL"
_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def _coerce_level(level: int | str) -> int:
    if isinstance(level, str):
        resolved = logging.getLevelName(level.strip().upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level {level!r}.")
        return resolved
    return int(level)


def _level_from_env() -> int:
    try:
        return _coerce_level(os.getenv(_LEVEL_ENV_VAR, "WARNING"))
    except ValueError:
        return logging.WARNING


def _package_logger() -> logging.Logger:
    logger = logging.getLogger(PACKAGE_LOGGER)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(_level_from_env())
        logger.propagate = False
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the ``barrierlp`` logger or one of its children.

    Args:
        name: Usually ``__name__``. Names outside the package are placed
            under ``barrierlp.``; None returns the package logger.

    Example:
        >>> from barrierlp.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.debug("canonical system built")
    """
    package = _package_logger()
    if name is None or name == PACKAGE_LOGGER:
        return package
    if not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)


def configure_logging(
    level: int | str = logging.WARNING,
    format_string: Optional[str] = None,
    stream: Optional[IO[str]] = None,
) -> None:
    """Replace the package handler and set the package level.

    Args:
        level: Level name or number; INFO shows one line per solve, DEBUG
            adds one line per outer barrier iteration.
        format_string: Record format (default ``[LEVEL] name: message``).
        stream: Output stream (default: sys.stderr).

    Raises:
        ValueError: If ``level`` is an unknown level name.

    Example:
        >>> from barrierlp.logging import configure_logging
        >>> configure_logging("INFO")
    """
    level = _coerce_level(level)
    logger = _package_logger()
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(format_string or _FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)


def log_outer_iteration(
    logger: logging.Logger, outer: int, t: float, iterations: int, grad_norm: float
) -> None:
    """Emit the DEBUG record closing one outer barrier iteration."""
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "outer %d: t=%.3e iterations=%d grad_norm=%.3e", outer, t, iterations, grad_norm
        )


def log_solve_summary(logger: logging.Logger, name: str, report: "SolveReport") -> None:
    """Emit the records closing one ``solve()``.

    An INFEASIBLE report is logged as a WARNING naming its termination
    reason. Otherwise a WARNING precedes the INFO summary when the final
    iterate is not strictly feasible.
    """
    if report.x is None:
        logger.warning(
            "%s: nothing to optimize (%s); reporting %s",
            name,
            report.termination,
            report.status.name,
        )
        return
    if not report.feasible:
        logger.warning(
            "%s: final iterate violates the strict inequality system; "
            "status is %s by convention",
            name,
            report.status.name,
        )
    logger.info(
        "%s: solved in %d iterations (%.4fs), objective %.6g",
        name,
        report.iterations,
        report.wall_time,
        report.objective_value,
    )


__all__ = [
    "configure_logging",
    "get_logger",
    "log_outer_iteration",
    "log_solve_summary",
]
