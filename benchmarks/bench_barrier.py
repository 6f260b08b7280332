"""Benchmark the barrier solver with sequential and parallel gradients."""

import time
from typing import Dict

import numpy as np

from barrierlp import LinearProgrammingSolver


def build_random_cover(solver: LinearProgrammingSolver, n_rows: int, n_cols: int, seed: int = 0):
    """Random covering LP ``min sum(x)`` s.t. ``A x >= 1`` with positive ``A``."""
    rng = np.random.default_rng(seed)
    A = rng.uniform(0.1, 1.0, size=(n_rows, n_cols))
    variables = [solver.make_num_var(0.0, solver.infinity(), f"x{j}") for j in range(n_cols)]
    for i in range(n_rows):
        row = solver.make_constraint(1.0, solver.infinity(), f"r{i}")
        for j, variable in enumerate(variables):
            row.set_coefficient(variable, A[i, j])
    for variable in variables:
        solver.objective().set_coefficient(variable, 1.0)
    return variables


def benchmark_solve(
    n_rows: int,
    n_cols: int,
    parallel_gradient: bool = False,
    max_workers: int = 4,
) -> Dict[str, float]:
    """Time one full ``solve()``.

    Args:
        n_rows: Number of covering constraints.
        n_cols: Number of variables.
        parallel_gradient: Use the thread-pool gradient.
        max_workers: Pool size when ``parallel_gradient`` is set.

    Returns:
        Dictionary with timing results.
    """
    solver = LinearProgrammingSolver(
        "bench", parallel_gradient=parallel_gradient, max_workers=max_workers
    )
    build_random_cover(solver, n_rows, n_cols)

    start = time.perf_counter()
    solver.solve()
    end = time.perf_counter()

    total_time = end - start
    return {
        "n_rows": n_rows,
        "n_cols": n_cols,
        "iterations": solver.iterations(),
        "total_time_sec": total_time,
        "time_per_iteration_sec": total_time / max(solver.iterations(), 1),
        "objective": solver.objective().value(),
    }


if __name__ == "__main__":
    print("Benchmarking barrier solver...")

    for n_rows, n_cols in [(50, 200), (200, 2000)]:
        for parallel in (False, True):
            results = benchmark_solve(n_rows, n_cols, parallel_gradient=parallel)
            label = "parallel" if parallel else "sequential"
            print(f"{n_rows}x{n_cols} ({label}):")
            print(f"  Iterations: {results['iterations']}")
            print(f"  Time per iteration: {results['time_per_iteration_sec']*1e3:.3f} ms")
            print(f"  Objective: {results['objective']:.6f}")
