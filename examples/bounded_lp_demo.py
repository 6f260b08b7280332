"""
Example: Production planning with the log-barrier LP solver.

A workshop makes tables and chairs. Each table earns 30 and each chair 20;
a table takes 4 hours of carpentry and 1 of finishing, a chair 2 and 1.
Carpentry has 80 hours, finishing 30, and at most 18 tables fit in the
warehouse. The exact optimum is 10 tables and 20 chairs (profit 700).
"""

from barrierlp import LinearProgrammingSolver, ResultStatus, configure_logging


def example_production_planning():
    """Maximize profit subject to capacity limits."""
    print("=" * 60)
    print("Production planning (maximization)")
    print("=" * 60)

    with LinearProgrammingSolver("workshop") as solver:
        tables = solver.make_num_var(0.0, 18.0, "tables")
        chairs = solver.make_num_var(0.0, solver.infinity(), "chairs")

        carpentry = solver.make_constraint(-solver.infinity(), 80.0, "carpentry")
        carpentry.set_coefficient(tables, 4.0)
        carpentry.set_coefficient(chairs, 2.0)

        finishing = solver.make_constraint(-solver.infinity(), 30.0, "finishing")
        finishing.set_coefficient(tables, 1.0)
        finishing.set_coefficient(chairs, 1.0)

        objective = solver.objective()
        objective.set_coefficient(tables, 30.0)
        objective.set_coefficient(chairs, 20.0)
        objective.set_maximization()

        status = solver.solve()
        print(f"Status: {status.name}")
        if status == ResultStatus.OPTIMAL:
            for variable in solver.variables():
                print(f"  {variable.name()} = {variable.solution_value():.4f}")
            print(f"Objective: {objective.value():.4f}")
            print(f"Iterations: {solver.iterations()}")
            print(f"Wall time: {solver.wall_time() * 1000:.2f} ms")
    print()


def example_empty_model():
    """A model without constraints is reported as infeasible."""
    print("=" * 60)
    print("Empty model")
    print("=" * 60)

    solver = LinearProgrammingSolver("empty")
    solver.make_num_var(0.0, 1.0, "x")
    print(f"Status: {solver.solve().name}")
    print()


if __name__ == "__main__":
    configure_logging("INFO")
    example_production_planning()
    example_empty_model()
