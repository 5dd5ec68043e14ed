"""Distribution planning services."""

from .exact_solver import SolverError, solve_exact
from .quick_solver import solve_quick
from .solver import InfeasibleProblemError, solve

__all__ = ["solve", "solve_exact", "solve_quick", "InfeasibleProblemError", "SolverError"]
