from sudokit.solver.solver import SolveResult, Solver, SolveStats

__all__ = [
    "SolveResult",
    "SolveStats",
    "Solver",
]
