from npuzzle.engine.gamesolver.solver import SearchNode, SearchStats, Solver, SolverState

__all__ = ["SearchNode", "SearchStats", "Solver", "SolverState"]
