from backend.engine.gamesolver.solver import SearchNode, SearchStats, Solver

__all__ = ["SearchNode", "SearchStats", "Solver"]
