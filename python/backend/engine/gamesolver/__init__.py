from backend.engine.gamesolver.solver import SolveResult, SolveStatus, Solver

__all__ = ["SolveResult", "SolveStatus", "Solver"]
