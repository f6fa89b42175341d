from backend.engine.movegen.generator import MoveGenerator

__all__ = ["MoveGenerator"]
