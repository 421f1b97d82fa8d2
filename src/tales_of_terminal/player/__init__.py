from .state import PlayerState, VisitedCells

__all__ = ["PlayerState", "VisitedCells"]
