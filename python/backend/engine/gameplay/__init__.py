from backend.engine.gameplay.game import PuzzleSession

__all__ = ["PuzzleSession"]
