from backend.models.board import Board, Direction
from backend.models.session import SessionSnapshot, SessionState

__all__ = ["Board", "Direction", "SessionSnapshot", "SessionState"]
