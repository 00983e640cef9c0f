from backend.engine.gameclock.clock import TickTimer

__all__ = ["TickTimer"]
