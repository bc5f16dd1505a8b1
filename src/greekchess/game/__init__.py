"""Game orchestration layer."""

from greekchess.game.state import GameState

__all__ = ["GameState"]
