"""Game orchestration."""

from unoengine.orchestration.game_runner import GameResult, GameRunner, SeatAgent
from unoengine.orchestration.session import GameSession

__all__ = ["GameResult", "GameRunner", "GameSession", "SeatAgent"]
