"""Game engine and state management."""

from core.game.events import EventEmitter, GameEvent, EventType
from core.game.state import GameState
from core.game.engine import BlackjackGame, Decision, GameOverError, GameResult

__all__ = [
    "EventEmitter",
    "GameEvent",
    "EventType",
    "GameState",
    "BlackjackGame",
    "Decision",
    "GameOverError",
    "GameResult",
]
