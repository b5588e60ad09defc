"""Game engine and state management."""

from klondike.game.events import GameEvent, EventEmitter, EventType
from klondike.game.state import GameState
from klondike.game.engine import Solitaire

__all__ = [
    "GameEvent",
    "EventEmitter",
    "EventType",
    "GameState",
    "Solitaire",
]
