"""Random-discard game engine and state management."""

from deck_sim.game.events import GameEvent, EventType
from deck_sim.game.state import GameState, HandState
from deck_sim.game.trace import GameTrace, Round
from deck_sim.game.engine import RandomDiscardGame, play_randomly

__all__ = [
    "GameEvent",
    "EventType",
    "GameState",
    "HandState",
    "GameTrace",
    "Round",
    "RandomDiscardGame",
    "play_randomly",
]
