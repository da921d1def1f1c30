"""Round simulator, state and events."""

from core.game.events import EventEmitter, EventType, GameEvent
from core.game.state import GameState
from core.game.engine import Outcome, RoundResult, RoundSimulator, SimulationSummary

__all__ = [
    "EventEmitter",
    "GameEvent",
    "EventType",
    "GameState",
    "Outcome",
    "RoundResult",
    "RoundSimulator",
    "SimulationSummary",
]
