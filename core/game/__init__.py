"""Round engine and state management."""

from core.game.actions import Action, parse_action
from core.game.events import GameEvent, EventType
from core.game.outcome import Outcome
from core.game.state import RoundState
from core.game.engine import Round, RoundSnapshot

__all__ = [
    "Action",
    "parse_action",
    "GameEvent",
    "EventType",
    "Outcome",
    "RoundState",
    "Round",
    "RoundSnapshot",
]
