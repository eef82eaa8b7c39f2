"""Round state enumeration."""

from enum import Enum, auto


class RoundState(Enum):
    """
    Round state machine states.

    Flow: DEALING → IN_PROGRESS → RESOLVED
    """

    # Cards being dealt, only seen while a round is constructed
    DEALING = auto()

    # Player may hit or stand
    IN_PROGRESS = auto()

    # Outcome decided, waiting for a new round
    RESOLVED = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()
