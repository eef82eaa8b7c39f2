"""Domain errors raised by the engine and its collaborators."""


class BlackjackError(Exception):
    """Base class for all blackjack errors."""


class InvalidAction(BlackjackError):
    """The requested action is not one the table understands."""

    def __init__(self, action: object, reason: str | None = None) -> None:
        self.action = action
        message = reason or f"Invalid action: {action!r}"
        super().__init__(message)


class DeckExhausted(BlackjackError):
    """A draw asked for more cards than the deck holds."""

    def __init__(self, requested: int, remaining: int) -> None:
        self.requested = requested
        self.remaining = remaining
        super().__init__(
            f"Cannot draw {requested} card(s), only {remaining} remaining"
        )


class ScorePersistenceFailure(BlackjackError):
    """The score store could not read or write a player's score."""

    def __init__(self, player_id: str, operation: str, cause: Exception | None = None) -> None:
        self.player_id = player_id
        self.operation = operation
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"Score {operation} failed for player {player_id}{detail}")
