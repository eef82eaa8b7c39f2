"""Round outcomes and the stand-time comparison table."""

from enum import Enum

from core.hand import BLACKJACK


class Outcome(Enum):
    """Terminal outcome of a round, with its message and score direction."""

    PLAYER_BUST = ("You lose! Bust!", -1)
    PLAYER_BLACKJACK = ("You win! Blackjack!", 1)
    DEALER_BUST = ("You win! Dealer busts!", 1)
    DEALER_BLACKJACK = ("You lose! Dealer blackjack!", -1)
    DEALER_WINS = ("You lose", -1)
    PLAYER_WINS = ("You win", 1)
    DRAW = ("Draw!", 0)

    def __init__(self, message: str, direction: int) -> None:
        self.message = message
        self.direction = direction

    def score_delta(self, win_points: int = 100) -> int:
        """Return the score change for this outcome."""
        return self.direction * win_points


def resolve_hit(player_value: int) -> Outcome | None:
    """Return the outcome after a hit, or None if play continues."""
    if player_value > BLACKJACK:
        return Outcome.PLAYER_BUST
    if player_value == BLACKJACK:
        return Outcome.PLAYER_BLACKJACK
    return None


def resolve_stand(dealer_value: int, player_value: int) -> Outcome:
    """
    Compare final dealer and player values once the dealer is done.

    The player value is never over 21 here: a bust or 21 on a hit has
    already resolved the round.
    """
    if dealer_value > BLACKJACK:
        return Outcome.DEALER_BUST
    if dealer_value == BLACKJACK:
        return Outcome.DEALER_BLACKJACK
    if dealer_value > player_value:
        return Outcome.DEALER_WINS
    if dealer_value < player_value:
        return Outcome.PLAYER_WINS
    return Outcome.DRAW
