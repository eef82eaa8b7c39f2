"""Pydantic schemas for API requests and responses."""

from pydantic import BaseModel, ConfigDict

from core.cards import Card
from core.game import RoundSnapshot


class ActionRequest(BaseModel):
    """Request for player action."""

    # Free-form so unknown tags reach the table and come back as InvalidAction
    action: str


class CardResponse(BaseModel):
    """Card representation; a face-down card has rank and suit '?'."""

    model_config = ConfigDict(from_attributes=True)

    rank: str
    suit: str

    @classmethod
    def from_card(cls, card: Card | None) -> "CardResponse":
        if card is None:
            return cls(rank="?", suit="?")
        return cls(rank=str(card.rank), suit=str(card.suit))


class RoundResponse(BaseModel):
    """Current round state."""

    state: str
    player_hand: list[CardResponse]
    dealer_hand: list[CardResponse]
    player_value: int
    dealer_value: int | None
    message: str
    score: int
    cards_remaining: int
    score_persisted: bool = True

    @classmethod
    def from_snapshot(
        cls,
        snapshot: RoundSnapshot,
        score_persisted: bool = True,
    ) -> "RoundResponse":
        return cls(
            state=snapshot.state.name,
            player_hand=[CardResponse.from_card(c) for c in snapshot.player_cards],
            dealer_hand=[CardResponse.from_card(c) for c in snapshot.dealer_cards],
            player_value=snapshot.player_value,
            dealer_value=snapshot.dealer_value,
            message=snapshot.message,
            score=snapshot.score,
            cards_remaining=snapshot.cards_remaining,
            score_persisted=score_persisted,
        )


class ScoreResponse(BaseModel):
    """A player's persisted score."""

    player: str
    score: int
