"""Core blackjack engine - 100% UI-agnostic."""

from core.cards import Card, Deck, Rank, Suit, draw_cards, new_deck
from core.errors import BlackjackError, DeckExhausted, InvalidAction, ScorePersistenceFailure
from core.hand import Hand, hand_value

__all__ = [
    "Card",
    "Deck",
    "Rank",
    "Suit",
    "draw_cards",
    "new_deck",
    "Hand",
    "hand_value",
    "BlackjackError",
    "DeckExhausted",
    "InvalidAction",
    "ScorePersistenceFailure",
]
