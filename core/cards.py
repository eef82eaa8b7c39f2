"""Card and Deck classes - immutable cards and random draws without replacement."""

from dataclasses import dataclass
from enum import Enum, auto
from random import Random
from typing import Iterator, Sequence

from core.errors import DeckExhausted


class Suit(Enum):
    """Card suits."""

    CLUBS = auto()
    DIAMONDS = auto()
    HEARTS = auto()
    SPADES = auto()

    def __str__(self) -> str:
        symbols = {
            Suit.CLUBS: "♣",
            Suit.DIAMONDS: "♦",
            Suit.HEARTS: "♥",
            Suit.SPADES: "♠",
        }
        return symbols[self]


class Rank(Enum):
    """Card ranks."""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    def __str__(self) -> str:
        if self.value <= 10:
            return str(self.value)
        return {
            Rank.JACK: "J",
            Rank.QUEEN: "Q",
            Rank.KING: "K",
            Rank.ACE: "A",
        }[self]

    @property
    def blackjack_value(self) -> int:
        """Return the blackjack point value (Ace = 11, face cards = 10)."""
        if self.value <= 10:
            return self.value
        if self == Rank.ACE:
            return 11
        return 10


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @property
    def value(self) -> int:
        """Return the blackjack point value."""
        return self.rank.blackjack_value

    @property
    def is_ace(self) -> bool:
        return self.rank == Rank.ACE

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a string like '2♣', 'AS', 'Kh'."""
        s = s.strip().upper()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        rank_str = s[:-1]
        suit_str = s[-1]

        rank_map = {str(rank): rank for rank in Rank}
        rank_map["T"] = Rank.TEN

        suit_map = {
            "C": Suit.CLUBS,
            "♣": Suit.CLUBS,
            "D": Suit.DIAMONDS,
            "♦": Suit.DIAMONDS,
            "H": Suit.HEARTS,
            "♥": Suit.HEARTS,
            "S": Suit.SPADES,
            "♠": Suit.SPADES,
        }

        if rank_str not in rank_map:
            raise ValueError(f"Invalid rank: {rank_str}")
        if suit_str not in suit_map:
            raise ValueError(f"Invalid suit: {suit_str}")

        return cls(rank_map[rank_str], suit_map[suit_str])


def new_deck() -> list[Card]:
    """Return a freshly built list of the 52 standard cards."""
    return [Card(rank, suit) for suit in Suit for rank in Rank]


def draw_cards(
    cards: Sequence[Card],
    n: int,
    rng: Random | None = None,
) -> tuple[list[Card], list[Card]]:
    """
    Draw ``n`` cards from distinct random positions.

    Args:
        cards: Cards to draw from (left untouched)
        n: Number of cards to draw
        rng: Random number generator, a fresh one if omitted

    Returns:
        ``(drawn, remaining)``. ``remaining`` keeps the original relative
        order of the cards that were not drawn.

    Raises:
        DeckExhausted: If fewer than ``n`` cards are available
    """
    if n < 1:
        raise ValueError(f"Must draw at least one card, got {n}")
    if n > len(cards):
        raise DeckExhausted(requested=n, remaining=len(cards))

    rng = rng or Random()
    positions = set(rng.sample(range(len(cards)), n))

    drawn = [card for i, card in enumerate(cards) if i in positions]
    remaining = [card for i, card in enumerate(cards) if i not in positions]
    return drawn, remaining


class Deck:
    """A single 52-card deck that only shrinks as cards are drawn."""

    def __init__(
        self,
        cards: Sequence[Card] | None = None,
        rng: Random | None = None,
    ) -> None:
        """
        Initialize a deck.

        Args:
            cards: Explicit cards to hold, the full 52-card set if omitted
            rng: Random number generator used for draws
        """
        self._rng = rng or Random()
        self._cards: list[Card] = list(cards) if cards is not None else new_deck()

    def draw(self, n: int = 1) -> list[Card]:
        """Draw ``n`` random cards and remove them from the deck."""
        drawn, self._cards = draw_cards(self._cards, n, self._rng)
        return drawn

    @property
    def cards_remaining(self) -> int:
        """Return the number of cards remaining."""
        return len(self._cards)

    @property
    def cards(self) -> list[Card]:
        """Return a copy of the remaining cards."""
        return list(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)
