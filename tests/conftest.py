"""Pytest fixtures for blackjack tests."""

import os

# The health endpoint is rate limited; keep test runs from tripping it.
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

import pytest
from random import Random

from core.cards import Card, Deck, Rank, Suit
from core.game import Round
from core.hand import Hand


def make_hand(*ranks: Rank, role: str = "player") -> Hand:
    """Build a hand from ranks, cycling through suits."""
    suits = list(Suit)
    return Hand(role=role, cards=[Card(rank, suits[i % 4]) for i, rank in enumerate(ranks)])


def rig_round(
    round_: Round,
    player: tuple[Rank, ...],
    dealer: tuple[Rank, ...],
    deck: tuple[Rank, ...] = (),
) -> Round:
    """Replace a dealt round's hands and deck with known cards."""
    round_.player_hand = make_hand(*player, role="player")
    round_.dealer_hand = make_hand(*dealer, role="dealer")
    round_.deck = Deck([Card(rank, Suit.CLUBS) for rank in deck], rng=Random(0))
    return round_


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def deck(rng):
    """A full deck."""
    return Deck(rng=rng)


@pytest.fixture
def empty_hand():
    """An empty player hand."""
    return Hand()


@pytest.fixture
def blackjack_hand():
    """A two-card 21 (A-K)."""
    return make_hand(Rank.ACE, Rank.KING)


@pytest.fixture
def soft_17_hand():
    """A soft 17 hand (A-6)."""
    return make_hand(Rank.ACE, Rank.SIX)


@pytest.fixture
def hard_16_hand():
    """A hard 16 hand (10-6)."""
    return make_hand(Rank.TEN, Rank.SIX)


@pytest.fixture
def bust_hand():
    """A busted hand."""
    return make_hand(Rank.TEN, Rank.SIX, Rank.KING)


@pytest.fixture
def round_(rng):
    """A freshly dealt round."""
    return Round(score=0, rng=rng)
