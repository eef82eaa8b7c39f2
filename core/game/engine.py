"""Blackjack round engine with state machine."""

from dataclasses import dataclass
from random import Random
from typing import Callable

from transitions import Machine

from core.cards import Card, Deck
from core.errors import DeckExhausted
from core.game.events import EventEmitter, EventType, GameEvent
from core.game.outcome import Outcome, resolve_hit, resolve_stand
from core.game.state import RoundState
from core.hand import Hand, hand_value


@dataclass(frozen=True)
class RoundSnapshot:
    """
    Read-only view of a round.

    While the round is in progress the dealer's hole card is ``None`` and
    ``dealer_value`` is withheld.
    """

    state: RoundState
    player_cards: tuple[Card, ...]
    dealer_cards: tuple[Card | None, ...]
    player_value: int
    dealer_value: int | None
    message: str
    score: int
    cards_remaining: int

    @property
    def is_resolved(self) -> bool:
        return self.state == RoundState.RESOLVED


class Round:
    """
    A single blackjack round against the dealer.

    Creating a round deals it. The player then hits or stands until the
    round resolves; after that every action is a no-op and the caller is
    expected to start a new round.
    """

    # State machine states
    STATES = [s.name.lower() for s in RoundState]

    # State machine transitions
    TRANSITIONS = [
        {"trigger": "cards_dealt", "source": "dealing", "dest": "in_progress"},
        {"trigger": "play_on", "source": "in_progress", "dest": "in_progress"},
        {"trigger": "round_over", "source": "in_progress", "dest": "resolved"},
    ]

    def __init__(
        self,
        score: int = 0,
        rng: Random | None = None,
        win_points: int = 100,
        dealer_stands_on: int = 17,
        on_event: Callable[[GameEvent], None] | None = None,
    ) -> None:
        """
        Start a new round.

        Args:
            score: Running score carried over from earlier rounds
            rng: Random number generator for reproducible rounds
            win_points: Points won or lost per decided round
            dealer_stands_on: Dealer draws until reaching at least this value
            on_event: Optional handler subscribed to every round event
        """
        self._rng = rng or Random()
        self.win_points = win_points
        self.dealer_stands_on = dealer_stands_on

        self.deck = Deck(rng=self._rng)
        self.player_hand = Hand(role="player")
        self.dealer_hand = Hand(role="dealer")
        self.message = ""
        self.score = score
        self.outcome: Outcome | None = None

        self.events = EventEmitter()
        if on_event is not None:
            self.events.subscribe(on_event)

        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="dealing",
            auto_transitions=False,
            model_attribute="_machine_state",
        )

        self._deal_initial_cards()

    @property
    def state(self) -> RoundState:
        """Get current round state as enum."""
        return RoundState[self._machine_state.upper()]  # type: ignore

    @property
    def is_over(self) -> bool:
        """A round is over exactly when it carries an outcome message."""
        return self.message != ""

    def _deal_initial_cards(self) -> None:
        """Deal two cards to the dealer, then two to the player."""
        dealer_cards = self.deck.draw(2)
        player_cards = self.deck.draw(2)

        self.dealer_hand.extend(dealer_cards)
        self.player_hand.extend(player_cards)

        for i, card in enumerate(dealer_cards):
            face_up = i == 0
            self.events.emit_new(
                EventType.CARD_DEALT,
                card=str(card) if face_up else "??",
                hand="dealer",
            )
        for card in player_cards:
            self.events.emit_new(EventType.CARD_DEALT, card=str(card), hand="player")

        self.cards_dealt()
        self.events.emit_new(
            EventType.ROUND_STARTED,
            player_value=self.player_hand.value,
            score=self.score,
        )

    def hit(self) -> bool:
        """
        Player takes another card.

        Returns:
            True if the action was applied, False if the round is already over
        """
        if self.state != RoundState.IN_PROGRESS:
            self._ignore("hit")
            return False

        card = self.deck.draw(1)[0]
        self.player_hand.add_card(card)
        player_value = self.player_hand.value
        self.events.emit_new(EventType.PLAYER_HIT, card=str(card), hand_value=player_value)

        outcome = resolve_hit(player_value)
        if outcome is None:
            self.play_on()
        else:
            self._resolve(outcome)
        return True

    def stand(self) -> bool:
        """
        Player stands; the dealer plays out and the round resolves.

        Returns:
            True if the action was applied, False if the round is already over

        Raises:
            DeckExhausted: If the dealer needs a card and none are left. The
                dealer hand, deck and event history are left as they were.
        """
        if self.state != RoundState.IN_PROGRESS:
            self._ignore("stand")
            return False

        player_value = self.player_hand.value
        hole_card = str(self.dealer_hand.cards[1])
        hole_value = self.dealer_hand.value

        # Events only once the dealer has finished drawing
        drawn = self._play_dealer()
        self.events.emit_new(EventType.PLAYER_STANDS, hand_value=player_value)
        self.events.emit_new(EventType.DEALER_REVEALS, card=hole_card, hand_value=hole_value)
        for card in drawn:
            self.events.emit_new(EventType.DEALER_HITS, card=str(card))

        self._resolve(resolve_stand(self.dealer_hand.value, player_value))
        return True

    def _play_dealer(self) -> list[Card]:
        """Draw dealer cards until the stand value is reached."""
        cards = list(self.dealer_hand.cards)
        deck = Deck(self.deck.cards, rng=self._rng)

        while hand_value(cards) < self.dealer_stands_on:
            if deck.cards_remaining == 0:
                raise DeckExhausted(requested=1, remaining=0)
            cards.extend(deck.draw(1))

        drawn = cards[len(self.dealer_hand):]
        self.dealer_hand.extend(drawn)
        self.deck = deck
        return drawn

    def _resolve(self, outcome: Outcome) -> None:
        """Record the outcome and move to the terminal state."""
        delta = outcome.score_delta(self.win_points)
        self.outcome = outcome
        self.message = outcome.message
        self.score += delta
        self.round_over()
        self.events.emit_new(
            EventType.ROUND_RESOLVED,
            outcome=outcome.name,
            message=self.message,
            delta=delta,
            score=self.score,
            player_value=self.player_hand.value,
            dealer_value=self.dealer_hand.value,
        )

    def _ignore(self, action: str) -> None:
        self.events.emit_new(EventType.ACTION_IGNORED, action=action, state=self.state.name)

    def snapshot(self) -> RoundSnapshot:
        """Return the view exposed to callers, hiding the hole card mid-round."""
        if self.is_over:
            dealer_cards: tuple[Card | None, ...] = tuple(self.dealer_hand.cards)
            dealer_value: int | None = self.dealer_hand.value
        else:
            dealer_cards = (self.dealer_hand.cards[0], None)
            dealer_value = None

        return RoundSnapshot(
            state=self.state,
            player_cards=tuple(self.player_hand.cards),
            dealer_cards=dealer_cards,
            player_value=self.player_hand.value,
            dealer_value=dealer_value,
            message=self.message,
            score=self.score,
            cards_remaining=self.deck.cards_remaining,
        )
