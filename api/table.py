"""Per-player round registry with serialized actions and score persistence."""

import asyncio
from dataclasses import dataclass
from random import Random

from api.scores import ScoreStore, get_score_store
from config import GameConfig, config
from core.errors import DeckExhausted, InvalidAction, ScorePersistenceFailure
from core.game import Action, GameEvent, Round, RoundSnapshot, parse_action
from logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class ActionResult:
    """Round view returned after every action."""

    snapshot: RoundSnapshot
    score_persisted: bool = True


class Table:
    """
    Live rounds keyed by player identity.

    Each player owns at most one round. Actions for the same player run one
    at a time under that player's lock; different players never block each
    other. A player's lock and last known score are created on their first
    deal, and the score carries into later deals even when the store missed
    a write.
    """

    def __init__(
        self,
        store: ScoreStore,
        rules: GameConfig | None = None,
        rng: Random | None = None,
    ) -> None:
        self._store = store
        self._rules = rules or config.game
        self._rng = rng or Random()
        self._rounds: dict[str, Round] = {}
        self._scores: dict[str, int] = {}
        self._locks: dict[str, asyncio.Lock] = {}

    async def act(self, player_id: str, tag: object) -> ActionResult:
        """
        Apply a tagged action for a player.

        Raises:
            InvalidAction: Unknown tag, or hit/stand with no round started
            DeckExhausted: The deck ran out; the player's round is discarded
        """
        action = parse_action(tag)
        if action == Action.START:
            return await self.start(player_id)

        lock = self._locks.get(player_id)
        if lock is None:
            raise InvalidAction(tag, "No round in progress, start a new round first")

        async with lock:
            round_ = self._rounds.get(player_id)
            if round_ is None:
                raise InvalidAction(tag, "No round in progress, start a new round first")

            log = logger.bind(player=player_id, action=action.value)
            try:
                applied = round_.hit() if action == Action.HIT else round_.stand()
            except DeckExhausted:
                # The score record and lock stay; only the round goes
                del self._rounds[player_id]
                log.error("Deck exhausted, round discarded")
                raise

            persisted = True
            if applied and round_.is_over:
                self._scores[player_id] = round_.score
                log.info(f"Round resolved: {round_.message}", extra={"extra_fields": {"score": round_.score}})
                persisted = await self._save_score(player_id, round_.score)

            return ActionResult(round_.snapshot(), score_persisted=persisted)

    async def start(self, player_id: str) -> ActionResult:
        """Deal a new round for a player, replacing any previous one."""
        async with self._locks.setdefault(player_id, asyncio.Lock()):
            score = self._scores.get(player_id)
            if score is None:
                score = await self._load_score(player_id)
            round_ = Round(
                score=score,
                rng=self._rng,
                win_points=self._rules.win_points,
                dealer_stands_on=self._rules.dealer_stands_on,
                on_event=self._event_logger(player_id),
            )
            self._rounds[player_id] = round_
            self._scores[player_id] = score
            logger.bind(player=player_id).info("Round started", extra={"extra_fields": {"score": score}})
            return ActionResult(round_.snapshot())

    def state(self, player_id: str) -> RoundSnapshot | None:
        """Return the player's current round view, or None if there is none."""
        round_ = self._rounds.get(player_id)
        return round_.snapshot() if round_ is not None else None

    async def score(self, player_id: str) -> int:
        """
        Return the player's stored score (0 if unknown).

        Raises:
            ScorePersistenceFailure: If the store cannot be read
        """
        return await self._store.get(player_id) or 0

    async def _load_score(self, player_id: str) -> int:
        """Read the stored score for a player first seen by this table."""
        try:
            stored = await self._store.get(player_id)
        except ScorePersistenceFailure as e:
            logger.bind(player=player_id).warning(f"{e}, starting from 0")
            return 0
        return stored if stored is not None else 0

    async def _save_score(self, player_id: str, score: int) -> bool:
        """Write the score; failures are logged and never undo the round."""
        try:
            await self._store.set(player_id, score)
        except ScorePersistenceFailure as e:
            logger.bind(player=player_id).error(str(e))
            return False
        return True

    @staticmethod
    def _event_logger(player_id: str):
        log = logger.bind(player=player_id)

        def handle(event: GameEvent) -> None:
            log.debug(str(event))

        return handle


# Global table instance
_table: Table | None = None


async def get_table() -> Table:
    """Get or create the table backed by the configured score store."""
    global _table
    if _table is None:
        _table = Table(await get_score_store())
    return _table


def set_table(table: Table | None) -> None:
    """Replace the global table (None rebuilds it on next use)."""
    global _table
    _table = table
