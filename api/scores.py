"""Player score persistence with Redis backend and in-memory fallback."""

from abc import ABC, abstractmethod
from datetime import datetime, timezone

import redis.asyncio as redis
from redis.exceptions import RedisError

from config import config
from core.errors import ScorePersistenceFailure
from logger import get_logger

logger = get_logger(__name__)


class ScoreStore(ABC):
    """Abstract score store keyed by player identity."""

    @abstractmethod
    async def get(self, player_id: str) -> int | None:
        """
        Get a player's score.

        Returns:
            The stored score, or None if the player is unknown

        Raises:
            ScorePersistenceFailure: If the store cannot be read
        """
        ...

    @abstractmethod
    async def set(self, player_id: str, score: int) -> None:
        """
        Store a player's score.

        Raises:
            ScorePersistenceFailure: If the store rejects the write
        """
        ...


class InMemoryScoreStore(ScoreStore):
    """In-memory score store for local development and tests."""

    def __init__(self) -> None:
        self._scores: dict[str, tuple[int, datetime]] = {}

    async def get(self, player_id: str) -> int | None:
        entry = self._scores.get(player_id)
        if entry is None:
            return None
        return entry[0]

    async def set(self, player_id: str, score: int) -> None:
        self._scores[player_id] = (score, datetime.now(timezone.utc))

    def last_updated(self, player_id: str) -> datetime | None:
        """Return when the player's score was last written."""
        entry = self._scores.get(player_id)
        return entry[1] if entry else None


class RedisScoreStore(ScoreStore):
    """Redis-backed score store, one hash per player."""

    def __init__(self, redis_client: "redis.Redis", prefix: str | None = None) -> None:
        self._redis = redis_client
        self._prefix = prefix or config.redis.key_prefix

    def _key(self, player_id: str) -> str:
        """Get Redis key for a player."""
        return f"{self._prefix}{player_id}"

    async def get(self, player_id: str) -> int | None:
        try:
            score = await self._redis.hget(self._key(player_id), "score")
        except RedisError as e:
            raise ScorePersistenceFailure(player_id, "read", e) from e
        if score is None:
            return None
        return int(score)

    async def set(self, player_id: str, score: int) -> None:
        try:
            await self._redis.hset(
                self._key(player_id),
                mapping={
                    "score": score,
                    "last_updated": datetime.now(timezone.utc).isoformat(),
                },
            )
        except RedisError as e:
            raise ScorePersistenceFailure(player_id, "write", e) from e


# Global score store instance
_score_store: ScoreStore | None = None


async def get_score_store() -> ScoreStore:
    """Get or create the score store."""
    global _score_store

    if _score_store is not None:
        return _score_store

    try:
        redis_client = redis.from_url(config.redis.url)
        await redis_client.ping()
        _score_store = RedisScoreStore(redis_client)
        logger.bind(host=config.redis.host, port=config.redis.port).info("Using Redis score store")
        return _score_store
    except (RedisError, OSError) as e:
        logger.warning(f"Redis unavailable, scores kept in memory: {e}")

    _score_store = InMemoryScoreStore()
    return _score_store
