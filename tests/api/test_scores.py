"""Tests for score stores."""

import pytest
import pytest_asyncio
from redis.exceptions import ConnectionError as RedisConnectionError

from api.scores import InMemoryScoreStore, RedisScoreStore
from core.errors import ScorePersistenceFailure


class FakeRedis:
    """Minimal stand-in for the hash commands the store uses."""

    def __init__(self, fail: bool = False) -> None:
        self.hashes: dict[str, dict[str, str]] = {}
        self.fail = fail

    async def hget(self, key, field):
        if self.fail:
            raise RedisConnectionError("connection refused")
        value = self.hashes.get(key, {}).get(field)
        return value.encode() if value is not None else None

    async def hset(self, key, mapping):
        if self.fail:
            raise RedisConnectionError("connection refused")
        self.hashes.setdefault(key, {}).update({k: str(v) for k, v in mapping.items()})


class TestInMemoryScoreStore:
    """Tests for InMemoryScoreStore class."""

    @pytest_asyncio.fixture
    async def store(self):
        return InMemoryScoreStore()

    @pytest.mark.asyncio
    async def test_unknown_player_is_absent(self, store):
        assert await store.get("nobody") is None

    @pytest.mark.asyncio
    async def test_set_and_get(self, store):
        await store.set("alice", 200)

        assert await store.get("alice") == 200
        assert store.last_updated("alice") is not None

    @pytest.mark.asyncio
    async def test_negative_scores_are_kept(self, store):
        await store.set("alice", -300)

        assert await store.get("alice") == -300

    @pytest.mark.asyncio
    async def test_players_are_independent(self, store):
        await store.set("alice", 100)
        await store.set("bob", -100)

        assert await store.get("alice") == 100
        assert await store.get("bob") == -100


class TestRedisScoreStore:
    """Tests for RedisScoreStore class."""

    @pytest.mark.asyncio
    async def test_round_trip_through_hash(self):
        client = FakeRedis()
        store = RedisScoreStore(client, prefix="test:")

        await store.set("alice", 300)

        assert client.hashes["test:alice"]["score"] == "300"
        assert "last_updated" in client.hashes["test:alice"]
        assert await store.get("alice") == 300

    @pytest.mark.asyncio
    async def test_unknown_player_is_absent(self):
        store = RedisScoreStore(FakeRedis(), prefix="test:")

        assert await store.get("nobody") is None

    @pytest.mark.asyncio
    async def test_read_failure_is_wrapped(self):
        store = RedisScoreStore(FakeRedis(fail=True), prefix="test:")

        with pytest.raises(ScorePersistenceFailure) as exc_info:
            await store.get("alice")

        assert exc_info.value.operation == "read"
        assert exc_info.value.player_id == "alice"

    @pytest.mark.asyncio
    async def test_write_failure_is_wrapped(self):
        store = RedisScoreStore(FakeRedis(fail=True), prefix="test:")

        with pytest.raises(ScorePersistenceFailure) as exc_info:
            await store.set("alice", 100)

        assert exc_info.value.operation == "write"
        assert isinstance(exc_info.value.cause, RedisConnectionError)
