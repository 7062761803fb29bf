"""RedisStore with a mocked redis.asyncio client (no Redis server needed)."""

import json
from unittest.mock import AsyncMock, MagicMock

import pytest
import redis.asyncio as redis

from together_pray.core.config import Settings
from together_pray.domain.exceptions import CacheBackendUnavailableError
from together_pray.infrastructure.cache import redis_store
from together_pray.infrastructure.cache.cache_protocol import KeyListingStore
from together_pray.infrastructure.cache.cache_service import CacheService
from together_pray.infrastructure.cache.redis_store import RedisStore


async def _aiter(items):
    for item in items:
        yield item


@pytest.fixture
def redis_client() -> AsyncMock:
    client = AsyncMock()
    client.get.return_value = None
    return client


@pytest.fixture
def redis_cache_store(redis_client: AsyncMock) -> RedisStore:
    return RedisStore(redis_client=redis_client, settings=Settings())


class TestTtlConversion:
    """TTL is seconds at the public API and milliseconds at Redis."""

    async def test_set_with_ttl_sends_px_milliseconds(
        self, redis_cache_store: RedisStore, redis_client: AsyncMock
    ) -> None:
        await redis_cache_store.set("group:g1", {"id": "g1"}, 60)
        redis_client.set.assert_awaited_once_with("group:g1", '{"id": "g1"}', px=60000)

    async def test_cache_service_ttl_reaches_redis_as_milliseconds(
        self, redis_cache_store: RedisStore, redis_client: AsyncMock
    ) -> None:
        cache = CacheService(redis_cache_store)
        await cache.set("prayer_stats:g1", 5, 60)
        redis_client.set.assert_awaited_once_with("prayer_stats:g1", "5", px=60000)

    async def test_set_without_ttl_has_no_expiry(
        self, redis_cache_store: RedisStore, redis_client: AsyncMock
    ) -> None:
        await redis_cache_store.set("user:u1", "Ruth")
        redis_client.set.assert_awaited_once_with("user:u1", '"Ruth"')


class TestGetDelete:
    async def test_get_decodes_json(self, redis_cache_store: RedisStore, redis_client: AsyncMock) -> None:
        redis_client.get.return_value = json.dumps({"members": ["u1"]})
        assert await redis_cache_store.get("group:g1") == {"members": ["u1"]}

    async def test_get_miss_returns_none(self, redis_cache_store: RedisStore) -> None:
        assert await redis_cache_store.get("group:g1") is None

    async def test_get_falsy_json_value_is_returned(
        self, redis_cache_store: RedisStore, redis_client: AsyncMock
    ) -> None:
        redis_client.get.return_value = "0"
        assert await redis_cache_store.get("prayer_stats:g1") == 0

    async def test_delete(self, redis_cache_store: RedisStore, redis_client: AsyncMock) -> None:
        await redis_cache_store.delete("group:g1")
        redis_client.delete.assert_awaited_once_with("group:g1")


class TestListKeys:
    async def test_list_keys_uses_scan(self, redis_cache_store: RedisStore, redis_client: AsyncMock) -> None:
        redis_client.scan_iter = MagicMock(return_value=_aiter(["group:g1", "user:u1"]))
        assert await redis_cache_store.list_keys() == ["group:g1", "user:u1"]
        redis_client.scan_iter.assert_called_once_with(match=None, count=redis_store.SCAN_BATCH_SIZE)

    async def test_list_keys_matches_prefix_server_side(
        self, redis_cache_store: RedisStore, redis_client: AsyncMock
    ) -> None:
        redis_client.scan_iter = MagicMock(return_value=_aiter(["group:g1"]))
        assert await redis_cache_store.list_keys("group:") == ["group:g1"]
        redis_client.scan_iter.assert_called_once_with(
            match="group:*", count=redis_store.SCAN_BATCH_SIZE
        )

    def test_supports_key_listing_capability(self, redis_cache_store: RedisStore) -> None:
        assert isinstance(redis_cache_store, KeyListingStore)

    async def test_prefix_sweep_through_cache_service(
        self, redis_cache_store: RedisStore, redis_client: AsyncMock
    ) -> None:
        redis_client.scan_iter = MagicMock(
            return_value=_aiter(["group:g1", "group:g2", "user:u1"])
        )
        cache = CacheService(redis_cache_store)
        assert await cache.invalidate_by_prefix("group") == 2
        deleted = sorted(call.args[0] for call in redis_client.delete.await_args_list)
        assert deleted == ["group:g1", "group:g2"]
        redis_client.scan_iter.assert_called_once_with(
            match="group:*", count=redis_store.SCAN_BATCH_SIZE
        )


class TestBackendUnavailable:
    """Connection failures surface as CacheBackendUnavailableError; no retry."""

    @pytest.mark.parametrize(
        "error", [redis.ConnectionError("refused"), redis.TimeoutError("timed out")]
    )
    async def test_get_raises(self, redis_cache_store: RedisStore, redis_client: AsyncMock, error) -> None:
        redis_client.get.side_effect = error
        with pytest.raises(CacheBackendUnavailableError) as exc_info:
            await redis_cache_store.get("group:g1")
        assert exc_info.value.error_code == "CACHE_UNAVAILABLE"
        assert exc_info.value.details["operation"] == "get"
        assert exc_info.value.__cause__ is error
        assert redis_client.get.await_count == 1

    async def test_set_raises(self, redis_cache_store: RedisStore, redis_client: AsyncMock) -> None:
        redis_client.set.side_effect = redis.ConnectionError("refused")
        with pytest.raises(CacheBackendUnavailableError):
            await redis_cache_store.set("group:g1", "v", 60)

    async def test_delete_raises(self, redis_cache_store: RedisStore, redis_client: AsyncMock) -> None:
        redis_client.delete.side_effect = redis.ConnectionError("refused")
        with pytest.raises(CacheBackendUnavailableError):
            await redis_cache_store.delete("group:g1")

    async def test_ping_raises(self, redis_cache_store: RedisStore, redis_client: AsyncMock) -> None:
        redis_client.ping.side_effect = redis.TimeoutError("timed out")
        with pytest.raises(CacheBackendUnavailableError):
            await redis_cache_store.ping()

    async def test_not_connected(self) -> None:
        store = RedisStore(settings=Settings())
        with pytest.raises(CacheBackendUnavailableError) as exc_info:
            await store.get("group:g1")
        assert exc_info.value.details["reason"] == "not connected"

    async def test_get_or_set_propagates_without_calling_loader(
        self, redis_cache_store: RedisStore, redis_client: AsyncMock
    ) -> None:
        redis_client.get.side_effect = redis.ConnectionError("refused")
        loader = AsyncMock(return_value="fresh")
        with pytest.raises(CacheBackendUnavailableError):
            await CacheService(redis_cache_store).get_or_set("group:g1", loader, 300)
        loader.assert_not_awaited()


class TestConnectLifecycle:
    async def test_connect_success(self, monkeypatch: pytest.MonkeyPatch) -> None:
        client = AsyncMock()
        client.ping.return_value = True
        factory = MagicMock(return_value=client)
        monkeypatch.setattr(redis_store.redis, "Redis", factory)

        store = RedisStore(settings=Settings(redis_host="cache.internal", redis_port=6380))
        await store.connect()

        assert store.redis is client
        assert factory.call_args.kwargs["host"] == "cache.internal"
        assert factory.call_args.kwargs["port"] == 6380
        assert factory.call_args.kwargs["decode_responses"] is True

        await store.disconnect()
        client.aclose.assert_awaited_once()
        assert store.redis is None

    async def test_connect_failure_leaves_store_disconnected(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        client = AsyncMock()
        client.ping.side_effect = redis.ConnectionError("refused")
        monkeypatch.setattr(redis_store.redis, "Redis", MagicMock(return_value=client))

        store = RedisStore(settings=Settings())
        await store.connect()

        assert store.redis is None
        client.aclose.assert_awaited_once()
        with pytest.raises(CacheBackendUnavailableError):
            await store.ping()

    async def test_connect_keeps_injected_client(self, redis_client: AsyncMock) -> None:
        store = RedisStore(redis_client=redis_client, settings=Settings())
        await store.connect()
        assert store.redis is redis_client
        redis_client.ping.assert_not_awaited()
