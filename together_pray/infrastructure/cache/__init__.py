"""Cache: stores, key builders and the read-through CacheService.

Domain services depend on CacheService; the store behind it (memory or
Redis) is chosen by create_store from settings. Key format is in keys.py (DRY).
"""

from together_pray.infrastructure.cache.cache_protocol import CacheStore, KeyListingStore
from together_pray.infrastructure.cache.cache_service import CacheService
from together_pray.infrastructure.cache.factory import create_store
from together_pray.infrastructure.cache.keys import (
    build_key,
    group_key,
    membership_admin_key,
    membership_key,
    prayer_stats_key,
    user_key,
)
from together_pray.infrastructure.cache.memory_store import InMemoryStore
from together_pray.infrastructure.cache.redis_store import RedisStore

__all__ = [
    "CacheService",
    "CacheStore",
    "InMemoryStore",
    "KeyListingStore",
    "RedisStore",
    "build_key",
    "create_store",
    "group_key",
    "membership_admin_key",
    "membership_key",
    "prayer_stats_key",
    "user_key",
]
