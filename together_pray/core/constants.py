"""Core constants: cache key separator and TTL policy.

Single source of truth for cache key structure (DRY). Prefixes live in
together_pray.domain.enums.CachePrefix so the set stays closed.
"""

# Delimiter for composite keys
CACHE_KEY_SEP = ":"


class CacheTTL:
    """Named freshness windows in seconds.

    Services pick the window that matches how often the underlying data
    changes; the cache never infers one.
    """

    SHORT = 60  # stats
    MEDIUM = 300  # group info, membership
    LONG = 3600
