"""Cache key builders. Single place for key format (DRY).

Keys are ``prefix:part1:part2...``. Parts must be non-empty, must not be
whitespace only and must not contain CACHE_KEY_SEP; otherwise two
different (prefix, parts) pairs could collide on the same key.
"""

from together_pray.core.constants import CACHE_KEY_SEP
from together_pray.domain.enums import CachePrefix


def _coerce_prefix(prefix: CachePrefix | str) -> CachePrefix:
    """Return prefix as a CachePrefix member.

    Raises:
        ValueError: If prefix is not one of CachePrefix values.
    """
    try:
        return CachePrefix(prefix)
    except ValueError:
        raise ValueError(
            f"Unknown cache prefix {prefix!r}; expected one of {CachePrefix.values()}"
        ) from None


def _validate_key_component(value: str, name: str) -> None:
    """Raise ValueError if value cannot be used as a key component.

    Args:
        value: String component used in a cache key.
        name: Name of the component (for error message).

    Raises:
        ValueError: If value is not a string, is blank, or contains CACHE_KEY_SEP.
    """
    if not isinstance(value, str):
        raise ValueError(f"Cache key component {name!r} must be a string, got {type(value).__name__}")
    if not value.strip():
        raise ValueError(f"Cache key component {name!r} must not be empty or whitespace")
    if CACHE_KEY_SEP in value:
        raise ValueError(
            f"Cache key component {name!r} must not contain separator {CACHE_KEY_SEP!r}"
        )


def build_key(prefix: CachePrefix | str, *parts: str) -> str:
    """Build ``prefix:part1:part2...`` for a known prefix.

    Pure and deterministic: equal (prefix, parts) give equal keys, and
    distinct valid inputs give distinct keys.

    Args:
        prefix: One of CachePrefix (or its string value).
        *parts: One or more identifiers, in order.

    Returns:
        The cache key.

    Raises:
        ValueError: If prefix is unknown, no parts are given, or a part is invalid.
    """
    member = _coerce_prefix(prefix)
    if not parts:
        raise ValueError("Cache key needs at least one part after the prefix")
    for index, part in enumerate(parts):
        _validate_key_component(part, f"parts[{index}]")
    return CACHE_KEY_SEP.join((member.value, *parts))


def prefix_pattern(prefix: CachePrefix | str) -> str:
    """Return the string every key under prefix starts with (``prefix:``)."""
    return f"{_coerce_prefix(prefix).value}{CACHE_KEY_SEP}"


def group_key(group_id: str) -> str:
    """Cache key for a group (with members) by ID."""
    return build_key(CachePrefix.GROUP, group_id)


def user_key(user_id: str) -> str:
    """Cache key for user by ID."""
    return build_key(CachePrefix.USER, user_id)


def membership_key(user_id: str, group_id: str) -> str:
    """Cache key for "is user a member of group"."""
    return build_key(CachePrefix.MEMBERSHIP, user_id, group_id)


def membership_admin_key(user_id: str, group_id: str) -> str:
    """Cache key for "is user an admin of group"."""
    return build_key(CachePrefix.MEMBERSHIP, user_id, group_id, "admin")


def prayer_stats_key(group_id: str) -> str:
    """Cache key for prayer status counts of a group."""
    return build_key(CachePrefix.PRAYER_STATS, group_id)
