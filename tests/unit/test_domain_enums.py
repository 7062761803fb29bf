"""Tests for domain enums (CachePrefix, PrayerStatus)."""

import pytest

from together_pray.domain.enums import CachePrefix, GroupRole, PrayerStatus


class TestCachePrefix:
    """CachePrefix is the closed set of key prefixes."""

    def test_values_returns_all_prefix_strings(self) -> None:
        assert CachePrefix.values() == ["group", "user", "prayer_stats", "membership"]

    def test_string_lookup(self) -> None:
        assert CachePrefix("prayer_stats") is CachePrefix.PRAYER_STATS

    def test_unknown_value_rejected(self) -> None:
        with pytest.raises(ValueError):
            CachePrefix("session")


def test_prayer_status_values() -> None:
    assert PrayerStatus.values() == ["praying", "partial_answer", "answered"]


def test_group_role_is_str() -> None:
    assert GroupRole.ADMIN == "admin"
