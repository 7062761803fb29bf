"""Core: config, constants, and application bootstrap.

Single place for settings and shared constants.
"""

from together_pray.core.config import Settings, get_settings
from together_pray.core.constants import CACHE_KEY_SEP, CacheTTL

__all__ = ["CACHE_KEY_SEP", "CacheTTL", "Settings", "get_settings"]
