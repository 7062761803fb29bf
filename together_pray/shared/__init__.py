"""Shared helpers: logging setup."""

from together_pray.shared.logging import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
