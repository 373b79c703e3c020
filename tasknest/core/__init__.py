"""Core: config, identifier rules and application bootstrap."""

from tasknest.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
