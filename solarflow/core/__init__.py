"""Core: config, error mapping and application bootstrap."""

from solarflow.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
