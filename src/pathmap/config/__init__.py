"""
Configuration module for PathMap.

Uses pydantic-settings for environment variable loading.
"""

from pathmap.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
