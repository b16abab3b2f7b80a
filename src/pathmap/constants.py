"""
Shared constants for PathMap.

Single source of truth for default values used across modules.
"""

DEFAULT_DELIMITER = "."
"""Separator between segments of a string path ("a.b.c")."""

ENV_PREFIX = "PATHMAP_"
"""Prefix for environment variables read by pathmap.config.Settings."""
