"""
Shared pytest fixtures for PathMap tests.

This file is automatically loaded by pytest. Fixtures defined here are
available to all test files without explicit imports.
"""

import os as _os
import typing as _typing
import unittest.mock as _mock

import pytest as _pytest

import pathmap
import pathmap.config as config

# Environment keys that should be cleared for isolated tests
ENV_KEYS_TO_CLEAR = [
    "PATHMAP_DELIMITER",
]


def clean_env() -> dict[str, str]:
    """Return environment dict with test-related keys removed."""
    return {k: v for k, v in _os.environ.items() if k not in ENV_KEYS_TO_CLEAR}


@_pytest.fixture(autouse=True)
def isolated_settings() -> _typing.Iterator[None]:
    """Run every test with a clean environment and fresh cached Settings."""
    with _mock.patch.dict(_os.environ, clean_env(), clear=True):
        config.get_settings.cache_clear()
        yield
    config.get_settings.cache_clear()


@_pytest.fixture
def flat_map() -> pathmap.PathMap:
    """Three top-level keys in a known order."""
    return pathmap.PathMap.of({"a": 1, "b": 2, "c": 3})


@_pytest.fixture
def nested_map() -> pathmap.PathMap:
    """Map with nested levels, a list, and falsy values."""
    return pathmap.PathMap.of(
        {
            "model": {
                "name": "llama",
                "params": {"size": "7b", "context": 4096},
            },
            "plugins": ["git", "shell"],
            "empty": "",
            "zero": 0,
            "nothing": None,
        }
    )
