"""
Settings configuration using pydantic-settings.

Loads configuration from:
1. Constructor arguments (highest precedence)
2. Environment variables with PATHMAP_ prefix

Example:
    PATHMAP_DELIMITER=/ makes "a/b/c" the string form of ("a", "b", "c")
    for every PathMap built without an explicit delimiter.
"""

import functools as _functools

import pydantic as _pydantic
import pydantic_settings as _pydantic_settings

import pathmap.constants as constants
import pathmap.errors as errors


class Settings(_pydantic_settings.BaseSettings):
    """
    PathMap configuration settings.

    All settings can be overridden via environment variables with the
    PATHMAP_ prefix.
    """

    model_config = _pydantic_settings.SettingsConfigDict(
        env_prefix=constants.ENV_PREFIX,
        extra="ignore",
        frozen=True,
    )

    delimiter: str = _pydantic.Field(
        default=constants.DEFAULT_DELIMITER,
        min_length=1,
    )
    """Separator between segments of a string path."""


@_functools.lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Return the process-wide Settings, built on first use.

    Call ``get_settings.cache_clear()`` after changing the environment to
    pick up new values.

    Raises:
        InvalidArgumentError: If the environment holds an invalid value,
            e.g. an empty PATHMAP_DELIMITER.
    """
    try:
        return Settings()
    except _pydantic.ValidationError as e:
        raise errors.InvalidArgumentError(f"Invalid PathMap settings: {e}") from e
