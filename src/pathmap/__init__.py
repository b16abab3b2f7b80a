"""
PathMap — immutable nested mappings addressed by key paths.

Every write returns a new PathMap; the original is never altered.
Paths are sequences of keys or delimited strings.

Example:
    >>> from pathmap import PathMap
    >>> m = PathMap.of({"model": {"name": "llama"}})
    >>> m.assoc_path("model.size", "70b").val()
    {'model': {'name': 'llama', 'size': '70b'}}
    >>> m.path_or(["model", "size"], "7b")
    '7b'
"""

import importlib.metadata as _metadata

# Version is defined in pyproject.toml - read it and parse into tuple (primary representation)
_raw_version = _metadata.version("pathmap")
__version_info__: tuple[int, int, int] = tuple(int(x) for x in _raw_version.split(".")[:3])  # type: ignore[assignment]
__version__: str = ".".join(str(x) for x in __version_info__)

from pathmap._core import PathMap  # noqa: E402
from pathmap._frozen import FrozenSequence  # noqa: E402
from pathmap.config import Settings, get_settings  # noqa: E402
from pathmap.errors import InvalidArgumentError, PathMapError  # noqa: E402

__all__ = [
    "__version__",
    "__version_info__",
    "FrozenSequence",
    "InvalidArgumentError",
    "PathMap",
    "PathMapError",
    "Settings",
    "get_settings",
]
