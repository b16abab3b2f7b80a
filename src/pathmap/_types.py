"""
Type aliases for PathMap.

- Key: a single mapping key
- Path: normalized tuple of keys, e.g. ("config", "model", "name")
- PathLike: anything a path parameter accepts (sequence or delimited string)
- Transform: callback passed to modify() / modify_path()
"""

from __future__ import annotations

import collections.abc as _abc
import typing as _typing

Key: _typing.TypeAlias = _abc.Hashable

# Example: ("config", "model", "name") represents config.model.name
Path: _typing.TypeAlias = tuple[Key, ...]

PathLike: _typing.TypeAlias = "str | _abc.Sequence[Key]"

Transform: _typing.TypeAlias = _abc.Callable[[_typing.Any], _typing.Any]
