"""
Path normalization.

Every path parameter accepts either a sequence of keys or a single string
whose segments are separated by a delimiter. Both forms are normalized to
a tuple here, before any traversal happens.

Example:
    >>> to_path("a.b.c")
    ('a', 'b', 'c')
    >>> to_path(["a", 0, "c"])
    ('a', 0, 'c')
    >>> to_path("a/b", delimiter="/")
    ('a', 'b')
"""

from __future__ import annotations

import collections.abc as _abc
import typing as _typing

import pathmap.constants as constants
import pathmap.errors as errors

if _typing.TYPE_CHECKING:
    import pathmap._types as _types


def validate_delimiter(delimiter: object) -> str:
    """
    Check that a delimiter can split a string path.

    Args:
        delimiter: Candidate delimiter.

    Returns:
        The delimiter, unchanged.

    Raises:
        InvalidArgumentError: If the delimiter is not a non-empty string.
    """
    if not isinstance(delimiter, str):
        raise errors.InvalidArgumentError(
            f"Delimiter must be a string, got {type(delimiter).__name__}"
        )
    if not delimiter:
        raise errors.InvalidArgumentError("Delimiter must not be empty")
    return delimiter


def to_path(
    path: _types.PathLike,
    delimiter: str = constants.DEFAULT_DELIMITER,
) -> _types.Path:
    """
    Normalize a path argument to a tuple of keys.

    A string is split on the delimiter and always yields at least one
    segment (``""`` becomes ``("",)``). Bytes are treated as a single
    opaque key rather than a sequence of ints.

    Args:
        path: Sequence of keys or a delimited string.
        delimiter: Separator for the string form.

    Returns:
        Tuple of keys, possibly empty for an empty sequence.

    Raises:
        InvalidArgumentError: If path is neither a string nor a sequence.
    """
    if isinstance(path, str):
        return tuple(path.split(delimiter))
    if isinstance(path, (bytes, bytearray)):
        return (bytes(path),)
    if isinstance(path, _abc.Sequence):
        return tuple(path)
    raise errors.InvalidArgumentError(
        f"Path must be a string or a sequence of keys, got {type(path).__name__}"
    )
