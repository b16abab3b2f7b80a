"""
Read-only containers and conversion to and from native collections.

PathMap stores nested mappings as PathMap nodes and lists as
FrozenSequence, so nothing a caller holds can alias an instance's state.
freeze() performs that conversion on the way in; thaw() reverses it for
val().
"""

from __future__ import annotations

import collections.abc as _abc
import typing as _typing

import pathmap.constants as constants


class FrozenSequence(_abc.Sequence[_typing.Any]):
    """
    Read-only list.

    Items are frozen when the sequence is built, so mappings inside it are
    PathMap nodes and nested lists are FrozenSequences.

    Example:
        >>> items = FrozenSequence([{"a": 1}, [2, 3]])
        >>> items[0]["a"]
        1
        >>> items[1] == [2, 3]
        True
    """

    __slots__ = ("_data", "_delimiter")

    def __init__(
        self,
        data: _abc.Iterable[_typing.Any] = (),
        *,
        delimiter: str = constants.DEFAULT_DELIMITER,
    ) -> None:
        """
        Build a read-only copy of an iterable.

        Args:
            data: Items to hold. They are frozen and copied into a new list.
            delimiter: String-path delimiter for any PathMap nodes created.
        """
        self._delimiter = delimiter
        self._data: list[_typing.Any] = [
            freeze(item, delimiter=delimiter) for item in data
        ]

    @classmethod
    def _wrap(cls, items: list[_typing.Any], delimiter: str) -> FrozenSequence:
        """Wrap an already-frozen list without copying it again."""
        new = cls.__new__(cls)
        new._data = items
        new._delimiter = delimiter
        return new

    @_typing.overload
    def __getitem__(self, index: int) -> _typing.Any: ...

    @_typing.overload
    def __getitem__(self, index: slice) -> FrozenSequence: ...

    def __getitem__(self, index: int | slice) -> _typing.Any:
        """Get an item or a slice."""
        if isinstance(index, slice):
            return FrozenSequence._wrap(self._data[index], self._delimiter)
        return self._data[index]

    def __len__(self) -> int:
        """Return length of sequence."""
        return len(self._data)

    def __repr__(self) -> str:
        return f"FrozenSequence({thaw(self)!r})"

    def __eq__(self, other: object) -> bool:
        """Compare equal to any Sequence with same content (except strings)."""
        if isinstance(other, (str, bytes, bytearray)):
            return NotImplemented
        if isinstance(other, _abc.Sequence):
            return list(self) == list(other)
        return NotImplemented

    def __hash__(self) -> int:
        """FrozenSequence is not hashable (items may be mutable)."""
        raise TypeError(f"unhashable type: '{type(self).__name__}'")

    def __reduce__(self) -> tuple[_typing.Any, ...]:
        return (FrozenSequence._wrap, (self._data, self._delimiter))


def freeze(
    value: _typing.Any,
    *,
    delimiter: str = constants.DEFAULT_DELIMITER,
) -> _typing.Any:
    """
    Convert native containers into their immutable counterparts.

    - PathMap / FrozenSequence → returned as-is when built with the same
      delimiter, otherwise rebuilt with this one
    - Mapping → PathMap node (recursively)
    - list → FrozenSequence (recursively)
    - tuple → tuple of frozen items (namedtuples keep their type)
    - anything else (scalars, strings, opaque objects) → unchanged

    Args:
        value: Any value about to be stored in a PathMap.
        delimiter: String-path delimiter for any PathMap nodes created.

    Returns:
        The value in storable form.

    Example:
        >>> freeze({"a": [1, 2]})
        PathMap({'a': [1, 2]})
        >>> freeze("string")
        'string'
    """
    import pathmap._core as _core

    if isinstance(value, (_core.PathMap, FrozenSequence)):
        if value._delimiter == delimiter:
            return value
    if isinstance(value, _abc.Mapping):
        return _core.PathMap._from_mapping(value, delimiter=delimiter)
    if isinstance(value, (list, FrozenSequence)):
        return FrozenSequence(value, delimiter=delimiter)
    if isinstance(value, tuple):
        return _rebuild_tuple(value, [freeze(item, delimiter=delimiter) for item in value])
    return value


def thaw(value: _typing.Any) -> _typing.Any:
    """
    Convert stored values back into native containers.

    PathMap nodes become dicts and FrozenSequences become lists, at every
    depth. The result is freshly built and safe to mutate.

    Args:
        value: A value read out of a PathMap.

    Returns:
        Plain dict/list structure (tuples rebuilt around thawed items),
        or the value itself for scalars.
    """
    import pathmap._core as _core

    if isinstance(value, _core.PathMap):
        return {key: thaw(item) for key, item in value._data.items()}
    if isinstance(value, FrozenSequence):
        return [thaw(item) for item in value._data]
    if isinstance(value, tuple):
        return _rebuild_tuple(value, [thaw(item) for item in value])
    return value


def _rebuild_tuple(
    original: tuple[_typing.Any, ...],
    items: list[_typing.Any],
) -> tuple[_typing.Any, ...]:
    """Build a tuple of the same type as original holding items."""
    # namedtuple constructors take fields positionally
    make = getattr(original, "_make", None)
    if make is not None:
        result: tuple[_typing.Any, ...] = make(items)
        return result
    return type(original)(items)
