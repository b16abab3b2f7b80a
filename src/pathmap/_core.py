"""
PathMap: an immutable mapping addressed by key or by nested key path.

Every write returns a new PathMap and leaves the original untouched.
Nested mappings are stored as PathMap nodes, so a value is either a node
(traversal continues into it) or a terminal payload.

Path semantics:
- Paths are sequences of keys or delimited strings ("a.b.c")
- Reads never raise for absent structure: has_path() is False, path()
  is None, and modify_path() returns the same instance
- assoc_path() creates missing intermediate levels; nothing else does

Write semantics:
- Only the nodes along the written path are rebuilt
- Sibling subtrees are shared between old and new instances, which is
  safe because nodes are immutable

Thread safety: instances are never mutated after construction, so
concurrent access needs no locking.
"""

from __future__ import annotations

import collections.abc as _abc
import logging as _logging
import typing as _typing

import pathmap._compare as _compare
import pathmap._frozen as _frozen
import pathmap._paths as _paths
import pathmap.config as config
import pathmap.errors as errors

if _typing.TYPE_CHECKING:
    import pathmap._types as _types

_logger = _logging.getLogger(__name__)


# Helper function to reconstruct _MISSING singleton during unpickle
def _get_missing_singleton() -> _MissingType:
    """Return the _MISSING singleton. Called by pickle to reconstruct."""
    return _MISSING


# Sentinel for absent keys during traversal
class _MissingType:
    """Sentinel type marking a key as absent."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "<MISSING>"

    def __reduce__(self) -> tuple[_typing.Callable[[], _MissingType], tuple[()]]:
        """Pickle support: ensure singleton is preserved."""
        return (_get_missing_singleton, ())


_MISSING = _MissingType()


def _child(node: _typing.Any, key: _typing.Any) -> _typing.Any:
    """
    Look up key one level below node.

    Returns _MISSING when node is not a PathMap or does not hold key, so
    walking into a scalar reads the same as walking into an absent key.
    """
    if not isinstance(node, PathMap):
        return _MISSING
    try:
        return node._data.get(key, _MISSING)
    except TypeError:
        # Unhashable keys are never present
        return _MISSING


class PathMap(_abc.Mapping[_typing.Any, _typing.Any]):
    """
    An immutable, ordered mapping with nested path access.

    Example:
        >>> m = PathMap.of({"model": {"name": "llama"}})
        >>> m2 = m.assoc_path("model.size", "70b")
        >>> m2.path(["model", "size"])
        '70b'
        >>> m.has_path("model.size")  # original unchanged
        False
        >>> m2.val()
        {'model': {'name': 'llama', 'size': '70b'}}

    PathMap is a read-only ``collections.abc.Mapping``: indexing, ``in``,
    ``len()`` and iteration work as for a dict, and it compares equal to
    any Mapping with the same content.

    Args:
        initial: Mapping to copy. None means empty.
        delimiter: Separator for string paths. Defaults to the configured
            value (see ``pathmap.config.Settings``).

    Raises:
        InvalidArgumentError: If initial is not a Mapping or the delimiter
            is invalid.

    Note:
        ``path()`` and ``path_or()`` cannot tell a key explicitly set to
        None apart from an absent one. Use ``has_path()`` when the
        difference matters.
    """

    __slots__ = ("_data", "_delimiter")

    _data: dict[_typing.Any, _typing.Any]
    _delimiter: str

    def __init__(
        self,
        initial: _abc.Mapping[_typing.Any, _typing.Any] | None = None,
        *,
        delimiter: str | None = None,
    ) -> None:
        if delimiter is None:
            delimiter = config.get_settings().delimiter
        else:
            _paths.validate_delimiter(delimiter)

        if initial is None:
            initial = {}
        if not isinstance(initial, _abc.Mapping):
            raise errors.InvalidArgumentError(
                f"Initial value must be a mapping, got {type(initial).__name__}"
            )

        self._delimiter = delimiter
        self._data = {
            key: _frozen.freeze(value, delimiter=delimiter)
            for key, value in initial.items()
        }

    @classmethod
    def of(
        cls,
        initial: _abc.Mapping[_typing.Any, _typing.Any] | None = None,
        *,
        delimiter: str | None = None,
    ) -> PathMap:
        """
        Build a PathMap from a mapping.

        Nested mappings become PathMap nodes and lists become
        FrozenSequences, all copied, so later changes to ``initial`` are
        not visible through the result.

        Args:
            initial: Mapping to copy. None means empty.
            delimiter: Separator for string paths.

        Returns:
            A new PathMap.

        Raises:
            InvalidArgumentError: If initial is not a Mapping.
        """
        return cls(initial, delimiter=delimiter)

    @classmethod
    def _new(
        cls,
        data: dict[_typing.Any, _typing.Any],
        delimiter: str,
    ) -> PathMap:
        """Wrap an already-frozen dict. The dict must not be shared."""
        new = cls.__new__(cls)
        new._data = data
        new._delimiter = delimiter
        return new

    @classmethod
    def _from_mapping(
        cls,
        mapping: _abc.Mapping[_typing.Any, _typing.Any],
        *,
        delimiter: str,
    ) -> PathMap:
        """Freeze a mapping into a node without re-reading settings."""
        return cls._new(
            {
                key: _frozen.freeze(value, delimiter=delimiter)
                for key, value in mapping.items()
            },
            delimiter,
        )

    @property
    def delimiter(self) -> str:
        """Separator used to split string paths."""
        return self._delimiter

    # =========================================================================
    # Internal helpers
    # =========================================================================

    def _derive(self, data: dict[_typing.Any, _typing.Any]) -> PathMap:
        """Create a sibling instance with the same delimiter."""
        return type(self)._new(data, self._delimiter)

    def _freeze(self, value: _typing.Any) -> _typing.Any:
        return _frozen.freeze(value, delimiter=self._delimiter)

    def _to_path(self, path: _types.PathLike) -> _types.Path:
        return _paths.to_path(path, self._delimiter)

    def _walk(self, keys: _types.Path) -> _typing.Any:
        """
        Get the value at keys, or _MISSING if any segment is absent.

        An empty path addresses this map itself.
        """
        current: _typing.Any = self
        for key in keys:
            current = _child(current, key)
            if current is _MISSING:
                return _MISSING
        return current

    def _descend(self, keys: _types.Path) -> list[PathMap] | None:
        """
        Collect the chain of nodes leading to the parent of the last key.

        ``chain[i]`` is the node addressed by ``keys[:i]``, so the result
        has one entry per key and ends with the parent of ``keys[-1]``.

        Returns:
            The chain, or None if an intermediate segment is absent or
            not a PathMap.
        """
        chain: list[PathMap] = [self]
        for key in keys[:-1]:
            child = _child(chain[-1], key)
            if not isinstance(child, PathMap):
                return None
            chain.append(child)
        return chain

    def _rebuild(
        self,
        chain: list[PathMap],
        keys: _types.Path,
        leaf: dict[_typing.Any, _typing.Any],
    ) -> PathMap:
        """
        Rebuild ancestors from the leaf upward.

        Args:
            chain: Nodes from _descend() (or the vivifying walk).
            keys: The normalized path.
            leaf: New contents for ``chain[-1]``.

        Returns:
            The new root. Only nodes in chain are copied; every other
            subtree is shared with this instance.
        """
        result = self._derive(leaf)
        for index in range(len(chain) - 2, -1, -1):
            data = dict(chain[index]._data)
            data[keys[index]] = result
            result = self._derive(data)
        return result

    # =========================================================================
    # Read operations
    # =========================================================================

    def keys(self) -> list[_typing.Any]:  # type: ignore[override]
        """Return top-level keys in insertion order."""
        return list(self._data)

    def values(self) -> list[_typing.Any]:  # type: ignore[override]
        """Return top-level values in the same order as keys()."""
        return list(self._data.values())

    def has(self, key: _typing.Any) -> bool:
        """
        Check whether key exists at the top level.

        A key holding a falsy value (None, 0, "") is still present.
        """
        return _child(self, key) is not _MISSING

    def has_path(self, path: _types.PathLike) -> bool:
        """
        Check whether every segment of a path exists.

        Walking into a value that is not a PathMap counts as absent.

        Example:
            >>> PathMap.of({"a": 1}).has_path(["a", "b"])
            False
        """
        return self._walk(self._to_path(path)) is not _MISSING

    def path(self, path: _types.PathLike) -> _typing.Any:
        """
        Get the value at a path.

        Returns:
            The value at the final segment, or None if any segment is
            absent. Nested mappings are returned as PathMap nodes.
        """
        value = self._walk(self._to_path(path))
        if value is _MISSING:
            return None
        return value

    def path_eq(self, path: _types.PathLike, value: _typing.Any) -> bool:
        """
        Check whether the value at a path strictly equals value.

        Strict means no type coercion: ``1``, ``1.0`` and ``True`` are all
        different. An absent path reads as None, like path().
        """
        return _compare.strict_equal(self.path(path), value)

    def path_or(self, path: _types.PathLike, default: _typing.Any) -> _typing.Any:
        """
        Get the value at a path, or default when it is None.

        A key explicitly holding None also yields default.
        """
        value = self.path(path)
        return default if value is None else value

    def val(self) -> dict[_typing.Any, _typing.Any]:
        """
        Return the contents as a plain dict.

        Nested nodes become dicts and FrozenSequences become lists. The
        result is a fresh copy; mutating it does not affect this map.
        """
        result: dict[_typing.Any, _typing.Any] = _frozen.thaw(self)
        return result

    # =========================================================================
    # Structural writes
    # =========================================================================

    def assoc(self, key: _typing.Any, value: _typing.Any) -> PathMap:
        """
        Return a copy with key set to value.

        An existing key keeps its position; a new key is appended.
        """
        data = dict(self._data)
        data[key] = self._freeze(value)
        return self._derive(data)

    def dissoc(self, key: _typing.Any) -> PathMap:
        """Return a copy without key. An absent key yields an equal copy."""
        data = dict(self._data)
        if self.has(key):
            del data[key]
        return self._derive(data)

    def omit(self, keys: _typing.Iterable[_typing.Any]) -> PathMap:
        """
        Return a copy without any of the given keys.

        Absent keys are ignored. A bare string is treated as one key.
        """
        if isinstance(keys, (str, bytes)):
            keys = (keys,)
        data = dict(self._data)
        for key in keys:
            if _child(self, key) is not _MISSING:
                data.pop(key, None)
        return self._derive(data)

    def assoc_path(self, path: _types.PathLike, value: _typing.Any) -> PathMap:
        """
        Return a copy with value placed at the end of path.

        Missing intermediate levels are created as empty PathMaps. An
        intermediate holding a non-mapping value is replaced by one.

        Example:
            >>> PathMap.of().assoc_path(["a", "b"], 1).val()
            {'a': {'b': 1}}
        """
        keys = self._to_path(path)
        if not keys:
            return self

        chain: list[PathMap] = [self]
        for depth, key in enumerate(keys[:-1]):
            child = _child(chain[-1], key)
            if child is _MISSING:
                _logger.debug("Creating intermediate level at %r", keys[: depth + 1])
                child = self._derive({})
            elif not isinstance(child, PathMap):
                _logger.debug(
                    "Replacing %s value with a nested level at %r",
                    type(child).__name__,
                    keys[: depth + 1],
                )
                child = self._derive({})
            chain.append(child)

        leaf = dict(chain[-1]._data)
        leaf[keys[-1]] = self._freeze(value)
        return self._rebuild(chain, keys, leaf)

    def dissoc_path(self, path: _types.PathLike) -> PathMap:
        """
        Return a copy without the key at the end of path.

        Intermediate levels stay in place even if they become empty. If
        any segment is absent the result equals this map.
        """
        keys = self._to_path(path)
        if not keys:
            return self

        chain = self._descend(keys)
        if chain is None or _child(chain[-1], keys[-1]) is _MISSING:
            _logger.debug("dissoc_path: %r not present, nothing removed", keys)
            return self._derive(dict(self._data))

        leaf = dict(chain[-1]._data)
        del leaf[keys[-1]]
        return self._rebuild(chain, keys, leaf)

    def modify(self, key: _typing.Any, fn: _types.Transform) -> PathMap:
        """
        Return a copy with fn applied to the value at key.

        If key is absent, this same instance is returned and fn is not
        called.
        """
        current = _child(self, key)
        if current is _MISSING:
            return self

        data = dict(self._data)
        data[key] = self._freeze(fn(current))
        return self._derive(data)

    def modify_path(self, path: _types.PathLike, fn: _types.Transform) -> PathMap:
        """
        Return a copy with fn applied to the value at path.

        If any segment (including the last) is absent, this same instance
        is returned and fn is not called. No levels are created.
        """
        keys = self._to_path(path)
        if not keys:
            return self

        chain = self._descend(keys)
        current = _MISSING if chain is None else _child(chain[-1], keys[-1])
        if chain is None or current is _MISSING:
            _logger.debug("modify_path: %r not present, returning unchanged", keys)
            return self

        leaf = dict(chain[-1]._data)
        leaf[keys[-1]] = self._freeze(fn(current))
        return self._rebuild(chain, keys, leaf)

    # =========================================================================
    # Mapping protocol
    # =========================================================================

    def __getitem__(self, key: _typing.Any) -> _typing.Any:
        """
        Get a top-level value.

        Raises:
            KeyError: If key is absent.
        """
        return self._data[key]

    def __iter__(self) -> _typing.Iterator[_typing.Any]:
        """Iterate over top-level keys in insertion order."""
        return iter(self._data)

    def __len__(self) -> int:
        """Return number of top-level keys."""
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        """Check if key exists at the top level."""
        return self.has(key)

    def __repr__(self) -> str:
        return f"PathMap({self.val()!r})"

    def __eq__(self, other: object) -> bool:
        """Compare equal to any Mapping with same content."""
        if isinstance(other, _abc.Mapping):
            return self._data == dict(other.items())
        return NotImplemented

    def __hash__(self) -> int:
        """PathMap is not hashable (values may be mutable)."""
        raise TypeError(f"unhashable type: '{type(self).__name__}'")

    def __copy__(self) -> PathMap:
        return self

    def __deepcopy__(self, memo: dict[int, _typing.Any]) -> PathMap:
        return self

    def __reduce__(self) -> tuple[_typing.Any, ...]:
        """Pickle support: rebuild without re-reading settings."""
        return (PathMap._new, (self._data, self._delimiter))
