"""
Strict equality for path_eq().

Python's ``==`` treats ``1``, ``1.0`` and ``True`` as equal. path_eq()
needs identity of type as well as value, so scalars must share an exact
type. Containers are compared structurally: any two Mappings (a PathMap
node and a plain dict, say) match when their keys match and every value
matches strictly, and likewise element-wise for non-string sequences.
"""

from __future__ import annotations

import collections.abc as _abc
import typing as _typing

_TEXT_TYPES = (str, bytes, bytearray)


def _is_sequence(value: object) -> bool:
    return isinstance(value, _abc.Sequence) and not isinstance(value, _TEXT_TYPES)


def strict_equal(left: _typing.Any, right: _typing.Any) -> bool:
    """
    Compare two values without type coercion.

    Args:
        left: First value.
        right: Second value.

    Returns:
        True if both are Mappings with strictly equal items, both are
        non-string Sequences with strictly equal elements, or both have the
        same type and compare equal with ``==``.

    Example:
        >>> strict_equal(1, 1.0)
        False
        >>> strict_equal({"a": [1]}, {"a": [1]})
        True
    """
    if left is right:
        return True

    if isinstance(left, _abc.Mapping) and isinstance(right, _abc.Mapping):
        if len(left) != len(right):
            return False
        for key in left:
            if key not in right:
                return False
            if not strict_equal(left[key], right[key]):
                return False
        return True

    if _is_sequence(left) and _is_sequence(right):
        # tuple vs list differs in kind, not just representation
        if isinstance(left, tuple) != isinstance(right, tuple):
            return False
        if len(left) != len(right):
            return False
        return all(strict_equal(a, b) for a, b in zip(left, right))

    if type(left) is not type(right):
        return False
    return bool(left == right)
