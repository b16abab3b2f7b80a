"""
Exceptions raised by PathMap.

Reads and structural writes are total over absent keys and paths, so the
only errors surfaced to callers come from argument validation.
"""


class PathMapError(Exception):
    """Base class for all PathMap errors."""

    pass


class InvalidArgumentError(PathMapError, TypeError):
    """Raised when an argument has the wrong shape.

    Examples: a non-mapping initial value passed to ``PathMap.of()``, an
    empty delimiter, or a path that is neither a string nor a sequence.
    """

    pass
