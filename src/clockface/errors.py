"""Exception classes for clockface.

Provides standardized exceptions for error handling throughout clockface.
Leaf operations raise immediately; ``render`` folds any sink failure into a
single ``RenderError`` for the top-level caller.
"""

from __future__ import annotations


class ClockfaceError(Exception):
    """Base exception for all clockface errors.

    Subclass this for specific error categories.
    """

    pass


class PreconditionError(ClockfaceError, ValueError):
    """Invalid argument passed to a construction or append operation.

    Programmer error: the caller broke a documented contract
    (e.g., appending a node that already has an owner).
    """

    pass


class ReleasedError(ClockfaceError):
    """Operation on a string, attribute list, or node after it was destroyed."""

    def __init__(self, what: str) -> None:
        self.what = what
        super().__init__(f"{what} has already been released")


class AllocationError(ClockfaceError):
    """Growing a buffer failed because memory is exhausted.

    Unrecoverable for the operation in progress.
    """

    def __init__(self, requested: int) -> None:
        """Initialize allocation error.

        Args:
            requested: Number of bytes the failed allocation asked for
        """
        self.requested = requested
        super().__init__(f"could not allocate {requested} bytes")


class SinkWriteError(ClockfaceError):
    """The output sink rejected a write."""

    pass


class RenderError(ClockfaceError):
    """Error during SVG rendering.

    Raised once from the top-level ``render`` call when any emit hook fails.
    The underlying error (a ``SinkWriteError`` or whatever the hook raised)
    is available as ``__cause__``.
    """

    def __init__(self, message: str, tag: str | None = None) -> None:
        """Initialize render error.

        Args:
            message: Error description
            tag: Tag of the node whose hook failed (e.g., "line")
        """
        self.tag = tag
        super().__init__(f"<{tag}>: {message}" if tag else message)


class TimeInputError(ClockfaceError):
    """Time input could not be parsed as three numbers."""

    def __init__(self, text: str, message: str) -> None:
        self.text = text
        super().__init__(f"{message}: {text!r}")


class ConfigError(ClockfaceError):
    """Clock configuration holds an unusable value."""

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__(f"Config '{field}': {message}")
