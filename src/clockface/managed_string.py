"""ManagedString: an owned, growable byte buffer.

Used for attribute names, string attribute values, and the text payload of
content nodes. The buffer tracks capacity and logical length separately:
assigning shorter content only moves ``length``, assigning longer content
reallocates to exactly the new length (no slack).

Content is never NUL-terminated; every consumer reads ``length`` bytes.
Bytes passed in must be valid UTF-8, so rendering can always decode them.

Lifecycle:
    >>> s = ManagedString(0)
    >>> s.assign("#A9B1D6").text()
    '#A9B1D6'
    >>> s.capacity
    7
    >>> s.assign("#FFF").capacity
    7
    >>> s.destroy()
    >>> s.destroyed
    True

"""

from __future__ import annotations

from clockface.errors import AllocationError, PreconditionError, ReleasedError


def _as_bytes(source: str | bytes | bytearray) -> bytes:
    if isinstance(source, str):
        return source.encode("utf-8")
    if isinstance(source, (bytes, bytearray)):
        data = bytes(source)
        try:
            data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise PreconditionError(f"bytes are not valid UTF-8: {exc.reason}") from None
        return data
    raise PreconditionError(f"expected str or bytes, got {type(source).__name__}")


def _allocate(size: int) -> bytearray:
    try:
        return bytearray(size)
    except MemoryError as exc:
        raise AllocationError(size) from exc


class ManagedString:
    """Owned byte buffer with explicit capacity and length.

    Destroying twice is a no-op; any other use after ``destroy()`` raises
    ``ReleasedError``.
    """

    __slots__ = ("_buffer", "_length")

    def __init__(self, initial_capacity: int = 0) -> None:
        """Create an empty string with room for ``initial_capacity`` bytes.

        Args:
            initial_capacity: Initial buffer size; zero leaves the buffer empty

        Raises:
            PreconditionError: If ``initial_capacity`` is negative
        """
        if initial_capacity < 0:
            raise PreconditionError(f"initial capacity must be >= 0, got {initial_capacity}")
        self._buffer: bytearray | None = _allocate(initial_capacity)
        self._length = 0

    @classmethod
    def from_value(cls, source: str | bytes | ManagedString) -> ManagedString:
        """Create a string sized to fit ``source`` and holding a copy of it."""
        if isinstance(source, ManagedString):
            return cls(source.length).copy_from(source)
        data = _as_bytes(source)
        return cls(len(data)).assign(data)

    # -- mutation --------------------------------------------------------------

    def assign(self, source: str | bytes | bytearray) -> ManagedString:
        """Replace the content with ``source``.

        Strings are encoded as UTF-8. Grows the buffer to exactly
        ``len(source)`` when it does not fit; never shrinks.

        Returns:
            self for method chaining
        """
        self._store(_as_bytes(source))
        return self

    def copy_from(self, source: ManagedString) -> ManagedString:
        """Replace the content with a copy of another ManagedString.

        Same growth rule as ``assign``.

        Returns:
            self for method chaining
        """
        if not isinstance(source, ManagedString):
            raise PreconditionError(
                f"copy_from expects a ManagedString, got {type(source).__name__}"
            )
        self._store(source.bytes())
        return self

    def _store(self, data: bytes) -> None:
        buffer = self._live()
        size = len(data)
        if size > len(buffer):
            buffer = _allocate(size)
            self._buffer = buffer
        buffer[:size] = data
        self._length = size

    def destroy(self) -> None:
        """Release the buffer. Calling again has no effect."""
        self._buffer = None
        self._length = 0

    # -- access ----------------------------------------------------------------

    def _live(self) -> bytearray:
        if self._buffer is None:
            raise ReleasedError("ManagedString")
        return self._buffer

    @property
    def length(self) -> int:
        self._live()
        return self._length

    @property
    def capacity(self) -> int:
        return len(self._live())

    @property
    def destroyed(self) -> bool:
        return self._buffer is None

    def bytes(self) -> bytes:
        """Return the logical content (the first ``length`` bytes)."""
        return bytes(self._live()[: self._length])

    def text(self) -> str:
        """Return the logical content decoded as UTF-8."""
        return self.bytes().decode("utf-8")

    def duplicate(self) -> ManagedString:
        """Return an independent copy sized to this string's length."""
        return ManagedString.from_value(self)

    def __len__(self) -> int:
        return self.length

    def __bytes__(self) -> bytes:
        return self.bytes()

    def __str__(self) -> str:
        return self.text()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ManagedString):
            return NotImplemented
        return self.bytes() == other.bytes()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self._buffer is None:
            return "ManagedString(<released>)"
        return f"ManagedString({self.text()!r}, capacity={self.capacity})"
