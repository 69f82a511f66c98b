"""Output sinks for the SVG renderer.

A sink is anything with ``write(text)``. Every emit hook goes through
``write_to``, so a failing foreign sink always surfaces as ``SinkWriteError``.

Available Sinks:
- BufferSink: in-memory accumulator, joins once at the end
- StreamSink: adapts an open text stream (file, stdout)

Thread Safety:
Sinks are local to one render call. No shared mutable state.

"""

from __future__ import annotations

from typing import Protocol, TextIO

from clockface.errors import SinkWriteError


class Sink(Protocol):
    """Protocol for writable text sinks."""

    def write(self, text: str) -> object:
        """Write ``text``. Raise to reject the write."""
        ...


class BufferSink:
    """Efficient in-memory sink.

    Appends to a list, joins once at the end.
    O(n) total vs O(n²) for repeated string concatenation.

    Usage:
            >>> sink = BufferSink()
            >>> sink.write("<svg>")
            5
            >>> sink.write("</svg>")
            6
            >>> sink.getvalue()
            '<svg></svg>'

    """

    __slots__ = ("_parts", "_size")

    def __init__(self) -> None:
        self._parts: list[str] = []
        self._size = 0

    def write(self, text: str) -> int:
        """Append ``text`` (empty strings are skipped).

        Returns:
            Number of characters written
        """
        if text:
            self._parts.append(text)
            self._size += len(text)
        return len(text)

    def getvalue(self) -> str:
        """Join all parts into the final document."""
        return "".join(self._parts)

    def clear(self) -> BufferSink:
        """Drop everything written so far.

        Returns:
            self for method chaining
        """
        self._parts.clear()
        self._size = 0
        return self

    def __len__(self) -> int:
        """Return total number of characters written."""
        return self._size

    def __bool__(self) -> bool:
        return bool(self._parts)


class StreamSink:
    """Sink over an open text stream.

    Stream errors (``OSError``, writes to a closed stream) become
    ``SinkWriteError``. Output already written stays written.
    """

    __slots__ = ("_stream", "written")

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self.written = 0

    def write(self, text: str) -> int:
        try:
            count = self._stream.write(text)
        except (OSError, ValueError) as exc:
            raise SinkWriteError(f"stream write failed: {exc}") from exc
        self.written += len(text)
        return count if count is not None else len(text)


def write_to(sink: Sink, text: str) -> None:
    """Write ``text`` to ``sink``, normalizing every failure to SinkWriteError."""
    try:
        sink.write(text)
    except SinkWriteError:
        raise
    except Exception as exc:
        raise SinkWriteError(f"{type(sink).__name__} rejected write: {exc}") from exc


__all__ = ["BufferSink", "Sink", "StreamSink", "write_to"]
