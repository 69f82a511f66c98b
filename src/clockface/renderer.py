"""Traversal engine: serialize a shape tree depth-first.

One algorithm for every variant: open hook, children in insertion order,
close hook. The open hook fires before descending and the close hook after
all children, which is the usual nested-tag pattern.

Failure Policy:
Any hook failure aborts the whole render. Nothing after the failing node
is written, not even its remaining siblings, and the top-level ``render``
call raises a single ``RenderError``. There is no partial-document repair.
When rendering straight into a stream, whatever was written before the
failure stays in the stream; use ``write_document`` (buffer first, then one
write) when a partial file is not acceptable.

Thread Safety:
Sinks are created per call. A tree must not be mutated while it renders.

"""

from __future__ import annotations

from collections.abc import Callable
from os import PathLike
from pathlib import Path

from clockface.errors import ReleasedError, RenderError, SinkWriteError
from clockface.nodes import ShapeNode
from clockface.sinks import BufferSink, Sink
from clockface.utils.logger import get_logger

logger = get_logger(__name__)


def render(node: ShapeNode, sink: Sink) -> None:
    """Serialize ``node`` and its subtree into ``sink``.

    Args:
        node: Tree to serialize (usually a Root)
        sink: Anything with ``write(text)``

    Raises:
        RenderError: If any hook fails; chained from the original error
    """
    # open hook, children, close hook; explicit stack so nesting depth is unbounded
    stack: list[tuple[ShapeNode, bool]] = [(node, False)]
    while stack:
        current, opened = stack.pop()
        if opened:
            _call_hook(current, current.emit_close, sink)
            continue
        try:
            current._check_alive()
        except ReleasedError as exc:
            raise RenderError(str(exc), tag=current.tag) from exc
        _call_hook(current, current.emit_open, sink)
        stack.append((current, True))
        stack.extend((child, False) for child in reversed(current.children))


def _call_hook(node: ShapeNode, hook: Callable[[Sink], None], sink: Sink) -> None:
    try:
        hook(sink)
    except Exception as exc:
        raise RenderError(str(exc), tag=node.tag) from exc


def render_to_string(node: ShapeNode) -> str:
    """Render ``node`` into a fresh BufferSink and return the document.

    Example:
        >>> from clockface.nodes import Root
        >>> with Root(10, 10) as root:
        ...     render_to_string(root)
        '<svg width="10" height="10" xmlns="http://www.w3.org/2000/svg" version="1.1">\\n</svg>'
    """
    sink = BufferSink()
    render(node, sink)
    logger.debug("rendered %d nodes into %d characters", count_nodes(node), len(sink))
    return sink.getvalue()


def write_document(node: ShapeNode, path: str | PathLike[str]) -> Path:
    """Render ``node`` and write it to ``path`` in a single write.

    The document is fully rendered in memory first, so a render failure
    leaves any existing file untouched.

    Returns:
        The path written

    Raises:
        RenderError: If rendering fails
        SinkWriteError: If the file cannot be written
    """
    document = render_to_string(node)
    target = Path(path)
    try:
        target.write_text(document, encoding="utf-8")
    except OSError as exc:
        raise SinkWriteError(f"cannot write {target}: {exc}") from exc
    logger.debug("wrote %s", target)
    return target


def count_nodes(node: ShapeNode) -> int:
    """Return the number of nodes in the subtree rooted at ``node``."""
    return sum(1 for _ in node.walk())


__all__ = ["count_nodes", "render", "render_to_string", "write_document"]
