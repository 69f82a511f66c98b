"""Shape nodes for clockface.

Every node of an SVG document is a ShapeNode. A node exclusively owns its
attribute list, its payload, and its children; the tree never shares nodes
and never holds a reference back to a parent.

Node Hierarchy:
ShapeNode (abstract: emit_open / emit_close / release_payload)
├── Root       <svg ...>          paired tags, children are shapes
├── Content    literal text       leaf, owns its text
├── Text       <text ...>         paired tags, one Content child
└── SelfClosingShape              <tag ... /> then a newline
    ├── Circle
    └── Line

Variants are chosen at construction time. Rendering and destruction go
through the hooks, so the traversal in ``clockface.renderer`` never needs
to know which variant it is looking at.

Children are stored in a slot array with explicit capacity. When it is
full the capacity grows to ``ceil(capacity * 1.5) + 1``; it never shrinks.

Example:
    >>> root = Root(420, 420)
    >>> circle = root.add_child(Circle(210, 210, 210, "#A9B1D6", "#20212E"))
    >>> root.child_count
    1
    >>> root.destroy()

"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Any, TypeVar

from clockface.attributes import AttributeList, AttributeValue
from clockface.errors import PreconditionError, ReleasedError
from clockface.managed_string import ManagedString
from clockface.sinks import Sink, write_to
from clockface.utils.logger import get_logger

logger = get_logger(__name__)

SVG_NAMESPACE = "http://www.w3.org/2000/svg"
SVG_VERSION = 1.1
MONOSPACE_STYLE = "font-family: monospace;"

Color = str | ManagedString

N = TypeVar("N", bound="ShapeNode")


def grow_capacity(capacity: int) -> int:
    """Return the next child-array capacity after ``capacity`` is exhausted."""
    return math.ceil(capacity * 1.5) + 1


# =============================================================================
# Base Node
# =============================================================================


class ShapeNode(ABC):
    """Base class for all document nodes.

    Subclasses implement the emit hooks and, when they carry a payload,
    ``release_payload``. Attributes are populated by the subclass constructor
    and are not changed afterwards.

    """

    __slots__ = ("attributes", "payload", "_slots", "_count", "_owned", "_destroyed")

    tag: str = ""

    def __init__(self, payload: Any = None) -> None:
        self.attributes = AttributeList()
        self.payload = payload
        self._slots: list[ShapeNode | None] = []
        self._count = 0
        self._owned = False
        self._destroyed = False

    # -- behavior hooks --------------------------------------------------------

    @abstractmethod
    def emit_open(self, sink: Sink) -> None:
        """Write everything that precedes the children."""

    @abstractmethod
    def emit_close(self, sink: Sink) -> None:
        """Write everything that follows the children."""

    def release_payload(self) -> None:
        """Release variant-specific payload. Default: nothing to release."""

    # -- attributes ------------------------------------------------------------

    def _attr(self, name: str, value: AttributeValue) -> None:
        self.attributes.append(name, value)
        value.release()

    # -- children --------------------------------------------------------------

    def add_child(self, child: N) -> N:
        """Append ``child`` and take ownership of it.

        Args:
            child: A node with no current owner

        Returns:
            The same child, for fluent chaining

        Raises:
            PreconditionError: If child is not a free ShapeNode or would form a cycle
            ReleasedError: If either node has been destroyed
        """
        self._check_alive()
        if not isinstance(child, ShapeNode):
            raise PreconditionError(f"child must be a ShapeNode, got {type(child).__name__}")
        child._check_alive()
        if child._owned:
            raise PreconditionError(f"<{child.tag}> already belongs to another node")
        if any(node is self for node in child.walk()):
            raise PreconditionError(f"adding <{child.tag}> to <{self.tag}> would create a cycle")

        if self._count == len(self._slots):
            self._grow()
        self._slots[self._count] = child
        self._count += 1
        child._owned = True
        return child

    def _grow(self) -> None:
        capacity = grow_capacity(len(self._slots))
        self._slots.extend([None] * (capacity - len(self._slots)))

    @property
    def children(self) -> tuple[ShapeNode, ...]:
        """Children in insertion order."""
        return tuple(self._iter_children())

    def _iter_children(self) -> Iterator[ShapeNode]:
        for index in range(self._count):
            child = self._slots[index]
            assert child is not None
            yield child

    @property
    def child_count(self) -> int:
        return self._count

    @property
    def child_capacity(self) -> int:
        return len(self._slots)

    @property
    def owned(self) -> bool:
        """True once the node has been added to a parent."""
        return self._owned

    @property
    def destroyed(self) -> bool:
        return self._destroyed

    def walk(self) -> Iterator[ShapeNode]:
        """Yield this node and every descendant, pre-order."""
        stack: list[ShapeNode] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    # -- lifecycle -------------------------------------------------------------

    def destroy(self) -> None:
        """Release this node and its whole subtree.

        Children are destroyed in index order, then the payload, then the
        attribute list and the child storage. Calling again is a no-op.

        Raises:
            PreconditionError: If the node is owned by a parent (destroy the root instead)
        """
        if self._destroyed:
            return
        if self._owned:
            raise PreconditionError(f"<{self.tag}> is owned by a parent; destroy the root instead")
        self._destroy_subtree()

    def _destroy_subtree(self) -> None:
        # post-order with an explicit stack; nesting depth is unbounded
        stack: list[tuple[ShapeNode, bool]] = [(self, False)]
        while stack:
            node, expanded = stack.pop()
            if expanded:
                node._release()
                continue
            stack.append((node, True))
            stack.extend((child, False) for child in reversed(node.children))

    def _release(self) -> None:
        self.release_payload()
        self.attributes.destroy_all()
        self._slots = []
        self._count = 0
        self._destroyed = True
        logger.debug("released <%s>", self.tag or type(self).__name__)

    def _check_alive(self) -> None:
        if self._destroyed:
            raise ReleasedError(f"<{self.tag or type(self).__name__}> node")

    def __enter__(self) -> ShapeNode:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.destroy()

    def _open_tag(self, sink: Sink, end: str) -> None:
        write_to(sink, f"<{self.tag}")
        if self.attributes:
            write_to(sink, " ")
            self.attributes.serialize(sink)
        write_to(sink, end)

    def __repr__(self) -> str:
        state = "destroyed" if self._destroyed else f"children={self._count}"
        return f"{type(self).__name__}({state})"


# =============================================================================
# Variants
# =============================================================================


class Root(ShapeNode):
    """Document root.

    SVG: <svg width="W" height="H" xmlns="..." version="1.1"> ... </svg>

    """

    __slots__ = ()

    tag = "svg"

    def __init__(self, width: int, height: int) -> None:
        super().__init__()
        self._attr("width", AttributeValue.integer(width))
        self._attr("height", AttributeValue.integer(height))
        self._attr("xmlns", AttributeValue.string(SVG_NAMESPACE))
        self._attr("version", AttributeValue.float_(SVG_VERSION))

    def emit_open(self, sink: Sink) -> None:
        self._open_tag(sink, ">\n")

    def emit_close(self, sink: Sink) -> None:
        write_to(sink, f"</{self.tag}>")

    def __enter__(self) -> Root:
        return self


class Content(ShapeNode):
    """Literal text inside a tag.

    Leaf node; the payload is an owned ManagedString. Written verbatim
    followed by a newline.

    """

    __slots__ = ()

    def __init__(self, text: str | bytes | ManagedString) -> None:
        if text is None:
            raise PreconditionError("content text must not be None")
        super().__init__(ManagedString.from_value(text))

    @property
    def text(self) -> str:
        return self.payload.text()

    def add_child(self, child: N) -> N:
        raise PreconditionError("content nodes cannot have children")

    def emit_open(self, sink: Sink) -> None:
        write_to(sink, f"{self.payload.text()}\n")

    def emit_close(self, sink: Sink) -> None:
        pass

    def release_payload(self) -> None:
        self.payload.destroy()


class Text(ShapeNode):
    """Text label. Owns exactly one Content child created from ``content``.

    SVG: <text x=".." y=".." font-size=".." fill=".." style="..">\\ncontent\\n</text>\\n

    """

    __slots__ = ()

    tag = "text"

    def __init__(self, x: int, y: int, font_size: int, content: str, fill: Color) -> None:
        super().__init__()
        self._attr("x", AttributeValue.integer(x))
        self._attr("y", AttributeValue.integer(y))
        self._attr("font-size", AttributeValue.integer(font_size))
        self._attr("fill", AttributeValue.string(fill))
        self._attr("style", AttributeValue.string(MONOSPACE_STYLE))
        self.add_child(Content(content))

    @property
    def content(self) -> Content:
        child = self.children[0]
        assert isinstance(child, Content)
        return child

    def emit_open(self, sink: Sink) -> None:
        self._open_tag(sink, ">\n")

    def emit_close(self, sink: Sink) -> None:
        write_to(sink, f"</{self.tag}>\n")


class SelfClosingShape(ShapeNode):
    """Shape written as a single ``<tag ... />`` followed by a newline.

    Leaf node: a child would land between ``/>`` and the newline.
    """

    __slots__ = ()

    def add_child(self, child: N) -> N:
        raise PreconditionError(f"<{self.tag}> cannot have children")

    def emit_open(self, sink: Sink) -> None:
        self._open_tag(sink, " />")

    def emit_close(self, sink: Sink) -> None:
        write_to(sink, "\n")


class Circle(SelfClosingShape):
    """Circle.

    SVG: <circle r="210.0000" cx="210" cy="210" stroke=".." fill=".." />

    """

    __slots__ = ()

    tag = "circle"

    def __init__(self, r: float, cx: int, cy: int, stroke: Color, fill: Color) -> None:
        super().__init__()
        self._attr("r", AttributeValue.coordinate(r))
        self._attr("cx", AttributeValue.integer(cx))
        self._attr("cy", AttributeValue.integer(cy))
        self._attr("stroke", AttributeValue.string(stroke))
        self._attr("fill", AttributeValue.string(fill))


class Line(SelfClosingShape):
    """Straight segment.

    SVG: <line x1=".." y1=".." x2=".." y2=".." stroke=".." />

    """

    __slots__ = ()

    tag = "line"

    def __init__(self, x1: float, y1: float, x2: float, y2: float, stroke: Color) -> None:
        super().__init__()
        self._attr("x1", AttributeValue.coordinate(x1))
        self._attr("y1", AttributeValue.coordinate(y1))
        self._attr("x2", AttributeValue.coordinate(x2))
        self._attr("y2", AttributeValue.coordinate(y2))
        self._attr("stroke", AttributeValue.string(stroke))


__all__ = [
    "Circle",
    "Color",
    "Content",
    "Line",
    "Root",
    "SelfClosingShape",
    "ShapeNode",
    "Text",
    "grow_capacity",
]
