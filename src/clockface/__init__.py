"""
clockface — SVG analog clock renderer

Builds a tree of shape nodes and serializes it depth-first as SVG. The tree
core is generic: typed attributes, owned children, one traversal for every
node variant. The clock layout on top of it is a small application.

Quick Start:
    >>> from clockface import ClockTime, render_clock
    >>> svg = render_clock(ClockTime(13, 45, 7))
    >>> svg.startswith("<svg")
    True

    >>> # Or assemble a tree by hand
    >>> from clockface import Circle, Root, render_to_string
    >>> with Root(420, 420) as root:
    ...     _ = root.add_child(Circle(210, 210, 210, "#A9B1D6", "#20212E"))
    ...     print(render_to_string(root))
    <svg width="420" height="420" xmlns="http://www.w3.org/2000/svg" version="1.1">
    <circle r="210.0000" cx="210" cy="210" stroke="#A9B1D6" fill="#20212E" />
    </svg>

Command line:
    echo "13 45 7" | python -m clockface -o clock.svg
"""

__version__ = "0.3.0"

from clockface.attributes import Attribute, AttributeKind, AttributeList, AttributeValue
from clockface.clock import build_clock, render_clock
from clockface.config import (
    ClockConfig,
    config_context,
    get_config,
    reset_config,
    set_config,
)
from clockface.errors import (
    AllocationError,
    ClockfaceError,
    ConfigError,
    PreconditionError,
    ReleasedError,
    RenderError,
    SinkWriteError,
    TimeInputError,
)
from clockface.managed_string import ManagedString
from clockface.nodes import Circle, Content, Line, Root, SelfClosingShape, ShapeNode, Text
from clockface.renderer import count_nodes, render, render_to_string, write_document
from clockface.sinks import BufferSink, Sink, StreamSink
from clockface.timeinput import ClockTime, parse_time

__all__ = [
    # Core
    "ManagedString",
    "Attribute",
    "AttributeKind",
    "AttributeList",
    "AttributeValue",
    "ShapeNode",
    "SelfClosingShape",
    "Root",
    "Content",
    "Text",
    "Circle",
    "Line",
    # Rendering
    "Sink",
    "BufferSink",
    "StreamSink",
    "render",
    "render_to_string",
    "write_document",
    "count_nodes",
    # Clock
    "ClockTime",
    "parse_time",
    "build_clock",
    "render_clock",
    # Config
    "ClockConfig",
    "get_config",
    "set_config",
    "reset_config",
    "config_context",
    # Errors
    "ClockfaceError",
    "AllocationError",
    "ConfigError",
    "PreconditionError",
    "ReleasedError",
    "RenderError",
    "SinkWriteError",
    "TimeInputError",
    "__version__",
]
