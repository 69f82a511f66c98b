"""Tests for the traversal engine and sinks."""

import io

import pytest

from clockface.errors import RenderError, SinkWriteError
from clockface.nodes import Circle, Line, Root, SelfClosingShape, Text
from clockface.renderer import count_nodes, render, render_to_string, write_document
from clockface.sinks import BufferSink, StreamSink

FG = "#A9B1D6"
BG = "#20212E"

SVG_OPEN = '<svg width="420" height="420" xmlns="http://www.w3.org/2000/svg" version="1.1">\n'


class RejectingSink:
    """Sink that rejects every write."""

    def write(self, text: str) -> int:
        raise OSError("disk full")


class FailOnSink:
    """Sink that accepts writes until one starts with ``prefix``."""

    def __init__(self, prefix: str) -> None:
        self.prefix = prefix
        self.parts: list[str] = []

    def write(self, text: str) -> int:
        if text.startswith(self.prefix):
            raise OSError(f"refusing {text!r}")
        self.parts.append(text)
        return len(text)


class Exploding(SelfClosingShape):
    """Shape whose open hook fails with a non-sink error."""

    __slots__ = ()

    tag = "boom"

    def emit_open(self, sink) -> None:  # type: ignore[no-untyped-def]
        raise ValueError("bad geometry")


class TestDocuments:
    def test_root_with_circle(self) -> None:
        with Root(420, 420) as root:
            root.add_child(Circle(210, 210, 210, FG, BG))
            assert render_to_string(root) == (
                SVG_OPEN
                + '<circle r="210.0000" cx="210" cy="210" stroke="#A9B1D6" fill="#20212E" />\n'
                + "</svg>"
            )

    def test_text_wraps_content(self) -> None:
        with Text(10, 20, 26, "XXIV", FG) as text:
            assert render_to_string(text) == (
                '<text x="10" y="20" font-size="26" fill="#A9B1D6" '
                'style="font-family: monospace;">\n'
                "XXIV\n"
                "</text>\n"
            )

    def test_empty_root(self) -> None:
        with Root(420, 420) as root:
            assert render_to_string(root) == SVG_OPEN + "</svg>"

    def test_line(self) -> None:
        with Line(0, 0.5, 10, 20.125, "#FF7A9377") as line:
            assert render_to_string(line) == (
                '<line x1="0.0000" y1="0.5000" x2="10.0000" y2="20.1250" stroke="#FF7A9377" />\n'
            )

    def test_children_in_insertion_order(self) -> None:
        with Root(420, 420) as root:
            root.add_child(Line(1, 1, 1, 1, "#111"))
            root.add_child(Text(0, 0, 10, "mid", FG))
            root.add_child(Line(2, 2, 2, 2, "#222"))
            out = render_to_string(root)
        assert out.index("#111") < out.index("mid") < out.index("#222")

    def test_nested_roots(self) -> None:
        with Root(2, 2) as outer:
            inner = outer.add_child(Root(1, 1))
            inner.add_child(Line(0, 0, 1, 1, FG))
            out = render_to_string(outer)
        assert out.count("<svg ") == 2
        assert out.endswith("</svg></svg>")

    def test_render_is_repeatable(self) -> None:
        with Root(420, 420) as root:
            root.add_child(Circle(210, 210, 210, FG, BG))
            assert render_to_string(root) == render_to_string(root)

    def test_count_nodes(self) -> None:
        with Root(1, 1) as root:
            root.add_child(Text(0, 0, 1, "x", FG))
            root.add_child(Line(0, 0, 1, 1, FG))
            assert count_nodes(root) == 4

    def test_deep_nesting(self) -> None:
        with Root(1, 1) as root:
            current = root
            for _ in range(2000):
                current = current.add_child(Root(1, 1))
            out = render_to_string(root)
        assert out.count("<svg ") == 2001
        assert out.endswith("</svg>" * 2001)


class TestFailures:
    def test_rejecting_sink_raises_render_error(self) -> None:
        with Root(420, 420) as root:
            root.add_child(Circle(210, 210, 210, FG, BG))
            with pytest.raises(RenderError) as excinfo:
                render(root, RejectingSink())
        assert excinfo.value.tag == "svg"
        assert isinstance(excinfo.value.__cause__, SinkWriteError)

    def test_no_sibling_after_failing_node(self) -> None:
        sink = FailOnSink("<line")
        with Root(420, 420) as root:
            root.add_child(Circle(1, 1, 1, "#first", BG))
            root.add_child(Line(0, 0, 1, 1, FG))
            root.add_child(Circle(2, 2, 2, "#second", BG))
            with pytest.raises(RenderError) as excinfo:
                render(root, sink)
        written = "".join(sink.parts)
        assert "#first" in written
        assert "#second" not in written
        assert "</svg>" not in written
        assert excinfo.value.tag == "line"

    def test_hook_error_is_wrapped(self) -> None:
        sink = BufferSink()
        with Root(1, 1) as root:
            root.add_child(Exploding())
            root.add_child(Circle(2, 2, 2, "#after", BG))
            with pytest.raises(RenderError, match="bad geometry") as excinfo:
                render(root, sink)
        assert excinfo.value.tag == "boom"
        assert isinstance(excinfo.value.__cause__, ValueError)
        assert "#after" not in sink.getvalue()

    def test_closed_stream(self) -> None:
        stream = io.StringIO()
        stream.close()
        with Root(1, 1) as root, pytest.raises(RenderError):
            render(root, StreamSink(stream))

    def test_destroyed_tree_cannot_render(self) -> None:
        root = Root(1, 1)
        root.destroy()
        with pytest.raises(RenderError):
            render_to_string(root)

    def test_write_document_leaves_no_partial_file(self, tmp_path, monkeypatch) -> None:  # type: ignore[no-untyped-def]
        target = tmp_path / "clock.svg"
        target.write_text("previous", encoding="utf-8")

        def broken_emit(self, sink):  # type: ignore[no-untyped-def]
            raise SinkWriteError("boom")

        monkeypatch.setattr(Line, "emit_open", broken_emit)
        with Root(1, 1) as root:
            root.add_child(Line(0, 0, 1, 1, FG))
            with pytest.raises(RenderError):
                write_document(root, target)
        assert target.read_text(encoding="utf-8") == "previous"


class TestSinks:
    def test_stream_sink_counts(self) -> None:
        stream = io.StringIO()
        sink = StreamSink(stream)
        with Root(1, 1) as root:
            render(root, sink)
        assert stream.getvalue().startswith("<svg ")
        assert sink.written == len(stream.getvalue())

    def test_buffer_sink(self) -> None:
        sink = BufferSink()
        sink.write("ab")
        sink.write("")
        sink.write("c")
        assert sink.getvalue() == "abc"
        assert len(sink) == 3
        assert not sink.clear()

    def test_write_document(self, tmp_path) -> None:  # type: ignore[no-untyped-def]
        with Root(420, 420) as root:
            root.add_child(Circle(210, 210, 210, FG, BG))
            path = write_document(root, tmp_path / "out.svg")
        assert path.read_text(encoding="utf-8").startswith(SVG_OPEN)
