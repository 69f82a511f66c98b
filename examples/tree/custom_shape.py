"""Custom shape — add a <rect> variant by implementing the emit hooks."""

from clockface import AttributeValue, Root, SelfClosingShape, render_to_string


class Rect(SelfClosingShape):
    """Rectangle: <rect x=".." y=".." width=".." height=".." fill=".." />"""

    __slots__ = ()

    tag = "rect"

    def __init__(self, x: float, y: float, width: float, height: float, fill: str) -> None:
        super().__init__()
        self.attributes.append("x", AttributeValue.coordinate(x))
        self.attributes.append("y", AttributeValue.coordinate(y))
        self.attributes.append("width", AttributeValue.coordinate(width))
        self.attributes.append("height", AttributeValue.coordinate(height))
        self.attributes.append("fill", AttributeValue.string(fill))


with Root(100, 100) as root:
    root.add_child(Rect(10, 10, 80, 80, "#20212E"))
    print(render_to_string(root))
