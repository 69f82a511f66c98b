"""Typed attributes attached to shape nodes.

An attribute is a name and a typed value. Values are a closed set of kinds:

- INTEGER: rendered base-10 (``width="420"``)
- FLOAT: single precision, one fractional digit (``version="1.1"``)
- COORDINATE: single precision, four fractional digits (``r="210.0000"``)
- STRING: raw UTF-8 bytes, no escaping (``fill="#20212E"``)

Every stored value is an owned copy. String values are duplicated into a
fresh ManagedString, so an attribute never aliases the caller's buffer.

Attribute values are not escaped on output. A value containing ``"`` or
``<`` produces broken markup; callers are responsible for passing safe text.

Example:
    >>> attrs = AttributeList()
    >>> _ = attrs.append("width", AttributeValue.integer(420))
    >>> _ = attrs.append("version", AttributeValue.float_(1.1))
    >>> attrs.render()
    'width="420" version="1.1"'

"""

from __future__ import annotations

import struct
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from clockface.errors import PreconditionError, ReleasedError
from clockface.managed_string import ManagedString
from clockface.sinks import BufferSink, Sink, write_to


def to_single(value: float) -> float:
    """Round a Python float to the nearest IEEE 754 single-precision value."""
    return struct.unpack("<f", struct.pack("<f", value))[0]


class AttributeKind(Enum):
    """Kind of an attribute value."""

    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"
    COORDINATE = "coordinate"


@dataclass(frozen=True, slots=True)
class AttributeValue:
    """A typed attribute value.

    Build values with the typed constructors rather than directly; they check
    the Python type so a value can never be stored under the wrong kind.

    Attributes:
        kind: Which variant this value is
        value: int for INTEGER, float for FLOAT/COORDINATE, ManagedString for STRING

    """

    kind: AttributeKind
    value: int | float | ManagedString

    @classmethod
    def integer(cls, value: int) -> AttributeValue:
        if isinstance(value, bool) or not isinstance(value, int):
            raise PreconditionError(f"integer attribute needs int, got {type(value).__name__}")
        return cls(AttributeKind.INTEGER, value)

    @classmethod
    def float_(cls, value: float) -> AttributeValue:
        return cls(AttributeKind.FLOAT, _single(value, "float"))

    @classmethod
    def coordinate(cls, value: float) -> AttributeValue:
        return cls(AttributeKind.COORDINATE, _single(value, "coordinate"))

    @classmethod
    def string(cls, value: str | bytes | ManagedString) -> AttributeValue:
        """Wrap text in a STRING value holding its own copy."""
        if value is None:
            raise PreconditionError("string attribute value must not be None")
        return cls(AttributeKind.STRING, ManagedString.from_value(value))

    def copy(self) -> AttributeValue:
        """Return an owned copy (strings are duplicated, scalars shared)."""
        if self.kind is AttributeKind.STRING:
            return AttributeValue(self.kind, self._string().duplicate())
        return AttributeValue(self.kind, self.value)

    def render(self) -> str:
        """Return the textual form used inside the quotes."""
        match self.kind:
            case AttributeKind.INTEGER:
                return str(self.value)
            case AttributeKind.FLOAT:
                return f"{self.value:.1f}"
            case AttributeKind.COORDINATE:
                return f"{self.value:.4f}"
            case AttributeKind.STRING:
                return self._string().text()
        raise AssertionError(f"unhandled attribute kind {self.kind}")

    def release(self) -> None:
        if self.kind is AttributeKind.STRING:
            self._string().destroy()

    def _string(self) -> ManagedString:
        assert isinstance(self.value, ManagedString)
        return self.value


def _single(value: float, kind: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise PreconditionError(f"{kind} attribute needs a number, got {type(value).__name__}")
    try:
        return to_single(float(value))
    except OverflowError:
        raise PreconditionError(
            f"{kind} attribute {value!r} does not fit single precision"
        ) from None


@dataclass(frozen=True, slots=True)
class Attribute:
    """A name/value pair owned by an AttributeList."""

    name: ManagedString
    value: AttributeValue

    def render(self) -> str:
        return f'{self.name.text()}="{self.value.render()}"'


class AttributeList:
    """Insertion-ordered attributes of one node.

    Order is observable: ``serialize`` writes attributes exactly in the order
    they were appended.

    Thread Safety:
        Owned by a single node; not meant to be shared.

    """

    __slots__ = ("_items", "_version", "_released")

    def __init__(self) -> None:
        self._items: list[Attribute] = []
        self._version = 0
        self._released = False

    def append(self, name: str, value: AttributeValue) -> Attribute:
        """Append a copy of ``value`` under ``name``.

        Args:
            name: Attribute name (non-empty)
            value: Typed value; copied, the caller keeps ownership of its own

        Returns:
            The stored Attribute

        Raises:
            PreconditionError: If name is empty or value is not an AttributeValue
            ReleasedError: If the list was already destroyed
        """
        if self._released:
            raise ReleasedError("AttributeList")
        if not name:
            raise PreconditionError("attribute name must be a non-empty string")
        if not isinstance(value, AttributeValue):
            raise PreconditionError(
                f"attribute {name!r} needs an AttributeValue, got {type(value).__name__}"
            )
        attribute = Attribute(ManagedString.from_value(name), value.copy())
        self._items.append(attribute)
        self._version += 1
        return attribute

    def destroy_all(self) -> None:
        """Release every name and owned value, leaving the list empty."""
        for attribute in self._items:
            attribute.name.destroy()
            attribute.value.release()
        self._items.clear()
        self._version += 1
        self._released = True

    def __iter__(self) -> Iterator[Attribute]:
        version = self._version
        for attribute in self._items:
            if self._version != version:
                raise RuntimeError("AttributeList changed during iteration")
            yield attribute
            if self._version != version:
                raise RuntimeError("AttributeList changed during iteration")

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    @property
    def released(self) -> bool:
        return self._released

    def names(self) -> list[str]:
        return [attribute.name.text() for attribute in self]

    def get(self, name: str) -> AttributeValue | None:
        """Return the first value stored under ``name``, or None."""
        for attribute in self:
            if attribute.name.text() == name:
                return attribute.value
        return None

    def serialize(self, sink: Sink) -> None:
        """Write ``name="value"`` pairs separated by single spaces.

        An empty list writes nothing.
        """
        first = True
        for attribute in self:
            if not first:
                write_to(sink, " ")
            write_to(sink, attribute.render())
            first = False

    def render(self) -> str:
        """Return what ``serialize`` would write."""
        sink = BufferSink()
        self.serialize(sink)
        return sink.getvalue()

    def __repr__(self) -> str:
        if self._released:
            return "AttributeList(<released>)"
        return f"AttributeList({self.render()!r})"
