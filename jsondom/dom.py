"""JSON document object model: values, reading and writing."""

from __future__ import annotations

import io
import os
from enum import Enum
from typing import IO, Any, Union

from jsondom.errors import UnexpectedValueType
from jsondom.parser import Parser
from jsondom.string_number import StringNumber

_READ_CHUNK_SIZE = 4 * 1024

_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "/": "\\/",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


class ValueType(Enum):
    """The six value types that JSON defines."""

    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    OBJECT = "object"
    ARRAY = "array"


def _default_payload(kind: ValueType) -> Any:
    if kind is ValueType.NULL:
        return None
    if kind is ValueType.BOOLEAN:
        return False
    if kind is ValueType.NUMBER:
        return StringNumber(0)
    if kind is ValueType.STRING:
        return ""
    if kind is ValueType.OBJECT:
        return {}
    return []


class Value:
    """A JSON value together with its type.

    Constructing from a ValueType gives the default value of that type:
    null, false, 0, "", {} or [].
    """

    __slots__ = ("_type", "_payload")
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, value: Any = None) -> None:
        if isinstance(value, Value):
            self._type, self._payload = value._type, value._payload
        elif isinstance(value, ValueType):
            self._type, self._payload = value, _default_payload(value)
        elif value is None:
            self._type, self._payload = ValueType.NULL, None
        elif isinstance(value, bool):
            self._type, self._payload = ValueType.BOOLEAN, value
        elif isinstance(value, StringNumber):
            self._type, self._payload = ValueType.NUMBER, value
        elif isinstance(value, (int, float)):
            self._type, self._payload = ValueType.NUMBER, StringNumber(value)
        elif isinstance(value, str):
            self._type, self._payload = ValueType.STRING, value
        elif isinstance(value, dict):
            self._type = ValueType.OBJECT
            self._payload = {str(k): _as_value(v) for k, v in value.items()}
        elif isinstance(value, (list, tuple)):
            self._type = ValueType.ARRAY
            self._payload = [_as_value(v) for v in value]
        else:
            raise TypeError(f"cannot make a JSON value from {type(value).__name__}")

    @property
    def type(self) -> ValueType:
        """The type of the stored value."""
        return self._type

    def is_null(self) -> bool:
        return self._type is ValueType.NULL

    def is_boolean(self) -> bool:
        return self._type is ValueType.BOOLEAN

    def is_number(self) -> bool:
        return self._type is ValueType.NUMBER

    def is_string(self) -> bool:
        return self._type is ValueType.STRING

    def is_array(self) -> bool:
        return self._type is ValueType.ARRAY

    def is_object(self) -> bool:
        return self._type is ValueType.OBJECT

    def _expect(self, kind: ValueType) -> Any:
        if self._type is not kind:
            raise UnexpectedValueType(
                f"jsondom: could not access {kind.value} value, stored value"
                f" is of another type ({self._type.value})"
            )
        return self._payload

    def boolean(self) -> bool:
        """The stored boolean; raises UnexpectedValueType otherwise."""
        return self._expect(ValueType.BOOLEAN)

    def number(self) -> StringNumber:
        """The stored number; raises UnexpectedValueType otherwise."""
        return self._expect(ValueType.NUMBER)

    def string(self) -> str:
        """The stored string; raises UnexpectedValueType otherwise."""
        return self._expect(ValueType.STRING)

    def array(self) -> list[Value]:
        """The stored list of values; raises UnexpectedValueType otherwise."""
        return self._expect(ValueType.ARRAY)

    def object(self) -> dict[str, Value]:
        """The stored mapping of keys to values; raises UnexpectedValueType otherwise."""
        return self._expect(ValueType.OBJECT)

    def to_string(self) -> str:
        """Serialize this value, which must be an object, to compact JSON."""
        out = io.StringIO()
        write(out, self)
        return out.getvalue()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return self._type is other._type and self._payload == other._payload

    def __repr__(self) -> str:
        return f"Value({self._payload!r})"


def _as_value(item: Any) -> Value:
    return item if isinstance(item, Value) else Value(item)


class _DomParser(Parser):
    def __init__(self) -> None:
        super().__init__()
        self.doc = Value(ValueType.ARRAY)
        self._key = ""
        self._stack: list[Value] = [self.doc]

    def _add(self, value: Value) -> None:
        back = self._stack[-1]
        if back.is_array():
            back.array().append(value)
        else:
            back.object()[self._key] = value
            self._key = ""

    def _open(self, kind: ValueType) -> None:
        container = Value(kind)
        self._add(container)
        self._stack.append(container)

    def on_object_start(self) -> None:
        self._open(ValueType.OBJECT)

    def on_object_end(self) -> None:
        self._stack.pop()

    def on_array_start(self) -> None:
        self._open(ValueType.ARRAY)

    def on_array_end(self) -> None:
        self._stack.pop()

    def on_key_parsed(self, key: str) -> None:
        self._key = key

    def on_string_parsed(self, value: str) -> None:
        self._add(Value(value))

    def on_number_parsed(self, value: str) -> None:
        self._add(Value(StringNumber(value)))

    def on_boolean_parsed(self, value: bool) -> None:
        self._add(Value(value))

    def on_null_parsed(self) -> None:
        self._add(Value())


Source = Union[str, bytes, bytearray, memoryview, "os.PathLike[str]", IO[Any], None]


def read(source: Source) -> Value:
    """Read a JSON document.

    The source may be JSON text, UTF-8 bytes, a path-like object naming
    a file, or an open file object. None gives a null value.
    """
    if source is None:
        return Value()
    parser = _DomParser()
    if isinstance(source, (str, bytes, bytearray, memoryview)):
        parser.feed(source)
    elif isinstance(source, os.PathLike):
        with open(source, "rb") as fh:
            _feed_from(parser, fh)
    else:
        _feed_from(parser, source)

    documents = parser.doc.array()
    return documents[0] if documents else Value()


def _feed_from(parser: Parser, fh: IO[Any]) -> None:
    while chunk := fh.read(_READ_CHUNK_SIZE):
        parser.feed(chunk)


def _escape(text: str) -> str:
    return "".join(_ESCAPES.get(c, c) for c in text)


def _serialize(value: Value):
    kind = value.type
    if kind is ValueType.NULL:
        yield "null"
    elif kind is ValueType.BOOLEAN:
        yield "true" if value.boolean() else "false"
    elif kind is ValueType.NUMBER:
        yield str(value.number())
    elif kind is ValueType.STRING:
        yield '"' + _escape(value.string()) + '"'
    elif kind is ValueType.ARRAY:
        yield "["
        for index, item in enumerate(value.array()):
            if index:
                yield ","
            yield from _serialize(item)
        yield "]"
    else:
        yield "{"
        for index, (key, item) in enumerate(sorted(value.object().items())):
            if index:
                yield ","
            yield '"' + _escape(key) + '":'
            yield from _serialize(item)
        yield "}"


def _encode(text: str) -> bytes:
    try:
        return text.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError:
        return text.encode("utf-8", "surrogatepass")


def _is_binary(fh: Any) -> bool:
    if isinstance(fh, io.TextIOBase):
        return False
    if isinstance(fh, (io.RawIOBase, io.BufferedIOBase)):
        return True
    return "b" in getattr(fh, "mode", "")


def write(file: Any, value: Value) -> None:
    """Write a JSON document whose root is an object.

    The file may be a path-like object (the file is created or truncated)
    or an open text or binary file object.
    """
    if not value.is_object():
        raise ValueError("tried to write JSON with non-object root element")
    text = "".join(_serialize(value))
    if isinstance(file, (str, os.PathLike)):
        with open(file, "wb") as fh:
            fh.write(_encode(text))
    elif _is_binary(file):
        file.write(_encode(text))
    else:
        file.write(text)