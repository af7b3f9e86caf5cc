"""Event driven (SAX style) JSON parser."""

from __future__ import annotations

import re
import string
from abc import ABC, abstractmethod
from enum import Enum, auto

from jsondom.errors import MalformedJsonError

_NUMBER_RE = re.compile(r"-?[0-9]+(?:\.[0-9]+)?(?:[eE][+-]?[0-9]+)?")

_ESCAPES = {
    "n": "\n",
    "r": "\r",
    "\\": "\\",
    "/": "/",
    "t": "\t",
    "f": "\f",
    "b": "\b",
    '"': '"',
}

_LITERAL_START = "tfn-0123456789"


class _State(Enum):
    IDLE = auto()
    OBJECT = auto()
    ARRAY = auto()
    KEY = auto()
    COLON = auto()
    VALUE = auto()
    COMMA = auto()
    STRING = auto()
    STRING_ESCAPE_SEQUENCE = auto()
    UNICODE_CHAR = auto()
    BOOLEAN_OR_NULL_OR_NUMBER = auto()


def _decode(data: bytes) -> str:
    try:
        return data.decode("utf-8", "surrogatepass")
    except UnicodeDecodeError:
        return data.decode("utf-8", "surrogateescape")


class Parser(ABC):
    """Event driven JSON parser.

    Subclass it, override the ``on_*`` methods and call :meth:`feed`
    with the document, whole or in pieces.
    """

    def __init__(self) -> None:
        self._line = 1
        self._states: list[_State] = [_State.IDLE]
        self._buf = bytearray()
        self._unicode_char = 0
        self._unicode_digits = 0

    @abstractmethod
    def on_object_start(self) -> None:
        """Called when an object start ('{') has been parsed."""

    @abstractmethod
    def on_object_end(self) -> None:
        """Called when an object end ('}') has been parsed."""

    @abstractmethod
    def on_array_start(self) -> None:
        """Called when an array start ('[') has been parsed."""

    @abstractmethod
    def on_array_end(self) -> None:
        """Called when an array end (']') has been parsed."""

    @abstractmethod
    def on_key_parsed(self, key: str) -> None:
        """Called with the key of a key-value pair of an object."""

    @abstractmethod
    def on_string_parsed(self, value: str) -> None:
        """Called with a string value."""

    @abstractmethod
    def on_number_parsed(self, value: str) -> None:
        """Called with the text of a number value."""

    @abstractmethod
    def on_boolean_parsed(self, value: bool) -> None:
        """Called with a boolean value."""

    @abstractmethod
    def on_null_parsed(self) -> None:
        """Called when a null value has been parsed."""

    def feed(self, data: str | bytes | bytearray | memoryview) -> None:
        """Feed UTF-8 data (or text) to the parser."""
        if isinstance(data, str):
            data = data.encode("utf-8")
        for byte in bytes(data):
            self._HANDLERS[self._states[-1]](self, chr(byte))

    def _fail(self, char: str, state_name: str) -> None:
        raise MalformedJsonError(
            f"unexpected character '{char}' encountered while in {state_name}"
            f" state, line = {self._line}"
        )

    def _skip_space(self, c: str) -> bool:
        if c == "\n":
            self._line += 1
            return True
        return c in " \r\t"

    def _append(self, c: str) -> None:
        self._buf.append(ord(c))

    def _take(self) -> str:
        text = _decode(bytes(self._buf))
        self._buf.clear()
        return text

    def _parse_idle(self, c: str) -> None:
        if self._skip_space(c):
            return
        if c == "{":
            self._states.append(_State.OBJECT)
            self.on_object_start()
        else:
            self._fail(c, "idle")

    def _parse_object(self, c: str) -> None:
        if self._skip_space(c):
            return
        if c == "}":
            self._states.pop()
            self.on_object_end()
        elif c == '"':
            self._states.append(_State.KEY)
        else:
            self._fail(c, "object")

    def _parse_key(self, c: str) -> None:
        if c == "\n":
            self._line += 1
        if c in " \r\t\n\\":
            self._states.append(_State.STRING_ESCAPE_SEQUENCE)
        elif c == '"':
            self._states.pop()
            self.on_key_parsed(self._take())
            self._states.append(_State.COLON)
        else:
            self._append(c)

    def _parse_colon(self, c: str) -> None:
        if self._skip_space(c):
            return
        if c == ":":
            self._states[-1] = _State.VALUE
        else:
            self._fail(c, "colon")

    def _parse_value(self, c: str) -> None:
        if self._skip_space(c):
            return
        if c == "{":
            self._states[-1] = _State.COMMA
            self._states.append(_State.OBJECT)
            self.on_object_start()
        elif c == "[":
            self.on_array_start()
            self._states[-1] = _State.COMMA
            self._states.append(_State.ARRAY)
        elif c == '"':
            self._states[-1] = _State.COMMA
            self._states.append(_State.STRING)
        elif c in _LITERAL_START:
            self._append(c)
            self._states[-1] = _State.COMMA
            self._states.append(_State.BOOLEAN_OR_NULL_OR_NUMBER)
        else:
            self._fail(c, "value")

    def _parse_array(self, c: str) -> None:
        if self._skip_space(c):
            return
        if c == "{":
            self._states.extend((_State.COMMA, _State.OBJECT))
            self.on_object_start()
        elif c == "[":
            self._states.extend((_State.COMMA, _State.ARRAY))
            self.on_array_start()
        elif c == '"':
            self._states.extend((_State.COMMA, _State.STRING))
        elif c == "]":
            self._states.pop()
            self.on_array_end()
        elif c in _LITERAL_START:
            self._append(c)
            self._states.extend((_State.COMMA, _State.BOOLEAN_OR_NULL_OR_NUMBER))
        else:
            self._fail(c, "array")

    def _parse_string(self, c: str) -> None:
        if c == "\\":
            self._states.append(_State.STRING_ESCAPE_SEQUENCE)
        elif c == '"':
            self._states.pop()
            self.on_string_parsed(self._take())
        else:
            if c == "\n":
                self._line += 1
            self._append(c)

    def _parse_comma(self, c: str) -> None:
        if self._skip_space(c):
            return
        if c == ",":
            self._states.pop()
        elif c == "}":
            self._states.pop()
            if self._states[-1] is not _State.OBJECT:
                self._fail(c, "comma")
            self._states.pop()
            self.on_object_end()
        elif c == "]":
            self._states.pop()
            if self._states[-1] is not _State.ARRAY:
                self._fail(c, "comma")
            self._states.pop()
            self.on_array_end()
        else:
            self._fail(c, "comma")

    def _parse_boolean_or_null_or_number(self, c: str) -> None:
        if c == "\n":
            self._line += 1
        if c in " \r\t\n":
            self._notify_literal()
            self._states.pop()
        elif c == ",":
            self._notify_literal()
            del self._states[-2:]
        elif c == "]":
            self._notify_literal()
            self.on_array_end()
            del self._states[-2:]
            if self._states[-1] is not _State.ARRAY:
                self._fail("}", "boolean or null or number")
            self._states.pop()
        elif c == "}":
            self._notify_literal()
            self.on_object_end()
            del self._states[-2:]
            if self._states[-1] is not _State.OBJECT:
                self._fail("}", "boolean or null or number")
            self._states.pop()
        else:
            self._append(c)

    def _notify_literal(self) -> None:
        text = _decode(bytes(self._buf))
        if text == "true":
            self.on_boolean_parsed(True)
        elif text == "false":
            self.on_boolean_parsed(False)
        elif text == "null":
            self.on_null_parsed()
        elif _NUMBER_RE.fullmatch(text):
            self.on_number_parsed(text)
        else:
            raise MalformedJsonError(
                f"unexpected string ({text}) encountered while parsing"
                f" boolean or null or number at line {self._line}"
            )
        self._buf.clear()

    def _parse_string_escape_sequence(self, c: str) -> None:
        if c in _ESCAPES:
            self._append(_ESCAPES[c])
            self._states.pop()
        elif c == "u":
            self._unicode_char = 0
            self._unicode_digits = 0
            self._states[-1] = _State.UNICODE_CHAR
        else:
            self._fail(c, "string escape sequence")

    def _parse_unicode_char(self, c: str) -> None:
        if c not in string.hexdigits:
            self._fail(c, "unicode character")
        self._unicode_char |= int(c, 16) << ((3 - self._unicode_digits) * 4)
        self._unicode_digits += 1
        if self._unicode_digits == 4:
            if self._unicode_char != 0:
                self._buf.extend(chr(self._unicode_char).encode("utf-8", "surrogatepass"))
            self._states.pop()

    _HANDLERS = {
        _State.IDLE: _parse_idle,
        _State.OBJECT: _parse_object,
        _State.ARRAY: _parse_array,
        _State.KEY: _parse_key,
        _State.COLON: _parse_colon,
        _State.VALUE: _parse_value,
        _State.COMMA: _parse_comma,
        _State.STRING: _parse_string,
        _State.STRING_ESCAPE_SEQUENCE: _parse_string_escape_sequence,
        _State.UNICODE_CHAR: _parse_unicode_char,
        _State.BOOLEAN_OR_NULL_OR_NUMBER: _parse_boolean_or_null_or_number,
    }