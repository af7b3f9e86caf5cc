"""JSON number kept in its textual form, with conversions to numeric types."""

from __future__ import annotations

import math
import re
import struct

_WS = r"[ \t\n\v\f\r]*"

_INT_RE = re.compile(
    _WS + r"([+-]?)(?:0[xX]([0-9a-fA-F]+)|(0[0-7]*)|([1-9][0-9]*))"
)

_HEX_FLOAT_RE = re.compile(
    _WS
    + r"([+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?[0-9]+)?)"
)

_SPECIAL_FLOAT_RE = re.compile(
    _WS + r"([+-]?)(infinity|inf|nan(?:\([0-9A-Za-z_]*\))?)", re.IGNORECASE
)

_DEC_FLOAT_RE = re.compile(
    _WS + r"([+-]?(?:([0-9]+\.?[0-9]*|\.[0-9]+))(?:[eE][+-]?[0-9]+)?)"
)

_INT32_MIN, _INT32_MAX = -(2**31), 2**31 - 1
_INT64_MIN, _INT64_MAX = -(2**63), 2**63 - 1
_UINT64_MAX = 2**64 - 1
_UINT32_MASK = 2**32 - 1


def _parse_integer(text: str) -> tuple[bool, int]:
    """Parse the leading integer of text with automatic base detection.

    Returns the sign flag and the magnitude. A "0x" prefix selects base 16,
    a leading zero selects base 8, anything else base 10.
    """
    match = _INT_RE.match(text)
    if match is None:
        raise ValueError(f"no integer conversion could be performed on {text!r}")
    sign, hex_digits, oct_digits, dec_digits = match.groups()
    if hex_digits is not None:
        magnitude = int(hex_digits, 16)
    elif oct_digits is not None:
        magnitude = int(oct_digits, 8)
    else:
        magnitude = int(dec_digits, 10)
    return sign == "-", magnitude


def _parse_unsigned(text: str) -> int:
    negative, magnitude = _parse_integer(text)
    if magnitude > _UINT64_MAX:
        raise OverflowError(f"number {text!r} is out of unsigned 64-bit range")
    return (-magnitude) % (_UINT64_MAX + 1) if negative else magnitude


def _parse_double(text: str) -> float:
    """Parse the leading floating point number of text."""
    match = _HEX_FLOAT_RE.match(text)
    if match is not None:
        return float.fromhex(match.group(1))

    match = _SPECIAL_FLOAT_RE.match(text)
    if match is not None:
        sign, word = match.groups()
        result = math.nan if word.lower().startswith("nan") else math.inf
        return -result if sign == "-" else result

    match = _DEC_FLOAT_RE.match(text)
    if match is None:
        raise ValueError(f"no floating point conversion could be performed on {text!r}")
    literal, mantissa = match.groups()
    result = float(literal)
    if math.isinf(result):
        raise OverflowError(f"number {text!r} is out of double range")
    if result == 0.0 and any(c in "123456789" for c in mantissa):
        raise OverflowError(f"number {text!r} underflows double range")
    return result


def _round_to_single(value: float) -> float:
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        raise OverflowError(f"number {value!r} is out of float range") from None


class StringNumber:
    """A JSON number stored as text, convertible to integer and float types."""

    __slots__ = ("_string",)

    def __init__(self, value: str | int | float = "") -> None:
        if isinstance(value, bool):
            raise TypeError("a boolean cannot be used as a JSON number")
        if isinstance(value, str):
            self._string = value
        elif isinstance(value, int):
            self._string = "%d" % value
        elif isinstance(value, float):
            self._string = "%.17G" % value
        else:
            raise TypeError(f"cannot make a JSON number from {type(value).__name__}")

    @classmethod
    def from_float(cls, value: float) -> StringNumber:
        """Make a number from a value with single precision."""
        return cls("%.8G" % _round_to_single(float(value)))

    @classmethod
    def from_double(cls, value: float) -> StringNumber:
        """Make a number from a value with double precision."""
        return cls("%.17G" % float(value))

    @property
    def string(self) -> str:
        """The underlying text of the number."""
        return self._string

    def to_int32(self) -> int:
        negative, magnitude = _parse_integer(self._string)
        result = -magnitude if negative else magnitude
        if not _INT32_MIN <= result <= _INT32_MAX:
            raise OverflowError(f"number {self._string!r} is out of 32-bit range")
        return result

    def to_uint32(self) -> int:
        return _parse_unsigned(self._string) & _UINT32_MASK

    def to_int64(self) -> int:
        negative, magnitude = _parse_integer(self._string)
        result = -magnitude if negative else magnitude
        if not _INT64_MIN <= result <= _INT64_MAX:
            raise OverflowError(f"number {self._string!r} is out of 64-bit range")
        return result

    def to_uint64(self) -> int:
        return _parse_unsigned(self._string)

    def to_float(self) -> float:
        result = _parse_double(self._string)
        if math.isinf(result) or math.isnan(result):
            return result
        single = _round_to_single(result)
        if single == 0.0 and result != 0.0:
            raise OverflowError(f"number {self._string!r} underflows float range")
        return single

    def to_double(self) -> float:
        return _parse_double(self._string)

    def __str__(self) -> str:
        return self._string

    def __repr__(self) -> str:
        return f"StringNumber({self._string!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StringNumber):
            return NotImplemented
        return self._string == other._string

    def __hash__(self) -> int:
        return hash(self._string)