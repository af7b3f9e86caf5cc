import pytest

from jsondom.errors import MalformedJsonError
from jsondom.parser import Parser


class Recorder(Parser):
    def __init__(self):
        super().__init__()
        self.events = []

    def on_object_start(self):
        self.events.append(("object_start",))

    def on_object_end(self):
        self.events.append(("object_end",))

    def on_array_start(self):
        self.events.append(("array_start",))

    def on_array_end(self):
        self.events.append(("array_end",))

    def on_key_parsed(self, key):
        self.events.append(("key", key))

    def on_string_parsed(self, value):
        self.events.append(("string", value))

    def on_number_parsed(self, value):
        self.events.append(("number", value))

    def on_boolean_parsed(self, value):
        self.events.append(("boolean", value))

    def on_null_parsed(self):
        self.events.append(("null",))


SAMPLE = """
    {
        "name1": null,
        "name2" : ["hello", "world", false, true, null, 13]
    }
"""

SAMPLE_EVENTS = [
    ("object_start",),
    ("key", "name1"),
    ("null",),
    ("key", "name2"),
    ("array_start",),
    ("string", "hello"),
    ("string", "world"),
    ("boolean", False),
    ("boolean", True),
    ("null",),
    ("number", "13"),
    ("array_end",),
    ("object_end",),
]


def test_sample_events():
    recorder = Recorder()
    Parser.feed(recorder, SAMPLE)
    assert recorder.events == SAMPLE_EVENTS


def test_byte_by_byte_feed_gives_same_events():
    recorder = Recorder()
    for ch in SAMPLE.encode("utf-8"):
        Parser.feed(recorder, bytes([ch]))
    assert recorder.events == SAMPLE_EVENTS


def test_bytes_and_str_give_same_events():
    text = '{"a": "x", "b": [1, {"c": true}]}'
    from_str = Recorder()
    Parser.feed(from_str, text)
    from_bytes = Recorder()
    Parser.feed(from_bytes, text.encode("utf-8"))
    from_bytearray = Recorder()
    Parser.feed(from_bytearray, bytearray(text.encode("utf-8")))
    assert from_bytes.events == from_str.events
    assert from_bytearray.events == from_str.events
    assert from_str.events[:3] == [("object_start",), ("key", "a"), ("string", "x")]


def test_nested_containers():
    recorder = Recorder()
    Parser.feed(recorder, '{"a":{"b":[[]]}}')
    assert recorder.events == [
        ("object_start",),
        ("key", "a"),
        ("object_start",),
        ("key", "b"),
        ("array_start",),
        ("array_start",),
        ("array_end",),
        ("array_end",),
        ("object_end",),
        ("object_end",),
    ]


def test_several_top_level_objects():
    recorder = Recorder()
    Parser.feed(recorder, "{} {}")
    assert recorder.events == [
        ("object_start",),
        ("object_end",),
        ("object_start",),
        ("object_end",),
    ]


def test_string_escapes():
    recorder = Recorder()
    Parser.feed(recorder, r'{"s": "a\nb\t\"\\\/\r\f\b"}')
    assert recorder.events[2] == ("string", 'a\nb\t"\\/\r\f\b')


def test_unicode_escape():
    recorder = Recorder()
    Parser.feed(recorder, r'{"s": "caf\u00e9"}')
    assert recorder.events[2] == ("string", "café")


def test_unicode_escape_of_zero_is_dropped():
    recorder = Recorder()
    Parser.feed(recorder, r'{"s": "a\u0000b"}')
    assert recorder.events[2] == ("string", "ab")


def test_utf8_passes_through():
    recorder = Recorder()
    Parser.feed(recorder, '{"ключ": "значение"}')
    assert recorder.events[1:3] == [("key", "ключ"), ("string", "значение")]


@pytest.mark.parametrize("number", ["0", "-0.5e+10", "007", "1E5", "12.75", "3e-2"])
def test_valid_numbers(number):
    recorder = Recorder()
    Parser.feed(recorder, '{"n": ' + number + "}")
    assert recorder.events[2] == ("number", number)


@pytest.mark.parametrize("literal", ["1.", "-", "1e", "1.e5", "--1", "1e+", "tru", "nul"])
def test_invalid_literals(literal):
    recorder = Recorder()
    with pytest.raises(MalformedJsonError, match="boolean or null or number"):
        Parser.feed(recorder, '{"n": ' + literal + "}")
    assert recorder.events[:2] == [("object_start",), ("key", "n")]


def test_invalid_literal_message():
    recorder = Recorder()
    with pytest.raises(MalformedJsonError) as info:
        Parser.feed(recorder, '{"a": tru}')
    assert "unexpected string (tru)" in str(info.value)


def test_literal_followed_by_whitespace_and_comma():
    recorder = Recorder()
    Parser.feed(recorder, '{"a": 1 , "b": false\n}')
    assert recorder.events == [
        ("object_start",),
        ("key", "a"),
        ("number", "1"),
        ("key", "b"),
        ("boolean", False),
        ("object_end",),
    ]


def test_top_level_array_rejected():
    recorder = Recorder()
    with pytest.raises(MalformedJsonError, match="idle state, line = 1"):
        Parser.feed(recorder, "[1]")
    assert recorder.events == []


def test_line_number_in_error():
    recorder = Recorder()
    with pytest.raises(MalformedJsonError, match="line = 3"):
        Parser.feed(recorder, "{\n\n x")
    assert recorder.events == [("object_start",)]


def test_newline_in_string_counts_lines():
    recorder = Recorder()
    with pytest.raises(MalformedJsonError, match="line = 2"):
        Parser.feed(recorder, '{"a": "x\ny" ?}')
    assert recorder.events[-1] == ("string", "x\ny")


def test_missing_colon():
    recorder = Recorder()
    with pytest.raises(MalformedJsonError, match="colon state"):
        Parser.feed(recorder, '{"a" 1}')
    assert recorder.events == [("object_start",), ("key", "a")]


def test_bad_value():
    recorder = Recorder()
    with pytest.raises(MalformedJsonError, match="value state"):
        Parser.feed(recorder, '{"a": ?}')
    assert recorder.events == [("object_start",), ("key", "a")]


def test_bad_array_item():
    recorder = Recorder()
    with pytest.raises(MalformedJsonError, match="array state"):
        Parser.feed(recorder, '{"a": [?]}')
    assert recorder.events[-1] == ("array_start",)


def test_mismatched_bracket_after_string():
    recorder = Recorder()
    with pytest.raises(MalformedJsonError, match="comma state"):
        Parser.feed(recorder, '{"a": "x"]')
    assert recorder.events[-1] == ("string", "x")


def test_mismatched_brace_after_number_in_array():
    recorder = Recorder()
    with pytest.raises(MalformedJsonError, match="boolean or null or number"):
        Parser.feed(recorder, '{"a": [1}')
    assert ("number", "1") in recorder.events


def test_bad_escape():
    recorder = Recorder()
    with pytest.raises(MalformedJsonError, match="string escape sequence"):
        Parser.feed(recorder, r'{"a": "\q"}')
    assert recorder.events == [("object_start",), ("key", "a")]


def test_bad_unicode_digit():
    recorder = Recorder()
    with pytest.raises(MalformedJsonError, match="unicode character"):
        Parser.feed(recorder, r'{"a": "\u12g4"}')
    assert recorder.events == [("object_start",), ("key", "a")]


def test_error_is_value_error():
    recorder = Recorder()
    with pytest.raises(ValueError):
        Parser.feed(recorder, "x")


def test_parser_is_abstract():
    with pytest.raises(TypeError):
        Parser()