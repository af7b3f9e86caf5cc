# jsondom

jsondom is a small JSON library in two layers:

- `jsondom.parser.Parser`: an incremental, event-driven parser. Subclass it, implement
  the `on_*` callbacks and call `feed()` with text or UTF-8 bytes, in one piece or many.
- `jsondom.dom`: a document model built on the parser. `read()` turns JSON into a tree
  of `Value` objects; `write()` and `Value.to_string()` turn such a tree back into
  compact JSON.

Numbers are not converted while reading. They are kept exactly as written, as
`jsondom.string_number.StringNumber`, and converted when you ask:
`to_int32()`, `to_uint32()`, `to_int64()`, `to_uint64()`, `to_float()` and
`to_double()`. The integer conversions detect the base from the text (`0x` for
hexadecimal, a leading `0` for octal) and raise `OverflowError` when the value does not
fit the signed types. `str(number)` gives the text back.

## Installing

```
pip install jsondom
```

## Reading a document

```python
from jsondom.dom import read

dom = read('{"key1": "value1", "key2": [1, 2.5, true, null]}')

assert dom.is_object()

value1 = dom.object().get("key1")
if value1 is not None and value1.is_string():
    print("value1 =", value1.string())

items = dom.object()["key2"].array()
print(items[0].number().to_int32())    # 1
print(items[1].number().to_double())   # 2.5
```

`read()` accepts JSON text, UTF-8 bytes, a path-like object naming a file, or an open
file object (read in 4 KiB chunks). The root of a document must be an object; empty or
whitespace-only input, and `None`, give a null `Value`.

Each `Value` reports its kind through `type` (a `ValueType`) and the `is_null()`,
`is_boolean()`, `is_number()`, `is_string()`, `is_array()` and `is_object()` checks.
The accessors `boolean()`, `number()`, `string()`, `array()` and `object()` return the
stored data (the list and dict are live and can be changed in place); using one that
does not match the stored type raises `jsondom.errors.UnexpectedValueType`. Input that
is not valid JSON raises `jsondom.errors.MalformedJsonError`. Both derive from
`jsondom.errors.JsonDomError`.

## Building and writing a document

```python
from jsondom.dom import Value, ValueType, write

doc = Value(ValueType.OBJECT)
doc.object()["name"] = Value("jsondom")
doc.object()["sizes"] = Value([1, 2, 3])

print(doc.to_string())   # {"name":"jsondom","sizes":[1,2,3]}

with open("out.json", "w", encoding="utf-8") as f:
    write(f, doc)
```

`Value(ValueType.X)` gives the default of that type (null, false, 0, "", {} or []).
`Value` can also be made from `None`, `bool`, `int`, `float`, `str`, `StringNumber`,
dicts and lists/tuples; nested items are wrapped in `Value` as well.

`write()` takes a path-like object (the file is created or truncated) or an open text or
binary file. Output is always compact, object keys come out sorted, and `"`, `\`, `/`,
backspace, form feed, newline, carriage return and tab are escaped. Only a value whose
root is an object can be written; any other root raises `ValueError`.

## Streaming with the parser

Every callback is abstract, so a subclass implements all of them:

```python
from jsondom.parser import Parser

class KeyPrinter(Parser):
    def on_object_start(self): pass
    def on_object_end(self): pass
    def on_array_start(self): pass
    def on_array_end(self): pass
    def on_key_parsed(self, key): print("key:", key)
    def on_string_parsed(self, value): pass
    def on_number_parsed(self, value): pass   # value is the number's text
    def on_boolean_parsed(self, value): pass
    def on_null_parsed(self): pass

p = KeyPrinter()
p.feed('{"a": 1, ')
p.feed('"b": 2}')
```

## What it does not do

There is no command-line tool and no pretty-printed output, and numbers are never turned
into Python `int` or `float` values unless one of the `StringNumber` conversions is called.