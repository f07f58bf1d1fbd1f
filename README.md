# cborkit

A small CBOR (RFC 8949) writer with no dependencies. A `Writer` appends
encoded values to a `bytearray`. Integer values and all length and size
headers use the shortest form.

## Installation

```
pip install cborkit
```

## Usage

```python
from cborkit.writer import Writer

buf = bytearray()
w = Writer(buf)
w.write_map_header(2)
w.write_string("name")
w.write_string("widget")
w.write_string("count")
w.write_int(42)

data = w.getvalue()   # bytes written so far; buf holds the same bytes
```

If you construct `Writer()` without a buffer, it creates its own empty
`bytearray`. If you pass a `bytearray`, the writer appends to it in place.
Several writers can therefore share one buffer.

### Writer methods

| Method | Encodes |
| --- | --- |
| `write_map_header(size)` | map header for `size` key/value pairs (0 to 2**32 - 1) |
| `write_string(value)` | UTF-8 text string |
| `write_bytes(value)` | byte string (any bytes-like value) |
| `write_bool(value)` | `true` / `false` |
| `write_int(value)`, `write_int64(value)` | signed integer in the signed 64-bit range |
| `write_uint(value)`, `write_uint64(value)` | unsigned integer from 0 to 2**64 - 1 |
| `write_float32(value)` | single-precision float (`0xfa` + 4 bytes) |
| `write_float64(value)` | double-precision float (`0xfb` + 8 bytes) |
| `getvalue()` | returns the buffer contents as `bytes` |

A value outside a method's range raises `OverflowError`.

## What it does not do

cborkit only writes CBOR. It has no decoder and no validator. It does not
write arrays, tags, null or other simple values, and it does not choose
float widths for you.

## Running the tests

```
pip install -e ".[test]"
pytest
```