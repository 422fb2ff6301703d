# typedblob

Packs a sequence of typed values into a compact binary packet and reads it back.

## Wire format

All numbers are little endian.

```
packet := count(u64) value*
value  := id(u64) data
data   := Integer  -> u64
          Float    -> f64
          String   -> length(u64) bytes
          Vector   -> count(u64) value*
```

The type ids are listed in `typedblob.datatypes.TypeId`: `UINT` (0), `FLOAT` (1), `STRING` (2) and `VECTOR` (3).

## Usage

```python
from typedblob.datatypes import Any, IntegerType, StringType, TypeId, VectorType
from typedblob.serializator import Serializator

s = Serializator()
s.push(VectorType(StringType(b"qwerty"), IntegerType(100500)))
blob = s.serialize()

values = Serializator.deserialize(blob)
vector = values[0].get_value(VectorType)       # or get_value(TypeId.VECTOR)
assert values[0].payload_type_id() is TypeId.VECTOR
assert vector == VectorType(StringType("qwerty"), IntegerType(100500))
```

### Value types (`typedblob.datatypes`)

- `IntegerType(value=0)` holds an unsigned 64-bit integer. If the value is out of range, it raises `ValueError`.
- `FloatType(value=0.0)` holds a double.
- `StringType(value=b"")` holds bytes. A `str` is stored UTF-8 encoded.
- `VectorType(*values)` holds an ordered list of values. It supports `push_back(value)`, `len()` and iteration, which yields `Any` items.
- `Any(value)` wraps exactly one of the types above. Passing an `Any` unwraps it, and any other type raises `TypeError`. `payload_type_id()` returns the `TypeId` of the wrapped value. `get_value(kind)` takes a class or a `TypeId`, returns the wrapped value, and raises `TypeError` on a mismatch.

Every type has a `serialize()` method that returns the tagged bytes. Each one also has a `deserialize(reader)` classmethod. `Any.deserialize` reads the tag and the value. The other types read only the payload that follows the tag. Two values are equal when their types and contents match.

### Packets (`typedblob.serializator`)

- `Serializator.push(value)` appends an `Any` or a value type.
- `Serializator.serialize()` returns the packet as `bytes`.
- `Serializator.storage` is a tuple of the values that were pushed.
- `Serializator.deserialize(data)` decodes a packet into a list of `Any`.

### Low-level helpers (`typedblob.bufferstream`)

`pack_u64` and `pack_f64` encode single numbers. `ByteReader` reads from a buffer in order and checks bounds. Its methods are `read_u64`, `read_f64`, `read_bytes`, `remaining` and `ensure_available`.

### Errors

If the input ends before a value is complete, decoding raises `BufferUnderflowError`, which is a subclass of `IndexError`. An unrecognised type id raises `UnknownTypeError`, which is a subclass of `ValueError`.

## Command line

```
typedblob [path]
```

This command decodes the file, encodes the values again and prints `1` if the result is identical to the input, or `0` if it is not. The path defaults to `raw.bin`, and the exit status is 1 if the file cannot be read.

## Running the tests

```
pip install -e ".[test]"
pytest
```