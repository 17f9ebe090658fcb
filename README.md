# bincodec

`bincodec` reads data written in the bincode binary format. It handles both
the current default layout and the legacy one, little- and big-endian byte
order, fixed-width and variable-length integer encoding, and an optional
byte limit that guards against oversized or hostile input.

It has no dependencies outside the standard library.

## Installation

```
pip install bincodec
```

## Configuration

`bincodec.config` holds the `Configuration` dataclass and two starting points.
Use the same settings that were used when the data was written:

```python
from bincodec.config import standard, legacy

cfg = standard()                       # little endian, variable-length integers, no limit
old = legacy()                         # little endian, fixed-width integers, no limit
big = standard().with_big_endian().with_fixed_int_encoding()
limited = standard().with_limit(1024)  # refuse to claim more than 1024 bytes
unlimited = limited.with_no_limit()
```

A configuration is immutable: every `with_*` method returns a new one, and
later calls override earlier ones of the same kind. Its fields are
`endianness` (`Endianness.LITTLE` or `Endianness.BIG`), `int_encoding`
(`IntEncoding.FIXED` or `IntEncoding.VARIABLE`) and `limit` (an `int` or
`None`; a negative limit raises `ValueError`).

With variable-length encoding an unsigned value below 251 is a single byte;
larger values are a marker byte 251, 252, 253 or 254 followed by a u16, u32,
u64 or u128. Signed values are zigzag-mapped first. `u8`, `i8` and floats are
always written at full width.

## Decoding

A decoder is any function that takes a `bincodec.decoder.Decoder` and returns
a value. `decode_from_slice(data, config, decode)` runs one over a buffer and
returns the value together with the number of bytes consumed:

```python
from bincodec.config import legacy
from bincodec.decoder import decode_from_slice
from bincodec.integers import decode_u32, decode_f32
from bincodec.composites import option_of, tuple_of

value, consumed = decode_from_slice(b"\x01\x05\x00\x00\x00", legacy(), option_of(decode_u32))
# value == 5, consumed == 5

decode_point = tuple_of(decode_f32, decode_f32, decode_f32)
```

### Primitive decoders — `bincodec.integers`

`decode_bool`, `decode_u8`, `decode_u16`, `decode_u32`, `decode_u64`,
`decode_u128`, `decode_usize`, `decode_i8`, `decode_i16`, `decode_i32`,
`decode_i64`, `decode_i128`, `decode_isize`, `decode_f32`, `decode_f64`.

`nonzero(IntegerType.U32)` (with `IntegerType` from `bincodec.errors`) returns
a decoder for the non-zero form of an integer type, raising
`NonZeroTypeIsZero` when the value read is 0.

### Other values — `bincodec.composites`

Ready-made decoders:

- `decode_char` – one UTF-8 encoded code point
- `decode_byte_slice` – length-prefixed bytes
- `decode_str` – length-prefixed UTF-8 string
- `decode_unit` – reads nothing, returns `None`
- `decode_duration` – u64 seconds and u32 nanoseconds, returned as a `Duration`

Builders that combine item decoders:

- `array_of(item, length)` – fixed-length list, no length prefix
- `tuple_of(*items)` – elements in order
- `option_of(item)` – a 0/1 tag byte, then the value or `None`
- `result_of(ok, err)` – a u32 tag, returning `Ok(value)` or `Err(value)`
- `range_of(item)` / `range_inclusive_of(item)` – start then end, as a `Range`
- `bound_of(item)` – a u32 tag, returning a `Bound` whose `kind` is a `BoundKind`

### Records — `bincodec.records`

`struct_of(cls, fields)` decodes named fields in order and passes them to
`cls` as keyword arguments; `fields` is a mapping or a list of
`(name, decoder)` pairs. `tuple_struct_of(cls, *decoders)` passes the values
positionally.

```python
from dataclasses import dataclass
from bincodec.integers import decode_u64
from bincodec.records import struct_of

@dataclass
class Lcg64Xsh32:
    state: int
    increment: int

decode_lcg = struct_of(Lcg64Xsh32, [("state", decode_u64), ("increment", decode_u64)])
```

### Enums — `bincodec.enums`

An enum is a u32 variant index, counted from zero in declaration order,
followed by that variant's fields. `enum_of(type_name, variants)` takes a list
of `Variant(name, decode=..., value=...)`: a variant with a `decode` function
returns what it reads, a unit variant returns its `value`, or its name when no
value is given. `unit_enum_of(enum_cls)` builds a decoder for a plain
`enum.Enum` whose members are field-less variants.

```python
import enum
from bincodec.enums import unit_enum_of

class TradeSide(enum.Enum):
    BUY = "buy"
    SELL = "sell"

decode_side = unit_enum_of(TradeSide)   # b"\x00" -> TradeSide.BUY
```

An index past the last variant raises `UnexpectedVariant`; an enum with no
variants raises `EmptyEnum` without reading anything.

### Readers and the byte limit

`bincodec.read.SliceReader` reads an in-memory buffer front to back and is
what `decode_from_slice` uses. A `Decoder` wraps a reader and a configuration;
when the configuration has a limit, each decode claims the bytes it is about
to read (`claim_bytes_read`, `claim_container_read`, `unclaim_bytes_read`) and
`LimitExceeded` is raised once the total passes the limit.

## Errors

Every failure raises a subclass of `bincodec.errors.DecodeError` (itself a
`ValueError`): `UnexpectedEnd`, `LimitExceeded`, `InvalidBooleanValue`,
`UnexpectedVariant`, `NonZeroTypeIsZero`, `OutsideUsizeRange`,
`InvalidCharEncoding`, `Utf8Error`, `InvalidDuration` and `EmptyEnum`.

## What it does not do

`bincodec` only reads. It has no encoder, so it cannot write bincode data,
and it reads only from in-memory buffers, not from files or streams. There is
no command-line tool.