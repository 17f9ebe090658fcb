"""Decoders for booleans, integers, floats and their non-zero forms.

Atomic integer types are encoded exactly like the plain integer they hold,
so the same functions decode them.
"""

from __future__ import annotations

import struct
from typing import Callable, Dict

from .config import Endianness, IntEncoding
from .decoder import USIZE_MAX, Decoder
from .errors import (
    DecodeError,
    IntegerType,
    InvalidBooleanValue,
    NonZeroTypeIsZero,
    OutsideUsizeRange,
)
from .read import SliceReader

__all__ = [
    "decode_bool",
    "decode_u8",
    "decode_u16",
    "decode_u32",
    "decode_u64",
    "decode_u128",
    "decode_usize",
    "decode_i8",
    "decode_i16",
    "decode_i32",
    "decode_i64",
    "decode_i128",
    "decode_isize",
    "decode_f32",
    "decode_f64",
    "nonzero",
]

# Variable-length marker byte -> width in bytes of the integer that follows.
_VARINT_WIDTHS = {251: 2, 252: 4, 253: 8, 254: 16}
_SINGLE_BYTE_MAX = 250


def _read_int(reader: SliceReader, width: int, endianness: Endianness, signed: bool) -> int:
    return int.from_bytes(reader.read(width), endianness.value, signed=signed)


def _varint_unsigned(reader: SliceReader, endianness: Endianness, width: int) -> int:
    first = reader.read(1)[0]
    if first <= _SINGLE_BYTE_MAX:
        return first
    size = _VARINT_WIDTHS.get(first)
    if size is None:
        raise DecodeError(f"invalid varint marker byte {first}")
    if size > width:
        raise DecodeError(
            f"invalid integer type: found u{size * 8} where u{width * 8} was expected"
        )
    return _read_int(reader, size, endianness, signed=False)


def _unzigzag(value: int) -> int:
    return ~(value >> 1) if value & 1 else value >> 1


def _decode_unsigned(decoder: Decoder, width: int) -> int:
    decoder.claim_bytes_read(width)
    config = decoder.config
    if config.int_encoding is IntEncoding.VARIABLE:
        return _varint_unsigned(decoder.reader, config.endianness, width)
    return _read_int(decoder.reader, width, config.endianness, signed=False)


def _decode_signed(decoder: Decoder, width: int) -> int:
    decoder.claim_bytes_read(width)
    config = decoder.config
    if config.int_encoding is IntEncoding.VARIABLE:
        return _unzigzag(_varint_unsigned(decoder.reader, config.endianness, width))
    return _read_int(decoder.reader, width, config.endianness, signed=True)


def decode_u8(decoder: Decoder) -> int:
    """Decode a u8; always a single raw byte."""
    decoder.claim_bytes_read(1)
    peeked = decoder.reader.peek_read(1)
    if peeked is not None:
        value = peeked[0]
        decoder.reader.consume(1)
        return value
    return decoder.reader.read(1)[0]


def decode_bool(decoder: Decoder) -> bool:
    """Decode a bool stored as a byte that must be 0 or 1."""
    value = decode_u8(decoder)
    if value == 0:
        return False
    if value == 1:
        return True
    raise InvalidBooleanValue(value)


def decode_u16(decoder: Decoder) -> int:
    """Decode a u16."""
    return _decode_unsigned(decoder, 2)


def decode_u32(decoder: Decoder) -> int:
    """Decode a u32."""
    return _decode_unsigned(decoder, 4)


def decode_u64(decoder: Decoder) -> int:
    """Decode a u64."""
    return _decode_unsigned(decoder, 8)


def decode_u128(decoder: Decoder) -> int:
    """Decode a u128."""
    return _decode_unsigned(decoder, 16)


def decode_usize(decoder: Decoder) -> int:
    """Decode a usize, written as a u64 on the wire."""
    value = _decode_unsigned(decoder, 8)
    if value > USIZE_MAX:
        raise OutsideUsizeRange(value)
    return value


def decode_i8(decoder: Decoder) -> int:
    """Decode an i8; always a single raw byte in two's complement."""
    decoder.claim_bytes_read(1)
    return int.from_bytes(decoder.reader.read(1), "little", signed=True)


def decode_i16(decoder: Decoder) -> int:
    """Decode an i16."""
    return _decode_signed(decoder, 2)


def decode_i32(decoder: Decoder) -> int:
    """Decode an i32."""
    return _decode_signed(decoder, 4)


def decode_i64(decoder: Decoder) -> int:
    """Decode an i64."""
    return _decode_signed(decoder, 8)


def decode_i128(decoder: Decoder) -> int:
    """Decode an i128."""
    return _decode_signed(decoder, 16)


def decode_isize(decoder: Decoder) -> int:
    """Decode an isize, written as an i64 on the wire."""
    return _decode_signed(decoder, 8)


def _decode_float(decoder: Decoder, width: int, code: str) -> float:
    decoder.claim_bytes_read(width)
    order = "<" if decoder.config.endianness is Endianness.LITTLE else ">"
    (value,) = struct.unpack(order + code, decoder.reader.read(width))
    return value


def decode_f32(decoder: Decoder) -> float:
    """Decode an IEEE 754 single-precision float."""
    return _decode_float(decoder, 4, "f")


def decode_f64(decoder: Decoder) -> float:
    """Decode an IEEE 754 double-precision float."""
    return _decode_float(decoder, 8, "d")


_INTEGER_DECODERS: Dict[IntegerType, Callable[[Decoder], int]] = {
    IntegerType.U8: decode_u8,
    IntegerType.U16: decode_u16,
    IntegerType.U32: decode_u32,
    IntegerType.U64: decode_u64,
    IntegerType.U128: decode_u128,
    IntegerType.USIZE: decode_usize,
    IntegerType.I8: decode_i8,
    IntegerType.I16: decode_i16,
    IntegerType.I32: decode_i32,
    IntegerType.I64: decode_i64,
    IntegerType.I128: decode_i128,
    IntegerType.ISIZE: decode_isize,
}


def nonzero(integer_type: IntegerType) -> Callable[[Decoder], int]:
    """Return a decoder for the non-zero form of ``integer_type``."""
    inner = _INTEGER_DECODERS[integer_type]

    def decode(decoder: Decoder) -> int:
        value = inner(decoder)
        if value == 0:
            raise NonZeroTypeIsZero(integer_type)
        return value

    decode.__name__ = f"decode_nonzero_{integer_type.value}"
    return decode