"""Decoders for chars, strings, slices, durations and composite values.

Composite decoders are built from item decoders: ``option_of(decode_u32)``
returns a function that decodes an ``Option<u32>``, and so on.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, List, Optional, Tuple, TypeVar, Union

from .decoder import Decoder, decode_option_variant, decode_slice_len
from .errors import (
    AllowedRange,
    InvalidCharEncoding,
    InvalidDuration,
    UnexpectedVariant,
    Utf8Error,
)
from .integers import (
    decode_bool,
    decode_f32,
    decode_f64,
    decode_i8,
    decode_i16,
    decode_i32,
    decode_i64,
    decode_i128,
    decode_isize,
    decode_u8,
    decode_u16,
    decode_u32,
    decode_u64,
    decode_u128,
    decode_usize,
)

__all__ = [
    "Duration",
    "Ok",
    "Err",
    "BoundKind",
    "Bound",
    "Range",
    "decode_char",
    "decode_byte_slice",
    "decode_str",
    "decode_unit",
    "decode_duration",
    "array_of",
    "tuple_of",
    "option_of",
    "result_of",
    "range_of",
    "range_inclusive_of",
    "bound_of",
]

T = TypeVar("T")
E = TypeVar("E")
ItemDecoder = Callable[[Decoder], Any]

_NANOS_PER_SEC = 1_000_000_000
_U64_MAX = (1 << 64) - 1


@dataclass(frozen=True)
class Duration:
    """A span of time as whole seconds plus nanoseconds."""

    secs: int
    nanos: int = 0

    def __post_init__(self) -> None:
        if self.secs < 0 or self.secs > _U64_MAX:
            raise ValueError("secs must fit in a u64")
        if not 0 <= self.nanos < _NANOS_PER_SEC:
            raise ValueError("nanos must be below one second")

    def total_seconds(self) -> float:
        """The duration in seconds as a float."""
        return self.secs + self.nanos / _NANOS_PER_SEC


@dataclass(frozen=True)
class Ok(Generic[T]):
    """The success case of a decoded result."""

    value: T


@dataclass(frozen=True)
class Err(Generic[E]):
    """The failure case of a decoded result."""

    value: E


Result = Union[Ok[T], Err[E]]


class BoundKind(enum.Enum):
    """Which side of a range a bound describes and whether it is inclusive."""

    UNBOUNDED = 0
    INCLUDED = 1
    EXCLUDED = 2


@dataclass(frozen=True)
class Bound(Generic[T]):
    """One end of a range: unbounded, or included/excluded at ``value``."""

    kind: BoundKind
    value: Optional[T] = None


@dataclass(frozen=True)
class Range(Generic[T]):
    """A range from ``start`` to ``end``; ``end`` belongs to it when inclusive."""

    start: T
    end: T
    inclusive: bool = False

    def __contains__(self, item: object) -> bool:
        if self.inclusive:
            return self.start <= item <= self.end  # type: ignore[operator]
        return self.start <= item < self.end  # type: ignore[operator]


def _utf8_char_width(first: int) -> int:
    if first < 0x80:
        return 1
    if 0xC2 <= first <= 0xDF:
        return 2
    if 0xE0 <= first <= 0xEF:
        return 3
    if 0xF0 <= first <= 0xF4:
        return 4
    return 0


def decode_char(decoder: Decoder) -> str:
    """Decode one UTF-8 encoded code point."""
    first = decoder.reader.read(1)
    width = _utf8_char_width(first[0])
    if width == 0:
        raise InvalidCharEncoding(first.ljust(4, b"\0"))
    # A char's width is only known after its first byte, so it is claimed late.
    decoder.claim_bytes_read(width)
    if width == 1:
        return chr(first[0])
    data = first + decoder.reader.read(width - 1)
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        raise InvalidCharEncoding(data.ljust(4, b"\0")) from None


def decode_byte_slice(decoder: Decoder) -> bytes:
    """Decode a length-prefixed run of bytes."""
    length = decode_slice_len(decoder)
    decoder.claim_bytes_read(length)
    return bytes(decoder.reader.take_bytes(length))


def decode_str(decoder: Decoder) -> str:
    """Decode a length-prefixed UTF-8 string."""
    data = decode_byte_slice(decoder)
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise Utf8Error(exc) from None


def decode_unit(decoder: Decoder) -> None:
    """Decode the unit value; reads nothing."""
    return None


def decode_duration(decoder: Decoder) -> Duration:
    """Decode a duration stored as u64 seconds followed by u32 nanoseconds."""
    secs = decode_u64(decoder)
    nanos = decode_u32(decoder)
    carried = secs + nanos // _NANOS_PER_SEC
    if carried > _U64_MAX:
        raise InvalidDuration(secs, nanos)
    return Duration(carried, nanos % _NANOS_PER_SEC)


# In-memory sizes of well-known items, used to pre-claim array storage.
_ITEM_SIZES: Dict[ItemDecoder, int] = {
    decode_bool: 1,
    decode_u8: 1,
    decode_i8: 1,
    decode_u16: 2,
    decode_i16: 2,
    decode_u32: 4,
    decode_i32: 4,
    decode_f32: 4,
    decode_char: 4,
    decode_u64: 8,
    decode_i64: 8,
    decode_f64: 8,
    decode_usize: 8,
    decode_isize: 8,
    decode_u128: 16,
    decode_i128: 16,
    decode_duration: 16,
    decode_unit: 0,
}


def array_of(item: ItemDecoder, length: int) -> Callable[[Decoder], List[Any]]:
    """Return a decoder for a fixed-length array; no length prefix is read."""
    if length < 0:
        raise ValueError("array length must not be negative")
    size = _ITEM_SIZES.get(item, 0)

    def decode(decoder: Decoder) -> List[Any]:
        if item is decode_u8:
            decoder.claim_bytes_read(length)
            return list(decoder.reader.read(length))
        decoder.claim_bytes_read(length * size)
        values = []
        for _ in range(length):
            decoder.unclaim_bytes_read(size)
            values.append(item(decoder))
        return values

    return decode


def tuple_of(*args: ItemDecoder) -> Callable[[Decoder], Tuple[Any, ...]]:
    """Return a decoder for a tuple whose elements are decoded in order."""
    if not args:
        raise ValueError("a tuple needs at least one element")
    items = tuple(args)

    def decode(decoder: Decoder) -> Tuple[Any, ...]:
        return tuple(item(decoder) for item in items)

    return decode


def option_of(item: Callable[[Decoder], T]) -> Callable[[Decoder], Optional[T]]:
    """Return a decoder for an optional value: a 0/1 tag byte, then the value."""

    def decode(decoder: Decoder) -> Optional[T]:
        if decode_option_variant(decoder, "Option"):
            return item(decoder)
        return None

    return decode


def result_of(
    ok: Callable[[Decoder], T], err: Callable[[Decoder], E]
) -> Callable[[Decoder], Result[T, E]]:
    """Return a decoder for a result: a u32 tag (0 ok, 1 err), then the value."""

    def decode(decoder: Decoder) -> Result[T, E]:
        tag = decode_u32(decoder)
        if tag == 0:
            return Ok(ok(decoder))
        if tag == 1:
            return Err(err(decoder))
        raise UnexpectedVariant(type_name="Result", allowed=AllowedRange(0, 1), found=tag)

    return decode


def range_of(item: Callable[[Decoder], T]) -> Callable[[Decoder], Range[T]]:
    """Return a decoder for a half-open range: start, then end."""

    def decode(decoder: Decoder) -> Range[T]:
        start = item(decoder)
        end = item(decoder)
        return Range(start, end)

    return decode


def range_inclusive_of(item: Callable[[Decoder], T]) -> Callable[[Decoder], Range[T]]:
    """Return a decoder for an inclusive range: start, then end."""

    def decode(decoder: Decoder) -> Range[T]:
        start = item(decoder)
        end = item(decoder)
        return Range(start, end, inclusive=True)

    return decode


def bound_of(item: Callable[[Decoder], T]) -> Callable[[Decoder], Bound[T]]:
    """Return a decoder for a range bound: a u32 tag, then the value if any."""

    def decode(decoder: Decoder) -> Bound[T]:
        tag = decode_u32(decoder)
        if tag == 0:
            return Bound(BoundKind.UNBOUNDED)
        if tag == 1:
            return Bound(BoundKind.INCLUDED, item(decoder))
        if tag == 2:
            return Bound(BoundKind.EXCLUDED, item(decoder))
        raise UnexpectedVariant(type_name="Bound", allowed=AllowedRange(0, 2), found=tag)

    return decode