"""The decoder that tracks the byte limit, plus small shared decoding helpers."""

from __future__ import annotations

import sys
from typing import Callable, Tuple, TypeVar, Union

from .config import Configuration, Endianness, IntEncoding
from .errors import (
    AllowedRange,
    DecodeError,
    LimitExceeded,
    OutsideUsizeRange,
    UnexpectedVariant,
)
from .read import SliceReader

__all__ = [
    "Decoder",
    "decode_option_variant",
    "decode_slice_len",
    "decode_from_slice",
]

T = TypeVar("T")

USIZE_MAX = sys.maxsize * 2 + 1

# Marker bytes of the variable-length integer scheme.
_U16_BYTE = 251
_U32_BYTE = 252
_U64_BYTE = 253
_U128_BYTE = 254


class Decoder:
    """Reads values from a reader according to a configuration.

    When the configuration carries a byte limit, every decode claims the
    bytes it is about to read and ``LimitExceeded`` is raised once the
    total passes the limit.
    """

    __slots__ = ("reader", "config", "bytes_read")

    def __init__(self, reader: SliceReader, config: Configuration) -> None:
        self.reader = reader
        self.config = config
        self.bytes_read = 0

    def claim_bytes_read(self, n: int) -> None:
        """Claim that ``n`` bytes are about to be read."""
        limit = self.config.limit
        if limit is None:
            return
        self.bytes_read += n
        if self.bytes_read > USIZE_MAX or self.bytes_read > limit:
            raise LimitExceeded()

    def unclaim_bytes_read(self, n: int) -> None:
        """Give back ``n`` bytes claimed earlier, e.g. per decoded container item."""
        if self.config.limit is not None:
            self.bytes_read -= n

    def claim_container_read(self, length: int, item_size: int) -> None:
        """Claim a container of ``length`` items of ``item_size`` bytes each."""
        if self.config.limit is None:
            return
        total = length * item_size
        if total > USIZE_MAX:
            raise LimitExceeded()
        self.claim_bytes_read(total)


def _decode_u8(decoder: Decoder) -> int:
    decoder.claim_bytes_read(1)
    peeked = decoder.reader.peek_read(1)
    if peeked is not None:
        value = peeked[0]
        decoder.reader.consume(1)
        return value
    return decoder.reader.read(1)[0]


def _read_fixed(reader: SliceReader, width: int, endianness: Endianness) -> int:
    return int.from_bytes(reader.read(width), endianness.value)


def _varint_decode_u64(reader: SliceReader, endianness: Endianness) -> int:
    first = reader.read(1)[0]
    if first < _U16_BYTE:
        return first
    if first == _U16_BYTE:
        return _read_fixed(reader, 2, endianness)
    if first == _U32_BYTE:
        return _read_fixed(reader, 4, endianness)
    if first == _U64_BYTE:
        return _read_fixed(reader, 8, endianness)
    if first == _U128_BYTE:
        raise DecodeError("invalid integer type: found u128 where u64 was expected")
    raise DecodeError(f"invalid varint marker byte {first}")


def _decode_u64(decoder: Decoder) -> int:
    decoder.claim_bytes_read(8)
    config = decoder.config
    if config.int_encoding is IntEncoding.VARIABLE:
        return _varint_decode_u64(decoder.reader, config.endianness)
    return _read_fixed(decoder.reader, 8, config.endianness)


def decode_option_variant(decoder: Decoder, type_name: str) -> bool:
    """Decode only an option's tag: True for a present value, False for none."""
    tag = _decode_u8(decoder)
    if tag == 0:
        return False
    if tag == 1:
        return True
    raise UnexpectedVariant(type_name=type_name, allowed=AllowedRange(0, 1), found=tag)


def decode_slice_len(decoder: Decoder) -> int:
    """Decode the length prefix of a slice or container."""
    value = _decode_u64(decoder)
    if value > USIZE_MAX:
        raise OutsideUsizeRange(value)
    return value


def decode_from_slice(
    data: Union[bytes, bytearray, memoryview],
    config: Configuration,
    decode: Callable[[Decoder], T],
) -> Tuple[T, int]:
    """Decode one value from ``data``; return it with the number of bytes consumed."""
    reader = SliceReader(data)
    total = reader.remaining
    decoder = Decoder(reader, config)
    value = decode(decoder)
    return value, total - reader.remaining