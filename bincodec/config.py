"""Encoding configuration: byte order, integer encoding and byte limit.

The same configuration must be used for encoding and decoding.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace
from typing import Optional

__all__ = [
    "Endianness",
    "IntEncoding",
    "Configuration",
    "standard",
    "legacy",
]


class Endianness(enum.Enum):
    """Byte order used for multi-byte integers and floats."""

    LITTLE = "little"
    BIG = "big"


class IntEncoding(enum.Enum):
    """How integers, lengths and enum discriminants are written."""

    FIXED = "fixed"
    VARIABLE = "variable"


@dataclass(frozen=True)
class Configuration:
    """An immutable set of encoding options.

    Each ``with_*`` method returns a new configuration; for options that
    exclude each other the last call wins.
    """

    endianness: Endianness = Endianness.LITTLE
    int_encoding: IntEncoding = IntEncoding.VARIABLE
    limit: Optional[int] = None

    def __post_init__(self) -> None:
        if self.limit is not None:
            if isinstance(self.limit, bool) or not isinstance(self.limit, int):
                raise TypeError("limit must be an int or None")
            if self.limit < 0:
                raise ValueError("limit must not be negative")

    def with_big_endian(self) -> "Configuration":
        """Encode all integer types in big endian."""
        return replace(self, endianness=Endianness.BIG)

    def with_little_endian(self) -> "Configuration":
        """Encode all integer types in little endian."""
        return replace(self, endianness=Endianness.LITTLE)

    def with_variable_int_encoding(self) -> "Configuration":
        """Encode integers with the variable-length scheme.

        Unsigned values below 251 take one byte; larger ones are prefixed
        with 251, 252, 253 or 254 followed by a u16, u32, u64 or u128.
        Signed values are zigzag-mapped to unsigned first.
        """
        return replace(self, int_encoding=IntEncoding.VARIABLE)

    def with_fixed_int_encoding(self) -> "Configuration":
        """Encode integers at their full width.

        Enum discriminants are written as u32, lengths and usize as u64.
        """
        return replace(self, int_encoding=IntEncoding.FIXED)

    def with_limit(self, limit: int) -> "Configuration":
        """Set the maximum number of bytes a decode may claim."""
        return replace(self, limit=limit)

    def with_no_limit(self) -> "Configuration":
        """Remove the byte limit."""
        return replace(self, limit=None)


def standard() -> Configuration:
    """Little endian, variable int encoding, no limit."""
    return Configuration()


def legacy() -> Configuration:
    """Little endian, fixed int encoding, no limit."""
    return Configuration(int_encoding=IntEncoding.FIXED)