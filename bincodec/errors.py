"""Errors raised while decoding."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Tuple, Union

__all__ = [
    "IntegerType",
    "AllowedRange",
    "DecodeError",
    "UnexpectedEnd",
    "LimitExceeded",
    "InvalidBooleanValue",
    "UnexpectedVariant",
    "NonZeroTypeIsZero",
    "OutsideUsizeRange",
    "InvalidCharEncoding",
    "Utf8Error",
    "InvalidDuration",
    "EmptyEnum",
]


class IntegerType(enum.Enum):
    """Integer types that can appear in decode errors."""

    U8 = "u8"
    U16 = "u16"
    U32 = "u32"
    U64 = "u64"
    U128 = "u128"
    USIZE = "usize"
    I8 = "i8"
    I16 = "i16"
    I32 = "i32"
    I64 = "i64"
    I128 = "i128"
    ISIZE = "isize"


@dataclass(frozen=True)
class AllowedRange:
    """An inclusive range of allowed enum discriminants."""

    min: int
    max: int

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.min <= value <= self.max

    def __str__(self) -> str:
        return f"{self.min}..={self.max}"


Allowed = Union[AllowedRange, Tuple[int, ...]]


class DecodeError(ValueError):
    """Base class of every decoding failure."""


class UnexpectedEnd(DecodeError):
    """The input ended before the value was complete."""

    def __init__(self, additional: int) -> None:
        self.additional = additional
        super().__init__(f"unexpected end of input, {additional} more byte(s) needed")


class LimitExceeded(DecodeError):
    """The configured byte limit was exceeded."""

    def __init__(self) -> None:
        super().__init__("the configured byte limit was exceeded")


class InvalidBooleanValue(DecodeError):
    """A boolean byte was neither 0 nor 1."""

    def __init__(self, value: int) -> None:
        self.value = value
        super().__init__(f"invalid boolean value {value}")


class UnexpectedVariant(DecodeError):
    """An enum discriminant was not one of the allowed values."""

    def __init__(self, type_name: str, allowed: Allowed, found: int) -> None:
        self.type_name = type_name
        self.allowed = allowed
        self.found = found
        if isinstance(allowed, AllowedRange):
            shown = str(allowed)
        else:
            shown = ", ".join(str(v) for v in allowed)
        super().__init__(
            f"unexpected variant {found} for {type_name}, allowed: {shown}"
        )


class NonZeroTypeIsZero(DecodeError):
    """A non-zero integer type decoded to zero."""

    def __init__(self, non_zero_type: IntegerType) -> None:
        self.non_zero_type = non_zero_type
        super().__init__(f"non-zero {non_zero_type.value} was zero")


class OutsideUsizeRange(DecodeError):
    """A length or usize value does not fit the platform's usize."""

    def __init__(self, value: int) -> None:
        self.value = value
        super().__init__(f"value {value} is outside the usize range")


class InvalidCharEncoding(DecodeError):
    """The bytes of a char are not a valid UTF-8 code point."""

    def __init__(self, data: bytes) -> None:
        self.bytes = bytes(data)
        super().__init__(f"invalid char encoding {self.bytes!r}")


class Utf8Error(DecodeError):
    """A string was not valid UTF-8."""

    def __init__(self, inner: UnicodeDecodeError) -> None:
        self.inner = inner
        super().__init__(f"invalid UTF-8: {inner}")


class InvalidDuration(DecodeError):
    """A duration's seconds overflow once the nanoseconds are carried."""

    def __init__(self, secs: int, nanos: int) -> None:
        self.secs = secs
        self.nanos = nanos
        super().__init__(f"invalid duration: {secs} s, {nanos} ns")


class EmptyEnum(DecodeError):
    """An enum without variants cannot be decoded."""

    def __init__(self, type_name: str) -> None:
        self.type_name = type_name
        super().__init__(f"cannot decode empty enum {type_name}")