"""Decoders for enums: a u32 variant index followed by that variant's fields.

Variants are numbered from zero in declaration order. An index outside that
range raises ``UnexpectedVariant``. An enum with no variants cannot be decoded
at all and raises ``EmptyEnum`` without reading anything.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Optional, Tuple, Type, TypeVar

from .decoder import Decoder
from .errors import AllowedRange, EmptyEnum, UnexpectedVariant
from .integers import decode_u32

__all__ = ["Variant", "enum_of", "unit_enum_of"]

M = TypeVar("M", bound=enum.Enum)
ItemDecoder = Callable[[Decoder], Any]


class _Unset:
    """Marks a unit variant whose value was not given."""

    def __repr__(self) -> str:
        return "<unset>"


_UNSET: Any = _Unset()


@dataclass(frozen=True)
class Variant:
    """One variant of an enum.

    A variant with fields has a ``decode`` function that reads all of them
    and returns the decoded value; records built with ``struct_of`` or
    ``tuple_struct_of`` fit here. A unit variant has no ``decode`` and
    yields ``value``, or its own name when no value is given.
    """

    name: str
    decode: Optional[ItemDecoder] = None
    value: Any = field(default=_UNSET)

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise ValueError("a variant needs a non-empty name")
        if self.decode is not None:
            if not callable(self.decode):
                raise TypeError(f"decoder of variant {self.name!r} is not callable")
            if self.value is not _UNSET:
                raise ValueError(
                    f"variant {self.name!r} cannot have both fields and a unit value"
                )

    @property
    def is_unit(self) -> bool:
        """True when the variant carries no fields."""
        return self.decode is None


def _read_variant(variant: Variant, decoder: Decoder) -> Any:
    if variant.decode is not None:
        return variant.decode(decoder)
    if variant.value is _UNSET:
        return variant.name
    return variant.value


def enum_of(type_name: str, variants: Iterable[Variant]) -> Callable[[Decoder], Any]:
    """Return a decoder for an enum whose variants are listed in order."""
    spec: Tuple[Variant, ...] = tuple(variants)
    seen = set()
    for variant in spec:
        if not isinstance(variant, Variant):
            raise TypeError(f"expected a Variant, got {variant!r}")
        if variant.name in seen:
            raise ValueError(f"duplicate variant name {variant.name!r}")
        seen.add(variant.name)

    allowed = AllowedRange(0, len(spec) - 1) if spec else None

    def decode(decoder: Decoder) -> Any:
        if allowed is None:
            raise EmptyEnum(type_name)
        index = decode_u32(decoder)
        if index >= len(spec):
            raise UnexpectedVariant(type_name=type_name, allowed=allowed, found=index)
        return _read_variant(spec[index], decoder)

    decode.__name__ = f"decode_{type_name}"
    return decode


def unit_enum_of(enum_cls: Type[M]) -> Callable[[Decoder], M]:
    """Return a decoder for a Python enum whose members are field-less variants.

    Members are numbered in declaration order; aliases are not counted.
    """
    if not isinstance(enum_cls, type) or not issubclass(enum_cls, enum.Enum):
        raise TypeError("enum_cls must be an Enum class")
    variants = [Variant(member.name, value=member) for member in enum_cls]
    return enum_of(enum_cls.__name__, variants)