"""Decoders for record types: structs with named fields and tuple structs.

A record decoder reads each field in declaration order with that field's
decoder, then builds the instance from the decoded values. Nothing but the
fields themselves is written, so a record with no fields reads no bytes.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Mapping, Tuple, TypeVar, Union

from .decoder import Decoder

__all__ = ["struct_of", "tuple_struct_of"]

R = TypeVar("R")
ItemDecoder = Callable[[Decoder], Any]
FieldSpec = Union[Mapping[str, ItemDecoder], Iterable[Tuple[str, ItemDecoder]]]


def _normalise_fields(fields: FieldSpec) -> Tuple[Tuple[str, ItemDecoder], ...]:
    pairs = fields.items() if isinstance(fields, Mapping) else fields
    result = []
    seen = set()
    for name, item in pairs:
        if not isinstance(name, str) or not name.isidentifier():
            raise ValueError(f"invalid field name {name!r}")
        if name in seen:
            raise ValueError(f"duplicate field name {name!r}")
        if not callable(item):
            raise TypeError(f"decoder for field {name!r} is not callable")
        seen.add(name)
        result.append((name, item))
    return tuple(result)


def struct_of(cls: Callable[..., R], fields: FieldSpec) -> Callable[[Decoder], R]:
    """Return a decoder for a struct with named fields.

    ``fields`` maps each field name to its decoder, in declaration order;
    it may be a mapping or an iterable of ``(name, decoder)`` pairs. The
    decoded values are passed to ``cls`` as keyword arguments.
    """
    if not callable(cls):
        raise TypeError("cls must be callable")
    spec = _normalise_fields(fields)

    def decode(decoder: Decoder) -> R:
        values = {name: item(decoder) for name, item in spec}
        return cls(**values)

    decode.__name__ = f"decode_{getattr(cls, '__name__', 'struct')}"
    return decode


def tuple_struct_of(cls: Callable[..., R], *args: ItemDecoder) -> Callable[[Decoder], R]:
    """Return a decoder for a tuple struct.

    Each positional decoder reads one field in order; the decoded values are
    passed to ``cls`` positionally.
    """
    if not callable(cls):
        raise TypeError("cls must be callable")
    for index, item in enumerate(args):
        if not callable(item):
            raise TypeError(f"decoder for field {index} is not callable")
    items = tuple(args)

    def decode(decoder: Decoder) -> R:
        return cls(*(item(decoder) for item in items))

    decode.__name__ = f"decode_{getattr(cls, '__name__', 'tuple_struct')}"
    return decode