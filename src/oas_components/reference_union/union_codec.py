"""Reference-or-value decoding and encoding."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any, TypeVar

from .reference_models import BooleanSchema, InlineValue, Reference, ReferencePath, ValueOrRef
from .shape_errors import ShapeError

T = TypeVar("T")

REF_KEY = "$ref"
REFERENCE_SHAPE = "$ref object"
BOOLEAN_SHAPE = "boolean"

ValueDecoder = Callable[[Any, tuple[str, ...]], T]
ValueEncoder = Callable[[T], Any]


def is_reference_record(node: Any) -> bool:
    """Return True when ``node`` is an object holding exactly one string ``$ref``."""
    return (
        isinstance(node, Mapping)
        and len(node) == 1
        and REF_KEY in node
        and isinstance(node[REF_KEY], str)
    )


def decode_value_or_ref(
    node: Any,
    decode_value: ValueDecoder[T],
    *,
    location: Sequence[str],
    allow_boolean: bool = False,
) -> ValueOrRef[T]:
    """Discriminate ``node`` into a reference, a boolean schema or an inline value.

    Candidates are tried in a fixed order: reference record, boolean (only when
    ``allow_boolean``), then ``decode_value``. A value-shape failure at the node
    itself is re-raised listing every alternative admissible at this position;
    failures nested deeper in the value propagate unchanged.
    """
    path = tuple(location)
    if is_reference_record(node):
        return Reference(path=ReferencePath(node[REF_KEY]))
    if allow_boolean and isinstance(node, bool):
        return BooleanSchema(value=node)

    alternatives = (REFERENCE_SHAPE, BOOLEAN_SHAPE) if allow_boolean else (REFERENCE_SHAPE,)
    try:
        value = decode_value(node, path)
    except ShapeError as exc:
        if exc.location != path:
            raise
        raise exc.with_alternatives(alternatives) from exc
    return InlineValue(value=value)


def encode_value_or_ref(item: ValueOrRef[T], encode_value: ValueEncoder[T]) -> Any:
    """Return the wire form of ``item``."""
    if isinstance(item, Reference):
        return {REF_KEY: item.path.text}
    if isinstance(item, BooleanSchema):
        return item.value
    if isinstance(item, InlineValue):
        return encode_value(item.value)
    raise TypeError(f"Unsupported reference union member: {type(item).__name__}")


def reject_reference_key(node: Mapping[str, Any], location: Sequence[str], shape: str) -> None:
    """Fail when an inline object carries ``$ref``; no value shape may collide with it."""
    if REF_KEY in node:
        raise ShapeError(
            location,
            (REFERENCE_SHAPE, shape),
            f"reference objects must hold exactly one string '{REF_KEY}'",
        )
