"""Reference union exports."""

from .reference_models import BooleanSchema, InlineValue, Reference, ReferencePath, ValueOrRef
from .shape_errors import ComponentsError, ShapeError, UnknownFieldError, format_location
from .union_codec import (
    REF_KEY,
    decode_value_or_ref,
    encode_value_or_ref,
    is_reference_record,
    reject_reference_key,
)

__all__ = [
    "BooleanSchema",
    "InlineValue",
    "Reference",
    "ReferencePath",
    "ValueOrRef",
    "ComponentsError",
    "ShapeError",
    "UnknownFieldError",
    "format_location",
    "REF_KEY",
    "decode_value_or_ref",
    "encode_value_or_ref",
    "is_reference_record",
    "reject_reference_key",
]
