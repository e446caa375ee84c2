"""Components object parsing and serialization."""

from __future__ import annotations

import copy
from collections.abc import Mapping, Sequence
from typing import Any

from oas_components.reference_union import (
    ShapeError,
    UnknownFieldError,
    ValueOrRef,
    decode_value_or_ref,
    encode_value_or_ref,
)

from .component_objects import ComponentObject, describe_kind, is_extension_key
from .registry_models import ComponentCategory, ComponentRegistry

COMPONENTS_SHAPE = "components object"
DEFAULT_LOCATION = ("components",)


def parse_components(
    node: Any, *, location: Sequence[str] = DEFAULT_LOCATION
) -> ComponentRegistry:
    """Decode a components object into a registry.

    Every category is optional; a null category counts as absent. Keys that
    are neither category names nor ``x-`` extensions are rejected.
    """
    path = tuple(location)
    if not isinstance(node, Mapping):
        raise ShapeError(
            path, (COMPONENTS_SHAPE,), f"expected an object, got {describe_kind(node)}"
        )

    categories: dict[str, Mapping[str, ValueOrRef[Any]]] = {}
    extensions: dict[str, Any] = {}
    for key, value in node.items():
        if is_extension_key(key):
            extensions[key] = value
            continue
        category = ComponentCategory.from_wire(key) if isinstance(key, str) else None
        if category is None:
            raise UnknownFieldError(path, str(key))
        if value is None:
            continue
        categories[category.attribute] = _parse_category(category, value, path + (key,))

    return ComponentRegistry(**categories, extensions=extensions)


def _parse_category(
    category: ComponentCategory, node: Any, location: tuple[str, ...]
) -> dict[str, ValueOrRef[Any]]:
    if not isinstance(node, Mapping):
        raise ShapeError(
            location,
            (f"map of {category.value_type.shape}",),
            f"expected an object, got {describe_kind(node)}",
        )
    entries: dict[str, ValueOrRef[Any]] = {}
    for name, entry in node.items():
        if not isinstance(name, str):
            raise ShapeError(
                location, ("string name",), f"component names must be strings, got {name!r}"
            )
        entries[name] = decode_value_or_ref(
            entry,
            category.value_type.from_wire,
            location=location + (name,),
            allow_boolean=category.allows_boolean,
        )
    return entries


def serialize_components(registry: ComponentRegistry) -> dict[str, Any]:
    """Return the wire form of ``registry``.

    Absent categories are omitted; present ones are emitted even when empty.
    Entry names are sorted, extensions follow the categories.
    """
    wire: dict[str, Any] = {}
    for category in registry.present_categories():
        entries = registry.entries(category) or {}
        wire[category.value] = {
            name: encode_value_or_ref(entries[name], _encode_object) for name in sorted(entries)
        }
    for key, value in registry.extensions.items():
        wire[key] = copy.deepcopy(value)
    return wire


def _encode_object(value: ComponentObject) -> dict[str, Any]:
    return value.to_wire()
