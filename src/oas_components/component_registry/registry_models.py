"""Components registry entities."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any

from oas_components.reference_union import ValueOrRef

from .component_objects import (
    Callback,
    ComponentObject,
    Example,
    Header,
    Link,
    Parameter,
    RequestBody,
    Response,
    Schema,
    SecurityScheme,
)


class ComponentCategory(Enum):
    """Reusable object kinds; each value is the category's wire key."""

    SCHEMAS = "schemas"
    RESPONSES = "responses"
    PARAMETERS = "parameters"
    EXAMPLES = "examples"
    REQUEST_BODIES = "requestBodies"
    HEADERS = "headers"
    SECURITY_SCHEMES = "securitySchemes"
    LINKS = "links"
    CALLBACKS = "callbacks"

    @classmethod
    def from_wire(cls, key: str) -> ComponentCategory | None:
        """Return the category for a wire key, or None when unrecognized."""
        try:
            return cls(key)
        except ValueError:
            return None

    @property
    def attribute(self) -> str:
        """Attribute name on :class:`ComponentRegistry`."""
        return self.name.lower()

    @property
    def value_type(self) -> type[ComponentObject]:
        return _VALUE_TYPES[self]

    @property
    def allows_boolean(self) -> bool:
        """Only schemas admit the ``true``/``false`` shorthand."""
        return self is ComponentCategory.SCHEMAS


_VALUE_TYPES: Mapping[ComponentCategory, type[ComponentObject]] = {
    ComponentCategory.SCHEMAS: Schema,
    ComponentCategory.RESPONSES: Response,
    ComponentCategory.PARAMETERS: Parameter,
    ComponentCategory.EXAMPLES: Example,
    ComponentCategory.REQUEST_BODIES: RequestBody,
    ComponentCategory.HEADERS: Header,
    ComponentCategory.SECURITY_SCHEMES: SecurityScheme,
    ComponentCategory.LINKS: Link,
    ComponentCategory.CALLBACKS: Callback,
}

CategoryEntries = Mapping[str, ValueOrRef[Any]]


def _read_only(entries: Mapping[str, Any] | None) -> Mapping[str, Any] | None:
    if entries is None:
        return None
    return MappingProxyType(dict(entries))


@dataclass(frozen=True)
class ComponentRegistry:  # pylint: disable=too-many-instance-attributes
    """Typed view of a document's ``components`` object.

    A category set to None was absent on the wire; an empty mapping was
    present with no entries. The distinction survives serialization.
    """

    schemas: Mapping[str, ValueOrRef[Schema]] | None = None
    responses: Mapping[str, ValueOrRef[Response]] | None = None
    parameters: Mapping[str, ValueOrRef[Parameter]] | None = None
    examples: Mapping[str, ValueOrRef[Example]] | None = None
    request_bodies: Mapping[str, ValueOrRef[RequestBody]] | None = None
    headers: Mapping[str, ValueOrRef[Header]] | None = None
    security_schemes: Mapping[str, ValueOrRef[SecurityScheme]] | None = None
    links: Mapping[str, ValueOrRef[Link]] | None = None
    callbacks: Mapping[str, ValueOrRef[Callback]] | None = None
    extensions: Mapping[str, Any] = field(default_factory=dict)

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        for category in ComponentCategory:
            object.__setattr__(
                self, category.attribute, _read_only(getattr(self, category.attribute))
            )
        extensions = copy.deepcopy(dict(self.extensions))
        object.__setattr__(self, "extensions", MappingProxyType(extensions))

    def entries(self, category: ComponentCategory) -> CategoryEntries | None:
        """Return the mapping for ``category``, or None when it is absent."""
        return getattr(self, category.attribute)

    def lookup(self, category: ComponentCategory, name: str) -> ValueOrRef[Any] | None:
        """Return the entry registered under ``name``, or None when not found."""
        entries = self.entries(category)
        if entries is None:
            return None
        return entries.get(name)

    def present_categories(self) -> tuple[ComponentCategory, ...]:
        return tuple(
            category for category in ComponentCategory if self.entries(category) is not None
        )
