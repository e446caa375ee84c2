"""Reference resolution against a components registry."""

from __future__ import annotations

import logging
from typing import Any

from oas_components.component_registry import ComponentCategory, ComponentRegistry
from oas_components.reference_union import (
    BooleanSchema,
    ComponentsError,
    InlineValue,
    Reference,
    ReferencePath,
    ValueOrRef,
)

_LOGGER = logging.getLogger(__name__)
_LOGGER.addHandler(logging.NullHandler())

COMPONENTS_SECTION = "components"


class ReferenceResolutionError(ComponentsError):
    """Base class for reference resolution failures."""

    def __init__(self, path: ReferencePath, message: str) -> None:
        self.path = path
        super().__init__(message)


class InvalidReferenceError(ReferenceResolutionError):
    """Raised when a local reference does not name a components entry."""

    def __init__(self, path: ReferencePath, reason: str) -> None:
        super().__init__(path, f"Invalid reference '{path}': {reason}")


class ExternalReferenceError(ReferenceResolutionError):
    """Raised for references into other documents, which are never fetched."""

    def __init__(self, path: ReferencePath) -> None:
        super().__init__(path, f"External reference '{path}' is not supported")


class UnresolvedReferenceError(ReferenceResolutionError):
    """Raised when a reference names an entry the registry does not hold."""

    def __init__(self, path: ReferencePath, category: ComponentCategory, name: str) -> None:
        self.category = category
        self.name = name
        super().__init__(
            path, f"Unresolved reference '{path}': no {category.value} entry '{name}'"
        )


class ReferenceCycleError(ReferenceResolutionError):
    """Raised when a chain of references revisits a path."""

    def __init__(self, chain: tuple[ReferencePath, ...]) -> None:
        self.chain = chain
        rendered = " -> ".join(str(item) for item in chain)
        super().__init__(chain[0], f"Reference cycle detected: {rendered}")


def parse_component_path(path: ReferencePath | str) -> tuple[ComponentCategory, str]:
    """Split ``#/components/<category>/<name>`` into its category and name."""
    reference_path = _as_path(path)
    if not reference_path.text.startswith("#"):
        raise ExternalReferenceError(reference_path)
    if not reference_path.is_local:
        raise InvalidReferenceError(reference_path, "local references must start with '#/'")

    segments = reference_path.segments()
    if len(segments) != 3:
        raise InvalidReferenceError(
            reference_path, f"expected #/{COMPONENTS_SECTION}/<category>/<name>"
        )
    section, category_key, name = segments
    if section != COMPONENTS_SECTION:
        raise InvalidReferenceError(reference_path, f"'{section}' is not the components section")
    category = ComponentCategory.from_wire(category_key)
    if category is None:
        raise InvalidReferenceError(reference_path, f"unknown category '{category_key}'")
    if not name:
        raise InvalidReferenceError(reference_path, "component name is empty")
    return category, name


def follow_reference(registry: ComponentRegistry, path: ReferencePath | str) -> ValueOrRef[Any]:
    """Return the entry ``path`` points at; it may itself be a reference."""
    reference_path = _as_path(path)
    category, name = parse_component_path(reference_path)
    entry = registry.lookup(category, name)
    if entry is None:
        raise UnresolvedReferenceError(reference_path, category, name)
    return entry


def resolve_reference(registry: ComponentRegistry, path: ReferencePath | str) -> Any:
    """Follow ``path`` through any chain of references to its value.

    Returns the inline value, or the bool of a boolean schema.
    """
    return resolve_entry(registry, Reference(path=_as_path(path)))


def resolve_entry(registry: ComponentRegistry, entry: ValueOrRef[Any]) -> Any:
    """Resolve an entry already in hand; non-references resolve to themselves."""
    visited: set[tuple[ComponentCategory, str]] = set()
    chain: list[ReferencePath] = []
    current = entry
    while isinstance(current, Reference):
        target = parse_component_path(current.path)
        if target in visited:
            raise ReferenceCycleError(tuple(chain) + (current.path,))
        visited.add(target)
        chain.append(current.path)
        _LOGGER.debug("Following reference %s", current.path)
        current = follow_reference(registry, current.path)

    if isinstance(current, BooleanSchema):
        return current.value
    if isinstance(current, InlineValue):
        return current.value
    raise TypeError(f"Unsupported reference union member: {type(current).__name__}")


def _as_path(path: ReferencePath | str) -> ReferencePath:
    if isinstance(path, ReferencePath):
        return path
    return ReferencePath(path)
