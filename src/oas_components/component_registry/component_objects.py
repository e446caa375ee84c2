"""Reusable object shapes held by the components registry.

Each type keeps its wire mapping verbatim and validates only the top-level
structure: required fields, field kinds and the few cross-field rules the
OpenAPI 3.0 object definitions impose. Nested structure (schema keywords,
media types, path items) is carried opaquely.
"""

from __future__ import annotations

import copy
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, ClassVar, TypeVar

from oas_components.reference_union import ShapeError, UnknownFieldError, reject_reference_key

EXTENSION_PREFIX = "x-"

_ObjectT = TypeVar("_ObjectT", bound="ComponentObject")


def _is_array(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


_KIND_CHECKS: Mapping[str, Callable[[Any], bool]] = {
    "string": lambda value: isinstance(value, str),
    "boolean": lambda value: isinstance(value, bool),
    "object": lambda value: isinstance(value, Mapping),
    "array": _is_array,
}

_ANY: tuple[str, ...] = ()


def is_extension_key(key: Any) -> bool:
    """Return True for vendor extension keys (``x-`` prefixed)."""
    return isinstance(key, str) and key.startswith(EXTENSION_PREFIX)


def describe_kind(value: Any) -> str:
    """Return the wire kind name of ``value`` for error messages."""
    if value is None:
        return "null"
    for kind, check in _KIND_CHECKS.items():
        if check(value):
            return kind
    if isinstance(value, (int, float)):
        return "number"
    return type(value).__name__


@dataclass(frozen=True)
class ComponentObject:
    """Base for the nine reusable object kinds."""

    fields: Mapping[str, Any]

    shape: ClassVar[str] = "object"
    required_fields: ClassVar[Mapping[str, tuple[str, ...]]] = {}
    optional_fields: ClassVar[Mapping[str, tuple[str, ...]]] = {}
    open_ended: ClassVar[bool] = False

    # Mapping fields are unhashable; subclasses must not regain a generated hash.
    __hash__ = None  # type: ignore[assignment]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls.__hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", MappingProxyType(copy.deepcopy(dict(self.fields))))

    @classmethod
    def from_wire(cls: type[_ObjectT], node: Any, location: Sequence[str]) -> _ObjectT:
        """Validate ``node`` against this object's shape and wrap it."""
        path = tuple(location)
        if not isinstance(node, Mapping):
            raise ShapeError(path, (cls.shape,), f"expected an object, got {describe_kind(node)}")
        reject_reference_key(node, path, cls.shape)

        for name in cls.required_fields:
            if name not in node:
                raise ShapeError(path, (cls.shape,), f"missing required field '{name}'")

        known = {**cls.optional_fields, **cls.required_fields}
        for key, value in node.items():
            if not isinstance(key, str):
                raise ShapeError(path, (cls.shape,), f"field names must be strings, got {key!r}")
            if is_extension_key(key):
                continue
            if key not in known:
                if cls.open_ended:
                    continue
                raise UnknownFieldError(path, key)
            _check_kind(value, known[key], path + (key,))

        cls._check_constraints(node, path)
        return cls(fields=node)

    @classmethod
    def _check_constraints(cls, node: Mapping[str, Any], location: tuple[str, ...]) -> None:
        """Hook for cross-field rules."""

    def to_wire(self) -> dict[str, Any]:
        """Return a detached copy of the wire mapping."""
        return copy.deepcopy(dict(self.fields))

    def get(self, key: str, default: Any = None) -> Any:
        return self.fields.get(key, default)

    @property
    def extensions(self) -> Mapping[str, Any]:
        """Vendor extension fields carried by this object."""
        return {key: value for key, value in self.fields.items() if is_extension_key(key)}


def _check_kind(value: Any, kinds: tuple[str, ...], location: tuple[str, ...]) -> None:
    if not kinds:
        return
    if any(_KIND_CHECKS[kind](value) for kind in kinds):
        return
    raise ShapeError(location, kinds, f"got {describe_kind(value)}")


def _mutually_exclusive(
    node: Mapping[str, Any], location: tuple[str, ...], shape: str, first: str, second: str
) -> None:
    if first in node and second in node:
        raise ShapeError(location, (shape,), f"'{first}' and '{second}' are mutually exclusive")


def _require_schema_or_content(
    node: Mapping[str, Any], location: tuple[str, ...], shape: str
) -> None:
    _mutually_exclusive(node, location, shape, "schema", "content")
    if "schema" not in node and "content" not in node:
        raise ShapeError(location, (shape,), "either 'schema' or 'content' is required")


def _require_one_of(
    node: Mapping[str, Any],
    location: tuple[str, ...],
    shape: str,
    field_name: str,
    allowed: tuple[str, ...],
) -> None:
    value = node.get(field_name)
    if value not in allowed:
        raise ShapeError(
            location + (field_name,),
            allowed,
            f"'{field_name}' must be one of {', '.join(allowed)}, got {value!r}",
        )


_SERIALIZATION_FIELDS: Mapping[str, tuple[str, ...]] = {
    "description": ("string",),
    "required": ("boolean",),
    "deprecated": ("boolean",),
    "allowEmptyValue": ("boolean",),
    "style": ("string",),
    "explode": ("boolean",),
    "allowReserved": ("boolean",),
    "schema": ("object", "boolean"),
    "example": _ANY,
    "examples": ("object",),
    "content": ("object",),
}


@dataclass(frozen=True)
class Schema(ComponentObject):
    """Schema Object; JSON Schema keywords beyond the checked ones pass through."""

    shape: ClassVar[str] = "schema object"
    optional_fields: ClassVar[Mapping[str, tuple[str, ...]]] = {
        "type": ("string", "array"),
        "properties": ("object",),
        "required": ("array",),
        "items": ("object", "boolean"),
        "additionalProperties": ("object", "boolean"),
        "nullable": ("boolean",),
        "description": ("string",),
        "enum": ("array",),
    }
    open_ended: ClassVar[bool] = True

    @property
    def schema_type(self) -> Any:
        return self.fields.get("type")


@dataclass(frozen=True)
class Response(ComponentObject):
    """Response Object."""

    shape: ClassVar[str] = "response object"
    required_fields: ClassVar[Mapping[str, tuple[str, ...]]] = {"description": ("string",)}
    optional_fields: ClassVar[Mapping[str, tuple[str, ...]]] = {
        "headers": ("object",),
        "content": ("object",),
        "links": ("object",),
    }

    @property
    def description(self) -> str:
        return self.fields["description"]


@dataclass(frozen=True)
class Parameter(ComponentObject):
    """Parameter Object."""

    shape: ClassVar[str] = "parameter object"
    required_fields: ClassVar[Mapping[str, tuple[str, ...]]] = {
        "name": ("string",),
        "in": ("string",),
    }
    optional_fields: ClassVar[Mapping[str, tuple[str, ...]]] = _SERIALIZATION_FIELDS

    locations: ClassVar[tuple[str, ...]] = ("query", "header", "path", "cookie")

    @classmethod
    def _check_constraints(cls, node: Mapping[str, Any], location: tuple[str, ...]) -> None:
        _require_one_of(node, location, cls.shape, "in", cls.locations)
        if node["in"] == "path" and node.get("required") is not True:
            raise ShapeError(
                location + ("required",), ("boolean",), "path parameters must set required: true"
            )
        _require_schema_or_content(node, location, cls.shape)
        _mutually_exclusive(node, location, cls.shape, "example", "examples")

    @property
    def name(self) -> str:
        return self.fields["name"]

    @property
    def location(self) -> str:
        """Where the parameter travels (the wire ``in`` field)."""
        return self.fields["in"]


@dataclass(frozen=True)
class Example(ComponentObject):
    """Example Object."""

    shape: ClassVar[str] = "example object"
    optional_fields: ClassVar[Mapping[str, tuple[str, ...]]] = {
        "summary": ("string",),
        "description": ("string",),
        "value": _ANY,
        "externalValue": ("string",),
    }

    @classmethod
    def _check_constraints(cls, node: Mapping[str, Any], location: tuple[str, ...]) -> None:
        _mutually_exclusive(node, location, cls.shape, "value", "externalValue")


@dataclass(frozen=True)
class RequestBody(ComponentObject):
    """Request Body Object."""

    shape: ClassVar[str] = "request body object"
    required_fields: ClassVar[Mapping[str, tuple[str, ...]]] = {"content": ("object",)}
    optional_fields: ClassVar[Mapping[str, tuple[str, ...]]] = {
        "description": ("string",),
        "required": ("boolean",),
    }


@dataclass(frozen=True)
class Header(ComponentObject):
    """Header Object: a parameter without ``name`` and ``in``."""

    shape: ClassVar[str] = "header object"
    optional_fields: ClassVar[Mapping[str, tuple[str, ...]]] = _SERIALIZATION_FIELDS

    @classmethod
    def _check_constraints(cls, node: Mapping[str, Any], location: tuple[str, ...]) -> None:
        _require_schema_or_content(node, location, cls.shape)
        _mutually_exclusive(node, location, cls.shape, "example", "examples")


@dataclass(frozen=True)
class SecurityScheme(ComponentObject):
    """Security Scheme Object."""

    shape: ClassVar[str] = "security scheme object"
    required_fields: ClassVar[Mapping[str, tuple[str, ...]]] = {"type": ("string",)}
    optional_fields: ClassVar[Mapping[str, tuple[str, ...]]] = {
        "description": ("string",),
        "name": ("string",),
        "in": ("string",),
        "scheme": ("string",),
        "bearerFormat": ("string",),
        "flows": ("object",),
        "openIdConnectUrl": ("string",),
    }

    scheme_types: ClassVar[tuple[str, ...]] = (
        "apiKey",
        "http",
        "oauth2",
        "openIdConnect",
        "mutualTLS",
    )
    _type_requirements: ClassVar[Mapping[str, tuple[str, ...]]] = {
        "apiKey": ("name", "in"),
        "http": ("scheme",),
        "oauth2": ("flows",),
        "openIdConnect": ("openIdConnectUrl",),
    }

    @classmethod
    def _check_constraints(cls, node: Mapping[str, Any], location: tuple[str, ...]) -> None:
        _require_one_of(node, location, cls.shape, "type", cls.scheme_types)
        scheme_type = node["type"]
        for name in cls._type_requirements.get(scheme_type, ()):
            if name not in node:
                raise ShapeError(
                    location,
                    (cls.shape,),
                    f"missing required field '{name}' for type '{scheme_type}'",
                )
        if scheme_type == "apiKey":
            _require_one_of(node, location, cls.shape, "in", ("query", "header", "cookie"))

    @property
    def scheme_type(self) -> str:
        return self.fields["type"]


@dataclass(frozen=True)
class Link(ComponentObject):
    """Link Object."""

    shape: ClassVar[str] = "link object"
    optional_fields: ClassVar[Mapping[str, tuple[str, ...]]] = {
        "operationRef": ("string",),
        "operationId": ("string",),
        "parameters": ("object",),
        "requestBody": _ANY,
        "description": ("string",),
        "server": ("object",),
    }

    @classmethod
    def _check_constraints(cls, node: Mapping[str, Any], location: tuple[str, ...]) -> None:
        _mutually_exclusive(node, location, cls.shape, "operationRef", "operationId")


@dataclass(frozen=True)
class Callback(ComponentObject):
    """Callback Object: runtime expressions mapped to path item objects."""

    shape: ClassVar[str] = "callback object"
    open_ended: ClassVar[bool] = True

    @classmethod
    def _check_constraints(cls, node: Mapping[str, Any], location: tuple[str, ...]) -> None:
        for expression, path_item in node.items():
            if is_extension_key(expression):
                continue
            _check_kind(path_item, ("object",), location + (expression,))

    @property
    def expressions(self) -> tuple[str, ...]:
        return tuple(key for key in self.fields if not is_extension_key(key))
