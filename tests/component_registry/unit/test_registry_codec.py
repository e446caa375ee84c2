"""Components object parsing and serialization tests."""

from __future__ import annotations

from typing import Any

import pytest
from oas_components.component_registry import (
    ComponentCategory,
    ComponentRegistry,
    Parameter,
    Schema,
    parse_components,
    serialize_components,
)
from oas_components.reference_union import (
    BooleanSchema,
    InlineValue,
    Reference,
    ReferencePath,
    ShapeError,
    UnknownFieldError,
)


def _components() -> dict[str, Any]:
    return {
        "schemas": {
            "Pet": {"type": "object", "properties": {"name": {"type": "string"}}},
            "PetAlias": {"$ref": "#/components/schemas/Pet"},
            "Anything": True,
            "Nothing": False,
        },
        "parameters": {"limit": {"name": "limit", "in": "query", "schema": {"type": "integer"}}},
        "responses": {},
        "x-internal-note": "draft",
    }


def test_parses_each_variant() -> None:
    registry = parse_components(_components())

    assert registry.schemas is not None
    assert isinstance(registry.schemas["Pet"], InlineValue)
    assert isinstance(registry.schemas["Pet"].value, Schema)
    assert registry.schemas["PetAlias"] == Reference(
        path=ReferencePath("#/components/schemas/Pet")
    )
    assert registry.schemas["Anything"] == BooleanSchema(value=True)
    assert registry.schemas["Nothing"] == BooleanSchema(value=False)
    assert registry.parameters is not None
    limit = registry.parameters["limit"]
    assert isinstance(limit, InlineValue) and isinstance(limit.value, Parameter)


def test_presence_and_emptiness_are_distinct() -> None:
    registry = parse_components(_components())

    assert registry.responses == {}
    assert registry.examples is None
    assert registry.present_categories() == (
        ComponentCategory.SCHEMAS,
        ComponentCategory.RESPONSES,
        ComponentCategory.PARAMETERS,
    )

    wire = serialize_components(registry)
    assert wire["responses"] == {}
    assert "examples" not in wire


def test_round_trip_preserves_content_and_field_presence() -> None:
    original = _components()

    registry = parse_components(original)
    wire = serialize_components(registry)

    assert wire == original
    assert set(wire) == set(original)
    assert parse_components(wire) == registry


def test_serialization_orders_categories_and_sorts_names() -> None:
    registry = parse_components(
        {
            "x-first": 1,
            "links": {"b": {}, "a": {}},
            "schemas": {"Z": True, "A": False},
        }
    )

    wire = serialize_components(registry)

    assert list(wire) == ["schemas", "links", "x-first"]
    assert list(wire["schemas"]) == ["A", "Z"]
    assert list(wire["links"]) == ["a", "b"]


def test_unknown_key_is_rejected_by_name() -> None:
    with pytest.raises(UnknownFieldError) as excinfo:
        parse_components({"schemas": {}, "foo": {}})

    assert excinfo.value.key == "foo"
    assert excinfo.value.location == ("components",)
    assert "'foo'" in str(excinfo.value)


def test_extension_passthrough() -> None:
    registry = parse_components({"x-internal-note": "draft", "x-owners": ["a", "b"]})

    assert registry.extensions == {"x-internal-note": "draft", "x-owners": ["a", "b"]}
    assert serialize_components(registry) == {"x-internal-note": "draft", "x-owners": ["a", "b"]}
    assert registry.present_categories() == ()


def test_boolean_shorthand_is_schema_only() -> None:
    with pytest.raises(ShapeError) as excinfo:
        parse_components({"responses": {"Ok": True}})

    assert excinfo.value.location == ("components", "responses", "Ok")
    assert "boolean" not in excinfo.value.expected
    assert excinfo.value.expected == ("$ref object", "response object")


@pytest.mark.parametrize(
    ("node", "location"),
    [
        ([], ("components",)),
        ({"schemas": []}, ("components", "schemas")),
        ({"schemas": {"Pet": "object"}}, ("components", "schemas", "Pet")),
        ({"headers": {"X": {"required": "yes"}}}, ("components", "headers", "X", "required")),
    ],
)
def test_shape_errors_carry_location(node: Any, location: tuple[str, ...]) -> None:
    with pytest.raises(ShapeError) as excinfo:
        parse_components(node)

    assert excinfo.value.location == location


def test_malformed_reference_surfaces_as_shape_error() -> None:
    with pytest.raises(ShapeError) as excinfo:
        parse_components({"examples": {"Rex": {"$ref": 7}}})

    assert "$ref" in excinfo.value.detail


def test_registry_is_read_only() -> None:
    registry = parse_components(_components())

    with pytest.raises(TypeError):
        registry.schemas["New"] = BooleanSchema(value=True)  # type: ignore[index]
    with pytest.raises(TypeError):
        registry.extensions["x-new"] = 1  # type: ignore[index]


def test_registry_copies_constructor_mappings() -> None:
    schemas: dict[str, Any] = {"A": BooleanSchema(value=True)}
    registry = ComponentRegistry(schemas=schemas)

    schemas["B"] = BooleanSchema(value=False)

    assert registry.schemas == {"A": BooleanSchema(value=True)}


def test_null_category_counts_as_absent() -> None:
    registry = parse_components({"schemas": None, "links": {}, "x-a": 1})

    assert registry.schemas is None
    assert registry.present_categories() == (ComponentCategory.LINKS,)
    assert serialize_components(registry) == {"links": {}, "x-a": 1}


def test_registry_is_explicitly_unhashable() -> None:
    registry = parse_components({"schemas": {"A": {"type": "string"}}})

    with pytest.raises(TypeError, match="unhashable type: 'ComponentRegistry'"):
        hash(registry)
    assert hash(Reference(path=ReferencePath("#/components/schemas/A"))) == hash(
        Reference(path=ReferencePath("#/components/schemas/A"))
    )
