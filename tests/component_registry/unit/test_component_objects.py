"""Category value shape tests."""

from __future__ import annotations

from typing import Any

import pytest
from oas_components.component_registry import (
    Callback,
    Example,
    Header,
    Link,
    Parameter,
    RequestBody,
    Response,
    Schema,
    SecurityScheme,
)
from oas_components.reference_union import ShapeError, UnknownFieldError

LOCATION = ("components", "things", "A")


def test_response_requires_description() -> None:
    with pytest.raises(ShapeError) as excinfo:
        Response.from_wire({"content": {}}, LOCATION)

    assert "missing required field 'description'" in str(excinfo.value)
    assert excinfo.value.location == LOCATION


def test_field_kind_mismatch_points_at_field() -> None:
    with pytest.raises(ShapeError) as excinfo:
        Response.from_wire({"description": 42}, LOCATION)

    assert excinfo.value.location == LOCATION + ("description",)
    assert excinfo.value.expected == ("string",)
    assert "got number" in str(excinfo.value)


def test_unknown_field_is_rejected_but_extensions_pass() -> None:
    with pytest.raises(UnknownFieldError) as excinfo:
        RequestBody.from_wire({"content": {}, "bogus": 1}, LOCATION)
    assert excinfo.value.key == "bogus"

    body = RequestBody.from_wire({"content": {}, "x-owner": "team-a"}, LOCATION)
    assert body.extensions == {"x-owner": "team-a"}


def test_top_level_ref_key_never_decodes_as_value() -> None:
    with pytest.raises(ShapeError) as excinfo:
        Schema.from_wire({"$ref": "#/components/schemas/Pet", "description": "x"}, LOCATION)

    assert "$ref" in excinfo.value.detail
    assert "$ref object" in excinfo.value.expected


def test_schema_is_open_ended_and_kept_verbatim() -> None:
    node = {"type": "object", "discriminator": {"propertyName": "kind"}, "minProperties": 1}

    schema = Schema.from_wire(node, LOCATION)

    assert schema.to_wire() == node
    assert schema.schema_type == "object"


def test_value_is_detached_from_input_and_read_only() -> None:
    node: dict[str, Any] = {"type": "object", "properties": {"id": {"type": "integer"}}}
    schema = Schema.from_wire(node, LOCATION)

    node["properties"]["id"]["type"] = "string"

    assert schema.fields["properties"]["id"]["type"] == "integer"
    with pytest.raises(TypeError):
        schema.fields["type"] = "array"  # type: ignore[index]


@pytest.mark.parametrize(
    ("node", "fragment"),
    [
        ({"name": "id", "in": "body"}, "'in' must be one of"),
        ({"name": "id", "in": "path"}, "required: true"),
        ({"name": "id", "in": "path", "required": False}, "required: true"),
        (
            {"name": "id", "in": "query", "schema": {}, "content": {}},
            "'schema' and 'content' are mutually exclusive",
        ),
        ({"name": "id", "in": "query"}, "either 'schema' or 'content' is required"),
    ],
)
def test_parameter_rules(node: dict[str, Any], fragment: str) -> None:
    with pytest.raises(ShapeError) as excinfo:
        Parameter.from_wire(node, LOCATION)

    assert fragment in str(excinfo.value)


def test_parameter_accessors() -> None:
    parameter = Parameter.from_wire(
        {"name": "petId", "in": "path", "required": True, "schema": {"type": "string"}}, LOCATION
    )

    assert parameter.name == "petId"
    assert parameter.location == "path"


def test_header_rejects_parameter_identity_fields() -> None:
    with pytest.raises(UnknownFieldError) as excinfo:
        Header.from_wire({"name": "X-Rate-Limit", "schema": {"type": "integer"}}, LOCATION)

    assert excinfo.value.key == "name"


@pytest.mark.parametrize(
    ("node", "fragment"),
    [
        ({"type": "apiKey", "in": "header"}, "missing required field 'name' for type 'apiKey'"),
        ({"type": "apiKey", "name": "k", "in": "body"}, "'in' must be one of"),
        ({"type": "http"}, "missing required field 'scheme'"),
        ({"type": "oauth2"}, "missing required field 'flows'"),
        ({"type": "openIdConnect"}, "missing required field 'openIdConnectUrl'"),
        ({"type": "password"}, "'type' must be one of"),
    ],
)
def test_security_scheme_rules(node: dict[str, Any], fragment: str) -> None:
    with pytest.raises(ShapeError) as excinfo:
        SecurityScheme.from_wire(node, LOCATION)

    assert fragment in str(excinfo.value)


def test_security_scheme_accepts_mutual_tls() -> None:
    scheme = SecurityScheme.from_wire({"type": "mutualTLS"}, LOCATION)

    assert scheme.scheme_type == "mutualTLS"


def test_example_and_link_exclusive_fields() -> None:
    with pytest.raises(ShapeError):
        Example.from_wire({"value": 1, "externalValue": "https://example.com/a.json"}, LOCATION)
    with pytest.raises(ShapeError):
        Link.from_wire({"operationRef": "#/paths/~1pets/get", "operationId": "getPet"}, LOCATION)


def test_callback_requires_path_item_objects() -> None:
    callback = Callback.from_wire(
        {"{$request.body#/url}": {"post": {}}, "x-note": "kept"}, LOCATION
    )
    assert callback.expressions == ("{$request.body#/url}",)

    with pytest.raises(ShapeError) as excinfo:
        Callback.from_wire({"{$request.body#/url}": "post"}, LOCATION)
    assert excinfo.value.location == LOCATION + ("{$request.body#/url}",)


def test_non_mapping_is_a_shape_error() -> None:
    with pytest.raises(ShapeError) as excinfo:
        Response.from_wire(["description"], LOCATION)

    assert excinfo.value.expected == ("response object",)
    assert "got array" in str(excinfo.value)


def test_header_requires_schema_or_content() -> None:
    with pytest.raises(ShapeError) as excinfo:
        Header.from_wire({"description": "Calls per hour allowed."}, LOCATION)

    assert "either 'schema' or 'content' is required" in str(excinfo.value)


def test_component_objects_are_explicitly_unhashable() -> None:
    schema = Schema.from_wire({"type": "string"}, LOCATION)

    assert Schema.__hash__ is None
    with pytest.raises(TypeError, match="unhashable type: 'Schema'"):
        hash(schema)
