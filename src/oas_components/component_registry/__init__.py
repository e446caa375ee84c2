"""Components registry exports."""

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
    is_extension_key,
)
from .registry_codec import parse_components, serialize_components
from .registry_models import ComponentCategory, ComponentRegistry

__all__ = [
    "Callback",
    "ComponentObject",
    "Example",
    "Header",
    "Link",
    "Parameter",
    "RequestBody",
    "Response",
    "Schema",
    "SecurityScheme",
    "is_extension_key",
    "parse_components",
    "serialize_components",
    "ComponentCategory",
    "ComponentRegistry",
]
