"""Document loading and dumping service."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from oas_components.component_registry import (
    ComponentRegistry,
    parse_components,
    serialize_components,
)
from oas_components.reference_union import ComponentsError

_LOGGER = logging.getLogger(__name__)
_LOGGER.addHandler(logging.NullHandler())

COMPONENTS_KEY = "components"
SUPPORTED_FORMATS = ("yaml", "json")
_JSON_SUFFIXES = (".json",)


class DocumentLoadError(ComponentsError):
    """Raised when a document cannot be read or decoded."""


def load_components(source: Path | str) -> ComponentRegistry:
    """Read a JSON or YAML document and parse its components section."""
    path = Path(source)
    if not path.exists():
        raise DocumentLoadError(f"Document not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DocumentLoadError(f"Failed to read document {path}: {exc}") from exc

    source_format = "json" if path.suffix.lower() in _JSON_SUFFIXES else "yaml"
    _LOGGER.debug("Loading %s document from %s", source_format, path)
    return load_components_text(text, source_format=source_format)


def load_components_text(text: str, *, source_format: str = "yaml") -> ComponentRegistry:
    """Decode document text and parse its components section."""
    _require_format(source_format)
    if source_format == "json":
        try:
            root = json.loads(text)
        except json.JSONDecodeError as exc:
            raise DocumentLoadError(f"Invalid JSON document: {exc}") from exc
    else:
        try:
            root = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise DocumentLoadError(f"Invalid YAML document: {exc}") from exc
    return parse_document(root)


def parse_document(root: Any) -> ComponentRegistry:
    """Parse the components section of an already decoded document.

    A document without a ``components`` key, or with a null one, yields a
    registry with every category absent.
    """
    if root is None:
        root = {}
    if not isinstance(root, Mapping):
        raise DocumentLoadError("Document root must be a mapping.")
    if root.get(COMPONENTS_KEY) is None:
        return ComponentRegistry()
    return parse_components(root[COMPONENTS_KEY], location=(COMPONENTS_KEY,))


def dump_components(registry: ComponentRegistry, *, output_format: str = "yaml") -> str:
    """Render ``registry`` as a ``{"components": ...}`` document."""
    _require_format(output_format)
    document = {COMPONENTS_KEY: serialize_components(registry)}
    if output_format == "json":
        return render_json(document) + "\n"
    return yaml.safe_dump(document, sort_keys=False, allow_unicode=True)


def render_json(value: Any) -> str:
    """Render ``value`` as indented JSON, failing on values JSON cannot hold."""
    try:
        return json.dumps(value, indent=2, ensure_ascii=False)
    except (TypeError, ValueError) as exc:
        raise DocumentLoadError(f"Value cannot be represented as JSON: {exc}") from exc


def _require_format(value: str) -> None:
    if value not in SUPPORTED_FORMATS:
        expected = ", ".join(SUPPORTED_FORMATS)
        raise DocumentLoadError(
            f"Unsupported document format '{value}'; expected one of {expected}."
        )
