"""Document loading exports."""

from .loader import (
    SUPPORTED_FORMATS,
    DocumentLoadError,
    dump_components,
    load_components,
    load_components_text,
    parse_document,
    render_json,
)

__all__ = [
    "SUPPORTED_FORMATS",
    "DocumentLoadError",
    "dump_components",
    "load_components",
    "load_components_text",
    "parse_document",
    "render_json",
]
