"""Reference resolution exports."""

from .resolver import (
    ExternalReferenceError,
    InvalidReferenceError,
    ReferenceCycleError,
    ReferenceResolutionError,
    UnresolvedReferenceError,
    follow_reference,
    parse_component_path,
    resolve_entry,
    resolve_reference,
)

__all__ = [
    "ExternalReferenceError",
    "InvalidReferenceError",
    "ReferenceCycleError",
    "ReferenceResolutionError",
    "UnresolvedReferenceError",
    "follow_reference",
    "parse_component_path",
    "resolve_entry",
    "resolve_reference",
]
