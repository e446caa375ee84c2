"""Structural decoding failures."""

from __future__ import annotations

from collections.abc import Sequence

Location = tuple[str, ...]


class ComponentsError(Exception):
    """Base class for every failure raised by this package."""


def format_location(location: Sequence[str]) -> str:
    """Render path segments as a JSON Pointer fragment."""
    escaped = (segment.replace("~", "~0").replace("/", "~1") for segment in location)
    return "#/" + "/".join(escaped)


class ShapeError(ComponentsError):
    """Raised when a node matches none of the shapes admissible at its position."""

    def __init__(self, location: Sequence[str], expected: Sequence[str], detail: str) -> None:
        self.location: Location = tuple(location)
        self.expected: tuple[str, ...] = tuple(expected)
        self.detail = detail
        super().__init__(
            f"{format_location(self.location)}: {detail} (expected {' | '.join(self.expected)})"
        )

    def with_alternatives(self, alternatives: Sequence[str]) -> ShapeError:
        """Return a copy whose expected set also lists ``alternatives`` first."""
        merged = tuple(alternatives) + tuple(
            item for item in self.expected if item not in alternatives
        )
        return ShapeError(self.location, merged, self.detail)


class UnknownFieldError(ComponentsError):
    """Raised when an object holds a key outside its recognized field set."""

    def __init__(self, location: Sequence[str], key: str) -> None:
        self.location: Location = tuple(location)
        self.key = key
        super().__init__(f"{format_location(self.location)}: unknown field '{key}'")
