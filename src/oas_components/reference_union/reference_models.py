"""Reference union entities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union
from urllib.parse import unquote

T = TypeVar("T")

LOCAL_PREFIX = "#/"


@dataclass(frozen=True)
class ReferencePath:
    """Verbatim ``$ref`` string; syntax is checked only when it is resolved."""

    text: str

    @property
    def is_local(self) -> bool:
        """Return True when the path points into the current document."""
        return self.text.startswith(LOCAL_PREFIX)

    def segments(self) -> tuple[str, ...]:
        """Decode the JSON Pointer fragment into its raw segments."""
        if not self.is_local:
            return ()
        pointer = self.text[len(LOCAL_PREFIX) :]
        return tuple(
            unquote(segment).replace("~1", "/").replace("~0", "~")
            for segment in pointer.split("/")
        )

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class Reference:
    """Pointer to a shared definition elsewhere in the document."""

    path: ReferencePath


@dataclass(frozen=True)
class InlineValue(Generic[T]):
    """Definition given directly at its point of use."""

    value: T


@dataclass(frozen=True)
class BooleanSchema:
    """Schema shorthand: ``true`` accepts anything, ``false`` accepts nothing."""

    value: bool


ValueOrRef = Union[Reference, InlineValue[T], BooleanSchema]
