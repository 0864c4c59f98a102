"""Error hierarchy for the selector builder."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cssbuilder.selector.model import PartKind


class SelectorError(Exception):
    """Base error for everything the selector builder raises."""


class DuplicateUniquePartError(SelectorError):
    """An element, id or pseudo-element part was appended twice in a row."""

    def __init__(self, kind: PartKind) -> None:
        self.kind = kind
        super().__init__(
            "Element, id and pseudo-element should not occur more then one "
            "time inside the selector"
        )


class OutOfOrderPartError(SelectorError):
    """A part ranks lower than the part appended before it."""

    def __init__(self, kind: PartKind, previous_kind: PartKind | None) -> None:
        self.kind = kind
        self.previous_kind = previous_kind
        super().__init__(
            "Selector parts should be arranged in the following order: "
            "element, id, class, attribute, pseudo-class, pseudo-element"
        )


class SelectorDocumentError(SelectorError):
    """Raised when a selector tree document is malformed.

    Attributes:
        path: Location of the offending node inside the document, e.g.
            ``"combine[2].parts[1]"``. Empty for the document root.
    """

    def __init__(self, message: str, path: str = "") -> None:
        self.path = path
        if path:
            message = f"{message} (at {path})"
        super().__init__(message)
