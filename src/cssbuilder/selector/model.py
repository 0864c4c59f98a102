"""Selector model: part kinds and the immutable Selector value."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum

from cssbuilder.errors import DuplicateUniquePartError, OutOfOrderPartError

logger = logging.getLogger(__name__)


class PartKind(Enum):
    """Kind of a simple selector inside a compound selector."""

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudoClass"
    PSEUDO_ELEMENT = "pseudoElement"

    @property
    def rank(self) -> int:
        return _RANKS[self]

    @property
    def unique(self) -> bool:
        """Whether the kind may occur at most once per compound selector."""
        return self in _UNIQUE_KINDS

    def render(self, value: str) -> str:
        return _FORMATS[self].format(value=value)


# Order mandated by CSS for simple selectors within a compound selector.
_RANKS: dict[PartKind, int] = {
    PartKind.ELEMENT: 1,
    PartKind.ID: 2,
    PartKind.CLASS: 3,
    PartKind.ATTRIBUTE: 4,
    PartKind.PSEUDO_CLASS: 5,
    PartKind.PSEUDO_ELEMENT: 6,
}

_FORMATS: dict[PartKind, str] = {
    PartKind.ELEMENT: "{value}",
    PartKind.ID: "#{value}",
    PartKind.CLASS: ".{value}",
    PartKind.ATTRIBUTE: "[{value}]",
    PartKind.PSEUDO_CLASS: ":{value}",
    PartKind.PSEUDO_ELEMENT: "::{value}",
}

_UNIQUE_KINDS = frozenset({PartKind.ELEMENT, PartKind.ID, PartKind.PSEUDO_ELEMENT})


@dataclass(frozen=True)
class Selector:
    """A rendered CSS selector built one simple part at a time.

    Every builder method returns a new Selector; the receiver is left
    untouched, so two chains may safely branch off a shared prefix.

    Attributes:
        text: The selector rendered so far.
        last_kind: Kind of the most recently appended part, or None for the
            empty root and for the result of a combination.
        rank_history: Ranks of the parts appended since the last combinator.
    """

    text: str = ""
    last_kind: PartKind | None = None
    rank_history: tuple[int, ...] = ()

    @property
    def last_rank(self) -> int | None:
        return self.rank_history[-1] if self.rank_history else None

    @property
    def is_empty(self) -> bool:
        return not self.text

    # --- simple selectors -----------------------------------------------------

    def append(self, kind: PartKind, value: str) -> Selector:
        """Return a new selector with one ``kind`` part appended.

        Raises:
            DuplicateUniquePartError: ``kind`` is element, id or
                pseudo-element and the previous part has the same kind.
            OutOfOrderPartError: ``kind`` ranks lower than the previous part.
        """
        if kind.unique and self.last_kind is kind:
            raise DuplicateUniquePartError(kind)
        last_rank = self.last_rank
        if last_rank is not None and kind.rank < last_rank:
            raise OutOfOrderPartError(kind, self.last_kind)

        text = self.text + kind.render(value)
        logger.debug("Appended %s part %r -> %r", kind.value, value, text)
        return replace(
            self,
            text=text,
            last_kind=kind,
            rank_history=self.rank_history + (kind.rank,),
        )

    def element(self, value: str) -> Selector:
        return self.append(PartKind.ELEMENT, value)

    def id(self, value: str) -> Selector:
        return self.append(PartKind.ID, value)

    def class_(self, value: str) -> Selector:
        return self.append(PartKind.CLASS, value)

    def attr(self, value: str) -> Selector:
        return self.append(PartKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> Selector:
        return self.append(PartKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> Selector:
        return self.append(PartKind.PSEUDO_ELEMENT, value)

    # camelCase spellings used by the CSS selector builder exercise
    pseudoClass = pseudo_class
    pseudoElement = pseudo_element

    # --- rendering ------------------------------------------------------------

    def stringify(self) -> str:
        return self.text

    def __str__(self) -> str:
        return self.text


def combine(left: Selector, combinator: str, right: Selector) -> Selector:
    """Join two selectors with a combinator into a new complex selector.

    The combinator is always padded with one space on each side, so the
    descendant combinator ``" "`` renders as three spaces. Ordering checks
    restart after the combinator.
    """
    text = f"{left.text} {combinator} {right.text}"
    logger.debug("Combined selectors with %r -> %r", combinator, text)
    return Selector(text=text)
