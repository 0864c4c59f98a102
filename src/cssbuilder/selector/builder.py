"""Fluent facade over Selector, mirroring the cssSelectorBuilder exercise."""

from __future__ import annotations

from cssbuilder.selector.model import Selector, combine

__all__ = ["SelectorBuilder", "css_selector_builder"]


class SelectorBuilder:
    """Entry point for building selectors from an empty root.

    Each start method is the same operation as the one on Selector, applied
    to the empty root, so ``builder.id("main")`` and
    ``builder.element("div").id("main")`` follow identical rules.

    Example:
        >>> b = SelectorBuilder()
        >>> b.element("a").attr('href$=".png"').pseudoClass("focus").stringify()
        'a[href$=".png"]:focus'
    """

    def __init__(self, root: Selector | None = None) -> None:
        self.root = root or Selector()

    def element(self, value: str) -> Selector:
        return self.root.element(value)

    def id(self, value: str) -> Selector:
        return self.root.id(value)

    def class_(self, value: str) -> Selector:
        return self.root.class_(value)

    def attr(self, value: str) -> Selector:
        return self.root.attr(value)

    def pseudo_class(self, value: str) -> Selector:
        return self.root.pseudo_class(value)

    def pseudo_element(self, value: str) -> Selector:
        return self.root.pseudo_element(value)

    pseudoClass = pseudo_class
    pseudoElement = pseudo_element

    def combine(self, left: Selector, combinator: str, right: Selector) -> Selector:
        return combine(left, combinator, right)

    def stringify(self, selector: Selector | None = None) -> str:
        """Render ``selector``, or the root when called without one."""
        if selector is None:
            return self.root.stringify()
        return selector.stringify()


css_selector_builder = SelectorBuilder()
