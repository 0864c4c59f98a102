"""Selector tree documents: JSON-friendly descriptions of complex selectors.

Document shape:
    {"parts": [["element", "div"], ["id", "main"], ["class", "container"]]}
    {"combine": [<node>, "+", <node>]}

Documents are folded through the builder, so the ordering and uniqueness
rules apply exactly as they do to chained calls.
"""

from __future__ import annotations

import json
from typing import Any

from cssbuilder.errors import SelectorDocumentError
from cssbuilder.selector.model import PartKind, Selector, combine

__all__ = [
    "build_selector",
    "kind_from_name",
    "load_selector",
    "parts_to_selector",
    "selector_to_dict",
]

_KIND_ALIASES: dict[str, PartKind] = {
    "element": PartKind.ELEMENT,
    "id": PartKind.ID,
    "class": PartKind.CLASS,
    "attr": PartKind.ATTRIBUTE,
    "attribute": PartKind.ATTRIBUTE,
    "pseudoClass": PartKind.PSEUDO_CLASS,
    "pseudo_class": PartKind.PSEUDO_CLASS,
    "pseudo-class": PartKind.PSEUDO_CLASS,
    "pseudoElement": PartKind.PSEUDO_ELEMENT,
    "pseudo_element": PartKind.PSEUDO_ELEMENT,
    "pseudo-element": PartKind.PSEUDO_ELEMENT,
}


def kind_from_name(name: str, path: str = "") -> PartKind:
    """Look up a part kind by any of its accepted spellings."""
    try:
        return _KIND_ALIASES[name]
    except KeyError:
        raise SelectorDocumentError(f"Unknown selector part kind: {name!r}", path) from None


def parts_to_selector(parts: list[tuple[str, str]], path: str = "") -> Selector:
    """Build one compound selector from ordered ``(kind, value)`` pairs."""
    selector = Selector()
    for index, part in enumerate(parts):
        part_path = f"{path}.parts[{index}]" if path else f"parts[{index}]"
        if not isinstance(part, (list, tuple)) or len(part) != 2:
            raise SelectorDocumentError(
                f"Expected a [kind, value] pair, got {part!r}", part_path
            )
        name, value = part
        if not isinstance(name, str):
            raise SelectorDocumentError(
                f"Part kind must be a string, got {name!r}", part_path
            )
        if not isinstance(value, str):
            raise SelectorDocumentError(
                f"Part value must be a string, got {value!r}", part_path
            )
        selector = selector.append(kind_from_name(name, part_path), value)
    return selector


def build_selector(node: Any, path: str = "") -> Selector:
    """Recursively build a Selector from a tree document node."""
    if not isinstance(node, dict):
        raise SelectorDocumentError(f"Expected an object, got {type(node).__name__}", path)

    if "parts" in node:
        parts = node["parts"]
        if not isinstance(parts, list) or not parts:
            raise SelectorDocumentError("'parts' must be a non-empty list", path)
        return parts_to_selector(parts, path)

    if "combine" in node:
        operands = node["combine"]
        if not isinstance(operands, list) or len(operands) != 3:
            raise SelectorDocumentError(
                "'combine' must be a [left, combinator, right] list", path
            )
        left, combinator, right = operands
        if not isinstance(combinator, str):
            raise SelectorDocumentError(
                f"Combinator must be a string, got {combinator!r}", path
            )
        prefix = f"{path}." if path else ""
        return combine(
            build_selector(left, f"{prefix}combine[0]"),
            combinator,
            build_selector(right, f"{prefix}combine[2]"),
        )

    raise SelectorDocumentError("Node needs either a 'parts' or a 'combine' key", path)


def load_selector(source: str) -> Selector:
    """Parse JSON ``source`` and build the selector it describes."""
    try:
        document = json.loads(source)
    except json.JSONDecodeError as exc:
        raise SelectorDocumentError(f"Invalid JSON: {exc.msg} (line {exc.lineno})") from exc
    return build_selector(document)


def selector_to_dict(selector: Selector) -> dict[str, Any]:
    return {
        "text": selector.text,
        "last_kind": selector.last_kind.value if selector.last_kind else None,
        "rank_history": list(selector.rank_history),
    }
