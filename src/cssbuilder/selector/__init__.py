from cssbuilder.selector.builder import SelectorBuilder, css_selector_builder
from cssbuilder.selector.document import (
    build_selector,
    kind_from_name,
    load_selector,
    parts_to_selector,
    selector_to_dict,
)
from cssbuilder.selector.model import PartKind, Selector, combine

__all__ = [
    "PartKind",
    "Selector",
    "SelectorBuilder",
    "build_selector",
    "combine",
    "css_selector_builder",
    "kind_from_name",
    "load_selector",
    "parts_to_selector",
    "selector_to_dict",
]
