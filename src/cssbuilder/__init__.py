"""cssbuilder: fluent CSS selector builder with ordering validation."""

from __future__ import annotations

__version__ = "0.1.0"

from cssbuilder.config import CssBuilderConfig  # noqa: E402
from cssbuilder.errors import (  # noqa: E402
    DuplicateUniquePartError,
    OutOfOrderPartError,
    SelectorDocumentError,
    SelectorError,
)
from cssbuilder.objects import Rectangle, from_json, to_json  # noqa: E402
from cssbuilder.selector import (  # noqa: E402
    PartKind,
    Selector,
    SelectorBuilder,
    combine,
    css_selector_builder,
)

__all__ = [
    "__version__",
    "CssBuilderConfig",
    # errors
    "SelectorError",
    "DuplicateUniquePartError",
    "OutOfOrderPartError",
    "SelectorDocumentError",
    # selector
    "PartKind",
    "Selector",
    "SelectorBuilder",
    "combine",
    "css_selector_builder",
    # objects
    "Rectangle",
    "to_json",
    "from_json",
]
