"""Generic object <-> JSON helpers."""

from __future__ import annotations

import dataclasses
import json
from typing import Any, TypeVar

__all__ = ["from_json", "to_json"]

T = TypeVar("T")


def _default(obj: Any) -> Any:
    """Fallback encoder for values the json module cannot handle itself."""
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    if hasattr(obj, "__dict__"):
        return {k: v for k, v in vars(obj).items() if not k.startswith("_")}
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def to_json(obj: Any) -> str:
    """Return the compact JSON representation of ``obj``.

    Plain values are encoded directly; dataclasses and ordinary objects are
    encoded through their fields / public attributes.

    Example:
        >>> to_json([1, 2, 3])
        '[1,2,3]'
    """
    return json.dumps(obj, default=_default, separators=(",", ":"))


def from_json(cls: type[T], text: str) -> T:
    """Return an instance of ``cls`` populated from a JSON object.

    ``cls.__init__`` is not called: the parsed keys become instance
    attributes as-is, so any attributes set up only in ``__init__`` stay
    absent.

    Raises:
        TypeError: ``text`` does not decode to a JSON object.
    """
    data = json.loads(text)
    if not isinstance(data, dict):
        raise TypeError(f"Expected a JSON object, got {type(data).__name__}")
    instance = cls.__new__(cls)
    for key, value in data.items():
        # object.__setattr__ also works for frozen dataclasses
        object.__setattr__(instance, key, value)
    return instance
